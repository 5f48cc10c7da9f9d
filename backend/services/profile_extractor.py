"""Heuristic CV field extraction.

Every extractor below is independent: each one reads the raw text and nothing
else, so they can run in any order. None of them raise on sparse or malformed
text; missing fields come back as None, empty tuples or placeholders.
"""

import logging
import re

from models.schemas.profile import (
    ContactInfo,
    EducationEntry,
    ExperienceEntry,
    Skill,
    StructuredProfile,
)
from services.vocabulary import DEFAULT_VOCABULARY, SOFT, TECHNICAL, Vocabulary

logger = logging.getLogger(__name__)

# Contact info patterns
EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")
PHONE_RE = re.compile(r"(?:\+?\d{1,3}[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}")
PROFILE_URL_RE = re.compile(r"linkedin\.com/in/[A-Za-z0-9-]+", re.IGNORECASE)
LOCATION_RE = re.compile(
    r"^[ \t]*(?:(?:location|address)[ \t]*[:\-]|based in)[ \t]*(\S.*?)[ \t]*$",
    re.IGNORECASE | re.MULTILINE,
)

YEAR_RE = re.compile(r"\b(?:19|20)\d{2}\b")

# Confidence checklist signals
_CONF_PHONE_RE = re.compile(r"\d{3}[-.\s]?\d{3}[-.\s]?\d{4}")
_CONF_PROFILE_RE = re.compile(r"linkedin\.com", re.IGNORECASE)
_CONF_YEAR_RE = re.compile(r"(?:19|20)\d{2}")
_CONF_DEGREE_RE = re.compile(r"bachelor|master|phd", re.IGNORECASE)

MAX_EXPERIENCE_ENTRIES = 5
MAX_EDUCATION_ENTRIES = 3
SUMMARY_LINES = 3


def _lines(text: str) -> list[str]:
    return text.split("\n")


def _join_lines(lines: list[str]) -> str:
    return " ".join(line.strip() for line in lines if line.strip())


def extract_contact_info(text: str) -> ContactInfo:
    """Extract name, email, phone, profile URL and location."""
    email_match = EMAIL_RE.search(text)
    phone_match = PHONE_RE.search(text)
    profile_match = PROFILE_URL_RE.search(text)
    location_match = LOCATION_RE.search(text)

    non_empty = [line.strip() for line in _lines(text) if line.strip()]

    return ContactInfo(
        name=non_empty[0] if non_empty else None,
        email=email_match.group() if email_match else None,
        phone=phone_match.group().strip() if phone_match else None,
        profile_url=f"https://{profile_match.group()}" if profile_match else None,
        location=location_match.group(1) if location_match else None,
    )


def extract_summary(text: str, vocab: Vocabulary = DEFAULT_VOCABULARY) -> str:
    """Return the lines following the first summary-like heading.

    Falls back to the lines right after the name line.
    """
    lines = _lines(text)
    for i, line in enumerate(lines):
        lower = line.lower()
        if any(keyword in lower for keyword in vocab.summary_keywords):
            return _join_lines(lines[i + 1:i + 1 + SUMMARY_LINES])

    return _join_lines(lines[1:1 + SUMMARY_LINES])


def extract_skills(text: str, vocab: Vocabulary = DEFAULT_VOCABULARY) -> tuple[Skill, ...]:
    """Match the text against the technical and soft skill vocabularies.

    Emission order follows the vocabularies, technical first.
    """
    text_lower = text.lower()
    found: list[Skill] = []
    seen: set[str] = set()

    for category, skills in ((TECHNICAL, vocab.technical_skills), (SOFT, vocab.soft_skills)):
        for skill in skills:
            key = skill.lower()
            if key in text_lower and key not in seen:
                seen.add(key)
                found.append(Skill(name=skill, category=category))

    return tuple(found)


def extract_experience(text: str) -> tuple[ExperienceEntry, ...]:
    """Treat each line holding a 19xx/20xx year as an experience entry."""
    lines = _lines(text)
    entries: list[ExperienceEntry] = []

    for i, line in enumerate(lines):
        years = YEAR_RE.findall(line)
        if not years:
            continue

        start, end = min(years), max(years)
        title = line[:YEAR_RE.search(line).start()].strip()
        description = lines[i + 1].strip() if i + 1 < len(lines) else ""

        entries.append(ExperienceEntry(
            title=title or "Position",
            start_period=start,
            end_period=end,
            duration_months=(int(end) - int(start)) * 12,
            description=description,
        ))
        if len(entries) == MAX_EXPERIENCE_ENTRIES:
            break

    return tuple(entries)


def extract_education(text: str, vocab: Vocabulary = DEFAULT_VOCABULARY) -> tuple[EducationEntry, ...]:
    """Collect lines naming a degree, with the next line as institution."""
    lines = _lines(text)
    entries: list[EducationEntry] = []

    for i, line in enumerate(lines):
        lower = line.lower()
        if not any(keyword in lower for keyword in vocab.degree_keywords):
            continue

        year_match = YEAR_RE.search(line)
        institution = lines[i + 1].strip() if i + 1 < len(lines) else ""

        entries.append(EducationEntry(
            degree=line.strip(),
            institution=institution or "University",
            graduation_year=int(year_match.group()) if year_match else None,
        ))
        if len(entries) == MAX_EDUCATION_ENTRIES:
            break

    return tuple(entries)


def extract_industries(text: str, vocab: Vocabulary = DEFAULT_VOCABULARY) -> tuple[str, ...]:
    text_lower = text.lower()
    return tuple(dict.fromkeys(
        industry for industry in vocab.industries if industry.lower() in text_lower
    ))


def extract_career_goal(text: str, vocab: Vocabulary = DEFAULT_VOCABULARY) -> str:
    for line in _lines(text):
        lower = line.lower()
        if any(keyword in lower for keyword in vocab.goal_keywords):
            return line.strip()
    return vocab.goal_fallback


def compute_confidence_score(text: str) -> float:
    """Score 0.2-1.0 from five presence checks plus a 0.2 baseline."""
    checks = [
        "@" in text,
        bool(_CONF_PHONE_RE.search(text)),
        bool(_CONF_PROFILE_RE.search(text)),
        bool(_CONF_YEAR_RE.search(text)),
        bool(_CONF_DEGREE_RE.search(text)),
    ]
    return min(sum(checks) / len(checks) + 0.2, 1.0)


def extract_profile(text: str, vocab: Vocabulary = DEFAULT_VOCABULARY) -> StructuredProfile:
    """Run every field extractor over the text and assemble the profile."""
    profile = StructuredProfile(
        contact=extract_contact_info(text),
        summary=extract_summary(text, vocab),
        skills=extract_skills(text, vocab),
        experience=extract_experience(text),
        education=extract_education(text, vocab),
        industries=extract_industries(text, vocab),
        career_goal=extract_career_goal(text, vocab),
        confidence_score=compute_confidence_score(text),
    )
    logger.debug(
        "Extracted profile: %d skills, %d experience, %d education, confidence %.2f",
        len(profile.skills),
        len(profile.experience),
        len(profile.education),
        profile.confidence_score,
    )
    return profile
