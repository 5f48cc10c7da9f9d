"""Score candidate companies and people against a structured profile.

Company score:
    industry 0.4 + skills 0.3 + location 0.2 (0.1 partial) + size 0.1

Person score:
    shared skills 0.4 + shared interests 0.3 + seniority 0.2 (0.1 misaligned)
    + location 0.1

Missing candidate fields contribute nothing to their term.
"""

import logging
import re

from models.schemas.candidates import CandidateCompany, CandidatePerson
from models.schemas.match_result import (
    CompanyMatch,
    CompanyRationale,
    MatchTier,
    PersonMatch,
    PersonRationale,
)
from models.schemas.profile import StructuredProfile
from services.vocabulary import DEFAULT_VOCABULARY, Vocabulary

logger = logging.getLogger(__name__)

# Company weights
W_INDUSTRY = 0.4
W_COMPANY_SKILLS = 0.3
W_LOCATION = 0.2
W_LOCATION_PARTIAL = 0.1
W_SIZE = 0.1

# Person weights
W_SHARED_SKILLS = 0.4
W_SHARED_INTERESTS = 0.3
W_SENIORITY = 0.2
W_SENIORITY_PARTIAL = 0.1
W_PERSON_LOCATION = 0.1

SENIORITY_THRESHOLD = 5  # experience entries
RATIONALE_SKILL_LIMIT = 5

# (threshold, tier), highest first
TIER_THRESHOLDS: tuple[tuple[float, MatchTier], ...] = (
    (0.8, "excellent"),
    (0.6, "good"),
    (0.4, "fair"),
)


def clamp_score(score: float) -> float:
    """Clamp to [0, 1] and round to two decimals."""
    return round(min(max(score, 0.0), 1.0), 2)


def match_tier(score: float) -> MatchTier:
    for threshold, tier in TIER_THRESHOLDS:
        if score >= threshold:
            return tier
    return "poor"


def _location_contains(candidate_location: str | None, profile_location: str | None) -> bool:
    return bool(profile_location and candidate_location and profile_location in candidate_location)


def _unique(items: list[str]) -> list[str]:
    """Drop case-insensitive duplicates, keeping the first spelling."""
    seen: dict[str, str] = {}
    for item in items:
        seen.setdefault(item.lower(), item)
    return list(seen.values())


# ---------------------------------------------------------------------------
# Companies
# ---------------------------------------------------------------------------


def _matched_company_skills(company: CandidateCompany, profile: StructuredProfile) -> list[str]:
    company_text = f"{company.name or ''} {company.description or ''}".lower()
    return _unique([s.name for s in profile.skills if s.name.lower() in company_text])


def _matched_industries(company: CandidateCompany, profile: StructuredProfile) -> list[str]:
    industry = (company.industry or "").lower()
    if not industry:
        return []
    return [ind for ind in profile.industries if ind.lower() in industry]


def score_company(
    company: CandidateCompany,
    profile: StructuredProfile,
    vocab: Vocabulary = DEFAULT_VOCABULARY,
) -> CompanyMatch:
    """Score one company and explain which signals contributed."""
    matched_skills = _matched_company_skills(company, profile)
    matched_industries = _matched_industries(company, profile)
    location_match = _location_contains(company.location, profile.contact.location)

    score = 0.0
    if matched_industries:
        score += W_INDUSTRY

    skills_ratio = min(len(matched_skills) / max(len(profile.skills), 1), 1.0)
    score += skills_ratio * W_COMPANY_SKILLS

    if location_match:
        score += W_LOCATION
    elif company.location:
        score += W_LOCATION_PARTIAL

    size = company.size_bucket or ""
    if any(bucket in size for bucket in vocab.preferred_company_sizes):
        score += W_SIZE

    explanation = f"Matches {len(matched_skills)} of your key skills"
    if matched_industries:
        explanation += " and operates in your target industry."
    else:
        explanation += "."

    match_score = clamp_score(score)
    return CompanyMatch(
        **company.model_dump(),
        match_score=match_score,
        match_tier=match_tier(match_score),
        rationale=CompanyRationale(
            matched_skills=tuple(matched_skills[:RATIONALE_SKILL_LIMIT]),
            matched_industries=tuple(matched_industries),
            location_match=location_match,
            size_bucket=company.size_bucket,
            explanation=explanation,
        ),
    )


# ---------------------------------------------------------------------------
# People
# ---------------------------------------------------------------------------


def shared_skills(person: CandidatePerson, profile: StructuredProfile) -> list[str]:
    """Profile skill names the person also lists, in profile order."""
    person_skills = {s.lower() for s in person.skills}
    return _unique([s.name for s in profile.skills if s.name.lower() in person_skills])


def shared_interests(person: CandidatePerson, profile: StructuredProfile) -> list[str]:
    """Profile industries mentioned in the person's headline or company."""
    person_text = f"{person.headline or ''} {person.current_company or ''}".lower()
    return [ind for ind in profile.industries if ind.lower() in person_text]


def _is_senior_title(title: str | None, vocab: Vocabulary) -> bool:
    if not title:
        return False
    pattern = "|".join(re.escape(word) for word in vocab.senior_indicators)
    return bool(re.search(pattern, title, re.IGNORECASE))


def generate_conversation_starter(
    person: CandidatePerson,
    skills: list[str],
    interests: list[str],
) -> str:
    """Pick the outreach template that fits what the profile shares with the person."""
    first_name = person.name.split()[0] if person.name and person.name.split() else "there"
    role = person.current_title or "your current role"
    company = person.current_company or "your company"

    if skills and interests:
        return (
            f"Hi {first_name}, I noticed we both have experience with {skills[0]} "
            f"and share an interest in {interests[0]}. I'm currently exploring "
            f"opportunities in this space and would love to hear about your journey "
            f"to {role} at {company}."
        )
    if skills:
        return (
            f"Hi {first_name}, I saw that we both work with {skills[0]}. I'd love to "
            f"learn more about how you use it in your role as {role} at {company}."
        )
    if interests:
        return (
            f"Hi {first_name}, I'm interested in {interests[0]} and noticed you're "
            f"working in this field. Would you be open to a brief chat about your "
            f"experience as {role} at {company}?"
        )
    return (
        f"Hi {first_name}, I came across your profile and am impressed by your work "
        f"as {role} at {company}. I'd love to connect and learn more about your "
        f"career path."
    )


def score_person(
    person: CandidatePerson,
    profile: StructuredProfile,
    vocab: Vocabulary = DEFAULT_VOCABULARY,
) -> PersonMatch:
    """Score one person and attach shared attributes and a conversation starter."""
    skills = shared_skills(person, profile)
    interests = shared_interests(person, profile)

    score = 0.0
    skills_ratio = min(len(skills) / max(len(profile.skills), 1), 1.0)
    score += skills_ratio * W_SHARED_SKILLS

    if interests:
        score += W_SHARED_INTERESTS

    is_senior = _is_senior_title(person.current_title, vocab)
    experienced = len(profile.experience) >= SENIORITY_THRESHOLD
    seniority_aligned = is_senior == experienced
    score += W_SENIORITY if seniority_aligned else W_SENIORITY_PARTIAL

    location_match = _location_contains(person.location, profile.contact.location)
    if location_match:
        score += W_PERSON_LOCATION

    match_score = clamp_score(score)
    top_skills = tuple(skills[:RATIONALE_SKILL_LIMIT])
    return PersonMatch(
        **person.model_dump(),
        match_score=match_score,
        match_tier=match_tier(match_score),
        rationale=PersonRationale(
            shared_skills=top_skills,
            shared_interests=tuple(interests),
            seniority_aligned=seniority_aligned,
            location_match=location_match,
        ),
        shared_skills=top_skills,
        shared_interests=tuple(interests),
        conversation_starter=generate_conversation_starter(person, skills, interests),
    )
