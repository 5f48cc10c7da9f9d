from services.profile_extractor import (
    compute_confidence_score,
    extract_career_goal,
    extract_contact_info,
    extract_education,
    extract_experience,
    extract_industries,
    extract_profile,
    extract_skills,
    extract_summary,
)
from services.vocabulary import DEFAULT_VOCABULARY, Vocabulary


# --- Contact info ---


def test_extract_contact_info(sample_cv):
    contact = extract_contact_info(sample_cv)
    assert contact.name == "Jane Smith"
    assert contact.email == "jane.smith@email.com"
    assert contact.phone == "+1 555-123-4567"
    assert contact.profile_url == "https://linkedin.com/in/janesmith"
    assert contact.location == "Austin, TX"


def test_extract_contact_info_name_skips_blank_lines():
    contact = extract_contact_info("\n\n   \nJohn Doe\nEngineer")
    assert contact.name == "John Doe"


def test_extract_contact_info_missing_fields_are_none():
    contact = extract_contact_info("John Doe\nNo contact details here")
    assert contact.email is None
    assert contact.phone is None
    assert contact.profile_url is None
    assert contact.location is None


def test_extract_contact_info_phone_formats():
    assert extract_contact_info("Call (555) 123-4567").phone == "(555) 123-4567"
    assert extract_contact_info("Call 555.123.4567").phone == "555.123.4567"


def test_extract_contact_info_empty_text():
    contact = extract_contact_info("")
    assert contact.name is None


# --- Summary ---


def test_extract_summary_after_heading(sample_cv):
    summary = extract_summary(sample_cv)
    assert summary.startswith("Backend engineer building Python services")
    assert "Strong communication" in summary


def test_extract_summary_fallback_to_lines_after_name():
    text = "John Doe\nPython developer\nLoves clean code\nLives in Berlin\nMore text"
    assert extract_summary(text) == "Python developer Loves clean code Lives in Berlin"


# --- Skills ---


def test_extract_skills_vocabulary_order():
    skills = extract_skills("Docker, Python and leadership. Also JavaScript.")
    names = [s.name for s in skills]
    assert names.index("javascript") < names.index("python") < names.index("docker")
    assert names[-1] == "leadership"


def test_extract_skills_categories():
    skills = {s.name: s.category for s in extract_skills("Python and teamwork")}
    assert skills["python"] == "technical"
    assert skills["teamwork"] == "soft"


def test_extract_skills_no_duplicates():
    vocab = Vocabulary(
        technical_skills=("python", "Python"),
        soft_skills=("python",),
        industries=(),
        degree_keywords=(),
        summary_keywords=(),
        goal_keywords=(),
        senior_indicators=(),
        preferred_company_sizes=(),
    )
    skills = extract_skills("python", vocab)
    assert len(skills) == 1


# --- Experience ---


def test_extract_experience_entries(sample_cv):
    entries = extract_experience(sample_cv)
    senior = next(e for e in entries if e.title == "Senior Software Engineer")
    assert senior.start_period == "2021"
    assert senior.end_period == "2024"
    assert senior.duration_months == 36
    assert senior.description == "Built payment APIs with Python, Docker and AWS."
    assert senior.company == "Company"


def test_extract_experience_placeholder_title():
    entries = extract_experience("2019 - 2020\nDid things")
    assert entries[0].title == "Position"
    assert entries[0].duration_months == 12


def test_extract_experience_uses_earliest_and_latest_year():
    entries = extract_experience("Engineer 2020 2015 2018")
    assert entries[0].start_period == "2015"
    assert entries[0].end_period == "2020"
    assert entries[0].duration_months == 60


def test_extract_experience_capped_at_five():
    text = "\n".join(f"Role {i} 20{10 + i}" for i in range(8))
    assert len(extract_experience(text)) == 5


def test_extract_experience_last_line_has_empty_description():
    entries = extract_experience("Engineer 2020")
    assert entries[0].description == ""


# --- Education ---


def test_extract_education(sample_cv):
    entries = extract_education(sample_cv)
    assert entries[0].degree == "Bachelor of Science in Computer Science 2018"
    assert entries[0].institution == "State University"
    assert entries[0].graduation_year == 2018


def test_extract_education_placeholder_institution():
    entries = extract_education("MBA, 2015")
    assert entries[0].institution == "University"
    assert entries[0].graduation_year == 2015


def test_extract_education_capped_at_three():
    text = "\n".join(["Master of Arts", "PhD Physics", "MBA", "B.S. Math"] * 2)
    assert len(extract_education(text)) == 3


# --- Industries and goals ---


def test_extract_industries_keeps_all_matches(sample_cv):
    assert extract_industries(sample_cv) == ("Technology", "Education", "SaaS", "Fintech")


def test_extract_career_goal(sample_cv):
    assert extract_career_goal(sample_cv) == "Seeking a senior platform role in Technology."


def test_extract_career_goal_fallback():
    assert extract_career_goal("John Doe\nEngineer") == DEFAULT_VOCABULARY.goal_fallback


# --- Confidence ---


def test_confidence_score_all_signals():
    text = "a@b.com 555-123-4567 linkedin.com/in/x 2020 Bachelor"
    assert compute_confidence_score(text) == 1.0


def test_confidence_score_no_signals():
    assert compute_confidence_score("Nothing useful here") == 0.2


def test_confidence_score_partial():
    assert abs(compute_confidence_score("email me @ home, graduated 2019") - 0.6) < 1e-9


# --- Full profile ---


def test_extract_profile_idempotent(sample_cv):
    assert extract_profile(sample_cv) == extract_profile(sample_cv)


def test_extract_profile_empty_text():
    profile = extract_profile("")
    assert profile.contact.name is None
    assert profile.skills == ()
    assert profile.experience == ()
    assert profile.education == ()
    assert profile.industries == ()
    assert profile.career_goal == DEFAULT_VOCABULARY.goal_fallback
    assert profile.confidence_score == 0.2


def test_extract_profile_sample(sample_cv):
    profile = extract_profile(sample_cv)
    names = {s.name for s in profile.skills}
    assert {"python", "docker", "aws", "postgresql", "communication", "leadership"} <= names
    assert profile.confidence_score == 1.0
