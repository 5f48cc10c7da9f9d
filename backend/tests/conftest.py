"""Shared test fixtures."""

import pytest

from models.schemas.profile import ExperienceEntry, Skill, StructuredProfile

SAMPLE_CV = """Jane Smith
jane.smith@email.com | +1 555-123-4567
linkedin.com/in/janesmith
Location: Austin, TX

Professional Summary
Backend engineer building Python services for Fintech and SaaS products.
Strong communication and leadership across distributed teams.

Seeking a senior platform role in Technology.

Experience
Senior Software Engineer 2021 - 2024
Built payment APIs with Python, Docker and AWS.
Software Engineer 2018 - 2021
Maintained PostgreSQL data pipelines.

Education
Bachelor of Science in Computer Science 2018
State University
"""


@pytest.fixture
def sample_cv() -> str:
    return SAMPLE_CV


@pytest.fixture
def make_profile():
    """Build a StructuredProfile from skill names, industries and experience count."""

    def _make(skills=(), industries=(), experience_count=0, location=None):
        return StructuredProfile(
            contact={"name": "Jane Smith", "location": location},
            skills=tuple(Skill(name=s, category="technical") for s in skills),
            experience=tuple(
                ExperienceEntry(title=f"Role {i}", start_period="2020", end_period="2021", duration_months=12)
                for i in range(experience_count)
            ),
            industries=tuple(industries),
            confidence_score=0.8,
        )

    return _make
