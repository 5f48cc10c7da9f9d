"""Structured professional profile extracted from a CV."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ContactInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str | None = None
    email: str | None = None
    phone: str | None = None
    profile_url: str | None = None
    location: str | None = None


class Skill(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    category: Literal["technical", "soft"]


class ExperienceEntry(BaseModel):
    """A single experience line detected by its year tokens."""
    model_config = ConfigDict(frozen=True)

    title: str = "Position"
    company: str | None = "Company"
    location: str | None = None
    start_period: str | None = None
    end_period: str | None = None
    duration_months: int = 0
    description: str = ""


class EducationEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    degree: str
    institution: str = "University"
    graduation_year: int | None = None


class StructuredProfile(BaseModel):
    """Output of the field extractor.

    Sequences are tuples so a profile cannot be changed after extraction.
    ``skills`` follows vocabulary order and ``industries`` holds unique names
    in vocabulary order.
    """
    model_config = ConfigDict(frozen=True)

    contact: ContactInfo = ContactInfo()
    summary: str = ""
    skills: tuple[Skill, ...] = ()
    experience: tuple[ExperienceEntry, ...] = ()
    education: tuple[EducationEntry, ...] = ()
    industries: tuple[str, ...] = ()
    career_goal: str = ""
    confidence_score: float = Field(default=0.0, ge=0.0, le=1.0)
