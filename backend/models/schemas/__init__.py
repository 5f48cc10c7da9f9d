"""Pydantic contracts passed between extraction, scoring and ranking."""

from models.schemas.candidates import CandidateCompany, CandidatePerson
from models.schemas.match_result import (
    CompanyMatch,
    CompanyRationale,
    PersonMatch,
    PersonRationale,
)
from models.schemas.profile import (
    ContactInfo,
    EducationEntry,
    ExperienceEntry,
    Skill,
    StructuredProfile,
)

__all__ = [
    "CandidateCompany",
    "CandidatePerson",
    "CompanyMatch",
    "CompanyRationale",
    "PersonMatch",
    "PersonRationale",
    "ContactInfo",
    "EducationEntry",
    "ExperienceEntry",
    "Skill",
    "StructuredProfile",
]
