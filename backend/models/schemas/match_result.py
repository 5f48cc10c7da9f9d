"""Scored candidates returned by the ranking pipeline."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from models.schemas.candidates import CandidateCompany, CandidatePerson

MatchTier = Literal["excellent", "good", "fair", "poor"]


class CompanyRationale(BaseModel):
    model_config = ConfigDict(frozen=True)

    matched_skills: tuple[str, ...] = ()  # first 5
    matched_industries: tuple[str, ...] = ()
    location_match: bool = False
    size_bucket: str | None = None
    explanation: str = ""


class PersonRationale(BaseModel):
    model_config = ConfigDict(frozen=True)

    shared_skills: tuple[str, ...] = ()  # first 5
    shared_interests: tuple[str, ...] = ()
    seniority_aligned: bool = False
    location_match: bool = False


class CompanyMatch(CandidateCompany):
    """A candidate company extended with its score against a profile."""

    match_score: float = Field(ge=0.0, le=1.0)
    match_tier: MatchTier = "poor"
    rationale: CompanyRationale = CompanyRationale()


class PersonMatch(CandidatePerson):
    """A candidate person extended with its score and an outreach starter."""

    match_score: float = Field(ge=0.0, le=1.0)
    match_tier: MatchTier = "poor"
    rationale: PersonRationale = PersonRationale()
    shared_skills: tuple[str, ...] = ()
    shared_interests: tuple[str, ...] = ()
    conversation_starter: str = ""
