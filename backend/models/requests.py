from pydantic import BaseModel, Field

from models.schemas.candidates import CandidateCompany, CandidatePerson
from models.schemas.profile import StructuredProfile


class ExtractTextRequest(BaseModel):
    text: str = Field(..., max_length=100000, description="Plain text CV content")


class RankCompaniesRequest(BaseModel):
    profile: StructuredProfile
    candidates: list[CandidateCompany] = Field(default_factory=list, max_length=500)


class RankPeopleRequest(BaseModel):
    profile: StructuredProfile
    candidates: list[CandidatePerson] = Field(default_factory=list, max_length=500)
