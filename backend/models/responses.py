from pydantic import BaseModel

from models.schemas.match_result import CompanyMatch, PersonMatch
from models.schemas.profile import StructuredProfile


class ProfileResponse(BaseModel):
    profile: StructuredProfile
    source_format: str = "txt"
    text_length: int = 0


class CompanyRankingResponse(BaseModel):
    results: list[CompanyMatch] = []


class PersonRankingResponse(BaseModel):
    results: list[PersonMatch] = []
