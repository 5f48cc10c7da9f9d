"""Candidate records handed over by the directory lookup collaborator."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class CandidateCompany(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str | None = None
    directory_url: str | None = Field(
        default=None, validation_alias=AliasChoices("directory_url", "linkedin_url")
    )
    industry: str | None = None
    size_bucket: str | None = Field(
        default=None, validation_alias=AliasChoices("size_bucket", "size")
    )
    location: str | None = None
    description: str | None = None


class CandidatePerson(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str | None = None
    directory_url: str | None = Field(
        default=None, validation_alias=AliasChoices("directory_url", "linkedin_url")
    )
    current_title: str | None = Field(
        default=None, validation_alias=AliasChoices("current_title", "current_role")
    )
    current_company: str | None = None
    location: str | None = None
    headline: str | None = None
    skills: frozenset[str] = frozenset()

    @field_validator("skills", mode="before")
    @classmethod
    def _null_skills(cls, value):
        # Directory records may send "skills": null
        return frozenset() if value is None else value
