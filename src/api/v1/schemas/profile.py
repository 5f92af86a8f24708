"""Pydantic schemas for Profile API."""

from datetime import date, datetime
from uuid import UUID

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from domain.normalization import normalize_website


class ProfileUpsert(BaseModel):
    """Schema for creating or updating the caller's profile.

    Social links arrive as flat fields and are folded into ``social``.
    """

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "example": {
                "status": "Developer",
                "skills": "Python, FastAPI, PostgreSQL",
                "company": "Acme",
                "website": "acme.dev",
                "location": "Berlin",
                "bio": "Backend engineer",
                "github_username": "octocat",
                "twitter": "https://twitter.com/octocat",
            }
        },
    )

    status: str = Field(..., min_length=1, max_length=255)
    skills: str | list[str]
    company: str | None = Field(None, max_length=255)
    website: str | None = Field(None, max_length=500)
    location: str | None = Field(None, max_length=255)
    bio: str | None = None
    github_username: str | None = Field(None, max_length=100)
    youtube: str | None = None
    twitter: str | None = None
    facebook: str | None = None
    instagram: str | None = None
    linkedin: str | None = None

    @field_validator("skills")
    @classmethod
    def validate_skills(cls, v: str | list[str]) -> str | list[str]:
        if not v:
            raise ValueError("Skills is required")
        return v

    @field_validator("website")
    @classmethod
    def validate_website(cls, v: str | None) -> str | None:
        try:
            normalize_website(v)
        except ValueError as e:
            raise ValueError(f"Website is not a valid URL: {e}") from None
        return v


class ExperienceCreate(BaseModel):
    """Schema for adding an experience entry."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    title: str = Field(..., min_length=1, max_length=255)
    company: str = Field(..., min_length=1, max_length=255)
    location: str | None = Field(None, max_length=255)
    from_date: date = Field(..., alias="from")
    to_date: date | None = Field(None, alias="to")
    current: bool = False
    description: str | None = None


class EducationCreate(BaseModel):
    """Schema for adding an education entry."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    school: str = Field(..., min_length=1, max_length=255)
    degree: str = Field(..., min_length=1, max_length=255)
    field_of_study: str = Field(..., min_length=1, max_length=255)
    from_date: date = Field(..., alias="from")
    to_date: date | None = Field(None, alias="to")
    current: bool = False
    description: str | None = None


class ExperienceResponse(BaseModel):
    """Schema for an experience entry."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    company: str
    location: str | None = None
    from_date: date = Field(
        validation_alias=AliasChoices("from_date", "from"), serialization_alias="from"
    )
    to_date: date | None = Field(
        None, validation_alias=AliasChoices("to_date", "to"), serialization_alias="to"
    )
    current: bool = False
    description: str | None = None


class EducationResponse(BaseModel):
    """Schema for an education entry."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    school: str
    degree: str
    field_of_study: str
    from_date: date = Field(
        validation_alias=AliasChoices("from_date", "from"), serialization_alias="from"
    )
    to_date: date | None = Field(
        None, validation_alias=AliasChoices("to_date", "to"), serialization_alias="to"
    )
    current: bool = False
    description: str | None = None


class OwnerResponse(BaseModel):
    """Public display fields of the profile owner."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    avatar: str


class ProfileResponse(BaseModel):
    """Schema for Profile response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    user: OwnerResponse | None = None
    company: str | None = None
    website: str = ""
    location: str | None = None
    bio: str | None = None
    status: str
    github_username: str | None = None
    skills: list[str]
    social: dict[str, str]
    experience: list[ExperienceResponse]
    education: list[EducationResponse]
    created_at: datetime
    updated_at: datetime


class ProfileListResponse(BaseModel):
    """Schema for list of Profiles."""

    data: list[ProfileResponse]


class ProfileDetailResponse(BaseModel):
    """Schema for single Profile."""

    data: ProfileResponse
