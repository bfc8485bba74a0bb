"""Pydantic schemas for Profile API."""

from datetime import datetime
from uuid import UUID

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from domain.entities.account import AccountState


class ProfileUpsert(BaseModel):
    """Schema for creating or updating the caller's profile.

    ``skills`` is a comma-separated string. Omitted fields are left as they
    are when the profile already exists.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "Developer",
                "skills": "python, fastapi, postgres",
                "company": "Acme",
                "githubusername": "octocat",
                "twitter": "https://twitter.com/octocat",
            }
        },
    )

    status: str | None = Field(None, max_length=255)
    skills: str | None = Field(None, max_length=1000)
    company: str | None = Field(None, max_length=255)
    website: str | None = Field(None, max_length=500)
    location: str | None = Field(None, max_length=255)
    bio: str | None = Field(None, max_length=5000)
    github_username: str | None = Field(
        None,
        max_length=100,
        validation_alias=AliasChoices("github_username", "githubusername"),
    )
    youtube: str | None = Field(None, max_length=500)
    facebook: str | None = Field(None, max_length=500)
    twitter: str | None = Field(None, max_length=500)
    linkedin: str | None = Field(
        None,
        max_length=500,
        validation_alias=AliasChoices("linkedin", "linkdin"),
    )
    instagram: str | None = Field(None, max_length=500)


class ProfileUserResponse(BaseModel):
    """Display fields of the profile's owner."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    avatar: str | None = None


class ProfileResponse(BaseModel):
    """Schema for Profile response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    user: ProfileUserResponse | None = None
    status: str
    skills: list[str]
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    github_username: str | None = None
    social: dict[str, str] = Field(default_factory=dict)
    created_at: datetime
    updated_at: datetime


class ProfileDetailResponse(BaseModel):
    """Schema for single Profile."""

    data: ProfileResponse


class ProfileListResponse(BaseModel):
    """Schema for list of Profiles."""

    data: list[ProfileResponse]


class AccountStateResponse(BaseModel):
    """Schema for the caller's account state."""

    user_id: UUID
    state: AccountState


class AccountDeletionResponse(BaseModel):
    """Schema for the outcome of account deletion."""

    model_config = ConfigDict(from_attributes=True)

    user_id: UUID
    profile_deleted: bool
    user_deleted: bool
    state: AccountState
