"""Pydantic schemas for Profile API.

Username length and skill count are deliberately unconstrained here: those
bounds are enforced by the profile service and answer 400, not 422. Only the
per-field encoding limits are checked at the request boundary.
"""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

Skill = Annotated[str, Field(min_length=1, max_length=50)]


class ProfileDetails(BaseModel):
    """Fields shared by create and update requests."""

    skills: list[Skill]
    location: str | None = Field(None, max_length=100)
    bio: str | None = Field(None, max_length=500)


class ProfileCreate(ProfileDetails):
    """Schema for creating the caller's Profile."""

    username: str


class ProfileUpdate(ProfileDetails):
    """Schema for replacing skills, location and bio of the caller's Profile."""


class ProfileResponse(BaseModel):
    """Schema for Profile response."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "owner": "ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM",
                "username": "testuser",
                "skills": ["TypeScript", "Blockchain"],
                "location": "New York",
                "bio": "Software Developer",
                "created_at": "2026-01-28T10:00:00",
                "updated_at": "2026-01-28T10:00:00",
            }
        },
    )

    owner: str
    username: str
    skills: list[str]
    location: str | None = None
    bio: str | None = None
    created_at: datetime
    updated_at: datetime


class ProfileDetailResponse(BaseModel):
    """Schema for single Profile."""

    data: ProfileResponse


class ProfileLookupResponse(BaseModel):
    """Schema for a profile lookup; ``data`` is null when no profile exists."""

    data: ProfileResponse | None = None
