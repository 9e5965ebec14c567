"""Pydantic schemas for Profile API."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProfileUpsert(BaseModel):
    """Schema for a full-record profile write.

    Omitted and empty values are stored as absent. ``email`` is accepted
    for symmetry with the response but the session email is what is stored.
    """

    email: str | None = Field(None, max_length=255)
    full_name: str | None = Field(None, max_length=200)
    date_of_birth: date | None = None
    user_role: str | None = Field(None, max_length=50)
    gender: str | None = Field(None, max_length=50)
    avatar_url: str | None = Field(None, max_length=500)
    updated_at: datetime | None = None

    @field_validator(
        "email", "full_name", "date_of_birth", "user_role", "gender", "avatar_url",
        mode="before",
    )
    @classmethod
    def empty_to_none(cls, v: object) -> object:
        if v == "":
            return None
        return v


class ProfileResponse(BaseModel):
    """Schema for Profile response."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "email": "ada@example.com",
                "full_name": "Ada Lovelace",
                "date_of_birth": "1815-12-10",
                "user_role": "Employed",
                "gender": "Female",
                "avatar_url": None,
                "updated_at": "2026-01-28T10:00:00+00:00",
            }
        },
    )

    id: UUID
    email: str
    full_name: str | None = None
    date_of_birth: date | None = None
    user_role: str | None = None
    gender: str | None = None
    avatar_url: str | None = None
    updated_at: datetime | None = None


class ProfileDetailResponse(BaseModel):
    """Schema for single Profile."""

    data: ProfileResponse
