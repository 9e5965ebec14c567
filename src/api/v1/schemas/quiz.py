"""Pydantic schemas for Quiz API."""

from pydantic import BaseModel, Field


class QuizRequest(BaseModel):
    """Prompt for a quiz generation; the configured default is used when omitted."""

    prompt: str | None = Field(None, min_length=1, max_length=4000)


class QuizResponse(BaseModel):
    """Outcome of one generation."""

    status: str
    result: str
