"""Error envelope shared by the profile and quiz endpoints."""

from typing import Any

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Body of every non-2xx answer.

    ``HttpProfileStore`` relies on this shape: ``error_code`` tells a
    missing profile apart from any other 404, and ``message`` becomes the
    ``CommitFailure`` text shown to the user.
    """

    error_code: str = Field(..., examples=["PROFILE_NOT_FOUND"])
    message: str = Field(..., examples=["Profile not found: 6f1c2e4a-..."])
    details: Any | None = None
