"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Authentication errors (401)
    UNAUTHORIZED = "UNAUTHORIZED"
    INVALID_TOKEN = "INVALID_TOKEN"

    # Authorization errors (403)
    FORBIDDEN = "FORBIDDEN"

    # Not found errors (404)
    PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"

    # Validation errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Conflict errors (409)
    PROFILE_CONFLICT = "PROFILE_CONFLICT"

    # Synchronization errors
    PROFILE_LOAD_FAILED = "PROFILE_LOAD_FAILED"
    PROFILE_COMMIT_FAILED = "PROFILE_COMMIT_FAILED"
    PROFILE_STORE_ERROR = "PROFILE_STORE_ERROR"

    # Quiz generation errors (502)
    QUIZ_GENERATION_FAILED = "QUIZ_GENERATION_FAILED"

    # Rate limiting (429)
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class AuthenticationError(AppException):
    """Authentication failed."""

    def __init__(
        self,
        message: str = "Authentication required",
        error_code: ErrorCode = ErrorCode.UNAUTHORIZED,
    ) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=401,
        )


class AuthorizationError(AppException):
    """Authorization failed."""

    def __init__(self, message: str = "Access denied") -> None:
        super().__init__(
            error_code=ErrorCode.FORBIDDEN,
            message=message,
            status_code=403,
        )


class ProfileNotFoundError(AppException):
    """Profile not found."""

    def __init__(self, profile_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.PROFILE_NOT_FOUND,
            message=f"Profile not found: {profile_id}",
            status_code=404,
            details={"profile_id": profile_id},
        )


class ProfileConflictError(AppException):
    """Profile write violated a store constraint (e.g. duplicate email)."""

    def __init__(self, message: str = "Profile conflicts with an existing record") -> None:
        super().__init__(
            error_code=ErrorCode.PROFILE_CONFLICT,
            message=message,
            status_code=409,
        )


class ProfileStoreError(AppException):
    """The remote profile store answered with an error."""

    def __init__(self, message: str, status_code: int = 502) -> None:
        super().__init__(
            error_code=ErrorCode.PROFILE_STORE_ERROR,
            message=message,
            status_code=status_code,
        )


class LoadFailure(AppException):
    """Reading a profile failed for a reason other than the record being absent."""

    def __init__(self, message: str = "Failed to load profile data") -> None:
        super().__init__(
            error_code=ErrorCode.PROFILE_LOAD_FAILED,
            message=message,
            status_code=502,
        )


class CommitFailure(AppException):
    """Persisting a profile draft failed."""

    def __init__(self, message: str = "Failed to save profile") -> None:
        super().__init__(
            error_code=ErrorCode.PROFILE_COMMIT_FAILED,
            message=message,
            status_code=400,
        )


class QuizGenerationError(AppException):
    """The text-generation backend could not produce a quiz."""

    def __init__(self, message: str) -> None:
        super().__init__(
            error_code=ErrorCode.QUIZ_GENERATION_FAILED,
            message=message,
            status_code=502,
        )
