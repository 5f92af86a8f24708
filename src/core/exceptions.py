"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Authentication errors (401)
    UNAUTHORIZED = "UNAUTHORIZED"
    INVALID_TOKEN = "INVALID_TOKEN"
    TOKEN_EXPIRED = "TOKEN_EXPIRED"

    # Not found errors (404)
    NO_PROFILE = "NO_PROFILE"
    PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"
    GITHUB_PROFILE_NOT_FOUND = "GITHUB_PROFILE_NOT_FOUND"

    # Validation errors (400/422)
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Conflict errors (409)
    DUPLICATE_PROFILE = "DUPLICATE_PROFILE"

    # Rate limiting (429)
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"
    DATABASE_ERROR = "DATABASE_ERROR"


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


class NoProfileError(AppException):
    """The caller's account has no profile yet."""

    def __init__(self, user_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.NO_PROFILE,
            message="There is no profile for this user",
            status_code=404,
            details={"user_id": user_id},
        )


class ProfileNotFoundError(AppException):
    """No profile for the requested account (or the id is malformed)."""

    def __init__(self, user_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.PROFILE_NOT_FOUND,
            message="Profile not found",
            status_code=404,
            details={"user_id": user_id},
        )


class DuplicateProfileError(AppException):
    """A profile already exists for the account."""

    def __init__(self, user_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.DUPLICATE_PROFILE,
            message="A profile already exists for this user",
            status_code=409,
            details={"user_id": user_id},
        )


class GitHubProfileNotFoundError(AppException):
    """GitHub did not return a repository list for the username."""

    def __init__(self, username: str) -> None:
        super().__init__(
            error_code=ErrorCode.GITHUB_PROFILE_NOT_FOUND,
            message="No Github profile found",
            status_code=404,
            details={"username": username},
        )


class ExternalServiceError(AppException):
    """An outbound call produced no usable response."""

    def __init__(self, service: str) -> None:
        super().__init__(
            error_code=ErrorCode.INTERNAL_ERROR,
            message="Server Error",
            status_code=500,
            details={"service": service},
        )
