"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Authentication errors (401)
    UNAUTHORIZED = "UNAUTHORIZED"
    INVALID_TOKEN = "INVALID_TOKEN"

    # Validation errors (400)
    INVALID_INPUT = "INVALID_INPUT"

    # Request schema errors (422)
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Not found errors (404)
    PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"

    # Conflict errors (409)
    PROFILE_ALREADY_EXISTS = "PROFILE_ALREADY_EXISTS"

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


class InvalidInputError(AppException):
    """A profile field is outside its allowed bounds."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(
            error_code=ErrorCode.INVALID_INPUT,
            message=message,
            status_code=400,
            details={"field": field},
        )


class ProfileAlreadyExistsError(AppException):
    """The caller already owns a profile."""

    def __init__(self, owner: str) -> None:
        super().__init__(
            error_code=ErrorCode.PROFILE_ALREADY_EXISTS,
            message="Profile already exists",
            status_code=409,
            details={"owner": owner},
        )


class ProfileNotFoundError(AppException):
    """The caller owns no profile."""

    def __init__(self, owner: str) -> None:
        super().__init__(
            error_code=ErrorCode.PROFILE_NOT_FOUND,
            message="Profile not found",
            status_code=404,
            details={"owner": owner},
        )
