"""Common Pydantic schemas shared across the API."""

from typing import Any

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standardized error response.

    ``error_code`` is the symbolic name; the HTTP status carries the numeric
    code (400, 404, 409, ...).
    """

    error_code: str
    message: str
    details: Any | None = None
