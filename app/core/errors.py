"""
API error types.

Every error is an :class:`HTTPException` so services can raise them
directly; the handlers in :mod:`app.main` render them as
``{"message": ..., "errors": [...]}``.
"""

from typing import Any, Optional

from fastapi import HTTPException, status


class PortfolioError(HTTPException):
    """Base class carrying a default status code and message."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None, errors: Optional[list[Any]] = None,
                 headers: Optional[dict[str, str]] = None):
        super().__init__(status_code=type(self).status_code, detail=message or self.default_message,
                         headers=headers)
        self.errors = errors


class ValidationError(PortfolioError):
    """Missing or malformed required field."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid data"


class Unauthorized(PortfolioError):
    """No valid session on a gated route."""
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Authentication required"


class InvalidCredentials(Unauthorized):
    default_message = "Invalid email or password"


class NotFound(PortfolioError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class UploadError(PortfolioError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid upload"


class FileTooLarge(UploadError):
    status_code = status.HTTP_413_REQUEST_ENTITY_TOO_LARGE
    default_message = "File too large"


class InternalError(PortfolioError):
    """Store or filesystem failure; the message never carries internals."""
