"""
Error taxonomy for the account service.

ApiError subclasses carry the HTTP status the API layer answers with.
TokenError subclasses are raised by the token helpers in core.security and
are translated by the use cases before they reach a caller.
"""

# Standard library imports
from typing import Any, Dict, List, Optional


# -----------------------------------------------------------------------------
# API errors
# -----------------------------------------------------------------------------


class ApiError(Exception):
    """Base exception for every error surfaced to an API caller."""

    status_code: int = 500
    default_message: str = "Something went wrong"

    def __init__(
        self,
        message: Optional[str] = None,
        errors: Optional[List[Dict[str, Any]]] = None,
    ):
        self.message = message or self.default_message
        super().__init__(self.message)
        self.errors = errors or []


class ValidationError(ApiError):
    """Caller input is missing or malformed."""
    status_code = 400
    default_message = "Invalid request"


class ConflictError(ApiError):
    """A uniqueness constraint would be violated."""
    status_code = 409
    default_message = "Resource already exists"


class NotFoundError(ApiError):
    status_code = 404
    default_message = "Resource not found"


class AuthenticationError(ApiError):
    """Bad credentials, or a bad, stale or expired token."""
    status_code = 401
    default_message = "Unauthorized request"


class UploadError(ApiError):
    """The media host did not return a usable upload."""
    status_code = 400
    default_message = "File upload failed"


class InternalError(ApiError):
    status_code = 500
    default_message = "Internal server error"


# -----------------------------------------------------------------------------
# Token errors
# -----------------------------------------------------------------------------


class TokenError(Exception):
    """Base exception for token issuing and verification failures."""
    pass


class InvalidSignatureError(TokenError):
    pass


class ExpiredTokenError(TokenError):
    pass


class MalformedTokenError(TokenError):
    """Token cannot be decoded, lacks a subject, or is of the wrong kind."""
    pass


class TokenConfigurationError(TokenError):
    """Signing key or algorithm is unusable."""
    pass
