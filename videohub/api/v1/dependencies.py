# Standard library imports
import logging
from typing import Optional

# External package imports
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

# Local application imports
from ...core.exceptions import (
    AuthenticationError,
    ExpiredTokenError,
    InternalError,
    TokenConfigurationError,
    TokenError,
)
from ...core.security import TokenKind, decode_token
from ...domain.models.identity import AuthenticatedIdentity
from .session_cookies import ACCESS_TOKEN_COOKIE

logger = logging.getLogger(__name__)


security_scheme = HTTPBearer(auto_error=False)


def _extract_access_token(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials],
) -> Optional[str]:
    """Access token from the session cookie, falling back to a Bearer header"""
    token = request.cookies.get(ACCESS_TOKEN_COOKIE)
    if token:
        return token
    if credentials is not None and credentials.credentials:
        return credentials.credentials
    return None


async def get_current_identity(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_scheme),
) -> AuthenticatedIdentity:
    """
    FastAPI dependency resolving the caller from their access token

    Verification is signature and expiry only; the store is not consulted.

    Raises:
        AuthenticationError: If the token is missing, invalid or expired
        InternalError: If the access token secret is unusable
    """
    token = _extract_access_token(request, credentials)
    if not token:
        raise AuthenticationError("Unauthorized request")

    try:
        payload = decode_token(token, TokenKind.ACCESS)
    except TokenConfigurationError as exception:
        logger.error(f"Access token verification misconfigured: {exception}")
        raise InternalError() from exception
    except ExpiredTokenError as exception:
        raise AuthenticationError("Access token is expired") from exception
    except TokenError as exception:
        raise AuthenticationError("Invalid access token") from exception

    return AuthenticatedIdentity(user_id=payload["sub"])


async def get_optional_identity(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_scheme),
) -> Optional[AuthenticatedIdentity]:
    """Like get_current_identity, but anonymous callers resolve to None"""
    token = _extract_access_token(request, credentials)
    if not token:
        return None
    try:
        payload = decode_token(token, TokenKind.ACCESS)
    except TokenConfigurationError as exception:
        logger.error(f"Access token verification misconfigured: {exception}")
        raise InternalError() from exception
    except TokenError:
        return None
    return AuthenticatedIdentity(user_id=payload["sub"])
