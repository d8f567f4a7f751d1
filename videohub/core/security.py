# Standard library imports
import time
import uuid
from enum import Enum
from typing import Any, Dict, Optional, Tuple

# External package imports
import jwt
import bcrypt

# Local application imports
from .config import get_settings
from .exceptions import (
    ExpiredTokenError,
    InvalidSignatureError,
    MalformedTokenError,
    TokenConfigurationError,
)


class TokenKind(str, Enum):
    """The two kinds of signed session credentials"""
    ACCESS = "access"
    REFRESH = "refresh"


TOKEN_TYPE_CLAIM = "type"


def hash_password(plain_password: str) -> str:
    """
    Hash a plain password using bcrypt

    Args:
        plain_password: The plain text password to hash

    Returns:
        Hashed password string
    """
    salt = bcrypt.gensalt(rounds=12)
    hashed = bcrypt.hashpw(plain_password.encode("utf-8"), salt)
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password

    Args:
        plain_password: The plain text password to verify
        hashed_password: The hashed password to compare against

    Returns:
        True if passwords match, False otherwise (including a malformed hash)
    """
    if not hashed_password:
        return False
    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8"),
            hashed_password.encode("utf-8")
        )
    except ValueError:
        return False


def _signing_params(kind: TokenKind) -> Tuple[str, int]:
    """Return (secret, lifetime in seconds) for a token kind."""
    settings = get_settings()
    if kind is TokenKind.ACCESS:
        secret = settings.access_token_secret
        lifetime = settings.access_token_expire_minutes * 60
    else:
        secret = settings.refresh_token_secret
        lifetime = settings.refresh_token_expire_days * 24 * 60 * 60
    if not secret:
        raise TokenConfigurationError(f"No signing secret configured for {kind.value} tokens")
    return secret, lifetime


def _encode(kind: TokenKind, user_id: str, claims: Optional[Dict[str, Any]] = None) -> str:
    if not user_id:
        raise ValueError("user_id is required to issue a token")

    secret, lifetime = _signing_params(kind)
    issued_at = int(time.time())

    token_payload = {
        **(claims or {}),
        "sub": str(user_id),
        TOKEN_TYPE_CLAIM: kind.value,
        # Unique per token so two tokens issued within the same second differ
        "jti": uuid.uuid4().hex,
        "iat": issued_at,
        "exp": issued_at + lifetime,
    }

    try:
        return jwt.encode(
            token_payload,
            secret,
            algorithm=get_settings().jwt_algorithm
        )
    except (jwt.PyJWTError, NotImplementedError, TypeError, ValueError) as e:
        raise TokenConfigurationError(f"Unable to sign {kind.value} token: {e}") from e


def create_access_token(user_id: str, claims: Optional[Dict[str, Any]] = None) -> str:
    """
    Create a short-lived access token

    Args:
        user_id: Subject of the token
        claims: Extra identity claims (username, email, full_name)

    Returns:
        Encoded JWT string

    Raises:
        TokenConfigurationError: If the signing key or algorithm is unusable
    """
    return _encode(TokenKind.ACCESS, user_id, claims)


def create_refresh_token(user_id: str) -> str:
    """
    Create a long-lived refresh token carrying only the subject

    Raises:
        TokenConfigurationError: If the signing key or algorithm is unusable
    """
    return _encode(TokenKind.REFRESH, user_id)


def decode_token(token: str, expected_kind: TokenKind) -> Dict[str, Any]:
    """
    Decode and validate a JWT of the given kind

    Args:
        token: The JWT string to decode
        expected_kind: Kind the caller expects (access or refresh)

    Returns:
        Dictionary containing decoded token claims

    Raises:
        ExpiredTokenError: If the token is past its expiry
        InvalidSignatureError: If the signature does not match
        MalformedTokenError: If the token cannot be decoded, has no subject,
            or is of another kind
    """
    if not token:
        raise MalformedTokenError("Token is empty")

    secret, _ = _signing_params(expected_kind)
    try:
        decoded = jwt.decode(
            token,
            secret,
            algorithms=[get_settings().jwt_algorithm],
            options={"require": ["exp", "iat", "sub"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise ExpiredTokenError("Token has expired") from e
    except jwt.InvalidSignatureError as e:
        raise InvalidSignatureError("Token signature is invalid") from e
    except jwt.InvalidTokenError as e:
        raise MalformedTokenError(f"Invalid token: {str(e)}") from e

    if decoded.get(TOKEN_TYPE_CLAIM) != expected_kind.value:
        raise MalformedTokenError(f"Expected a {expected_kind.value} token")
    if not decoded.get("sub"):
        raise MalformedTokenError("Token has no subject")

    return decoded
