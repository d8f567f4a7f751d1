from .config import Settings, get_settings
from .security import (
    TokenKind,
    hash_password,
    verify_password,
    create_access_token,
    create_refresh_token,
    decode_token,
)

__all__ = [
    "Settings",
    "get_settings",
    "TokenKind",
    "hash_password",
    "verify_password",
    "create_access_token",
    "create_refresh_token",
    "decode_token",
]
