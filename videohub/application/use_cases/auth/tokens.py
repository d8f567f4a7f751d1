# Standard library imports
import logging
from typing import Tuple

# Local application imports
from ....domain.models.user import User
from ....core.security import create_access_token, create_refresh_token
from ....core.exceptions import InternalError, TokenError

logger = logging.getLogger(__name__)

TOKEN_GENERATION_FAILED = "Something went wrong while generating access and refresh token"


def issue_token_pair(user: User) -> Tuple[str, str]:
    """
    Issue a fresh (access_token, refresh_token) pair for a user

    Signing failures are reported as InternalError without the underlying
    cause so key details never reach a caller.
    """
    try:
        access_token = create_access_token(user.id or "")
        refresh_token = create_refresh_token(user.id or "")
    except (TokenError, ValueError) as exception:
        logger.error(f"Token generation failed for user {user.id}: {exception}")
        raise InternalError(TOKEN_GENERATION_FAILED) from exception
    return access_token, refresh_token
