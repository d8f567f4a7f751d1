# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....core.security import TokenKind, decode_token
from ....core.exceptions import (
    AuthenticationError,
    ExpiredTokenError,
    NotFoundError,
    TokenConfigurationError,
    TokenError,
    InternalError,
)
from ...dto.auth_dto import TokenPairResponse
from .tokens import TOKEN_GENERATION_FAILED, issue_token_pair

logger = logging.getLogger(__name__)


class RefreshSessionUseCase:
    """Use case for rotating a session's refresh token"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, presented_token: Optional[str]) -> TokenPairResponse:
        """
        Exchange the current refresh token for a new access/refresh pair

        The presented token must equal the one stored for its subject. The
        swap to the new token is conditional on that same value, so of two
        concurrent refreshes with one token only the first succeeds.

        Raises:
            AuthenticationError: If the token is missing, invalid, expired,
                or no longer the user's current refresh token
            NotFoundError: If the token's subject no longer exists
        """
        if not presented_token:
            raise AuthenticationError("Unauthorized request")

        try:
            payload = decode_token(presented_token, TokenKind.REFRESH)
        except TokenConfigurationError as exception:
            logger.error(f"Refresh token verification misconfigured: {exception}")
            raise InternalError(TOKEN_GENERATION_FAILED) from exception
        except ExpiredTokenError as exception:
            raise AuthenticationError("Refresh token is expired") from exception
        except TokenError as exception:
            raise AuthenticationError("Invalid refresh token") from exception

        user_id: str = payload["sub"]
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise NotFoundError("User does not exist")

        if presented_token != user.refresh_token:
            logger.warning(f"Rejected stale refresh token for user {user_id}")
            raise AuthenticationError("Refresh token is expired or used")

        access_token, refresh_token = issue_token_pair(user)

        swapped = await self.user_repository.replace_refresh_token(
            user_id,
            expected_token=presented_token,
            new_token=refresh_token,
        )
        if not swapped:
            logger.warning(f"Refresh token for user {user_id} was rotated concurrently")
            raise AuthenticationError("Refresh token is expired or used")

        logger.info(f"Rotated refresh token for user {user_id}")
        return TokenPairResponse(access_token=access_token, refresh_token=refresh_token)
