# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.identity import AuthenticatedIdentity

logger = logging.getLogger(__name__)


class LogoutUserUseCase:
    """Use case for ending the caller's session"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, identity: AuthenticatedIdentity) -> None:
        """Clear the stored refresh token. Logging out twice is not an error."""
        await self.user_repository.clear_refresh_token(identity.user_id)
        logger.info(f"User {identity.user_id} logged out")
