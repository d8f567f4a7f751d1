# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.identity import AuthenticatedIdentity
from ....domain.constants import UserFields
from ....core.security import hash_password, verify_password
from ....core.exceptions import AuthenticationError, NotFoundError, ValidationError
from ...dto.auth_dto import ChangePasswordRequest

logger = logging.getLogger(__name__)


class ChangePasswordUseCase:
    """Use case for replacing the caller's password"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, identity: AuthenticatedIdentity, request: ChangePasswordRequest) -> None:
        """
        Replace the stored password hash after checking the old password

        The current refresh token stays valid.

        Raises:
            ValidationError: If the new password is blank
            NotFoundError: If the account no longer exists
            AuthenticationError: If the old password does not verify
        """
        if not request.new_password or not request.new_password.strip():
            raise ValidationError("New password is required")

        user = await self.user_repository.find_by_id(identity.user_id)
        if user is None:
            raise NotFoundError("User does not exist")

        if not verify_password(request.old_password, user.hashed_password):
            logger.warning(f"Password change rejected for user {identity.user_id}: wrong old password")
            raise AuthenticationError("Invalid old password")

        await self.user_repository.update_fields(
            identity.user_id,
            {UserFields.HASHED_PASSWORD: hash_password(request.new_password)},
        )
        logger.info(f"Password changed for user {identity.user_id}")
