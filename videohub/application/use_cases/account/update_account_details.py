# Standard library imports
import logging
from typing import Any, Dict

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.identity import AuthenticatedIdentity
from ....domain.constants import UserFields
from ....core.exceptions import ConflictError, NotFoundError, ValidationError
from ...dto.user_dto import UpdateAccountDetailsRequest, UserResponse

logger = logging.getLogger(__name__)


class UpdateAccountDetailsUseCase:
    """Use case for editing the caller's display name and email"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(
        self,
        identity: AuthenticatedIdentity,
        request: UpdateAccountDetailsRequest,
    ) -> UserResponse:
        """
        Update whichever of full_name and email are present

        Raises:
            ValidationError: If neither field is given
            ConflictError: If the email belongs to another user
            NotFoundError: If the account no longer exists
        """
        updates: Dict[str, Any] = {}
        if request.full_name:
            updates[UserFields.FULL_NAME] = request.full_name.strip()
        if request.email:
            updates[UserFields.EMAIL] = str(request.email).strip().lower()

        if not updates:
            raise ValidationError("Full name or email is required")

        if UserFields.EMAIL in updates:
            owner = await self.user_repository.find_by_email(updates[UserFields.EMAIL])
            if owner is not None and owner.id != identity.user_id:
                raise ConflictError("Email is already in use")

        user = await self.user_repository.update_fields(identity.user_id, updates)
        if user is None:
            raise NotFoundError("User does not exist")

        logger.info(f"Updated account details {sorted(updates)} for user {identity.user_id}")
        return UserResponse.from_domain(user)
