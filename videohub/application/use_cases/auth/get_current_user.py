# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.identity import AuthenticatedIdentity
from ....core.exceptions import NotFoundError
from ...dto.user_dto import UserResponse


class GetCurrentUserUseCase:
    """Use case for reading the authenticated caller's account"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, identity: AuthenticatedIdentity) -> UserResponse:
        """
        Get the caller's sanitized user record

        Raises:
            NotFoundError: If the account no longer exists
        """
        user = await self.user_repository.find_by_id(identity.user_id)
        if user is None:
            raise NotFoundError("User does not exist")
        return UserResponse.from_domain(user)
