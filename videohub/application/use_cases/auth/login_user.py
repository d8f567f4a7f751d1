# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....core.security import verify_password
from ....core.exceptions import AuthenticationError, NotFoundError, ValidationError
from ...dto.auth_dto import UserLoginRequest, LoginResponse
from ...dto.user_dto import UserResponse
from .tokens import issue_token_pair

logger = logging.getLogger(__name__)


class LoginUserUseCase:
    """Use case for authenticating a user and opening a session"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: UserLoginRequest) -> LoginResponse:
        """
        Authenticate user and issue an access/refresh token pair

        The new refresh token overwrites any stored one, which invalidates
        every refresh token issued to this user before.

        Raises:
            ValidationError: If neither username nor email is given
            NotFoundError: If no user matches
            AuthenticationError: If the password is wrong
        """
        username = (request.username or "").strip().lower() or None
        email = (request.email or "").strip().lower() or None
        if not (username or email):
            raise ValidationError("Username or email is required")

        user = await self.user_repository.find_by_username_or_email(username, email)
        if user is None:
            raise NotFoundError("User does not exist")

        if not verify_password(request.password, user.hashed_password):
            logger.warning(f"Failed login attempt for user {user.id}")
            raise AuthenticationError("Invalid user credentials")

        access_token, refresh_token = issue_token_pair(user)
        if not await self.user_repository.set_refresh_token(user.id or "", refresh_token):
            raise NotFoundError("User does not exist")

        logger.info(f"User {user.id} logged in")
        user.refresh_token = None
        return LoginResponse(
            user=UserResponse.from_domain(user),
            access_token=access_token,
            refresh_token=refresh_token,
        )
