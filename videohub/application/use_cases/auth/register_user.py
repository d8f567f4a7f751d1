# Standard library imports
import logging
from typing import Optional

# External package imports
from email_validator import EmailNotValidError, validate_email

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.services.media_storage import MediaStorage
from ....domain.models.user import User
from ....core.security import hash_password
from ....core.exceptions import ConflictError, InternalError, UploadError, ValidationError
from ...dto.auth_dto import UserRegistrationRequest
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """Use case for registering a new user"""

    def __init__(self, user_repository: UserRepository, media_storage: MediaStorage) -> None:
        self.user_repository = user_repository
        self.media_storage = media_storage

    async def execute(
        self,
        request: UserRegistrationRequest,
        avatar_local_path: Optional[str] = None,
        cover_image_local_path: Optional[str] = None,
    ) -> UserResponse:
        """
        Register a new user

        Args:
            request: Registration request with user details
            avatar_local_path: Staged avatar file (required)
            cover_image_local_path: Staged cover image file (optional)

        Returns:
            UserResponse with created user information

        Raises:
            ValidationError: If a field is blank, the email is malformed or the
                avatar is missing
            ConflictError: If the username or email is already taken
            UploadError: If the avatar could not be uploaded
            InternalError: If the created user cannot be read back
        """
        fields = {
            "full_name": request.full_name,
            "username": request.username,
            "email": request.email,
            "password": request.password,
        }
        blank = [name for name, value in fields.items() if not value or not value.strip()]
        if blank:
            raise ValidationError(
                "All fields are required",
                errors=[{"field": name, "message": "must not be blank"} for name in blank],
            )

        username = request.username.strip().lower()
        email = request.email.strip().lower()

        try:
            validate_email(email, check_deliverability=False)
        except EmailNotValidError as exception:
            raise ValidationError(
                "Email is invalid",
                errors=[{"field": "email", "message": str(exception)}],
            ) from exception

        # Check if user already exists
        existing_user = await self.user_repository.find_by_username_or_email(username, email)
        if existing_user is not None:
            raise ConflictError("User with email or username already exists")

        if not avatar_local_path:
            raise ValidationError("Avatar file is required")

        avatar = await self.media_storage.upload(avatar_local_path)
        if avatar is None or not avatar.url:
            raise UploadError("Avatar file could not be uploaded")

        cover_image = await self.media_storage.upload(cover_image_local_path)
        if cover_image_local_path and cover_image is None:
            logger.warning(f"Cover image upload failed while registering {username}; continuing without it")

        new_user = User(
            id=None,  # Will be set by repository
            username=username,
            email=email,
            full_name=request.full_name.strip(),
            hashed_password=hash_password(request.password),
            avatar_url=avatar.url,
            cover_image_url=cover_image.url if cover_image else "",
        )

        saved_user = await self.user_repository.save(new_user)

        created_user = await self.user_repository.find_by_id(saved_user.id or "")
        if created_user is None:
            raise InternalError("Something went wrong while registering the user")

        logger.info(f"Registered user {created_user.id} ({created_user.username})")
        return UserResponse.from_domain(created_user)
