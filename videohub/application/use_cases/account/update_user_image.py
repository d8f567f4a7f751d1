# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.services.media_storage import MediaStorage
from ....domain.models.identity import AuthenticatedIdentity
from ....domain.constants import UserFields
from ....core.exceptions import NotFoundError, UploadError, ValidationError
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)


class _UpdateUserImageUseCase:
    """Upload a single image and store its URL on the caller's record"""

    field_name: str = ""
    label: str = ""

    def __init__(self, user_repository: UserRepository, media_storage: MediaStorage) -> None:
        self.user_repository = user_repository
        self.media_storage = media_storage

    async def execute(self, identity: AuthenticatedIdentity, local_file_path: Optional[str]) -> UserResponse:
        """
        Raises:
            ValidationError: If no file was supplied
            UploadError: If the media host returned no URL
            NotFoundError: If the account no longer exists
        """
        if not local_file_path:
            raise ValidationError(f"{self.label} file is missing")

        uploaded = await self.media_storage.upload(local_file_path)
        if uploaded is None or not uploaded.url:
            raise UploadError(f"Error while uploading {self.label.lower()}")

        user = await self.user_repository.update_fields(identity.user_id, {self.field_name: uploaded.url})
        if user is None:
            raise NotFoundError("User does not exist")

        logger.info(f"Updated {self.field_name} for user {identity.user_id}")
        return UserResponse.from_domain(user)


class UpdateAvatarUseCase(_UpdateUserImageUseCase):
    """Use case for replacing the caller's avatar"""
    field_name = UserFields.AVATAR_URL
    label = "Avatar"


class UpdateCoverImageUseCase(_UpdateUserImageUseCase):
    """Use case for replacing the caller's cover image"""
    field_name = UserFields.COVER_IMAGE_URL
    label = "Cover image"
