# Standard library imports
from typing import Optional

# Local application imports
from ....domain.repositories.profile_repository import ProfileRepository
from ....domain.models.identity import AuthenticatedIdentity
from ....core.exceptions import NotFoundError, ValidationError
from ...dto.channel_dto import ChannelProfileResponse


class GetChannelProfileUseCase:
    """Use case for reading a channel page by username"""

    def __init__(self, profile_repository: ProfileRepository) -> None:
        self.profile_repository = profile_repository

    async def execute(
        self,
        username: Optional[str],
        viewer: Optional[AuthenticatedIdentity] = None,
    ) -> ChannelProfileResponse:
        """
        Get channel profile with subscriber counts

        Args:
            username: Channel owner's username (case-insensitive)
            viewer: Caller, if authenticated; decides is_subscribed

        Raises:
            ValidationError: If username is blank
            NotFoundError: If the channel does not exist
        """
        if not username or not username.strip():
            raise ValidationError("Username is missing")

        channel = await self.profile_repository.get_channel_profile(
            username.strip().lower(),
            viewer_id=viewer.user_id if viewer else None,
        )
        if channel is None:
            raise NotFoundError("Channel does not exist")

        return ChannelProfileResponse(
            id=channel.id,
            full_name=channel.full_name,
            username=channel.username,
            subscribers_count=channel.subscribers_count,
            channels_subscribed_to_count=channel.channels_subscribed_to_count,
            is_subscribed=channel.is_subscribed,
            avatar_url=channel.avatar_url,
            cover_image_url=channel.cover_image_url,
            created_at=channel.created_at,
        )
