# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.profile_repository import ProfileRepository
from ....domain.models.identity import AuthenticatedIdentity
from ....core.exceptions import NotFoundError
from ...dto.channel_dto import VideoOwnerResponse, WatchedVideoResponse


class GetWatchHistoryUseCase:
    """Use case for listing the caller's watched videos with their owners"""

    def __init__(self, profile_repository: ProfileRepository) -> None:
        self.profile_repository = profile_repository

    async def execute(self, identity: AuthenticatedIdentity) -> List[WatchedVideoResponse]:
        videos = await self.profile_repository.get_watch_history(identity.user_id)
        if videos is None:
            raise NotFoundError("User does not exist")

        return [
            WatchedVideoResponse(
                id=video.id,
                title=video.title,
                description=video.description,
                video_file=video.video_file,
                thumbnail=video.thumbnail,
                duration=video.duration,
                views=video.views,
                owner=VideoOwnerResponse(
                    full_name=video.owner.full_name,
                    username=video.owner.username,
                    avatar_url=video.owner.avatar_url,
                ) if video.owner else None,
                created_at=video.created_at,
            )
            for video in videos
        ]
