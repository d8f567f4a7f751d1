# Standard library imports
from typing import List, Optional

# External package imports
from fastapi import APIRouter, Depends, status

# Local application imports
from ...application.dto.api_response import ApiResponse
from ...application.dto.channel_dto import ChannelProfileResponse, WatchedVideoResponse
from ...application.use_cases.channel.get_channel_profile import GetChannelProfileUseCase
from ...application.use_cases.channel.get_watch_history import GetWatchHistoryUseCase
from ...di.container import get_container
from ...domain.models.identity import AuthenticatedIdentity
from .dependencies import get_current_identity, get_optional_identity


router = APIRouter(tags=["channels"])


@router.get("/c/{username}")
async def get_channel_profile(
    username: str,
    viewer: Optional[AuthenticatedIdentity] = Depends(get_optional_identity),
) -> ApiResponse[ChannelProfileResponse]:
    """Channel page; is_subscribed reflects the caller when authenticated"""
    container = get_container()
    channel = await container.get(GetChannelProfileUseCase).execute(username, viewer)
    return ApiResponse.build(status.HTTP_200_OK, channel, "User channel fetched successfully")


@router.get("/history")
async def get_watch_history(
    identity: AuthenticatedIdentity = Depends(get_current_identity),
) -> ApiResponse[List[WatchedVideoResponse]]:
    container = get_container()
    history = await container.get(GetWatchHistoryUseCase).execute(identity)
    return ApiResponse.build(status.HTTP_200_OK, history, "Watch history fetched successfully")
