from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class ChannelProfileResponse(BaseModel):
    """DTO for a channel page"""
    id: str
    full_name: str
    username: str
    subscribers_count: int
    channels_subscribed_to_count: int
    is_subscribed: bool
    avatar_url: str
    cover_image_url: str = ""
    created_at: Optional[datetime] = None


class VideoOwnerResponse(BaseModel):
    """Owner projection: only public identity fields"""
    full_name: str
    username: str
    avatar_url: str


class WatchedVideoResponse(BaseModel):
    """DTO for one watch-history entry"""
    id: str
    title: str = ""
    description: str = ""
    video_file: str = ""
    thumbnail: str = ""
    duration: float = 0.0
    views: int = 0
    owner: Optional[VideoOwnerResponse] = None
    created_at: Optional[datetime] = None
