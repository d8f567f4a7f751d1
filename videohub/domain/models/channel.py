# Standard library imports
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class ChannelProfile:
    """Read model: a user's public channel page with subscription counts"""
    id: str
    username: str
    full_name: str
    avatar_url: str
    cover_image_url: str
    subscribers_count: int = 0
    channels_subscribed_to_count: int = 0
    is_subscribed: bool = False
    created_at: Optional[datetime] = None


@dataclass
class VideoOwner:
    """Owner projection attached to each watched video"""
    full_name: str
    username: str
    avatar_url: str


@dataclass
class WatchedVideo:
    """Read model: one entry of a user's watch history joined to its owner"""
    id: str
    title: str = ""
    description: str = ""
    video_file: str = ""
    thumbnail: str = ""
    duration: float = 0.0
    views: int = 0
    owner: Optional[VideoOwner] = None
    created_at: Optional[datetime] = None
