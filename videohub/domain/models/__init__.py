from .user import User
from .identity import AuthenticatedIdentity
from .channel import ChannelProfile, VideoOwner, WatchedVideo

__all__ = ["User", "AuthenticatedIdentity", "ChannelProfile", "VideoOwner", "WatchedVideo"]
