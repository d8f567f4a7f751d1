"""Constants for domain model field names"""

from .user_fields import UserFields
from .subscription_fields import SubscriptionFields
from .video_fields import VideoFields

__all__ = [
    "UserFields",
    "SubscriptionFields",
    "VideoFields",
]
