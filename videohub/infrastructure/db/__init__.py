from .mongo_connection import (
    get_database,
    close_database,
    get_user_collection,
    get_subscription_collection,
    get_video_collection,
)
from .mongo_user_repository import MongoUserRepository
from .mongo_profile_repository import MongoProfileRepository

__all__ = [
    "get_database",
    "close_database",
    "get_user_collection",
    "get_subscription_collection",
    "get_video_collection",
    "MongoUserRepository",
    "MongoProfileRepository",
]
