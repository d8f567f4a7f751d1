from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.profile_repository import ProfileRepository
from ...infrastructure.db.mongo_user_repository import MongoUserRepository
from ...infrastructure.db.mongo_profile_repository import MongoProfileRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        Gets collections from database provider and creates repository instances.
        """
        user_collection = container.get("user_collection")
        subscription_collection = container.get("subscription_collection")
        video_collection = container.get("video_collection")

        container.register_singleton(
            UserRepository,
            MongoUserRepository(user_collection=user_collection)
        )

        container.register_singleton(
            ProfileRepository,
            MongoProfileRepository(
                user_collection=user_collection,
                subscription_collection=subscription_collection,
                video_collection=video_collection,
            )
        )
