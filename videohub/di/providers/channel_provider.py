from typing import TYPE_CHECKING
from ...domain.repositories.profile_repository import ProfileRepository
from ...application.use_cases.channel.get_channel_profile import GetChannelProfileUseCase
from ...application.use_cases.channel.get_watch_history import GetWatchHistoryUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ChannelProvider:
    """Read model provider - registers channel profile and watch history use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            GetChannelProfileUseCase,
            lambda: GetChannelProfileUseCase(
                profile_repository=container.get(ProfileRepository)
            )
        )

        container.register_factory(
            GetWatchHistoryUseCase,
            lambda: GetWatchHistoryUseCase(
                profile_repository=container.get(ProfileRepository)
            )
        )
