from .get_channel_profile import GetChannelProfileUseCase
from .get_watch_history import GetWatchHistoryUseCase

__all__ = ["GetChannelProfileUseCase", "GetWatchHistoryUseCase"]
