from abc import ABC, abstractmethod
from typing import List, Optional
from ..models.channel import ChannelProfile, WatchedVideo


class ProfileRepository(ABC):
    """Read-only projections over users, subscriptions and videos"""

    @abstractmethod
    async def get_channel_profile(
        self,
        username: str,
        viewer_id: Optional[str] = None,
    ) -> Optional[ChannelProfile]:
        """Channel page for username with counts; None if no such user"""
        pass

    @abstractmethod
    async def get_watch_history(self, user_id: str) -> Optional[List[WatchedVideo]]:
        """Watched videos in stored order; None if no such user"""
        pass
