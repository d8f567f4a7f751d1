from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .media_provider import MediaProvider
from .auth_provider import AuthProvider
from .account_provider import AccountProvider
from .channel_provider import ChannelProvider


__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "MediaProvider",
    "AuthProvider",
    "AccountProvider",
    "ChannelProvider",
]
