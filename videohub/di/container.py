# Local application imports
from .base_container import BaseContainer
from .providers import (
    AccountProvider,
    AuthProvider,
    ChannelProvider,
    DatabaseProvider,
    MediaProvider,
    RepositoryProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Database connections (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depends on database
    3. Media host client (MediaProvider)
    4. Use cases (AuthProvider, AccountProvider, ChannelProvider) - depend on the above
    """

    def __init__(self) -> None:
        super().__init__()
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → media → use cases
        """
        DatabaseProvider.register(self)
        RepositoryProvider.register(self)
        MediaProvider.register(self)

        AuthProvider.register(self)
        AccountProvider.register(self)
        ChannelProvider.register(self)


# Global container instance (singleton pattern)
_container: DIContainer | None = None


def get_container() -> DIContainer:
    """
    Get the global DI container instance (singleton pattern)

    Returns:
        DIContainer instance with all dependencies registered
    """
    global _container
    if _container is None:
        _container = DIContainer()
    return _container
