from .auth_controller import router as auth_router
from .account_controller import router as account_router
from .channel_controller import router as channel_router


__all__ = ["auth_router", "account_router", "channel_router"]
