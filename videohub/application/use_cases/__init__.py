from .auth import (
    RegisterUserUseCase,
    LoginUserUseCase,
    LogoutUserUseCase,
    RefreshSessionUseCase,
    ChangePasswordUseCase,
    GetCurrentUserUseCase,
)
from .account import (
    UpdateAccountDetailsUseCase,
    UpdateAvatarUseCase,
    UpdateCoverImageUseCase,
)
from .channel import (
    GetChannelProfileUseCase,
    GetWatchHistoryUseCase,
)

__all__ = [
    "RegisterUserUseCase",
    "LoginUserUseCase",
    "LogoutUserUseCase",
    "RefreshSessionUseCase",
    "ChangePasswordUseCase",
    "GetCurrentUserUseCase",
    "UpdateAccountDetailsUseCase",
    "UpdateAvatarUseCase",
    "UpdateCoverImageUseCase",
    "GetChannelProfileUseCase",
    "GetWatchHistoryUseCase",
]
