from .register_user import RegisterUserUseCase
from .login_user import LoginUserUseCase
from .logout_user import LogoutUserUseCase
from .refresh_session import RefreshSessionUseCase
from .change_password import ChangePasswordUseCase
from .get_current_user import GetCurrentUserUseCase

__all__ = [
    "RegisterUserUseCase",
    "LoginUserUseCase",
    "LogoutUserUseCase",
    "RefreshSessionUseCase",
    "ChangePasswordUseCase",
    "GetCurrentUserUseCase",
]
