from .auth_dto import (
    UserRegistrationRequest,
    UserLoginRequest,
    RefreshTokenRequest,
    ChangePasswordRequest,
    TokenPairResponse,
    LoginResponse,
)
from .user_dto import UserResponse, UpdateAccountDetailsRequest
from .channel_dto import ChannelProfileResponse, VideoOwnerResponse, WatchedVideoResponse
from .api_response import ApiResponse, ApiErrorResponse

__all__ = [
    "UserRegistrationRequest",
    "UserLoginRequest",
    "RefreshTokenRequest",
    "ChangePasswordRequest",
    "TokenPairResponse",
    "LoginResponse",
    "UserResponse",
    "UpdateAccountDetailsRequest",
    "ChannelProfileResponse",
    "VideoOwnerResponse",
    "WatchedVideoResponse",
    "ApiResponse",
    "ApiErrorResponse",
]
