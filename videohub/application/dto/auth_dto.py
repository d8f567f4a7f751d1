from typing import Optional

from pydantic import AliasChoices, BaseModel, Field

from .user_dto import UserResponse


class UserRegistrationRequest(BaseModel):
    """
    DTO for user registration request.

    Fields default to empty strings so blank input reaches the use case
    and is reported as a validation error there.
    """
    full_name: str = Field(default="", validation_alias=AliasChoices("full_name", "fullname"))
    username: str = ""
    email: str = ""
    password: str = ""


class UserLoginRequest(BaseModel):
    """DTO for user login request; either username or email identifies the user"""
    username: Optional[str] = None
    email: Optional[str] = None
    password: str = ""


class RefreshTokenRequest(BaseModel):
    """DTO for refresh request when the token is not sent as a cookie"""
    refresh_token: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("refresh_token", "refreshToken"),
    )


class ChangePasswordRequest(BaseModel):
    """DTO for password change request"""
    old_password: str = Field(default="", validation_alias=AliasChoices("old_password", "oldPassword"))
    new_password: str = Field(default="", validation_alias=AliasChoices("new_password", "newPassword"))


class TokenPairResponse(BaseModel):
    """DTO for a freshly issued access/refresh token pair"""
    access_token: str
    refresh_token: str
    token_type: str = "bearer"


class LoginResponse(TokenPairResponse):
    """DTO for login response: the token pair plus the sanitized user"""
    user: UserResponse
