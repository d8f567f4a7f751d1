from datetime import datetime
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, EmailStr, Field, field_validator

from ...domain.models.user import User


class UserResponse(BaseModel):
    """DTO for user response (no password, no refresh token)"""
    id: str
    username: str
    email: str
    full_name: str
    avatar_url: str = ""
    cover_image_url: str = ""
    watch_history: List[str] = Field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id or "",
            username=user.username,
            email=user.email,
            full_name=user.full_name,
            avatar_url=user.avatar_url,
            cover_image_url=user.cover_image_url,
            watch_history=list(user.watch_history),
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class UpdateAccountDetailsRequest(BaseModel):
    """DTO for profile update; at least one field must be present"""
    full_name: Optional[str] = Field(default=None, validation_alias=AliasChoices("full_name", "fullname"))
    email: Optional[EmailStr] = None

    @field_validator("full_name", "email", mode="before")
    @classmethod
    def blank_as_missing(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value
