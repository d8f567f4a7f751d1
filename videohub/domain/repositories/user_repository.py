from abc import ABC, abstractmethod
from typing import Any, Dict, Optional
from ..models.user import User


class UserRepository(ABC):
    """Repository interface - defines contract for user data access"""

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Find user by ID"""
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find user by email address"""
        pass

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[User]:
        """Find user by username (case-insensitive)"""
        pass

    @abstractmethod
    async def find_by_username_or_email(
        self,
        username: Optional[str],
        email: Optional[str],
    ) -> Optional[User]:
        """Find the first user matching either the username or the email"""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save user (create or update)"""
        pass

    @abstractmethod
    async def update_fields(self, user_id: str, fields: Dict[str, Any]) -> Optional[User]:
        """Set the given fields on a user; returns the updated user or None if missing"""
        pass

    @abstractmethod
    async def set_refresh_token(self, user_id: str, refresh_token: str) -> bool:
        """Unconditionally store a refresh token; False if the user does not exist"""
        pass

    @abstractmethod
    async def clear_refresh_token(self, user_id: str) -> None:
        """Remove the stored refresh token (no-op if already absent)"""
        pass

    @abstractmethod
    async def replace_refresh_token(
        self,
        user_id: str,
        expected_token: str,
        new_token: str,
    ) -> bool:
        """
        Atomically swap the stored refresh token.

        The write only happens when the stored token still equals
        expected_token; returns whether the swap happened.
        """
        pass
