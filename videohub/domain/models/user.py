from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional


@dataclass
class User:
    """Pure domain model for User entity - no external dependencies"""
    id: Optional[str]
    username: str
    email: str
    full_name: str
    hashed_password: str
    avatar_url: str = ""
    cover_image_url: str = ""
    refresh_token: Optional[str] = None
    watch_history: List[str] = field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        """Business validations"""
        if not self.username or not self.username.strip():
            raise ValueError("Username is required")
        if not self.email or "@" not in self.email:
            raise ValueError("Invalid email format")
        if not self.hashed_password:
            raise ValueError("Password hash is required")
        self.username = self.username.strip().lower()

    @property
    def has_active_session(self) -> bool:
        return bool(self.refresh_token)
