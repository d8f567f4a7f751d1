"""
Shared pytest fixtures for videohub tests.
"""
import copy
import os
import uuid
from pathlib import Path
from typing import Any, Dict, Optional
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from videohub.core.security import hash_password
from videohub.domain.models.identity import AuthenticatedIdentity
from videohub.domain.models.user import User
from videohub.domain.repositories.user_repository import UserRepository
from videohub.domain.services.media_storage import MediaStorage, MediaUploadResult


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_videohub",
        "ACCESS_TOKEN_SECRET": "test_access_secret_for_testing_only",
        "REFRESH_TOKEN_SECRET": "test_refresh_secret_for_testing_only",
        "COOKIE_SECURE": "false",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings(tmp_path):
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.jwt_algorithm = "HS256"
    mock.access_token_secret = "test_access_secret_with_enough_bytes_0001"
    mock.access_token_expire_minutes = 15
    mock.refresh_token_secret = "test_refresh_secret_with_enough_bytes_001"
    mock.refresh_token_expire_days = 10
    mock.cookie_secure = True
    mock.cookie_samesite = "lax"
    mock.cloudinary_cloud_name = "demo"
    mock.cloudinary_api_key = "123456"
    mock.cloudinary_api_secret = "cloud_secret"
    mock.cloudinary_upload_url = "https://api.cloudinary.test/v1_1"
    mock.media_upload_timeout = 5.0
    mock.upload_temp_dir = str(tmp_path / "uploads")
    mock.upload_max_mb = 1
    mock.cors_origins = ["http://localhost:5173"]
    mock.log_level = "INFO"

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("videohub.core.config.get_settings", return_value=mock), patch(
        "videohub.core.security.get_settings", return_value=mock
    ), patch(
        "videohub.infrastructure.external.cloudinary_client.get_settings", return_value=mock
    ), patch(
        "videohub.api.v1.uploads.get_settings", return_value=mock
    ):
        yield mock


class InMemoryUserRepository(UserRepository):
    """Stateful UserRepository fake honouring uniqueness and compare-and-swap."""

    def __init__(self) -> None:
        self.users: Dict[str, User] = {}

    def _copy(self, user: Optional[User]) -> Optional[User]:
        return copy.deepcopy(user) if user is not None else None

    async def find_by_id(self, user_id: str) -> Optional[User]:
        return self._copy(self.users.get(user_id))

    async def find_by_email(self, email: str) -> Optional[User]:
        email = (email or "").strip().lower()
        return self._copy(next((u for u in self.users.values() if u.email == email), None))

    async def find_by_username(self, username: str) -> Optional[User]:
        username = (username or "").strip().lower()
        return self._copy(next((u for u in self.users.values() if u.username == username), None))

    async def find_by_username_or_email(self, username, email) -> Optional[User]:
        for user in self.users.values():
            if username and user.username == username.strip().lower():
                return self._copy(user)
            if email and user.email == email.strip().lower():
                return self._copy(user)
        return None

    async def save(self, user: User) -> User:
        stored = copy.deepcopy(user)
        if not stored.id:
            stored.id = uuid.uuid4().hex
        self.users[stored.id] = stored
        return self._copy(stored)

    async def update_fields(self, user_id: str, fields: Dict[str, Any]) -> Optional[User]:
        user = self.users.get(user_id)
        if user is None:
            return None
        for key, value in fields.items():
            setattr(user, key, value)
        return self._copy(user)

    async def set_refresh_token(self, user_id: str, refresh_token: str) -> bool:
        user = self.users.get(user_id)
        if user is None:
            return False
        user.refresh_token = refresh_token
        return True

    async def clear_refresh_token(self, user_id: str) -> None:
        user = self.users.get(user_id)
        if user is not None:
            user.refresh_token = None

    async def replace_refresh_token(self, user_id: str, expected_token: str, new_token: str) -> bool:
        user = self.users.get(user_id)
        if user is None or not expected_token or user.refresh_token != expected_token:
            return False
        user.refresh_token = new_token
        return True


@pytest.fixture
def user_repo():
    """Stateful in-memory user repository."""
    return InMemoryUserRepository()


@pytest.fixture
def mock_user_repo():
    """Mock UserRepository with async methods."""
    return AsyncMock(spec=UserRepository)


@pytest.fixture
def media_storage():
    """MediaStorage double: any path uploads, None means nothing to upload."""
    storage = AsyncMock(spec=MediaStorage)

    async def _upload(local_file_path):
        if not local_file_path:
            return None
        return MediaUploadResult(
            url=f"https://res.cloudinary.com/demo/{Path(local_file_path).name}",
            public_id=Path(local_file_path).stem,
            resource_type="image",
        )

    storage.upload.side_effect = _upload
    return storage


@pytest.fixture
def make_user():
    """Factory for User domain objects with a real password hash."""
    def _make(
        user_id: Optional[str] = "usr-1",
        username: str = "alice",
        email: str = "alice@example.com",
        password: str = "secret123",
        **kwargs,
    ) -> User:
        return User(
            id=user_id,
            username=username,
            email=email,
            full_name=kwargs.pop("full_name", "Alice Example"),
            hashed_password=hash_password(password),
            avatar_url=kwargs.pop("avatar_url", "https://res.cloudinary.com/demo/avatar.png"),
            **kwargs,
        )
    return _make


@pytest.fixture
def identity():
    return AuthenticatedIdentity(user_id="usr-1")
