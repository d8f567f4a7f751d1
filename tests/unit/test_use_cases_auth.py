"""
Unit tests for the session use cases (Register, Login, Logout, RefreshSession,
ChangePassword, GetCurrentUser) against the in-memory repository.
"""
import pytest
from videohub.application.dto.auth_dto import (
    ChangePasswordRequest,
    LoginResponse,
    UserLoginRequest,
    UserRegistrationRequest,
)
from videohub.application.use_cases.auth.change_password import ChangePasswordUseCase
from videohub.application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from videohub.application.use_cases.auth.login_user import LoginUserUseCase
from videohub.application.use_cases.auth.logout_user import LogoutUserUseCase
from videohub.application.use_cases.auth.refresh_session import RefreshSessionUseCase
from videohub.application.use_cases.auth.register_user import RegisterUserUseCase
from videohub.core.exceptions import (
    AuthenticationError,
    ConflictError,
    InternalError,
    NotFoundError,
    UploadError,
    ValidationError,
)
from videohub.core.security import TokenKind, create_refresh_token, decode_token, verify_password
from videohub.domain.models.identity import AuthenticatedIdentity

pytestmark = pytest.mark.usefixtures("mock_settings")


def _registration(**overrides) -> UserRegistrationRequest:
    fields = {
        "full_name": "Alice Example",
        "username": "Alice",
        "email": "alice@example.com",
        "password": "secret123",
    }
    fields.update(overrides)
    return UserRegistrationRequest(**fields)


async def _register(user_repo, media_storage, **overrides):
    use_case = RegisterUserUseCase(user_repo, media_storage)
    return await use_case.execute(_registration(**overrides), avatar_local_path="/tmp/avatar.png")


async def _login(user_repo, username="alice", password="secret123") -> LoginResponse:
    return await LoginUserUseCase(user_repo).execute(
        UserLoginRequest(username=username, password=password)
    )


class TestRegisterUserUseCase:
    """Tests for RegisterUserUseCase"""

    @pytest.mark.asyncio
    async def test_register_success(self, user_repo, media_storage):
        result = await _register(user_repo, media_storage)

        assert result.username == "alice"
        assert result.email == "alice@example.com"
        assert result.avatar_url.endswith("avatar.png")
        assert result.cover_image_url == ""
        dumped = result.model_dump()
        assert "hashed_password" not in dumped
        assert "refresh_token" not in dumped

        stored = user_repo.users[result.id]
        assert stored.refresh_token is None
        assert verify_password("secret123", stored.hashed_password)

    @pytest.mark.asyncio
    async def test_register_with_cover_image(self, user_repo, media_storage):
        use_case = RegisterUserUseCase(user_repo, media_storage)
        result = await use_case.execute(
            _registration(),
            avatar_local_path="/tmp/avatar.png",
            cover_image_local_path="/tmp/cover.jpg",
        )
        assert result.cover_image_url.endswith("cover.jpg")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("field", ["full_name", "username", "email", "password"])
    @pytest.mark.parametrize("blank", ["", "   "])
    async def test_blank_field_raises(self, user_repo, media_storage, field, blank):
        with pytest.raises(ValidationError) as exc_info:
            await _register(user_repo, media_storage, **{field: blank})
        assert exc_info.value.errors[0]["field"] == field
        assert user_repo.users == {}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("email", ["bob.example.com", "bob@", "@example.com", "bob@exa mple.com"])
    async def test_malformed_email_rejected_before_upload(self, user_repo, media_storage, email):
        with pytest.raises(ValidationError) as exc_info:
            await _register(user_repo, media_storage, username="bob", email=email)

        assert exc_info.value.errors[0]["field"] == "email"
        media_storage.upload.assert_not_called()
        assert user_repo.users == {}

    @pytest.mark.asyncio
    async def test_duplicate_email_raises(self, user_repo, media_storage):
        await _register(user_repo, media_storage)
        with pytest.raises(ConflictError):
            await _register(user_repo, media_storage, username="someone_else")
        assert len(user_repo.users) == 1

    @pytest.mark.asyncio
    async def test_duplicate_username_is_case_insensitive(self, user_repo, media_storage):
        await _register(user_repo, media_storage)
        with pytest.raises(ConflictError):
            await _register(user_repo, media_storage, username="ALICE", email="other@example.com")

    @pytest.mark.asyncio
    async def test_missing_avatar_raises_and_persists_nothing(self, user_repo, media_storage):
        use_case = RegisterUserUseCase(user_repo, media_storage)
        with pytest.raises(ValidationError, match="Avatar"):
            await use_case.execute(_registration(), avatar_local_path=None)
        assert len(user_repo.users) == 0
        media_storage.upload.assert_not_called()

    @pytest.mark.asyncio
    async def test_failed_avatar_upload_persists_nothing(self, user_repo, media_storage):
        media_storage.upload.side_effect = None
        media_storage.upload.return_value = None

        with pytest.raises(UploadError):
            await _register(user_repo, media_storage)
        assert len(user_repo.users) == 0

    @pytest.mark.asyncio
    async def test_post_create_lookup_miss_is_internal_error(self, mock_user_repo, media_storage, make_user):
        mock_user_repo.find_by_username_or_email.return_value = None
        mock_user_repo.save.return_value = make_user(user_id="usr-new")
        mock_user_repo.find_by_id.return_value = None

        with pytest.raises(InternalError):
            await _register(mock_user_repo, media_storage)


class TestLoginUserUseCase:
    """Tests for LoginUserUseCase"""

    @pytest.mark.asyncio
    async def test_login_success_stores_returned_refresh_token(self, user_repo, media_storage):
        registered = await _register(user_repo, media_storage)

        result = await _login(user_repo)

        assert result.access_token
        assert result.refresh_token
        assert result.user.id == registered.id
        assert "hashed_password" not in result.user.model_dump()
        assert "refresh_token" not in result.user.model_dump()
        assert user_repo.users[registered.id].refresh_token == result.refresh_token

    @pytest.mark.asyncio
    async def test_access_token_carries_only_the_subject(self, user_repo, media_storage):
        registered = await _register(user_repo, media_storage)

        result = await _login(user_repo)

        claims = decode_token(result.access_token, TokenKind.ACCESS)
        assert claims["sub"] == registered.id
        assert not {"username", "email", "full_name"} & set(claims)

    @pytest.mark.asyncio
    async def test_login_by_email(self, user_repo, media_storage):
        await _register(user_repo, media_storage)
        result = await LoginUserUseCase(user_repo).execute(
            UserLoginRequest(email="ALICE@example.com", password="secret123")
        )
        assert result.user.username == "alice"

    @pytest.mark.asyncio
    async def test_login_requires_username_or_email(self, user_repo):
        with pytest.raises(ValidationError):
            await LoginUserUseCase(user_repo).execute(UserLoginRequest(password="secret123"))

    @pytest.mark.asyncio
    async def test_login_unknown_user(self, user_repo):
        with pytest.raises(NotFoundError):
            await _login(user_repo, username="nobody")

    @pytest.mark.asyncio
    async def test_login_wrong_password(self, user_repo, media_storage):
        registered = await _register(user_repo, media_storage)
        with pytest.raises(AuthenticationError):
            await _login(user_repo, password="wrong-password")
        assert user_repo.users[registered.id].refresh_token is None

    @pytest.mark.asyncio
    async def test_signing_failure_is_masked_as_internal_error(self, user_repo, media_storage, mock_settings):
        await _register(user_repo, media_storage)
        mock_settings.access_token_secret = ""

        with pytest.raises(InternalError) as exc_info:
            await _login(user_repo)
        assert "secret" not in exc_info.value.message


class TestRefreshSessionUseCase:
    """Tests for RefreshSessionUseCase and the rotation invariant"""

    @pytest.mark.asyncio
    async def test_refresh_rotates_token(self, user_repo, media_storage):
        await _register(user_repo, media_storage)
        login = await _login(user_repo)
        use_case = RefreshSessionUseCase(user_repo)

        rotated = await use_case.execute(login.refresh_token)

        assert rotated.refresh_token != login.refresh_token
        assert user_repo.users[login.user.id].refresh_token == rotated.refresh_token

        with pytest.raises(AuthenticationError):
            await use_case.execute(login.refresh_token)

        # The rotated token keeps working
        again = await use_case.execute(rotated.refresh_token)
        assert again.refresh_token != rotated.refresh_token

    @pytest.mark.asyncio
    async def test_token_from_earlier_login_is_rejected(self, user_repo, media_storage):
        await _register(user_repo, media_storage)
        first = await _login(user_repo)
        await _login(user_repo)

        with pytest.raises(AuthenticationError):
            await RefreshSessionUseCase(user_repo).execute(first.refresh_token)

    @pytest.mark.asyncio
    async def test_missing_token(self, user_repo):
        with pytest.raises(AuthenticationError):
            await RefreshSessionUseCase(user_repo).execute(None)

    @pytest.mark.asyncio
    async def test_unverifiable_token(self, user_repo):
        with pytest.raises(AuthenticationError):
            await RefreshSessionUseCase(user_repo).execute("not.a.token")

    @pytest.mark.asyncio
    async def test_expired_token(self, user_repo, media_storage, mock_settings):
        await _register(user_repo, media_storage)
        mock_settings.refresh_token_expire_days = -1
        login = await _login(user_repo)

        with pytest.raises(AuthenticationError, match="expired"):
            await RefreshSessionUseCase(user_repo).execute(login.refresh_token)

    @pytest.mark.asyncio
    async def test_subject_no_longer_exists(self, user_repo):
        token = create_refresh_token("deleted-user")
        with pytest.raises(NotFoundError):
            await RefreshSessionUseCase(user_repo).execute(token)

    @pytest.mark.asyncio
    async def test_lost_compare_and_swap_is_rejected(self, mock_user_repo, make_user):
        token = create_refresh_token("usr-1")
        mock_user_repo.find_by_id.return_value = make_user(refresh_token=token)
        mock_user_repo.replace_refresh_token.return_value = False

        with pytest.raises(AuthenticationError):
            await RefreshSessionUseCase(mock_user_repo).execute(token)

        kwargs = mock_user_repo.replace_refresh_token.call_args.kwargs
        assert kwargs["expected_token"] == token
        assert kwargs["new_token"] != token


class TestLogoutUserUseCase:
    """Tests for LogoutUserUseCase"""

    @pytest.mark.asyncio
    async def test_logout_clears_token_and_blocks_refresh(self, user_repo, media_storage):
        await _register(user_repo, media_storage)
        login = await _login(user_repo)
        identity = AuthenticatedIdentity(user_id=login.user.id)

        await LogoutUserUseCase(user_repo).execute(identity)

        assert user_repo.users[login.user.id].refresh_token is None
        with pytest.raises(AuthenticationError):
            await RefreshSessionUseCase(user_repo).execute(login.refresh_token)

    @pytest.mark.asyncio
    async def test_logout_twice_is_not_an_error(self, user_repo, media_storage):
        await _register(user_repo, media_storage)
        login = await _login(user_repo)
        identity = AuthenticatedIdentity(user_id=login.user.id)
        use_case = LogoutUserUseCase(user_repo)

        await use_case.execute(identity)
        await use_case.execute(identity)

        assert user_repo.users[login.user.id].refresh_token is None


class TestChangePasswordUseCase:
    """Tests for ChangePasswordUseCase"""

    @pytest.mark.asyncio
    async def test_wrong_old_password_keeps_hash(self, user_repo, media_storage):
        registered = await _register(user_repo, media_storage)
        identity = AuthenticatedIdentity(user_id=registered.id)
        original_hash = user_repo.users[registered.id].hashed_password

        with pytest.raises(AuthenticationError):
            await ChangePasswordUseCase(user_repo).execute(
                identity, ChangePasswordRequest(old_password="nope", new_password="brand-new")
            )
        assert user_repo.users[registered.id].hashed_password == original_hash

    @pytest.mark.asyncio
    async def test_change_password_replaces_hash(self, user_repo, media_storage):
        registered = await _register(user_repo, media_storage)
        identity = AuthenticatedIdentity(user_id=registered.id)
        original_hash = user_repo.users[registered.id].hashed_password

        await ChangePasswordUseCase(user_repo).execute(
            identity, ChangePasswordRequest(old_password="secret123", new_password="brand-new")
        )

        new_hash = user_repo.users[registered.id].hashed_password
        assert new_hash != original_hash
        assert verify_password("brand-new", new_hash)
        assert not verify_password("secret123", new_hash)

    @pytest.mark.asyncio
    async def test_change_password_keeps_session(self, user_repo, media_storage):
        await _register(user_repo, media_storage)
        login = await _login(user_repo)

        await ChangePasswordUseCase(user_repo).execute(
            AuthenticatedIdentity(user_id=login.user.id),
            ChangePasswordRequest(old_password="secret123", new_password="brand-new"),
        )
        assert user_repo.users[login.user.id].refresh_token == login.refresh_token

    @pytest.mark.asyncio
    async def test_blank_new_password(self, user_repo, identity):
        with pytest.raises(ValidationError):
            await ChangePasswordUseCase(user_repo).execute(
                identity, ChangePasswordRequest(old_password="secret123", new_password="  ")
            )


class TestGetCurrentUserUseCase:
    """Tests for GetCurrentUserUseCase"""

    @pytest.mark.asyncio
    async def test_returns_sanitized_user(self, mock_user_repo, make_user, identity):
        mock_user_repo.find_by_id.return_value = make_user(refresh_token="stored-token")

        result = await GetCurrentUserUseCase(mock_user_repo).execute(identity)

        assert result.id == "usr-1"
        assert "refresh_token" not in result.model_dump()

    @pytest.mark.asyncio
    async def test_missing_user(self, mock_user_repo, identity):
        mock_user_repo.find_by_id.return_value = None
        with pytest.raises(NotFoundError):
            await GetCurrentUserUseCase(mock_user_repo).execute(identity)
