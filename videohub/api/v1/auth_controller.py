# Standard library imports
from typing import Optional

# External package imports
from fastapi import APIRouter, Depends, File, Form, Request, Response, UploadFile, status

# Local application imports
from ...application.dto.api_response import ApiResponse
from ...application.dto.auth_dto import (
    LoginResponse,
    RefreshTokenRequest,
    TokenPairResponse,
    UserLoginRequest,
    UserRegistrationRequest,
)
from ...application.dto.user_dto import UserResponse
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...application.use_cases.auth.logout_user import LogoutUserUseCase
from ...application.use_cases.auth.refresh_session import RefreshSessionUseCase
from ...di.container import get_container
from ...domain.models.identity import AuthenticatedIdentity
from .dependencies import get_current_identity
from .session_cookies import REFRESH_TOKEN_COOKIE, clear_session_cookies, set_session_cookies
from .uploads import discard_staged, stage_upload


router = APIRouter(tags=["authentication"])


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register_user(
    fullname: str = Form(""),
    full_name: str = Form(""),
    username: str = Form(""),
    email: str = Form(""),
    password: str = Form(""),
    avatar: Optional[UploadFile] = File(None),
    cover_image: Optional[UploadFile] = File(None, alias="coverImage"),
) -> ApiResponse[UserResponse]:
    """
    Register a new user (multipart form with avatar and optional cover image)

    Returns:
        Envelope with the created, sanitized user
    """
    container = get_container()
    register_use_case = container.get(RegisterUserUseCase)

    avatar_path: Optional[str] = None
    cover_image_path: Optional[str] = None
    try:
        avatar_path = await stage_upload(avatar)
        cover_image_path = await stage_upload(cover_image)
        user = await register_use_case.execute(
            UserRegistrationRequest(full_name=fullname or full_name, username=username, email=email, password=password),
            avatar_local_path=avatar_path,
            cover_image_local_path=cover_image_path,
        )
    finally:
        discard_staged(avatar_path, cover_image_path)

    return ApiResponse.build(status.HTTP_201_CREATED, user, "User registered successfully")


@router.post("/login")
async def login_user(request: UserLoginRequest, response: Response) -> ApiResponse[LoginResponse]:
    """
    Authenticate user and open a session

    Tokens are returned in the body and set as HTTP-only cookies.
    """
    container = get_container()
    login_use_case = container.get(LoginUserUseCase)

    login_response = await login_use_case.execute(request)
    set_session_cookies(response, login_response.access_token, login_response.refresh_token)
    return ApiResponse.build(status.HTTP_200_OK, login_response, "User logged in successfully")


@router.post("/logout")
async def logout_user(
    response: Response,
    identity: AuthenticatedIdentity = Depends(get_current_identity),
) -> ApiResponse[dict]:
    """End the caller's session and clear both cookies"""
    container = get_container()
    logout_use_case = container.get(LogoutUserUseCase)

    await logout_use_case.execute(identity)
    clear_session_cookies(response)
    return ApiResponse.build(status.HTTP_200_OK, {}, "User logged out")


@router.post("/refresh-token")
async def refresh_access_token(
    request: Request,
    response: Response,
    body: Optional[RefreshTokenRequest] = None,
) -> ApiResponse[TokenPairResponse]:
    """
    Rotate the refresh token and issue a new access token

    The refresh token is read from its cookie, falling back to the body.
    """
    container = get_container()
    refresh_use_case = container.get(RefreshSessionUseCase)

    presented_token = request.cookies.get(REFRESH_TOKEN_COOKIE) or (body.refresh_token if body else None)
    token_pair = await refresh_use_case.execute(presented_token)
    set_session_cookies(response, token_pair.access_token, token_pair.refresh_token)
    return ApiResponse.build(status.HTTP_200_OK, token_pair, "Access token refreshed")
