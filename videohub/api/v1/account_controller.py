# Standard library imports
from typing import Optional

# External package imports
from fastapi import APIRouter, Depends, File, UploadFile, status

# Local application imports
from ...application.dto.api_response import ApiResponse
from ...application.dto.auth_dto import ChangePasswordRequest
from ...application.dto.user_dto import UpdateAccountDetailsRequest, UserResponse
from ...application.use_cases.auth.change_password import ChangePasswordUseCase
from ...application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from ...application.use_cases.account.update_account_details import UpdateAccountDetailsUseCase
from ...application.use_cases.account.update_user_image import UpdateAvatarUseCase, UpdateCoverImageUseCase
from ...di.container import get_container
from ...domain.models.identity import AuthenticatedIdentity
from .dependencies import get_current_identity
from .uploads import discard_staged, stage_upload


router = APIRouter(tags=["account"])


@router.post("/change-password")
async def change_password(
    request: ChangePasswordRequest,
    identity: AuthenticatedIdentity = Depends(get_current_identity),
) -> ApiResponse[dict]:
    container = get_container()
    await container.get(ChangePasswordUseCase).execute(identity, request)
    return ApiResponse.build(status.HTTP_200_OK, {}, "Password changed successfully")


@router.get("/current-user")
async def get_current_user(
    identity: AuthenticatedIdentity = Depends(get_current_identity),
) -> ApiResponse[UserResponse]:
    """Get current authenticated user information"""
    container = get_container()
    user = await container.get(GetCurrentUserUseCase).execute(identity)
    return ApiResponse.build(status.HTTP_200_OK, user, "Current user fetched successfully")


@router.patch("/update-account")
async def update_account_details(
    request: UpdateAccountDetailsRequest,
    identity: AuthenticatedIdentity = Depends(get_current_identity),
) -> ApiResponse[UserResponse]:
    container = get_container()
    user = await container.get(UpdateAccountDetailsUseCase).execute(identity, request)
    return ApiResponse.build(status.HTTP_200_OK, user, "Account details updated successfully")


@router.patch("/avatar")
async def update_avatar(
    avatar: Optional[UploadFile] = File(None),
    identity: AuthenticatedIdentity = Depends(get_current_identity),
) -> ApiResponse[UserResponse]:
    container = get_container()
    update_use_case = container.get(UpdateAvatarUseCase)

    local_path: Optional[str] = None
    try:
        local_path = await stage_upload(avatar)
        user = await update_use_case.execute(identity, local_path)
    finally:
        discard_staged(local_path)
    return ApiResponse.build(status.HTTP_200_OK, user, "Avatar updated successfully")


@router.patch("/cover-image")
async def update_cover_image(
    cover_image: Optional[UploadFile] = File(None, alias="coverImage"),
    identity: AuthenticatedIdentity = Depends(get_current_identity),
) -> ApiResponse[UserResponse]:
    container = get_container()
    update_use_case = container.get(UpdateCoverImageUseCase)

    local_path: Optional[str] = None
    try:
        local_path = await stage_upload(cover_image)
        user = await update_use_case.execute(identity, local_path)
    finally:
        discard_staged(local_path)
    return ApiResponse.build(status.HTTP_200_OK, user, "Cover image updated successfully")
