from .update_account_details import UpdateAccountDetailsUseCase
from .update_user_image import UpdateAvatarUseCase, UpdateCoverImageUseCase

__all__ = [
    "UpdateAccountDetailsUseCase",
    "UpdateAvatarUseCase",
    "UpdateCoverImageUseCase",
]
