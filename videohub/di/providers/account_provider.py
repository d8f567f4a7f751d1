from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...domain.services.media_storage import MediaStorage
from ...application.use_cases.account.update_account_details import UpdateAccountDetailsUseCase
from ...application.use_cases.account.update_user_image import UpdateAvatarUseCase, UpdateCoverImageUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class AccountProvider:
    """Account use case provider - registers profile mutation use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            UpdateAccountDetailsUseCase,
            lambda: UpdateAccountDetailsUseCase(
                user_repository=container.get(UserRepository)
            )
        )

        container.register_factory(
            UpdateAvatarUseCase,
            lambda: UpdateAvatarUseCase(
                user_repository=container.get(UserRepository),
                media_storage=container.get(MediaStorage),
            )
        )

        container.register_factory(
            UpdateCoverImageUseCase,
            lambda: UpdateCoverImageUseCase(
                user_repository=container.get(UserRepository),
                media_storage=container.get(MediaStorage),
            )
        )
