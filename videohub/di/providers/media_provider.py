from typing import TYPE_CHECKING
from ...domain.services.media_storage import MediaStorage
from ...infrastructure.external.cloudinary_client import CloudinaryClient

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class MediaProvider:
    """Media host provider - registers the Cloudinary client behind MediaStorage"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        # Check if already registered to avoid creating multiple instances
        try:
            container.get(MediaStorage)
        except ValueError:
            container.register_singleton(MediaStorage, CloudinaryClient())
