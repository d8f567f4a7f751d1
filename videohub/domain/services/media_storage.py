from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass
class MediaUploadResult:
    """What the media host reports back for a stored file"""
    url: str
    public_id: str = ""
    resource_type: str = ""
    bytes: int = 0


class MediaStorage(ABC):
    """Contract for the third-party media host"""

    @abstractmethod
    async def upload(self, local_file_path: Optional[str]) -> Optional[MediaUploadResult]:
        """
        Upload a staged local file.

        Returns None when there is nothing to upload or the upload failed.
        The local file is removed whatever the outcome.
        """
        pass
