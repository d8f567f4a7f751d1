# Standard library imports
import hashlib
import logging
import time
from pathlib import Path
from typing import Optional

# External package imports
import httpx

# Local application imports
from ...core.config import get_settings
from ...domain.services.media_storage import MediaStorage, MediaUploadResult
from ..http_client_factory import get_shared_http_client

logger = logging.getLogger(__name__)


def sign_upload_params(params: dict, api_secret: str) -> str:
    """
    Cloudinary request signature: SHA-1 over the sorted params joined as
    key=value pairs with '&', followed by the API secret.
    """
    to_sign = "&".join(f"{key}={params[key]}" for key in sorted(params))
    return hashlib.sha1(f"{to_sign}{api_secret}".encode("utf-8")).hexdigest()


class CloudinaryClient(MediaStorage):
    """
    HTTP client for the Cloudinary upload API.

    Uploads a staged local file with a signed request and always deletes the
    local file afterwards. Failures are logged and reported as None so the
    calling use case decides whether the upload was required.
    """

    def __init__(
        self,
        cloud_name: Optional[str] = None,
        api_key: Optional[str] = None,
        api_secret: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        settings = get_settings()
        self.cloud_name = cloud_name or settings.cloudinary_cloud_name
        self.api_key = api_key or settings.cloudinary_api_key
        self.api_secret = api_secret or settings.cloudinary_api_secret
        self.base_url = (base_url or settings.cloudinary_upload_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.media_upload_timeout
        self._http_client = http_client

    @property
    def upload_url(self) -> str:
        return f"{self.base_url}/{self.cloud_name}/auto/upload"

    def _client(self) -> httpx.AsyncClient:
        return self._http_client if self._http_client is not None else get_shared_http_client()

    async def upload(self, local_file_path: Optional[str]) -> Optional[MediaUploadResult]:
        """
        Upload a local file to Cloudinary

        Args:
            local_file_path: Path of the staged file; None means nothing to upload

        Returns:
            MediaUploadResult with the delivered URL, or None on any failure
        """
        if not local_file_path:
            return None

        path = Path(local_file_path)
        try:
            if not self.cloud_name or not self.api_key or not self.api_secret:
                logger.error("Cloudinary credentials are not configured; skipping upload")
                return None

            params = {"timestamp": int(time.time())}
            data = {
                **params,
                "api_key": self.api_key,
                "signature": sign_upload_params(params, self.api_secret),
            }

            with path.open("rb") as file_handle:
                response = await self._client().post(
                    self.upload_url,
                    data=data,
                    files={"file": (path.name, file_handle)},
                    timeout=self.timeout,
                )
            response.raise_for_status()
            body = response.json()

            url = body.get("secure_url") or body.get("url")
            if not url:
                logger.error(f"Cloudinary response for {path.name} carried no URL")
                return None

            logger.info(f"Uploaded {path.name} to Cloudinary as {body.get('public_id')}")
            return MediaUploadResult(
                url=url,
                public_id=body.get("public_id", ""),
                resource_type=body.get("resource_type", ""),
                bytes=int(body.get("bytes") or 0),
            )
        except httpx.TimeoutException:
            logger.error(f"Timeout while uploading {path.name} to Cloudinary")
            return None
        except httpx.HTTPStatusError as e:
            logger.error(
                f"Cloudinary rejected upload of {path.name}: "
                f"{e.response.status_code} - {e.response.text}"
            )
            return None
        except (httpx.HTTPError, OSError, ValueError) as e:
            logger.error(f"Error uploading {path.name} to Cloudinary: {e}")
            return None
        finally:
            path.unlink(missing_ok=True)
