"""
Staging of inbound multipart files.

Uploaded files are streamed to UPLOAD_TEMP_DIR under a random name and the
local path is handed to the media host client, which removes it after upload.
"""

# Standard library imports
import uuid
from pathlib import Path
from typing import Optional

# External package imports
from fastapi import UploadFile

# Local application imports
from ...core.config import get_settings
from ...core.exceptions import ValidationError

CHUNK_SIZE = 1024 * 1024


def _upload_dir() -> Path:
    upload_dir = Path(get_settings().upload_temp_dir)
    upload_dir.mkdir(parents=True, exist_ok=True)
    return upload_dir


async def stage_upload(file: Optional[UploadFile]) -> Optional[str]:
    """
    Write an uploaded file to the temp directory

    Returns:
        Absolute path of the staged file, or None when no file was sent

    Raises:
        ValidationError: If the file exceeds UPLOAD_MAX_MB
    """
    if file is None or not file.filename:
        return None

    settings = get_settings()
    max_bytes = settings.upload_max_mb * 1024 * 1024

    ext = Path(file.filename).suffix.lower()
    final_path = (_upload_dir() / f"{uuid.uuid4().hex}{ext}").resolve()

    size = 0
    with open(final_path, "wb") as f:
        while True:
            chunk = await file.read(CHUNK_SIZE)
            if not chunk:
                break
            size += len(chunk)
            if size > max_bytes:
                f.close()
                final_path.unlink(missing_ok=True)
                raise ValidationError(f"File too large. Max {settings.upload_max_mb} MB.")
            f.write(chunk)

    if size == 0:
        final_path.unlink(missing_ok=True)
        return None

    return str(final_path)


def discard_staged(*paths: Optional[str]) -> None:
    """Remove staged files that were never handed to the media host"""
    for path in paths:
        if path:
            Path(path).unlink(missing_ok=True)
