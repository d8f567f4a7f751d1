"""
Unit tests for staging multipart uploads to the temp directory.
"""
import io
from pathlib import Path

import pytest
from fastapi import UploadFile
from videohub.api.v1.uploads import discard_staged, stage_upload
from videohub.core.exceptions import ValidationError


def _upload(content: bytes, filename: str = "avatar.PNG") -> UploadFile:
    return UploadFile(file=io.BytesIO(content), filename=filename)


@pytest.mark.asyncio
async def test_stages_file_under_random_name(mock_settings):
    path = await stage_upload(_upload(b"image bytes"))

    staged = Path(path)
    assert staged.read_bytes() == b"image bytes"
    assert staged.suffix == ".png"
    assert staged.parent == Path(mock_settings.upload_temp_dir).resolve()
    assert staged.stem != "avatar"


@pytest.mark.asyncio
async def test_no_file(mock_settings):
    assert await stage_upload(None) is None


@pytest.mark.asyncio
async def test_empty_file_is_treated_as_missing(mock_settings):
    assert await stage_upload(_upload(b"")) is None
    assert list(Path(mock_settings.upload_temp_dir).iterdir()) == []


@pytest.mark.asyncio
async def test_oversized_file_is_rejected_and_removed(mock_settings):
    with pytest.raises(ValidationError, match="File too large"):
        await stage_upload(_upload(b"x" * (1024 * 1024 + 1)))
    assert list(Path(mock_settings.upload_temp_dir).iterdir()) == []


def test_discard_staged_ignores_missing(tmp_path):
    present = tmp_path / "present.png"
    present.write_bytes(b"x")

    discard_staged(str(present), None, str(tmp_path / "gone.png"))

    assert not present.exists()
