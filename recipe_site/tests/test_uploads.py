from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from recipe_site.media.config import UploadConfig
from recipe_site.media.uploads import LocalBlobStore, blob_filename, validate_image


def test_validate_image_accepts_images():
    assert validate_image("image/png", 1024) is None


def test_validate_image_rejects_other_types():
    assert validate_image("application/pdf", 10) == "File must be an image"
    assert validate_image(None, 10) == "File must be an image"


def test_validate_image_rejects_large_files():
    assert validate_image("image/jpeg", 5 * 1024 * 1024 + 1) == "File size must be less than 5MB"
    assert validate_image("image/jpeg", 5 * 1024 * 1024) is None


def test_blob_filename_sanitizes_name():
    now = datetime(2024, 1, 1, tzinfo=timezone.utc)
    assert blob_filename("my photo (1).jpg", now) == "recipe-1704067200000-my_photo__1_.jpg"


def test_local_store_writes_file_and_returns_url(tmp_path: Path):
    store = LocalBlobStore(UploadConfig(upload_dir=tmp_path / "uploads"))
    url = store.put("recipe-1-a.png", b"\x89PNG")
    assert url == "/uploads/recipe-1-a.png"
    assert (tmp_path / "uploads" / "recipe-1-a.png").read_bytes() == b"\x89PNG"
