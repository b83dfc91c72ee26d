from __future__ import annotations

import logging
import re
from datetime import datetime, timezone
from pathlib import Path

from .config import DEFAULT_UPLOAD_CONFIG, UploadConfig

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^a-zA-Z0-9.-]")


def validate_image(
    content_type: str | None,
    size: int,
    config: UploadConfig = DEFAULT_UPLOAD_CONFIG,
) -> str | None:
    """Return an error message for an unacceptable upload, else ``None``."""
    if not content_type or not content_type.startswith("image/"):
        return "File must be an image"
    if size > config.max_file_size:
        return "File size must be less than 5MB"
    return None


def blob_filename(name: str, now: datetime | None = None) -> str:
    now = now or datetime.now(timezone.utc)
    millis = int(now.timestamp() * 1000)
    return f"recipe-{millis}-{_UNSAFE_CHARS.sub('_', name)}"


class LocalBlobStore:
    """Public blob storage on the local filesystem."""

    def __init__(self, config: UploadConfig = DEFAULT_UPLOAD_CONFIG) -> None:
        self.root = Path(config.upload_dir)
        self.public_prefix = config.public_prefix

    def put(self, filename: str, data: bytes) -> str:
        self.root.mkdir(parents=True, exist_ok=True)
        (self.root / filename).write_bytes(data)
        logger.info("Stored upload %s (%d bytes)", filename, len(data))
        return f"{self.public_prefix}/{filename}"
