from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class UploadConfig:
    upload_dir: Path = Path(os.getenv("UPLOAD_DIR", "uploads"))
    public_prefix: str = "/uploads"
    max_file_size: int = 5 * 1024 * 1024  # 5MB


DEFAULT_UPLOAD_CONFIG = UploadConfig()
