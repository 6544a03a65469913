"""Runtime settings for the converter.

Values come from environment variables, or a `.env` file in the working
directory (loaded when this module is imported, never overriding the
real environment).
"""
from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from dotenv import load_dotenv

load_dotenv(override=False)


def split_tags(text: str) -> List[str]:
    """Split comma- or newline-separated tags, dropping blanks."""
    if not text:
        return []
    parts = text.replace("\n", ",").split(",")
    return [p.strip() for p in parts if p.strip()]


@dataclass
class Settings:
    extra_tags: List[str] = field(
        default_factory=lambda: split_tags(os.environ.get("WB2KK_EXTRA_TAGS", ""))
    )
    log_level: str = field(
        default_factory=lambda: os.environ.get("WB2KK_LOG_LEVEL", "WARNING").upper()
    )
    output_dir: Path = field(
        default_factory=lambda: Path(os.environ.get("WB2KK_OUTPUT_DIR", tempfile.gettempdir()))
    )

    # Web UI
    server_name: str = field(
        default_factory=lambda: os.environ.get("WB2KK_SERVER_NAME", "127.0.0.1")
    )
    server_port: int = field(
        default_factory=lambda: int(os.environ.get("WB2KK_SERVER_PORT", "7860"))
    )


def get_settings() -> Settings:
    return Settings()
