from __future__ import annotations

import logging
import sys
from typing import Optional


def read_export_content(file_obj) -> str:
    """Read export text from an uploaded file, an open stream, or a file path."""
    if file_obj is None:
        raise ValueError("No file uploaded.")

    if hasattr(file_obj, 'read'):
        if hasattr(file_obj, 'seek') and file_obj.seekable():
            file_obj.seek(0)
        content = file_obj.read()
        if isinstance(content, bytes):
            content = content.decode('utf-8')
        return content

    path = file_obj.name if hasattr(file_obj, 'name') else file_obj
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def configure_logging(level: str = "WARNING", stream: Optional[object] = None) -> None:
    """Send package log records to stderr as bare lines."""
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))

    root = logging.getLogger("wallabag_to_karakeep")
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)
