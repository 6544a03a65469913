from __future__ import annotations

import logging
import os
from typing import Any, List, Optional

from .config import get_settings, split_tags
from .errors import FatalInputError
from .io_utils import read_export_content
from .pipeline import convert_records, parse_export, stream_bookmarks
from .results import Failed

logger = logging.getLogger(__name__)

PREVIEW_LIMIT = 3


def load_export(file_obj):
    """Parse an uploaded export; returns (records, status)."""
    if file_obj is None:
        return None, "No file uploaded."

    try:
        records = parse_export(read_export_content(file_obj))
    except (FatalInputError, OSError, UnicodeDecodeError) as e:
        return None, f"Error reading export: {str(e)}"

    return records, f"Successfully loaded. Found {len(records)} entries."


def compute_record_count_text(records: Optional[List[Any]]) -> str:
    if records is None:
        return ""
    return f"Entries: {len(records)}"


def failures_table(failures: List[Failed]) -> List[List[Any]]:
    return [[f.index, str(f.cause)] for f in failures]


def load_export_with_preview(file_obj):
    records, message = load_export(file_obj)
    if records is None:
        return None, message, "", None, []
    return records, message, compute_record_count_text(records), None, []


def preview_handler(records, tags_text: str = ""):
    """Convert the first entries only; returns (preview_rows, failures_rows)."""
    if records is None:
        return None, []

    tags = [*get_settings().extra_tags, *split_tags(tags_text)]
    document, report = convert_records(records[:PREVIEW_LIMIT], tags)
    rows = document["bookmarks"]
    return (rows if rows else None), failures_table(report.failures)


def convert_handler(records, tags_text: str = "", file_name: str = ""):
    """Write the Karakeep document for download; returns (path, status, failures_rows)."""
    if records is None:
        return None, "No data loaded.", []

    settings = get_settings()
    tags = [*settings.extra_tags, *split_tags(tags_text)]

    if not file_name or not file_name.strip():
        file_name = "karakeep_import"
    file_name = file_name.strip()
    if not file_name.lower().endswith(".json"):
        file_name += ".json"

    os.makedirs(settings.output_dir, exist_ok=True)
    path = os.path.join(settings.output_dir, os.path.basename(file_name))

    try:
        with open(path, 'w', encoding='utf-8') as f:
            report = stream_bookmarks(records, f, tags)
    except OSError as e:
        logger.error("Export to %s failed: %s", path, e)
        return None, f"Error during export: {str(e)}", []

    status = f"{report.summary()}. Saved to {path}"
    return path, status, failures_table(report.failures)
