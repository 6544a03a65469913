"""Map one Wallabag export entry to one Karakeep bookmark."""
from __future__ import annotations

from typing import Any, Iterable, List, Tuple, Union

from .accessors import as_int, as_string, as_string_list, get_field
from .models import Bookmark, LinkContent
from .results import INVALID, FieldFailure
from .timestamps import to_epoch


def normalize_tags(tags: Iterable[str]) -> Tuple[str, ...]:
    """Collapse duplicates while keeping first-seen order."""
    return tuple(dict.fromkeys(tags))


def merge_tags(own: Iterable[str], extra: Iterable[str]) -> List[str]:
    return list(dict.fromkeys([*own, *extra]))


def extract_created_at(record: Any) -> Union[int, FieldFailure]:
    text = as_string(get_field(record, "created_at"), "created_at")
    if isinstance(text, FieldFailure):
        return text
    try:
        return to_epoch(text)
    except (ValueError, OverflowError) as e:
        return FieldFailure("created_at", INVALID, f"is not a valid timestamp: {e}")


def extract_title(record: Any) -> Union[str, FieldFailure]:
    return as_string(get_field(record, "title"), "title")


def extract_url(record: Any) -> Union[str, FieldFailure]:
    return as_string(get_field(record, "url"), "url")


def extract_archived(record: Any) -> Union[bool, FieldFailure]:
    value = as_int(get_field(record, "is_archived"), "is_archived")
    if isinstance(value, FieldFailure):
        return value
    return value != 0


def extract_tags(record: Any) -> Union[List[str], FieldFailure]:
    return as_string_list(get_field(record, "tags"), "tags")


def convert_record(record: Any, extra_tags: Iterable[str] = ()) -> Union[Bookmark, FieldFailure]:
    """Convert a single export entry, stopping at the first bad field."""
    created_at = extract_created_at(record)
    if isinstance(created_at, FieldFailure):
        return created_at

    title = extract_title(record)
    if isinstance(title, FieldFailure):
        return title

    url = extract_url(record)
    if isinstance(url, FieldFailure):
        return url

    archived = extract_archived(record)
    if isinstance(archived, FieldFailure):
        return archived

    own_tags = extract_tags(record)
    if isinstance(own_tags, FieldFailure):
        return own_tags

    return Bookmark(
        created_at=created_at,
        title=title,
        content=LinkContent(url=url),
        archived=archived,
        tags=merge_tags(own_tags, extra_tags),
    )
