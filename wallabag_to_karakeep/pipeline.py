"""Batch conversion of a Wallabag export with streaming output.

Records are converted lazily while the output document is written, so
only one converted bookmark is alive at a time. A record that fails to
convert is logged and skipped; it never aborts the run.
"""
from __future__ import annotations

import json
import logging
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, TextIO, Tuple, Union

from .converter import convert_record, normalize_tags
from .errors import FatalInputError
from .models import Bookmark
from .results import ConversionReport, ConversionResult, Converted, Failed, FieldFailure

logger = logging.getLogger(__name__)

INDENT = 2
ROOT_KEY = "bookmarks"


def _reject_constant(name: str):
    raise FatalInputError(f"Input is not valid JSON: {name} is not allowed")


def _check_text(value: Any) -> None:
    # Objects nested in value are checked by their own hook call.
    if isinstance(value, str):
        try:
            value.encode("utf-8")
        except UnicodeEncodeError as e:
            raise FatalInputError(f"Input is not valid JSON: lone surrogate in string {value!r}") from e
    elif isinstance(value, list):
        for item in value:
            _check_text(item)


def _checked_object(pairs: List[Tuple[str, Any]]) -> Dict[str, Any]:
    for key, value in pairs:
        _check_text(key)
        _check_text(value)
    return dict(pairs)


def parse_export(content: Union[str, bytes]) -> List[Any]:
    """Decode the export and check that its top level is an array.

    Strings in objects must be encodable as UTF-8, and NaN/Infinity are
    rejected, so every accepted record can be written out.
    """
    if isinstance(content, bytes):
        try:
            content = content.decode("utf-8")
        except UnicodeDecodeError as e:
            raise FatalInputError(f"Input is not valid UTF-8: {e}") from e

    try:
        data = json.loads(
            content,
            object_pairs_hook=_checked_object,
            parse_constant=_reject_constant,
        )
    except json.JSONDecodeError as e:
        raise FatalInputError(f"Input is not valid JSON: {e}") from e
    except RecursionError as e:
        raise FatalInputError("Input is not valid JSON: nesting is too deep") from e

    if not isinstance(data, list):
        raise FatalInputError(f"Expected an array, got {type(data).__name__}")
    return data


def iter_results(records: Iterable[Any], extra_tags: Iterable[str] = ()) -> Iterator[ConversionResult]:
    extra = normalize_tags(extra_tags)
    for i, record in enumerate(records):
        outcome = convert_record(record, extra)
        if isinstance(outcome, FieldFailure):
            yield Failed(i, outcome)
        else:
            yield Converted(i, outcome)


class StreamingBookmarks:
    """Iterate converted bookmarks, reporting failures as they happen."""

    def __init__(
        self,
        records: Iterable[Any],
        extra_tags: Iterable[str] = (),
        on_failure: Optional[Callable[[Failed], None]] = None,
    ):
        self.records = records
        self.extra_tags = normalize_tags(extra_tags)
        self.on_failure = on_failure
        self.report = ConversionReport()

    def __iter__(self) -> Iterator[Bookmark]:
        for result in iter_results(self.records, self.extra_tags):
            if isinstance(result, Converted):
                self.report.converted += 1
                yield result.bookmark
                continue

            self.report.failures.append(result)
            logger.warning("%s", result.describe())
            if self.on_failure is not None:
                self.on_failure(result)


def write_bookmarks(bookmarks: Iterable[Bookmark], sink: TextIO, indent: int = INDENT) -> int:
    """Write `{"bookmarks": [...]}` to `sink` one bookmark at a time.

    The text matches `json.dumps(document, indent=indent, ensure_ascii=False)`.
    Returns the number of bookmarks written.
    """
    pad = " " * indent
    item_pad = pad * 2

    sink.write("{\n" + pad + json.dumps(ROOT_KEY) + ": [")
    written = 0
    for bookmark in bookmarks:
        body = json.dumps(bookmark.to_dict(), indent=indent, ensure_ascii=False)
        sink.write(("\n" if written == 0 else ",\n") + item_pad + body.replace("\n", "\n" + item_pad))
        written += 1

    if written:
        sink.write("\n" + pad)
    sink.write("]\n}")
    return written


def stream_bookmarks(
    records: Iterable[Any],
    sink: TextIO,
    tags: Iterable[str] = (),
    on_failure: Optional[Callable[[Failed], None]] = None,
) -> ConversionReport:
    stream = StreamingBookmarks(records, tags, on_failure=on_failure)
    write_bookmarks(stream, sink)
    logger.info("%s", stream.report.summary())
    return stream.report


def convert_export(
    content: Union[str, bytes],
    sink: TextIO,
    tags: Iterable[str] = (),
    on_failure: Optional[Callable[[Failed], None]] = None,
) -> ConversionReport:
    """Convert a whole export, streaming the Karakeep document into `sink`.

    Raises FatalInputError before writing anything if the export cannot be used.
    """
    records = parse_export(content)
    return stream_bookmarks(records, sink, tags, on_failure=on_failure)


def convert_records(records: Iterable[Any], tags: Iterable[str] = ()) -> Tuple[Dict[str, Any], ConversionReport]:
    """Eager variant: build the whole document in memory."""
    stream = StreamingBookmarks(records, tags)
    document = {ROOT_KEY: [bookmark.to_dict() for bookmark in stream]}
    return document, stream.report
