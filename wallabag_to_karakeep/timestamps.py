from __future__ import annotations

import re
from datetime import datetime, timezone

# date, 'T'/'t'/' ' separator, time with optional fraction, then 'Z' or +hh:mm.
_RFC3339 = re.compile(
    r"(?P<date>\d{4}-\d{2}-\d{2})[Tt ]"
    r"(?P<time>\d{2}:\d{2}:\d{2})(?P<fraction>\.\d+)?"
    r"(?P<offset>[Zz]|[+-]\d{2}:\d{2})"
)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def parse_rfc3339(text: str) -> datetime:
    """Parse an RFC 3339 date-time into an aware datetime.

    Raises ValueError when the text is malformed or carries no UTC offset.
    """
    match = _RFC3339.fullmatch(text)
    if match is None:
        raise ValueError(f"{text!r} is not an RFC 3339 date-time")

    offset = match.group("offset")
    if offset in ("Z", "z"):
        offset = "+00:00"
    # fromisoformat wants exactly microseconds.
    fraction = match.group("fraction")
    fraction = "." + (fraction[1:] + "000000")[:6] if fraction else ""

    return datetime.fromisoformat(f"{match.group('date')}T{match.group('time')}{fraction}{offset}")


def to_epoch(text: str) -> int:
    """Convert an RFC 3339 date-time to whole Unix seconds, honouring its offset.

    The offset may move the instant outside years 1-9999; the subtraction
    stays exact there, unlike converting to a UTC datetime first.
    """
    delta = parse_rfc3339(text) - EPOCH
    # timedelta keeps seconds and microseconds non-negative, so this floors.
    return delta.days * 86400 + delta.seconds
