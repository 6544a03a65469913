"""Typed access to fields of a decoded JSON record.

Every accessor returns either the typed value or a `FieldFailure`, so
callers can stop at the first failure without raising.
"""
from __future__ import annotations

from typing import Any, List, Union

from .results import MISSING, WRONG_TYPE, FieldFailure

# Same range as a signed 64-bit JSON integer.
INT_MIN = -(2 ** 63)
INT_MAX = 2 ** 63 - 1


def get_field(record: Any, key: str) -> Union[Any, FieldFailure]:
    """Return `record[key]`, or a failure when the key is absent.

    A record that is not an object has no fields. A key present with a
    null value is returned as None and rejected by the typed accessors.
    """
    if isinstance(record, dict) and key in record:
        return record[key]
    return FieldFailure(key, MISSING, "does not exist")


def as_string(value: Any, key: str) -> Union[str, FieldFailure]:
    if isinstance(value, FieldFailure):
        return value
    if isinstance(value, str):
        return value
    return FieldFailure(key, WRONG_TYPE, "is not a string")


def as_int(value: Any, key: str) -> Union[int, FieldFailure]:
    if isinstance(value, FieldFailure):
        return value
    # bool is a subclass of int, but JSON true/false is not an integer.
    if isinstance(value, int) and not isinstance(value, bool) and INT_MIN <= value <= INT_MAX:
        return value
    return FieldFailure(key, WRONG_TYPE, "is not an int")


def as_string_list(value: Any, key: str) -> Union[List[str], FieldFailure]:
    if isinstance(value, FieldFailure):
        return value
    if not isinstance(value, list):
        return FieldFailure(key, WRONG_TYPE, "is not an array")

    items: List[str] = []
    for i, item in enumerate(value):
        if not isinstance(item, str):
            return FieldFailure(f"{key}[{i}]", WRONG_TYPE, "is not a string")
        items.append(item)
    return items
