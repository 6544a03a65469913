"""Outcome types for field extraction and record conversion."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Union

from .models import Bookmark

MISSING = "missing"
WRONG_TYPE = "wrong_type"
INVALID = "invalid"


@dataclass(frozen=True)
class FieldFailure:
    """Why one source field could not be extracted.

    `kind` is one of MISSING, WRONG_TYPE or INVALID; `reason` is the
    human-readable part following the field name.
    """

    field: str
    kind: str
    reason: str

    def __str__(self) -> str:
        return f"{self.field} {self.reason}"


@dataclass(frozen=True)
class Converted:
    index: int
    bookmark: Bookmark


@dataclass(frozen=True)
class Failed:
    index: int
    cause: FieldFailure

    def describe(self) -> str:
        return f"Failed to convert {self.index}: {self.cause}"


ConversionResult = Union[Converted, Failed]


@dataclass
class ConversionReport:
    converted: int = 0
    failures: List[Failed] = field(default_factory=list)

    @property
    def failed(self) -> int:
        return len(self.failures)

    @property
    def total(self) -> int:
        return self.converted + self.failed

    def summary(self) -> str:
        return f"Converted {self.converted} bookmarks, {self.failed} failed"
