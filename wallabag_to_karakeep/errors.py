from __future__ import annotations


class Wb2kkError(Exception):
    """Base class for errors raised by this package."""


class FatalInputError(Wb2kkError, ValueError):
    """The export is not JSON, or its top level is not an array."""
