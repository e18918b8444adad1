"""Error taxonomy for tinymlp."""

from __future__ import annotations


class TinyMlpError(Exception):
    """Base class for every error raised by the numerical core."""


class InvalidArgumentError(TinyMlpError, ValueError):
    """A structural precondition was violated."""


class InconsistentDegreeError(TinyMlpError, ValueError):
    """Units of differing degree were combined into one layer."""


class DimensionMismatchError(TinyMlpError, ValueError):
    """An input vector or layer chain has an unexpected length."""


__all__ = [
    "TinyMlpError",
    "InvalidArgumentError",
    "InconsistentDegreeError",
    "DimensionMismatchError",
]
