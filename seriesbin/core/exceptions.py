# seriesbin/core/exceptions.py
from __future__ import annotations


class CoreError(Exception):
    """Base error for all core-domain exceptions."""


# ---- Validation / construction errors ----
class InvalidSeries(CoreError):
    """Raised when a Series is constructed with invalid inputs."""


# ---- Call contract violations (also behave like ValueError) ----
class ShapeMismatch(CoreError, ValueError):
    """Raised when merged inputs disagree in length or y-shape."""


class InvalidArgument(CoreError, ValueError):
    """Raised when binning inputs are invalid (length, ordering, bin count)."""


class UnsupportedMode(CoreError, ValueError):
    """Raised when an edge placement mode other than 'in' / 'out' is requested."""
