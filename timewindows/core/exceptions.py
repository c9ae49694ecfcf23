# timewindows/core/exceptions.py
from __future__ import annotations


class CoreError(Exception):
    """Base error for all core-domain exceptions."""


# ---- Validation / construction errors ----
class InvalidTimeWindow(CoreError, ValueError):
    """Raised when a TimeWindow is constructed directly with invalid bounds."""


class InvalidWindowSequence(CoreError, ValueError):
    """Raised when a window sequence is not sorted, disjoint and maximal."""


class InvalidWindowArrays(CoreError, ValueError):
    """Raised when start/end arrays cannot be turned into windows."""
