# timewindows/core/__init__.py
"""
Core interval algebra for timewindows.

This module defines the time-window model and its operators:
- TimeWindow: validated half-open interval [start, end)
- negate / extend / offset: single-sequence transforms
- intersect / union: N-way merges of sequences

The core layer is independent from I/O and array formats.
"""

from .timepoint import MIN_TIME, MAX_TIME, shift, earliest
from .window import TimeWindow, ALWAYS
from .operators import negate, extend, offset, intersect, union, ensure_well_formed
from .exceptions import (
    CoreError,
    InvalidTimeWindow,
    InvalidWindowSequence,
    InvalidWindowArrays,
)


__all__ = [
    # time points
    "MIN_TIME",
    "MAX_TIME",
    "shift",
    "earliest",

    # windows
    "TimeWindow",
    "ALWAYS",

    # operators
    "negate",
    "extend",
    "offset",
    "intersect",
    "union",
    "ensure_well_formed",

    # exceptions
    "CoreError",
    "InvalidTimeWindow",
    "InvalidWindowSequence",
    "InvalidWindowArrays",
]
