# timewindows/core/window.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

from .exceptions import InvalidTimeWindow
from .timepoint import MAX_TIME, MIN_TIME, is_aware, shift


@dataclass(frozen=True, slots=True)
class TimeWindow:
    """
    Half-open time interval [start, end).

    Design goals:
    - valid by construction: start < end, both timezone-aware
    - immutable: every transformation returns a new TimeWindow
    - "no interval" is None, never a zero or negative width window

    Operations that may produce an invalid range return `TimeWindow | None`
    and go through `create()`; calling the constructor directly with an
    invalid range raises InvalidTimeWindow.
    """
    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if not is_aware(self.start) or not is_aware(self.end):
            raise InvalidTimeWindow(
                "TimeWindow.start and TimeWindow.end must be timezone-aware datetimes."
            )
        if not self.start < self.end:
            raise InvalidTimeWindow(
                f"TimeWindow.start ({self.start}) must be before end ({self.end})."
            )

    @classmethod
    def create(cls, start: datetime, end: datetime) -> "TimeWindow | None":
        """Build [start, end), or None when start >= end."""
        if start < end:
            return cls(start, end)
        return None

    @classmethod
    def always(cls) -> "TimeWindow":
        return cls(MIN_TIME, MAX_TIME)

    def __str__(self) -> str:
        start = "-inf" if self.start == MIN_TIME else self.start.isoformat()
        end = "+inf" if self.end == MAX_TIME else self.end.isoformat()
        return f"[{start}, {end})"

    # ---- derived properties ----
    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    @property
    def is_bounded(self) -> bool:
        return self.start != MIN_TIME and self.end != MAX_TIME

    # ---- predicates ----
    def contains(self, point: datetime) -> bool:
        # right edge is exclusive
        return self.start <= point < self.end

    def __contains__(self, point: object) -> bool:
        return is_aware(point) and self.contains(point)  # type: ignore[arg-type]

    # ---- transformations ----
    def intersect(self, other: "TimeWindow") -> "TimeWindow | None":
        return TimeWindow.create(
            max(self.start, other.start),
            min(self.end, other.end),
        )

    def extend(self, delta: timedelta) -> "TimeWindow | None":
        """
        Grow both edges outward by `delta` (shrink when negative).

        Unbounded edges stay pinned. Returns None if erosion consumes the window.
        """
        return TimeWindow.create(shift(self.start, -delta), shift(self.end, delta))

    def offset(self, delta: timedelta) -> "TimeWindow | None":
        # None only when both edges saturate to the same sentinel
        return TimeWindow.create(shift(self.start, delta), shift(self.end, delta))


ALWAYS = TimeWindow.always()
