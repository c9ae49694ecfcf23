# timewindows/core/timepoint.py
"""
Time points and their sentinels.

Time points are timezone-aware datetimes. The representable extremes double
as -infinity / +infinity, so arithmetic on them saturates instead of raising.
"""
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Iterable

MIN_TIME = datetime.min.replace(tzinfo=timezone.utc)
MAX_TIME = datetime.max.replace(tzinfo=timezone.utc)


def is_aware(point: object) -> bool:
    return (
        isinstance(point, datetime)
        and point.tzinfo is not None
        and point.utcoffset() is not None
    )


def is_sentinel(point: datetime) -> bool:
    return point == MIN_TIME or point == MAX_TIME


def shift(point: datetime, delta: timedelta) -> datetime:
    """
    Return `point + delta`, keeping sentinels pinned.

    Results outside the datetime range saturate to MIN_TIME / MAX_TIME.
    """
    if is_sentinel(point):
        return point
    try:
        return point + delta
    except OverflowError:
        return MAX_TIME if delta > timedelta(0) else MIN_TIME


def earliest(points: Iterable[datetime]) -> datetime:
    """Smallest of `points`; MAX_TIME when there are none."""
    result = MAX_TIME
    for p in points:
        if p < result:
            result = p
    return result
