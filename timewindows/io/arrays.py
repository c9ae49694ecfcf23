from __future__ import annotations

from datetime import timezone
from typing import Iterable, Iterator

import numpy as np

from timewindows.core import MAX_TIME, MIN_TIME, InvalidWindowArrays, TimeWindow

# datetime64 reaches far beyond what datetime can hold
_LOWEST = np.datetime64(MIN_TIME.replace(tzinfo=None), "us")
_HIGHEST = np.datetime64(MAX_TIME.replace(tzinfo=None), "us")


def _to_datetime64(point) -> np.datetime64:
    # numpy has no timezone support: store UTC wall time
    return np.datetime64(point.astimezone(timezone.utc).replace(tzinfo=None), "us")


def to_arrays(windows: Iterable[TimeWindow]) -> tuple[np.ndarray, np.ndarray]:
    """Materialize `windows` into (starts, ends) datetime64[us] arrays.

    Parameters
    ----------
    windows:
        Any window sequence; it is consumed completely.

    Returns
    -------
    starts, ends
        1D arrays of equal length, UTC. The MIN_TIME / MAX_TIME sentinels map
        to year 1 / year 9999 like any other point.
    """
    starts: list[np.datetime64] = []
    ends: list[np.datetime64] = []
    for w in windows:
        starts.append(_to_datetime64(w.start))
        ends.append(_to_datetime64(w.end))

    return (
        np.array(starts, dtype="datetime64[us]"),
        np.array(ends, dtype="datetime64[us]"),
    )


def from_arrays(starts, ends) -> Iterator[TimeWindow]:
    """Rebuild UTC windows from start/end arrays.

    Rows where start >= end describe no interval and are skipped. The rows
    are yielded in array order; sorting is the caller's concern.
    """
    s = np.asarray(starts, dtype="datetime64[us]")
    e = np.asarray(ends, dtype="datetime64[us]")

    if s.ndim != 1:
        raise InvalidWindowArrays(f"`starts` must be 1D, got shape {s.shape}")
    if e.ndim != 1:
        raise InvalidWindowArrays(f"`ends` must be 1D, got shape {e.shape}")
    if s.size != e.size:
        raise InvalidWindowArrays(
            f"`starts` and `ends` must have same length, got {s.size} vs {e.size}"
        )
    if np.isnat(s).any() or np.isnat(e).any():
        raise InvalidWindowArrays("`starts`/`ends` contain NaT values.")
    if s.size > 0 and (
        min(s.min(), e.min()) < _LOWEST or max(s.max(), e.max()) > _HIGHEST
    ):
        raise InvalidWindowArrays(
            f"`starts`/`ends` must lie within {_LOWEST} .. {_HIGHEST}."
        )

    return _iter_windows(s, e)


def _iter_windows(s: np.ndarray, e: np.ndarray) -> Iterator[TimeWindow]:
    for start, end in zip(s.tolist(), e.tolist()):
        w = TimeWindow.create(
            start.replace(tzinfo=timezone.utc),
            end.replace(tzinfo=timezone.utc),
        )
        if w is not None:
            yield w
