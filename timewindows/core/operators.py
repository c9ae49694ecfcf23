# timewindows/core/operators.py
"""
Lazy operators over sequences of TimeWindow.

Every input sequence must be sorted by start, non-overlapping and maximal
(no two windows touch without being merged). This is a precondition, not
something the operators check: malformed input gives unspecified output.
Use `ensure_well_formed()` to validate untrusted input explicitly.

Every output sequence satisfies the same conditions. Operators are generators;
they pull input only as far as needed to produce the next window.
"""
from __future__ import annotations

import logging
from dataclasses import replace
from datetime import timedelta
from typing import Iterable, Iterator

from .exceptions import InvalidWindowSequence
from .timepoint import MAX_TIME, MIN_TIME, earliest
from .window import TimeWindow

logger = logging.getLogger(__name__)


def negate(windows: Iterable[TimeWindow]) -> Iterator[TimeWindow]:
    """
    Yield the gaps between `windows`, bounded by -inf and +inf.

    An empty input yields ALWAYS; an input of ALWAYS yields nothing.
    """
    previous = MIN_TIME
    for w in windows:
        if w.start != previous:
            yield TimeWindow(previous, w.start)
        previous = w.end

    if previous != MAX_TIME:
        yield TimeWindow(previous, MAX_TIME)


def extend(windows: Iterable[TimeWindow], delta: timedelta) -> Iterator[TimeWindow]:
    """
    Grow every window by `delta` at both ends and merge what now overlaps or touches.

    A negative `delta` erodes; windows eroded away are dropped.
    """
    pending: TimeWindow | None = None
    for w in windows:
        extended = w.extend(delta)
        if extended is None:
            continue
        if pending is None:
            pending = extended
        elif extended.start <= pending.end:
            # starts are non-decreasing, only the end can move
            pending = replace(pending, end=max(pending.end, extended.end))
        else:
            yield pending
            pending = extended

    if pending is not None:
        yield pending


def offset(windows: Iterable[TimeWindow], delta: timedelta) -> Iterator[TimeWindow]:
    """Shift every window by `delta`. Unbounded edges stay unbounded."""
    for w in windows:
        shifted = w.offset(delta)
        if shifted is not None:
            yield shifted


def intersect(sequences: Iterable[Iterable[TimeWindow]]) -> Iterator[TimeWindow]:
    """
    Yield the windows covered by every one of `sequences`.

    One cursor is kept per sequence. Each round intersects the current windows,
    then advances every cursor whose window ends at the earliest end. The merge
    stops as soon as a cursor that must advance is exhausted.
    """
    iterators = [iter(s) for s in sequences]
    if not iterators:
        logger.debug("intersect: no input sequences")
        return

    current: list[TimeWindow] = []
    for it in iterators:
        first = next(it, None)
        if first is None:
            logger.debug("intersect: input sequence %d is empty", len(current))
            return
        current.append(first)

    while True:
        candidate: TimeWindow | None = current[0]
        for w in current[1:]:
            candidate = candidate.intersect(w)
            if candidate is None:
                break

        reference = earliest(w.end for w in current)

        if candidate is not None:
            yield candidate

        for i, it in enumerate(iterators):
            if current[i].end <= reference:
                following = next(it, None)
                if following is None:
                    logger.debug("intersect: input sequence %d exhausted", i)
                    return
                current[i] = following


def union(sequences: Iterable[Iterable[TimeWindow]]) -> Iterator[TimeWindow]:
    """
    Yield the windows covered by any of `sequences`.

    Complement of the intersection of complements, so it shares the edge
    handling of negate() and intersect(). With no sequences at all this is
    the negation of an empty intersection, i.e. ALWAYS.
    """
    return negate(intersect(negate(s) for s in sequences))


def ensure_well_formed(windows: Iterable[TimeWindow]) -> Iterator[TimeWindow]:
    """
    Pass `windows` through unchanged, raising InvalidWindowSequence on the
    first window that is not a TimeWindow or does not start strictly after
    the end of its predecessor.
    """
    previous: TimeWindow | None = None
    for index, w in enumerate(windows):
        if not isinstance(w, TimeWindow):
            raise InvalidWindowSequence(
                f"Element {index} is {type(w).__name__}, expected TimeWindow."
            )
        if previous is not None and w.start <= previous.end:
            kind = "touches" if w.start == previous.end else "overlaps or precedes"
            raise InvalidWindowSequence(
                f"Window {index} {w} {kind} the previous window {previous}."
            )
        previous = w
        yield w
