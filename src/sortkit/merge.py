"""Top-down merge sort with a shared auxiliary buffer."""

from __future__ import annotations

import logging
from typing import Any, MutableSequence

from ._types import T

logger = logging.getLogger(__name__)


class MergeInvariantError(AssertionError):
    """Raised when a merge writes a different number of items than it read."""


def sort_merge(sequence: MutableSequence[T], *, stable: bool = False) -> None:
    """Sort *sequence* in place using merge sort.

    The sequence is split at ``len // 2``, both halves are sorted recursively
    and then merged through an auxiliary buffer. One buffer of the full length
    is allocated per call and reused by every recursion level.

    By default a tie between the heads of the two halves is resolved by taking
    the right-hand element, so equal elements may change their relative order.
    Pass ``stable=True`` to take the left-hand element on ties instead.
    """

    n = len(sequence)
    if n < 2:
        return

    buffer: list[Any] = [None] * n
    _sort_range(sequence, buffer, 0, n, stable)
    logger.debug("merge sort finished %s item(s) (stable=%s)", n, stable)


def _sort_range(
    sequence: MutableSequence[T],
    buffer: list[Any],
    lo: int,
    hi: int,
    stable: bool,
) -> None:
    if hi - lo < 2:
        return
    mid = lo + (hi - lo) // 2
    _sort_range(sequence, buffer, lo, mid, stable)
    _sort_range(sequence, buffer, mid, hi, stable)
    _merge(sequence, buffer, lo, mid, hi, stable)


def _merge(
    sequence: MutableSequence[T],
    buffer: list[Any],
    lo: int,
    mid: int,
    hi: int,
    stable: bool,
) -> None:
    left, right, out = lo, mid, lo

    while left < mid and right < hi:
        if stable:
            take_left = not sequence[right] < sequence[left]
        else:
            take_left = sequence[left] < sequence[right]
        if take_left:
            buffer[out] = sequence[left]
            left += 1
        else:
            buffer[out] = sequence[right]
            right += 1
        out += 1

    # Drain whichever half still has items, e.g. [2, 3] | [1] leaves 3 behind.
    while left < mid:
        buffer[out] = sequence[left]
        left += 1
        out += 1
    while right < hi:
        buffer[out] = sequence[right]
        right += 1
        out += 1

    if out != hi:
        raise MergeInvariantError(f"merge of [{lo}, {hi}) wrote {out - lo} item(s), expected {hi - lo}")

    for index in range(lo, hi):
        sequence[index] = buffer[index]
