"""Bubble sort."""

from __future__ import annotations

import logging
from typing import MutableSequence

from ._types import T

logger = logging.getLogger(__name__)


def sort_bubble(sequence: MutableSequence[T]) -> None:
    """Sort *sequence* in place by repeated adjacent swaps.

    Each pass compares every adjacent pair and swaps those where the left
    element is strictly greater. Passes repeat until one completes without a
    swap. Equal elements are never swapped, so the sort is stable.

    Worst case O(n^2) comparisons and swaps; an already sorted sequence costs
    a single pass of n - 1 comparisons and no swaps.
    """

    n = len(sequence)
    if n < 2:
        return

    passes = 0
    while True:
        passes += 1
        swapped = False
        for i in range(n - 1):
            if sequence[i] > sequence[i + 1]:
                sequence[i], sequence[i + 1] = sequence[i + 1], sequence[i]
                swapped = True
        if not swapped:
            break

    logger.debug("bubble sort finished %s item(s) in %s pass(es)", n, passes)
