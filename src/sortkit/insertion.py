"""Insertion sort."""

from __future__ import annotations

import logging
from typing import MutableSequence

from ._types import T

logger = logging.getLogger(__name__)


def sort_insertion(sequence: MutableSequence[T]) -> None:
    """Sort *sequence* in place by growing a sorted prefix.

    Each element is swapped leftward while its left neighbour is strictly
    greater. Equal neighbours stop the shift, which keeps the sort stable.
    """

    n = len(sequence)
    if n < 2:
        return

    for i in range(1, n):
        j = i
        while j > 0 and sequence[j - 1] > sequence[j]:
            sequence[j - 1], sequence[j] = sequence[j], sequence[j - 1]
            j -= 1

    logger.debug("insertion sort finished %s item(s)", n)
