"""Name based lookup of the sorting routines."""

from __future__ import annotations

from functools import partial

from ._types import SortFunction
from .bubble import sort_bubble
from .insertion import sort_insertion
from .merge import sort_merge

ALGORITHMS: dict[str, SortFunction] = {
    "bubble": sort_bubble,
    "insertion": sort_insertion,
    "merge": sort_merge,
}


def available_algorithms() -> list[str]:
    return sorted(ALGORITHMS)


def get_algorithm(name: str, *, stable_merge: bool = False) -> SortFunction:
    """Return the routine registered under *name*.

    ``stable_merge`` selects the left-favouring tie-break for merge sort and
    is ignored by the other algorithms.
    """

    try:
        func = ALGORITHMS[name]
    except KeyError:
        choices = ", ".join(available_algorithms())
        raise ValueError(f"Unknown algorithm {name!r}; choose from {choices}") from None
    if func is sort_merge and stable_merge:
        return partial(sort_merge, stable=True)
    return func
