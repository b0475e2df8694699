"""Typing helpers shared by the sorting routines."""

from __future__ import annotations

from typing import Any, Callable, MutableSequence, Protocol, TypeVar


class Comparable(Protocol):
    def __lt__(self, other: Any, /) -> bool: ...

    def __gt__(self, other: Any, /) -> bool: ...


T = TypeVar("T", bound=Comparable)

SortFunction = Callable[[MutableSequence[Any]], None]
