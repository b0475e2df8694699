from __future__ import annotations

import random

import pytest

from sortkit import ALGORITHMS, MergeInvariantError, sort_bubble, sort_insertion, sort_merge
from sortkit.merge import _merge


class Item:
    """Orders by ``key`` only so equal keys stay distinguishable by ``label``."""

    def __init__(self, key: int, label: str) -> None:
        self.key = key
        self.label = label

    def __lt__(self, other: Item) -> bool:
        return self.key < other.key

    def __gt__(self, other: Item) -> bool:
        return self.key > other.key

    def __repr__(self) -> str:
        return f"Item({self.key}, {self.label!r})"


EXAMPLES = [
    ([1, 3, 2, 11, 6, 8, 9, 2, 3, 1], [1, 1, 2, 2, 3, 3, 6, 8, 9, 11]),
    ([1, 3, 2, 11, 6, 8, 9, -1, 2, 3, 1], [-1, 1, 1, 2, 2, 3, 3, 6, 8, 9, 11]),
    ([1.01, 1.00, 10.5, 0.8, 0.001], [0.001, 0.8, 1.00, 1.01, 10.5]),
    (["a", "c", "b"], ["a", "b", "c"]),
    (["Test", "A old day", "A new day"], ["A new day", "A old day", "Test"]),
]


def test_known_examples_for_every_algorithm() -> None:
    for name, func in ALGORITHMS.items():
        for values, expected in EXAMPLES:
            data = list(values)
            assert func(data) is None
            assert data == expected, name


def test_empty_and_singleton_are_unchanged() -> None:
    for func in ALGORITHMS.values():
        empty: list[int] = []
        func(empty)
        assert empty == []

        single = [42]
        func(single)
        assert single == [42]


def test_random_inputs_match_builtin_sorted() -> None:
    rng = random.Random(123)
    for _ in range(50):
        size = rng.randint(0, 60)
        values = [rng.randint(-20, 20) for _ in range(size)]
        for name, func in ALGORITHMS.items():
            data = list(values)
            func(data)
            assert data == sorted(values), name


def test_sorting_is_idempotent() -> None:
    values = [5, 3, 9, 1, 5, 0]
    for func in ALGORITHMS.values():
        data = list(values)
        func(data)
        once = list(data)
        func(data)
        assert data == once


def test_bubble_and_insertion_are_stable() -> None:
    items = [Item(2, "a"), Item(1, "b"), Item(2, "c"), Item(1, "d"), Item(0, "e")]
    for func in (sort_bubble, sort_insertion):
        data = list(items)
        func(data)
        assert [item.label for item in data] == ["e", "b", "d", "a", "c"]


def test_merge_default_tie_break_takes_right_half() -> None:
    data = [Item(1, "left"), Item(1, "right")]
    sort_merge(data)
    assert [item.label for item in data] == ["right", "left"]


def test_merge_stable_tie_break_takes_left_half() -> None:
    items = [Item(2, "a"), Item(1, "b"), Item(2, "c"), Item(1, "d"), Item(0, "e")]
    data = list(items)
    sort_merge(data, stable=True)
    assert [item.label for item in data] == ["e", "b", "d", "a", "c"]


def test_merge_handles_odd_split_leftovers() -> None:
    data = [2, 3, 1]
    sort_merge(data)
    assert data == [1, 2, 3]


def test_incomparable_elements_raise_type_error() -> None:
    for func in ALGORITHMS.values():
        with pytest.raises(TypeError):
            func([1, "a", 2])


def test_merge_reports_length_mismatch_as_invariant_error() -> None:
    # A midpoint past the end of the range drains more items than the range holds.
    with pytest.raises(MergeInvariantError, match="wrote 3 item"):
        _merge([1, 2, 3], [None] * 3, 0, 3, 2, False)
