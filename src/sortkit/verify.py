"""Property checks for sorted output."""

from __future__ import annotations

import logging
from typing import Any, Callable, Sequence

from .registry import available_algorithms, get_algorithm

logger = logging.getLogger(__name__)


class DisagreementError(RuntimeError):
    """Raised when two algorithms produce different orderings of the same input."""

    def __init__(self, results: dict[str, list[Any]]) -> None:
        self.results = results
        names = ", ".join(results)
        super().__init__(f"Algorithms disagree on sorted output: {names}")


def is_sorted(values: Sequence[Any]) -> bool:
    """Return True if no element is ``<`` its predecessor."""

    return all(not values[i + 1] < values[i] for i in range(len(values) - 1))


def is_permutation(original: Sequence[Any], result: Sequence[Any]) -> bool:
    """Return True if *result* holds exactly the elements of *original*.

    Elements only need ``==``, so unhashable values are supported.
    """

    if len(original) != len(result):
        return False
    remaining = list(result)
    for item in original:
        for index, candidate in enumerate(remaining):
            if candidate == item:
                del remaining[index]
                break
        else:
            return False
    return not remaining


def is_stable(original: Sequence[Any], result: Sequence[Any], key: Callable[[Any], Any]) -> bool:
    """Return True if items with equal keys keep their input order.

    Items are tracked by identity, so *original* and *result* must hold the
    same objects.
    """

    position = {id(item): index for index, item in enumerate(original)}
    for prev, curr in zip(result, result[1:]):
        if key(prev) == key(curr) and position[id(prev)] > position[id(curr)]:
            return False
    return True


def check_algorithm(name: str, values: Sequence[Any]) -> list[str]:
    """Sort a copy of *values* with *name* and list the properties it violates."""

    func = get_algorithm(name)
    result = list(values)
    func(result)
    failures: list[str] = []
    if not is_sorted(result):
        failures.append("sorted")
    if not is_permutation(values, result):
        failures.append("permutation")
    if failures:
        logger.warning("%s sort violated %s on %s item(s)", name, ", ".join(failures), len(values))
    return failures


def _same_order(first: Sequence[Any], second: Sequence[Any]) -> bool:
    if len(first) != len(second):
        return False
    return all(not a < b and not b < a for a, b in zip(first, second))


def check_agreement(values: Sequence[Any], algorithms: Sequence[str] | None = None) -> dict[str, list[Any]]:
    """Sort a copy of *values* with every algorithm and require the same order.

    Outputs are compared position by position with ``<`` only, so equal
    elements placed differently by merge sort's tie-break still agree.
    """

    names = list(algorithms) if algorithms is not None else available_algorithms()
    results: dict[str, list[Any]] = {}
    for name in names:
        result = list(values)
        get_algorithm(name)(result)
        results[name] = result

    outputs = list(results.values())
    if any(not _same_order(outputs[0], output) for output in outputs[1:]):
        raise DisagreementError(results)
    logger.debug("%s algorithm(s) agree on %s item(s)", len(names), len(values))
    return results
