"""Benchmark harness measuring time and comparison counts."""

from __future__ import annotations

import dataclasses
import json
import logging
import random
import time
from dataclasses import dataclass
from pathlib import Path
from statistics import mean
from typing import Any, Callable, Sequence

from .registry import get_algorithm

LOGGER = logging.getLogger(__name__)

DATASET_KINDS: tuple[str, ...] = ("random", "sorted", "reversed", "few_unique")


@dataclass(slots=True)
class BenchmarkResult:
    algorithm: str
    size: int
    dataset: str
    time_ms: float
    comparisons: int
    correct: bool


class _Counter:
    __slots__ = ("count",)

    def __init__(self) -> None:
        self.count = 0


class _Counted:
    """Wrap a value and count every ordering comparison made against it."""

    __slots__ = ("value", "counter")

    def __init__(self, value: Any, counter: _Counter) -> None:
        self.value = value
        self.counter = counter

    def __lt__(self, other: _Counted) -> bool:
        self.counter.count += 1
        return self.value < other.value

    def __gt__(self, other: _Counted) -> bool:
        self.counter.count += 1
        return self.value > other.value

    def __le__(self, other: _Counted) -> bool:
        self.counter.count += 1
        return self.value <= other.value

    def __ge__(self, other: _Counted) -> bool:
        self.counter.count += 1
        return self.value >= other.value


def generate_dataset(kind: str, size: int, rng: random.Random) -> list[int]:
    """Return *size* integers laid out according to *kind*."""

    if kind == "random":
        return [rng.randint(0, size * 10) for _ in range(size)]
    if kind == "sorted":
        return list(range(size))
    if kind == "reversed":
        return list(range(size, 0, -1))
    if kind == "few_unique":
        return [rng.randint(0, 4) for _ in range(size)]
    raise ValueError(f"Unknown dataset kind {kind!r}; choose from {', '.join(DATASET_KINDS)}")


def count_comparisons(func: Callable[[list[Any]], None], values: Sequence[Any]) -> int:
    """Sort a wrapped copy of *values* with *func* and return the comparisons made."""

    counter = _Counter()
    wrapped = [_Counted(value, counter) for value in values]
    func(wrapped)
    return counter.count


def run_benchmark(
    algorithms: Sequence[str],
    sizes: Sequence[int],
    datasets: Sequence[str] = DATASET_KINDS,
    *,
    repeat: int = 3,
    seed: int = 1337,
    stable_merge: bool = False,
) -> list[BenchmarkResult]:
    """Time every algorithm on every (dataset, size) pair.

    Datasets are generated once per pair from *seed*, so each algorithm sees
    the same input and reruns are reproducible.
    """

    if repeat < 1:
        raise ValueError("Parameter 'repeat' must be at least 1")

    rng = random.Random(seed)
    results: list[BenchmarkResult] = []
    for kind in datasets:
        for size in sizes:
            data = generate_dataset(kind, size, rng)
            expected = sorted(data)
            for name in algorithms:
                func = get_algorithm(name, stable_merge=stable_merge)
                durations: list[float] = []
                correct = True
                for _ in range(repeat):
                    payload = list(data)
                    start = time.perf_counter()
                    func(payload)
                    durations.append((time.perf_counter() - start) * 1000)
                    correct = correct and payload == expected
                comparisons = count_comparisons(func, data)
                result = BenchmarkResult(
                    algorithm=name,
                    size=size,
                    dataset=kind,
                    time_ms=mean(durations),
                    comparisons=comparisons,
                    correct=correct,
                )
                LOGGER.debug(
                    "%s on %s/%s: %.4f ms, %s comparison(s)",
                    name,
                    kind,
                    size,
                    result.time_ms,
                    comparisons,
                )
                if not correct:
                    LOGGER.warning("%s produced incorrect output on %s/%s", name, kind, size)
                results.append(result)

    LOGGER.info(
        "Benchmark finished: %s algorithm(s), %s dataset(s), %s size(s)",
        len(algorithms),
        len(datasets),
        len(sizes),
    )
    return results


def results_to_json(results: Sequence[BenchmarkResult], path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = [dataclasses.asdict(result) for result in results]
    with path.open("w", encoding="utf-8") as fh:
        json.dump(payload, fh, indent=2)


def results_from_json(path: Path) -> list[BenchmarkResult]:
    with path.open("r", encoding="utf-8") as fh:
        payload = json.load(fh)
    return [BenchmarkResult(**row) for row in payload]
