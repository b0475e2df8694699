"""Visualization helpers for benchmark reports."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import matplotlib.pyplot as plt

from .benchmark import BenchmarkResult

METRICS = ("time_ms", "comparisons")


def plot_benchmark(
    results: Sequence[BenchmarkResult],
    out_path: Path,
    metric: str = "time_ms",
    dataset: str | None = None,
) -> None:
    """Plot *metric* against input size, one line per algorithm."""

    if metric not in METRICS:
        raise ValueError(f"Unknown metric {metric!r}; choose from {', '.join(METRICS)}")
    rows = [row for row in results if dataset is None or row.dataset == dataset]
    if not rows:
        raise RuntimeError("No data to plot")

    series: dict[str, dict[int, list[float]]] = {}
    for row in rows:
        series.setdefault(row.algorithm, {}).setdefault(row.size, []).append(float(getattr(row, metric)))

    plt.figure(figsize=(6, 4))
    for algorithm, by_size in sorted(series.items()):
        sizes = sorted(by_size)
        values = [sum(by_size[size]) / len(by_size[size]) for size in sizes]
        plt.plot(sizes, values, marker="o", label=algorithm)
    plt.xlabel("size")
    plt.ylabel(metric)
    plt.title(f"{metric} by size ({dataset or 'all datasets'})")
    plt.legend()
    out_path.parent.mkdir(parents=True, exist_ok=True)
    plt.tight_layout()
    plt.savefig(out_path)
    plt.close()
