from __future__ import annotations

from pathlib import Path

import pytest

from sortkit.benchmark import BenchmarkResult
from sortkit.viz import plot_benchmark


def _rows() -> list[BenchmarkResult]:
    return [
        BenchmarkResult("bubble", 10, "random", 0.2, 45, True),
        BenchmarkResult("bubble", 100, "random", 9.0, 4950, True),
        BenchmarkResult("merge", 10, "random", 0.1, 22, True),
        BenchmarkResult("merge", 100, "random", 0.8, 540, True),
    ]


def test_plot_benchmark_writes_png(tmp_path: Path) -> None:
    out = tmp_path / "plots" / "bench.png"
    plot_benchmark(_rows(), out, metric="comparisons", dataset="random")
    assert out.exists()
    assert out.stat().st_size > 0


def test_plot_benchmark_errors(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        plot_benchmark(_rows(), tmp_path / "x.png", metric="memory")
    with pytest.raises(RuntimeError):
        plot_benchmark(_rows(), tmp_path / "x.png", dataset="sorted")
