"""Command line interface for sortkit."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Callable

from .benchmark import DATASET_KINDS, results_from_json, results_to_json, run_benchmark
from .config import load_config, load_settings
from .registry import available_algorithms, get_algorithm
from .verify import DisagreementError, check_agreement
from .viz import plot_benchmark

logger = logging.getLogger(__name__)

VALUE_TYPES: dict[str, Callable[[str], Any]] = {"int": int, "float": float, "str": str}


def _resolve_config(args: argparse.Namespace) -> dict[str, Any]:
    cfg = load_config(args.config, overrides=load_settings().as_overrides())
    if getattr(args, "algorithm", None):
        cfg["algorithm"] = args.algorithm
    if getattr(args, "stable", False):
        cfg["merge"]["stable"] = True
    return cfg


def _parse_values(raw: list[str], type_name: str) -> list[Any]:
    if not raw:
        raw = sys.stdin.read().split()
    convert = VALUE_TYPES[type_name]
    try:
        return [convert(item) for item in raw]
    except ValueError as exc:
        raise SystemExit(f"Cannot parse values as {type_name}: {exc}") from exc


def _split_list(text: str) -> list[str]:
    return [item.strip() for item in text.split(",") if item.strip()]


def cmd_sort(args: argparse.Namespace) -> None:
    cfg = args.cfg
    values = _parse_values(args.values, args.type)
    try:
        func = get_algorithm(cfg["algorithm"], stable_merge=bool(cfg["merge"]["stable"]))
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc
    func(values)
    print(" ".join(str(value) for value in values))


def cmd_check(args: argparse.Namespace) -> None:
    values = _parse_values(args.values, args.type)
    try:
        results = check_agreement(values)
    except DisagreementError as exc:
        for name, result in exc.results.items():
            print(f"{name}: {' '.join(str(value) for value in result)}")
        raise SystemExit(1) from exc
    for name, result in results.items():
        print(f"{name}: {' '.join(str(value) for value in result)}")
    print("all algorithms agree")


def cmd_bench(args: argparse.Namespace) -> None:
    cfg = args.cfg
    bench_cfg = cfg["benchmark"]
    sizes = [int(size) for size in _split_list(args.sizes)] if args.sizes else list(bench_cfg["sizes"])
    datasets = _split_list(args.datasets) if args.datasets else list(bench_cfg["datasets"])
    algorithms = _split_list(args.algorithms) if args.algorithms else available_algorithms()
    repeat = args.repeat if args.repeat is not None else int(bench_cfg["repeat"])
    seed = args.seed if args.seed is not None else int(bench_cfg["seed"])
    try:
        results = run_benchmark(
            algorithms,
            sizes,
            datasets,
            repeat=repeat,
            seed=seed,
            stable_merge=bool(cfg["merge"]["stable"]),
        )
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc

    print(f"{'algorithm':<10} {'dataset':<11} {'size':>6} {'time_ms':>10} {'comparisons':>12} ok")
    for row in results:
        print(
            f"{row.algorithm:<10} {row.dataset:<11} {row.size:>6} {row.time_ms:>10.4f} "
            f"{row.comparisons:>12} {'yes' if row.correct else 'NO'}"
        )
    if args.out:
        results_to_json(results, Path(args.out))
        print(f"Report written to {args.out}")


def cmd_viz(args: argparse.Namespace) -> None:
    try:
        results = results_from_json(Path(args.report))
        plot_benchmark(results, Path(args.out), metric=args.metric, dataset=args.dataset)
    except (OSError, ValueError, RuntimeError) as exc:
        raise SystemExit(str(exc)) from exc
    print(f"Plot written to {args.out}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sortkit", description="sortkit command line")
    parser.add_argument("--config", help="YAML configuration file")
    parser.add_argument("--log-level", help="Logging level (overrides configuration)")
    sub = parser.add_subparsers(dest="command", required=True)

    p_sort = sub.add_parser("sort", help="Sort values with one algorithm")
    p_sort.add_argument("values", nargs="*", help="Values to sort; read from stdin when omitted")
    p_sort.add_argument("--algorithm", choices=available_algorithms())
    p_sort.add_argument("--type", choices=sorted(VALUE_TYPES), default="int")
    p_sort.add_argument("--stable", action="store_true", help="Favour the left half on merge ties")
    p_sort.set_defaults(func=cmd_sort)

    p_check = sub.add_parser("check", help="Sort with every algorithm and compare")
    p_check.add_argument("values", nargs="*")
    p_check.add_argument("--type", choices=sorted(VALUE_TYPES), default="int")
    p_check.set_defaults(func=cmd_check)

    p_bench = sub.add_parser("bench", help="Benchmark the algorithms")
    p_bench.add_argument("--sizes", help="Comma separated input sizes")
    p_bench.add_argument("--datasets", help=f"Comma separated kinds: {', '.join(DATASET_KINDS)}")
    p_bench.add_argument("--algorithms", help="Comma separated algorithm names")
    p_bench.add_argument("--repeat", type=int)
    p_bench.add_argument("--seed", type=int)
    p_bench.add_argument("--stable", action="store_true")
    p_bench.add_argument("--out", help="Write the report as JSON")
    p_bench.set_defaults(func=cmd_bench)

    p_viz = sub.add_parser("viz", help="Plot a benchmark report")
    p_viz.add_argument("--report", required=True)
    p_viz.add_argument("--metric", default="time_ms")
    p_viz.add_argument("--dataset")
    p_viz.add_argument("--out", default="artifacts/bench.png")
    p_viz.set_defaults(func=cmd_viz)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        args.cfg = _resolve_config(args)
    except (OSError, ValueError) as exc:
        raise SystemExit(f"Cannot load configuration: {exc}") from exc
    level = str(args.log_level or args.cfg["log_level"]).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise SystemExit(f"Unknown log level {level!r}")
    logging.basicConfig(level=level)
    args.func(args)


if __name__ == "__main__":  # pragma: no cover
    main(sys.argv[1:])
