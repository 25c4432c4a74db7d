#!/usr/bin/env python3
"""Quick perf benchmark for RSML lexing and tree building."""

from __future__ import annotations

import argparse
import cProfile
import io
from pathlib import Path
import pstats
import statistics
import time

from tqdm import tqdm

from rsmlpy.parser import parse_result


def _collect_rsml_files(root: Path) -> list[Path]:
    return [path for path in sorted(root.rglob("*.rsml")) if path.is_file()]


def _run_once(
    sources: list[str],
    *,
    label: str,
    show_progress: bool,
) -> tuple[float, int, int, int]:
    start = time.perf_counter()
    total_tokens = 0
    total_nodes = 0
    total_diagnostics = 0
    iterator = tqdm(sources, desc=label, unit="file") if show_progress else sources
    for text in iterator:
        parsed = parse_result(text)
        total_tokens += len(parsed.tokens)
        total_nodes += len(parsed.arena)
        total_diagnostics += len(parsed.diagnostics)
    duration = time.perf_counter() - start
    return duration, total_tokens, total_nodes, total_diagnostics


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark RSML parsing throughput")
    parser.add_argument("root", type=Path, help="Directory searched recursively for .rsml files")
    parser.add_argument("--runs", type=int, default=5, help="Measured runs")
    parser.add_argument("--warmups", type=int, default=1, help="Warmup runs")
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable tqdm progress bars (useful for pure timing)",
    )
    parser.add_argument("--profile", action="store_true", help="Run cProfile and print top hotspots")
    parser.add_argument(
        "--profile-top",
        type=int,
        default=30,
        help="Number of cProfile rows to print (default: 30)",
    )
    parser.add_argument(
        "--profile-sort",
        type=str,
        default="tottime",
        help="cProfile sort key (default: tottime, common: cumulative)",
    )
    args = parser.parse_args()

    root: Path = args.root
    if not root.is_dir():
        raise SystemExit(f"Invalid root: {root}")

    files = _collect_rsml_files(root)
    if not files:
        raise SystemExit(f"No .rsml files found under {root}")
    sources = [path.read_text(encoding="utf-8") for path in files]

    show_progress = not args.no_progress
    warmups = max(args.warmups, 0)
    runs = max(args.runs, 1)

    def _benchmark() -> tuple[list[float], int, int, int]:
        for warmup_idx in range(warmups):
            _run_once(sources, label=f"warmup {warmup_idx + 1}/{warmups}", show_progress=show_progress)

        timings: list[float] = []
        tokens = nodes = diagnostics = 0
        for run_idx in range(runs):
            duration, tokens, nodes, diagnostics = _run_once(
                sources,
                label=f"run {run_idx + 1}/{runs}",
                show_progress=show_progress,
            )
            timings.append(duration)
        return timings, tokens, nodes, diagnostics

    if args.profile:
        profiler = cProfile.Profile()
        profiler.enable()
        timings, tokens, nodes, diagnostics = _benchmark()
        profiler.disable()
        stream = io.StringIO()
        stats = pstats.Stats(profiler, stream=stream)
        stats.sort_stats(args.profile_sort).print_stats(max(args.profile_top, 1))
        print("\n[cProfile top functions]")
        print(stream.getvalue())
    else:
        timings, tokens, nodes, diagnostics = _benchmark()

    mean = statistics.mean(timings)
    print(f"Dataset: {root}")
    print(f"Files: {len(files)}")
    print(f"Tokens: {tokens}")
    print(f"Nodes: {nodes}")
    print(f"Diagnostics: {diagnostics}")
    print(f"Runs: {len(timings)} (warmups={warmups})")
    print(f"Best:   {min(timings):.4f}s")
    print(f"Median: {statistics.median(timings):.4f}s")
    print(f"Mean:   {mean:.4f}s")
    print(f"Worst:  {max(timings):.4f}s")
    print(f"Files/s (mean):  {len(files) / mean:.1f}")
    print(f"Tokens/s (mean): {tokens / mean:.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
