#!/usr/bin/env python3
"""Quick perf benchmark for muil parsing."""

from __future__ import annotations

import argparse
import statistics
import time
from pathlib import Path

from tqdm import tqdm

from muilpy.parser import parse_from_bytes


def _collect_muil_files(root: Path) -> list[Path]:
    return [path for path in sorted(root.rglob("*.muil")) if path.is_file()]


def _run_once(
    payloads: list[bytes],
    *,
    label: str,
    show_progress: bool,
) -> tuple[float, int, int]:
    start = time.perf_counter()
    total_components = 0
    total_diagnostics = 0
    iterator = tqdm(payloads, desc=label, unit="file") if show_progress else payloads
    for data in iterator:
        parsed = parse_from_bytes(data)
        total_components += len(parsed.program.components)
        total_diagnostics += len(parsed.diagnostics)
    duration = time.perf_counter() - start
    return duration, total_components, total_diagnostics


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark muil parsing throughput")
    parser.add_argument("root", type=Path, help="Directory searched recursively for .muil files")
    parser.add_argument("--runs", type=int, default=5, help="Measured runs")
    parser.add_argument("--warmups", type=int, default=1, help="Warmup runs")
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable tqdm progress bars (useful for pure timing)",
    )
    args = parser.parse_args()

    root: Path = args.root
    if not root.exists() or not root.is_dir():
        raise SystemExit(f"Invalid root: {root}")

    files = _collect_muil_files(root)
    if not files:
        raise SystemExit(f"No .muil files found under {root}")
    payloads = [path.read_bytes() for path in files]

    show_progress = not args.no_progress
    warmups = max(args.warmups, 0)
    runs = max(args.runs, 1)

    for warmup_idx in range(warmups):
        _run_once(payloads, label=f"warmup {warmup_idx + 1}/{warmups}", show_progress=show_progress)

    timings: list[float] = []
    components_count = 0
    diagnostics_count = 0
    for run_idx in range(runs):
        duration, components_count, diagnostics_count = _run_once(
            payloads,
            label=f"run {run_idx + 1}/{runs}",
            show_progress=show_progress,
        )
        timings.append(duration)

    mean = statistics.mean(timings)
    print(f"Dataset: {root}")
    print(f"Files: {len(files)}")
    print(f"Components: {components_count}")
    print(f"Diagnostics: {diagnostics_count}")
    print(f"Runs: {len(timings)} (warmups={warmups})")
    print(f"Best:   {min(timings):.4f}s")
    print(f"Median: {statistics.median(timings):.4f}s")
    print(f"Mean:   {mean:.4f}s")
    print(f"Worst:  {max(timings):.4f}s")
    print(f"Files/s (mean): {len(files) / mean:.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
