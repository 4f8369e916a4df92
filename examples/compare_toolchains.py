#!/usr/bin/env python3
"""Example: rank lolbench benchmarks by instruction count change.

This demonstrates the library API behind the command-line tool:
1. Load run-plans and measurements from a data directory
2. Build the benchmark table for one event
3. Compare two toolchains and print the biggest changes
"""

import logging
import sys
from pathlib import Path

from lolbench_compare.analysis.comparison import compare
from lolbench_compare.analysis.join import build_benchmark_table
from lolbench_compare.storage.loader import load_measurements, load_run_plans

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger(__name__)


def main() -> None:
    """Print the ten largest instruction count changes."""
    if len(sys.argv) != 4:
        print("Usage: compare_toolchains.py <data_dir> <base_toolchain> <new_toolchain>")
        sys.exit(1)

    data_dir = Path(sys.argv[1])
    base, new = sys.argv[2], sys.argv[3]

    table = build_benchmark_table(
        load_run_plans(data_dir),
        load_measurements(data_dir),
        "instructions",
    )
    rows = compare(table, base, new)

    print(f"\nTop changes: {base} -> {new}")
    print("=" * 60)
    for row in rows[:10]:
        print(f"  {row.benchmark:<40} {row.percent_diff:+8.2f}%")

    regressions = sum(1 for row in rows if row.is_regression)
    print(f"\n{regressions} of {len(rows)} benchmarks regressed")


if __name__ == "__main__":
    main()
