"""
lolbench-compare

Compares lolbench benchmark results between two toolchains and ranks
benchmarks by their percentage change.
"""

__version__ = "0.1.0"

from lolbench_compare.analysis import build_benchmark_table, compare, percent_difference
from lolbench_compare.errors import (
    CompareError,
    MissingEventError,
    MissingToolchainError,
    RecordAccessError,
    RecordParseError,
)
from lolbench_compare.storage import (
    ComparisonRow,
    Measurement,
    RunPlan,
    load_measurements,
    load_run_plans,
)

__all__ = [
    "__version__",
    "ComparisonRow",
    "CompareError",
    "Measurement",
    "MissingEventError",
    "MissingToolchainError",
    "RecordAccessError",
    "RecordParseError",
    "RunPlan",
    "build_benchmark_table",
    "compare",
    "load_measurements",
    "load_run_plans",
    "percent_difference",
]
