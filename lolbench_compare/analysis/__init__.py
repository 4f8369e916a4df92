"""Joining records into a benchmark table and comparing toolchains."""

from .comparison import compare, percent_difference
from .join import BenchmarkTable, build_benchmark_table, index_measurements

__all__ = [
    "BenchmarkTable",
    "build_benchmark_table",
    "compare",
    "index_measurements",
    "percent_difference",
]
