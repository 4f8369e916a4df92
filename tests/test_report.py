"""Tests for report rendering."""

import json
import math

from rich.console import Console

from lolbench_compare.report import (
    format_json,
    format_number,
    format_pipe_table,
    print_rich_table,
)
from lolbench_compare.storage.models import ComparisonRow


def make_row(benchmark: str, base: float, new: float, diff: float) -> ComparisonRow:
    return ComparisonRow(benchmark=benchmark, base_value=base, new_value=new, percent_diff=diff)


def test_format_number() -> None:
    """Test numbers render without redundant fractional parts."""
    assert format_number(1000.0) == "1000"
    assert format_number(-50.0) == "-50"
    assert format_number(12.5) == "12.5"
    assert format_number(0.1) == "0.1"
    assert format_number(0.00001) == "0.00001"
    assert format_number(1.5e-07) == "0.00000015"
    assert format_number(1e16) == "10000000000000000"
    assert format_number(-0.0) == "-0"
    assert format_number(math.inf) == "inf"
    assert format_number(-math.inf) == "-inf"
    assert format_number(math.nan) == "NaN"


def test_pipe_table() -> None:
    """Test the header and one line per row in fixed column order."""
    rows = [make_row("sort_u32", 1000.0, 1200.0, 20.0), make_row("fib", 8.0, 7.0, -12.5)]

    lines = format_pipe_table(rows, "stable", "nightly")

    assert lines == [
        "Benchmark name | stable | nightly | % diff",
        "sort_u32 | 1000 | 1200 | 20",
        "fib | 8 | 7 | -12.5",
    ]


def test_pipe_table_empty() -> None:
    assert format_pipe_table([], "a", "b") == ["Benchmark name | a | b | % diff"]


def test_json_report() -> None:
    """Test the JSON document keeps rank order and encodes non-finite values."""
    rows = [make_row("zero", 0.0, 1.0, math.inf), make_row("fib", 8.0, 7.0, -12.5)]

    document = json.loads(format_json(rows, "stable", "nightly", "instructions"))

    assert document["base_toolchain"] == "stable"
    assert document["new_toolchain"] == "nightly"
    assert document["event"] == "instructions"
    assert [r["benchmark"] for r in document["results"]] == ["zero", "fib"]
    assert document["results"][0]["percent_diff"] == "inf"
    assert document["results"][1]["percent_diff"] == -12.5


def test_rich_table() -> None:
    """Test the rich table lists every benchmark."""
    console = Console(record=True, width=120, color_system=None)
    rows = [make_row("sort_u32", 1000.0, 1200.0, 20.0), make_row("[fib]", 8.0, 7.0, -12.5)]

    print_rich_table(rows, "stable", "nightly", console=console)
    text = console.export_text()

    assert "sort_u32" in text
    assert "[fib]" in text
    assert "nightly" in text
    assert "-12.5" in text
