"""
Report rendering for toolchain comparisons.

Produces the pipe-delimited table, a JSON document, or a rich terminal table
from comparison rows. Everything is written to standard output.
"""

import json
import math
from collections.abc import Sequence
from decimal import Decimal
from typing import Any, Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from .storage.models import ComparisonRow


def format_number(value: float) -> str:
    """Render a float in plain decimal with the shortest digits that read back to it.

    Integral values drop the fractional part (``1000``, ``-50``), small and
    large values never use exponent notation (``0.00001``), non-finite
    values render as ``inf``, ``-inf`` and ``NaN``.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        sign = "-" if math.copysign(1.0, value) < 0 else ""
        return f"{sign}{abs(int(value))}"
    return format(Decimal(repr(value)), "f")


def format_pipe_table(
    rows: Sequence[ComparisonRow],
    base_toolchain: str,
    new_toolchain: str,
) -> list[str]:
    """Build the pipe-delimited report lines, header first."""
    lines = [f"Benchmark name | {base_toolchain} | {new_toolchain} | % diff"]
    for row in rows:
        lines.append(
            f"{row.benchmark} | {format_number(row.base_value)} | "
            f"{format_number(row.new_value)} | {format_number(row.percent_diff)}"
        )
    return lines


def _json_number(value: float) -> Any:
    # JSON has no inf/NaN literals
    if math.isfinite(value):
        return value
    return format_number(value)


def format_json(
    rows: Sequence[ComparisonRow],
    base_toolchain: str,
    new_toolchain: str,
    event: str,
) -> str:
    """Serialize the comparison as a JSON document."""
    document = {
        "base_toolchain": base_toolchain,
        "new_toolchain": new_toolchain,
        "event": event,
        "results": [
            {
                "benchmark": row.benchmark,
                "base_value": _json_number(row.base_value),
                "new_value": _json_number(row.new_value),
                "percent_diff": _json_number(row.percent_diff),
            }
            for row in rows
        ],
    }
    return json.dumps(document, indent=2)


def print_rich_table(
    rows: Sequence[ComparisonRow],
    base_toolchain: str,
    new_toolchain: str,
    console: Optional[Console] = None,
) -> None:
    """
    Print the comparison as a coloured terminal table.

    Positive changes (the new toolchain measured more) are red, negative
    changes green.

    Args:
        rows: Ranked comparison rows
        base_toolchain: Baseline toolchain name for the header
        new_toolchain: Compared toolchain name for the header
        console: Console to print to (default: a new stdout console)
    """
    console = console or Console()

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Benchmark name", style="cyan")
    table.add_column(base_toolchain, justify="right")
    table.add_column(new_toolchain, justify="right")
    table.add_column("% diff", justify="right")

    for row in rows:
        if row.is_regression:
            style = "red"
        elif row.percent_diff < 0:
            style = "green"
        else:
            style = "white"
        table.add_row(
            Text(row.benchmark),
            format_number(row.base_value),
            format_number(row.new_value),
            Text(format_number(row.percent_diff), style=style),
        )

    console.print(table)
