"""Relative comparison of two toolchains across a benchmark table."""

import logging
import math
from collections.abc import Mapping

from ..errors import MissingToolchainError
from ..storage.models import ComparisonRow

logger = logging.getLogger(__name__)


def percent_difference(base: float, new: float) -> float:
    """Compute the percentage change from ``base`` to ``new``.

    A zero base does not raise. The result follows IEEE division instead:
    +inf or -inf by the sign of the change, NaN when both values are zero.

    Args:
        base: Value under the base toolchain
        new: Value under the new toolchain

    Returns:
        (new - base) / base * 100
    """
    delta = new - base
    if base == 0.0:
        if delta == 0.0 or math.isnan(delta):
            return math.nan
        return math.copysign(math.inf, delta)
    return delta / base * 100.0


def _magnitude(row: ComparisonRow) -> float:
    """Sort key: absolute change, with NaN ranked like infinity."""
    if math.isnan(row.percent_diff):
        return math.inf
    return abs(row.percent_diff)


def compare(
    table: Mapping[str, Mapping[str, float]],
    base_toolchain: str,
    new_toolchain: str,
) -> list[ComparisonRow]:
    """Compare two toolchains for every benchmark in the table.

    Rows are ordered by absolute percentage change, largest first. The sort is
    stable, so exact ties keep the table's order.

    Args:
        table: BenchmarkTable built by build_benchmark_table
        base_toolchain: Toolchain spec used as the baseline
        new_toolchain: Toolchain spec compared against the baseline

    Returns:
        One ComparisonRow per benchmark

    Raises:
        MissingToolchainError: If a benchmark lacks either toolchain
    """
    rows: list[ComparisonRow] = []

    for benchmark, toolchains in table.items():
        base_value = _lookup(toolchains, benchmark, base_toolchain)
        new_value = _lookup(toolchains, benchmark, new_toolchain)
        diff = percent_difference(base_value, new_value)

        if base_value == 0.0:
            logger.warning(
                f"{benchmark}: base value under '{base_toolchain}' is 0, "
                f"percent difference is {diff}"
            )

        rows.append(
            ComparisonRow(
                benchmark=benchmark,
                base_value=base_value,
                new_value=new_value,
                percent_diff=diff,
            )
        )

    rows.sort(key=_magnitude, reverse=True)
    return rows


def _lookup(toolchains: Mapping[str, float], benchmark: str, toolchain: str) -> float:
    try:
        return toolchains[toolchain]
    except KeyError:
        raise MissingToolchainError(benchmark, toolchain) from None
