"""Match run-plans to measurements and collapse them into a benchmark table."""

import logging
from collections.abc import Iterable, Mapping

from ..storage.models import Measurement, RunPlan

logger = logging.getLogger(__name__)

# benchmark -> toolchain spec -> median point estimate
BenchmarkTable = dict[str, dict[str, float]]

UNMEASURED_VALUE = 0.0


def index_measurements(measurements: Iterable[Measurement]) -> dict[bytes, Measurement]:
    """Index measurements by binary identity.

    Measurements are scanned in order and a repeated identity overwrites the
    earlier entry, so the last measurement for an identity wins.

    Args:
        measurements: Measurements in processing order

    Returns:
        Dictionary mapping identity bytes to the last matching measurement
    """
    index: dict[bytes, Measurement] = {}
    for measurement in measurements:
        if measurement.binary_identity in index:
            logger.debug(
                f"Measurement {measurement.binary_identity.hex()} seen again, "
                "keeping the later one"
            )
        index[measurement.binary_identity] = measurement
    return index


def resolve_value(
    run_plan: RunPlan,
    index: Mapping[bytes, Measurement],
    event: str,
) -> float:
    """Resolve the median of ``event`` for one run-plan.

    Returns 0.0 when the run failed or no measurement carries its identity.

    Raises:
        MissingEventError: If the matched measurement lacks the event
    """
    if run_plan.binary_identity is None:
        logger.debug(
            f"{run_plan.benchmark_key} ({run_plan.toolchain_spec}) failed, no measurement"
        )
        return UNMEASURED_VALUE

    measurement = index.get(run_plan.binary_identity)
    if measurement is None:
        logger.debug(
            f"No measurement for {run_plan.benchmark_key} ({run_plan.toolchain_spec})"
        )
        return UNMEASURED_VALUE

    return measurement.median_for(event)


def build_benchmark_table(
    run_plans: Iterable[RunPlan],
    measurements: Iterable[Measurement],
    event: str,
) -> BenchmarkTable:
    """Build the benchmark -> toolchain -> value table.

    Each run-plan is matched to the last measurement sharing its binary
    identity (exact byte equality) and resolved to that measurement's median
    for ``event``. Unmatched run-plans resolve to 0.0. When several run-plans
    share a (benchmark, toolchain) pair, the one processed last overwrites the
    others.

    Args:
        run_plans: Run-plans in processing order
        measurements: Measurements in processing order
        event: Event name to read, e.g. "instructions" or "nanoseconds"

    Returns:
        Freshly built BenchmarkTable

    Raises:
        MissingEventError: If a matched measurement lacks the event
    """
    index = index_measurements(measurements)
    table: BenchmarkTable = {}

    for run_plan in run_plans:
        value = resolve_value(run_plan, index, event)
        toolchains = table.setdefault(run_plan.benchmark_key, {})
        if run_plan.toolchain_spec in toolchains:
            logger.debug(
                f"Overwriting {run_plan.benchmark_key} ({run_plan.toolchain_spec}): "
                f"{toolchains[run_plan.toolchain_spec]} -> {value}"
            )
        toolchains[run_plan.toolchain_spec] = value

    logger.info(f"Built table for {len(table)} benchmarks from {len(index)} measurements")
    return table
