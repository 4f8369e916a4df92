"""Shared fixtures for lolbench_compare tests."""

import json
from pathlib import Path
from typing import Any

import pytest

from lolbench_compare.storage.models import Measurement, RunPlan

GENERATED_AT = "2018-08-25T15:32:55.124839Z"


def run_plan_record(
    benchmark_key: str,
    toolchain: str,
    identity: list[int],
) -> dict[str, Any]:
    """Build a run-plan record as lolbench writes it."""
    return {
        "generated_at": GENERATED_AT,
        "key": {"benchmark_key": benchmark_key, "toolchain": {"spec": toolchain}},
        "contents": {"Ok": identity},
    }


def measurement_record(identity: list[int], events: dict[str, float]) -> dict[str, Any]:
    """Build a measurement record with one median per event."""
    return {
        "generated_at": GENERATED_AT,
        "key": {"binary_hash": identity},
        "contents": {
            "Ok": {
                name: {
                    "Mean": {"point_estimate": value * 1.01},
                    "Median": {"point_estimate": value},
                }
                for name, value in events.items()
            }
        },
    }


def make_run_plan(benchmark_key: str, toolchain: str, identity: bytes | None) -> RunPlan:
    return RunPlan(
        generated_at=GENERATED_AT,
        benchmark_key=benchmark_key,
        toolchain_spec=toolchain,
        binary_identity=identity,
    )


def make_measurement(identity: bytes, **events: float) -> Measurement:
    return Measurement(
        generated_at=GENERATED_AT,
        binary_identity=identity,
        event_values={
            name: {"Median": {"point_estimate": value}} for name, value in events.items()
        },
    )


def write_record(directory: Path, name: str, record: Any) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_text(json.dumps(record), encoding="utf-8")
    return path


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Data directory holding the sort_u32 stable/nightly scenario."""
    write_record(
        tmp_path / "run-plans", "sort_u32-stable.json",
        run_plan_record("sort_u32", "stable", [1, 2, 3]),
    )
    write_record(
        tmp_path / "run-plans", "sort_u32-nightly.json",
        run_plan_record("sort_u32", "nightly", [4, 5, 6]),
    )
    write_record(
        tmp_path / "measurements", "010203.json",
        measurement_record([1, 2, 3], {"nanoseconds": 1000.0, "instructions": 5000.0}),
    )
    write_record(
        tmp_path / "measurements", "040506.json",
        measurement_record([4, 5, 6], {"nanoseconds": 1200.0, "instructions": 4000.0}),
    )
    return tmp_path
