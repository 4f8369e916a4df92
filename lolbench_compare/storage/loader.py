"""Load run-plan and measurement records from a lolbench data directory."""

import json
import logging
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any, TypeVar

from pydantic import ValidationError

from ..errors import RecordAccessError, RecordParseError
from .models import Measurement, RunPlan

logger = logging.getLogger(__name__)

RUN_PLANS_DIR = "run-plans"
MEASUREMENTS_DIR = "measurements"

RecordT = TypeVar("RecordT", RunPlan, Measurement)


def iter_record_files(directory: Path) -> Iterator[Path]:
    """Yield record files in a directory, sorted by name.

    Sorting makes the processing order (and therefore last-write-wins
    resolution) identical on every platform.

    Raises:
        RecordAccessError: If the directory cannot be listed
    """
    try:
        entries = sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise RecordAccessError(directory, e.strerror or str(e)) from e

    for entry in entries:
        if entry.is_file():
            yield entry
        else:
            logger.debug(f"Skipping non-file entry {entry}")


def read_record(path: Path) -> Any:
    """Read one JSON record from disk.

    Raises:
        RecordAccessError: If the file cannot be read
        RecordParseError: If the file is not valid JSON
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise RecordAccessError(path, e.strerror or str(e)) from e
    except UnicodeDecodeError as e:
        raise RecordParseError(path, f"not UTF-8 text ({e.reason})") from e

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise RecordParseError(path, f"invalid JSON: {e}") from e


def _load_directory(
    directory: Path,
    build: Callable[[dict[str, Any]], RecordT],
) -> list[RecordT]:
    records: list[RecordT] = []

    for path in iter_record_files(directory):
        logger.debug(f"Reading {path}")
        record = read_record(path)
        try:
            records.append(build(record))
        except ValidationError as e:
            reason = "; ".join(
                f"{'.'.join(str(p) for p in err['loc']) or 'record'}: {err['msg']}"
                for err in e.errors()
            )
            raise RecordParseError(path, reason) from e
        except ValueError as e:
            raise RecordParseError(path, str(e)) from e

    logger.info(f"Loaded {len(records)} records from {directory}")
    return records


def load_run_plans(data_dir: Path | str) -> list[RunPlan]:
    """Load every run-plan under ``<data_dir>/run-plans``.

    Args:
        data_dir: lolbench data directory

    Returns:
        Run-plans in file-name order

    Raises:
        RecordAccessError: If the directory or a file cannot be read
        RecordParseError: If any record is malformed
    """
    return _load_directory(Path(data_dir) / RUN_PLANS_DIR, RunPlan.from_record)


def load_measurements(data_dir: Path | str) -> list[Measurement]:
    """Load every measurement under ``<data_dir>/measurements``.

    Args:
        data_dir: lolbench data directory

    Returns:
        Measurements in file-name order

    Raises:
        RecordAccessError: If the directory or a file cannot be read
        RecordParseError: If any record is malformed
    """
    return _load_directory(Path(data_dir) / MEASUREMENTS_DIR, Measurement.from_record)
