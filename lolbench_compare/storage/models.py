"""Pydantic models for lolbench run-plan and measurement records."""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..errors import MissingEventError


def _identity_bytes(value: Any) -> Any:
    """Convert a JSON array of byte values into ``bytes``.

    Strings are rejected so that a hex digest is never mistaken for raw bytes.
    """
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if isinstance(value, list):
        for item in value:
            # bool is an int subclass, JSON true/false are not bytes
            if isinstance(item, bool) or not isinstance(item, int) or not 0 <= item <= 255:
                msg = f"Identity must be a list of integers in 0..255, found {item!r}"
                raise ValueError(msg)
        return bytes(value)
    msg = f"Identity must be a list of integers, got {type(value).__name__}"
    raise ValueError(msg)


class RunPlan(BaseModel):
    """One (benchmark, toolchain) execution intent.

    ``binary_identity`` is the hash of the artifact that was measured, or
    ``None`` when the run failed and nothing was measured.
    """

    model_config = ConfigDict(frozen=True)

    generated_at: str = Field(description="Timestamp written by the benchmark runner")
    benchmark_key: str = Field(description="Benchmark identifier")
    toolchain_spec: str = Field(description="Toolchain the benchmark was built with")
    binary_identity: bytes | None = Field(
        default=None,
        description="Identity of the measured artifact, None for a failed run",
    )

    @field_validator("binary_identity", mode="before")
    @classmethod
    def validate_identity(cls, v: Any) -> Any:
        """Accept identity bytes as a list of integers."""
        if v is None:
            return v
        return _identity_bytes(v)

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> Self:
        """Build a run-plan from its on-disk record.

        Record layout::

            {
              "generated_at": "...",
              "key": {"benchmark_key": "...", "toolchain": {"spec": "..."}},
              "contents": {"Ok": [1, 2, 3, ...]}
            }

        Only successful runs (``"Ok"`` contents) are supported.

        Raises:
            ValueError: If the record does not match the layout
        """
        key = _mapping(record, "key")
        toolchain = _mapping(key, "toolchain")
        contents = _mapping(record, "contents")

        if "Ok" not in contents:
            tags = ", ".join(sorted(contents)) or "none"
            msg = f"Unsupported run-plan contents (expected 'Ok', found {tags})"
            raise ValueError(msg)
        if not isinstance(contents["Ok"], list):
            msg = "Run-plan identity under 'Ok' must be a list of integers"
            raise ValueError(msg)

        return cls(
            generated_at=record.get("generated_at"),
            benchmark_key=key.get("benchmark_key"),
            toolchain_spec=toolchain.get("spec"),
            binary_identity=contents["Ok"],
        )

    @property
    def failed(self) -> bool:
        """Check if the run has no usable artifact identity."""
        return self.binary_identity is None


class PointEstimate(BaseModel):
    """Summary statistic with its point estimate."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    point_estimate: float

    @field_validator("point_estimate", mode="before")
    @classmethod
    def validate_number(cls, v: Any) -> Any:
        """Accept only JSON numbers, never strings or booleans."""
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            msg = f"point_estimate must be a number, got {type(v).__name__}"
            raise ValueError(msg)
        return v


class EventSummary(BaseModel):
    """Statistics of one event. Only the median is consumed."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    median: PointEstimate = Field(alias="Median")


class Measurement(BaseModel):
    """Statistics gathered from executing one compiled artifact."""

    model_config = ConfigDict(frozen=True)

    generated_at: str
    binary_identity: bytes
    event_values: dict[str, EventSummary] = Field(default_factory=dict)

    @field_validator("binary_identity", mode="before")
    @classmethod
    def validate_identity(cls, v: Any) -> Any:
        """Accept identity bytes as a list of integers."""
        return _identity_bytes(v)

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> Self:
        """Build a measurement from its on-disk record.

        Record layout::

            {
              "generated_at": "...",
              "key": {"binary_hash": [1, 2, 3, ...]},
              "contents": {"Ok": {"<event>": {"Median": {"point_estimate": 1.0}}}}
            }

        Raises:
            ValueError: If the record does not match the layout
        """
        key = _mapping(record, "key")
        contents = _mapping(record, "contents")

        if "Ok" not in contents:
            msg = "Measurement contents missing 'Ok'"
            raise ValueError(msg)

        return cls(
            generated_at=record.get("generated_at"),
            binary_identity=key.get("binary_hash"),
            event_values=contents["Ok"],
        )

    def median_for(self, event: str) -> float:
        """Return the median point estimate recorded for ``event``.

        Raises:
            MissingEventError: If the measurement has no statistics for the event
        """
        try:
            summary = self.event_values[event]
        except KeyError:
            raise MissingEventError(event, self.binary_identity) from None
        return summary.median.point_estimate


class ComparisonRow(BaseModel):
    """One benchmark's values under both toolchains and their relative change."""

    model_config = ConfigDict(frozen=True)

    benchmark: str
    base_value: float
    new_value: float
    percent_diff: float = Field(description="(new - base) / base * 100")

    @property
    def is_regression(self) -> bool:
        """Check if the new toolchain produced a larger value."""
        return self.percent_diff > 0


def _mapping(record: Any, name: str) -> dict[str, Any]:
    """Fetch a nested object from a record, failing on anything else."""
    if not isinstance(record, dict):
        msg = f"Expected an object, got {type(record).__name__}"
        raise ValueError(msg)
    value = record.get(name)
    if not isinstance(value, dict):
        msg = f"Field '{name}' must be an object"
        raise ValueError(msg)
    return value
