"""Exceptions raised by the comparison pipeline.

Every failure is fatal: nothing in the pipeline recovers from these, the CLI
reports them and exits non-zero.
"""

from pathlib import Path


class CompareError(RuntimeError):
    """Base class for all pipeline failures."""


class RecordAccessError(CompareError):
    """Raised when a data directory or record file cannot be read."""

    def __init__(self, path: Path | str, reason: str) -> None:
        super().__init__(f"Could not read {path}: {reason}")
        self.path = Path(path)
        self.reason = reason


class RecordParseError(CompareError):
    """Raised when a record file is not valid JSON or does not match its schema."""

    def __init__(self, path: Path | str, reason: str) -> None:
        super().__init__(f"Could not parse {path}: {reason}")
        self.path = Path(path)
        self.reason = reason


class MissingEventError(CompareError, KeyError):
    """Raised when a matched measurement has no statistics for the event."""

    def __init__(self, event: str, binary_identity: bytes) -> None:
        super().__init__(
            f"Event '{event}' not found in measurement {binary_identity.hex()}"
        )
        self.event = event
        self.binary_identity = binary_identity

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class MissingToolchainError(CompareError, KeyError):
    """Raised when a benchmark has no value recorded for a requested toolchain."""

    def __init__(self, benchmark: str, toolchain: str) -> None:
        super().__init__(
            f"Toolchain '{toolchain}' not found for benchmark '{benchmark}'"
        )
        self.benchmark = benchmark
        self.toolchain = toolchain

    def __str__(self) -> str:
        return str(self.args[0])
