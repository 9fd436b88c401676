"""Error types raised by the integration core and its collaborators."""

from __future__ import annotations

from pathlib import Path


class SimulationError(Exception):
    """Base class for every failure the simulator reports."""


class ConfigurationError(SimulationError, ValueError):
    """Invalid run configuration (zero subdivisions, unknown rule, ...)."""


class IndexOutOfRange(SimulationError, IndexError):
    """An interpolation query needed a sample index the table does not hold."""

    def __init__(self, index: float, length: int) -> None:
        super().__init__(f"sample index out of range. index: {index} len: {length}")
        self.index = index
        self.length = length


class UpstreamDataError(SimulationError, ValueError):
    """The sample provider could not produce a usable sequence."""

    def __init__(
        self,
        message: str,
        *,
        path: str | Path | None = None,
        column: str | None = None,
        record: int | None = None,
    ) -> None:
        details = []
        if path is not None:
            details.append(f"path: {path}")
        if column is not None:
            details.append(f"column: {column}")
        if record is not None:
            details.append(f"record: {record}")
        text = message if not details else f"{message} ({', '.join(details)})"
        super().__init__(text)
        self.path = None if path is None else Path(path)
        self.column = column
        self.record = record


__all__ = [
    "SimulationError",
    "ConfigurationError",
    "IndexOutOfRange",
    "UpstreamDataError",
]
