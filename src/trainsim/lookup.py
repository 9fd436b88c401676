"""Piecewise-linear interpolation table over integer-indexed samples."""

from __future__ import annotations

import math
from typing import Iterable, Iterator

import numpy as np

from .errors import IndexOutOfRange


class InterpolatedTable:
    """
    Sampled signal exposed as an Evaluable.

    Index ``i`` of the table is the x value and the sample stored there is the
    y value. Querying an integral x returns the stored sample; any other x is
    linearly interpolated between ``floor(x)`` and ``floor(x) + 1``.

    Every index a query needs must exist, otherwise ``IndexOutOfRange`` is
    raised. The table never clamps or extrapolates, so callers must stay in
    ``[0, len - 1]``.

    Tables can be grown one sample at a time::

        table = InterpolatedTable()
        table.push(0.0)
        table.push(1.5)
        table.push(3.0)
        table.evaluate(1.5)  # 2.25

    or built from existing samples::

        table = InterpolatedTable.from_sequence([0.0, 1.5, 3.0])
    """

    __slots__ = ("_samples",)

    def __init__(self, samples: list[float] | None = None) -> None:
        self._samples: list[float] = [] if samples is None else samples

    @classmethod
    def from_sequence(cls, values: Iterable[float] | np.ndarray) -> "InterpolatedTable":
        if isinstance(values, list):
            return cls([float(v) for v in values])
        arr = np.asarray(values, dtype=float).reshape(-1)
        return cls(arr.tolist())

    @classmethod
    def with_initial(cls, value: float = 0.0) -> "InterpolatedTable":
        return cls([float(value)])

    def push(self, value: float) -> None:
        self._samples.append(float(value))

    def length(self) -> int:
        return len(self._samples)

    def __len__(self) -> int:
        return len(self._samples)

    def __iter__(self) -> Iterator[float]:
        return iter(self._samples)

    def __repr__(self) -> str:
        return f"InterpolatedTable(len={len(self._samples)})"

    @property
    def values(self) -> np.ndarray:
        return np.asarray(self._samples, dtype=float)

    def last(self) -> float:
        if not self._samples:
            raise IndexOutOfRange(-1, 0)
        return self._samples[-1]

    def get_exact(self, index: int) -> float:
        """Return the sample stored at ``index`` (no negative wraparound)."""
        if index < 0 or index >= len(self._samples):
            raise IndexOutOfRange(index, len(self._samples))
        return self._samples[index]

    def evaluate(self, x: float) -> float:
        if not math.isfinite(x):
            raise IndexOutOfRange(x, len(self._samples))

        x0 = math.floor(x)
        if x0 == x:
            return self.get_exact(x0)

        y0 = self.get_exact(x0)
        y1 = self.get_exact(x0 + 1)

        # x1 - x0 is always 1
        return y0 + (x - x0) * (y1 - y0)

    __call__ = evaluate


__all__ = ["InterpolatedTable"]
