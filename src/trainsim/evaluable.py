"""Uniform "evaluate at a real x" view over functions and sampled tables."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol, runtime_checkable


@runtime_checkable
class Evaluable(Protocol):
    def evaluate(self, x: float) -> float:
        ...


@dataclass(frozen=True)
class FunctionEvaluable:
    """Adapter exposing a unary real function as an Evaluable."""

    fn: Callable[[float], float]

    def evaluate(self, x: float) -> float:
        return float(self.fn(x))


def as_evaluable(obj: Evaluable | Callable[[float], float]) -> Evaluable:
    """Return ``obj`` as an Evaluable, wrapping plain callables."""
    if isinstance(obj, Evaluable):
        return obj
    if callable(obj):
        return FunctionEvaluable(obj)
    raise TypeError(f"expected an Evaluable or a callable, got {type(obj).__name__}")


__all__ = ["Evaluable", "FunctionEvaluable", "as_evaluable"]
