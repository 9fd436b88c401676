"""Fixed-subdivision quadrature rules over an Evaluable."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Union

from .errors import ConfigurationError
from .evaluable import Evaluable, as_evaluable


Integrand = Union[Evaluable, Callable[[float], float]]
RuleFn = Callable[[float, float, int, Evaluable], float]


class QuadratureRule(str, Enum):
    LEFT_RIEMANN = "left-riemann"
    MID_RIEMANN = "mid-riemann"
    RIGHT_RIEMANN = "right-riemann"
    TRAPEZOIDAL = "trapezoidal"
    SIMPSONS = "simpsons"


def _check_subdivisions(subdivisions: int) -> None:
    if subdivisions <= 0:
        raise ConfigurationError(f"subdivisions must be positive, got {subdivisions}")


def left_riemann(lower: float, upper: float, subdivisions: int, evaluable: Integrand) -> float:
    """Left Riemann sum: sample each subdivision at its left edge."""
    _check_subdivisions(subdivisions)
    f = as_evaluable(evaluable).evaluate

    step = (upper - lower) / subdivisions
    total = 0.0
    for i in range(subdivisions):
        total += f(lower + i * step)

    return total * step


def mid_riemann(lower: float, upper: float, subdivisions: int, evaluable: Integrand) -> float:
    """Midpoint Riemann sum: sample each subdivision at its centre."""
    _check_subdivisions(subdivisions)
    f = as_evaluable(evaluable).evaluate

    step = (upper - lower) / subdivisions
    half = step / 2.0
    total = 0.0
    for i in range(subdivisions):
        total += f((lower + i * step) + half)

    return total * step


def right_riemann(lower: float, upper: float, subdivisions: int, evaluable: Integrand) -> float:
    """Right Riemann sum: sample each subdivision at its right edge."""
    _check_subdivisions(subdivisions)
    f = as_evaluable(evaluable).evaluate

    step = (upper - lower) / subdivisions
    total = 0.0
    for i in range(subdivisions):
        total += f(lower + (i + 1) * step)

    return total * step


def trapezoidal(lower: float, upper: float, subdivisions: int, evaluable: Integrand) -> float:
    """
    Trapezoidal sum.

    The interior sum runs over ``i = 0 .. n-1`` so ``f(lower)`` contributes on
    top of the averaged endpoints.
    """
    _check_subdivisions(subdivisions)
    f = as_evaluable(evaluable).evaluate

    step = (upper - lower) / subdivisions
    total = (f(upper) + f(lower)) / 2.0
    for i in range(subdivisions):
        total += f(lower + i * step)

    return total * step


def simpsons(lower: float, upper: float, subdivisions: int, evaluable: Integrand) -> float:
    """
    Composite Simpson's rule.

    Odd subdivision counts are accepted and weighted with the same 1-4-2-...-1
    pattern; the result is then less accurate than the classical method.
    """
    _check_subdivisions(subdivisions)
    f = as_evaluable(evaluable).evaluate

    step = (upper - lower) / subdivisions
    total = 0.0
    for i in range(subdivisions + 1):
        res = f(lower + i * step)
        if i == 0 or i == subdivisions:
            total += res
        elif i % 2 == 1:
            total += 4.0 * res
        else:
            total += 2.0 * res

    return step * total / 3.0


_RULES: dict[QuadratureRule, RuleFn] = {
    QuadratureRule.LEFT_RIEMANN: left_riemann,
    QuadratureRule.MID_RIEMANN: mid_riemann,
    QuadratureRule.RIGHT_RIEMANN: right_riemann,
    QuadratureRule.TRAPEZOIDAL: trapezoidal,
    QuadratureRule.SIMPSONS: simpsons,
}


def parse_rule(rule: QuadratureRule | str) -> QuadratureRule:
    try:
        return QuadratureRule(rule)
    except ValueError:
        choices = ", ".join(r.value for r in QuadratureRule)
        raise ConfigurationError(f"unknown quadrature rule {rule!r} (expected one of: {choices})") from None


def resolve_rule(rule: QuadratureRule | str) -> RuleFn:
    """Map a rule tag to its concrete function."""
    return _RULES[parse_rule(rule)]


__all__ = [
    "QuadratureRule",
    "RuleFn",
    "left_riemann",
    "mid_riemann",
    "right_riemann",
    "trapezoidal",
    "simpsons",
    "parse_rule",
    "resolve_rule",
]
