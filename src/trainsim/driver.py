"""Double-integration driver: acceleration -> velocity -> position."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Iterable, Optional

import numpy as np

from .config import SimConfig
from .errors import UpstreamDataError
from .evaluable import Evaluable
from .lookup import InterpolatedTable
from .pool import WorkerPool
from .quadrature import QuadratureRule, RuleFn, resolve_rule
from .timing import ProgressTimer, Timing


logger = logging.getLogger(__name__)

Reporter = Callable[[str], None]


def format_signed(value: float) -> str:
    """Shortest round-trip decimal with an explicit sign and no exponent, e.g. ``+8``."""
    return np.format_float_positional(value, trim="-", sign=True)


@dataclass(frozen=True)
class IterationResult:
    velocity: InterpolatedTable
    position: InterpolatedTable
    elapsed_ns: int = 0

    @property
    def final_velocity(self) -> float:
        return self.velocity.last()

    @property
    def final_position(self) -> float:
        return self.position.last()


@dataclass(frozen=True)
class SimulationResult:
    final_velocity: float
    final_position: float
    iterations: int
    timing: Timing
    last: IterationResult


def _as_rule_fn(rule: QuadratureRule | str | RuleFn) -> RuleFn:
    if callable(rule) and not isinstance(rule, str):
        return rule
    return resolve_rule(rule)


def _as_table(accel: InterpolatedTable | Iterable[float] | np.ndarray) -> InterpolatedTable:
    table = accel if isinstance(accel, InterpolatedTable) else InterpolatedTable.from_sequence(accel)
    if len(table) == 0:
        raise UpstreamDataError("acceleration profile must contain at least one sample")
    return table


def interval_delta(rule_fn: RuleFn, step: int, table: Evaluable, sec: int) -> float:
    """Integral of ``table`` over the unit interval ``[sec - 1, sec]``."""
    return rule_fn(float(sec - 1), float(sec), step, table)


def prefix_table(deltas: Iterable[float]) -> InterpolatedTable:
    """Running totals of ``deltas`` behind a leading ``0.0``."""
    table = InterpolatedTable.with_initial(0.0)
    rolling = 0.0
    for d in deltas:
        rolling += d
        table.push(rolling)
    return table


def integrate_profile(
    accel: InterpolatedTable | Iterable[float] | np.ndarray,
    rule: QuadratureRule | str | RuleFn,
    step: int,
) -> IterationResult:
    """Sequential pass: build the velocity table, then the position table."""
    accel_table = _as_table(accel)
    rule_fn = _as_rule_fn(rule)
    length = len(accel_table)

    start = time.perf_counter_ns()

    vel_table = InterpolatedTable.with_initial(0.0)
    vel_final = 0.0
    for sec in range(1, length):
        vel_final += interval_delta(rule_fn, step, accel_table, sec)
        vel_table.push(vel_final)

    pos_table = InterpolatedTable.with_initial(0.0)
    pos_final = 0.0
    for sec in range(1, length):
        pos_final += interval_delta(rule_fn, step, vel_table, sec)
        pos_table.push(pos_final)

    elapsed = time.perf_counter_ns() - start
    return IterationResult(velocity=vel_table, position=pos_table, elapsed_ns=elapsed)


def integrate_profile_parallel(
    accel: InterpolatedTable | Iterable[float] | np.ndarray,
    rule: QuadratureRule | str | RuleFn,
    step: int,
    pool: WorkerPool,
) -> IterationResult:
    """
    Data-parallel pass.

    Per-interval deltas are independent, so each phase is a parallel map over
    interval indices followed by a sequential prefix sum. The velocity table is
    complete before any worker reads it for the position phase.
    """
    accel_table = _as_table(accel)
    rule_fn = _as_rule_fn(rule)
    seconds = range(1, len(accel_table))

    start = time.perf_counter_ns()

    vel_deltas = pool.map_ordered(
        lambda sec: interval_delta(rule_fn, step, accel_table, sec), seconds
    )
    vel_table = prefix_table(vel_deltas)

    pos_deltas = pool.map_ordered(
        lambda sec: interval_delta(rule_fn, step, vel_table, sec), seconds
    )
    pos_table = prefix_table(pos_deltas)

    elapsed = time.perf_counter_ns() - start
    return IterationResult(velocity=vel_table, position=pos_table, elapsed_ns=elapsed)


def run_simulation(
    accel: InterpolatedTable | Iterable[float] | np.ndarray,
    config: SimConfig,
    *,
    pool: Optional[WorkerPool] = None,
    report: Reporter = print,
    progress: Optional[ProgressTimer] = None,
) -> SimulationResult:
    """
    Run ``config.iterations`` independent passes over the same input.

    Uses the parallel pass when ``config.threads > 1``. A pool passed by the
    caller is used as is and left open; otherwise one is created for this call.
    """
    config = config.validate()
    accel_table = _as_table(accel)
    rule_fn = resolve_rule(config.algo)

    report(f"length: {len(accel_table)} step: {config.step} iterations: {config.iterations}")

    owned_pool = None
    if config.threads > 1 and pool is None:
        owned_pool = pool = WorkerPool(config.threads)

    timing = Timing()
    progress = progress or ProgressTimer(config.progress_interval_s)
    logger.debug(
        "running %d iteration(s) with %s, step %d, threads %d",
        config.iterations,
        config.algo.value,
        config.step,
        config.threads,
    )

    last: IterationResult | None = None
    try:
        for it in range(config.iterations):
            if pool is not None and config.threads > 1:
                last = integrate_profile_parallel(accel_table, rule_fn, config.step, pool)
            else:
                last = integrate_profile(accel_table, rule_fn, config.step)

            timing.update(last.elapsed_ns)

            if progress.update():
                report(f"iteration: {it} {timing}")

            if it == config.iterations - 1:
                report(f"final velocity: {format_signed(last.final_velocity)}")
                report(f"final position: {format_signed(last.final_position)}")
    finally:
        if owned_pool is not None:
            owned_pool.close()

    report(str(timing))

    return SimulationResult(
        final_velocity=last.final_velocity,
        final_position=last.final_position,
        iterations=config.iterations,
        timing=timing,
        last=last,
    )


__all__ = [
    "format_signed",
    "IterationResult",
    "SimulationResult",
    "interval_delta",
    "prefix_table",
    "integrate_profile",
    "integrate_profile_parallel",
    "run_simulation",
]
