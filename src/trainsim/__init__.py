"""Numerical double integration of sampled acceleration profiles."""

from .config import SimConfig, load_config
from .driver import (
    IterationResult,
    SimulationResult,
    integrate_profile,
    integrate_profile_parallel,
    run_simulation,
)
from .errors import ConfigurationError, IndexOutOfRange, SimulationError, UpstreamDataError
from .evaluable import Evaluable, FunctionEvaluable, as_evaluable
from .lookup import InterpolatedTable
from .pool import WorkerPool
from .quadrature import (
    QuadratureRule,
    left_riemann,
    mid_riemann,
    resolve_rule,
    right_riemann,
    simpsons,
    trapezoidal,
)
from .timing import ProgressTimer, Timing

__all__ = [
    "SimConfig",
    "load_config",
    "IterationResult",
    "SimulationResult",
    "integrate_profile",
    "integrate_profile_parallel",
    "run_simulation",
    "ConfigurationError",
    "IndexOutOfRange",
    "SimulationError",
    "UpstreamDataError",
    "Evaluable",
    "FunctionEvaluable",
    "as_evaluable",
    "InterpolatedTable",
    "WorkerPool",
    "QuadratureRule",
    "left_riemann",
    "mid_riemann",
    "right_riemann",
    "simpsons",
    "trapezoidal",
    "resolve_rule",
    "ProgressTimer",
    "Timing",
]
