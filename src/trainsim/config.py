from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .errors import ConfigurationError
from .quadrature import QuadratureRule, parse_rule


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimConfig:
    algo: QuadratureRule = QuadratureRule.LEFT_RIEMANN
    step: int = 100
    iterations: int = 100
    threads: int = 1
    progress_interval_s: float = 10.0

    def __post_init__(self):
        object.__setattr__(self, "algo", parse_rule(self.algo))

    def validate(self) -> "SimConfig":
        for name in ("step", "iterations", "threads"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ConfigurationError(f"{name} must be a positive integer, got {value!r}")
        interval = self.progress_interval_s
        if isinstance(interval, bool) or not isinstance(interval, (int, float)) or not interval > 0:
            raise ConfigurationError(
                f"progress_interval_s must be positive, got {self.progress_interval_s!r}"
            )
        if self.algo == QuadratureRule.SIMPSONS and self.step % 2 == 1:
            logger.warning(
                "simpsons rule with an odd step (%d) is accepted but loses accuracy",
                self.step,
            )
        return self


@dataclass(frozen=True)
class InputConfig:
    path: Path
    column: Optional[str] = None


@dataclass(frozen=True)
class ConfigFile:
    sim: SimConfig
    input: Optional[InputConfig] = None


DEFAULT_CONFIG = SimConfig()

_SIM_KEYS = {f.name for f in fields(SimConfig)}


def merge_overrides(config: SimConfig, **overrides: Any) -> SimConfig:
    """Return ``config`` with every override that is not None applied."""
    changes = {k: v for k, v in overrides.items() if v is not None}
    unknown = set(changes) - _SIM_KEYS
    if unknown:
        raise ConfigurationError(f"unknown configuration keys: {sorted(unknown)}")
    return replace(config, **changes).validate()


def load_config(path: str | Path) -> ConfigFile:
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            raw: Dict[str, Any] = yaml.safe_load(f) or {}
    except OSError as exc:
        raise ConfigurationError(f"failed to read config file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"invalid YAML in config file {path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigurationError(f"config file {path} must contain a mapping")

    def lower_keys(d: Any) -> Any:
        if isinstance(d, dict):
            return {str(k).lower().replace("-", "_"): lower_keys(v) for k, v in d.items()}
        return d

    raw_l = lower_keys(raw)

    input_raw = raw_l.pop("input", None)
    unknown = set(raw_l) - _SIM_KEYS
    if unknown:
        raise ConfigurationError(f"unknown keys in config file {path}: {sorted(unknown)}")

    try:
        sim = SimConfig(
            algo=str(raw_l.get("algo", DEFAULT_CONFIG.algo.value)),
            step=raw_l.get("step", DEFAULT_CONFIG.step),
            iterations=raw_l.get("iterations", DEFAULT_CONFIG.iterations),
            threads=raw_l.get("threads", DEFAULT_CONFIG.threads),
            progress_interval_s=raw_l.get("progress_interval_s", DEFAULT_CONFIG.progress_interval_s),
        ).validate()
    except (TypeError, ValueError) as exc:
        if isinstance(exc, ConfigurationError):
            raise
        raise ConfigurationError(f"invalid value in config file {path}: {exc}") from exc

    inp = None
    if input_raw is not None:
        if not isinstance(input_raw, dict) or "path" not in input_raw:
            raise ConfigurationError("input block must be a mapping with a 'path' key")
        inp_path = Path(str(input_raw["path"]))
        if not inp_path.is_absolute():
            # relative input paths are anchored at the config file
            inp_path = path.parent / inp_path
        column = input_raw.get("column")
        inp = InputConfig(path=inp_path, column=None if column is None else str(column))

    return ConfigFile(sim=sim, input=inp)


__all__ = [
    "SimConfig",
    "InputConfig",
    "ConfigFile",
    "DEFAULT_CONFIG",
    "merge_overrides",
    "load_config",
]
