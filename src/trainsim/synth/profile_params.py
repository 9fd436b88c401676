"""Parameters for synthetic train acceleration profiles."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProfileParams:
    rest_s: int
    accelerate_s: int
    cruise_s: int
    brake_s: int
    tail_s: int
    accel_ms2: float
    brake_ms2: float
    noise_sigma_ms2: float
    seed: int

    @property
    def length(self) -> int:
        return self.rest_s + self.accelerate_s + self.cruise_s + self.brake_s + self.tail_s


_ACCEL_MS2 = 1.2
_ACCELERATE_S = 60
_BRAKE_MS2 = 0.9
_BRAKE_S = 80

DEFAULT_PROFILE = ProfileParams(
    rest_s=1,
    accelerate_s=_ACCELERATE_S,
    cruise_s=600,
    brake_s=_BRAKE_S,
    tail_s=1,
    accel_ms2=_ACCEL_MS2,
    brake_ms2=_BRAKE_MS2,
    noise_sigma_ms2=0.0,
    seed=0,
)


__all__ = ["ProfileParams", "DEFAULT_PROFILE"]
