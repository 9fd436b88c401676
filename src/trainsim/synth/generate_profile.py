"""Generate synthetic acceleration profiles and write them as CSV."""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
import pandas as pd

from .profile_params import DEFAULT_PROFILE, ProfileParams


logger = logging.getLogger(__name__)

DEFAULT_COLUMN = "acceleration"


def generate_acceleration_profile(params: ProfileParams = DEFAULT_PROFILE) -> np.ndarray:
    """
    Sample a rest -> accelerate -> cruise -> brake -> rest run at 1 Hz.

    Without noise, the exact integral of the interpolated profile over the
    whole run is ``accel_ms2 * accelerate_s - brake_ms2 * brake_s`` as long as
    ``rest_s`` and ``tail_s`` are at least one second.
    """
    if not isinstance(params, ProfileParams):
        raise TypeError("params must be a ProfileParams instance")
    for name in ("rest_s", "accelerate_s", "cruise_s", "brake_s", "tail_s"):
        if getattr(params, name) < 0:
            raise ValueError(f"{name} must be non-negative")
    if params.noise_sigma_ms2 < 0:
        raise ValueError("noise_sigma_ms2 must be non-negative")
    if params.length < 1:
        raise ValueError("profile must contain at least one sample")

    acc = np.concatenate(
        [
            np.zeros(params.rest_s),
            np.full(params.accelerate_s, float(params.accel_ms2)),
            np.zeros(params.cruise_s),
            np.full(params.brake_s, -float(params.brake_ms2)),
            np.zeros(params.tail_s),
        ]
    )

    if params.noise_sigma_ms2 > 0:
        rng = np.random.default_rng(int(params.seed))
        acc = acc + rng.normal(0.0, float(params.noise_sigma_ms2), size=acc.size)

    return acc


def write_profile_csv(
    path: str | Path,
    samples: np.ndarray,
    column: str | None = DEFAULT_COLUMN,
) -> Path:
    """Write ``samples`` as one CSV column, with a header when ``column`` is set."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    df = pd.DataFrame({column or DEFAULT_COLUMN: np.asarray(samples, dtype=float)})
    df.to_csv(path, index=False, header=column is not None, float_format="%.17g")
    logger.debug("wrote %d samples to %s", len(df), path)
    return path


__all__ = ["DEFAULT_COLUMN", "generate_acceleration_profile", "write_profile_csv"]
