"""NetCDF export of the acceleration, velocity and position profiles."""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
import xarray as xr

from ..config import SimConfig
from ..driver import IterationResult
from ..lookup import InterpolatedTable


logger = logging.getLogger(__name__)

_NETCDF_ENGINE = "h5netcdf"
PROFILE_VARS = ("acceleration", "velocity", "position")


def build_profile_dataset(
    accel: InterpolatedTable | np.ndarray,
    result: IterationResult,
    config: SimConfig,
) -> xr.Dataset:
    """Collect the three profiles of one pass on a shared time axis (seconds)."""
    acc = accel.values if isinstance(accel, InterpolatedTable) else np.asarray(accel, dtype=float)
    vel = result.velocity.values
    pos = result.position.values
    if not (acc.size == vel.size == pos.size):
        raise ValueError(
            f"profile lengths differ: acceleration {acc.size}, velocity {vel.size}, position {pos.size}"
        )

    t = np.arange(acc.size, dtype=float)
    ds = xr.Dataset(
        data_vars={
            "acceleration": ("t", acc, {"units": "m s-2"}),
            "velocity": ("t", vel, {"units": "m s-1"}),
            "position": ("t", pos, {"units": "m"}),
        },
        coords={"t": ("t", t, {"units": "s"})},
        attrs={
            "algo": config.algo.value,
            "step": int(config.step),
            "iterations": int(config.iterations),
            "threads": int(config.threads),
            "final_velocity": float(result.final_velocity),
            "final_position": float(result.final_position),
        },
    )
    return ds


def write_profile_netcdf(ds: xr.Dataset, path: str | Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    ds.to_netcdf(path, engine=_NETCDF_ENGINE)
    logger.debug("wrote profiles to %s", path)
    return path


def read_profile_netcdf(path: str | Path) -> xr.Dataset:
    ds = xr.open_dataset(Path(path), engine=_NETCDF_ENGINE).load()
    missing = [name for name in PROFILE_VARS if name not in ds.data_vars]
    if missing:
        raise ValueError(f"profile file {path} is missing variables: {missing}")
    return ds


__all__ = ["PROFILE_VARS", "build_profile_dataset", "write_profile_netcdf", "read_profile_netcdf"]
