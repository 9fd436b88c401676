"""Convenience entrypoint: CSV profile -> simulation -> optional outputs."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import numpy as np
import xarray as xr

from .config import SimConfig
from .driver import Reporter, SimulationResult, run_simulation
from .io.csv_reader import load_samples_csv
from .io.profile_io import build_profile_dataset, write_profile_netcdf
from .lookup import InterpolatedTable


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationOutputs:
    result: SimulationResult
    profile_nc: Optional[Path] = None
    plot_png: Optional[Path] = None


def simulate_csv(
    csv_path: str | Path,
    config: SimConfig,
    *,
    column: Optional[str] = None,
    out_nc: str | Path | None = None,
    plot_png: str | Path | None = None,
    report: Reporter = print,
) -> SimulationOutputs:
    """Load the acceleration column, run the benchmark and write requested outputs."""
    samples = load_samples_csv(csv_path, column=column)
    accel = InterpolatedTable.from_sequence(samples)

    result = run_simulation(accel, config, report=report)

    nc_path = None
    png_path = None
    if out_nc is not None or plot_png is not None:
        ds = build_profile_dataset(accel, result.last, config)
        if out_nc is not None:
            nc_path = write_profile_netcdf(ds, out_nc)
        if plot_png is not None:
            png_path = plot_profiles(ds, Path(plot_png))

    return SimulationOutputs(result=result, profile_nc=nc_path, plot_png=png_path)


def plot_profiles(ds: xr.Dataset, outpath: Path) -> Optional[Path]:
    """Plot the three profiles stacked on a shared time axis."""
    plt = _maybe_import_matplotlib()
    if plt is None:
        logger.warning("matplotlib is not installed, skipping plot %s", outpath)
        return None

    t = np.asarray(ds.coords["t"].values, dtype=float)
    fig, axes = plt.subplots(3, 1, figsize=(7.2, 7.5), sharex=True)
    for ax, name, color in zip(
        axes,
        ("acceleration", "velocity", "position"),
        ("tab:red", "tab:blue", "tab:green"),
    ):
        ax.plot(t, np.asarray(ds[name].values, dtype=float), color=color, linewidth=1.1)
        ax.set_ylabel(f"{name} ({ds[name].attrs.get('units', '')})")
    axes[-1].set_xlabel("t (s)")
    axes[0].set_title(f"Profiles ({ds.attrs.get('algo', '')}, step {ds.attrs.get('step', '')})")
    fig.tight_layout()
    outpath.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(outpath, dpi=150)
    plt.close(fig)
    return outpath


def _maybe_import_matplotlib():
    try:
        import matplotlib

        matplotlib.use("Agg", force=True)
        import matplotlib.pyplot as plt

        return plt
    except ImportError:
        return None


__all__ = ["SimulationOutputs", "simulate_csv", "plot_profiles"]
