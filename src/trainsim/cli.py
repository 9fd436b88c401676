"""Command-line interface for trainsim."""

from __future__ import annotations

import argparse
import logging
from dataclasses import replace
from pathlib import Path

from .config import DEFAULT_CONFIG, load_config, merge_overrides
from .errors import ConfigurationError, SimulationError, UpstreamDataError
from .quadrature import QuadratureRule
from .synth.generate_profile import DEFAULT_COLUMN, generate_acceleration_profile, write_profile_csv
from .synth.profile_params import DEFAULT_PROFILE


logger = logging.getLogger(__name__)

_EXIT_RUNTIME = 1
_EXIT_CONFIG = 2
_EXIT_DATA = 3


def _positive_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if parsed < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {parsed}")
    return parsed


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trainsim",
        description=(
            "Run train simulations of an acceleration profile and report the "
            "final velocity and position."
        ),
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    csv = subparsers.add_parser("csv", help="Run a simulation from an acceleration profile in a CSV file")
    csv.add_argument("path", type=Path, nargs="?", default=None, help="CSV file to load")
    csv.add_argument("--column", type=str, default=None, help="Header name of the acceleration column")
    csv.add_argument("--config", type=Path, default=None, help="YAML file with simulation settings")
    csv.add_argument(
        "-a",
        "--algo",
        type=str,
        choices=[r.value for r in QuadratureRule],
        default=None,
        help=f"Summation algorithm [default: {DEFAULT_CONFIG.algo.value}]",
    )
    csv.add_argument(
        "-s",
        "--step",
        type=_positive_int,
        default=None,
        help=f"Subdivisions per one-second interval [default: {DEFAULT_CONFIG.step}]",
    )
    csv.add_argument(
        "-i",
        "--iterations",
        type=_positive_int,
        default=None,
        help=f"Number of benchmark iterations [default: {DEFAULT_CONFIG.iterations}]",
    )
    csv.add_argument(
        "-t",
        "--threads",
        type=_positive_int,
        default=None,
        help=f"Worker threads, 1 runs sequentially [default: {DEFAULT_CONFIG.threads}]",
    )
    csv.add_argument("--out", type=Path, default=None, help="Write the last iteration's profiles to NetCDF")
    csv.add_argument("--plot", type=Path, default=None, help="Plot the last iteration's profiles to PNG")

    synth = subparsers.add_parser("synth", help="Generate a synthetic acceleration profile CSV")
    synth.add_argument("--out", type=Path, required=True)
    synth.add_argument("--column", type=str, default=DEFAULT_COLUMN)
    synth.add_argument("--no-header", action="store_true", help="Write values without a header row")
    synth.add_argument("--rest-s", type=int, default=DEFAULT_PROFILE.rest_s)
    synth.add_argument("--accelerate-s", type=int, default=DEFAULT_PROFILE.accelerate_s)
    synth.add_argument("--cruise-s", type=int, default=DEFAULT_PROFILE.cruise_s)
    synth.add_argument("--brake-s", type=int, default=DEFAULT_PROFILE.brake_s)
    synth.add_argument("--tail-s", type=int, default=DEFAULT_PROFILE.tail_s)
    synth.add_argument("--accel-ms2", type=float, default=DEFAULT_PROFILE.accel_ms2)
    synth.add_argument("--brake-ms2", type=float, default=DEFAULT_PROFILE.brake_ms2)
    synth.add_argument("--noise-sigma-ms2", type=float, default=DEFAULT_PROFILE.noise_sigma_ms2)
    synth.add_argument("--seed", type=int, default=DEFAULT_PROFILE.seed)

    return parser


def _run_csv(args: argparse.Namespace) -> int:
    from .run_sim import simulate_csv

    config = DEFAULT_CONFIG
    path = args.path
    column = args.column

    if args.config is not None:
        cfg_file = load_config(args.config)
        config = cfg_file.sim
        if cfg_file.input is not None:
            path = path if path is not None else cfg_file.input.path
            column = column if column is not None else cfg_file.input.column

    if path is None:
        raise ConfigurationError("no input CSV given (pass a path or an input block in --config)")

    config = merge_overrides(
        config,
        algo=args.algo,
        step=args.step,
        iterations=args.iterations,
        threads=args.threads,
    )

    outputs = simulate_csv(path, config, column=column, out_nc=args.out, plot_png=args.plot)
    if outputs.profile_nc is not None:
        print(f"profiles: {outputs.profile_nc}")
    if outputs.plot_png is not None:
        print(f"plot: {outputs.plot_png}")
    return 0


def _run_synth(args: argparse.Namespace) -> int:
    params = replace(
        DEFAULT_PROFILE,
        rest_s=args.rest_s,
        accelerate_s=args.accelerate_s,
        cruise_s=args.cruise_s,
        brake_s=args.brake_s,
        tail_s=args.tail_s,
        accel_ms2=args.accel_ms2,
        brake_ms2=args.brake_ms2,
        noise_sigma_ms2=args.noise_sigma_ms2,
        seed=args.seed,
    )
    try:
        samples = generate_acceleration_profile(params)
    except ValueError as exc:
        raise ConfigurationError(str(exc)) from exc
    out = write_profile_csv(args.out, samples, column=None if args.no_header else args.column)
    print(f"wrote {samples.size} samples to {out}")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "csv":
            return _run_csv(args)
        if args.command == "synth":
            return _run_synth(args)
    except ConfigurationError as exc:
        logger.error("configuration error: %s", exc)
        return _EXIT_CONFIG
    except UpstreamDataError as exc:
        logger.error("input error: %s", exc)
        return _EXIT_DATA
    except SimulationError as exc:
        logger.error("simulation failed: %s", exc)
        return _EXIT_RUNTIME
    except OSError as exc:
        logger.error("failed to write output: %s", exc)
        return _EXIT_RUNTIME

    parser.error(f"Unknown command: {args.command}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
