"""Tests for the YAML configuration loader."""

import logging
from pathlib import Path

import pytest

from trainsim.config import DEFAULT_CONFIG, SimConfig, load_config, merge_overrides
from trainsim.errors import ConfigurationError
from trainsim.quadrature import QuadratureRule


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "sim.yml"
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults() -> None:
    assert DEFAULT_CONFIG.algo == QuadratureRule.LEFT_RIEMANN
    assert DEFAULT_CONFIG.step == 100
    assert DEFAULT_CONFIG.iterations == 100
    assert DEFAULT_CONFIG.threads == 1


def test_load_config_case_insensitive_keys(tmp_path) -> None:
    path = _write(
        tmp_path,
        "ALGO: simpsons\nStep: 20\niterations: 3\nthreads: 2\nprogress-interval-s: 1.5\n",
    )

    cfg = load_config(path)

    assert cfg.sim == SimConfig(
        algo=QuadratureRule.SIMPSONS,
        step=20,
        iterations=3,
        threads=2,
        progress_interval_s=1.5,
    )
    assert cfg.input is None


def test_load_config_input_block_relative_to_file(tmp_path) -> None:
    path = _write(tmp_path, "step: 4\ninput:\n  path: data/accel.csv\n  column: ax\n")

    cfg = load_config(path)

    assert cfg.sim.step == 4
    assert cfg.sim.algo == DEFAULT_CONFIG.algo
    assert cfg.input.path == tmp_path / "data" / "accel.csv"
    assert cfg.input.column == "ax"


def test_empty_config_file_gives_defaults(tmp_path) -> None:
    cfg = load_config(_write(tmp_path, ""))

    assert cfg.sim == DEFAULT_CONFIG


@pytest.mark.parametrize(
    "text",
    [
        "step: 0\n",
        "iterations: -1\n",
        "threads: 0\n",
        "algo: euler\n",
        "step: many\n",
        "step: 2.5\n",
        "threads: 1.9\n",
        "iterations: true\n",
        "progress_interval_s: yes\n",
        "stride: 3\n",
        "progress_interval_s: 0\n",
        "- just\n- a list\n",
        "input:\n  column: ax\n",
    ],
)
def test_invalid_config_rejected(tmp_path, text: str) -> None:
    with pytest.raises(ConfigurationError):
        load_config(_write(tmp_path, text))


def test_missing_config_file(tmp_path) -> None:
    with pytest.raises(ConfigurationError):
        load_config(tmp_path / "missing.yml")


def test_merge_overrides_skips_none() -> None:
    merged = merge_overrides(DEFAULT_CONFIG, algo="trapezoidal", step=None, threads=4)

    assert merged.algo == QuadratureRule.TRAPEZOIDAL
    assert merged.step == DEFAULT_CONFIG.step
    assert merged.threads == 4


def test_merge_overrides_validates() -> None:
    with pytest.raises(ConfigurationError):
        merge_overrides(DEFAULT_CONFIG, step=0)
    with pytest.raises(ConfigurationError):
        merge_overrides(DEFAULT_CONFIG, subdivisions=3)


def test_simpsons_with_odd_step_only_warns(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="trainsim.config"):
        cfg = SimConfig(algo="simpsons", step=5).validate()

    assert cfg.step == 5
    assert "odd step" in caplog.text
