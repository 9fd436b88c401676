"""Smoke tests for the command-line interface."""

from trainsim.cli import main
from trainsim.io.profile_io import read_profile_netcdf


def _synth(tmp_path, *extra: str):
    path = tmp_path / "accel.csv"
    code = main(
        [
            "synth",
            "--out",
            str(path),
            "--rest-s",
            "1",
            "--accelerate-s",
            "5",
            "--cruise-s",
            "3",
            "--brake-s",
            "5",
            "--tail-s",
            "1",
            *extra,
        ]
    )
    assert code == 0
    return path


def test_cli_synth_then_csv(tmp_path, capsys) -> None:
    path = _synth(tmp_path)
    nc_path = tmp_path / "profiles.nc"
    capsys.readouterr()

    code = main(
        [
            "csv",
            str(path),
            "--column",
            "acceleration",
            "-a",
            "mid-riemann",
            "-s",
            "4",
            "-i",
            "2",
            "-t",
            "2",
            "--out",
            str(nc_path),
        ]
    )
    out = capsys.readouterr().out

    assert code == 0
    assert "length: 15 step: 4 iterations: 2" in out
    assert "final velocity: " in out
    assert "final position: +" in out
    assert "avg: " in out

    ds = read_profile_netcdf(nc_path)
    assert ds.sizes["t"] == 15
    assert ds.attrs["threads"] == 2


def test_cli_reads_yaml_config(tmp_path, capsys) -> None:
    path = _synth(tmp_path, "--no-header")
    cfg = tmp_path / "sim.yml"
    cfg.write_text(f"algo: simpsons\nstep: 6\niterations: 1\ninput:\n  path: {path.name}\n", encoding="utf-8")
    capsys.readouterr()

    code = main(["csv", "--config", str(cfg), "-s", "8"])
    out = capsys.readouterr().out

    assert code == 0
    assert "length: 15 step: 8 iterations: 1" in out
    assert "total: " in out


def test_cli_missing_input_file(tmp_path) -> None:
    assert main(["csv", str(tmp_path / "missing.csv")]) == 3


def test_cli_requires_input(tmp_path) -> None:
    assert main(["csv"]) == 2


def test_cli_bad_config(tmp_path) -> None:
    cfg = tmp_path / "bad.yml"
    cfg.write_text("step: 0\n", encoding="utf-8")

    assert main(["csv", str(tmp_path / "x.csv"), "--config", str(cfg)]) == 2


def test_cli_unwritable_output(tmp_path, caplog) -> None:
    path = _synth(tmp_path)
    out = path / "profiles.nc"

    code = main(["csv", str(path), "--column", "acceleration", "-i", "1", "--out", str(out)])

    assert code == 1
    assert "failed to write output" in caplog.text
