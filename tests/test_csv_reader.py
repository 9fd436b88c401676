"""Tests for the CSV sample provider."""

import numpy as np
import pytest

from trainsim.errors import UpstreamDataError
from trainsim.io.csv_reader import load_samples_csv


def test_headerless_file_uses_first_column(tmp_path) -> None:
    path = tmp_path / "accel.csv"
    path.write_text("0.0,9\n1.5,9\n-2.25,9\n", encoding="utf-8")

    values = load_samples_csv(path)

    np.testing.assert_array_equal(values, [0.0, 1.5, -2.25])


def test_named_column_with_header(tmp_path) -> None:
    path = tmp_path / "accel.csv"
    path.write_text("time,ax\n0, 0.5\n1, 1.0\n2, -0.25\n", encoding="utf-8")

    values = load_samples_csv(path, column="ax")

    np.testing.assert_array_equal(values, [0.5, 1.0, -0.25])


def test_values_parse_exactly(tmp_path) -> None:
    expected = [2.2464854430503474, 0.1 + 0.2, -1.0000000000000002]
    path = tmp_path / "accel.csv"
    path.write_text("".join(f"{v!r}\n" for v in expected), encoding="utf-8")

    values = load_samples_csv(path)

    assert values.tolist() == expected


def test_relative_path_resolved_from_cwd(tmp_path, monkeypatch) -> None:
    (tmp_path / "rel.csv").write_text("1\n2\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    values = load_samples_csv("rel.csv")

    np.testing.assert_array_equal(values, [1.0, 2.0])


def test_missing_column(tmp_path) -> None:
    path = tmp_path / "accel.csv"
    path.write_text("time,ax\n0,1\n", encoding="utf-8")

    with pytest.raises(UpstreamDataError) as info:
        load_samples_csv(path, column="ay")

    assert info.value.column == "ay"


def test_unparsable_value_reports_record(tmp_path) -> None:
    path = tmp_path / "accel.csv"
    path.write_text("1.0\nabc\n3.0\n", encoding="utf-8")

    with pytest.raises(UpstreamDataError) as info:
        load_samples_csv(path)

    assert info.value.record == 2
    assert "record: 2" in str(info.value)


def test_empty_value_reports_record(tmp_path) -> None:
    path = tmp_path / "accel.csv"
    path.write_text("ax,ay\n1,2\n2,3\n,4\n", encoding="utf-8")

    with pytest.raises(UpstreamDataError) as info:
        load_samples_csv(path, column="ax")

    assert info.value.record == 3


def test_missing_file(tmp_path) -> None:
    with pytest.raises(UpstreamDataError) as info:
        load_samples_csv(tmp_path / "nope.csv")

    assert info.value.path == tmp_path / "nope.csv"


def test_empty_file(tmp_path) -> None:
    path = tmp_path / "empty.csv"
    path.write_text("", encoding="utf-8")

    with pytest.raises(UpstreamDataError):
        load_samples_csv(path)


def test_header_without_records(tmp_path) -> None:
    path = tmp_path / "header.csv"
    path.write_text("ax\n", encoding="utf-8")

    with pytest.raises(UpstreamDataError):
        load_samples_csv(path, column="ax")
