from __future__ import annotations

import os

import pytest

from runningstats import ObservationParseError, iter_observations, read_observations
from runningstats.config import SAMPLE_OBSERVATIONS_PATH


def _write(tmp_path, text: str, name: str = "obs.csv"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_reads_single_column_with_header_and_comments(tmp_path):
    path = _write(tmp_path, "value\n# calibration run\n1.5\n\n2.5\n-1\n")
    assert list(iter_observations(path)) == [1.5, 2.5, -1.0]


def test_selects_column_and_delimiter(tmp_path):
    path = _write(tmp_path, "label;value\na;10\nb;30\nc;20\n")
    stats = read_observations(path, column=1, delimiter=";")
    assert stats.count == 3
    assert stats.current_max() == 30.0
    assert stats.current_mean() == pytest.approx(20.0)


def test_headerless_file(tmp_path):
    path = _write(tmp_path, "3\n4\n")
    assert list(iter_observations(str(path))) == [3.0, 4.0]


def test_bad_cell_reports_line_number(tmp_path):
    path = _write(tmp_path, "value\n1.0\nabc\n2.0\n")
    with pytest.raises(ObservationParseError) as excinfo:
        read_observations(path)
    err = excinfo.value
    assert err.line_number == 3
    assert err.text == "abc"
    assert err.path == os.fspath(path)
    assert isinstance(err, ValueError)


def test_missing_column_is_a_parse_error(tmp_path):
    path = _write(tmp_path, "1,2\n3\n")
    with pytest.raises(ObservationParseError):
        list(iter_observations(path, column=1))


def test_short_first_row_is_not_a_header(tmp_path):
    path = _write(tmp_path, "1\n2,3\n4,5\n")
    with pytest.raises(ObservationParseError) as excinfo:
        list(iter_observations(path, column=1))
    assert excinfo.value.line_number == 1
    assert excinfo.value.text == ""


def test_header_with_column_is_still_skipped(tmp_path):
    path = _write(tmp_path, "minute,value\n0,2\n5,3\n")
    assert list(iter_observations(path, column=1)) == [2.0, 3.0]


def test_missing_file_propagates(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_observations(tmp_path / "nope.csv")


def test_file_closed_when_generator_closed_early(tmp_path, monkeypatch):
    import builtins

    opened = []
    real_open = builtins.open

    def tracking_open(*args, **kwargs):
        f = real_open(*args, **kwargs)
        opened.append(f)
        return f

    path = _write(tmp_path, "1\n2\n3\n")
    monkeypatch.setattr(builtins, "open", tracking_open)
    gen = iter_observations(path)
    assert next(gen) == 1.0
    assert not opened[0].closed
    gen.close()
    assert opened[0].closed


def test_file_closed_after_parse_error(tmp_path, monkeypatch):
    import builtins

    opened = []
    real_open = builtins.open

    def tracking_open(*args, **kwargs):
        f = real_open(*args, **kwargs)
        opened.append(f)
        return f

    path = _write(tmp_path, "1\nx\n")
    monkeypatch.setattr(builtins, "open", tracking_open)
    with pytest.raises(ObservationParseError):
        read_observations(path)
    assert opened[0].closed


def test_bundled_sample():
    stats = read_observations(SAMPLE_OBSERVATIONS_PATH, column=1)
    assert stats.count == 8
    assert stats.current_max() == 1049.0
    assert stats.current_mean() == pytest.approx(sum([20.0, 576.0, 739.0, 842.0, 918.0, 979.0, 1029.0, 1049.0]) / 8)


def test_sample_data_is_inside_the_package():
    import runningstats

    package_dir = os.path.dirname(os.path.realpath(runningstats.__file__))
    sample = os.path.realpath(SAMPLE_OBSERVATIONS_PATH)
    assert os.path.commonpath([package_dir, sample]) == package_dir
    assert os.path.isfile(SAMPLE_OBSERVATIONS_PATH)
