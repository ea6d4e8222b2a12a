"""Tests for the command-line entry script."""

import io

import pytest

import run


def _rows(text):
    return [tuple(float(v) for v in line.split()) for line in text.splitlines()]


def test_wgs_points(borders):
    out = io.StringIO()
    code = run.main([str(borders.lt.longitude), str(borders.lt.latitude),
                     str(borders.rb.longitude), str(borders.rb.latitude)], out=out)
    assert code == 0
    rows = _rows(out.getvalue())
    assert rows[0] == pytest.approx((0.0, 100.0), abs=1e-5)
    assert rows[1] == pytest.approx((100.0, 0.0), abs=1e-5)


def test_flat_points(monkeypatch):
    from geoframe import config

    monkeypatch.setattr(config, "ROTATION", False)
    out = io.StringIO()
    assert run.main(["--flat", "8139661", "7374000"], out=out) == 0
    assert len(_rows(out.getvalue())) == 1


def test_invalid_point_exits_2(capsys):
    assert run.main(["181", "0"], out=io.StringIO()) == 2
    assert "`coordinates.longitude` out of bounds" in capsys.readouterr().err


def test_odd_number_of_values():
    with pytest.raises(SystemExit) as exc_info:
        run.main(["73.1"])
    assert exc_info.value.code == 2
