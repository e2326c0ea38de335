import logging

import pytest

from core.settings import ViewTuning


def test_defaults():
    tuning = ViewTuning()
    assert tuning.overscan == 1.15
    assert tuning.drag_lng_per_px == 0.14
    assert tuning.drag_lat_per_px == 0.1
    assert tuning.wheel_fov_per_unit == 0.03
    assert tuning.auto_rotate_step == 0.12
    assert tuning.auto_rotate_interval_ms == 25
    assert (tuning.fov_min, tuning.fov_max, tuning.default_fov) == (35.0, 108.0, 78.0)
    assert tuning.lat_limit == 89.5


def test_from_env_applies_overrides(monkeypatch):
    monkeypatch.setenv("CONCAVE_OVERSCAN", "1.3")
    monkeypatch.setenv("CONCAVE_AUTO_ROTATE_MS", "50")
    monkeypatch.setenv("CONCAVE_DRAG_LNG", "")

    tuning = ViewTuning.from_env()

    assert tuning.overscan == 1.3
    assert tuning.auto_rotate_interval_ms == 50
    assert isinstance(tuning.auto_rotate_interval_ms, int)
    assert tuning.drag_lng_per_px == 0.14


def test_from_env_ignores_garbage(monkeypatch, caplog):
    monkeypatch.setenv("CONCAVE_WHEEL_FOV", "fast")

    with caplog.at_level(logging.WARNING, logger="core.settings"):
        tuning = ViewTuning.from_env()

    assert tuning.wheel_fov_per_unit == 0.03
    assert "CONCAVE_WHEEL_FOV" in caplog.text


@pytest.mark.parametrize("name, raw", [
    ("CONCAVE_AUTO_ROTATE_MS", "inf"),
    ("CONCAVE_AUTO_ROTATE_MS", "nan"),
    ("CONCAVE_AUTO_ROTATE_MS", "0"),
    ("CONCAVE_AUTO_ROTATE_MS", "-5"),
    ("CONCAVE_AUTO_ROTATE_MS", "0.4"),
    ("CONCAVE_OVERSCAN", "nan"),
    ("CONCAVE_OVERSCAN", "-inf"),
    ("CONCAVE_DRAG_LAT", "0"),
])
def test_from_env_rejects_non_finite_and_non_positive(monkeypatch, caplog, name, raw):
    monkeypatch.setenv(name, raw)

    with caplog.at_level(logging.WARNING, logger="core.settings"):
        tuning = ViewTuning.from_env()

    assert tuning == ViewTuning()
    assert name in caplog.text
