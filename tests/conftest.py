"""Pytest configuration and fixtures for geoframe tests."""

import pytest

from geoframe import config
from geoframe.mapper import RelativeMapper


@pytest.fixture(autouse=True)
def default_config(monkeypatch):
    """Pin configuration so the environment of the test run does not leak in."""
    monkeypatch.setattr(config, "FLAT_PROJECTION", "GOOGLE")
    monkeypatch.setattr(config, "ROTATION", True)


@pytest.fixture
def borders():
    """The built-in reference rectangle."""
    return config.DEFAULT_WGS_BORDERS


@pytest.fixture
def rotated_mapper():
    return RelativeMapper(rotation=True)


@pytest.fixture
def axis_mapper():
    return RelativeMapper(rotation=False, borders={
        "wgs": None,
        "flat": {"lt": {"x": 1000.0, "y": 3000.0}, "rb": {"x": 5000.0, "y": 1000.0}},
    })
