"""Pytest configuration and fixtures for geo converter tests."""

import json

import pytest

from geo_converters.config import settings
from geo_converters.models import Box, Circle, Distance, Metric, Point, Polygon, Sphere


@pytest.fixture
def box():
    """A 10x10 box anchored at the origin."""
    return Box(first=Point(x=0, y=0), second=Point(x=10, y=10))


@pytest.fixture
def triangle():
    """An open triangle (first point not repeated)."""
    return Polygon(points=[Point(x=0, y=0), Point(x=3, y=0), Point(x=0, y=4)])


@pytest.fixture
def circle():
    """A circle with a neutral radius."""
    return Circle(center=Point(x=1, y=2), radius=Distance(value=5))


@pytest.fixture
def sphere_km():
    """A sphere with a radius in kilometers."""
    return Sphere(
        center=Point(x=151.2153, y=-33.8568),
        radius=Distance(value=10, metric=Metric.KILOMETERS),
    )


@pytest.fixture
def lenient_commands(monkeypatch):
    """Switch the geo command encoder to the legacy lenient behaviour."""
    monkeypatch.setattr(settings, "strict_geo_commands", False)


@pytest.fixture
def json_file(tmp_path):
    """Write a value to a temporary JSON file and return its path."""

    def _write(value):
        path = tmp_path / "input.json"
        path.write_text(json.dumps(value), encoding="utf-8")
        return str(path)

    return _write
