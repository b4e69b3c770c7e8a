"""Polygon conversion."""

from typing import Any

from geo_converters.errors import InvalidShapeError
from geo_converters.models import Polygon

from .coordinates import Document, invalid_values, require_document
from .geojson import decode_geojson
from .point import decode_points, encode_point


def encode_polygon(polygon: Polygon | None) -> Document | None:
    """Write a polygon as {points: [...]}, keeping point order."""
    if polygon is None:
        return None
    return {"points": [encode_point(point) for point in polygon.points]}


def decode_polygon(source: Any) -> Polygon | None:
    """
    Read a polygon from a legacy {points} document or a GeoJSON Polygon.

    A GeoJSON ring keeps its closing point.

    Raises:
        InvalidShapeError: If points are missing or empty, or a point element
            is null or malformed
    """
    if source is None:
        return None

    source = require_document(source, "polygon")

    if source.get("type") == "Polygon":
        return decode_geojson(source).geometry

    points = source.get("points")
    if points is None:
        raise InvalidShapeError("Points must not be null")
    if not isinstance(points, (list, tuple)):
        raise InvalidShapeError("Points must be a list")

    decoded = decode_points(points)
    with invalid_values("polygon"):
        return Polygon(points=decoded)
