"""Box conversion."""

from typing import Any

from geo_converters.errors import InvalidShapeError
from geo_converters.models import Box

from .coordinates import Document, require_document
from .geojson import decode_geojson
from .point import decode_point, encode_point


def encode_box(box: Box | None) -> Document | None:
    """Write a box as {first, second}."""
    if box is None:
        return None
    return {
        "first": encode_point(box.first),
        "second": encode_point(box.second),
    }


def decode_box(source: Any) -> Box | None:
    """
    Read a box from a legacy {first, second} document or a GeoJSON Polygon.

    A GeoJSON box ring is written as p1, p2, p3, p4, p1, so the corners are
    recovered from the ring's first and third points.

    Raises:
        InvalidShapeError: If a corner is missing or the ring is too short
        InvalidArgumentError: If a GeoJSON document is malformed
    """
    if source is None:
        return None

    source = require_document(source, "box")

    if source.get("type") == "Polygon":
        points = decode_geojson(source).geometry.points
        if len(points) < 3:
            raise InvalidShapeError("Box polygon must contain at least 3 points")
        return Box(first=points[0], second=points[2])

    first = decode_point(source.get("first"))
    second = decode_point(source.get("second"))

    if first is None:
        raise InvalidShapeError("First corner must not be null")
    if second is None:
        raise InvalidShapeError("Second corner must not be null")

    return Box(first=first, second=second)
