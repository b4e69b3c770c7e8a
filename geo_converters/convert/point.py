"""Point conversion."""

from collections.abc import Iterable
from typing import Any

from geo_converters.errors import InvalidShapeError
from geo_converters.models import Point

from .coordinates import Document, point_from_fields, point_from_pair, require_document
from .geojson import decode_geojson


def encode_point(point: Point | None) -> Document | None:
    """Write a point as {x, y}."""
    if point is None:
        return None
    return {"x": point.x, "y": point.y}


def decode_point(source: Any) -> Point | None:
    """
    Read a point from an [x, y] pair, a GeoJSON Point or an {x, y} document.

    Args:
        source: The list or document to read

    Returns:
        The point, or None for a None source

    Raises:
        InvalidShapeError: If the source does not hold exactly two numeric
            coordinates
    """
    if source is None:
        return None

    if isinstance(source, (list, tuple)):
        return point_from_pair(source)

    source = require_document(source, "point")

    if source.get("type") == "Point":
        return decode_geojson(source).geometry

    return point_from_fields(source)


def decode_points(elements: Iterable[Any]) -> list[Point]:
    """Read each element as a point, keeping order."""
    points = []
    for element in elements:
        if element is None:
            raise InvalidShapeError("Point elements of polygon must not be null")
        points.append(decode_point(element))
    return points
