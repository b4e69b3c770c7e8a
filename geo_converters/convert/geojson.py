"""GeoJSON conversion."""

from typing import Any

from geo_converters.errors import InvalidArgumentError
from geo_converters.models import Box, GeoJson, HasTypeAndCoordinates, Point, Polygon

from .coordinates import (
    Document,
    decode_ring,
    invalid_values,
    require_document,
    to_coordinates,
    to_pair,
)


def encode_geojson(value: Any) -> Document | None:
    """
    Write a geometry as a GeoJSON {type, coordinates} document.

    Boxes become a closed five point ring walking first corner,
    (first.x, second.y), second corner, (second.x, first.y), first corner.
    Open polygon rings are closed by repeating the first point.

    Args:
        value: A GeoJson wrapper or a bare geometry

    Returns:
        The GeoJSON document, or None for a None value

    Raises:
        InvalidArgumentError: If the geometry has no GeoJSON representation
    """
    if value is None:
        return None

    geometry = value.geometry if isinstance(value, GeoJson) else value

    match geometry:
        case Point():
            return {"type": "Point", "coordinates": to_pair(geometry)}

        case list() | tuple():
            if len(geometry) != 2:
                raise InvalidArgumentError("Point coordinates need to have x and y value")
            with invalid_values("GeoJson point", InvalidArgumentError):
                point = Point(x=geometry[0], y=geometry[1])
            return {"type": "Point", "coordinates": to_pair(point)}

        case Box():
            p1 = geometry.first
            p3 = geometry.second
            p2 = Point(x=p1.x, y=p3.y)
            p4 = Point(x=p3.x, y=p1.y)
            return {"type": "Polygon", "coordinates": to_coordinates(p1, p2, p3, p4, p1)}

        case Polygon():
            points = list(geometry.points)
            if points[0] != points[-1]:
                points.append(points[0])
            return {"type": "Polygon", "coordinates": to_coordinates(*points)}

        case HasTypeAndCoordinates() if isinstance(geometry.type, str):
            return {"type": geometry.type, "coordinates": geometry.coordinates}

        case _:
            raise InvalidArgumentError(f"Unknown GeoJson type {type(geometry).__name__}")


def decode_geojson(source: Any) -> GeoJson | None:
    """
    Read a GeoJSON Point or Polygon document.

    Only the first ring of a polygon is read.

    Raises:
        InvalidArgumentError: If the type is missing or unknown, or the
            coordinates do not fit the type
        InvalidShapeError: If a ring element is null or not a point
    """
    if source is None:
        return None

    source = require_document(source, "GeoJson", InvalidArgumentError)

    if "type" not in source:
        raise InvalidArgumentError("GeoJson needs to specify type")

    geo_type = str(source["type"])
    coordinates = source.get("coordinates")

    match geo_type:
        case "Point":
            if not isinstance(coordinates, (list, tuple)) or len(coordinates) != 2:
                raise InvalidArgumentError("Point coordinates need to have x and y value")
            with invalid_values("GeoJson point", InvalidArgumentError):
                return GeoJson.point(coordinates[0], coordinates[1])

        case "Polygon":
            if not isinstance(coordinates, (list, tuple)) or not coordinates:
                raise InvalidArgumentError("Polygon coordinates need to contain a ring")
            ring = coordinates[0]
            if not isinstance(ring, (list, tuple)):
                raise InvalidArgumentError("Polygon ring must be a list of points")
            points = decode_ring(ring)
            with invalid_values("GeoJson polygon", InvalidArgumentError):
                return GeoJson.polygon(Polygon(points=points))

        case _:
            raise InvalidArgumentError(f"Unknown GeoJson type {geo_type}")
