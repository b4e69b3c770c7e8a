"""Coordinate list construction and document helpers."""

from collections.abc import Iterable, Mapping
from contextlib import contextmanager
from typing import Any, Generator

from pydantic import ValidationError

from geo_converters.errors import GeoConversionError, InvalidShapeError
from geo_converters.models import Point

# A document as exposed by a document database driver
Document = dict[str, Any]


def require_document(
    source: Any, kind: str, error: type[GeoConversionError] = InvalidShapeError
) -> Mapping[str, Any]:
    """Return the source if it is a document, else raise the given error."""
    if not isinstance(source, Mapping):
        raise error(f"Cannot read a {kind} from {type(source).__name__}")
    return source


@contextmanager
def invalid_values(
    kind: str, error: type[GeoConversionError] = InvalidShapeError
) -> Generator[None, None, None]:
    """Raise the given error when building a model from document values fails."""
    try:
        yield
    except ValidationError as e:
        detail = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc']) or kind}: {err['msg']}"
            for err in e.errors()
        )
        raise error(f"Invalid {kind}: {detail}") from e


def point_from_pair(values: Any) -> Point:
    """
    Read a point from an [x, y] pair.

    Raises:
        InvalidShapeError: If the pair does not hold two numbers
    """
    if not isinstance(values, (list, tuple)) or len(values) != 2:
        raise InvalidShapeError("Point coordinates need to have x and y value")
    with invalid_values("point"):
        return Point(x=values[0], y=values[1])


def point_from_fields(source: Mapping[str, Any]) -> Point:
    """
    Read a point from a legacy {x, y} document.

    Raises:
        InvalidShapeError: If the document does not hold exactly x and y numbers
    """
    if len(source) != 2:
        raise InvalidShapeError("Source must contain 2 elements")
    if "x" not in source or "y" not in source:
        raise InvalidShapeError("Source must contain x and y")
    with invalid_values("point"):
        return Point(x=source["x"], y=source["y"])


def decode_ring(elements: Iterable[Any]) -> list[Point]:
    """
    Read the points of a GeoJSON ring, keeping order.

    Elements are [x, y] pairs; legacy {x, y} documents are accepted too.

    Raises:
        InvalidShapeError: If an element is null or not a point
    """
    points = []
    for element in elements:
        if element is None:
            raise InvalidShapeError("Point elements of polygon must not be null")
        if isinstance(element, Mapping):
            points.append(point_from_fields(element))
        else:
            points.append(point_from_pair(element))
    return points


def to_pair(point: Point) -> list[float]:
    """Return the point as an [x, y] pair."""
    return [point.x, point.y]


def to_coordinates(*points: Point) -> list[list[list[float]]]:
    """
    Build GeoJSON polygon coordinates from points.

    The pairs are collected into a single ring which is wrapped in an outer
    list, giving [[[x1, y1], [x2, y2], ...]].

    Args:
        points: The ring's points in order

    Returns:
        The nested coordinate list
    """
    return [[to_pair(point) for point in points]]
