"""Circle and sphere conversion."""

from typing import Any

from geo_converters.errors import InvalidShapeError, UnknownMetricError
from geo_converters.models import CenteredShape, Circle, Distance, Metric, Point, Sphere

from .coordinates import Document, invalid_values, require_document
from .point import decode_point, encode_point


def resolve_metric(name: Any) -> Metric:
    """
    Look up a metric by its name.

    Raises:
        UnknownMetricError: If the name is not a string naming a known metric
    """
    if not isinstance(name, str):
        raise UnknownMetricError(name)
    try:
        return Metric[name]
    except KeyError:
        raise UnknownMetricError(name) from None


def _encode_centered(shape: CenteredShape) -> Document:
    return {
        "center": encode_point(shape.center),
        "radius": shape.radius.normalized_value,
        "metric": shape.radius.metric.value,
    }


def _decode_centered(source: Any, kind: str) -> tuple[Point, Distance]:
    source = require_document(source, kind)

    center = source.get("center")
    radius = source.get("radius")

    if center is None:
        raise InvalidShapeError("Center must not be null")
    if radius is None:
        raise InvalidShapeError("Radius must not be null")

    with invalid_values(f"{kind} radius"):
        distance = Distance(value=radius)

    if "metric" in source:
        metric_name = source["metric"]
        if metric_name is None:
            raise InvalidShapeError("Metric must not be null")
        distance = distance.in_metric(resolve_metric(metric_name))

    return decode_point(center), distance


def encode_circle(circle: Circle | None) -> Document | None:
    """Write a circle as {center, radius, metric}."""
    if circle is None:
        return None
    return _encode_centered(circle)


def decode_circle(source: Any) -> Circle | None:
    """Read a circle from a {center, radius, metric?} document."""
    if source is None:
        return None
    center, distance = _decode_centered(source, "circle")
    with invalid_values("circle"):
        return Circle(center=center, radius=distance)


def encode_sphere(sphere: Sphere | None) -> Document | None:
    """Write a sphere as {center, radius, metric}."""
    if sphere is None:
        return None
    return _encode_centered(sphere)


def decode_sphere(source: Any) -> Sphere | None:
    """Read a sphere from a {center, radius, metric?} document."""
    if source is None:
        return None
    center, distance = _decode_centered(source, "sphere")
    with invalid_values("sphere"):
        return Sphere(center=center, radius=distance)
