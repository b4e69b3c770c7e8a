"""Registry of geo converters for a conversion framework."""

import logging
from typing import Any, Callable, Literal, NamedTuple

from geo_converters.models import Box, Circle, GeoCommand, GeoJson, Point, Polygon, Sphere

from .box import decode_box, encode_box
from .circle import decode_circle, decode_sphere, encode_circle, encode_sphere
from .command import encode_geo_command
from .geojson import decode_geojson, encode_geojson
from .point import decode_point, encode_point
from .polygon import decode_polygon, encode_polygon

logger = logging.getLogger(__name__)


class GeoConverter(NamedTuple):
    """A single conversion from one type to another."""

    name: str
    source_type: type
    target_type: type
    direction: Literal["read", "write"]
    convert: Callable[[Any], Any]


_CONVERTERS = (
    GeoConverter("box_to_document", Box, dict, "write", encode_box),
    GeoConverter("polygon_to_document", Polygon, dict, "write", encode_polygon),
    GeoConverter("circle_to_document", Circle, dict, "write", encode_circle),
    GeoConverter("sphere_to_document", Sphere, dict, "write", encode_sphere),
    GeoConverter("document_to_box", dict, Box, "read", decode_box),
    GeoConverter("document_to_polygon", dict, Polygon, "read", decode_polygon),
    GeoConverter("document_to_circle", dict, Circle, "read", decode_circle),
    GeoConverter("document_to_sphere", dict, Sphere, "read", decode_sphere),
    GeoConverter("document_to_point", dict, Point, "read", decode_point),
    GeoConverter("point_to_document", Point, dict, "write", encode_point),
    GeoConverter("geo_command_to_document", GeoCommand, dict, "write", encode_geo_command),
    GeoConverter("geojson_to_document", GeoJson, dict, "write", encode_geojson),
    GeoConverter("document_to_geojson", dict, GeoJson, "read", decode_geojson),
)


def get_converters_to_register() -> list[GeoConverter]:
    """
    Return the geo converters to register with a conversion framework.

    Returns:
        All 13 converters, writers and readers for every shape
    """
    logger.debug(f"Registering {len(_CONVERTERS)} geo converters")
    return list(_CONVERTERS)


def find_converter(source_type: type, target_type: type) -> GeoConverter | None:
    """
    Find the first converter able to turn source_type into target_type.

    Args:
        source_type: Type of the value to convert
        target_type: Type wanted

    Returns:
        The matching converter, or None if there is none
    """
    for converter in _CONVERTERS:
        if issubclass(source_type, converter.source_type) and issubclass(
            converter.target_type, target_type
        ):
            return converter
    return None
