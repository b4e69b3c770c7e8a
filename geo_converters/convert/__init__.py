"""Converters between geo shapes and documents."""

from .box import decode_box, encode_box
from .circle import decode_circle, decode_sphere, encode_circle, encode_sphere, resolve_metric
from .command import encode_geo_command
from .coordinates import Document, to_coordinates, to_pair
from .geojson import decode_geojson, encode_geojson
from .point import decode_point, decode_points, encode_point
from .polygon import decode_polygon, encode_polygon
from .registry import GeoConverter, find_converter, get_converters_to_register

__all__ = [
    "Document",
    "to_pair",
    "to_coordinates",
    "encode_point",
    "decode_point",
    "decode_points",
    "encode_box",
    "decode_box",
    "encode_circle",
    "decode_circle",
    "encode_sphere",
    "decode_sphere",
    "resolve_metric",
    "encode_polygon",
    "decode_polygon",
    "encode_geojson",
    "decode_geojson",
    "encode_geo_command",
    "GeoConverter",
    "get_converters_to_register",
    "find_converter",
]
