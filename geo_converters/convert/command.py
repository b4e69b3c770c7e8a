"""Geo command conversion for legacy geospatial queries."""

import logging
from typing import Any

from geo_converters.config import settings
from geo_converters.errors import InvalidArgumentError
from geo_converters.models import Box, Circle, GeoCommand, Polygon, Sphere

from .coordinates import Document, to_pair

logger = logging.getLogger(__name__)


def encode_geo_command(command: GeoCommand | None, strict: bool | None = None) -> Document | None:
    """
    Write a geo command as {command: [arguments...]}.

    Arguments per shape:
        Box: the two corners as [x, y] pairs
        Circle, Sphere: the center pair followed by the normalized radius
        Polygon: one [x, y] pair per point

    Args:
        command: The command to write
        strict: Raise for shapes without arguments instead of writing an
            empty list. Defaults to settings.strict_geo_commands.

    Returns:
        The command document, or None for a None command

    Raises:
        InvalidArgumentError: In strict mode, if the shape is not supported
    """
    if command is None:
        return None

    if strict is None:
        strict = settings.strict_geo_commands

    return {command.command: _to_arguments(command.shape, command.command, strict)}


def _to_arguments(shape: Any, name: str, strict: bool) -> list[Any]:
    match shape:
        case Box():
            return [to_pair(shape.first), to_pair(shape.second)]
        case Circle() | Sphere():
            return [to_pair(shape.center), shape.radius.normalized_value]
        case Polygon():
            return [to_pair(point) for point in shape.points]
        case _:
            if strict:
                raise InvalidArgumentError(
                    f"Cannot write {type(shape).__name__} as {name} arguments"
                )
            logger.warning(f"Writing {name} with no arguments for {type(shape).__name__}")
            return []
