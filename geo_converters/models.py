"""
Pydantic models for geo shapes.

These models are the values exchanged with the converters. They are immutable
and compare equal when their fields are equal.
"""

from enum import Enum
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from geo_converters.constants import EARTH_RADIUS_KM, EARTH_RADIUS_MI
from geo_converters.errors import InvalidArgumentError


# -----------------------------------------------------------------------------
# Core Geometry Models
# -----------------------------------------------------------------------------


def _widen_int(v: Any) -> Any:
    # ints widen to float; strings and bools are left to fail strict validation
    if isinstance(v, int) and not isinstance(v, bool):
        return float(v)
    return v


class Point(BaseModel):
    """A point in the x/y plane."""

    model_config = ConfigDict(frozen=True)

    x: float = Field(..., strict=True)
    y: float = Field(..., strict=True)

    @field_validator("x", "y", mode="before")
    @classmethod
    def widen_int(cls, v: Any) -> Any:
        return _widen_int(v)


class Box(BaseModel):
    """An axis-aligned rectangle spanned by two opposite corners."""

    model_config = ConfigDict(frozen=True)

    first: Point = Field(..., description="One corner")
    second: Point = Field(..., description="The opposite corner")


class Metric(str, Enum):
    """Named distance metrics, normalized against the earth radius."""

    KILOMETERS = "KILOMETERS"
    MILES = "MILES"
    NEUTRAL = "NEUTRAL"

    @property
    def multiplier(self) -> float:
        return _METRIC_UNITS[self][0]

    @property
    def abbreviation(self) -> str:
        return _METRIC_UNITS[self][1]


_METRIC_UNITS = {
    Metric.KILOMETERS: (EARTH_RADIUS_KM, "km"),
    Metric.MILES: (EARTH_RADIUS_MI, "mi"),
    Metric.NEUTRAL: (1.0, ""),
}


class Distance(BaseModel):
    """A distance value together with the metric it is expressed in."""

    model_config = ConfigDict(frozen=True)

    value: float = Field(..., strict=True)
    metric: Metric = Metric.NEUTRAL

    @field_validator("value", mode="before")
    @classmethod
    def widen_int(cls, v: Any) -> Any:
        return _widen_int(v)

    @property
    def normalized_value(self) -> float:
        """The value divided by the metric's multiplier."""
        return self.value / self.metric.multiplier

    def in_metric(self, metric: Metric) -> "Distance":
        """
        Express this distance in another metric.

        Args:
            metric: The target metric

        Returns:
            This distance if the metric is unchanged, otherwise a new distance
            with the same normalized value
        """
        if metric == self.metric:
            return self
        return Distance(value=self.normalized_value * metric.multiplier, metric=metric)


class CenteredShape(BaseModel):
    """A center point and a radius."""

    model_config = ConfigDict(frozen=True)

    center: Point
    radius: Distance

    @field_validator("radius", mode="before")
    @classmethod
    def coerce_radius(cls, v: Any) -> Any:
        # A bare number is a neutral distance
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return Distance(value=v)
        return v

    @field_validator("radius")
    @classmethod
    def validate_radius(cls, v: Distance) -> Distance:
        if v.value < 0:
            raise ValueError("radius must not be negative")
        return v


class Circle(CenteredShape):
    """A circle in the x/y plane."""


class Sphere(CenteredShape):
    """A sphere, queried on the surface of the earth."""


class Polygon(BaseModel):
    """A polygon given by its boundary points in walk order."""

    model_config = ConfigDict(frozen=True)

    points: tuple[Point, ...] = Field(..., min_length=1)


Shape = Point | Box | Circle | Sphere | Polygon


# -----------------------------------------------------------------------------
# GeoJSON Models
# -----------------------------------------------------------------------------


@runtime_checkable
class HasTypeAndCoordinates(Protocol):
    """Custom geometry that already knows its GeoJSON type and coordinates."""

    type: str
    coordinates: Any


class GeoJson(BaseModel):
    """
    A geometry to be written or read in the GeoJSON dialect.

    The geometry is a Point, a Box, a Polygon, a raw [x, y] pair or any
    object implementing HasTypeAndCoordinates. Decoding only ever produces
    Point and Polygon geometries.
    """

    model_config = ConfigDict(frozen=True)

    geometry: Any

    @computed_field
    @property
    def type(self) -> str:
        match self.geometry:
            case Point() | list() | tuple():
                return "Point"
            case Box() | Polygon():
                return "Polygon"
            case HasTypeAndCoordinates() if isinstance(self.geometry.type, str):
                return self.geometry.type
            case _:
                raise InvalidArgumentError(
                    f"Unknown GeoJson type {type(self.geometry).__name__}"
                )

    @classmethod
    def point(cls, x: float, y: float) -> "GeoJson":
        return cls(geometry=Point(x=x, y=y))

    @classmethod
    def polygon(cls, polygon: Polygon) -> "GeoJson":
        return cls(geometry=polygon)


# -----------------------------------------------------------------------------
# Query Models
# -----------------------------------------------------------------------------


class GeoCommand(BaseModel):
    """A legacy geospatial query operator applied to a shape."""

    model_config = ConfigDict(frozen=True)

    command: str = Field(..., min_length=1, description="Operator name, e.g. $box")
    shape: Any

    @classmethod
    def for_shape(cls, shape: Shape) -> "GeoCommand":
        """
        Create a command named after the legacy operator for the shape.

        Raises:
            InvalidArgumentError: If no legacy operator exists for the shape
        """
        match shape:
            case Box():
                command = "$box"
            case Circle():
                command = "$center"
            case Sphere():
                command = "$centerSphere"
            case Polygon():
                command = "$polygon"
            case _:
                raise InvalidArgumentError(f"Unknown shape {type(shape).__name__}")
        return cls(command=command, shape=shape)
