"""Errors raised while converting shapes to and from documents."""

from typing import Any


class GeoConversionError(ValueError):
    """Base class for all conversion failures caused by caller data."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidShapeError(GeoConversionError):
    """A shape document is malformed or incomplete."""


class UnknownMetricError(GeoConversionError):
    """A metric name is not one of the known metrics."""

    def __init__(self, metric: Any):
        self.metric = metric
        super().__init__(f"Unknown metric {metric!r}")


class InvalidArgumentError(GeoConversionError):
    """A GeoJSON value or geometry argument cannot be converted."""
