"""Tests for point conversion and coordinate lists."""

import pytest

from geo_converters.convert import decode_point, decode_points, encode_point, to_coordinates, to_pair
from geo_converters.convert.coordinates import decode_ring
from geo_converters.errors import GeoConversionError, InvalidShapeError
from geo_converters.models import Point


class TestEncodePoint:
    """Tests for writing points."""

    def test_encode(self):
        """A point should be written as {x, y}."""
        assert encode_point(Point(x=1.5, y=-2)) == {"x": 1.5, "y": -2.0}

    def test_encode_none(self):
        """None should pass through."""
        assert encode_point(None) is None


class TestDecodePoint:
    """Tests for reading points."""

    def test_round_trip(self):
        """Decoding an encoded point should give the point back."""
        point = Point(x=151.2153, y=-33.8568)
        assert decode_point(encode_point(point)) == point

    def test_decode_none(self):
        """None should pass through."""
        assert decode_point(None) is None

    def test_decode_list(self):
        """A two element list should be read as x, y."""
        assert decode_point([3, 4]) == Point(x=3, y=4)

    def test_decode_tuple(self):
        """A two element tuple should be read as x, y."""
        assert decode_point((3.5, 4.5)) == Point(x=3.5, y=4.5)

    def test_decode_list_wrong_length(self):
        """A list with three values is not a point."""
        with pytest.raises(InvalidShapeError):
            decode_point([1, 2, 3])

    def test_decode_geojson_point(self):
        """A document typed Point should be read as GeoJSON."""
        assert decode_point({"type": "Point", "coordinates": [5, 6]}) == Point(x=5, y=6)

    def test_decode_legacy_with_two_keys(self):
        """A document with exactly x and y should be read as legacy."""
        assert decode_point({"y": 2, "x": 1}) == Point(x=1, y=2)

    def test_decode_three_keys(self):
        """A legacy point document must have exactly two keys."""
        with pytest.raises(InvalidShapeError):
            decode_point({"x": 1, "y": 2, "z": 3})

    def test_decode_wrong_keys(self):
        """A legacy point document must hold x and y."""
        with pytest.raises(InvalidShapeError):
            decode_point({"lat": 1, "lon": 2})

    def test_decode_not_a_document(self):
        """A scalar cannot be read as a point."""
        with pytest.raises(InvalidShapeError):
            decode_point("1,2")

    def test_errors_are_value_errors(self):
        """Conversion errors should be catchable as ValueError."""
        with pytest.raises(ValueError):
            decode_point({"x": 1})
        assert issubclass(InvalidShapeError, GeoConversionError)


class TestDecodePoints:
    """Tests for reading point lists."""

    def test_keeps_order(self):
        """Points should be read in order."""
        assert decode_points([[0, 0], {"x": 1, "y": 1}]) == [Point(x=0, y=0), Point(x=1, y=1)]

    def test_null_element(self):
        """A null element should be rejected."""
        with pytest.raises(InvalidShapeError):
            decode_points([[0, 0], None])


class TestCoordinates:
    """Tests for coordinate list construction."""

    def test_pair(self):
        """A point should become an [x, y] pair."""
        assert to_pair(Point(x=1, y=2)) == [1, 2]

    def test_single_ring_nesting(self):
        """Points should be wrapped as one ring inside an outer list."""
        coordinates = to_coordinates(Point(x=0, y=0), Point(x=1, y=0), Point(x=1, y=1))
        assert coordinates == [[[0, 0], [1, 0], [1, 1]]]

    def test_single_point_still_nested(self):
        """Even a single point should get the ring nesting."""
        assert to_coordinates(Point(x=2, y=3)) == [[[2, 3]]]


class TestMalformedPointValues:
    """Tests for points whose values are not numbers."""

    def test_null_coordinate_in_document(self):
        """A null x should be an invalid shape."""
        with pytest.raises(InvalidShapeError, match="x"):
            decode_point({"x": None, "y": 1})

    def test_null_coordinate_in_pair(self):
        """A null value in a pair should be an invalid shape."""
        with pytest.raises(InvalidShapeError):
            decode_point([None, 1])

    def test_numeric_strings_rejected(self):
        """Numeric strings should not be read as coordinates."""
        with pytest.raises(InvalidShapeError):
            decode_point({"x": "12", "y": "3"})

    def test_booleans_rejected(self):
        """Booleans should not be read as coordinates."""
        with pytest.raises(InvalidShapeError):
            decode_point([True, False])

    def test_ints_widen_to_float(self):
        """Integer coordinates should be read as floats."""
        point = decode_point({"x": 12, "y": 3})
        assert point == Point(x=12.0, y=3.0)
        assert isinstance(point.x, float)

    def test_cause_is_kept(self):
        """The underlying validation error should be chained."""
        with pytest.raises(InvalidShapeError) as exc_info:
            decode_point({"x": "a", "y": 1})
        assert exc_info.value.__cause__ is not None


class TestDecodeRing:
    """Tests for reading GeoJSON rings without the point dialect detection."""

    def test_pairs_and_documents(self):
        """Ring elements may be pairs or legacy point documents."""
        assert decode_ring([[0, 0], {"x": 1, "y": 2}]) == [Point(x=0, y=0), Point(x=1, y=2)]

    def test_null_element(self):
        """A null ring element should be rejected."""
        with pytest.raises(InvalidShapeError):
            decode_ring([None])
