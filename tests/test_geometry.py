import math

import numpy
import pytest

from bezierfit.curve.geometry import (
    Point,
    angle_between_vectors,
    as_points,
    rotate_vectors,
    unit_vectors,
    vector_lengths,
)


class TestPoint:
    def test_defaults_to_origin(self):
        assert Point() == (0, 0)

    def test_add_and_subtract_are_componentwise(self):
        assert Point(1, 2) + Point(3, 5) == Point(4, 7)
        assert Point(1, 2) - (3, 5) == Point(-2, -3)
        assert -Point(1, -2) == Point(-1, 2)

    def test_scale(self):
        assert Point(1.5, -2).scale(2) == Point(3, -4)

    def test_multiply_scales(self):
        assert Point(1, 2) * 2 == Point(2, 4)
        assert 2 * Point(1, 2) == Point(2, 4)
        assert len(Point(1, 2) * 3) == 2

    def test_magnitude_and_normalize(self):
        p = Point(3, 4)
        assert p.magnitude() == 5
        n = p.normalize()
        assert n.x == pytest.approx(0.6)
        assert n.y == pytest.approx(0.8)

    def test_normalize_zero_vector(self):
        with pytest.raises(ZeroDivisionError):
            Point().normalize()

    def test_rotate_quarter_turn(self):
        r = Point(1, 0).rotate(math.pi / 2)
        assert r.x == pytest.approx(0, abs=1e-12)
        assert r.y == pytest.approx(1)

    def test_angle_between_is_signed(self):
        assert Point(1, 0).angle_between((0, 1)) == pytest.approx(math.pi / 2)
        assert Point(0, 1).angle_between((1, 0)) == pytest.approx(-math.pi / 2)
        assert Point(1, 1).angle_between((2, 2)) == pytest.approx(0)

    def test_lerp(self):
        assert Point(0, 0).lerp((10, 20)) == Point(5, 10)
        assert Point(0, 0).lerp((10, 20), 0.25) == Point(2.5, 5)

    def test_converts_to_array(self):
        array = numpy.asarray([Point(1, 2), Point(3, 4)])
        assert array.shape == (2, 2)

    def test_as_points(self):
        points = as_points([(1, 2), [3, 4]])
        assert points == [Point(1.0, 2.0), Point(3.0, 4.0)]
        assert all(isinstance(p, Point) for p in points)


class TestVectorHelpers:
    def test_angles_match_point_method(self):
        v_from = numpy.array([[1, 0], [0, 1], [3, 1]])
        v_to = numpy.array([[0, 1], [-1, -1], [1, 3]])
        expected = [Point(*f).angle_between(t) for f, t in zip(v_from, v_to)]
        numpy.testing.assert_allclose(angle_between_vectors(v_from, v_to), expected)

    def test_rotate_vectors(self):
        vectors = numpy.array([[1, 0], [0, 2]])
        rotated = rotate_vectors(vectors, [math.pi / 2, math.pi])
        numpy.testing.assert_allclose(rotated, [[0, 1], [0, -2]], atol=1e-12)

    def test_rotate_vectors_scalar_angle(self):
        rotated = rotate_vectors([[1, 0], [0, 1]], math.pi / 2)
        numpy.testing.assert_allclose(rotated, [[0, 1], [-1, 0]], atol=1e-12)

    def test_lengths_and_units(self):
        vectors = numpy.array([[3, 4], [0, -2]])
        numpy.testing.assert_allclose(vector_lengths(vectors), [5, 2])
        numpy.testing.assert_allclose(unit_vectors(vectors), [[0.6, 0.8], [0, -1]])
