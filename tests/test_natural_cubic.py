import numpy
import pytest

from bezierfit.curve.bezier import build_segments
from bezierfit.curve.geometry import Point
from bezierfit.curve.natural_cubic import fit_natural_cubic


def _fit(anchors, closed=False):
    segments = build_segments(anchors, closed)
    fit_natural_cubic(segments, closed)
    return segments


def _rotate_about_square_center(p):
    # quarter turn counter-clockwise about (50, 50)
    return numpy.array([100 - p[1], p[0]])


class TestOpen:
    def test_anchors_unchanged(self, wave):
        segments = _fit(wave)
        assert [s.p0 for s in segments] == wave[:-1]
        assert [s.p3 for s in segments] == wave[1:]

    def test_first_and_second_derivatives_continuous(self, wave):
        segments = _fit(wave)
        for previous, segment in zip(segments[:-1], segments[1:]):
            numpy.testing.assert_allclose(previous.evaluate(1, 1), segment.evaluate(0, 1), atol=1e-9)
            numpy.testing.assert_allclose(previous.evaluate(1, 2), segment.evaluate(0, 2), atol=1e-9)

    def test_zero_curvature_at_ends(self, wave):
        segments = _fit(wave)
        numpy.testing.assert_allclose(segments[0].evaluate(0, 2), [0, 0], atol=1e-9)
        numpy.testing.assert_allclose(segments[-1].evaluate(1, 2), [0, 0], atol=1e-9)

    def test_last_segment_second_handle(self, wave):
        last = _fit(wave)[-1]
        expected = (numpy.array(last.p3) + numpy.array(last.p1)) / 2
        numpy.testing.assert_allclose(last.p2, expected)

    def test_collinear_anchors_give_straight_line(self):
        segments = _fit([(0, 0), (30, 0), (60, 0), (90, 0)])
        for segment in segments:
            assert segment.p1.y == pytest.approx(0)
            assert segment.p2.y == pytest.approx(0)
            assert segment.p1.x == pytest.approx(segment.p0.x + 10)
            assert segment.p2.x == pytest.approx(segment.p0.x + 20)

    def test_two_anchors_give_straight_line(self):
        (segment,) = _fit([(0, 0), (30, 60)])
        assert segment.p1 == pytest.approx((10, 20))
        assert segment.p2 == pytest.approx((20, 40))

    def test_three_anchors(self, arch):
        segments = _fit(arch)
        assert len(segments) == 2
        # the arch is mirror-symmetric about x = 50
        assert segments[0].p1.x == pytest.approx(100 - segments[1].p2.x)
        assert segments[0].p1.y == pytest.approx(segments[1].p2.y)

    def test_control_points_are_floats(self, wave):
        for segment in _fit(wave):
            assert all(type(v) is float for v in (*segment.p1, *segment.p2))


class TestClosed:
    def test_square(self, square):
        segments = _fit(square, closed=True)
        assert len(segments) == 4
        assert [s.p0 for s in segments] == square
        assert [s.p3 for s in segments] == square[1:] + square[:1]
        for segment in segments:
            assert numpy.isfinite((*segment.p1, *segment.p2)).all()

    def test_square_rotational_symmetry(self, square):
        segments = _fit(square, closed=True)
        for i, segment in enumerate(segments):
            following = segments[(i + 1) % 4]
            numpy.testing.assert_allclose(_rotate_about_square_center(segment.p1), following.p1, atol=1e-9)
            numpy.testing.assert_allclose(_rotate_about_square_center(segment.p2), following.p2, atol=1e-9)

    def test_continuity_across_the_join(self, wave):
        segments = _fit(wave, closed=True)
        assert segments[-1].p3 == segments[0].p0
        for previous, segment in zip(segments, segments[1:] + segments[:1]):
            numpy.testing.assert_allclose(previous.evaluate(1, 1), segment.evaluate(0, 1), atol=1e-9)
            numpy.testing.assert_allclose(previous.evaluate(1, 2), segment.evaluate(0, 2), atol=1e-9)

    def test_two_anchors(self):
        segments = _fit([(0, 0), (10, 0)], closed=True)
        assert len(segments) == 2
        for segment in segments:
            assert numpy.isfinite((*segment.p1, *segment.p2)).all()

    def test_refit_is_identical(self, wave):
        segments = _fit(wave, closed=True)
        first = [(s.p1, s.p2) for s in segments]
        fit_natural_cubic(segments, closed=True)
        assert [(s.p1, s.p2) for s in segments] == first
