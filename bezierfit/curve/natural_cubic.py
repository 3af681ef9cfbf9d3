"""Natural cubic spline control points for a chain of Bezier segments.

Each segment's first control point p1 is an unknown. Requiring the first and
second derivatives to match at every interior knot gives one linear equation
per segment, a tridiagonal system; the second control points p2 then follow
from first-derivative continuity. The x and y coordinates share the same
matrix and are solved together as a two-column right-hand side.
"""

import logging

import numpy

from .geometry import Point
from . import tridiagonal

logger = logging.getLogger(__name__)

def fit_natural_cubic(segments, closed=False):
    """Compute C2-continuous control points for a chain of segments, in place.

    Parameters:
    segments: list of BezierSegments as returned by bezier.build_segments().
    closed: if True, the chain is treated as a loop (the last segment ends
        where the first begins) and continuity holds across the join too."""
    logger.debug('natural cubic fit: %d segments, closed=%s', len(segments), closed)
    if closed:
        _fit_closed(segments)
    else:
        _fit_open(segments)

def _anchor_arrays(segments):
    starts = numpy.array([segment.p0 for segment in segments], dtype=float)
    ends = numpy.array([segment.p3 for segment in segments], dtype=float)
    return starts, ends

def _fit_open(segments):
    n = len(segments)
    starts, ends = _anchor_arrays(segments)

    if n == 1:
        # no interior knot: zero curvature at both ends gives the straight line
        chord = ends[0] - starts[0]
        segments[0].p1 = Point(*map(float, starts[0] + chord / 3))
        segments[0].p2 = Point(*map(float, starts[0] + 2 * chord / 3))
        return

    a = numpy.ones(n)
    b = numpy.full(n, 4.0)
    c = numpy.ones(n)
    d = 4 * starts + 2 * ends

    # first segment: zero second derivative at the start
    a[0] = 0
    b[0] = 2
    c[0] = 1
    d[0] = starts[0] + 2 * ends[0]

    # last segment
    a[-1] = 2
    b[-1] = 7
    c[-1] = 0
    d[-1] = 8 * starts[-1] + ends[-1]

    p1 = tridiagonal.solve_tridiagonal(a, b, c, d)
    p2 = numpy.empty_like(p1)
    p2[:-1] = 2 * starts[1:] - p1[1:]
    p2[-1] = 0.5 * (ends[-1] + p1[-1])
    _assign(segments, p1, p2)

def _fit_closed(segments):
    n = len(segments)
    starts, ends = _anchor_arrays(segments)
    a = numpy.ones(n)
    b = numpy.full(n, 4.0)
    c = numpy.ones(n)
    d = 4 * starts + 2 * ends

    p1 = tridiagonal.solve_cyclic_tridiagonal(a, b, c, d)
    next_p1 = numpy.roll(p1, -1, axis=0)
    next_starts = numpy.roll(starts, -1, axis=0)
    p2 = 2 * next_starts - next_p1
    _assign(segments, p1, p2)

def _assign(segments, p1, p2):
    for segment, (x1, y1), (x2, y2) in zip(segments, p1, p2):
        segment.p1 = Point(float(x1), float(y1))
        segment.p2 = Point(float(x2), float(y2))
