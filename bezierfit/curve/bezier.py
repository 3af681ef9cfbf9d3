import numpy
from scipy import integrate

from .. import errors
from .geometry import Point

def cubic_bezier(p0, p1, p2, p3, t, derivative=0):
    """Evaluate a cubic Bezier curve (or its first or second derivative) at
    parameter values t.

    Parameters:
    p0, p1, p2, p3: control points, each a sequence of length 2.
    t: scalar or array of n parameter values in [0, 1].
    derivative: 0, 1, or 2.

    Returns an array of shape (n, 2), or shape (2,) if t is scalar."""
    t = numpy.asarray(t, dtype=float)
    scalar = t.ndim == 0
    t = numpy.atleast_1d(t)[:,numpy.newaxis]
    p0, p1, p2, p3 = [numpy.asarray(p, dtype=float) for p in (p0, p1, p2, p3)]
    s = 1 - t
    if derivative == 0:
        out = s**3 * p0 + 3 * s**2 * t * p1 + 3 * s * t**2 * p2 + t**3 * p3
    elif derivative == 1:
        out = 3 * s**2 * (p1 - p0) + 6 * s * t * (p2 - p1) + 3 * t**2 * (p3 - p2)
    elif derivative == 2:
        out = 6 * s * (p2 - 2*p1 + p0) + 6 * t * (p3 - 2*p2 + p1)
    else:
        raise ValueError('derivative must be 0, 1, or 2.')
    if scalar:
        return out[0]
    return out


class BezierSegment:
    """A single cubic Bezier segment of a larger spline.

    Attributes:
        p0: the start anchor.
        p1: the first control point (handle leaving p0).
        p2: the second control point (handle arriving at p3).
        p3: the end anchor.

    The anchors are fixed at construction. The control points start at the
    origin and are meaningless until a fitter assigns them."""

    def __init__(self, start, end):
        self.p0 = Point(*start)
        self.p3 = Point(*end)
        self.p1 = Point()
        self.p2 = Point()

    def __repr__(self):
        return f'BezierSegment(p0={tuple(self.p0)}, p1={tuple(self.p1)}, p2={tuple(self.p2)}, p3={tuple(self.p3)})'

    def control_polygon(self):
        """Return [p0, p1, p2, p3], the points a renderer needs to draw the segment."""
        return [self.p0, self.p1, self.p2, self.p3]

    def chord(self):
        return self.p3 - self.p0

    def evaluate(self, t, derivative=0):
        """Evaluate the segment at parameter value(s) t; see cubic_bezier()."""
        return cubic_bezier(self.p0, self.p1, self.p2, self.p3, t, derivative)

    def sample(self, resolution=10):
        """Yield resolution Points evenly spaced in parameter from t=0 to t=1.

        The points are recomputed from the current control points on every call."""
        if resolution < 2:
            raise ValueError('resolution must be at least 2.')
        for i in range(resolution):
            x, y = self.evaluate(i / (resolution - 1))
            yield Point(float(x), float(y))

    def arc_length(self):
        """Return the length of the curve, integrating the speed |B'(t)| over [0, 1]."""
        def speed(t):
            return numpy.sqrt((self.evaluate(t, derivative=1)**2).sum())
        length, _ = integrate.quad(speed, 0, 1)
        return length


def build_segments(anchors, closed=False):
    """Make a chain of BezierSegments joining consecutive anchor points.

    Parameters:
    anchors: sequence of n (x, y) points, n >= 2.
    closed: if True, a final segment joins the last anchor back to the first.

    Returns a list of n-1 segments (open) or n segments (closed), with control
    points left at the origin for a fitter to fill in. The one exception is a
    single open segment between two anchors, whose control points are placed
    on its anchors so that it already describes the straight line between them."""
    anchors = list(anchors)
    if len(anchors) < 2:
        raise errors.InsufficientAnchorsError(len(anchors))

    if len(anchors) == 2 and not closed:
        segment = BezierSegment(anchors[0], anchors[1])
        segment.p1 = segment.p0
        segment.p2 = segment.p3
        return [segment]

    segments = [BezierSegment(start, end) for start, end in zip(anchors[:-1], anchors[1:])]
    if closed:
        segments.append(BezierSegment(anchors[-1], anchors[0]))
    return segments

def segments_to_array(segments):
    """Return the control polygons of a chain of segments as an array of
    shape (n, 4, 2): for each segment, p0, p1, p2, p3."""
    return numpy.array([segment.control_polygon() for segment in segments], dtype=float).reshape(-1, 4, 2)
