import enum
import logging

from .. import errors
from .geometry import Point, as_points
from . import bezier
from . import hobby
from . import natural_cubic

logger = logging.getLogger(__name__)

class SplineType(enum.Enum):
    CUBIC = 'cubic'
    HOBBY = 'hobby'

    @classmethod
    def _missing_(cls, value):
        # allow 'HOBBY', 'Hobby', etc.
        if isinstance(value, str):
            for member in cls:
                if member.value == value.lower():
                    return member
        return None


class Spline:
    """A smooth curve through a sequence of anchor points, represented as a
    chain of cubic Bezier segments.

    Parameters:
        anchors: sequence of (x, y) points the curve passes through, in order.
        type: a SplineType (or its name, e.g. 'hobby') selecting the fitter.
        closed: if True, the curve returns from the last anchor to the first.
        tension: stored for callers; neither fitter uses it.
        curl: end-tangent curl for open Hobby splines; see hobby.fit_hobby().

    The segments are built and solved on construction. After changing the
    anchors (via move_anchor() or by replacing entries of the anchors list), call
    solve() to recompute the control points.
    """

    def __init__(self, anchors, type=SplineType.CUBIC, closed=False, tension=0.5, curl=0):
        self.anchors = as_points(anchors)
        self.type = SplineType(type)
        self.closed = closed
        self.tension = tension
        self.curl = curl
        self.segments = bezier.build_segments(self.anchors, self.closed)
        self.solve()

    def __repr__(self):
        return f'Spline({len(self.anchors)} anchors, type={self.type.name}, closed={self.closed})'

    def solve(self):
        """Recompute every segment's control points from the current anchors.

        The fit runs on a fresh chain of segments; the spline's own segments
        are only updated once it succeeds, so an error leaves them untouched."""
        logger.debug('solving %s spline over %d anchors (closed=%s)', self.type.name, len(self.anchors), self.closed)
        fitted = bezier.build_segments(self.anchors, self.closed)
        if self.type is SplineType.CUBIC:
            natural_cubic.fit_natural_cubic(fitted, self.closed)
        elif self.type is SplineType.HOBBY:
            hobby.fit_hobby(fitted, self.closed, self.curl)
        for segment, new in zip(self.segments, fitted):
            segment.p0, segment.p1, segment.p2, segment.p3 = new.control_polygon()

    def move_anchor(self, index, point):
        """Replace the anchor at index with a new (x, y) point and re-solve.

        If the new position cannot be fitted, the previous anchor is restored
        and the error is re-raised."""
        previous = self.anchors[index]
        self.anchors[index] = Point(float(point[0]), float(point[1]))
        try:
            self.solve()
        except errors.CurveError:
            self.anchors[index] = previous
            raise

    def control_polygons(self):
        """Return [p0, p1, p2, p3] for each segment, in order."""
        return [segment.control_polygon() for segment in self.segments]

    def sample(self, resolution=10):
        """Yield points along the whole curve, sampling each segment at
        resolution evenly-spaced parameter values. The point shared by two
        consecutive segments is yielded only once."""
        for i, segment in enumerate(self.segments):
            points = segment.sample(resolution)
            if i > 0:
                next(points)
            yield from points

    def arc_length(self):
        return sum(segment.arc_length() for segment in self.segments)

    def to_array(self):
        """Return the segments' control polygons as an array of shape (n, 4, 2)."""
        return bezier.segments_to_array(self.segments)


def cubic_spline(anchors, closed=False):
    """Return a solved natural cubic Spline through the given anchors."""
    return Spline(anchors, type=SplineType.CUBIC, closed=closed)

def hobby_spline(anchors, closed=False, curl=0):
    """Return a solved Hobby Spline through the given anchors."""
    return Spline(anchors, type=SplineType.HOBBY, closed=closed, curl=curl)
