"""Exceptions raised by bezierfit.

All of them derive from ValueError, since each one reports a problem with
the input data rather than with the library itself.
"""

class CurveError(ValueError):
    """Base class for all bezierfit errors."""


class ShapeError(CurveError):
    """Raised when tridiagonal coefficient vectors do not have matching lengths."""


class InsufficientAnchorsError(CurveError):
    """Raised when fewer than two anchor points are supplied."""

    def __init__(self, count):
        self.count = count
        super().__init__(f'At least 2 anchor points are required, got {count}.')


class DegenerateSegmentError(CurveError):
    """Raised when a segment's anchors coincide, so its chord has no direction."""

    def __init__(self, index):
        self.index = index
        super().__init__(f'Segment {index} has zero chord length (coincident anchors).')
