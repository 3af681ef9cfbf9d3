import math
import typing

import numpy

class Point(typing.NamedTuple):
    """Immutable 2D point, also used as a plane vector.

    Being a tuple, a list of Points converts directly to an (n, 2) array with
    numpy.asarray(). Arithmetic operators are redefined so that + and - act
    component-wise rather than concatenating, and * (like scale()) multiplies
    by a scalar rather than repeating the tuple."""
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other):
        return Point(self.x + other[0], self.y + other[1])

    def __sub__(self, other):
        return Point(self.x - other[0], self.y - other[1])

    def __neg__(self):
        return Point(-self.x, -self.y)

    def scale(self, s):
        return Point(self.x * s, self.y * s)

    # scalar multiplication, never tuple repetition
    __mul__ = scale
    __rmul__ = scale

    def magnitude(self):
        return math.hypot(self.x, self.y)

    def normalize(self):
        """Return the unit vector in this vector's direction.

        Raises ZeroDivisionError for the zero vector."""
        length = self.magnitude()
        return Point(self.x / length, self.y / length)

    def rotate(self, angle):
        """Rotate counter-clockwise by angle (radians) about the origin."""
        c = math.cos(angle)
        s = math.sin(angle)
        return Point(self.x * c - self.y * s, self.x * s + self.y * c)

    def angle_between(self, other):
        """Signed angle in radians, in [-pi, pi], turning from this vector to other."""
        return math.atan2(self.x * other[1] - self.y * other[0], self.x * other[0] + self.y * other[1])

    def lerp(self, other, t=0.5):
        return Point(self.x * (1 - t) + other[0] * t, self.y * (1 - t) + other[1] * t)


def as_points(points):
    """Convert an iterable of (x, y) pairs to a list of Points."""
    return [Point(float(x), float(y)) for x, y in points]

def vector_lengths(vectors):
    """Return the euclidean length of each vector in an array of shape (n, 2)."""
    vectors = numpy.asarray(vectors, dtype=float)
    return numpy.sqrt((vectors**2).sum(axis=1))

def angle_between_vectors(v_from, v_to):
    """Calculate the signed angle in radians between pairs of 2d vectors.

    Parameters:
    v_from, v_to: arrays of shape (n, 2)

    Returns an array of n angles, positive where v_to is counter-clockwise of v_from."""
    v_from = numpy.asarray(v_from, dtype=float)
    v_to = numpy.asarray(v_to, dtype=float)
    return numpy.arctan2(v_from[:,0]*v_to[:,1]-v_from[:,1]*v_to[:,0], (v_from * v_to).sum(axis=1))

def rotate_vectors(vectors, angles):
    """Rotate each of an (n, 2) array of vectors counter-clockwise by the
    corresponding angle in a length-n array (or by a single scalar angle)."""
    vectors = numpy.asarray(vectors, dtype=float)
    c = numpy.cos(angles)
    s = numpy.sin(angles)
    rotated = numpy.empty_like(vectors)
    rotated[:,0] = vectors[:,0]*c - vectors[:,1]*s
    rotated[:,1] = vectors[:,0]*s + vectors[:,1]*c
    return rotated

def unit_vectors(vectors):
    """Normalize an (n, 2) array of vectors to unit length."""
    vectors = numpy.asarray(vectors, dtype=float)
    return vectors / vector_lengths(vectors)[:,numpy.newaxis]
