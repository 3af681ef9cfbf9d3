"""Hobby spline control points for a chain of Bezier segments.

John Hobby's construction (as used by METAFONT and MetaPost) chooses, at each
knot, how far the curve's tangent deviates from the chords on either side.
alpha[i] is the angle from segment i's chord to its departing tangent at p0,
and beta[i] the angle from the arriving tangent at p3 back to the chord.
Requiring "mock curvature" to be continuous at every knot gives a tridiagonal
system in the alphas; the handle lengths then follow from Hobby's rho function.

The interior equations are Jackowski's ("Typographers, programmers and
mathematicians", TUGboat 34:2, 2013) as written out by Jake Low. At the start
of an open chain, the curl term multiplies alpha[1] scaled by the first
turning angle, with a zero right-hand side.
"""

import logging

import numpy

from .. import errors
from .geometry import Point, angle_between_vectors, rotate_vectors, unit_vectors, vector_lengths
from . import tridiagonal

logger = logging.getLogger(__name__)

def rho(alpha, beta):
    """Hobby's velocity function: the length of a handle, as a fraction of a
    third of the chord length, given the tangent deviations at either end."""
    return 2 / (1 + 2/3 * numpy.cos(beta) + 1/3 * numpy.cos(alpha))

def fit_hobby(segments, closed=False, curl=0):
    """Compute Hobby spline control points for a chain of segments, in place.

    Parameters:
    segments: list of BezierSegments as returned by bezier.build_segments().
    closed: if True, the chain is treated as a loop and every knot, including
        the join between the last and first segments, is smoothed.
    curl: the curl parameter (omega) weighting the boundary equations at the
        two ends of an open chain. Ignored for closed chains.

    Raises errors.DegenerateSegmentError if any segment has coincident anchors;
    no control point is modified in that case."""
    logger.debug('Hobby fit: %d segments, closed=%s, curl=%s', len(segments), closed, curl)
    starts = numpy.array([segment.p0 for segment in segments], dtype=float)
    ends = numpy.array([segment.p3 for segment in segments], dtype=float)
    chords = ends - starts
    lengths = vector_lengths(chords)
    degenerate = numpy.flatnonzero(lengths <= 0)
    if len(degenerate) > 0:
        raise errors.DegenerateSegmentError(int(degenerate[0]))

    if closed:
        alpha, beta = _closed_angles(chords, lengths)
    else:
        alpha, beta = _open_angles(chords, lengths, curl)

    a = rho(alpha, beta) * lengths / 3
    b = rho(beta, alpha) * lengths / 3
    p1 = starts + a[:,numpy.newaxis] * unit_vectors(rotate_vectors(chords, alpha))
    p2 = ends - b[:,numpy.newaxis] * unit_vectors(rotate_vectors(chords, -beta))
    for segment, (x1, y1), (x2, y2) in zip(segments, p1, p2):
        segment.p1 = Point(float(x1), float(y1))
        segment.p2 = Point(float(x2), float(y2))

def _open_angles(chords, lengths, curl):
    n = len(chords)
    # gamma[i] is the turning angle at the knot where segment i begins;
    # gamma[0] and gamma[n] are end sentinels.
    gamma = numpy.zeros(n + 1)
    gamma[1:n] = angle_between_vectors(chords[:-1], chords[1:])

    A = numpy.zeros(n + 1)
    B = numpy.zeros(n + 1)
    C = numpy.zeros(n + 1)
    D = numpy.zeros(n + 1)

    B[0] = 2 + curl
    C[0] = -(2 * curl + 1) * gamma[1]
    D[0] = 0

    l_prev = lengths[:-1]
    l_next = lengths[1:]
    A[1:n] = 1 / l_prev
    B[1:n] = (2 * l_prev + 2 * l_next) / (l_prev * l_next)
    C[1:n] = 1 / l_next
    D[1:n] = -(2 * gamma[1:n] * l_next + gamma[2:] * l_prev) / (l_prev * l_next)

    A[n] = 2 * curl + 1
    B[n] = 2 + curl
    D[n] = 0

    alpha = tridiagonal.solve_tridiagonal(A, B, C, D)
    beta = numpy.empty(n)
    beta[:-1] = -gamma[1:n] - alpha[1:n]
    beta[-1] = -alpha[n]
    return alpha[:n], beta

def _closed_angles(chords, lengths):
    # gamma[i] is the turning angle from chord i-1 into chord i, wrapping around
    gamma = angle_between_vectors(numpy.roll(chords, 1, axis=0), chords)
    l_prev = numpy.roll(lengths, 1)
    A = 1 / l_prev
    B = (2 * l_prev + 2 * lengths) / (l_prev * lengths)
    C = 1 / lengths
    D = -(2 * gamma * lengths + numpy.roll(gamma, -1) * l_prev) / (l_prev * lengths)

    alpha = tridiagonal.solve_cyclic_tridiagonal(A, B, C, D)
    beta = -numpy.roll(gamma, -1) - numpy.roll(alpha, -1)
    return alpha, beta
