'''
# bezierfit

Fit smooth piecewise-cubic Bezier curves through ordered 2D anchor points.

Curve
-----
Functions for building plane curves from anchor points.
 - curve.geometry: the Point value type and vectorized helpers for arrays of plane vectors.
 - curve.tridiagonal: Thomas-algorithm solvers for plain and cyclic tridiagonal systems.
 - curve.bezier: cubic Bezier segments, evaluation and sampling, and building a segment chain from anchors.
 - curve.natural_cubic: C2-continuous control points for open and closed chains.
 - curve.hobby: control points from John Hobby's turning-angle formulation (as in METAFONT).
 - curve.spline: the Spline object, which owns anchors and options and runs the chosen fitter.

Errors
------
 - errors: CurveError and its subclasses ShapeError, InsufficientAnchorsError and DegenerateSegmentError.

'''
