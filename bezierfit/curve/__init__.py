'''
Curve
-----
Functions for fitting plane curves through anchor points as chains of cubic Bezier segments.
 - curve.geometry: the Point value type and vectorized helpers for arrays of plane vectors.
 - curve.tridiagonal: solvers for plain and cyclic tridiagonal linear systems.
 - curve.bezier: cubic Bezier segments and building a segment chain from anchors.
 - curve.natural_cubic: natural cubic spline control points (open and closed).
 - curve.hobby: Hobby spline control points (open and closed).
 - curve.spline: the Spline orchestrator and convenience constructors.
 '''

from .geometry import Point
from .tridiagonal import solve_tridiagonal, solve_cyclic_tridiagonal
from .bezier import BezierSegment, build_segments, segments_to_array
from .natural_cubic import fit_natural_cubic
from .hobby import fit_hobby
from .spline import Spline, SplineType, cubic_spline, hobby_spline
