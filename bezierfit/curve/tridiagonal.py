"""Solvers for tridiagonal linear systems, using the Thomas algorithm.

A tridiagonal system of m = n+1 equations is encoded as four equal-length
vectors a, b, c, d:

    | b0  c0  0   0  |   | x0 |   | d0 |
    | a1  b1  c1  0  | * | x1 | = | d1 |
    | 0   a2  b2  c2 |   | x2 |   | d2 |
    | 0   0   an  bn |   | xn |   | dn |

In the plain system a[0] and c[n] lie outside the matrix; they must be present
but are ignored. In the cyclic (periodic) system they are the corner terms:
a[0] multiplies x[n] in the first equation and c[n] multiplies x[0] in the last.

Neither solver pivots. The caller must supply a system that is safe to
eliminate without pivoting (e.g. diagonally dominant); a zero or near-zero
pivot produces inf/nan values rather than an exception.
"""

import numpy

from .. import errors

def _check_system(a, b, c, d):
    a, b, c, d = [numpy.asarray(v, dtype=float) for v in (a, b, c, d)]
    for name, v in zip('abc', (a, b, c)):
        if v.ndim != 1:
            raise errors.ShapeError(f'Coefficient vector {name} must be one-dimensional, got shape {v.shape}.')
    if d.ndim not in (1, 2):
        raise errors.ShapeError(f'Right-hand side d must have shape (m,) or (m, k), got {d.shape}.')
    lengths = len(a), len(b), len(c), len(d)
    if len(set(lengths)) != 1:
        raise errors.ShapeError('Coefficient vectors must all have the same length, got lengths a={}, b={}, c={}, d={}.'.format(*lengths))
    if lengths[0] == 0:
        raise errors.ShapeError('Cannot solve an empty system.')
    return a, b, c, d

def solve_tridiagonal(a, b, c, d):
    """Solve the tridiagonal system A.x = d.

    Parameters:
    a: sub-diagonal coefficients; a[0] is ignored.
    b: diagonal coefficients.
    c: super-diagonal coefficients; c[-1] is ignored.
    d: right-hand side, either shape (m,) or shape (m, k) to solve k systems
       that share the same matrix in a single sweep.

    Returns x, an array with the same shape as d.

    Raises errors.ShapeError if the inputs do not all have the same length."""
    a, b, c, d = _check_system(a, b, c, d)
    n = len(b) - 1
    c_prime = numpy.zeros(n + 1)
    d_prime = numpy.empty_like(d)
    c_prime[0] = c[0] / b[0]
    d_prime[0] = d[0] / b[0]

    # forward sweep: eliminate the sub-diagonal
    for i in range(1, n + 1):
        denom = b[i] - a[i] * c_prime[i-1]
        if i < n:
            c_prime[i] = c[i] / denom
        d_prime[i] = (d[i] - a[i] * d_prime[i-1]) / denom

    # back substitution
    x = numpy.empty_like(d)
    x[n] = d_prime[n]
    for i in range(n - 1, -1, -1):
        x[i] = d_prime[i] - c_prime[i] * x[i+1]
    return x

def solve_cyclic_tridiagonal(a, b, c, d):
    """Solve the periodic tridiagonal system, where the first equation also
    includes a[0]*x[-1] and the last includes c[-1]*x[0].

    The corner terms are removed with a Sherman-Morrison rank-one correction,
    so the cost is two plain Thomas solves. Parameters and return value are as
    for solve_tridiagonal().

    Raises errors.ShapeError if the inputs do not all have the same length."""
    a, b, c, d = _check_system(a, b, c, d)
    m = len(b)
    if m == 1:
        # both corners refer back to x[0] itself
        return d / (a[0] + b[0] + c[0])
    if m == 2:
        # the corners coincide with the off-diagonal positions
        return solve_tridiagonal([0, a[1] + c[1]], b, [c[0] + a[0], 0], d)

    top_right = a[0]
    bottom_left = c[-1]
    gamma = -b[0]
    b_mod = b.copy()
    b_mod[0] = b[0] - gamma
    b_mod[-1] = b[-1] - bottom_left * top_right / gamma

    x = solve_tridiagonal(a, b_mod, c, d)
    u = numpy.zeros(m)
    u[0] = gamma
    u[-1] = bottom_left
    z = solve_tridiagonal(a, b_mod, c, u)

    factor = (x[0] + top_right * x[-1] / gamma) / (1 + z[0] + top_right * z[-1] / gamma)
    if x.ndim == 2:
        z = z[:,numpy.newaxis]
    return x - factor * z
