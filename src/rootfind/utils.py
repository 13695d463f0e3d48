import logging
from math import fabs, isnan
from typing import NamedTuple

from rootfind.errors import EvaluationError, MaxIterationsExceededError, NoBracketError

logger = logging.getLogger(__name__)


class RootResult(NamedTuple):
    root: float
    iterations: int


def same_sign(a, b):
    """True when a and b are both strictly positive or both strictly negative.

    Zero (of either sign) and NaN share a sign with nothing.
    """
    return (a > 0.0 and b > 0.0) or (a < 0.0 and b < 0.0)


def evaluate(f, x):
    y = float(f(x))
    if isnan(y):
        raise EvaluationError(f"Function returned NaN at x={x!r}")
    return y


def brent_root(f, a, b, maxiter=100, abs_tol=1e-6, rel_tol=1e-14, f_tol=1e-15):
    """Find a root of f in [a, b] using Brent's method.

    f(a) and f(b) must not be nonzero values of the same sign. Converges when
    |f(x)| <= f_tol or when the half-width of the bracket around the best
    iterate drops to max(rel_tol * |x|, abs_tol).

    Returns a RootResult with the root and the number of completed
    iterations. Raises NoBracketError before iterating when the endpoints
    share a sign, and MaxIterationsExceededError when maxiter iterations
    do not converge.
    """
    x0, x1 = a, b
    y0 = evaluate(f, x0)
    y1 = evaluate(f, x1)
    if same_sign(y0, y1):
        raise NoBracketError(
            f"f(a) and f(b) must have opposite signs, got f({a!r})={y0!r}, f({b!r})={y1!r}"
        )

    # x2 is the far end of the bracket, x0 the previous iterate.
    x2, y2 = x0, y0
    delta = old_delta = x1 - x0

    for i in range(maxiter):
        if fabs(y2) < fabs(y1):
            # Keep the smallest residual in x1
            x0, x1, x2 = x1, x2, x1
            y0, y1, y2 = y1, y2, y1

        tol = max(rel_tol * fabs(x1), abs_tol)
        if fabs(y1) <= f_tol:
            logger.debug("brent: |f(x)| within tolerance at x=%r after %d iterations", x1, i)
            return RootResult(x1, i)
        dx = 0.5 * (x2 - x1)
        if fabs(dx) <= tol:
            logger.debug("brent: bracket within tolerance at x=%r after %d iterations", x1, i)
            return RootResult(x1, i)

        if fabs(old_delta) < tol or fabs(y0) <= fabs(y1):
            # Bisection
            delta = old_delta = dx
            step = "bisection"
        else:
            r3 = y1 / y0
            if x0 == x2:
                # Secant
                p = 2.0 * dx * r3
                p1 = 1.0 - r3
                step = "secant"
            else:
                # Inverse quadratic interpolation
                r1 = y0 / y2
                r2 = y1 / y2
                p = r3 * (2.0 * dx * r1 * (r1 - r2) - (x1 - x0) * (r2 - 1.0))
                p1 = (r1 - 1.0) * (r2 - 1.0) * (r3 - 1.0)
                step = "inverse quadratic"
            if p > 0.0:
                p1 = -p1
            else:
                p = -p
            # Wrong direction, or slower than half the step before last
            if 2.0 * p >= 3.0 * dx * p1 - fabs(tol * p1) or p >= fabs(0.5 * old_delta * p1):
                delta = old_delta = dx
                step = "bisection (interpolation rejected)"
            else:
                old_delta = delta
                delta = p / p1
        logger.debug("brent: iteration %d, %s step %r from x=%r", i, step, delta, x1)

        x0, y0 = x1, y1
        if fabs(delta) > tol:
            x1 += delta
        elif dx > 0.0:
            x1 += tol
        else:
            x1 -= tol
        y1 = evaluate(f, x1)

        if same_sign(y1, y2):
            # Root is now between x0 and x1
            x2, y2 = x0, y0
            delta = old_delta = x1 - x0

    raise MaxIterationsExceededError(f"Maximum iterations ({maxiter}) exceeded")


def bisect_root(f, a, b, maxiter=100, abs_tol=1e-6, f_tol=1e-15):
    """Find a root of f in [a, b] by bisection.

    Stops when an endpoint value is within f_tol (returning that endpoint)
    or the interval is no wider than abs_tol (returning its midpoint).
    """
    lo, hi = a, b
    f_lo = evaluate(f, lo)
    f_hi = evaluate(f, hi)
    if same_sign(f_lo, f_hi):
        raise NoBracketError(
            f"f(a) and f(b) must have opposite signs, got f({a!r})={f_lo!r}, f({b!r})={f_hi!r}"
        )

    for i in range(maxiter):
        if fabs(f_lo) <= f_tol:
            return RootResult(lo, i)
        if fabs(f_hi) <= f_tol:
            return RootResult(hi, i)
        mid = 0.5 * (lo + hi)
        if fabs(hi - lo) <= abs_tol:
            logger.debug("bisect: converged to x=%r after %d iterations", mid, i)
            return RootResult(mid, i)
        f_mid = evaluate(f, mid)
        if same_sign(f_mid, f_lo):
            lo, f_lo = mid, f_mid
        else:
            hi, f_hi = mid, f_mid

    raise MaxIterationsExceededError(f"Maximum iterations ({maxiter}) exceeded")
