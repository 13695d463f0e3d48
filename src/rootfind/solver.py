from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, Optional, Tuple

from rootfind.config import SolverConfig
from rootfind.errors import NoBracketError, NoResultError
from rootfind.utils import RootResult, bisect_root, brent_root, evaluate, same_sign

logger = logging.getLogger(__name__)

RealFunction = Callable[[float], float]


# -----------------------------
# Configured solvers
# -----------------------------


class UnivariateSolver:
    """
    Solves f(x) = 0 on a bracketing interval with a fixed configuration.

    The last successful result is kept for the result and iteration_count
    accessors. Each solve call works on its own local state, so one solver
    may be shared between threads if f is reentrant.
    """

    def __init__(
        self,
        function: RealFunction,
        config: Optional[SolverConfig] = None,
        **overrides,
    ) -> None:
        config = config or SolverConfig()
        self._function = function
        self._config = replace(config, **overrides) if overrides else config
        self._last_result: Optional[RootResult] = None

    @property
    def function(self) -> RealFunction:
        return self._function

    @property
    def config(self) -> SolverConfig:
        return self._config

    def solve(self, min: float, max: float) -> float:
        self._last_result = None
        result = self._solve(float(min), float(max))
        self._last_result = result
        return result.root

    def _solve(self, lo: float, hi: float) -> RootResult:
        raise NotImplementedError

    @property
    def last_result(self) -> RootResult:
        if self._last_result is None:
            raise NoResultError("No result available")
        return self._last_result

    @property
    def result(self) -> float:
        return self.last_result.root

    @property
    def iteration_count(self) -> int:
        return self.last_result.iterations


class BrentSolver(UnivariateSolver):
    """Brent-Dekker solver: inverse quadratic, secant and bisection steps."""

    def _solve(self, lo: float, hi: float) -> RootResult:
        cfg = self._config
        return brent_root(
            self._function,
            lo,
            hi,
            maxiter=cfg.maximal_iteration_count,
            abs_tol=cfg.absolute_accuracy,
            rel_tol=cfg.relative_accuracy,
            f_tol=cfg.function_value_accuracy,
        )


class BisectionSolver(UnivariateSolver):
    def _solve(self, lo: float, hi: float) -> RootResult:
        cfg = self._config
        return bisect_root(
            self._function,
            lo,
            hi,
            maxiter=cfg.maximal_iteration_count,
            abs_tol=cfg.absolute_accuracy,
            f_tol=cfg.function_value_accuracy,
        )


# -----------------------------
# One-shot helpers
# -----------------------------


def find_root(
    function: RealFunction,
    x0: float,
    x1: float,
    absolute_accuracy: Optional[float] = None,
) -> float:
    """Solve function(x) = 0 on [x0, x1] with a default Brent solver."""
    if absolute_accuracy is None:
        solver = BrentSolver(function)
    else:
        solver = BrentSolver(function, absolute_accuracy=absolute_accuracy)
    return solver.solve(x0, x1)


def bracket(
    function: RealFunction,
    initial: float,
    lower_bound: float,
    upper_bound: float,
    maximum_iterations: int = 1000,
) -> Tuple[float, float]:
    """
    Search outward from initial for an interval bracketing a root.

    Each step widens [a, b] by one unit on both sides, clipped to
    [lower_bound, upper_bound], until f(a) and f(b) no longer share a sign.
    """
    if maximum_iterations <= 0:
        raise ValueError("maximum_iterations must be > 0")
    if not lower_bound < upper_bound:
        raise ValueError("lower_bound must be < upper_bound")
    if not lower_bound <= initial <= upper_bound:
        raise ValueError("initial must lie within [lower_bound, upper_bound]")

    a = b = float(initial)
    for n in range(1, maximum_iterations + 1):
        a = max(a - 1.0, lower_bound)
        b = min(b + 1.0, upper_bound)
        fa = evaluate(function, a)
        fb = evaluate(function, b)
        if not same_sign(fa, fb):
            logger.debug("bracket: found [%r, %r] after %d expansions", a, b, n)
            return a, b
        if a <= lower_bound and b >= upper_bound:
            break

    raise NoBracketError(
        f"Unable to bracket a root from initial={initial!r} within "
        f"[{lower_bound!r}, {upper_bound!r}]: f({a!r})={fa!r}, f({b!r})={fb!r}"
    )
