from __future__ import annotations

from typing import Iterable

import numpy as np
from numpy.polynomial import polynomial as P

from rootfind.errors import EvaluationError


class PolynomialFunction:
    """
    Real polynomial c[0] + c[1]*x + ... + c[n]*x^n.

    Coefficients are given in increasing degree; trailing zeros are dropped.
    """

    def __init__(self, coefficients: Iterable[float]) -> None:
        c = np.asarray(list(coefficients), dtype=float)
        if c.ndim != 1 or c.size == 0:
            raise ValueError("coefficients must be a non-empty sequence")
        if not np.all(np.isfinite(c)):
            raise ValueError("coefficients must be finite")
        c = np.trim_zeros(c, "b")
        self._c = c if c.size else np.zeros(1)

    @classmethod
    def from_roots(cls, roots: Iterable[float]) -> "PolynomialFunction":
        return cls(P.polyfromroots(list(roots)))

    @property
    def coefficients(self) -> np.ndarray:
        return self._c.copy()

    @property
    def degree(self) -> int:
        return int(self._c.size - 1)

    def __call__(self, x: float) -> float:
        with np.errstate(over="raise", invalid="raise"):
            try:
                return float(P.polyval(x, self._c))
            except FloatingPointError as exc:
                raise EvaluationError(f"Polynomial evaluation failed at x={x!r}") from exc

    def __repr__(self) -> str:
        return f"PolynomialFunction({self._c.tolist()!r})"
