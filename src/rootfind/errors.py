"""Exception classes for root finding."""


class RootFindingError(Exception):
    """Base exception for root finding errors."""


class NoBracketError(RootFindingError, ValueError):
    """Raised when the interval endpoints do not bracket a sign change."""


class MaxIterationsExceededError(RootFindingError, RuntimeError):
    """Raised when the iteration budget runs out before convergence."""


class EvaluationError(RootFindingError, ArithmeticError):
    """Raised when the function cannot produce a usable value."""


class NoResultError(RootFindingError, RuntimeError):
    """Raised when a solver result is read before a successful solve."""
