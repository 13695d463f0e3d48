from .config import SolverConfig, configure_logging
from .errors import (
    EvaluationError,
    MaxIterationsExceededError,
    NoBracketError,
    NoResultError,
    RootFindingError,
)
from .functions import PolynomialFunction
from .solver import (
    BisectionSolver,
    BrentSolver,
    UnivariateSolver,
    bracket,
    find_root,
)
from .utils import RootResult, bisect_root, brent_root, same_sign

__all__ = [
    "BisectionSolver",
    "BrentSolver",
    "EvaluationError",
    "MaxIterationsExceededError",
    "NoBracketError",
    "NoResultError",
    "PolynomialFunction",
    "RootFindingError",
    "RootResult",
    "SolverConfig",
    "UnivariateSolver",
    "bisect_root",
    "bracket",
    "brent_root",
    "configure_logging",
    "find_root",
    "same_sign",
]
