"""Solver configuration and logging setup."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields
from math import isfinite
from typing import Mapping, Optional

DEFAULT_MAXIMAL_ITERATION_COUNT = 100
DEFAULT_ABSOLUTE_ACCURACY = 1e-6
DEFAULT_RELATIVE_ACCURACY = 1e-14
DEFAULT_FUNCTION_VALUE_ACCURACY = 1e-15

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_ENV_VARS = {
    "maximal_iteration_count": "ROOTFIND_MAX_ITERATIONS",
    "absolute_accuracy": "ROOTFIND_ABSOLUTE_ACCURACY",
    "relative_accuracy": "ROOTFIND_RELATIVE_ACCURACY",
    "function_value_accuracy": "ROOTFIND_FUNCTION_VALUE_ACCURACY",
}


@dataclass(frozen=True)
class SolverConfig:
    """
    Accuracy settings shared by every solve of one solver.

    Convergence tolerance on x:
      tol = max(relative_accuracy * |x|, absolute_accuracy)
    A point is also accepted when |f(x)| <= function_value_accuracy.
    """

    maximal_iteration_count: int = DEFAULT_MAXIMAL_ITERATION_COUNT
    absolute_accuracy: float = DEFAULT_ABSOLUTE_ACCURACY
    relative_accuracy: float = DEFAULT_RELATIVE_ACCURACY
    function_value_accuracy: float = DEFAULT_FUNCTION_VALUE_ACCURACY

    def __post_init__(self) -> None:
        count = self.maximal_iteration_count
        if isinstance(count, bool) or not isinstance(count, int):
            raise ValueError(f"maximal_iteration_count must be an int, got {count!r}")
        if count < 0:
            raise ValueError("maximal_iteration_count must be >= 0")
        for name in ("absolute_accuracy", "relative_accuracy", "function_value_accuracy"):
            value = getattr(self, name)
            if not isfinite(value) or value < 0:
                raise ValueError(f"{name} must be finite and >= 0, got {value!r}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SolverConfig":
        """Build a config from ROOTFIND_* variables, keeping defaults for unset ones."""
        environ = os.environ if environ is None else environ
        kwargs = {}
        for field in fields(cls):
            raw = environ.get(_ENV_VARS[field.name], "").strip()
            if not raw:
                continue
            convert = int if field.name == "maximal_iteration_count" else float
            try:
                kwargs[field.name] = convert(raw)
            except ValueError as exc:
                raise ValueError(
                    f"Invalid value for {_ENV_VARS[field.name]}: {raw!r}"
                ) from exc
        return cls(**kwargs)


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging; level defaults to LOG_LEVEL or WARNING."""
    name = (level or os.environ.get("LOG_LEVEL", "WARNING")).upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.WARNING),
        format=LOG_FORMAT,
    )
