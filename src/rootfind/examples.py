from math import cos

from rootfind.config import configure_logging
from rootfind.functions import PolynomialFunction
from rootfind.solver import BisectionSolver, BrentSolver, bracket


def main() -> None:
    configure_logging()

    # -----------------------------
    # Brent on a few classic equations
    # -----------------------------
    problems = [
        ("x^2 - 2", PolynomialFunction([-2.0, 0.0, 1.0]), 0.0, 2.0),
        ("x^3 - x - 2", PolynomialFunction([-2.0, -1.0, 0.0, 1.0]), 1.0, 2.0),
        ("cos(x) - x", lambda x: cos(x) - x, 0.0, 1.0),
    ]
    for label, f, lo, hi in problems:
        solver = BrentSolver(f, absolute_accuracy=1e-12)
        root = solver.solve(lo, hi)
        print(f"{label:<12} on [{lo}, {hi}]: x={root:.12f}  iterations={solver.iteration_count}")

    # -----------------------------
    # Same problem, bisection for comparison
    # -----------------------------
    f = problems[0][1]
    bisection = BisectionSolver(f, absolute_accuracy=1e-12)
    root = bisection.solve(0.0, 2.0)
    print(f"\nbisection x^2 - 2: x={root:.12f}  iterations={bisection.iteration_count}")

    # -----------------------------
    # Search for a bracket first, then solve
    # -----------------------------
    g = PolynomialFunction.from_roots([7.25])
    lo, hi = bracket(g, initial=0.0, lower_bound=-100.0, upper_bound=100.0)
    print(f"\nbracket for x - 7.25: [{lo}, {hi}]  root={BrentSolver(g).solve(lo, hi):.6f}")


if __name__ == "__main__":
    main()
