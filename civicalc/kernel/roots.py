# civicalc/kernel/roots.py
"""Root finding: Newton-Raphson and bisection."""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from ..config import CONFIG

logger = logging.getLogger(__name__)


class BracketError(ValueError):
    """Raised when a bisection bracket does not enclose a sign change."""
    pass


@dataclass(frozen=True)
class RootResult:
    """Outcome of an iterative root search."""
    root: float
    iterations: int
    converged: bool
    error: float        # |dx| of the last step (Newton) or |f(mid)| (bisection)
    value: float        # f(root)
    perturbations: int = 0  # flat-derivative nudges taken by Newton-Raphson


def newton_raphson(
    f: Callable[[float], float],
    x0: float,
    fprime: Optional[Callable[[float], float]] = None,
    tolerance: Optional[float] = None,
    max_iterations: Optional[int] = None,
) -> RootResult:
    """
    Find a root of f by Newton-Raphson iteration: x <- x - f(x)/f'(x).

    Args:
        f: Function whose root is wanted
        x0: Initial guess
        fprime: Analytical derivative. When omitted, a central difference
            with step ``CONFIG.derivative_step`` is used.
        tolerance: Converged once |dx| < tolerance (default ``CONFIG.root_tolerance``)
        max_iterations: Iteration budget (default ``CONFIG.max_iterations``)

    Returns:
        RootResult. Non-convergence is reported through ``converged``,
        never raised.

    Notes:
        When |f'(x)| drops below ``CONFIG.flat_derivative_limit`` the guess is
        nudged by ``10 * tolerance`` and the loop continues. The nudge uses up
        an iteration slot and is counted in ``perturbations``.
    """
    tolerance = CONFIG.root_tolerance if tolerance is None else tolerance
    max_iterations = CONFIG.max_iterations if max_iterations is None else max_iterations

    if fprime is None:
        h = CONFIG.derivative_step

        def fprime(x: float) -> float:
            return (f(x + h) - f(x - h)) / (2 * h)

    x = float(x0)
    iterations = 0
    converged = False
    error = float('inf')
    perturbations = 0

    for i in range(max_iterations):
        fx = f(x)
        fpx = fprime(x)

        if abs(fpx) < CONFIG.flat_derivative_limit:
            perturbations += 1
            logger.debug("Derivative near zero at x=%g, perturbing guess", x)
            x += tolerance * 10
            continue

        x_new = x - fx / fpx
        error = abs(x_new - x)
        iterations = i + 1
        x = x_new

        if error < tolerance:
            converged = True
            break

    return RootResult(
        root=x,
        iterations=iterations,
        converged=converged,
        error=error,
        value=f(x),
        perturbations=perturbations,
    )


def newton_raphson_numerical(
    f: Callable[[float], float],
    x0: float,
    tolerance: Optional[float] = None,
    max_iterations: Optional[int] = None,
) -> RootResult:
    """Newton-Raphson with a central-difference derivative."""
    return newton_raphson(f, x0, None, tolerance, max_iterations)


def bisection(
    f: Callable[[float], float],
    a: float,
    b: float,
    tolerance: Optional[float] = None,
    max_iterations: Optional[int] = None,
) -> RootResult:
    """
    Interval-halving root search on [a, b].

    Stops when |f(mid)| < tolerance or the half-width drops below tolerance.
    An endpoint where f is exactly zero is returned at once.

    Raises:
        BracketError: If f(a) and f(b) have the same sign
    """
    tolerance = CONFIG.root_tolerance if tolerance is None else tolerance
    max_iterations = CONFIG.max_iterations if max_iterations is None else max_iterations

    fa = f(a)
    fb = f(b)

    if fa * fb > 0:
        raise BracketError(
            f"Bisection requires f(a) and f(b) to have opposite signs "
            f"(f({a})={fa:.4g}, f({b})={fb:.4g})."
        )
    if fa == 0:
        return RootResult(a, 0, True, 0.0, fa)
    if fb == 0:
        return RootResult(b, 0, True, 0.0, fb)
    logger.debug("Bisection bracket [%g, %g]", a, b)

    iterations = 0
    mid = (a + b) / 2
    fmid = f(mid)

    for i in range(max_iterations):
        mid = (a + b) / 2
        fmid = f(mid)
        iterations = i + 1

        if abs(fmid) < tolerance or (b - a) / 2 < tolerance:
            return RootResult(mid, iterations, True, abs(fmid), fmid)

        if fa * fmid < 0:
            b = mid
        else:
            a = mid
            fa = fmid

    return RootResult(mid, iterations, False, abs(fmid), fmid)
