# civicalc/kernel/integrate.py
"""
NUMERICAL INTEGRATION AND DIFFERENTIATION
=========================================

All routines work on samples taken at a uniform step ``dx``.

- simpsons_rule:       composite Simpson's 1/3, trapezoid on a trailing odd interval
- trapezoidal_rule:    composite trapezoid
- cumulative_integral: running trapezoid, same length as the input
- double_integral:     two cumulative passes with end-value correction
- numerical_derivative: forward / central / backward differences
"""

from typing import Sequence

import numpy as np


class InsufficientPointsError(ValueError):
    """Raised when a rule is given fewer samples than it needs."""
    pass


def simpsons_rule(y: Sequence[float], dx: float) -> float:
    """
    Composite Simpson's 1/3 rule.

    Weights are 1 at the ends, 4 on odd and 2 on even interior samples,
    all times dx/3. When the interval count n is odd, the first n-1
    intervals use Simpson and the last one a trapezoid.

    Raises:
        InsufficientPointsError: If fewer than 3 samples are given
    """
    y = np.asarray(y, dtype=float)
    n = len(y) - 1

    if n < 2:
        raise InsufficientPointsError("Simpson's rule requires at least 3 points")

    m = n if n % 2 == 0 else n - 1
    ys = y[:m + 1]

    total = ys[0] + ys[m] + 4.0 * ys[1:m:2].sum() + 2.0 * ys[2:m:2].sum()
    integral = (dx / 3.0) * total

    if n % 2 != 0:
        integral += (dx / 2.0) * (y[n - 1] + y[n])

    return float(integral)


def trapezoidal_rule(y: Sequence[float], dx: float) -> float:
    """dx * (y0/2 + y1 + ... + y_{n-1} + yn/2)."""
    y = np.asarray(y, dtype=float)
    if len(y) < 2:
        raise InsufficientPointsError("Trapezoidal rule requires at least 2 points")

    return float(dx * ((y[0] + y[-1]) / 2.0 + y[1:-1].sum()))


def cumulative_integral(y: Sequence[float], dx: float, initial_value: float = 0.0) -> np.ndarray:
    """
    Running trapezoidal integral seeded with ``initial_value``.

    Element i holds the integral from sample 0 to sample i; the output
    always has the length of the input.
    """
    y = np.asarray(y, dtype=float)
    if len(y) < 2:
        return np.full(len(y), float(initial_value))

    increments = (dx / 2.0) * (y[:-1] + y[1:])
    return np.concatenate(([initial_value], initial_value + np.cumsum(increments)))


def double_integral(y: Sequence[float], dx: float, y0: float = 0.0, yL: float = 0.0) -> np.ndarray:
    """
    Integrate twice (slope, then deflection) and enforce both end values.

    The deflection is seeded with y0 and a linear term is added so that
    the last value equals yL.
    """
    slope = cumulative_integral(y, dx, 0.0)
    deflection = cumulative_integral(slope, dx, y0)

    L = dx * (len(deflection) - 1)
    if len(deflection) < 2 or L == 0:
        return deflection

    correction = (yL - deflection[-1]) / L
    return deflection + correction * dx * np.arange(len(deflection))


def numerical_derivative(y: Sequence[float], dx: float) -> np.ndarray:
    """
    Forward difference at the first sample, central differences inside,
    backward difference at the last sample.
    """
    y = np.asarray(y, dtype=float)
    if len(y) < 2:
        raise InsufficientPointsError("Numerical derivative requires at least 2 points")

    return np.gradient(y, dx, edge_order=1)
