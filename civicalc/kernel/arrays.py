# civicalc/kernel/arrays.py
"""Array helpers: grids, extremum search, rounding and interpolation."""

import math
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Sequence

import numpy as np


@dataclass(frozen=True)
class MaxAbs:
    """Largest-magnitude sample of an array."""
    value: float        # Signed value
    abs_max: float      # |value|
    index: int          # First index holding it
    position: float     # index * dx


def linspace(start: float, end: float, n: int) -> np.ndarray:
    """n evenly spaced points including both ends; n < 2 gives [start]."""
    if n < 2:
        return np.array([start], dtype=float)
    return np.linspace(start, end, int(n))


def zeros(n: int) -> np.ndarray:
    return np.zeros(int(n), dtype=float)


def find_max_abs(arr: Sequence[float], dx: float = 1.0) -> MaxAbs:
    """
    Locate the largest absolute value.

    Ties go to the first occurrence. An all-zero (or empty) array reports
    value 0 at index 0.
    """
    arr = np.asarray(arr, dtype=float)
    if arr.size == 0:
        return MaxAbs(0.0, 0.0, 0, 0.0)

    index = int(np.argmax(np.abs(arr)))
    value = float(arr[index])
    return MaxAbs(value, abs(value), index, index * dx)


def round_to(value: float, decimals: int = 4) -> float:
    """Round half away from zero to a fixed number of decimals."""
    value = float(value)
    # floats this large carry no fractional digits
    if not math.isfinite(value) or abs(value) >= 1e16:
        return value

    exact = Decimal(repr(value))
    quantum = Decimal(1).scaleb(-decimals)
    with localcontext() as ctx:
        # quantize needs every digit of the result within the precision
        ctx.prec = max(ctx.prec, exact.adjusted() + decimals + 2)
        return float(exact.quantize(quantum, rounding=ROUND_HALF_UP))


def linear_interpolate(x: Sequence[float], y: Sequence[float], xi: float) -> float:
    """
    Interpolate y at xi on ascending x.

    Outside [x[0], x[-1]] the nearest end value is returned.
    """
    return float(np.interp(xi, np.asarray(x, dtype=float), np.asarray(y, dtype=float)))
