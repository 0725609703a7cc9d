# civicalc/kernel - Stateless numerical primitives
"""
KERNEL: THE NUMERICAL FOUNDATION
================================

Pure functions shared by the beam engine and by the formula calculators
that need an implicit solve (Manning depth, bearing capacity, ...).

    roots.py        Newton-Raphson (analytical or numerical derivative), bisection
    integrate.py    Simpson, trapezoidal, cumulative and double integration, derivative
    arrays.py       linspace, zeros, extremum search, rounding, interpolation

Nothing here holds state; every function returns a fresh value.
"""

from .roots import RootResult, BracketError, newton_raphson, newton_raphson_numerical, bisection
from .integrate import (
    InsufficientPointsError,
    simpsons_rule,
    trapezoidal_rule,
    cumulative_integral,
    double_integral,
    numerical_derivative,
)
from .arrays import MaxAbs, linspace, zeros, find_max_abs, round_to, linear_interpolate

__all__ = [
    # Roots
    'RootResult',
    'BracketError',
    'newton_raphson',
    'newton_raphson_numerical',
    'bisection',
    # Integration
    'InsufficientPointsError',
    'simpsons_rule',
    'trapezoidal_rule',
    'cumulative_integral',
    'double_integral',
    'numerical_derivative',
    # Arrays
    'MaxAbs',
    'linspace',
    'zeros',
    'find_max_abs',
    'round_to',
    'linear_interpolate',
]
