# File: tests/test_kernel_integrate.py
"""
Test the quadrature, running-integral and derivative primitives.

scipy.integrate serves as an independent reference implementation.
"""

import numpy as np
import pytest
from scipy import integrate

from civicalc.kernel.integrate import (
    InsufficientPointsError,
    cumulative_integral,
    double_integral,
    numerical_derivative,
    simpsons_rule,
    trapezoidal_rule,
)


def test_simpson_is_exact_for_cubics():
    """Simpson's 1/3 rule integrates polynomials up to degree 3 exactly."""
    x = np.linspace(0.0, 2.0, 11)
    dx = x[1] - x[0]

    assert np.isclose(simpsons_rule(x**3, dx), 4.0, rtol=1e-12)
    assert np.isclose(simpsons_rule(3 * x**2 - x + 1, dx), 8.0 - 2.0 + 2.0, rtol=1e-12)


def test_simpson_odd_interval_count_adds_trapezoid_for_last_segment():
    """
    Three intervals: Simpson over the first two, trapezoid over the last.
    For y = x² on x = 0, 1, 2, 3:
        Simpson [0, 1, 4]  = (1/3)(0 + 4·1 + 4) = 8/3
        Trapezoid [4, 9]   = (4 + 9)/2 = 6.5
    """
    y = [0.0, 1.0, 4.0, 9.0]
    assert np.isclose(simpsons_rule(y, 1.0), 8.0 / 3.0 + 6.5, rtol=1e-12)

    # A linear profile is still integrated exactly
    assert np.isclose(simpsons_rule([1.0, 2.0, 3.0, 4.0], 1.0), 7.5, rtol=1e-12)


def test_simpson_needs_three_points():
    with pytest.raises(InsufficientPointsError):
        simpsons_rule([1.0, 2.0], 0.5)


def test_trapezoidal_rule_matches_scipy():
    rng = np.random.default_rng(7)
    y = rng.normal(size=41)
    dx = 0.25

    assert np.isclose(trapezoidal_rule(y, dx), integrate.trapezoid(y, dx=dx), rtol=1e-12)
    assert np.isclose(trapezoidal_rule([1.0, 2.0, 3.0], 0.5), 2.0)


def test_trapezoidal_rule_needs_two_points():
    with pytest.raises(InsufficientPointsError):
        trapezoidal_rule([1.0], 0.5)


def test_cumulative_integral_matches_scipy_and_honours_seed():
    x = np.linspace(0.0, np.pi, 101)
    dx = x[1] - x[0]
    y = np.sin(x)

    running = cumulative_integral(y, dx, initial_value=5.0)
    expected = integrate.cumulative_trapezoid(y, dx=dx, initial=0.0) + 5.0

    assert running.shape == y.shape
    assert running[0] == 5.0
    np.testing.assert_allclose(running, expected, rtol=1e-12, atol=1e-12)


def test_double_integral_enforces_both_end_values():
    """y'' = 2 on [0, 1] with y(0) = y(1) = 0 gives y = x² - x."""
    x = np.linspace(0.0, 1.0, 51)
    dx = x[1] - x[0]

    y = double_integral(np.full_like(x, 2.0), dx)
    np.testing.assert_allclose(y, x**2 - x, atol=1e-12)

    shifted = double_integral(np.full_like(x, 2.0), dx, y0=1.0, yL=3.0)
    assert np.isclose(shifted[0], 1.0)
    assert np.isclose(shifted[-1], 3.0)


def test_numerical_derivative_end_and_interior_stencils():
    x = np.linspace(0.0, 1.0, 11)
    dx = x[1] - x[0]
    y = x**2

    dy = numerical_derivative(y, dx)

    assert dy.shape == y.shape
    # Central differences are exact for quadratics
    np.testing.assert_allclose(dy[1:-1], 2 * x[1:-1], atol=1e-12)
    # One-sided differences at the ends
    assert np.isclose(dy[0], (y[1] - y[0]) / dx)
    assert np.isclose(dy[-1], (y[-1] - y[-2]) / dx)


def test_numerical_derivative_needs_two_points():
    with pytest.raises(InsufficientPointsError):
        numerical_derivative([3.0], 0.1)


def test_integral_and_derivative_are_discrete_inverses():
    """
    Differentiating a running integral (and integrating a derivative)
    recovers the original profile, with an error that shrinks as the
    grid is refined.
    """
    errors_from_integral = []
    errors_from_derivative = []

    for n in (50, 100, 200, 400):
        x = np.linspace(0.0, 2 * np.pi, n + 1)
        dx = x[1] - x[0]

        recovered = numerical_derivative(cumulative_integral(np.cos(x), dx), dx)
        errors_from_integral.append(np.max(np.abs(recovered[1:-1] - np.cos(x[1:-1]))))

        rebuilt = cumulative_integral(numerical_derivative(np.sin(x), dx), dx)
        errors_from_derivative.append(np.max(np.abs(rebuilt - np.sin(x))))

    assert errors_from_integral[-1] < 1e-3
    assert errors_from_derivative[-1] < 1e-2
    assert all(a > b for a, b in zip(errors_from_integral, errors_from_integral[1:]))
    assert all(a > b for a, b in zip(errors_from_derivative, errors_from_derivative[1:]))


def test_cumulative_integral_keeps_input_length_for_short_inputs():
    assert cumulative_integral([], 0.1).shape == (0,)
    np.testing.assert_array_equal(cumulative_integral([3.0], 0.1, initial_value=2.0), [2.0])
    assert double_integral([], 0.1).shape == (0,)
