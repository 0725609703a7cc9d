# File: tests/test_simply_supported.py
"""
Simply supported beams against closed-form results.

Default section: E = 200 GPa, I = 1e-4 m⁴, so EI = 2e7 N·m².
Deflections are reported in mm.
"""

import numpy as np

from civicalc import Beam, analyze, analyze_beam, applied_moment, point_load, udl
from civicalc.analysis import calculate_reactions, calculate_shear_force

EI = 200e9 * 1e-4


def test_central_point_load():
    """
    P = 10 at midspan of L = 6:
        Ra = Rb = P/2 = 5
        Mmax = PL/4 = 15 at x = 3
        ymax = PL³/(48EI)
    """
    L, P = 6.0, 10.0
    result = analyze(Beam(span=L, loads=(point_load(P, 3.0),)))

    assert result.reactions.Ra == 5.0
    assert result.reactions.Rb == 5.0
    assert result.reactions.Ma == 0.0
    assert result.reactions.Mb == 0.0

    assert result.max_values.moment == 15.0
    assert result.max_values.moment_position == 3.0
    assert result.max_values.shear == 5.0

    # x[250] = 3.0 already carries the load: V jumps at x >= position
    assert result.x[250] == 3.0
    assert np.isclose(result.shear[249], 5.0)
    assert np.isclose(result.shear[250], -5.0)

    expected = -P * L**3 / (48 * EI) * 1000
    assert np.isclose(result.deflection[250], expected, rtol=1e-3)
    assert np.isclose(result.max_values.deflection, abs(expected), rtol=1e-3, atol=1e-4)
    assert result.max_values.deflection_position == 3.0

    print(f"✓ Midspan deflection: {result.deflection[250]:.6e} mm (expected {expected:.6e})")


def test_full_span_udl():
    """
    w = 5 over L = 6:
        Ra = Rb = wL/2 = 15
        Mmax = wL²/8 = 22.5 at midspan
        ymax = 5wL⁴/(384EI)
    """
    L, w = 6.0, 5.0
    result = analyze(Beam(span=L, loads=(udl(w),)))

    assert result.reactions.Ra == 15.0
    assert result.reactions.Rb == 15.0
    assert np.isclose(result.shear[0], 15.0)
    assert np.isclose(result.shear[-1], -15.0)
    assert result.max_values.moment == 22.5
    assert result.max_values.moment_position == 3.0

    expected = -5 * w * L**4 / (384 * EI) * 1000
    assert np.isclose(result.deflection[250], expected, rtol=1e-3)


def test_partial_udl_reactions_use_loaded_length_centroid():
    # w = 10 over [2, 4]: W = 20 acting at x = 3
    reactions = calculate_reactions(Beam(span=6.0, loads=(udl(10.0, 2.0, 4.0),)))

    assert np.isclose(reactions.Ra, 10.0)
    assert np.isclose(reactions.Rb, 10.0)


def test_off_centre_point_load():
    """
    P = 12 at a = 2 on L = 6 (b = 4):
        Rb = Pa/L = 4, Ra = 8
        M(a) = Pab/L = 16
        ymax in the longer segment, at x = L - sqrt((L² - a²)/3) ≈ 2.734
    """
    result = analyze(Beam(span=6.0, segments=600, loads=(point_load(12.0, 2.0),)))

    assert result.reactions.Ra == 8.0
    assert result.reactions.Rb == 4.0
    assert result.max_values.moment == 16.0
    assert result.max_values.moment_position == 2.0
    assert abs(result.max_values.deflection_position - (6.0 - np.sqrt(32.0 / 3.0))) < 0.02


def test_ends_have_zero_deflection_and_moment():
    beam = Beam(span=5.0, loads=(point_load(7.0, 1.5), udl(3.0, 1.0, 4.0)))
    result = analyze(beam)

    assert abs(result.deflection[0]) < 1e-12
    assert abs(result.deflection[-1]) < 1e-12
    assert abs(result.moment[0]) < 1e-12
    assert abs(result.moment[-1]) < 1e-9


def test_applied_moment_enters_reactions_but_not_shear():
    """A couple C = 12 at midspan of L = 6 gives Rb = C/L = 2, Ra = -2."""
    beam = Beam(span=6.0, loads=(applied_moment(12.0, 3.0),))
    reactions = calculate_reactions(beam)
    V = calculate_shear_force(beam, reactions)

    assert np.isclose(reactions.Rb, 2.0)
    assert np.isclose(reactions.Ra, -2.0)
    np.testing.assert_allclose(V, -2.0)


def test_zero_span_skips_moment_balance():
    reactions = calculate_reactions(Beam(span=0.0, loads=(point_load(10.0, 0.0),)))

    assert reactions.Rb == 0.0
    assert reactions.Ra == 10.0


def test_no_loads_gives_flat_profiles():
    result = analyze(Beam(span=4.0))

    assert not result.shear.any()
    assert not result.moment.any()
    assert not result.deflection.any()
    assert result.max_values.deflection == 0.0
    assert result.max_values.deflection_position == 0.0


def test_analyze_beam_accepts_loose_load_mappings():
    result = analyze_beam(
        span=6.0,
        loads=[{"type": "point", "P": "10", "a": 3}],
        segments=500,
    )

    assert result.reactions.Ra == 5.0
    assert result.properties.boundary_condition.value == "simply_supported"
    assert result.properties.EI == EI
