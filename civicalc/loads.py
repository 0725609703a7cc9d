# loads.py - Load constructors, resultants and fixed-end actions

import math
from typing import Any, Iterable, Mapping, Optional, Tuple

from .config import CONFIG
from .model import Load, LoadKind


def point_load(magnitude: float, position: float) -> Load:
    """Concentrated force (kN, positive = DOWNWARD) at ``position``."""
    return Load(LoadKind.POINT, magnitude, position=position)


def udl(intensity: float, start: float = 0.0, end: Optional[float] = None) -> Load:
    """Uniform load (kN/m) from ``start`` to ``end``; ``end=None`` runs to the beam end."""
    return Load(LoadKind.UDL, intensity, start=start, end=end)


def applied_moment(magnitude: float, position: float) -> Load:
    """Concentrated couple (kN·m) at ``position``."""
    return Load(LoadKind.MOMENT, magnitude, position=position)


def _first_number(data: Mapping[str, Any], keys: Tuple[str, ...], default: float) -> float:
    # falsy entries (missing, None, 0, "") fall through to the next alias
    for key in keys:
        value = data.get(key)
        if value:
            return float(value)
    return float(default)


def normalize_load(data: Mapping[str, Any], span: float) -> Load:
    """
    Build a Load from a loose mapping such as a form payload.

    Recognised keys:
        type               'point' (default), 'udl' or 'moment'
        magnitude|P|w|M    load value
        position|a         point / moment location
        start, end         UDL extent (end defaults to the span)

    Numeric strings are accepted. Zero-valued entries count as missing,
    so ``end=0`` is read as the full span.
    """
    kind = data.get("type") or data.get("kind") or LoadKind.POINT
    if not isinstance(kind, LoadKind):
        kind = str(kind).lower()
    return Load(
        kind=kind,
        magnitude=_first_number(data, ("magnitude", "P", "w", "M"), 0.0),
        position=_first_number(data, ("position", "a"), 0.0),
        start=_first_number(data, ("start",), 0.0),
        end=_first_number(data, ("end",), span),
    )


def load_resultant(load: Load, about: float = 0.0) -> Tuple[float, float]:
    """
    Vertical force and moment of one load about ``about``.

    Point:  (P, P·(position - about))
    UDL:    (w·length, w·length·(centroid - about))
    Moment: (0, M) - a couple adds its magnitude directly
    """
    if load.kind is LoadKind.POINT:
        return load.magnitude, load.magnitude * (load.position - about)

    if load.kind is LoadKind.UDL:
        length = load.length
        W = load.magnitude * length
        centroid = load.start + length / 2.0
        return W, W * (centroid - about)

    return 0.0, load.magnitude


def total_resultant(loads: Iterable[Load], about: float = 0.0) -> Tuple[float, float]:
    """Summed (force, moment) of ``loads`` about ``about``."""
    total_force = 0.0
    total_moment = 0.0
    for load in loads:
        force, moment = load_resultant(load, about)
        total_force += force
        total_moment += moment
    return total_force, total_moment


def is_full_span(load: Load, span: float, tol: float = CONFIG.full_span_tolerance) -> bool:
    """True for a UDL covering the whole beam."""
    return (
        load.kind is LoadKind.UDL
        and load.end is not None
        and math.isclose(load.start, 0.0, abs_tol=tol)
        and math.isclose(load.end, span, abs_tol=tol)
    )


def fixed_end_moments(load: Load, span: float) -> Tuple[float, float]:
    """
    Fixed-end moment magnitudes (Mab, Mba) of one load on a fixed-fixed beam.

    Point load P at distance a from A (b = L - a):
        Mab = P·a·b²/L²,   Mba = P·a²·b/L²
    Full-span UDL w:
        Mab = Mba = w·L²/12

    Partial-span UDLs and couples return (0, 0); they only enter the
    force and moment balance.
    """
    if span == 0:
        return 0.0, 0.0

    L = span
    if load.kind is LoadKind.POINT:
        P = load.magnitude
        a = load.position
        b = L - a
        return P * a * b**2 / L**2, P * a**2 * b / L**2

    if is_full_span(load, span):
        moment_magnitude = load.magnitude * L * L / 12.0
        return moment_magnitude, moment_magnitude

    return 0.0, 0.0


def propped_prop_reaction(load: Load, span: float) -> float:
    """
    Prop reaction at B of a cantilever fixed at A and propped at B.

    Point load P at distance a from the fixed end:  Rb = P·a²·(3L - a) / (2L³)
    Full-span UDL w:                                Rb = 3wL/8

    Partial-span UDLs and couples contribute nothing.
    """
    if span == 0:
        return 0.0

    L = span
    if load.kind is LoadKind.POINT:
        a = load.position
        return load.magnitude * a**2 * (3 * L - a) / (2 * L**3)

    if is_full_span(load, span):
        return 3.0 * load.magnitude * L / 8.0

    return 0.0
