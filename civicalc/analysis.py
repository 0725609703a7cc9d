# civicalc/analysis.py
"""
BEAM ANALYSIS PIPELINE
======================

Turns a Beam (span, stiffness, supports, loads) into shear, moment and
deflection profiles on the beam's node grid, in a fixed order:

    reactions → shear → moment → deflection (double integration of M/EI)

Every stage is a plain function taking the upstream result explicitly, so
stages cannot run out of order and nothing is stored on the Beam.

PROFILES:
---------
At node x:
- V(x) = support shear - Σ point loads at or left of x - Σ UDL intensity × loaded length up to x
- M(x) = support moment - Σ P·(x - position) - Σ W_eff·(x - centroid_eff) - Σ couples left of x
- y(x) from y'' = M/EI, integrated from x=0 with zero seeds, then corrected
  per family (see supports.py). Reported in millimetres.

Loads outside the beam are not rejected; they are evaluated as given.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union

import numpy as np

from .config import CONFIG
from .kernel.arrays import find_max_abs, round_to
from .kernel.integrate import cumulative_integral
from .loads import normalize_load
from .model import Beam, BoundaryCondition, Load, LoadKind
from .supports import Reactions, family_for

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MaxValues:
    """Absolute maxima and the positions (m) where they first occur."""
    shear: float
    shear_position: float
    moment: float
    moment_position: float
    deflection: float       # mm
    deflection_position: float


@dataclass(frozen=True)
class BeamProperties:
    span: float
    E: float
    I: float
    EI: float
    boundary_condition: BoundaryCondition


@dataclass(frozen=True)
class AnalysisResult:
    """
    Snapshot of one analysis.

    Arrays are fresh copies; nothing here refers back to the Beam.
    """
    x: np.ndarray
    shear: np.ndarray
    moment: np.ndarray
    deflection: np.ndarray  # mm
    reactions: Reactions
    max_values: MaxValues
    properties: BeamProperties

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready mapping using the report field names."""
        mv = self.max_values
        props = self.properties
        return {
            "x": self.x.tolist(),
            "shear": self.shear.tolist(),
            "moment": self.moment.tolist(),
            "deflection": self.deflection.tolist(),
            "reactions": {
                "Ra": self.reactions.Ra,
                "Rb": self.reactions.Rb,
                "Ma": self.reactions.Ma,
                "Mb": self.reactions.Mb,
            },
            "maxValues": {
                "shear": mv.shear,
                "shearPosition": mv.shear_position,
                "moment": mv.moment,
                "momentPosition": mv.moment_position,
                "deflection": mv.deflection,
                "deflectionPosition": mv.deflection_position,
            },
            "properties": {
                "span": props.span,
                "E": props.E,
                "I": props.I,
                "EI": props.EI,
                "boundaryCondition": props.boundary_condition.value,
            },
        }


def calculate_reactions(beam: Beam) -> Reactions:
    """Support reactions for the beam's boundary-condition family."""
    reactions = family_for(beam.boundary_condition).reactions(beam)
    logger.debug("%s reactions: %s", beam.boundary_condition.value, reactions)
    return reactions


def _loaded_length(load: Load, x: np.ndarray) -> np.ndarray:
    # Portion of a UDL between its start and x, never negative
    return np.clip(np.minimum(x, load.end) - load.start, 0.0, None)


def calculate_shear_force(beam: Beam, reactions: Reactions) -> np.ndarray:
    """Shear force (kN) at every node. Couples do not affect shear."""
    x = beam.x
    V = family_for(beam.boundary_condition).shear_base(beam, reactions, x)

    for load in beam.loads:
        if load.kind is LoadKind.POINT:
            V = V - np.where(x >= load.position, load.magnitude, 0.0)
        elif load.kind is LoadKind.UDL:
            V = V - load.magnitude * _loaded_length(load, x)

    return V


def calculate_bending_moment(beam: Beam, reactions: Reactions) -> np.ndarray:
    """Bending moment (kN·m) at every node, sagging positive."""
    x = beam.x
    M = family_for(beam.boundary_condition).moment_base(beam, reactions, x)

    for load in beam.loads:
        if load.kind is LoadKind.POINT:
            M = M - np.where(x >= load.position, load.magnitude * (x - load.position), 0.0)
        elif load.kind is LoadKind.UDL:
            effective = _loaded_length(load, x)
            W = load.magnitude * effective
            centroid = load.start + effective / 2.0
            M = M - np.where(effective > 0, W * (x - centroid), 0.0)
        elif load.kind is LoadKind.MOMENT:
            M = M - np.where(x >= load.position, load.magnitude, 0.0)

    return M


def calculate_deflection(beam: Beam, moment: np.ndarray) -> np.ndarray:
    """
    Deflection (mm) by double integration of the curvature M/EI.

    Slope and deflection are integrated from x=0 with zero seeds, then
    the family's displacement conditions are imposed.
    """
    curvature = np.asarray(moment, dtype=float) / beam.EI

    slope = cumulative_integral(curvature, beam.dx, 0.0)
    deflection = cumulative_integral(slope, beam.dx, 0.0)

    family = family_for(beam.boundary_condition)
    deflection = family.correct_deflection(beam, beam.x, slope, deflection)

    # m → mm
    return deflection * 1000.0


def analyze(beam: Beam) -> AnalysisResult:
    """
    Run the full pipeline and package the results.

    Reactions and maxima are rounded to ``CONFIG.report_decimals``; the
    profiles are returned at full precision.
    """
    logger.debug(
        "Analyzing %s beam: span=%g, segments=%d, loads=%d",
        beam.boundary_condition.value, beam.span, beam.segments, len(beam.loads),
    )
    reactions = calculate_reactions(beam)
    shear = calculate_shear_force(beam, reactions)
    moment = calculate_bending_moment(beam, reactions)
    deflection = calculate_deflection(beam, moment)

    decimals = CONFIG.report_decimals
    max_shear = find_max_abs(shear, beam.dx)
    max_moment = find_max_abs(moment, beam.dx)
    max_deflection = find_max_abs(deflection, beam.dx)

    return AnalysisResult(
        x=np.array(beam.x, dtype=float),
        shear=shear.copy(),
        moment=moment.copy(),
        deflection=deflection.copy(),
        reactions=Reactions(
            Ra=round_to(reactions.Ra, decimals),
            Rb=round_to(reactions.Rb, decimals),
            Ma=round_to(reactions.Ma, decimals),
            Mb=round_to(reactions.Mb, decimals),
        ),
        max_values=MaxValues(
            shear=round_to(max_shear.abs_max, decimals),
            shear_position=round_to(max_shear.position, decimals),
            moment=round_to(max_moment.abs_max, decimals),
            moment_position=round_to(max_moment.position, decimals),
            deflection=round_to(max_deflection.abs_max, decimals),
            deflection_position=round_to(max_deflection.position, decimals),
        ),
        properties=BeamProperties(
            span=beam.span,
            E=beam.E,
            I=beam.I,
            EI=beam.EI,
            boundary_condition=beam.boundary_condition,
        ),
    )


def analyze_beam(
    span: float,
    loads: Iterable[Union[Load, Mapping[str, Any]]],
    E: float = CONFIG.default_E,
    I: float = CONFIG.default_I,
    segments: int = CONFIG.default_segments,
    boundary_condition: Union[BoundaryCondition, str] = BoundaryCondition.SIMPLY_SUPPORTED,
    supports: Optional[Tuple[float, float]] = None,
) -> AnalysisResult:
    """One-call analysis; loads may be Load objects or loose mappings."""
    resolved = [
        load if isinstance(load, Load) else normalize_load(load, span)
        for load in loads
    ]
    beam = Beam(
        span=span,
        E=E,
        I=I,
        segments=segments,
        boundary_condition=boundary_condition,
        supports=supports,
        loads=tuple(resolved),
    )
    return analyze(beam)
