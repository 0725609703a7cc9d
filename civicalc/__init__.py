# civicalc - Beam analysis engine and numerical kernel
"""
CIVICALC: BEAM ANALYSIS FOR THE CALCULATOR SUITE
================================================

This package provides:
- A numerical kernel (root finding, quadrature, running integrals,
  differentiation, interpolation, array helpers)
- A discretized 1-D beam solver for five support arrangements
- Section properties, material presets and tabular export

ARCHITECTURE:
-------------
    kernel/         Stateless numerical primitives
    model.py        Load and Beam definitions (immutable)
    loads.py        Load constructors, resultants, fixed-end actions
    supports.py     One class per boundary-condition family
    analysis.py     reactions → shear → moment → deflection pipeline
    section.py      Cross-section properties
    catalog.py      Material presets
    export.py       DataFrame / CSV / report rows
    config.py       Defaults and logging setup
"""

from .analysis import (
    AnalysisResult,
    BeamProperties,
    MaxValues,
    analyze,
    analyze_beam,
    calculate_bending_moment,
    calculate_deflection,
    calculate_reactions,
    calculate_shear_force,
)
from .loads import applied_moment, normalize_load, point_load, udl
from .model import Beam, BoundaryCondition, Load, LoadKind
from .supports import Reactions, family_for

__version__ = "0.1.0"

__all__ = [
    'AnalysisResult',
    'BeamProperties',
    'MaxValues',
    'Reactions',
    'Beam',
    'BoundaryCondition',
    'Load',
    'LoadKind',
    'analyze',
    'analyze_beam',
    'calculate_reactions',
    'calculate_shear_force',
    'calculate_bending_moment',
    'calculate_deflection',
    'family_for',
    'point_load',
    'udl',
    'applied_moment',
    'normalize_load',
]
