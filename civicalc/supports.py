# civicalc/supports.py
"""
BOUNDARY-CONDITION FAMILIES
===========================

Each support arrangement is one class implementing the same four hooks:

    reactions()           support forces / moments from equilibrium
    shear_base()          shear carried in from the supports at each node
    moment_base()         moment carried in from the supports at each node
    correct_deflection()  enforce the family's displacement conditions

The analysis pipeline subtracts the load effects itself, so a family only
describes what its supports contribute.

    Family              Known conditions                  Unknowns
    ------------------  --------------------------------  --------------
    simply_supported    y(0)=0, y(L)=0                    Ra, Rb
    cantilever          y(0)=0, θ(0)=0                    Ra, Ma
    overhanging         y(a)=0, y(b)=0                    Ra, Rb
    fixed_both          y(0)=θ(0)=0, y(L)=θ(L)=0          Ra, Rb, Ma, Mb
    propped_cantilever  y(0)=θ(0)=0, y(L)=0               Ra, Rb, Ma

SIGN CONVENTIONS:
-----------------
- Loads positive DOWNWARD, reactions positive UPWARD
- Moment positive when sagging; Ma/Mb report the support moment as it
  appears in the bending diagram (hogging at a fixed end is negative)
"""

import abc
from dataclasses import dataclass
from typing import Dict, Union

import numpy as np

from .kernel.arrays import linear_interpolate
from .loads import fixed_end_moments, propped_prop_reaction, total_resultant
from .model import Beam, BoundaryCondition


@dataclass(frozen=True)
class Reactions:
    """Support reactions (kN, kN·m). Components a family lacks stay 0."""
    Ra: float = 0.0
    Rb: float = 0.0
    Ma: float = 0.0
    Mb: float = 0.0


class SupportFamily(abc.ABC):
    """Common interface of the five boundary-condition families."""

    condition: BoundaryCondition

    @abc.abstractmethod
    def reactions(self, beam: Beam) -> Reactions:
        ...

    def shear_base(self, beam: Beam, reactions: Reactions, x: np.ndarray) -> np.ndarray:
        return np.full(len(x), reactions.Ra, dtype=float)

    def moment_base(self, beam: Beam, reactions: Reactions, x: np.ndarray) -> np.ndarray:
        return reactions.Ra * x + reactions.Ma

    @abc.abstractmethod
    def correct_deflection(
        self, beam: Beam, x: np.ndarray, slope: np.ndarray, deflection: np.ndarray
    ) -> np.ndarray:
        ...

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class SimplySupported(SupportFamily):
    """Pin at x=0, roller at x=L."""

    condition = BoundaryCondition.SIMPLY_SUPPORTED

    def reactions(self, beam: Beam) -> Reactions:
        total_force, moment_about_a = total_resultant(beam.loads, about=0.0)

        # ΣMa = 0: Rb * L = moment_about_a
        Rb = moment_about_a / beam.span if beam.span != 0 else 0.0
        # ΣFy = 0: Ra + Rb = total_force
        Ra = total_force - Rb
        return Reactions(Ra=Ra, Rb=Rb)

    def correct_deflection(self, beam, x, slope, deflection):
        if beam.span == 0:
            return deflection
        # Rigid rotation that brings y(L) back to zero
        return deflection - (deflection[-1] / beam.span) * x


class Cantilever(SupportFamily):
    """Fixed at x=0, free at x=L."""

    condition = BoundaryCondition.CANTILEVER

    def reactions(self, beam: Beam) -> Reactions:
        total_force, moment_about_a = total_resultant(beam.loads, about=0.0)
        return Reactions(Ra=total_force, Ma=-moment_about_a)

    def correct_deflection(self, beam, x, slope, deflection):
        # Integrating from the fixed end with zero seeds already gives y(0)=θ(0)=0
        return deflection


class Overhanging(SupportFamily):
    """Pin at a, roller at b, with the beam free beyond either support."""

    condition = BoundaryCondition.OVERHANGING

    def reactions(self, beam: Beam) -> Reactions:
        a, b = beam.supports
        total_force, moment_about_a = total_resultant(beam.loads, about=a)

        gap = b - a
        Rb = moment_about_a / gap if gap != 0 else 0.0
        Ra = total_force - Rb
        return Reactions(Ra=Ra, Rb=Rb)

    def shear_base(self, beam, reactions, x):
        a, b = beam.supports
        return reactions.Ra * (x >= a) + reactions.Rb * (x >= b)

    def moment_base(self, beam, reactions, x):
        a, b = beam.supports
        return (
            np.where(x >= a, reactions.Ra * (x - a), 0.0)
            + np.where(x >= b, reactions.Rb * (x - b), 0.0)
        )

    def correct_deflection(self, beam, x, slope, deflection):
        a, b = beam.supports
        ya = linear_interpolate(x, deflection, a)
        yb = linear_interpolate(x, deflection, b)

        gap = b - a
        if gap == 0:
            return deflection - ya
        # Line through the two support values
        return deflection - (ya + (yb - ya) * (x - a) / gap)


class FixedBoth(SupportFamily):
    """
    Both ends fixed.

    End moments come from per-load fixed-end moment formulas (point loads
    and full-span UDLs only); a partial-span UDL adds no fixed-end moment.
    This is an approximation, not a stiffness-method solution.
    """

    condition = BoundaryCondition.FIXED_BOTH

    def reactions(self, beam: Beam) -> Reactions:
        L = beam.span
        total_force, moment_about_a = total_resultant(beam.loads, about=0.0)

        Mab = 0.0
        Mba = 0.0
        for load in beam.loads:
            m_ab, m_ba = fixed_end_moments(load, L)
            Mab += m_ab
            Mba += m_ba

        # Simple-span reaction shifted by the end-moment difference
        Rb = (moment_about_a - (Mab - Mba)) / L if L != 0 else 0.0
        Ra = total_force - Rb
        return Reactions(Ra=Ra, Rb=Rb, Ma=-Mab, Mb=-Mba)

    def correct_deflection(self, beam, x, slope, deflection):
        L = beam.span
        if L == 0:
            return deflection

        # Cubic c2·x² + c3·x³ keeps y(0)=θ(0)=0 and zeroes y(L), θ(L)
        yL = deflection[-1]
        thetaL = slope[-1]
        c3 = (thetaL * L - 2.0 * yL) / L**3
        c2 = (3.0 * yL - thetaL * L) / L**2
        return deflection - c2 * x**2 - c3 * x**3


class ProppedCantilever(SupportFamily):
    """Fixed at x=0, roller (prop) at x=L."""

    condition = BoundaryCondition.PROPPED_CANTILEVER

    def reactions(self, beam: Beam) -> Reactions:
        L = beam.span
        total_force, moment_about_a = total_resultant(beam.loads, about=0.0)

        Rb = sum(propped_prop_reaction(load, L) for load in beam.loads)
        Ra = total_force - Rb
        Ma = Rb * L - moment_about_a
        return Reactions(Ra=Ra, Rb=Rb, Ma=Ma)

    def correct_deflection(self, beam, x, slope, deflection):
        L = beam.span
        if L == 0:
            return deflection
        # Quadratic keeps y(0)=θ(0)=0 and zeroes y(L)
        return deflection - (deflection[-1] / L**2) * x**2


SUPPORT_FAMILIES: Dict[BoundaryCondition, SupportFamily] = {
    family.condition: family
    for family in (
        SimplySupported(),
        Cantilever(),
        Overhanging(),
        FixedBoth(),
        ProppedCantilever(),
    )
}


def family_for(condition: Union[BoundaryCondition, str]) -> SupportFamily:
    """Look up the family object for a boundary condition."""
    try:
        return SUPPORT_FAMILIES[BoundaryCondition(condition)]
    except ValueError:
        raise ValueError(f"Unknown boundary condition {condition!r}") from None
