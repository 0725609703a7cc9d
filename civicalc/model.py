# civicalc/model.py
"""Load and Beam definitions (immutable)."""

from dataclasses import dataclass, field, replace
from enum import Enum
from functools import cached_property
from typing import Iterable, Optional, Tuple, Union

import numpy as np

from .config import CONFIG
from .kernel.arrays import linspace


class LoadKind(str, Enum):
    POINT = "point"
    UDL = "udl"
    MOMENT = "moment"


class BoundaryCondition(str, Enum):
    SIMPLY_SUPPORTED = "simply_supported"
    CANTILEVER = "cantilever"
    OVERHANGING = "overhanging"
    FIXED_BOTH = "fixed_both"
    PROPPED_CANTILEVER = "propped_cantilever"


@dataclass(frozen=True)
class Load:
    """
    A demand applied to the beam.

    kind      : point, udl or moment
    magnitude : kN for point loads, kN/m for UDL intensity, kN·m for moments
                (positive = DOWNWARD for forces)
    position  : distance from the left end (point and moment loads)
    start/end : loaded stretch of a UDL; ``end=None`` means the beam span
    """
    kind: LoadKind
    magnitude: float
    position: float = 0.0
    start: float = 0.0
    end: Optional[float] = None

    def __post_init__(self):
        try:
            kind = LoadKind(self.kind)
        except ValueError:
            raise ValueError(f"Unknown load kind {self.kind!r}") from None
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "magnitude", float(self.magnitude))
        object.__setattr__(self, "position", float(self.position))
        object.__setattr__(self, "start", float(self.start))
        if self.end is not None:
            object.__setattr__(self, "end", float(self.end))

    @property
    def length(self) -> float:
        """Loaded length of a UDL (0 for other kinds)."""
        if self.kind is not LoadKind.UDL or self.end is None:
            return 0.0
        return self.end - self.start


@dataclass(frozen=True)
class Beam:
    """
    Beam configuration: geometry, stiffness, supports and loads.

    Instances never change. ``add_load``, ``with_loads`` and
    ``with_boundary_condition`` return new beams; the node grid ``x`` is
    derived from span and segments and cached on first use.

    span      : beam length (m)
    E         : elastic modulus (Pa)
    I         : second moment of area (m⁴)
    segments  : number of equal intervals; the grid has segments + 1 nodes
    supports  : (a, b) support positions, only read for overhanging beams
    """
    span: float
    E: float = CONFIG.default_E
    I: float = CONFIG.default_I
    segments: int = CONFIG.default_segments
    boundary_condition: BoundaryCondition = BoundaryCondition.SIMPLY_SUPPORTED
    supports: Optional[Tuple[float, float]] = None
    loads: Tuple[Load, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if self.span < 0:
            raise ValueError(f"Beam span must not be negative (got {self.span}).")
        if self.E <= 0 or self.I <= 0:
            raise ValueError(f"E and I must be positive (got E={self.E}, I={self.I}).")
        if int(self.segments) < 1:
            raise ValueError(f"Beam needs at least one segment (got {self.segments}).")

        try:
            bc = BoundaryCondition(self.boundary_condition)
        except ValueError:
            raise ValueError(f"Unknown boundary condition {self.boundary_condition!r}") from None

        span = float(self.span)
        supports = self.supports if self.supports is not None else (0.0, span)
        a, b = supports

        object.__setattr__(self, "span", span)
        object.__setattr__(self, "E", float(self.E))
        object.__setattr__(self, "I", float(self.I))
        object.__setattr__(self, "segments", int(self.segments))
        object.__setattr__(self, "boundary_condition", bc)
        object.__setattr__(self, "supports", (float(a), float(b)))
        object.__setattr__(self, "loads", tuple(self._resolve(load) for load in self.loads))

    def _resolve(self, load: Load) -> Load:
        if not isinstance(load, Load):
            raise TypeError(f"Expected Load, got {type(load).__name__}")
        if load.end is None:
            return replace(load, end=self.span)
        return load

    @property
    def dx(self) -> float:
        return self.span / self.segments

    @property
    def EI(self) -> float:
        return self.E * self.I

    @cached_property
    def x(self) -> np.ndarray:
        """Node positions x[0..segments], read-only."""
        x = linspace(0.0, self.span, self.segments + 1)
        x.setflags(write=False)
        return x

    def add_load(self, load: Load) -> "Beam":
        return replace(self, loads=self.loads + (load,))

    def with_loads(self, loads: Iterable[Load]) -> "Beam":
        return replace(self, loads=tuple(loads))

    def with_boundary_condition(
        self,
        boundary_condition: Union[BoundaryCondition, str],
        supports: Optional[Tuple[float, float]] = None,
    ) -> "Beam":
        """Same beam and loads under another support arrangement; supports are kept unless given."""
        if supports is None:
            supports = self.supports
        return replace(self, boundary_condition=boundary_condition, supports=supports)
