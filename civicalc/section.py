# civicalc/section.py
"""
Cross-section properties for the common beam shapes.

    rectangle   width b, height h
    circle      diameter d
    i_beam      flange width bf, flange thickness tf, web height hw, web thickness tw
                (overall depth H = hw + 2·tf)

All dimensions in metres; results in m², m⁴, m³ and m.
"""

import math
from dataclasses import dataclass

from .kernel.arrays import round_to


@dataclass(frozen=True)
class SectionProperties:
    area: float               # m²
    moment_of_inertia: float  # m⁴
    section_modulus: float    # m³
    y_max: float              # extreme fibre distance (m)


SHAPES = ("rectangle", "circle", "i_beam")


def calculate_section_properties(shape: str, **dimensions: float) -> SectionProperties:
    """
    Area, second moment of area, elastic section modulus and extreme-fibre
    distance of a section. Missing dimensions take the defaults below.

    rectangle: width=0.1, height=0.2
    circle:    diameter=0.1
    i_beam:    flange_width=0.15, flange_thickness=0.01,
               web_height=0.2, web_thickness=0.008

    Raises:
        ValueError: For an unknown shape
    """
    if shape == "rectangle":
        b = float(dimensions.get("width", 0.1))
        h = float(dimensions.get("height", 0.2))
        area = b * h
        inertia = b * h**3 / 12
        modulus = b * h**2 / 6
        y_max = h / 2

    elif shape == "circle":
        d = float(dimensions.get("diameter", 0.1))
        area = math.pi * (d / 2) ** 2
        inertia = math.pi * d**4 / 64
        modulus = math.pi * d**3 / 32
        y_max = d / 2

    elif shape == "i_beam":
        bf = float(dimensions.get("flange_width", 0.15))
        tf = float(dimensions.get("flange_thickness", 0.01))
        hw = float(dimensions.get("web_height", 0.2))
        tw = float(dimensions.get("web_thickness", 0.008))
        H = hw + 2 * tf

        area = 2 * bf * tf + hw * tw
        inertia = (bf * H**3 - (bf - tw) * hw**3) / 12
        y_max = H / 2
        modulus = inertia / y_max

    else:
        raise ValueError(f"Unknown section shape {shape!r}. Expected one of {SHAPES}")

    return SectionProperties(
        area=round_to(area, 6),
        moment_of_inertia=round_to(inertia, 10),
        section_modulus=round_to(modulus, 8),
        y_max=round_to(y_max, 4),
    )
