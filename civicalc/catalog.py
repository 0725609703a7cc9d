"""
CATALOG: MATERIAL PROPERTIES
============================

Named elastic moduli so callers can write ``get_material("steel").E``
instead of repeating 200e9 everywhere. Steel is the default material of
``Beam``.

Values are typical design figures, not code-specific characteristic values.
"""

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class Material:
    """
    name : human-readable name
    E    : Young's modulus (Pa)
    """
    name: str
    E: float  # Young's modulus (Pa)


STEEL = Material(name="Steel", E=200e9)
CONCRETE = Material(name="Concrete", E=25e9)
TIMBER = Material(name="Timber", E=11e9)
ALUMINIUM = Material(name="Aluminium", E=70e9)

MATERIALS: Dict[str, Material] = {
    "steel": STEEL,
    "concrete": CONCRETE,
    "timber": TIMBER,
    "aluminium": ALUMINIUM,
}

DEFAULT_MATERIAL = STEEL


def get_material(name: str) -> Material:
    """Look up a material by (case-insensitive) name."""
    try:
        return MATERIALS[name.strip().lower()]
    except KeyError:
        raise ValueError(
            f"Unknown material {name!r}. Available: {', '.join(sorted(MATERIALS))}"
        ) from None
