"""Static per-atom configuration used by the host when drawing atoms."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping


@dataclass(frozen=True)
class ElementProperties:
    radius: float  # sphere radius in scene units
    orbit_radius: float  # electron orbit radius in scene units
    color: str
    electrons: int


DEFAULT_ELEMENTS: Mapping[str, ElementProperties] = {
    "H": ElementProperties(radius=0.005, orbit_radius=0.010, color="white", electrons=1),
    "O": ElementProperties(radius=0.010, orbit_radius=0.015, color="red", electrons=2),
    "C": ElementProperties(radius=0.008, orbit_radius=0.013, color="black", electrons=4),
    "Cl": ElementProperties(radius=0.015, orbit_radius=0.020, color="green", electrons=7),
    "Na": ElementProperties(radius=0.006, orbit_radius=0.011, color="purple", electrons=1),
}


def is_supported_atom(name: str, elements: Mapping[str, ElementProperties] = DEFAULT_ELEMENTS) -> bool:
    return name in elements


def atom_radius(name: str, elements: Mapping[str, ElementProperties] = DEFAULT_ELEMENTS) -> float:
    """Radius for ``name``; atoms without properties sort as the smallest."""
    props = elements.get(name)
    if props is None:
        return 0.0
    return props.radius
