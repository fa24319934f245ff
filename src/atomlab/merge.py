"""Merge planning: which atoms stay and which move when a firing animates.

A firing with exactly two atom units is drawn as a *pair* merge: both atoms
converge, the larger one acting as the anchor. Larger firings are drawn as an
*anchored* merge: the primary atom for the reactant set stays in place, every
other unit flies to it, and the product appears at the anchor's position.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Mapping

from atomlab.catalog import PRIMARY_ATOMS, get_primary_atom
from atomlab.elements import DEFAULT_ELEMENTS, ElementProperties, atom_radius
from atomlab.models import DetectedFiring

MergeKind = Literal["pair", "anchored"]


@dataclass(frozen=True)
class MergePlan:
    product: str
    kind: MergeKind
    anchor: str
    movers: tuple[str, ...]

    def to_dict(self) -> dict[str, object]:
        return {
            "product": self.product,
            "kind": self.kind,
            "anchor": self.anchor,
            "movers": list(self.movers),
        }


def expand_units(requirement: Mapping[str, int]) -> list[str]:
    """List one entry per atom unit, e.g. ``{"H": 2, "O": 1}`` -> H, H, O."""
    units: list[str] = []
    for atom, quantity in requirement.items():
        units.extend([atom] * quantity)
    return units


def plan_merge(
    firing: DetectedFiring,
    elements: Mapping[str, ElementProperties] = DEFAULT_ELEMENTS,
    primary_atoms: Mapping[frozenset[str], str] = PRIMARY_ATOMS,
) -> MergePlan | None:
    """Describe the merge roles for ``firing``.

    Returns None when a multi-atom firing has no primary atom registered,
    meaning the host cannot visualize it.
    """
    units = expand_units(firing.requirement)

    if len(units) == 2:
        first, second = units
        if atom_radius(first, elements) > atom_radius(second, elements):
            first, second = second, first
        return MergePlan(product=firing.product, kind="pair", anchor=second, movers=(first,))

    if len(units) == 1:
        return MergePlan(product=firing.product, kind="anchored", anchor=units[0], movers=())

    primary = get_primary_atom(units, primary_atoms)
    if primary is None or primary not in units:
        return None

    # sorted() is stable, so equal radii keep requirement order
    ordered = sorted(units, key=lambda atom: atom_radius(atom, elements), reverse=True)
    ordered.remove(primary)
    return MergePlan(product=firing.product, kind="anchored", anchor=primary, movers=tuple(ordered))
