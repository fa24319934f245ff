"""Reaction template catalog and primary-atom lookup table.

The catalog is an immutable, ordered collection of :class:`ReactionTemplate`
entries. Order is significant: the matcher fires earlier templates
exhaustively before later ones see the remaining atoms.

Alongside the templates the catalog keeps a dense integer requirement matrix
(one row per template, one column per atom name) so that the matcher can work
on numpy vectors instead of dictionaries.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Mapping

import numpy as np

from atomlab.models import ReactionTemplate


class ReactionCatalog:
    """Ordered, immutable set of reaction templates."""

    def __init__(self, templates: Iterable[ReactionTemplate]):
        self._templates: tuple[ReactionTemplate, ...] = tuple(templates)

        seen: set[int] = set()
        for template in self._templates:
            if template.equation_id in seen:
                raise ValueError(f"Duplicate equation id {template.equation_id} in catalog")
            seen.add(template.equation_id)

        atoms: list[str] = []
        for template in self._templates:
            for atom in template.requirement:
                if atom not in atoms:
                    atoms.append(atom)
        self._atoms: tuple[str, ...] = tuple(atoms)

        matrix = np.zeros((len(self._templates), len(self._atoms)), dtype=np.int64)
        for row, template in enumerate(self._templates):
            for atom, quantity in template.requirement.items():
                matrix[row, self._atoms.index(atom)] = quantity
        matrix.setflags(write=False)
        self._matrix = matrix

    @property
    def templates(self) -> tuple[ReactionTemplate, ...]:
        return self._templates

    @property
    def atoms(self) -> tuple[str, ...]:
        """Atom names referenced by any template, in first-seen order."""
        return self._atoms

    @property
    def requirement_matrix(self) -> np.ndarray:
        """Read-only ``(templates, atoms)`` matrix of required quantities."""
        return self._matrix

    def counts_vector(self, counts: Mapping[str, int]) -> np.ndarray:
        """Project an atom-count mapping onto the catalog's atom axis."""
        return np.array([int(counts.get(atom, 0)) for atom in self._atoms], dtype=np.int64)

    def by_id(self, equation_id: int) -> ReactionTemplate | None:
        for template in self._templates:
            if template.equation_id == equation_id:
                return template
        return None

    def __iter__(self) -> Iterator[ReactionTemplate]:
        return iter(self._templates)

    def __len__(self) -> int:
        return len(self._templates)

    def __getitem__(self, index: int) -> ReactionTemplate:
        return self._templates[index]

    def __repr__(self) -> str:
        products = ", ".join(template.product for template in self._templates)
        return f"ReactionCatalog([{products}])"


DEFAULT_CATALOG = ReactionCatalog(
    [
        ReactionTemplate(product="HCl", requirement={"H": 1, "Cl": 1}, equation_id=0),
        ReactionTemplate(product="H2O", requirement={"H": 2, "O": 1}, equation_id=1),
        ReactionTemplate(product="CO2", requirement={"C": 1, "O": 2}, equation_id=2),
        ReactionTemplate(product="NaCl", requirement={"Na": 1, "Cl": 1}, equation_id=3),
        ReactionTemplate(product="H2", requirement={"H": 2}, equation_id=4),
        ReactionTemplate(product="O2", requirement={"O": 2}, equation_id=5),
    ]
)

# Distinct reactant names -> atom that stays put while the others fly to it.
PRIMARY_ATOMS: Mapping[frozenset[str], str] = {
    frozenset({"H", "O"}): "O",
    frozenset({"C", "O"}): "C",
    frozenset({"H"}): "H",
}


def get_primary_atom(
    reactant_names: Iterable[str],
    table: Mapping[frozenset[str], str] = PRIMARY_ATOMS,
) -> str | None:
    """Return the anchor atom for a set of reactant names, or None if unknown."""
    return table.get(frozenset(reactant_names))
