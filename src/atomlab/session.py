"""Reaction session: the place / react / clear cycle a host drives.

The session owns one :class:`~atomlab.inventory.Inventory`. Each placement
recomputes the pending firings against the whole inventory; :meth:`react`
commits them, the way a shake gesture does in the AR app.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping

from atomlab.catalog import DEFAULT_CATALOG, PRIMARY_ATOMS, ReactionCatalog
from atomlab.elements import DEFAULT_ELEMENTS, ElementProperties, is_supported_atom
from atomlab.equations import EQUATIONS, format_equations
from atomlab.inventory import Inventory
from atomlab.matcher import detect_reactions
from atomlab.merge import MergePlan, plan_merge
from atomlab.models import DetectedFiring

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReactionOutcome:
    """Result of committing the pending firings.

    ``plans`` lines up with ``firings``; an entry is None when the firing
    could not be planned for display.
    """

    firings: tuple[DetectedFiring, ...]
    plans: tuple[MergePlan | None, ...]
    equation_ids: frozenset[int]
    equation_text: str

    def to_dict(self) -> dict[str, object]:
        return {
            "firings": [firing.to_dict() for firing in self.firings],
            "plans": [plan.to_dict() if plan is not None else None for plan in self.plans],
            "equation_ids": sorted(self.equation_ids),
            "equations": self.equation_text,
        }


class ReactionSession:
    def __init__(
        self,
        catalog: ReactionCatalog = DEFAULT_CATALOG,
        equations: Mapping[int, str] = EQUATIONS,
        primary_atoms: Mapping[frozenset[str], str] = PRIMARY_ATOMS,
        elements: Mapping[str, ElementProperties] = DEFAULT_ELEMENTS,
    ):
        self.catalog = catalog
        self.equations = equations
        self.primary_atoms = primary_atoms
        self.elements = elements
        self.inventory = Inventory()
        self._pending: list[DetectedFiring] = []

    @property
    def pending(self) -> tuple[DetectedFiring, ...]:
        return tuple(self._pending)

    @property
    def has_pending(self) -> bool:
        return bool(self._pending)

    def place_atom(self, name: str) -> bool:
        """Add one ``name`` atom and refresh the pending firings.

        Returns False, leaving the session unchanged, for atoms without an
        entry in the element table.
        """
        if not is_supported_atom(name, self.elements):
            LOGGER.warning("%s is not a valid atom; ignoring placement", name)
            return False

        self.inventory.add_atom(name)
        self._pending = detect_reactions(self.inventory, self.catalog)
        LOGGER.debug("Placed %s; %d firing(s) pending", name, len(self._pending))
        return True

    def react(self) -> ReactionOutcome:
        """Consume every pending firing and describe what happened.

        All firings are checked against a copy of the inventory first, so
        an :class:`~atomlab.inventory.InsufficientAtomsError` leaves both the
        inventory and the pending firings untouched.
        """
        firings = tuple(self._pending)
        plans: list[MergePlan | None] = []
        equation_ids: set[int] = set()

        trial = Inventory(self.inventory)
        for firing in firings:
            trial.consume(firing.requirement)

        for firing in firings:
            self.inventory.consume(firing.requirement)
            equation_ids.add(firing.equation_id)
            plan = plan_merge(firing, self.elements, self.primary_atoms)
            if plan is None:
                LOGGER.warning("No primary atom for %s; it cannot be visualized", firing.product)
            plans.append(plan)

        self._pending = []
        LOGGER.info(
            "Reacted %d firing(s); remaining inventory %s",
            len(firings),
            self.inventory.snapshot(),
        )
        return ReactionOutcome(
            firings=firings,
            plans=tuple(plans),
            equation_ids=frozenset(equation_ids),
            equation_text=format_equations(equation_ids, self.equations),
        )

    def clear(self) -> None:
        self.inventory.clear()
        self._pending = []
        LOGGER.debug("Session cleared")
