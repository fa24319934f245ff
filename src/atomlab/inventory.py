"""Inventory of placed atoms that have not reacted yet."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Iterator


class InsufficientAtomsError(ValueError):
    """Raised when a consumption asks for more atoms than are available."""


class Inventory(Mapping):
    """Atom name -> count, with zero entries pruned.

    Reading a name that was never added yields 0. Mutation goes through
    :meth:`add_atom`, :meth:`consume` and :meth:`clear` so the counts can
    never go negative.
    """

    def __init__(self, counts: Mapping[str, int] | None = None) -> None:
        self._counts: dict[str, int] = {}
        for atom, count in (counts or {}).items():
            if count < 0:
                raise ValueError(f"Negative count {count} for {atom!r}")
            if count:
                self._counts[atom] = int(count)

    def __getitem__(self, atom: str) -> int:
        return self._counts.get(atom, 0)

    def __contains__(self, atom: object) -> bool:
        return atom in self._counts

    def __iter__(self) -> Iterator[str]:
        return iter(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def __repr__(self) -> str:
        return f"Inventory({self._counts!r})"

    def add_atom(self, atom: str) -> int:
        """Add one unit of ``atom`` and return its new count."""
        self._counts[atom] = self._counts.get(atom, 0) + 1
        return self._counts[atom]

    def consume(self, requirement: Mapping[str, int]) -> None:
        """Remove ``requirement`` from the inventory.

        The whole requirement is checked before anything is subtracted, so a
        failed call leaves the inventory as it was.
        """
        shortages = {
            atom: (quantity, self[atom])
            for atom, quantity in requirement.items()
            if self[atom] < quantity
        }
        if shortages:
            detail = ", ".join(
                f"{atom}: need {need}, have {have}" for atom, (need, have) in shortages.items()
            )
            raise InsufficientAtomsError(f"Cannot consume requirement ({detail})")

        for atom, quantity in requirement.items():
            remaining = self._counts.get(atom, 0) - quantity
            if remaining:
                self._counts[atom] = remaining
            else:
                self._counts.pop(atom, None)

    def clear(self) -> None:
        self._counts.clear()

    def snapshot(self) -> dict[str, int]:
        return dict(self._counts)
