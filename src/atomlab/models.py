"""Data structures for reaction templates and detected firings."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class ReactionTemplate:
    """One catalog entry: consume ``requirement`` once to make ``product``.

    Attributes:
        product: Display name of the molecule formed.
        requirement: Atom name -> quantity consumed per firing (>= 1).
        equation_id: Stable id used to look up the equation text.
    """

    product: str
    requirement: Mapping[str, int] = field(hash=False)
    equation_id: int

    def __post_init__(self) -> None:
        if not self.requirement:
            raise ValueError(f"Reaction {self.product!r} has an empty requirement")
        for atom, quantity in self.requirement.items():
            if isinstance(quantity, bool) or not isinstance(quantity, int):
                raise ValueError(
                    f"Reaction {self.product!r}: quantity for {atom!r} must be an integer"
                )
            if quantity < 1:
                raise ValueError(
                    f"Reaction {self.product!r}: quantity for {atom!r} must be >= 1, got {quantity}"
                )
        object.__setattr__(self, "requirement", MappingProxyType(dict(self.requirement)))


@dataclass(frozen=True)
class DetectedFiring:
    requirement: Mapping[str, int] = field(hash=False)
    product: str
    equation_id: int

    @classmethod
    def from_template(cls, template: ReactionTemplate) -> DetectedFiring:
        return cls(
            requirement=template.requirement,
            product=template.product,
            equation_id=template.equation_id,
        )

    def to_dict(self) -> dict[str, object]:
        return {
            "product": self.product,
            "requirement": dict(self.requirement),
            "equation_id": self.equation_id,
        }
