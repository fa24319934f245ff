"""JSON configuration for custom catalogs and element tables."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping

from atomlab.catalog import DEFAULT_CATALOG, PRIMARY_ATOMS, ReactionCatalog
from atomlab.elements import DEFAULT_ELEMENTS, ElementProperties
from atomlab.equations import EQUATIONS
from atomlab.models import ReactionTemplate
from atomlab.session import ReactionSession

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class LabConfig:
    catalog: ReactionCatalog = DEFAULT_CATALOG
    equations: Mapping[int, str] = field(default_factory=lambda: dict(EQUATIONS))
    primary_atoms: Mapping[frozenset[str], str] = field(default_factory=lambda: dict(PRIMARY_ATOMS))
    elements: Mapping[str, ElementProperties] = field(default_factory=lambda: dict(DEFAULT_ELEMENTS))

    def session(self) -> ReactionSession:
        return ReactionSession(
            catalog=self.catalog,
            equations=self.equations,
            primary_atoms=self.primary_atoms,
            elements=self.elements,
        )


def _parse_reactions(data: List[Dict[str, Any]]) -> tuple[ReactionCatalog, Dict[int, str]]:
    templates = []
    equations: Dict[int, str] = {}
    for index, entry in enumerate(data):
        try:
            equation_id = int(entry["id"])
            product = str(entry["product"])
            requirement = entry["requirement"]
        except (KeyError, TypeError, ValueError) as exc:
            raise ValueError(f"Reaction entry {index} is malformed: {exc}") from exc
        if not isinstance(requirement, dict):
            raise ValueError(f"Reaction entry {index}: requirement must be an object")
        templates.append(
            ReactionTemplate(product=product, requirement=requirement, equation_id=equation_id)
        )
        if "equation" in entry:
            equations[equation_id] = str(entry["equation"])
    return ReactionCatalog(templates), equations


def _parse_primary_atoms(data: List[Dict[str, Any]]) -> Dict[frozenset[str], str]:
    table: Dict[frozenset[str], str] = {}
    for index, entry in enumerate(data):
        try:
            reactants = frozenset(str(name) for name in entry["reactants"])
            primary = str(entry["primary"])
        except (KeyError, TypeError) as exc:
            raise ValueError(f"Primary atom entry {index} is malformed: {exc}") from exc
        if primary not in reactants:
            raise ValueError(
                f"Primary atom entry {index}: {primary!r} is not one of {sorted(reactants)}"
            )
        table[reactants] = primary
    return table


def _parse_elements(data: Dict[str, Any]) -> Dict[str, ElementProperties]:
    elements = {}
    for name, p in data.items():
        try:
            elements[name] = ElementProperties(
                radius=float(p["radius"]),
                orbit_radius=float(p.get("orbit_radius", 0.0)),
                color=str(p.get("color", "white")),
                electrons=int(p.get("electrons", 0)),
            )
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            raise ValueError(f"Element {name!r} is malformed: {exc}") from exc
    return elements


def parse_config(data: Dict[str, Any]) -> LabConfig:
    """Build a :class:`LabConfig`; sections left out keep the built-in tables."""
    if not isinstance(data, dict):
        raise ValueError("Configuration must be a JSON object")

    for section, kind, label in (
        ("reactions", list, "a list"),
        ("primary_atoms", list, "a list"),
        ("elements", dict, "an object"),
    ):
        if section in data and not isinstance(data[section], kind):
            raise ValueError(f"'{section}' must be {label}")

    kwargs: Dict[str, Any] = {}
    if "reactions" in data:
        catalog, equations = _parse_reactions(data["reactions"])
        kwargs["catalog"] = catalog
        kwargs["equations"] = equations
    if "primary_atoms" in data:
        kwargs["primary_atoms"] = _parse_primary_atoms(data["primary_atoms"])
    if "elements" in data:
        kwargs["elements"] = _parse_elements(data["elements"])
    return LabConfig(**kwargs)


def load_config(config_file: str | Path) -> LabConfig:
    path = Path(config_file)
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as exc:
            raise ValueError(f"{path} is not valid JSON: {exc}") from exc
    config = parse_config(data)
    LOGGER.debug("Loaded %d reaction(s) from %s", len(config.catalog), path)
    return config
