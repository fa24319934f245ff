"""Reaction matcher: find every firing the current atoms allow."""

from __future__ import annotations

import logging
from typing import Mapping

import numpy as np

from atomlab.catalog import DEFAULT_CATALOG, ReactionCatalog
from atomlab.models import DetectedFiring, ReactionTemplate

LOGGER = logging.getLogger(__name__)


def can_react(template: ReactionTemplate, counts: Mapping[str, int]) -> bool:
    """Return True when ``counts`` covers one firing of ``template``."""
    return all(counts.get(atom, 0) >= quantity for atom, quantity in template.requirement.items())


def detect_reactions(
    inventory: Mapping[str, int],
    catalog: ReactionCatalog = DEFAULT_CATALOG,
) -> list[DetectedFiring]:
    """Compute all firings for ``inventory`` against ``catalog``.

    Templates are visited in catalog order. Each one fires as many times as
    the remaining atoms allow, and its consumption is subtracted from a
    working copy before the next template is checked. The caller's mapping
    is never modified.

    Args:
        inventory: Atom name -> available count. Missing names count as 0 and
            names the catalog never references are ignored.
        catalog: Ordered templates to match.

    Returns:
        Firings in the order they fired: catalog order, then repetition.
    """
    working = np.maximum(catalog.counts_vector(inventory), 0)
    matrix = catalog.requirement_matrix

    firings: list[DetectedFiring] = []
    for row, template in enumerate(catalog):
        required = matrix[row]
        needed = required > 0
        # Floor division gives the number of back-to-back firings the
        # remainder supports; every row has at least one positive entry.
        times = int(np.min(working[needed] // required[needed]))
        if times <= 0:
            continue
        working = working - times * required
        firing = DetectedFiring.from_template(template)
        firings.extend(firing for _ in range(times))

    LOGGER.debug(
        "Detected %d firing(s) from %s",
        len(firings),
        {atom: count for atom, count in inventory.items() if count},
    )
    return firings
