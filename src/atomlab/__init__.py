"""AtomLab reaction engine."""

from atomlab.catalog import DEFAULT_CATALOG, PRIMARY_ATOMS, ReactionCatalog, get_primary_atom
from atomlab.equations import EQUATIONS, format_equations
from atomlab.inventory import InsufficientAtomsError, Inventory
from atomlab.matcher import can_react, detect_reactions
from atomlab.merge import MergePlan, plan_merge
from atomlab.models import DetectedFiring, ReactionTemplate
from atomlab.session import ReactionOutcome, ReactionSession

__all__ = [
    "DEFAULT_CATALOG",
    "PRIMARY_ATOMS",
    "ReactionCatalog",
    "get_primary_atom",
    "EQUATIONS",
    "format_equations",
    "InsufficientAtomsError",
    "Inventory",
    "can_react",
    "detect_reactions",
    "MergePlan",
    "plan_merge",
    "DetectedFiring",
    "ReactionTemplate",
    "ReactionOutcome",
    "ReactionSession",
]
