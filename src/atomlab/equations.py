"""Equation text for display after a reaction."""

from __future__ import annotations

from typing import Iterable, Mapping

HEADER = "Reaction Equation(s):"
UNKNOWN_EQUATION = "Unknown Equation"

EQUATIONS: Mapping[int, str] = {
    0: "H2 + Cl2 == 2(HCl)",
    1: "2H2 + O2 == 2(H2O)",
    2: "C + O2 == CO2",
    3: "2Na + Cl2 == 2(NaCl)",
    4: "H2↑",
    5: "O2↑",
}


def format_equations(ids: Iterable[int], equations: Mapping[int, str] = EQUATIONS) -> str:
    """Render one line per distinct equation id, sorted, under a header."""
    lines = [HEADER]
    for equation_id in sorted(set(ids)):
        lines.append(equations.get(equation_id, UNKNOWN_EQUATION))
    return "\n".join(lines)
