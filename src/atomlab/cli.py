"""Command-line entrypoints for AtomLab."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated, List

import typer

from atomlab.config import LabConfig, load_config
from atomlab.equations import format_equations
from atomlab.inventory import Inventory
from atomlab.matcher import detect_reactions

app = typer.Typer(add_completion=False)

ConfigOption = Annotated[
    Path | None, typer.Option("--config", help="Path to JSON configuration file.")
]


def _load(config_file: Path | None) -> LabConfig:
    if config_file is None:
        return LabConfig()
    try:
        return load_config(config_file)
    except (OSError, ValueError) as exc:
        typer.echo(f"Invalid configuration: {exc}", err=True)
        raise typer.Exit(code=1) from exc


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging.")
    ] = False,
) -> None:
    """Detect and run atom reactions."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s - %(message)s")


@app.command()
def detect(
    atoms: Annotated[List[str], typer.Argument(help="Placed atoms, one name per unit.")],
    config_file: ConfigOption = None,
) -> None:
    """Print the firings the given atoms allow, without consuming them."""
    config = _load(config_file)
    inventory = Inventory()
    for atom in atoms:
        inventory.add_atom(atom)

    firings = detect_reactions(inventory, config.catalog)
    typer.echo(json.dumps([firing.to_dict() for firing in firings], indent=2))


@app.command()
def react(
    atoms: Annotated[List[str], typer.Argument(help="Placed atoms, one name per unit.")],
    config_file: ConfigOption = None,
) -> None:
    """Place the atoms, react them and print the outcome."""
    config = _load(config_file)
    session = config.session()
    for atom in atoms:
        if not session.place_atom(atom):
            typer.echo(f"Unsupported atom: {atom}", err=True)
            raise typer.Exit(code=1)

    outcome = session.react()
    payload = outcome.to_dict()
    payload["remaining"] = session.inventory.snapshot()
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


@app.command()
def equations(
    ids: Annotated[List[int], typer.Argument(help="Equation ids to display.")],
    config_file: ConfigOption = None,
) -> None:
    """Print the equation text for the given ids."""
    config = _load(config_file)
    typer.echo(format_equations(ids, config.equations))


@app.command()
def catalog(config_file: ConfigOption = None) -> None:
    """List reaction templates in matching order."""
    config = _load(config_file)
    for template in config.catalog:
        requirement = ", ".join(f"{atom}:{count}" for atom, count in template.requirement.items())
        typer.echo(f"{template.equation_id}\t{template.product}\t{requirement}")
