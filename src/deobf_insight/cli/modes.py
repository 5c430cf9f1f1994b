"""Modes command: what each deobfuscation mode does."""

import json

import typer
from rich.table import Table

from ..models import DeobfuscationMode
from ..modes import alias_provider_description, describe_mode, mode_condition_descriptions
from . import app
from ._common import console


@app.command()
def modes(
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in machine-readable JSON format",
    ),
    detail: bool = typer.Option(
        False,
        "--detail",
        help="Print the full description of every mode",
    ),
):
    """
    List deobfuscation modes with their conditions and alias provider.
    """
    if json_output:
        print(
            json.dumps(
                [
                    {
                        "mode": mode.value,
                        "description": mode.description,
                        "conditions": mode_condition_descriptions(mode),
                        "alias_provider": alias_provider_description(mode),
                    }
                    for mode in DeobfuscationMode
                ],
                indent=2,
            )
        )
        return

    if detail:
        for mode in DeobfuscationMode:
            console.print(describe_mode(mode), markup=False)
        return

    table = Table(show_header=True, show_lines=True)
    table.add_column("Mode", style="bold cyan")
    table.add_column("Description")
    table.add_column("Conditions")
    table.add_column("Alias provider")
    for mode in DeobfuscationMode:
        table.add_row(
            mode.value,
            mode.description,
            "\n".join(mode_condition_descriptions(mode)),
            alias_provider_description(mode),
        )
    console.print(table)
