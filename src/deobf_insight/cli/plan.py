"""Plan command: which symbols get renamed, and to what."""

from pathlib import Path
from typing import Optional

import typer

from ..exceptions import DeobfInsightError
from ..formatters import get_formatter
from ..logging_config import setup_logging
from ..naming import NamingIndex
from ..run import DeobfuscationRun
from ..symbols import load_symbol_set
from . import app
from ._common import console, resolve_config


def _parse_index(value: Optional[str]) -> Optional[NamingIndex]:
    """``"pkg,cls,fld,mth"`` seeds, e.g. ``"10,250,0,31"``."""
    if not value:
        return None
    parts = value.split(",")
    if len(parts) != 4:
        raise typer.BadParameter("expected four comma-separated integers: pkg,cls,fld,mth")
    try:
        pkg, cls, fld, mth = (int(p) for p in parts)
        return NamingIndex(package=pkg, cls=cls, field=fld, method=mth)
    except ValueError as e:
        raise typer.BadParameter(str(e))


@app.command()
def plan(
    symbols: Path = typer.Argument(
        ...,
        help="JSON symbol dump to rename",
        exists=True,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
    ),
    mode: Optional[str] = typer.Option(
        None,
        "--mode",
        "-m",
        help="disabled, conservative, default, enhanced, aggressive or auto",
    ),
    index: Optional[str] = typer.Option(
        None,
        "--index",
        help="Naming counter seeds pkg,cls,fld,mth to continue an earlier run",
    ),
    params: bool = typer.Option(
        False,
        "--params",
        "-p",
        help="Also suggest names for unnamed or obfuscated method parameters",
    ),
    limit: Optional[int] = typer.Option(
        None,
        "--limit",
        "-n",
        help="Show at most N renames in the table",
        min=1,
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in machine-readable JSON format",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="TOML configuration file",
        exists=True,
        dir_okay=False,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable DEBUG logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log errors"),
):
    """
    Compute the rename plan for a symbol dump.

    [bold cyan]Examples:[/bold cyan]

      deobf-insight plan symbols.json

      deobf-insight plan symbols.json --mode auto --limit 20

      deobf-insight plan symbols.json --mode enhanced --json

      deobf-insight plan symbols.json --params
    """
    logger = setup_logging(verbose=verbose, quiet=quiet or json_output)
    seeds = _parse_index(index)

    try:
        settings = resolve_config(config=config, mode=mode, verbose=verbose, quiet=quiet)
        symbol_set = load_symbol_set(symbols)
        run = DeobfuscationRun(symbol_set, config=settings, index=seeds)
        entries = run.plan()
        if params:
            entries = entries + run.parameter_plan()
    except DeobfInsightError as e:
        logger.error(f"Plan error: {e}")
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    get_formatter("json" if json_output else "rich", limit=limit).render_plan(
        entries, run.mode.name
    )
