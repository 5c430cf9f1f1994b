"""Analyze command: obfuscation statistics and a mode recommendation."""

from pathlib import Path
from typing import Optional

import typer

from ..analysis import DeobfuscationAnalyzer
from ..exceptions import DeobfInsightError
from ..formatters import get_formatter
from ..logging_config import setup_logging
from ..symbols import load_symbol_set
from . import app
from ._common import console, resolve_config


@app.command()
def analyze(
    symbols: Path = typer.Argument(
        ...,
        help="JSON symbol dump to analyze",
        exists=True,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in machine-readable JSON format",
    ),
    report: bool = typer.Option(
        False,
        "--report",
        help="Print the plain-text analysis report",
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
    Measure how obfuscated a symbol dump is.

    Counts obfuscated classes, methods and fields, attributes the likely
    obfuscator and recommends a deobfuscation mode.

    [bold cyan]Examples:[/bold cyan]

      deobf-insight analyze symbols.json

      deobf-insight analyze symbols.json --json
    """
    logger = setup_logging(verbose=verbose, quiet=quiet or json_output)

    try:
        settings = resolve_config(config=config, verbose=verbose, quiet=quiet)
        symbol_set = load_symbol_set(symbols)
        analyzer = DeobfuscationAnalyzer(symbol_set, settings)
        stats = analyzer.analyze()
    except DeobfInsightError as e:
        logger.error(f"Analysis error: {e}")
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if report:
        print(analyzer.report(), end="")
        return

    analyzer.log_analysis()
    get_formatter("json" if json_output else "rich").render_stats(stats)
