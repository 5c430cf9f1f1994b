"""CLI entry point; registers all subcommands."""

import typer

app = typer.Typer(
    name="deobf-insight",
    help="deobf-insight - rename heuristics for decompiled, obfuscated code",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import subcommands to register them
from .analyze import analyze as _analyze  # noqa: F401, E402
from .plan import plan as _plan  # noqa: F401, E402
from .modes import modes as _modes  # noqa: F401, E402
