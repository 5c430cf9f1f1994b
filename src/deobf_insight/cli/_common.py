"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

from rich.console import Console

from ..config import DeobfConfig, load_config

console = Console()


def resolve_config(
    config: Optional[Path] = None,
    mode: Optional[str] = None,
    verbose: bool = False,
    quiet: bool = False,
) -> DeobfConfig:
    """Build configuration from CLI options."""
    overrides = {}
    if mode is not None:
        overrides["mode"] = mode
    if verbose:
        overrides["verbose"] = True
    if quiet:
        overrides["quiet"] = True
    return load_config(config_file=config, **overrides)
