"""Rich terminal formatter for deobf-insight."""

from typing import List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..analysis import ObfuscationStats
from ..models import RenameEntry
from .base import BaseFormatter


def _rate_label(rate: float) -> str:
    if rate > 70:
        return f"[red bold]{rate:.1f}%[/red bold]"
    elif rate > 30:
        return f"[red]{rate:.1f}%[/red]"
    elif rate > 10:
        return f"[yellow]{rate:.1f}%[/yellow]"
    else:
        return f"[green]{rate:.1f}%[/green]"


class RichFormatter(BaseFormatter):
    """Tables for stats and rename plans.

    Args:
        console: Target console; a stdout console when omitted.
        limit: Show at most this many plan entries (None for all).
    """

    def __init__(self, console: Optional[Console] = None, limit: Optional[int] = None):
        self.console = console or Console()
        self.limit = limit

    def render_stats(self, stats: ObfuscationStats) -> None:
        table = Table(title="Obfuscation Analysis", show_header=True)
        table.add_column("Kind")
        table.add_column("Total", justify="right")
        table.add_column("Obfuscated", justify="right")
        table.add_column("Rate", justify="right")

        for kind, total, obfuscated, rate in (
            ("Classes", stats.total_classes, stats.obfuscated_classes, stats.class_rate),
            ("Methods", stats.total_methods, stats.obfuscated_methods, stats.method_rate),
            ("Fields", stats.total_fields, stats.obfuscated_fields, stats.field_rate),
        ):
            table.add_row(kind, str(total), str(obfuscated), _rate_label(rate))

        self.console.print(table)

        tool = stats.detected_tool.value if stats.detected_tool else "none"
        if stats.ambiguous_tool_vote:
            tool += " [yellow](tied vote)[/yellow]"
        summary = (
            f"Detected obfuscator: [bold]{tool}[/bold]\n"
            f"Overall obfuscation rate: {_rate_label(stats.overall_rate)}\n"
            f"Recommended mode: [bold cyan]{stats.recommended_mode.name}[/bold cyan]"
        )
        self.console.print(Panel(summary, expand=False))

    def render_plan(self, entries: List[RenameEntry], mode_name: str) -> None:
        self.console.print(
            f"[bold cyan]{mode_name}[/bold cyan] mode: {len(entries)} symbol(s) renamed"
        )
        if not entries:
            return

        shown = entries if self.limit is None else entries[: self.limit]
        table = Table(show_header=True)
        table.add_column("Kind")
        table.add_column("Symbol", overflow="fold")
        table.add_column("Alias", style="green", overflow="fold")
        for entry in shown:
            table.add_row(entry.kind, entry.qualified_name, entry.alias)
        self.console.print(table)

        hidden = len(entries) - len(shown)
        if hidden > 0:
            self.console.print(f"[dim]... {hidden} more (use --limit to show more)[/dim]")
