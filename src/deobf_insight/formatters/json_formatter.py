"""JSON formatter for deobf-insight."""

import json
from typing import List

from ..analysis import ObfuscationStats
from ..models import RenameEntry
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Render stats and plans as JSON on stdout."""

    def render_stats(self, stats: ObfuscationStats) -> None:
        print(self.format_stats(stats))

    def render_plan(self, entries: List[RenameEntry], mode_name: str) -> None:
        print(self.format_plan(entries, mode_name))

    def format_stats(self, stats: ObfuscationStats) -> str:
        return json.dumps(stats.to_dict(), indent=2)

    def format_plan(self, entries: List[RenameEntry], mode_name: str) -> str:
        data = {
            "mode": mode_name,
            "renamed": len(entries),
            "entries": [e.to_dict() for e in entries],
        }
        return json.dumps(data, indent=2)
