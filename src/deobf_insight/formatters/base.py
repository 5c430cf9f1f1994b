"""Base formatter interface for deobf-insight output rendering."""

from abc import ABC, abstractmethod
from typing import List

from ..analysis import ObfuscationStats
from ..models import RenameEntry


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def render_stats(self, stats: ObfuscationStats) -> None:
        """Print analysis stats."""

    @abstractmethod
    def render_plan(self, entries: List[RenameEntry], mode_name: str) -> None:
        """Print a rename plan."""
