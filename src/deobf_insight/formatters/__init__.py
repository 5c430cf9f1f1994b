"""Output formatters for deobf-insight."""

from typing import Optional

from .base import BaseFormatter
from .json_formatter import JsonFormatter
from .rich_formatter import RichFormatter


def get_formatter(name: str, limit: Optional[int] = None) -> BaseFormatter:
    """Get a formatter instance by name.

    Args:
        name: One of "rich", "json"
        limit: Row limit for plan tables (rich only)

    Raises:
        ValueError: If name is not recognized
    """
    if name == "rich":
        return RichFormatter(limit=limit)
    if name == "json":
        return JsonFormatter()
    raise ValueError(f"Unknown formatter: {name!r}. Choose from: json, rich")


__all__ = [
    "BaseFormatter",
    "RichFormatter",
    "JsonFormatter",
    "get_formatter",
]
