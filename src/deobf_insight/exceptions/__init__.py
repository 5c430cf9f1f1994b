"""Exception hierarchy for deobf-insight."""

from .base import DeobfInsightError
from .config import (
    ConfigurationError,
    UnknownModeError,
)
from .symbols import SymbolLoadError

__all__ = [
    "DeobfInsightError",
    "ConfigurationError",
    "UnknownModeError",
    "SymbolLoadError",
]
