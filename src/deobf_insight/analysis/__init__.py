"""Codebase-wide obfuscation analysis and mode recommendation."""

from .analyzer import DeobfuscationAnalyzer
from .models import ObfuscationStats, recommend_mode

__all__ = ["DeobfuscationAnalyzer", "ObfuscationStats", "recommend_mode"]
