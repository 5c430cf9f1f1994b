"""
deobf-insight - rename heuristics for decompiled, obfuscated code

Decides which packages, classes, fields and methods of a decompiled
program carry obfuscated names, and synthesizes deterministic replacement
names for them. Names are judged by obfuscator signatures and Shannon
entropy; the whole codebase is scored to pick a renaming mode.
"""

__version__ = "0.1.0"

from .analysis import DeobfuscationAnalyzer, ObfuscationStats
from .config import DeobfConfig, load_config
from .models import DeobfuscationMode, RenameEntry
from .run import DeobfuscationRun
from .symbols import SymbolSet, load_symbol_set

__all__ = [
    "DeobfuscationRun",  # Main entry point
    "DeobfuscationMode",
    "DeobfuscationAnalyzer",
    "ObfuscationStats",
    "RenameEntry",
    "DeobfConfig",
    "load_config",
    "SymbolSet",
    "load_symbol_set",
]
