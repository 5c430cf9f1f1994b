"""Data models for deobf-insight"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict


class DeobfuscationMode(Enum):
    """How aggressively symbols are renamed.

    AUTO is resolved to one of the named modes by the codebase analyzer
    before any condition is built; it never has a condition list of its own.
    """

    DISABLED = "disabled"
    CONSERVATIVE = "conservative"
    DEFAULT = "default"
    ENHANCED = "enhanced"
    AGGRESSIVE = "aggressive"
    AUTO = "auto"

    @property
    def description(self) -> str:
        return _MODE_DESCRIPTIONS[self]

    @property
    def is_enabled(self) -> bool:
        return self is not DeobfuscationMode.DISABLED


_MODE_DESCRIPTIONS = {
    DeobfuscationMode.DISABLED: "Deobfuscation disabled",
    DeobfuscationMode.CONSERVATIVE: "Conservative - minimal renaming, fewer false positives",
    DeobfuscationMode.DEFAULT: "Default - balanced detection and preservation",
    DeobfuscationMode.ENHANCED: "Enhanced - advanced pattern detection with word preservation",
    DeobfuscationMode.AGGRESSIVE: "Aggressive - maximum renaming, may have false positives",
    DeobfuscationMode.AUTO: "Auto - automatically selects mode based on obfuscation analysis",
}


@dataclass(frozen=True)
class RenameEntry:
    """One line of a rename plan: which symbol gets which alias."""

    kind: str
    qualified_name: str
    original: str
    alias: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "kind": self.kind,
            "qualified_name": self.qualified_name,
            "original": self.original,
            "alias": self.alias,
        }
