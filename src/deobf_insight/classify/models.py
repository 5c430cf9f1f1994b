"""Classification data models: tool labels and per-name results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class ObfuscatorTool(str, Enum):
    """Obfuscators recognised by their naming signature.

    Attribution order (first match wins, most specific first):
    1. PROGUARD - one or two letters (a, ab, Z), inner a$a
    2. ALLATORI - only confusable glyphs (lIl1, O0o0)
    3. ZELIX - sequential prefixes (zzA, _a)
    4. DEXGUARD - extended Latin-1, combining marks, symbol characters
    5. HASH_BASED - long hexadecimal names
    """

    PROGUARD = "ProGuard/R8"
    ALLATORI = "Allatori"
    ZELIX = "Zelix KlassMaster"
    DEXGUARD = "DexGuard"
    HASH_BASED = "Hash-based obfuscator"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ClassificationResult:
    """Everything the classifiers can say about one bare name.

    Attributes:
        tool: Most likely obfuscator, or None when no signature attributes one
        confidence: Obfuscation confidence in [0, 100]
        is_high_entropy: Entropy above the configured threshold (length-gated)
        entropy: Shannon entropy in bits, >= 0
        signatures: Names of every matching signature, library order
    """

    tool: Optional[ObfuscatorTool] = None
    confidence: int = 0
    is_high_entropy: bool = False
    entropy: float = 0.0
    signatures: tuple[str, ...] = field(default_factory=tuple)
