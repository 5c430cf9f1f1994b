"""Pattern classifier: naming signatures of known obfuscators.

The signature library is an ordered list of recognizers over the literal
name. Order matters for attribution only: the first signature that carries
a tool label and matches decides the tool. Confidence adds up the weight of
every matching signature.

Two signatures (numeric suffix ``Foo$1`` and lambda ``-$$Lambda$``) mark
compiler-synthesized names. They stay in the library so callers can
recognise and skip them, but they never add confidence and never make a
name rename-eligible on their own.
"""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass
from typing import Callable, List, Optional

from .entropy import DEFAULT_CONFUSABLE_CHARS, shannon_entropy
from .models import ClassificationResult, ObfuscatorTool

# Length contribution: first matching bound wins
LENGTH_SCORES = ((1, 40), (2, 30), (4, 15))

# Entropy contribution: first threshold exceeded wins
ENTROPY_SCORES = ((4.0, 20), (3.5, 10))

MAX_CONFIDENCE = 100


@dataclass(frozen=True)
class PatternSignature:
    name: str
    description: str
    weight: int
    matches: Callable[[str], bool]
    tool: Optional[ObfuscatorTool] = None
    compiler_generated: bool = False


def _full(pattern: str) -> Callable[[str], bool]:
    regex = re.compile(pattern)
    return lambda name: regex.fullmatch(name) is not None


def _anywhere(pattern: str) -> Callable[[str], bool]:
    regex = re.compile(pattern)
    return lambda name: regex.search(name) is not None


def _has_extended_chars(name: str) -> bool:
    for ch in name:
        code = ord(ch)
        if 0x80 <= code <= 0xFF or 0x300 <= code <= 0x36F:
            return True
        if unicodedata.category(ch) in ("So", "Sk"):
            return True
    return False


def _confusable_only(chars: str) -> Callable[[str], bool]:
    allowed = frozenset(chars)
    return lambda name: bool(name) and all(ch in allowed for ch in name)


def build_signature_library(
    confusable_chars: str = DEFAULT_CONFUSABLE_CHARS,
) -> List[PatternSignature]:
    """Build the ordered signature library.

    Args:
        confusable_chars: Glyphs that make up confusable-only names.
    """
    return [
        PatternSignature(
            name="short_alpha",
            description="one or two letters, or inner class a$a",
            weight=35,
            matches=_full(r"[a-z]{1,2}|[A-Z]{1,2}|[a-z]\$[a-z]"),
            tool=ObfuscatorTool.PROGUARD,
        ),
        PatternSignature(
            name="confusable",
            description="only confusable glyphs",
            weight=50,
            matches=_confusable_only(confusable_chars),
            tool=ObfuscatorTool.ALLATORI,
        ),
        PatternSignature(
            name="sequential_prefix",
            description="zz prefix or single underscore prefix",
            weight=30,
            matches=_full(r"zz[A-Za-z]|_[A-Za-z]{1,2}"),
            tool=ObfuscatorTool.ZELIX,
        ),
        PatternSignature(
            name="extended_chars",
            description="Latin-1, combining marks or symbol characters",
            weight=45,
            matches=_has_extended_chars,
            tool=ObfuscatorTool.DEXGUARD,
        ),
        PatternSignature(
            name="long_hex",
            description="hexadecimal name of 8+ digits, or _0x prefix",
            weight=40,
            matches=_full(r"[0-9a-fA-F]{8,}|_0x[0-9a-fA-F]+"),
            tool=ObfuscatorTool.HASH_BASED,
        ),
        PatternSignature(
            name="underscore_fenced",
            description="two or more leading or trailing underscores",
            weight=25,
            matches=_full(r"_{2,}[A-Za-z0-9]*|[A-Za-z0-9]*_{2,}"),
        ),
        PatternSignature(
            name="alternating",
            description="alternating letters and digits, or CAPS followed by digits",
            weight=20,
            matches=_full(r"[a-zA-Z][0-9][a-zA-Z][0-9].*|[A-Z]{3,}[0-9]+"),
        ),
        PatternSignature(
            name="unicode_escape",
            description="literal \\uXXXX escape in the name",
            weight=12,
            matches=_anywhere(r"\\u[0-9a-fA-F]{4}"),
        ),
        PatternSignature(
            name="numeric_suffix",
            description="anonymous or synthetic suffix $1, $$1",
            weight=0,
            matches=_full(r".*\$\$?\d+"),
            compiler_generated=True,
        ),
        PatternSignature(
            name="lambda",
            description="lambda class or synthetic bridge",
            weight=0,
            matches=_full(r".*\$\$Lambda\$.*|.*-\$\$.*"),
            compiler_generated=True,
        ),
    ]


class PatternClassifier:
    """Tool attribution and confidence scoring over a signature library."""

    def __init__(self, confusable_chars: str = DEFAULT_CONFUSABLE_CHARS):
        self.signatures = build_signature_library(confusable_chars)

    def matching_signatures(self, name: Optional[str]) -> List[PatternSignature]:
        if not name:
            return []
        return [sig for sig in self.signatures if sig.matches(name)]

    def matches_obfuscator_pattern(self, name: Optional[str]) -> bool:
        """True if any obfuscator signature (not a compiler one) matches."""
        if not name:
            return False
        return any(
            sig.matches(name) for sig in self.signatures if not sig.compiler_generated
        )

    def is_compiler_generated(self, name: Optional[str]) -> bool:
        if not name:
            return False
        return any(sig.matches(name) for sig in self.signatures if sig.compiler_generated)

    def detect_obfuscator_type(self, name: Optional[str]) -> Optional[ObfuscatorTool]:
        """Most likely obfuscator for this name, or None if unknown."""
        if not name:
            return None
        for sig in self.signatures:
            if sig.tool is not None and sig.matches(name):
                return sig.tool
        return None

    def obfuscation_confidence(self, name: Optional[str]) -> int:
        """Confidence (0-100) that the name came out of an obfuscator."""
        if not name:
            return 0
        score = _length_score(name)
        score += sum(sig.weight for sig in self.matching_signatures(name))
        score += _entropy_score(shannon_entropy(name))
        return min(MAX_CONFIDENCE, score)

    def classify(
        self,
        name: Optional[str],
        entropy_threshold: float = 3.5,
        min_length: int = 3,
    ) -> ClassificationResult:
        """Bundle attribution, confidence and entropy for one name."""
        if not name:
            return ClassificationResult()
        entropy = shannon_entropy(name)
        return ClassificationResult(
            tool=self.detect_obfuscator_type(name),
            confidence=self.obfuscation_confidence(name),
            is_high_entropy=len(name) >= min_length and entropy > entropy_threshold,
            entropy=entropy,
            signatures=tuple(sig.name for sig in self.matching_signatures(name)),
        )


def _length_score(name: str) -> int:
    for max_len, points in LENGTH_SCORES:
        if len(name) <= max_len:
            return points
    return 0


def _entropy_score(entropy: float) -> int:
    for threshold, points in ENTROPY_SCORES:
        if entropy > threshold:
            return points
    return 0


_DEFAULT_CLASSIFIER = PatternClassifier()


def detect_obfuscator_type(name: Optional[str]) -> Optional[ObfuscatorTool]:
    """Tool attribution with the default signature library."""
    return _DEFAULT_CLASSIFIER.detect_obfuscator_type(name)


def obfuscation_confidence(name: Optional[str]) -> int:
    """Confidence score with the default signature library."""
    return _DEFAULT_CLASSIFIER.obfuscation_confidence(name)
