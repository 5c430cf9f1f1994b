"""Entropy classifier: randomness and obfuscator shape of a bare name.

Two independent checks:

- Shannon entropy of the character distribution. Random-looking names
  ("aB3xQ9mK") score high, ordinary names ("onClick", "getData") score low.
- Structural shape: single letters, two-letter words, a repeated character,
  only confusable glyphs (l/I/1, 0/O/o), hex or base64-like blobs.
"""

from __future__ import annotations

from collections import Counter
from typing import Optional

from ..math.entropy import Entropy

DEFAULT_CONFUSABLE_CHARS = "lI10Oo_"

HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
BASE64_MARKERS = frozenset("+/=")


def shannon_entropy(name: Optional[str]) -> float:
    """Shannon entropy in bits over the name's single-byte characters.

    Characters above U+00FF are left out of the frequency count.
    ``None`` and ``""`` give 0.0.
    """
    if not name:
        return 0.0
    counts = Counter(ch for ch in name if ord(ch) < 256)
    return Entropy.shannon(counts)


def has_obfuscator_pattern(
    name: Optional[str], confusable_chars: str = DEFAULT_CONFUSABLE_CHARS
) -> bool:
    """True if the name has a typical obfuscator shape, regardless of entropy."""
    if not name:
        return False
    if len(name) == 1:
        return True
    if len(name) == 2 and name[0].isalpha() and name[1].isalpha():
        return True
    if _is_repeated_char(name):
        return True
    if _is_confusable_only(name, confusable_chars):
        return True
    return _looks_encoded(name)


def _is_repeated_char(name: str) -> bool:
    return len(name) >= 3 and len(set(name)) == 1


def _is_confusable_only(name: str, confusable_chars: str) -> bool:
    return len(name) >= 3 and all(ch in confusable_chars for ch in name)


def _looks_encoded(name: str) -> bool:
    """Hex digest (>= 6 chars) or base64 fragment (>= 8 chars, 2+ of ``+/=``)."""
    if len(name) >= 6 and all(ch in HEX_DIGITS for ch in name):
        return True
    specials = sum(1 for ch in name if ch in BASE64_MARKERS)
    return specials > 1 and len(name) >= 8


class EntropyClassifier:
    """High-entropy verdict with a configurable threshold and length gate.

    Args:
        threshold: Entropy (bits) above which a name counts as random.
        min_length: Names shorter than this get no verdict; a few
            characters carry too little signal for entropy to mean anything.
        confusable_chars: Glyph set for the confusable-only shape check.
    """

    def __init__(
        self,
        threshold: float = 3.5,
        min_length: int = 3,
        confusable_chars: str = DEFAULT_CONFUSABLE_CHARS,
    ):
        self.threshold = threshold
        self.min_length = min_length
        self.confusable_chars = confusable_chars

    def is_analyzable(self, name: Optional[str]) -> bool:
        return name is not None and len(name) >= self.min_length

    def is_high_entropy(self, name: Optional[str]) -> bool:
        if not self.is_analyzable(name):
            return False
        return shannon_entropy(name) > self.threshold

    def has_structural_pattern(self, name: Optional[str]) -> bool:
        return has_obfuscator_pattern(name, self.confusable_chars)
