"""Name classifiers: obfuscator signatures and Shannon entropy.

Usage:
    from deobf_insight.classify import PatternClassifier, shannon_entropy

    PatternClassifier().detect_obfuscator_type("a")  # ObfuscatorTool.PROGUARD
    shannon_entropy("abcd")                          # 2.0
"""

from .entropy import (
    DEFAULT_CONFUSABLE_CHARS,
    EntropyClassifier,
    has_obfuscator_pattern,
    shannon_entropy,
)
from .models import ClassificationResult, ObfuscatorTool
from .patterns import (
    PatternClassifier,
    PatternSignature,
    build_signature_library,
    detect_obfuscator_type,
    obfuscation_confidence,
)

__all__ = [
    # Models
    "ClassificationResult",
    "ObfuscatorTool",
    # Entropy
    "DEFAULT_CONFUSABLE_CHARS",
    "EntropyClassifier",
    "has_obfuscator_pattern",
    "shannon_entropy",
    # Patterns
    "PatternClassifier",
    "PatternSignature",
    "build_signature_library",
    "detect_obfuscator_type",
    "obfuscation_confidence",
]
