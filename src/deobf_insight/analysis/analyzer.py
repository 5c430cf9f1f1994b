"""Codebase analyzer: one pass over all classes, global obfuscation stats.

The analyzer applies the classifiers directly, not the rename condition
list. A name counts as obfuscated when any of these holds, checked in
order:

  1. pattern confidence >= ``analyzer_confidence_threshold`` (50)
  2. entropy > ``analyzer_entropy_threshold`` (4.0) and length > 3
  3. an obfuscator shape (single letter, repeated char, hex blob...)

Only obfuscated class names vote for a tool. Constructors and synthetic
methods are left out of the method totals entirely.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from ..classify import ObfuscatorTool, PatternClassifier, has_obfuscator_pattern, shannon_entropy
from ..config import DeobfConfig
from ..symbols import SymbolSet
from .models import ObfuscationStats

logger = logging.getLogger(__name__)

ENTROPY_MIN_LENGTH = 4


class DeobfuscationAnalyzer:
    """Collects ObfuscationStats for one symbol set.

    ``analyze`` scans once and caches; later calls return the same object.
    Use a fresh analyzer per symbol set.
    """

    def __init__(self, symbols: SymbolSet, config: Optional[DeobfConfig] = None):
        self.symbols = symbols
        self.config = config or DeobfConfig()
        self.classifier = PatternClassifier(self.config.classifier.confusable_chars)
        self._stats: Optional[ObfuscationStats] = None

    def analyze(self) -> ObfuscationStats:
        if self._stats is not None:
            return self._stats

        stats = ObfuscationStats()
        votes: Dict[ObfuscatorTool, int] = {}

        for cls in self.symbols.classes:
            stats.total_classes += 1
            if self.is_likely_obfuscated(cls.name):
                stats.obfuscated_classes += 1
                tool = self.classifier.detect_obfuscator_type(cls.name)
                if tool is not None:
                    votes[tool] = votes.get(tool, 0) + 1

            for fld in cls.fields:
                stats.total_fields += 1
                if self.is_likely_obfuscated(fld.name):
                    stats.obfuscated_fields += 1

            for mth in cls.methods:
                if mth.is_constructor or mth.access.synthetic:
                    continue
                stats.total_methods += 1
                if self.is_likely_obfuscated(mth.name):
                    stats.obfuscated_methods += 1

        stats.tool_votes = votes
        stats.detected_tool, tied = _plurality(votes)
        stats.ambiguous_tool_vote = len(tied) > 1
        if stats.ambiguous_tool_vote:
            logger.warning(
                "Tool vote tied between %s; using %s (first to receive a vote)",
                ", ".join(t.value for t in tied),
                stats.detected_tool.value,
            )

        stats.calculate_percentages()
        self._stats = stats
        return stats

    @property
    def stats(self) -> ObfuscationStats:
        return self.analyze()

    @property
    def detected_tool(self) -> Optional[ObfuscatorTool]:
        return self.analyze().detected_tool

    def is_likely_obfuscated(self, name: Optional[str]) -> bool:
        if not name:
            return False
        thresholds = self.config.classifier
        if self.classifier.obfuscation_confidence(name) >= thresholds.analyzer_confidence_threshold:
            return True
        if (
            len(name) >= ENTROPY_MIN_LENGTH
            and shannon_entropy(name) > thresholds.analyzer_entropy_threshold
        ):
            return True
        return has_obfuscator_pattern(name, thresholds.confusable_chars)

    def report(self) -> str:
        """Plain-text summary: per-kind figures, detected tool, recommendation."""
        stats = self.analyze()
        lines = ["=== Deobfuscation Analysis Report ===", ""]

        if stats.detected_tool is not None:
            lines += [f"Detected Obfuscator: {stats.detected_tool.value}", ""]

        for title, total, obfuscated, rate in (
            ("Classes", stats.total_classes, stats.obfuscated_classes, stats.class_rate),
            ("Methods", stats.total_methods, stats.obfuscated_methods, stats.method_rate),
            ("Fields", stats.total_fields, stats.obfuscated_fields, stats.field_rate),
        ):
            lines += [
                f"{title}:",
                f"  Total: {total}",
                f"  Obfuscated: {obfuscated} ({rate:.1f}%)",
                "",
            ]

        lines.append(f"Overall Obfuscation Rate: {stats.overall_rate:.1f}%")
        lines.append("")
        lines.append(f"Recommendation: {_RECOMMENDATION_TEXT[stats.recommended_mode.value]}")
        return "\n".join(lines) + "\n"

    def log_analysis(self) -> None:
        stats = self.analyze()
        logger.info("Deobfuscation analysis:")
        if stats.detected_tool is not None:
            logger.info("  Detected obfuscator: %s", stats.detected_tool.value)
        logger.info(
            "  Classes: %d total, %d obfuscated (%.1f%%)",
            stats.total_classes,
            stats.obfuscated_classes,
            stats.class_rate,
        )
        logger.info(
            "  Methods: %d total, %d obfuscated (%.1f%%)",
            stats.total_methods,
            stats.obfuscated_methods,
            stats.method_rate,
        )
        logger.info(
            "  Fields: %d total, %d obfuscated (%.1f%%)",
            stats.total_fields,
            stats.obfuscated_fields,
            stats.field_rate,
        )
        logger.info("  Overall obfuscation rate: %.1f%%", stats.overall_rate)


_RECOMMENDATION_TEXT = {
    "aggressive": "Use AGGRESSIVE deobfuscation mode",
    "enhanced": "Use ENHANCED deobfuscation mode",
    "default": "Use DEFAULT deobfuscation mode",
    "conservative": "Use CONSERVATIVE deobfuscation mode or disable",
}


def _plurality(votes: Dict[ObfuscatorTool, int]) -> tuple:
    """Winner and every tool sharing the top count.

    ``votes`` keeps first-vote order, so on a tie the tool voted for
    earliest wins.
    """
    if not votes:
        return None, []
    top = max(votes.values())
    tied: List[ObfuscatorTool] = [tool for tool, count in votes.items() if count == top]
    return tied[0], tied
