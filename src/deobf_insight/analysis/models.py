"""Codebase-wide obfuscation statistics."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from ..classify import ObfuscatorTool
from ..models import DeobfuscationMode

AGGRESSIVE_RATE = 70.0
ENHANCED_RATE = 30.0
DEFAULT_RATE = 10.0

HEAVY_RATE = 50.0
LIGHT_RATE = 10.0


def recommend_mode(overall_rate: float) -> DeobfuscationMode:
    """Map an overall obfuscation rate (percent) to a mode.

    Cut points are exclusive: exactly 70 gives Enhanced, exactly 10 gives
    Conservative.
    """
    if overall_rate > AGGRESSIVE_RATE:
        return DeobfuscationMode.AGGRESSIVE
    if overall_rate > ENHANCED_RATE:
        return DeobfuscationMode.ENHANCED
    if overall_rate > DEFAULT_RATE:
        return DeobfuscationMode.DEFAULT
    return DeobfuscationMode.CONSERVATIVE


@dataclass
class ObfuscationStats:
    """Totals and obfuscated counts per symbol kind, plus the tool vote.

    Rates are percentages. Each per-kind rate is computed from its own
    total; the overall rate divides the combined obfuscated count by the
    combined total, it is not the mean of the three rates.
    """

    total_classes: int = 0
    obfuscated_classes: int = 0
    total_methods: int = 0
    obfuscated_methods: int = 0
    total_fields: int = 0
    obfuscated_fields: int = 0

    class_rate: float = 0.0
    method_rate: float = 0.0
    field_rate: float = 0.0
    overall_rate: float = 0.0

    detected_tool: Optional[ObfuscatorTool] = None
    tool_votes: Dict[ObfuscatorTool, int] = field(default_factory=dict)
    ambiguous_tool_vote: bool = False

    def calculate_percentages(self) -> None:
        if self.total_classes > 0:
            self.class_rate = self.obfuscated_classes / self.total_classes * 100
        if self.total_methods > 0:
            self.method_rate = self.obfuscated_methods / self.total_methods * 100
        if self.total_fields > 0:
            self.field_rate = self.obfuscated_fields / self.total_fields * 100

        total = self.total_classes + self.total_methods + self.total_fields
        obfuscated = self.obfuscated_classes + self.obfuscated_methods + self.obfuscated_fields
        if total > 0:
            self.overall_rate = obfuscated / total * 100

    @property
    def is_heavily_obfuscated(self) -> bool:
        return self.overall_rate > HEAVY_RATE

    @property
    def is_lightly_obfuscated(self) -> bool:
        return LIGHT_RATE < self.overall_rate <= HEAVY_RATE

    @property
    def is_minimally_obfuscated(self) -> bool:
        return self.overall_rate <= LIGHT_RATE

    @property
    def recommended_mode(self) -> DeobfuscationMode:
        return recommend_mode(self.overall_rate)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "classes": {
                "total": self.total_classes,
                "obfuscated": self.obfuscated_classes,
                "rate": round(self.class_rate, 2),
            },
            "methods": {
                "total": self.total_methods,
                "obfuscated": self.obfuscated_methods,
                "rate": round(self.method_rate, 2),
            },
            "fields": {
                "total": self.total_fields,
                "obfuscated": self.obfuscated_fields,
                "rate": round(self.field_rate, 2),
            },
            "overall_rate": round(self.overall_rate, 2),
            "detected_tool": self.detected_tool.value if self.detected_tool else None,
            "tool_votes": {tool.value: count for tool, count in self.tool_votes.items()},
            "ambiguous_tool_vote": self.ambiguous_tool_vote,
            "recommended_mode": self.recommended_mode.value,
        }
