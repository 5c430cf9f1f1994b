"""Rename conditions and the composer that merges their verdicts.

Usage:
    from deobf_insight.conditions import CombinedCondition, ConditionKind, build_conditions

    combined = CombinedCondition(build_conditions([ConditionKind.BASE, ConditionKind.PATTERN], config))
    combined.init(symbols)
    combined.decide(symbol)
"""

from .base import Condition
from .composer import CombinedCondition
from .detection import CollisionCondition, EntropyCondition, LengthCondition, PatternCondition
from .models import Action, ConditionKind
from .preservation import (
    BaseCondition,
    CommonWordsCondition,
    ResourceExclusionCondition,
    TldExclusionCondition,
    WhitelistCondition,
    contains_common_pattern,
    is_camel_case,
    is_common_term,
    is_resource_class,
)
from .registry import CONDITION_REGISTRY, build_conditions, create_condition

__all__ = [
    # Models
    "Action",
    "ConditionKind",
    "Condition",
    "CombinedCondition",
    # Preservation
    "BaseCondition",
    "WhitelistCondition",
    "TldExclusionCondition",
    "ResourceExclusionCondition",
    "CommonWordsCondition",
    "contains_common_pattern",
    "is_camel_case",
    "is_common_term",
    "is_resource_class",
    # Detection
    "PatternCondition",
    "EntropyCondition",
    "LengthCondition",
    "CollisionCondition",
    # Registry
    "CONDITION_REGISTRY",
    "build_conditions",
    "create_condition",
]
