"""Condition registry: the single mapping from ConditionKind to a factory.

Adding a new heuristic requires:
1. Add a member to ``ConditionKind``.
2. Add a factory entry to ``CONDITION_REGISTRY`` below.
Mode lists then refer to the new kind by name.
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List

from ..classify.entropy import EntropyClassifier
from ..classify.patterns import PatternClassifier
from ..config import DeobfConfig
from .base import Condition
from .detection import CollisionCondition, EntropyCondition, LengthCondition, PatternCondition
from .models import ConditionKind
from .preservation import (
    BaseCondition,
    CommonWordsCondition,
    ResourceExclusionCondition,
    TldExclusionCondition,
    WhitelistCondition,
)

ConditionFactory = Callable[[DeobfConfig], Condition]


def _pattern(config: DeobfConfig) -> Condition:
    return PatternCondition(PatternClassifier(config.classifier.confusable_chars))


def _entropy(config: DeobfConfig) -> Condition:
    return EntropyCondition(
        EntropyClassifier(
            threshold=config.classifier.entropy_threshold,
            min_length=config.classifier.entropy_min_length,
            confusable_chars=config.classifier.confusable_chars,
        )
    )


CONDITION_REGISTRY: Dict[ConditionKind, ConditionFactory] = {
    ConditionKind.BASE: lambda config: BaseCondition(),
    ConditionKind.WHITELIST: lambda config: WhitelistCondition(config.naming.whitelist),
    ConditionKind.TLD_EXCLUSION: lambda config: TldExclusionCondition(),
    ConditionKind.RESOURCE_EXCLUSION: lambda config: ResourceExclusionCondition(),
    ConditionKind.COLLISION: lambda config: CollisionCondition(),
    ConditionKind.COMMON_WORDS: lambda config: CommonWordsCondition(
        config.classifier.confusable_chars
    ),
    ConditionKind.PATTERN: _pattern,
    ConditionKind.ENTROPY: _entropy,
    ConditionKind.LENGTH: lambda config: LengthCondition(
        config.naming.min_length, config.naming.max_length
    ),
}


def create_condition(kind: ConditionKind, config: DeobfConfig) -> Condition:
    """Build a fresh condition instance of the given kind."""
    try:
        factory = CONDITION_REGISTRY[kind]
    except KeyError:
        raise KeyError(f"No condition registered for kind {kind!r}") from None
    return factory(config)


def build_conditions(kinds: Iterable[ConditionKind], config: DeobfConfig) -> List[Condition]:
    """Fresh instances, in the order given. Stateful conditions are never shared."""
    return [create_condition(kind, config) for kind in kinds]
