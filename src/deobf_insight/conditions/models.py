"""Condition verdicts and the closed set of condition kinds."""

from enum import Enum


class Action(Enum):
    """Verdict of one condition for one symbol.

    Precedence when combined: FORBID_RENAME > FORCE_RENAME > NO_ACTION.
    """

    NO_ACTION = "no_action"
    FORCE_RENAME = "force_rename"
    FORBID_RENAME = "forbid_rename"


class ConditionKind(Enum):
    """Every heuristic the rule engine knows.

    New heuristics are added here and in ``CONDITION_REGISTRY``; mode
    lists refer to kinds, never to condition classes directly.
    """

    BASE = "base"
    WHITELIST = "whitelist"
    TLD_EXCLUSION = "tld_exclusion"
    RESOURCE_EXCLUSION = "resource_exclusion"
    COLLISION = "collision"
    COMMON_WORDS = "common_words"
    PATTERN = "pattern"
    ENTROPY = "entropy"
    LENGTH = "length"
