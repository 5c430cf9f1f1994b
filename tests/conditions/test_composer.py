"""Tests for CombinedCondition and the condition registry."""

from itertools import permutations

import pytest

from deobf_insight.conditions import (
    CONDITION_REGISTRY,
    Action,
    CombinedCondition,
    Condition,
    ConditionKind,
    EntropyCondition,
    LengthCondition,
    WhitelistCondition,
    build_conditions,
    create_condition,
)
from deobf_insight.config import ClassifierConfig, DeobfConfig, NamingConfig
from deobf_insight.symbols import FieldSymbol, SymbolSet


class FixedCondition(Condition):
    """Returns the same verdict for every symbol and counts its calls."""

    kind = ConditionKind.BASE
    description = "fixed"

    def __init__(self, action):
        self.action = action
        self.calls = 0
        self.initialized = False

    def init(self, symbols):
        self.initialized = True

    def evaluate(self, symbol):
        self.calls += 1
        return self.action


SYMBOL = FieldSymbol(name="a")


class TestCombinedCondition:
    """Forbid beats force beats silence."""

    def test_force_only(self):
        combined = CombinedCondition([FixedCondition(Action.FORCE_RENAME)])
        assert combined.decide(SYMBOL) is True

    def test_no_votes_keeps_name(self):
        combined = CombinedCondition([FixedCondition(Action.NO_ACTION)] * 3)
        assert combined.decide(SYMBOL) is False

    def test_empty_list_keeps_name(self):
        assert CombinedCondition([]).decide(SYMBOL) is False

    @pytest.mark.parametrize(
        "actions",
        list(permutations([Action.FORBID_RENAME, Action.FORCE_RENAME, Action.NO_ACTION])),
    )
    def test_forbid_wins_in_any_order(self, actions):
        combined = CombinedCondition([FixedCondition(a) for a in actions])
        assert combined.evaluate(SYMBOL) is Action.FORBID_RENAME
        assert combined.decide(SYMBOL) is False

    def test_forbid_stops_evaluation(self):
        later = FixedCondition(Action.FORCE_RENAME)
        combined = CombinedCondition([FixedCondition(Action.FORBID_RENAME), later])
        combined.decide(SYMBOL)
        assert later.calls == 0

    def test_force_does_not_stop_evaluation(self):
        later = FixedCondition(Action.FORBID_RENAME)
        combined = CombinedCondition([FixedCondition(Action.FORCE_RENAME), later])
        assert combined.decide(SYMBOL) is False
        assert later.calls == 1

    def test_init_reaches_every_condition(self):
        conditions = [FixedCondition(Action.NO_ACTION) for _ in range(3)]
        CombinedCondition(conditions).init(SymbolSet([]))
        assert all(c.initialized for c in conditions)

    def test_len_and_kinds(self):
        combined = CombinedCondition([FixedCondition(Action.NO_ACTION)] * 2)
        assert len(combined) == 2
        assert combined.kinds == [ConditionKind.BASE, ConditionKind.BASE]


class TestConditionRegistry:
    """Every kind has a factory; factories read the config."""

    def test_every_kind_registered(self):
        assert set(CONDITION_REGISTRY) == set(ConditionKind)

    def test_each_call_builds_a_new_instance(self, config):
        first = create_condition(ConditionKind.COLLISION, config)
        second = create_condition(ConditionKind.COLLISION, config)
        assert first is not second

    def test_factory_kind_matches_key(self, config):
        for kind in ConditionKind:
            assert create_condition(kind, config).kind is kind

    def test_length_bounds_from_config(self):
        config = DeobfConfig(naming=NamingConfig(min_length=2, max_length=40))
        condition = create_condition(ConditionKind.LENGTH, config)
        assert isinstance(condition, LengthCondition)
        assert (condition.min_length, condition.max_length) == (2, 40)

    def test_entropy_threshold_from_config(self):
        config = DeobfConfig(classifier=ClassifierConfig(entropy_threshold=2.5))
        condition = create_condition(ConditionKind.ENTROPY, config)
        assert isinstance(condition, EntropyCondition)
        assert condition.classifier.threshold == 2.5

    def test_whitelist_from_config(self):
        config = DeobfConfig(naming=NamingConfig(whitelist=("com.keep.*",)))
        condition = create_condition(ConditionKind.WHITELIST, config)
        assert isinstance(condition, WhitelistCondition)
        assert condition.packages == {"com.keep"}

    def test_build_conditions_keeps_order(self, config):
        kinds = [ConditionKind.LENGTH, ConditionKind.BASE, ConditionKind.PATTERN]
        assert [c.kind for c in build_conditions(kinds, config)] == kinds

    def test_unknown_kind(self, config):
        with pytest.raises(KeyError):
            create_condition("nope", config)
