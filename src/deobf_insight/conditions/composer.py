"""CombinedCondition: merge an ordered list of verdicts into one decision."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Sequence

from .base import Condition
from .models import Action

if TYPE_CHECKING:
    from ..symbols import Symbol, SymbolSet

logger = logging.getLogger(__name__)


class CombinedCondition:
    """Evaluate conditions in order; forbid beats force beats silence.

    The first FORBID_RENAME ends evaluation with ``False``. Otherwise any
    FORCE_RENAME gives ``True``, and a symbol nobody voted on stays as is.
    """

    def __init__(self, conditions: Sequence[Condition]):
        self.conditions: List[Condition] = list(conditions)

    def init(self, symbols: SymbolSet) -> None:
        for condition in self.conditions:
            condition.init(symbols)

    def evaluate(self, symbol: Symbol) -> Action:
        force = False
        for condition in self.conditions:
            action = condition.evaluate(symbol)
            if action is Action.FORBID_RENAME:
                logger.debug("%s kept by %s", symbol.qualified_name, condition.kind.value)
                return Action.FORBID_RENAME
            if action is Action.FORCE_RENAME:
                force = True
        return Action.FORCE_RENAME if force else Action.NO_ACTION

    def decide(self, symbol: Symbol) -> bool:
        """True if the symbol should get a new name."""
        return self.evaluate(symbol) is Action.FORCE_RENAME

    @property
    def kinds(self) -> list:
        return [c.kind for c in self.conditions]

    def __len__(self) -> int:
        return len(self.conditions)

    def __repr__(self) -> str:
        return f"CombinedCondition({', '.join(k.value for k in self.kinds)})"
