"""Base class for rename conditions."""

from __future__ import annotations

from abc import ABC
from typing import TYPE_CHECKING

from ..symbols import ClassSymbol, FieldSymbol, MethodSymbol, PackageSymbol, Symbol, SymbolKind
from .models import Action, ConditionKind

if TYPE_CHECKING:
    from ..symbols import SymbolSet


class Condition(ABC):
    """One heuristic producing an Action per symbol.

    Subclasses override the ``check_*`` hooks for the symbol kinds they care
    about; the rest abstain. ``init`` runs once per run before any
    evaluation and is where stateful conditions collect their facts.
    """

    kind: ConditionKind
    description: str

    def init(self, symbols: SymbolSet) -> None:
        """Prepare per-run state. Stateless conditions do nothing."""

    def evaluate(self, symbol: Symbol) -> Action:
        if symbol.kind is SymbolKind.PACKAGE:
            return self.check_package(symbol)
        if symbol.kind is SymbolKind.CLASS:
            return self.check_class(symbol)
        if symbol.kind is SymbolKind.FIELD:
            return self.check_field(symbol)
        return self.check_method(symbol)

    def check_package(self, pkg: PackageSymbol) -> Action:
        return Action.NO_ACTION

    def check_class(self, cls: ClassSymbol) -> Action:
        return Action.NO_ACTION

    def check_field(self, fld: FieldSymbol) -> Action:
        return Action.NO_ACTION

    def check_method(self, mth: MethodSymbol) -> Action:
        return Action.NO_ACTION

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
