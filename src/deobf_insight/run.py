"""DeobfuscationRun: one rename pass over one symbol set.

The run owns every piece of per-run state (condition instances, naming
counters, emitted aliases, analyzer cache). Create a new run for each
symbol set; instances are not meant to be shared between passes.
"""

from __future__ import annotations

from typing import List, Optional, Union

from .analysis import DeobfuscationAnalyzer, ObfuscationStats
from .conditions import CombinedCondition
from .config import DeobfConfig
from .logging_config import get_logger
from .models import DeobfuscationMode, RenameEntry
from .modes import create_alias_provider, create_rename_condition, parse_mode, resolve_auto
from .naming import (
    AliasProvider,
    NamingIndex,
    is_obfuscated_parameter_name,
    suggest_parameter_names,
)
from .symbols import SymbolSet

logger = get_logger(__name__)


class DeobfuscationRun:
    """Decide renames and synthesize aliases for a symbol set.

    Args:
        symbols: The symbol set to process.
        mode: Mode or mode name; defaults to ``config.mode``.
        config: Thresholds and naming switches.
        index: Naming counter seeds, to continue numbering from a
            previous run.
    """

    def __init__(
        self,
        symbols: SymbolSet,
        mode: Union[str, DeobfuscationMode, None] = None,
        config: Optional[DeobfConfig] = None,
        index: Optional[NamingIndex] = None,
    ):
        self.symbols = symbols
        self.config = config or DeobfConfig()
        self.requested_mode = parse_mode(mode if mode is not None else self.config.mode)
        self.analyzer: Optional[DeobfuscationAnalyzer] = None

        if self.requested_mode is DeobfuscationMode.AUTO:
            self.mode, self.analyzer = resolve_auto(symbols, self.config)
        else:
            self.mode = self.requested_mode

        self.condition: Optional[CombinedCondition] = create_rename_condition(
            self.mode, self.config
        )
        self.alias_provider: Optional[AliasProvider] = create_alias_provider(
            self.mode, self.config, index
        )
        self._plan: Optional[List[RenameEntry]] = None
        self._parameter_plan: Optional[List[RenameEntry]] = None

    @property
    def stats(self) -> ObfuscationStats:
        """Analyzer stats; computed on demand when the mode was not AUTO."""
        if self.analyzer is None:
            self.analyzer = DeobfuscationAnalyzer(self.symbols, self.config)
        return self.analyzer.analyze()

    @property
    def index(self) -> Optional[NamingIndex]:
        return self.alias_provider.index if self.alias_provider else None

    def plan(self) -> List[RenameEntry]:
        """Rename plan in symbol-set order. Computed once, then cached."""
        if self._plan is not None:
            return self._plan

        if self.condition is None or self.alias_provider is None:
            logger.info("Deobfuscation disabled, no symbols renamed")
            self._plan = []
            return self._plan

        self.condition.init(self.symbols)
        self.alias_provider.init(self.symbols)

        plan: List[RenameEntry] = []
        for symbol in self.symbols:
            if not self.condition.decide(symbol):
                continue
            alias = self.alias_provider.name(symbol)
            plan.append(
                RenameEntry(
                    kind=symbol.kind.value,
                    qualified_name=symbol.qualified_name,
                    original=symbol.name or "",
                    alias=alias,
                )
            )

        logger.info(
            "%s mode: %d of %d symbols renamed", self.mode.name, len(plan), len(self.symbols)
        )
        self._plan = plan
        return plan

    def should_rename(self, symbol) -> bool:
        """Verdict for a single symbol (False when renaming is disabled)."""
        if self.condition is None:
            return False
        self.plan()
        return self.condition.decide(symbol)

    def parameter_plan(self) -> List[RenameEntry]:
        """Suggested names for unnamed or obfuscated method parameters.

        Entries use kind ``parameter`` and ``<method>#<position>`` as the
        qualified name. Parameters with a readable name are left alone and
        their names are never suggested for a sibling.
        """
        if self._parameter_plan is not None:
            return self._parameter_plan
        if self.condition is None:
            self._parameter_plan = []
            return self._parameter_plan

        entries: List[RenameEntry] = []
        for cls in self.symbols.classes:
            for mth in cls.methods:
                if not mth.arg_types:
                    continue
                names = list(mth.arg_names) + [None] * (len(mth.arg_types) - len(mth.arg_names))
                kept = [n for n in names if n and not is_obfuscated_parameter_name(n)]
                suggestions = suggest_parameter_names(mth, reserved=kept)
                for position, (original, suggestion) in enumerate(zip(names, suggestions)):
                    if original and not is_obfuscated_parameter_name(original):
                        continue
                    entries.append(
                        RenameEntry(
                            kind="parameter",
                            qualified_name=f"{mth.qualified_name}#{position}",
                            original=original or "",
                            alias=suggestion,
                        )
                    )

        logger.debug("%d parameter name(s) suggested", len(entries))
        self._parameter_plan = entries
        return entries
