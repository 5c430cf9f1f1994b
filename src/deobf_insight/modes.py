"""Mode factory: condition lists and alias providers per deobfuscation mode.

Each named mode has a fixed, ordered list of condition kinds. DISABLED has
no list at all (the rename pass is skipped), and AUTO is resolved through
the codebase analyzer to one of the named modes first.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple, Union

from .analysis import DeobfuscationAnalyzer
from .conditions import CombinedCondition, ConditionKind, build_conditions
from .config import DeobfConfig
from .exceptions import UnknownModeError
from .logging_config import get_logger
from .models import DeobfuscationMode
from .naming import AliasProvider, IndexAliasProvider, NamingIndex, SemanticAliasProvider
from .symbols import SymbolSet

logger = get_logger(__name__)

_K = ConditionKind

MODE_CONDITIONS: Dict[DeobfuscationMode, Tuple[ConditionKind, ...]] = {
    DeobfuscationMode.DEFAULT: (
        _K.BASE,
        _K.WHITELIST,
        _K.TLD_EXCLUSION,
        _K.RESOURCE_EXCLUSION,
        _K.COLLISION,
        _K.LENGTH,
    ),
    DeobfuscationMode.CONSERVATIVE: (
        _K.BASE,
        _K.WHITELIST,
        _K.TLD_EXCLUSION,
        _K.RESOURCE_EXCLUSION,
        _K.COLLISION,
        _K.COMMON_WORDS,
        _K.PATTERN,
    ),
    DeobfuscationMode.ENHANCED: (
        _K.BASE,
        _K.WHITELIST,
        _K.TLD_EXCLUSION,
        _K.RESOURCE_EXCLUSION,
        _K.COLLISION,
        _K.COMMON_WORDS,
        _K.PATTERN,
        _K.ENTROPY,
        _K.LENGTH,
    ),
    DeobfuscationMode.AGGRESSIVE: (
        _K.BASE,
        _K.RESOURCE_EXCLUSION,
        _K.COLLISION,
        _K.PATTERN,
        _K.ENTROPY,
        _K.LENGTH,
    ),
}

SEMANTIC_MODES = frozenset({DeobfuscationMode.ENHANCED, DeobfuscationMode.AGGRESSIVE})


def parse_mode(value: Union[str, DeobfuscationMode]) -> DeobfuscationMode:
    """Mode from its name, case-insensitive.

    Raises:
        UnknownModeError: If the name is not a mode.
    """
    if isinstance(value, DeobfuscationMode):
        return value
    try:
        return DeobfuscationMode(value.strip().lower())
    except ValueError:
        raise UnknownModeError(value, [m.value for m in DeobfuscationMode]) from None


def condition_kinds(mode: DeobfuscationMode) -> Optional[Tuple[ConditionKind, ...]]:
    """The fixed kind list of a named mode; None for DISABLED.

    Raises:
        ValueError: For AUTO, which must be resolved first.
    """
    if mode is DeobfuscationMode.DISABLED:
        return None
    if mode is DeobfuscationMode.AUTO:
        raise ValueError("AUTO has no condition list; resolve it with resolve_auto() first")
    return MODE_CONDITIONS[mode]


def create_rename_condition(
    mode: DeobfuscationMode, config: Optional[DeobfConfig] = None
) -> Optional[CombinedCondition]:
    """Fresh condition instances for one run, or None when renaming is disabled."""
    kinds = condition_kinds(mode)
    if kinds is None:
        return None
    return CombinedCondition(build_conditions(kinds, config or DeobfConfig()))


def create_alias_provider(
    mode: DeobfuscationMode,
    config: Optional[DeobfConfig] = None,
    index: Optional[NamingIndex] = None,
) -> Optional[AliasProvider]:
    """Semantic naming for Enhanced and Aggressive, index naming otherwise.

    Aggressive drops the original-name hint.
    """
    if mode is DeobfuscationMode.DISABLED:
        return None
    if mode is DeobfuscationMode.AUTO:
        raise ValueError("AUTO has no alias provider; resolve it with resolve_auto() first")

    naming = (config or DeobfConfig()).naming
    common = dict(
        index=index,
        max_length=naming.max_length,
        collision_suffix=naming.collision_suffix,
    )
    if mode in SEMANTIC_MODES:
        return SemanticAliasProvider(
            use_semantic_naming=naming.use_semantic_naming,
            use_structural_prefix=naming.use_structural_prefix,
            use_package_hint=naming.use_package_hint,
            preserve_original_hint=(
                naming.preserve_original_hint and mode is not DeobfuscationMode.AGGRESSIVE
            ),
            **common,
        )
    return IndexAliasProvider(preserve_original_hint=naming.preserve_original_hint, **common)


def resolve_auto(
    symbols: SymbolSet, config: Optional[DeobfConfig] = None
) -> Tuple[DeobfuscationMode, DeobfuscationAnalyzer]:
    """Analyze the symbol set and pick the recommended named mode."""
    analyzer = DeobfuscationAnalyzer(symbols, config)
    stats = analyzer.analyze()
    mode = stats.recommended_mode
    if stats.detected_tool is not None:
        logger.info("Detected obfuscator: %s", stats.detected_tool.value)
    logger.info(
        "Overall obfuscation rate %.1f%%, using %s mode", stats.overall_rate, mode.name
    )
    return mode, analyzer


def describe_mode(mode: DeobfuscationMode) -> str:
    """Multi-line description: mode, conditions in order, alias provider."""
    lines = [f"Mode: {mode.name}", f"Description: {mode.description}", "", "Conditions used:"]
    lines += [f"  - {text}" for text in mode_condition_descriptions(mode)]
    lines += ["", f"Alias provider: {alias_provider_description(mode)}"]
    return "\n".join(lines) + "\n"


def mode_condition_descriptions(mode: DeobfuscationMode) -> List[str]:
    if mode is DeobfuscationMode.DISABLED:
        return ["No conditions (disabled)"]
    if mode is DeobfuscationMode.AUTO:
        return ["Automatically selected based on codebase analysis"]
    config = DeobfConfig()
    return [c.description for c in build_conditions(MODE_CONDITIONS[mode], config)]


def alias_provider_description(mode: DeobfuscationMode) -> str:
    if mode is DeobfuscationMode.DISABLED:
        return "None (renaming skipped)"
    if mode is DeobfuscationMode.AUTO:
        return "Chosen with the resolved mode"
    if mode in SEMANTIC_MODES:
        return "Semantic (structure-aware naming)"
    return "Index (index-based naming)"
