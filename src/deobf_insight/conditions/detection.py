"""Conditions that ask for a rename: signatures, entropy, length, collisions.

All of them return FORCE_RENAME or abstain, never FORBID_RENAME.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import TYPE_CHECKING, Optional

from ..classify.entropy import EntropyClassifier
from ..classify.patterns import PatternClassifier
from ..symbols import ClassSymbol, FieldSymbol, MethodSymbol, PackageSymbol
from .base import Condition
from .models import Action, ConditionKind

if TYPE_CHECKING:
    from ..symbols import SymbolSet

logger = logging.getLogger(__name__)


def _force_if(flag: bool) -> Action:
    return Action.FORCE_RENAME if flag else Action.NO_ACTION


class PatternCondition(Condition):
    """Rename names that match a known obfuscator signature.

    Compiler-synthesized names (``Foo$1``, ``-$$Lambda$...``), constructors
    and static initializers are skipped: they are not obfuscator output.
    """

    kind = ConditionKind.PATTERN
    description = "Obfuscator pattern detection"

    def __init__(self, classifier: Optional[PatternClassifier] = None):
        self.classifier = classifier or PatternClassifier()

    def check_package(self, pkg: PackageSymbol) -> Action:
        return _force_if(self.classifier.matches_obfuscator_pattern(pkg.name))

    def check_class(self, cls: ClassSymbol) -> Action:
        if self.classifier.is_compiler_generated(cls.tail):
            return Action.NO_ACTION
        return _force_if(self.classifier.matches_obfuscator_pattern(cls.name))

    def check_field(self, fld: FieldSymbol) -> Action:
        return _force_if(self.classifier.matches_obfuscator_pattern(fld.name))

    def check_method(self, mth: MethodSymbol) -> Action:
        if mth.is_constructor or mth.is_static_initializer:
            return Action.NO_ACTION
        if self.classifier.is_compiler_generated(mth.name):
            return Action.NO_ACTION
        return _force_if(self.classifier.matches_obfuscator_pattern(mth.name))


class EntropyCondition(Condition):
    """Rename random-looking names (Shannon entropy above the threshold)."""

    kind = ConditionKind.ENTROPY
    description = "Entropy-based detection"

    def __init__(self, classifier: Optional[EntropyClassifier] = None):
        self.classifier = classifier or EntropyClassifier()

    def check_package(self, pkg: PackageSymbol) -> Action:
        return _force_if(self.classifier.is_high_entropy(pkg.name))

    def check_class(self, cls: ClassSymbol) -> Action:
        return _force_if(self.classifier.is_high_entropy(cls.name))

    def check_field(self, fld: FieldSymbol) -> Action:
        return _force_if(self.classifier.is_high_entropy(fld.name))

    def check_method(self, mth: MethodSymbol) -> Action:
        return _force_if(self.classifier.is_high_entropy(mth.name))

    def __repr__(self) -> str:
        return (
            f"EntropyCondition(threshold={self.classifier.threshold}, "
            f"min_length={self.classifier.min_length})"
        )


class LengthCondition(Condition):
    """Rename names shorter than ``min_length`` or longer than ``max_length``."""

    kind = ConditionKind.LENGTH
    description = "Length-based detection"

    def __init__(self, min_length: int = 3, max_length: int = 64):
        self.min_length = min_length
        self.max_length = max_length

    def _should_rename(self, name: Optional[str]) -> bool:
        if not name:
            return False
        return len(name) < self.min_length or len(name) > self.max_length

    def check_package(self, pkg: PackageSymbol) -> Action:
        return _force_if(self._should_rename(pkg.name))

    def check_class(self, cls: ClassSymbol) -> Action:
        return _force_if(self._should_rename(cls.name))

    def check_field(self, fld: FieldSymbol) -> Action:
        return _force_if(self._should_rename(fld.name))

    def check_method(self, mth: MethodSymbol) -> Action:
        return _force_if(self._should_rename(mth.name))

    def __repr__(self) -> str:
        return f"LengthCondition(min_length={self.min_length}, max_length={self.max_length})"


class CollisionCondition(Condition):
    """Rename classes whose names would clash once sources are written out.

    Two clashes are tracked, both collected in ``init`` for the whole run:

    - a class named like a package segment (``a.b`` package vs ``a.b`` class);
    - classes of one package whose names differ only in case (``a`` and
      ``A`` cannot coexist on a case-insensitive filesystem). The first
      class in symbol order keeps its name.
    """

    kind = ConditionKind.COLLISION
    description = "Name collision avoidance"

    def __init__(self) -> None:
        self.package_names: set[str] = set()
        self.case_clashes: set[str] = set()

    def init(self, symbols: SymbolSet) -> None:
        self.package_names = {pkg.name for pkg in symbols.packages}

        seen: dict[tuple[str, str], str] = {}
        clashes: defaultdict[str, list[str]] = defaultdict(list)
        self.case_clashes = set()
        for cls in symbols.classes:
            key = (cls.package, cls.tail.lower())
            first = seen.setdefault(key, cls.full_name)
            if first != cls.full_name:
                self.case_clashes.add(cls.full_name)
                clashes[first].append(cls.full_name)

        for first, others in clashes.items():
            logger.debug("Case-insensitive class clash: %s vs %s", first, ", ".join(others))

    def check_class(self, cls: ClassSymbol) -> Action:
        if cls.name in self.package_names or cls.full_name in self.case_clashes:
            return Action.FORCE_RENAME
        return Action.NO_ACTION

    def __repr__(self) -> str:
        return (
            f"CollisionCondition(packages={len(self.package_names)}, "
            f"case_clashes={len(self.case_clashes)})"
        )
