"""Conditions that keep names: flags, whitelist, excluded scopes, common words.

All of them return FORBID_RENAME or abstain, never FORCE_RENAME.
"""

from __future__ import annotations

from typing import Iterable, Optional

from ..classify.entropy import DEFAULT_CONFUSABLE_CHARS
from ..symbols import ClassSymbol, FieldSymbol, MethodSymbol, PackageSymbol
from .base import Condition
from .common_words import COMMON_TERMS, COMMON_PREFIXES, COMMON_SUFFIXES
from .models import Action, ConditionKind

# Top-level package names that are internet TLDs (com.example, org.apache)
TLD_NAMES = frozenset(
    {
        "com", "org", "net", "edu", "gov", "mil", "int", "io", "co", "info", "biz",
        "app", "dev", "me", "tv", "cc", "ai", "xyz", "name", "pro", "mobi", "eu",
        "uk", "de", "fr", "it", "es", "nl", "be", "ch", "at", "se", "no", "dk",
        "fi", "pl", "cz", "ru", "ua", "cn", "jp", "kr", "tw", "hk", "in", "au",
        "nz", "ca", "us", "br", "ar", "mx", "za", "il", "tr", "ir", "vn", "id",
    }
)

RESOURCE_CLASS_NAME = "R"


class BaseCondition(Condition):
    """Keep symbols flagged ``keep``, already aliased, or compiler-reserved."""

    kind = ConditionKind.BASE
    description = "Base condition (skip flagged/renamed)"

    def check_package(self, pkg: PackageSymbol) -> Action:
        return self._check_flags(pkg.keep, pkg.alias)

    def check_class(self, cls: ClassSymbol) -> Action:
        return self._check_flags(cls.keep, cls.alias)

    def check_field(self, fld: FieldSymbol) -> Action:
        return self._check_flags(fld.keep, fld.alias)

    def check_method(self, mth: MethodSymbol) -> Action:
        if mth.is_constructor or mth.is_static_initializer:
            return Action.FORBID_RENAME
        return self._check_flags(mth.keep, mth.alias)

    @staticmethod
    def _check_flags(keep: bool, alias: Optional[str]) -> Action:
        if keep or alias:
            return Action.FORBID_RENAME
        return Action.NO_ACTION


class WhitelistCondition(Condition):
    """Keep whitelisted classes and packages, and members of whitelisted classes.

    Entries are qualified class names (``androidx.annotation.Px``) or
    package wildcards (``android.support.v4.*``). A wildcard covers the
    classes of that package, not its subpackages.
    """

    kind = ConditionKind.WHITELIST
    description = "Whitelist preservation"

    def __init__(self, entries: Iterable[str]):
        self.packages: set[str] = set()
        self.classes: set[str] = set()
        for entry in entries:
            if entry.endswith(".*"):
                self.packages.add(entry[:-2])
            else:
                self.classes.add(entry)

    def check_package(self, pkg: PackageSymbol) -> Action:
        if pkg.full_name in self.packages:
            return Action.FORBID_RENAME
        return Action.NO_ACTION

    def check_class(self, cls: ClassSymbol) -> Action:
        if self._is_whitelisted(cls):
            return Action.FORBID_RENAME
        return Action.NO_ACTION

    def check_field(self, fld: FieldSymbol) -> Action:
        if fld.enclosing is not None and self._is_whitelisted(fld.enclosing):
            return Action.FORBID_RENAME
        return Action.NO_ACTION

    def check_method(self, mth: MethodSymbol) -> Action:
        if mth.enclosing is not None and self._is_whitelisted(mth.enclosing):
            return Action.FORBID_RENAME
        return Action.NO_ACTION

    def _is_whitelisted(self, cls: ClassSymbol) -> bool:
        return cls.full_name in self.classes or cls.package in self.packages

    def __repr__(self) -> str:
        return f"WhitelistCondition(packages={len(self.packages)}, classes={len(self.classes)})"


class TldExclusionCondition(Condition):
    """Keep top-level packages named like an internet TLD (``com``, ``io``)."""

    kind = ConditionKind.TLD_EXCLUSION
    description = "TLD package exclusion"

    def check_package(self, pkg: PackageSymbol) -> Action:
        if pkg.is_top_level and pkg.name in TLD_NAMES:
            return Action.FORBID_RENAME
        return Action.NO_ACTION


class ResourceExclusionCondition(Condition):
    """Keep Android resource classes (``R``, ``R$id``) and their fields."""

    kind = ConditionKind.RESOURCE_EXCLUSION
    description = "Android R class exclusion"

    def check_class(self, cls: ClassSymbol) -> Action:
        if is_resource_class(cls):
            return Action.FORBID_RENAME
        return Action.NO_ACTION

    def check_field(self, fld: FieldSymbol) -> Action:
        if fld.enclosing is not None and is_resource_class(fld.enclosing):
            return Action.FORBID_RENAME
        return Action.NO_ACTION


def is_resource_class(cls: ClassSymbol) -> bool:
    """``R`` itself or any class nested in it."""
    return cls.tail.split("$", 1)[0] == RESOURCE_CLASS_NAME


class CommonWordsCondition(Condition):
    """Keep short but meaningful names: API vocabulary, camelCase words.

    Confusable-only class names (``IlIl``) look camelCase but are not words;
    they are left to the pattern check.
    """

    kind = ConditionKind.COMMON_WORDS
    description = "Common words preservation"

    def __init__(self, confusable_chars: str = DEFAULT_CONFUSABLE_CHARS):
        self.confusable_chars = frozenset(confusable_chars)

    def check_package(self, pkg: PackageSymbol) -> Action:
        if is_common_term(pkg.name):
            return Action.FORBID_RENAME
        return Action.NO_ACTION

    def check_class(self, cls: ClassSymbol) -> Action:
        name = cls.name
        if is_common_term(name) or contains_common_pattern(name):
            return Action.FORBID_RENAME
        if is_camel_case(name) and not set(name) <= self.confusable_chars:
            return Action.FORBID_RENAME
        return Action.NO_ACTION

    def check_field(self, fld: FieldSymbol) -> Action:
        if is_common_term(fld.name) or contains_common_pattern(fld.name):
            return Action.FORBID_RENAME
        return Action.NO_ACTION

    def check_method(self, mth: MethodSymbol) -> Action:
        if is_common_term(mth.name) or contains_common_pattern(mth.name):
            return Action.FORBID_RENAME
        return Action.NO_ACTION


def is_common_term(name: Optional[str]) -> bool:
    if not name:
        return False
    return name.lower() in COMMON_TERMS


def contains_common_pattern(name: Optional[str]) -> bool:
    """camelCase verb prefix (``getUser``) or well-known suffix (``ClickListener``)."""
    if not name or len(name) < 4:
        return False
    lower = name.lower()
    for prefix in COMMON_PREFIXES:
        if lower.startswith(prefix) and len(name) > len(prefix) and name[len(prefix)].isupper():
            return True
    return any(name.endswith(s) and len(name) > len(s) for s in COMMON_SUFFIXES)


def is_camel_case(name: Optional[str]) -> bool:
    """Mixed case with at least one lower/upper transition."""
    if not name or len(name) < 3:
        return False
    has_lower = any(ch.islower() for ch in name)
    has_upper = any(ch.isupper() for ch in name)
    has_transition = any(
        (a.islower() and b.isupper()) or (a.isupper() and b.islower())
        for a, b in zip(name, name[1:])
    )
    return has_lower and has_upper and has_transition
