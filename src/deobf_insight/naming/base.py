"""AliasProvider base: counters, hint formatting, dedup, hierarchy walk."""

from __future__ import annotations

import logging
import re
import zlib
from abc import ABC, abstractmethod
from typing import Callable, Dict, Optional, Set

from ..symbols import (
    ClassSymbol,
    FieldSymbol,
    MethodSymbol,
    PackageSymbol,
    Symbol,
    SymbolKind,
    SymbolSet,
)
from .frameworks import match_interface, match_superclass
from .models import NamingIndex

logger = logging.getLogger(__name__)

ClassResolver = Callable[[str], Optional[ClassSymbol]]

_INVALID_HINT_CHARS = re.compile(r"[^A-Za-z0-9_$]")


class AliasProvider(ABC):
    """Synthesizes replacement names, one call per renamed symbol.

    Owns a ``NamingIndex`` and the set of names already handed out per kind.
    A name that was already emitted for the same kind gets
    ``collision_suffix`` plus a counter (``_2``, ``_3``). Uniqueness is per
    kind only: a class and a field may receive the same string.

    Args:
        index: Counter seeds; a fresh zeroed index when omitted.
        max_length: Original-name hints longer than this become a hash.
        preserve_original_hint: Append the sanitized original name.
        collision_suffix: Separator before the dedup counter.
        resolver: Looks up a declared class by qualified name for the
            superclass walk. ``init`` wires it to the run's symbol set.
    """

    def __init__(
        self,
        index: Optional[NamingIndex] = None,
        max_length: int = 64,
        preserve_original_hint: bool = True,
        collision_suffix: str = "_",
        resolver: Optional[ClassResolver] = None,
    ):
        self.index = index if index is not None else NamingIndex()
        self.max_length = max_length
        self.preserve_original_hint = preserve_original_hint
        self.collision_suffix = collision_suffix
        self.resolver = resolver
        self._emitted: Dict[SymbolKind, Set[str]] = {kind: set() for kind in SymbolKind}

    def init(self, symbols: SymbolSet) -> None:
        if self.resolver is None:
            self.resolver = symbols.resolve_class

    def name(self, symbol: Symbol) -> str:
        """Alias for any symbol, unique among aliases of its kind."""
        if symbol.kind is SymbolKind.PACKAGE:
            candidate = self.for_package(symbol)
        elif symbol.kind is SymbolKind.CLASS:
            candidate = self.for_class(symbol)
        elif symbol.kind is SymbolKind.FIELD:
            candidate = self.for_field(symbol)
        else:
            candidate = self.for_method(symbol)
        return self._unique(symbol.kind, candidate)

    @abstractmethod
    def for_package(self, pkg: PackageSymbol) -> str:
        pass

    @abstractmethod
    def for_class(self, cls: ClassSymbol) -> str:
        pass

    @abstractmethod
    def for_field(self, fld: FieldSymbol) -> str:
        pass

    @abstractmethod
    def for_method(self, mth: MethodSymbol) -> str:
        pass

    def _unique(self, kind: SymbolKind, candidate: str) -> str:
        emitted = self._emitted[kind]
        alias = candidate
        n = 2
        while alias in emitted:
            alias = f"{candidate}{self.collision_suffix}{n}"
            n += 1
        if alias != candidate:
            logger.debug("Alias %s already used, emitting %s", candidate, alias)
        emitted.add(alias)
        return alias

    def hint(self, name: Optional[str]) -> str:
        """Original-name segment, or "" when hints are off or the name is empty."""
        if not self.preserve_original_hint:
            return ""
        return format_name_part(name, self.max_length)

    def base_name(self, cls: ClassSymbol) -> str:
        """Framework prefix from the first matching ancestor.

        Walks ``cls`` and its declared superclasses. At each step the
        superclass is checked first, then the interfaces of the class at
        that step. Undeclared superclasses end the walk.
        """
        visited: Set[str] = set()
        current: Optional[ClassSymbol] = cls
        while current is not None and current.full_name not in visited:
            visited.add(current.full_name)
            found = match_superclass(current.super_type)
            if found is None:
                for iface in current.interfaces:
                    found = match_interface(iface)
                    if found is not None:
                        break
            if found is not None:
                return found
            if not current.super_type or self.resolver is None:
                break
            current = self.resolver(current.super_type)
        return ""


def format_name_part(name: Optional[str], max_length: int) -> str:
    """Sanitize a name for use inside an identifier.

    Over-length names are replaced by ``x`` and the 8-digit CRC-32 of the
    UTF-8 name, so the raw long string never ends up in an alias.
    """
    if not name:
        return ""
    if len(name) > max_length:
        return "x%08x" % zlib.crc32(name.encode("utf-8"))
    return _INVALID_HINT_CHARS.sub("", name)
