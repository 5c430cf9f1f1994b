"""SymbolSet: the full collection of symbols one rename run works over."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from .models import ClassSymbol, FieldSymbol, MethodSymbol, PackageSymbol, Symbol


class SymbolSet:
    """Ordered, read-only view over packages, classes and their members.

    Packages not listed explicitly are derived from class names, one
    ``PackageSymbol`` per segment (``com``, ``com.a``, ``com.a.b``).
    Iteration order is insertion order and is stable across calls.
    """

    def __init__(
        self,
        classes: Iterable[ClassSymbol],
        packages: Optional[Iterable[PackageSymbol]] = None,
    ):
        self._classes: list[ClassSymbol] = list(classes)
        self._by_name: dict[str, ClassSymbol] = {c.full_name: c for c in self._classes}

        pkgs: dict[str, PackageSymbol] = {}
        for pkg in packages or []:
            pkgs.setdefault(pkg.full_name, pkg)
        for cls in self._classes:
            parts = cls.package.split(".") if cls.package else []
            for i in range(1, len(parts) + 1):
                full = ".".join(parts[:i])
                if full not in pkgs:
                    pkgs[full] = PackageSymbol(full_name=full)
        self._packages: list[PackageSymbol] = list(pkgs.values())

    @property
    def classes(self) -> list[ClassSymbol]:
        return list(self._classes)

    @property
    def packages(self) -> list[PackageSymbol]:
        return list(self._packages)

    def fields(self) -> Iterator[FieldSymbol]:
        for cls in self._classes:
            yield from cls.fields

    def methods(self) -> Iterator[MethodSymbol]:
        for cls in self._classes:
            yield from cls.methods

    def resolve_class(self, qualified_name: Optional[str]) -> Optional[ClassSymbol]:
        """Look up a declared class. Unknown or library classes give None."""
        if not qualified_name:
            return None
        return self._by_name.get(qualified_name)

    def __iter__(self) -> Iterator[Symbol]:
        """Packages first, then every class followed by its fields and methods."""
        yield from self._packages
        for cls in self._classes:
            yield cls
            yield from cls.fields
            yield from cls.methods

    def __len__(self) -> int:
        return len(self._packages) + sum(
            1 + len(c.fields) + len(c.methods) for c in self._classes
        )
