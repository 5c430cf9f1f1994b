"""Naming counters shared by the alias providers."""

from dataclasses import dataclass

from ..symbols import SymbolKind


@dataclass
class NamingIndex:
    """Four independent counters, one per symbol kind.

    Seeded from outside to resume an earlier run without reusing numbers.
    Each counter moves forward exactly once per synthesized name of its
    kind and is never reset during a run.
    """

    package: int = 0
    cls: int = 0
    field: int = 0
    method: int = 0

    def __post_init__(self) -> None:
        for value in (self.package, self.cls, self.field, self.method):
            if value < 0:
                raise ValueError("naming index seeds must be non-negative")

    def next(self, kind: SymbolKind) -> int:
        """Return the current value for ``kind`` and advance it."""
        attr = _COUNTER_ATTRS[kind]
        value = getattr(self, attr)
        setattr(self, attr, value + 1)
        return value

    def as_tuple(self) -> tuple:
        return (self.package, self.cls, self.field, self.method)


_COUNTER_ATTRS = {
    SymbolKind.PACKAGE: "package",
    SymbolKind.CLASS: "cls",
    SymbolKind.FIELD: "field",
    SymbolKind.METHOD: "method",
}
