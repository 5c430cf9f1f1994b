"""Index-based aliases: a kind letter, a padded counter, the original name."""

from ..symbols import ClassSymbol, FieldSymbol, MethodSymbol, PackageSymbol, SymbolKind
from .base import AliasProvider


class IndexAliasProvider(AliasProvider):
    """Minimal, predictable naming used by the Default and Conservative modes.

    ``pkg003a``, ``ActivityC0012a``, ``f007b``, ``m015c`` (``mo015c`` for
    overriding methods).
    """

    def for_package(self, pkg: PackageSymbol) -> str:
        return "pkg%03d%s" % (self.index.next(SymbolKind.PACKAGE), self.hint(pkg.name))

    def for_class(self, cls: ClassSymbol) -> str:
        prefix = self.class_prefix(cls)
        return "%sC%04d%s" % (prefix, self.index.next(SymbolKind.CLASS), self.hint(cls.name))

    def for_field(self, fld: FieldSymbol) -> str:
        return "f%03d%s" % (self.index.next(SymbolKind.FIELD), self.hint(fld.name))

    def for_method(self, mth: MethodSymbol) -> str:
        prefix = "mo" if mth.is_override else "m"
        return "%s%03d%s" % (prefix, self.index.next(SymbolKind.METHOD), self.hint(mth.name))

    def class_prefix(self, cls: ClassSymbol) -> str:
        if cls.access.enum:
            return "Enum"
        if cls.access.interface:
            role = "Interface"
        elif cls.access.abstract:
            role = "Abstract"
        else:
            role = ""
        return role + self.base_name(cls)
