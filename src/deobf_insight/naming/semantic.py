"""Semantic aliases built from a symbol's structure.

Aliases are composed of independent segments:

- structural prefix: class role (``I``, ``Abstract``, ``Enum``) plus the
  framework base found on the superclass chain; field type code; method
  role inferred from arity and return type
- per-kind index, zero padded
- semantic tag (classes): interface tag, singleton, builder or callback
- return hint (methods)
- original-name hint

A segment whose switch is off renders as "", never as a placeholder.
"""

from __future__ import annotations

import re
from typing import Optional

from ..symbols import (
    BOOLEAN,
    BYTE,
    CHAR,
    DOUBLE,
    FLOAT,
    INT,
    LONG,
    SHORT,
    STRING,
    VOID,
    ArgType,
    ClassSymbol,
    FieldSymbol,
    MethodSymbol,
    PackageSymbol,
    SymbolKind,
)
from .base import AliasProvider, format_name_part
from .frameworks import interface_tag

PRIMITIVE_FIELD_CODES = {
    BOOLEAN: "is",
    INT: "i",
    LONG: "l",
    FLOAT: "f",
    DOUBLE: "d",
    BYTE: "b",
    SHORT: "s",
    CHAR: "c",
}

# Fragment of the qualified type name -> field code, first match wins
OBJECT_FIELD_CODES = (
    ("List", "list"),
    ("Map", "map"),
    ("Set", "set"),
    ("View", "view"),
    ("Context", "ctx"),
    ("Handler", "handler"),
    ("Intent", "intent"),
    ("Bundle", "bundle"),
)

NULL_FIELD_CODE = "field"

_TRAILING_DIGITS = re.compile(r"[0-9]+$")
_LEADING_MARKS = re.compile(r"^[_$]+")
_TRAILING_MARKS = re.compile(r"[_$]+$")


class SemanticAliasProvider(AliasProvider):
    """Alias provider for the Enhanced and Aggressive modes.

    Args:
        use_semantic_naming: Add the class tag segment.
        use_structural_prefix: Add class role and framework prefixes and
            method return hints; field and method roles fall back to plain
            ``f`` and ``m`` when off.
        use_package_hint: Add the meaningful part of the package segment.
        **kwargs: Passed to ``AliasProvider``.
    """

    def __init__(
        self,
        use_semantic_naming: bool = True,
        use_structural_prefix: bool = True,
        use_package_hint: bool = True,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self.use_semantic_naming = use_semantic_naming
        self.use_structural_prefix = use_structural_prefix
        self.use_package_hint = use_package_hint

    def for_package(self, pkg: PackageSymbol) -> str:
        meaningful = extract_meaningful_part(pkg.name) if self.use_package_hint else ""
        return "pkg%03d%s" % (
            self.index.next(SymbolKind.PACKAGE),
            format_name_part(meaningful, self.max_length),
        )

    def for_class(self, cls: ClassSymbol) -> str:
        prefix = self.class_prefix(cls) if self.use_structural_prefix else ""
        index = self.index.next(SymbolKind.CLASS)
        tag = self.class_tag(cls) if self.use_semantic_naming else ""
        return "%sC%04d%s%s" % (prefix, index, tag, self.hint(cls.name))

    def for_field(self, fld: FieldSymbol) -> str:
        code = field_type_code(fld.type) if self.use_structural_prefix else "f"
        return "%s%03d%s" % (code, self.index.next(SymbolKind.FIELD), self.hint(fld.name))

    def for_method(self, mth: MethodSymbol) -> str:
        if self.use_structural_prefix:
            role, ret_hint = method_role(mth), return_type_hint(mth.return_type)
        else:
            role, ret_hint = "m", ""
        index = self.index.next(SymbolKind.METHOD)
        return "%s%03d%s%s" % (role, index, ret_hint, self.hint(mth.name))

    def class_prefix(self, cls: ClassSymbol) -> str:
        if cls.access.enum:
            return "Enum"
        if cls.access.interface:
            role = "I"
        elif cls.access.abstract:
            role = "Abstract"
        else:
            role = ""
        return role + self.base_name(cls)

    def class_tag(self, cls: ClassSymbol) -> str:
        """At most one tag: interface tag first, then singleton, builder, callback."""
        tag = interface_tag(cls.interfaces)
        if tag:
            return tag
        if has_singleton_pattern(cls):
            return "Single"
        if has_builder_pattern(cls):
            return "Builder"
        if has_callback_pattern(cls):
            return "Cb"
        return ""


def has_singleton_pattern(cls: ClassSymbol) -> bool:
    """Private constructor plus a static self-typed field or static ``*instance*`` method."""
    private_ctor = any(m.is_constructor and m.access.private for m in cls.methods)
    if not private_ctor:
        return False
    own_type = cls.type
    static_instance = any(f.access.static and f.type == own_type for f in cls.fields)
    get_instance = any(
        m.access.static and "instance" in (m.name or "").lower() for m in cls.methods
    )
    return static_instance or get_instance


def has_builder_pattern(cls: ClassSymbol) -> bool:
    """Three or more methods returning the class itself, plus ``build`` or ``create``."""
    own_type = cls.type
    fluent = sum(1 for m in cls.methods if m.return_type == own_type)
    has_build = any(m.name in ("build", "create") for m in cls.methods)
    return fluent >= 3 and has_build


def has_callback_pattern(cls: ClassSymbol) -> bool:
    if not cls.access.interface:
        return False
    for mth in cls.methods:
        name = (mth.name or "").lower()
        if name.startswith("on") or "callback" in name or "listener" in name or "handler" in name:
            return True
    return False


def field_type_code(arg_type: Optional[ArgType]) -> str:
    if arg_type is None:
        return NULL_FIELD_CODE
    code = PRIMITIVE_FIELD_CODES.get(arg_type)
    if code is not None:
        return code
    if arg_type.is_array:
        return "arr"
    if arg_type.is_object:
        if arg_type == STRING:
            return "str"
        for fragment, code in OBJECT_FIELD_CODES:
            if fragment in arg_type.name:
                return code
        return "obj"
    return "f"


def method_role(mth: MethodSymbol) -> str:
    """``mo`` override, ``check`` predicate, ``get``/``set`` accessor, ``do`` action, else ``m``."""
    if mth.is_override:
        return "mo"
    ret = mth.return_type
    if ret is None:
        return "m"
    if ret == BOOLEAN:
        return "check"
    if mth.arg_count == 0 and ret != VOID:
        return "get"
    if mth.arg_count == 1 and ret == VOID:
        return "set"
    if ret == VOID:
        return "do"
    return "m"


def return_type_hint(ret: Optional[ArgType]) -> str:
    if ret is None or ret == VOID:
        return ""
    if ret == BOOLEAN:
        return "Bool"
    if ret.is_object:
        if ret == STRING:
            return "Str"
        if "List" in ret.name:
            return "List"
        if "Map" in ret.name:
            return "Map"
    return ""


def extract_meaningful_part(name: Optional[str]) -> str:
    """Strip trailing digits and edge ``_``/``$``; two characters or fewer give ""."""
    if not name:
        return ""
    cleaned = _TRAILING_DIGITS.sub("", name)
    cleaned = _LEADING_MARKS.sub("", cleaned)
    cleaned = _TRAILING_MARKS.sub("", cleaned)
    if len(cleaned) <= 2:
        return ""
    return cleaned
