"""Shared test fixtures and symbol builders for deobf-insight tests."""

from typing import Iterable, Optional

import pytest

from deobf_insight.config import DeobfConfig
from deobf_insight.symbols import (
    AccessFlags,
    ArgType,
    ClassSymbol,
    FieldSymbol,
    MethodSymbol,
    SymbolSet,
)


def flags(*names: str) -> AccessFlags:
    return AccessFlags.from_names(names)


def make_field(
    name: str, type_name: Optional[str] = "int", *flag_names: str, **kwargs
) -> FieldSymbol:
    return FieldSymbol(
        name=name, type=ArgType.parse(type_name), access=flags(*flag_names), **kwargs
    )


def make_method(
    name: str,
    return_type: Optional[str] = "void",
    args: Iterable[Optional[str]] = (),
    *flag_names: str,
    **kwargs,
) -> MethodSymbol:
    return MethodSymbol(
        name=name,
        return_type=ArgType.parse(return_type),
        arg_types=[ArgType.parse(a) for a in args],
        access=flags(*flag_names),
        **kwargs,
    )


def make_class(
    full_name: str,
    *flag_names: str,
    super_type: Optional[str] = None,
    interfaces: Iterable[str] = (),
    fields: Iterable[FieldSymbol] = (),
    methods: Iterable[MethodSymbol] = (),
    **kwargs,
) -> ClassSymbol:
    return ClassSymbol(
        full_name=full_name,
        access=flags(*flag_names),
        super_type=super_type,
        interfaces=list(interfaces),
        fields=list(fields),
        methods=list(methods),
        **kwargs,
    )


@pytest.fixture
def config():
    """Default configuration."""
    return DeobfConfig()


@pytest.fixture
def proguard_symbols():
    """A small ProGuard-style app: short names everywhere except the framework API."""
    return SymbolSet(
        [
            make_class(
                "com.example.a.a",
                super_type="android.app.Activity",
                fields=[make_field("a", "int"), make_field("b", "java.lang.String")],
                methods=[
                    make_method("<init>", "void"),
                    make_method("onCreate", "void", ["android.os.Bundle"], is_override=True),
                    make_method("a", "boolean"),
                    make_method("b", "void", ["int"]),
                ],
            ),
            make_class(
                "com.example.a.b",
                fields=[make_field("c", "long")],
                methods=[make_method("a", "java.lang.String")],
            ),
            make_class(
                "com.example.a.b$a",
                "interface",
                methods=[make_method("a", "void", ["int"], "abstract")],
            ),
        ]
    )


@pytest.fixture
def clean_symbols():
    """Readable, unobfuscated code."""
    return SymbolSet(
        [
            make_class(
                "com.example.app.MainActivity",
                super_type="android.app.Activity",
                fields=[make_field("adapter", "com.example.app.UserAdapter")],
                methods=[
                    make_method("<init>", "void"),
                    make_method("onCreate", "void", ["android.os.Bundle"], is_override=True),
                    make_method("loadUsers", "void"),
                ],
            ),
            make_class(
                "com.example.app.UserAdapter",
                fields=[make_field("users", "java.util.List")],
                methods=[make_method("getItemCount", "int")],
            ),
        ]
    )
