"""Symbol model: the read-only facts the rename heuristics consume."""

from .loader import load_symbol_set, symbol_set_from_dict
from .models import (
    BOOLEAN,
    BYTE,
    CHAR,
    DOUBLE,
    FLOAT,
    INT,
    LONG,
    OBJECT,
    SHORT,
    STRING,
    VOID,
    AccessFlags,
    ArgType,
    ClassSymbol,
    FieldSymbol,
    MethodSymbol,
    PackageSymbol,
    Symbol,
    SymbolKind,
)
from .symbol_set import SymbolSet

__all__ = [
    "AccessFlags",
    "ArgType",
    "ClassSymbol",
    "FieldSymbol",
    "MethodSymbol",
    "PackageSymbol",
    "Symbol",
    "SymbolKind",
    "SymbolSet",
    "load_symbol_set",
    "symbol_set_from_dict",
    # Type constants
    "BOOLEAN",
    "BYTE",
    "CHAR",
    "SHORT",
    "INT",
    "LONG",
    "FLOAT",
    "DOUBLE",
    "VOID",
    "STRING",
    "OBJECT",
]
