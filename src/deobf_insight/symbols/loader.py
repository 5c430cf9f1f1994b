"""Load a symbol dump (JSON) into a SymbolSet.

Format::

    {
      "packages": [{"name": "com.a", "keep": false}],
      "classes": [
        {
          "name": "com.a.b",
          "flags": ["public", "abstract"],
          "super": "android.app.Activity",
          "interfaces": ["java.lang.Runnable"],
          "fields": [{"name": "a", "type": "int", "flags": ["static"]}],
          "methods": [{"name": "a", "return": "void", "args": ["int"], "arg_names": ["p0"],
                     "override": false}]
        }
      ]
    }

Only ``classes[].name`` is required.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict

from ..exceptions import SymbolLoadError
from .models import AccessFlags, ArgType, ClassSymbol, FieldSymbol, MethodSymbol, PackageSymbol
from .symbol_set import SymbolSet

logger = logging.getLogger(__name__)


def load_symbol_set(path: Path) -> SymbolSet:
    """Read and decode a JSON symbol dump.

    Raises:
        SymbolLoadError: If the file is missing, unreadable or malformed.
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise SymbolLoadError(path, str(e)) from e
    except json.JSONDecodeError as e:
        raise SymbolLoadError(path, f"invalid JSON: {e}") from e

    try:
        symbols = symbol_set_from_dict(data)
    except (KeyError, TypeError, AttributeError) as e:
        raise SymbolLoadError(path, f"malformed symbol dump: {e}") from e

    logger.debug("Loaded %d classes from %s", len(symbols.classes), path)
    return symbols


def symbol_set_from_dict(data: Dict[str, Any]) -> SymbolSet:
    packages = [
        PackageSymbol(full_name=_qualified_name(p), keep=bool(p.get("keep", False)))
        for p in data.get("packages", [])
    ]
    classes = [_class_from_dict(c) for c in data.get("classes", [])]
    return SymbolSet(classes, packages)


def _qualified_name(raw: Dict[str, Any]) -> str:
    # Member names may be null; package and class names carry the hierarchy
    name = raw["name"]
    if not isinstance(name, str) or not name:
        raise TypeError(f"expected a qualified name, got {name!r}")
    return name


def _class_from_dict(raw: Dict[str, Any]) -> ClassSymbol:
    return ClassSymbol(
        full_name=_qualified_name(raw),
        access=AccessFlags.from_names(raw.get("flags", [])),
        super_type=raw.get("super"),
        interfaces=list(raw.get("interfaces", [])),
        fields=[
            FieldSymbol(
                name=f["name"],
                type=ArgType.parse(f.get("type")),
                access=AccessFlags.from_names(f.get("flags", [])),
                keep=bool(f.get("keep", False)),
            )
            for f in raw.get("fields", [])
        ],
        methods=[
            MethodSymbol(
                name=m["name"],
                return_type=ArgType.parse(m.get("return")),
                arg_types=[ArgType.parse(a) for a in m.get("args", [])],
                arg_names=list(m.get("arg_names", [])),
                access=AccessFlags.from_names(m.get("flags", [])),
                is_override=bool(m.get("override", False)),
                keep=bool(m.get("keep", False)),
            )
            for m in raw.get("methods", [])
        ],
        keep=bool(raw.get("keep", False)),
    )
