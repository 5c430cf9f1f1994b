"""Parameter-name suggestions from argument types.

Decompiled parameters usually carry register or positional names
(``p0``, ``arg1``, ``r3``). These helpers recognise such names and propose
readable replacements from the parameter's type.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Optional

from ..symbols import BOOLEAN, BYTE, CHAR, DOUBLE, FLOAT, INT, LONG, SHORT, ArgType, MethodSymbol

OBFUSCATED_PARAM_PATTERN = re.compile(
    r"[a-z]"  # single letter
    r"|[a-z][0-9]+"  # letter + number
    r"|arg[0-9]+"
    r"|param[0-9]+"
    r"|var[0-9]+"
    r"|p[0-9]+"
    r"|r[0-9]+"  # register
    r"|this\$[0-9]+"  # outer instance
)

RESERVED_PARAM_NAMES = frozenset({"this", "super", "self"})

INT_PARAM_NAMES = ("index", "count", "size", "position", "id", "offset", "length")
STRING_PARAM_NAMES = ("str", "text", "name", "value", "message", "content")

# Exact qualified name -> suggestion
EXACT_OBJECT_NAMES = {
    "android.content.Context": "context",
    "android.content.Intent": "intent",
    "android.os.Bundle": "bundle",
    "android.view.View": "view",
}

# Name fragment -> suggestion, first match wins
FRAGMENT_OBJECT_NAMES = (
    ("Activity", "activity"),
    ("Fragment", "fragment"),
    ("Handler", "handler"),
    ("Listener", "listener"),
    ("Callback", "callback"),
    ("Adapter", "adapter"),
    ("List", "list"),
    ("Map", "map"),
    ("Set", "set"),
    ("Collection", "collection"),
    ("Iterator", "iterator"),
)

MAX_DERIVED_NAME_LENGTH = 12


def is_obfuscated_parameter_name(name: Optional[str]) -> bool:
    if not name or name in RESERVED_PARAM_NAMES:
        return False
    return OBFUSCATED_PARAM_PATTERN.fullmatch(name) is not None


def suggest_parameter_name(arg_type: Optional[ArgType], index: int) -> str:
    """Readable name for the parameter at ``index`` of the given type."""
    if arg_type is None:
        return f"param{index}"

    if arg_type == BOOLEAN:
        return _numbered("flag", index)
    if arg_type == INT:
        return INT_PARAM_NAMES[index] if index < len(INT_PARAM_NAMES) else f"n{index}"
    if arg_type in (LONG, SHORT):
        return _numbered("value", index)
    if arg_type in (FLOAT, DOUBLE):
        return _numbered("number", index)
    if arg_type == BYTE:
        return _numbered("b", index)
    if arg_type == CHAR:
        return _numbered("ch", index)

    if arg_type.is_array:
        return suggest_parameter_name(arg_type.element, 0) + "Array"

    if arg_type.is_object:
        return _suggest_object_name(arg_type.name, index)

    return f"param{index}"


def suggest_parameter_names(method: MethodSymbol, reserved: Iterable[str] = ()) -> List[str]:
    """One suggestion per argument; repeats get ``2``, ``3``... appended.

    Names in ``reserved`` (parameters that keep their name) are never suggested.
    """
    used: set = set(reserved)
    suggestions: List[str] = []
    for i, arg_type in enumerate(method.arg_types):
        name = suggest_parameter_name(arg_type, i)
        if name in used:
            suffix = 2
            while f"{name}{suffix}" in used:
                suffix += 1
            name = f"{name}{suffix}"
        used.add(name)
        suggestions.append(name)
    return suggestions


def _numbered(base: str, index: int) -> str:
    return base if index == 0 else f"{base}{index}"


def _suggest_object_name(qualified: str, index: int) -> str:
    if qualified == "java.lang.String":
        return STRING_PARAM_NAMES[index] if index < len(STRING_PARAM_NAMES) else f"str{index}"

    exact = EXACT_OBJECT_NAMES.get(qualified)
    if exact is not None:
        return exact
    for fragment, suggestion in FRAGMENT_OBJECT_NAMES:
        if fragment in qualified:
            return suggestion

    if qualified == "java.lang.Object":
        return "obj"
    if qualified == "java.lang.Class":
        return "clazz"
    if qualified == "java.lang.Throwable" or "Exception" in qualified:
        return "exception"
    if qualified == "java.io.File":
        return "file"
    if "InputStream" in qualified or "OutputStream" in qualified:
        return "stream"
    if "Reader" in qualified or "Writer" in qualified:
        return "reader"

    simple = re.split(r"[.$]", qualified)[-1]
    return _name_from_class(simple, index)


def _name_from_class(simple_name: str, index: int) -> str:
    """First word of the class name, lower camel case, at most 12 characters.

    A leading run of capitals is kept as one word (``URLConnection`` gives
    ``urlconnectio``).
    """
    if not simple_name:
        return f"obj{index}"
    chars = [simple_name[0].lower()]
    last_upper = True
    for ch in simple_name[1:]:
        if len(chars) >= MAX_DERIVED_NAME_LENGTH:
            break
        if ch.isupper():
            if not last_upper:
                break
            chars.append(ch.lower())
            last_upper = True
        else:
            chars.append(ch)
            last_upper = False
    result = "".join(chars)
    return f"{result}{index}" if index > 0 else result
