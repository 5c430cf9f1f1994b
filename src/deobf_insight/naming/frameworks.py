"""Well-known framework base types used as class alias prefixes.

A class extending ``android.app.Activity`` gets an ``Activity`` prefix in
its alias, a class implementing ``java.lang.Runnable`` a ``Runnable`` one.
Rules are tried in table order; the first match wins.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class FrameworkRule:
    """One table entry.

    Attributes:
        applies_to: ``"super"`` for the superclass, ``"interface"`` for
            declared interfaces
        match: ``"prefix"``, ``"exact"`` or ``"contains"``
        pattern: Text matched against the qualified type name
        label: Fixed prefix; when None the type's simple name is used
    """

    applies_to: str
    match: str
    pattern: str
    label: Optional[str] = None

    def matches(self, qualified_name: str) -> bool:
        if self.match == "prefix":
            return qualified_name.startswith(self.pattern)
        if self.match == "exact":
            return qualified_name == self.pattern
        return self.pattern in qualified_name

    def prefix_for(self, qualified_name: str) -> str:
        return self.label if self.label is not None else framework_simple_name(qualified_name)


SUPERCLASS_RULES: Tuple[FrameworkRule, ...] = (
    FrameworkRule("super", "prefix", "android.app."),
    FrameworkRule("super", "prefix", "android.os."),
    FrameworkRule("super", "prefix", "android.view."),
    FrameworkRule("super", "prefix", "android.widget."),
    FrameworkRule("super", "prefix", "android.content."),
    FrameworkRule("super", "prefix", "androidx."),
    FrameworkRule("super", "prefix", "java.lang.Thread", label="Thread"),
    FrameworkRule("super", "prefix", "java.lang.Exception", label="Exception"),
    FrameworkRule("super", "contains", "Exception", label="Exception"),
)

INTERFACE_RULES: Tuple[FrameworkRule, ...] = (
    FrameworkRule("interface", "exact", "java.lang.Runnable", label="Runnable"),
    FrameworkRule("interface", "prefix", "java.util.concurrent."),
    FrameworkRule("interface", "prefix", "android.view."),
    FrameworkRule("interface", "prefix", "android.content."),
)

# Interface name fragment -> semantic tag, first interface that matches any wins
INTERFACE_TAGS: Tuple[Tuple[str, str], ...] = (
    ("Serializable", "Ser"),
    ("Parcelable", "Parcel"),
    ("Comparable", "Cmp"),
    ("Cloneable", "Clone"),
    ("Iterable", "Iter"),
    ("Collection", "Coll"),
)


def framework_simple_name(qualified_name: str) -> str:
    """``android.view.View$OnClickListener`` -> ``ViewOnClickListener``."""
    return qualified_name.rsplit(".", 1)[-1].replace("$", "")


def match_superclass(qualified_name: Optional[str]) -> Optional[str]:
    if not qualified_name:
        return None
    for rule in SUPERCLASS_RULES:
        if rule.matches(qualified_name):
            return rule.prefix_for(qualified_name)
    return None


def match_interface(qualified_name: Optional[str]) -> Optional[str]:
    if not qualified_name:
        return None
    for rule in INTERFACE_RULES:
        if rule.matches(qualified_name):
            return rule.prefix_for(qualified_name)
    return None


def interface_tag(interfaces) -> str:
    for name in interfaces:
        for fragment, tag in INTERFACE_TAGS:
            if fragment in name:
                return tag
    return ""
