"""Alias synthesis: replacement names for renamed symbols.

Usage:
    from deobf_insight.naming import NamingIndex, SemanticAliasProvider

    provider = SemanticAliasProvider(index=NamingIndex(cls=120))
    provider.init(symbols)
    provider.name(cls)  # "ActivityC0120Singlea"
"""

from .base import AliasProvider, format_name_part
from .frameworks import FrameworkRule, framework_simple_name, interface_tag
from .index_provider import IndexAliasProvider
from .models import NamingIndex
from .parameters import (
    is_obfuscated_parameter_name,
    suggest_parameter_name,
    suggest_parameter_names,
)
from .semantic import (
    SemanticAliasProvider,
    extract_meaningful_part,
    field_type_code,
    has_builder_pattern,
    has_callback_pattern,
    has_singleton_pattern,
    method_role,
    return_type_hint,
)

__all__ = [
    "AliasProvider",
    "IndexAliasProvider",
    "SemanticAliasProvider",
    "NamingIndex",
    "format_name_part",
    # Frameworks
    "FrameworkRule",
    "framework_simple_name",
    "interface_tag",
    # Semantic helpers
    "extract_meaningful_part",
    "field_type_code",
    "has_builder_pattern",
    "has_callback_pattern",
    "has_singleton_pattern",
    "method_role",
    "return_type_hint",
    # Parameters
    "is_obfuscated_parameter_name",
    "suggest_parameter_name",
    "suggest_parameter_names",
]
