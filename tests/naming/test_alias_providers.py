"""Tests for the index and semantic alias providers."""

import zlib

import pytest

from deobf_insight.naming import (
    IndexAliasProvider,
    NamingIndex,
    SemanticAliasProvider,
    extract_meaningful_part,
    field_type_code,
    format_name_part,
    method_role,
)
from deobf_insight.symbols import (
    AccessFlags,
    ArgType,
    ClassSymbol,
    FieldSymbol,
    MethodSymbol,
    PackageSymbol,
    SymbolSet,
)


def make_class(full_name, *flag_names, **kwargs):
    return ClassSymbol(full_name=full_name, access=AccessFlags.from_names(flag_names), **kwargs)


def make_field(name, type_name="int", *flag_names):
    return FieldSymbol(
        name=name, type=ArgType.parse(type_name), access=AccessFlags.from_names(flag_names)
    )


def make_method(name, return_type="void", args=(), *flag_names, is_override=False):
    return MethodSymbol(
        name=name,
        return_type=ArgType.parse(return_type),
        arg_types=[ArgType.parse(a) for a in args],
        access=AccessFlags.from_names(flag_names),
        is_override=is_override,
    )


class TestNamingIndex:
    """Independent per-kind counters."""

    def test_counters_advance_independently(self):
        provider = IndexAliasProvider()
        provider.name(make_class("com.a.a"))
        provider.name(make_class("com.a.b"))
        provider.name(make_field("a"))
        assert provider.index.as_tuple() == (0, 2, 1, 0)

    def test_seeded_index_continues(self):
        index = NamingIndex(cls=41)
        provider = IndexAliasProvider(index=index)
        assert provider.name(make_class("com.a.a")) == "C0041a"
        assert index.cls == 42

    def test_negative_seed_rejected(self):
        with pytest.raises(ValueError):
            NamingIndex(field=-1)


class TestIndexAliasProvider:
    """Kind letter, padded index, original-name hint."""

    @pytest.fixture
    def provider(self):
        return IndexAliasProvider()

    def test_package(self, provider):
        assert provider.name(PackageSymbol(full_name="com.example.a")) == "pkg000a"

    def test_plain_class(self, provider):
        assert provider.name(make_class("com.a.b")) == "C0000b"

    def test_class_roles(self, provider):
        assert provider.name(make_class("com.a.a", "interface")) == "InterfaceC0000a"
        assert provider.name(make_class("com.a.b", "abstract")) == "AbstractC0001b"
        assert provider.name(make_class("com.a.c", "enum")) == "EnumC0002c"

    def test_framework_base(self, provider):
        cls = make_class("com.a.a", super_type="android.app.Activity")
        assert provider.name(cls) == "ActivityC0000a"

    def test_field_and_methods(self, provider):
        assert provider.name(make_field("a")) == "f000a"
        assert provider.name(make_method("a", is_override=True)) == "mo000a"
        assert provider.name(make_method("b")) == "m001b"

    def test_hint_off(self):
        provider = IndexAliasProvider(preserve_original_hint=False)
        assert provider.name(make_class("com.a.b")) == "C0000"

    def test_hint_is_sanitized(self, provider):
        assert provider.name(make_field("my-field")) == "f000myfield"

    def test_empty_name_gives_no_hint(self, provider):
        assert provider.name(FieldSymbol(name="")) == "f000"


class TestUniqueness:
    """No alias is handed out twice for the same kind in one run."""

    def test_colliding_candidate_gets_suffix(self):
        provider = IndexAliasProvider()
        assert provider.name(make_field("a")) == "f000a"
        provider.index.field = 0
        assert provider.name(make_field("a")) == "f000a_2"
        provider.index.field = 0
        assert provider.name(make_field("a")) == "f000a_3"

    def test_custom_collision_suffix(self):
        provider = IndexAliasProvider(collision_suffix="__")
        provider.name(make_field("a"))
        provider.index.field = 0
        assert provider.name(make_field("a")) == "f000a__2"

    @pytest.mark.parametrize("hint", [True, False])
    def test_many_symbols_get_distinct_names(self, hint):
        provider = SemanticAliasProvider(preserve_original_hint=hint)
        aliases = [provider.name(make_field("a")) for _ in range(1200)]
        assert len(set(aliases)) == 1200


class TestFormatNamePart:
    """Hint sanitizing and the hash fragment."""

    def test_long_name_becomes_hash(self):
        name = "VeryLongClassName"
        expected = "x%08x" % zlib.crc32(name.encode("utf-8"))
        assert format_name_part(name, 8) == expected
        assert "VeryLong" not in format_name_part(name, 8)

    def test_hash_is_stable(self):
        assert format_name_part("a" * 100, 64) == format_name_part("a" * 100, 64)

    def test_hash_used_in_class_alias(self):
        name = "VeryLongClassName"
        provider = IndexAliasProvider(max_length=8)
        alias = provider.name(make_class("com.a." + name))
        assert alias == "C0000x%08x" % zlib.crc32(name.encode("utf-8"))

    def test_sanitize_keeps_identifier_chars(self):
        assert format_name_part("a$b_c-d.e f", 64) == "a$b_cdef"

    def test_empty(self):
        assert format_name_part(None, 64) == ""
        assert format_name_part("", 64) == ""


class TestSemanticClasses:
    """Structural prefix and semantic tag on class aliases."""

    @pytest.fixture
    def provider(self):
        return SemanticAliasProvider()

    def test_singleton_with_static_instance_field(self, provider):
        cls = make_class(
            "com.a.a",
            fields=[make_field("b", "com.a.a", "static")],
            methods=[make_method("<init>", "void", (), "private")],
        )
        assert provider.name(cls) == "C0000Singlea"

    def test_singleton_with_get_instance(self, provider):
        cls = make_class(
            "com.a.a",
            methods=[
                make_method("<init>", "void", (), "private"),
                make_method("getInstance", "com.a.a", (), "static"),
            ],
        )
        assert provider.name(cls) == "C0000Singlea"

    def test_public_constructor_is_not_singleton(self, provider):
        cls = make_class(
            "com.a.a",
            fields=[make_field("b", "com.a.a", "static")],
            methods=[make_method("<init>", "void", (), "public")],
        )
        assert provider.name(cls) == "C0000a"

    def test_builder(self, provider):
        cls = make_class(
            "com.a.a",
            methods=[
                make_method("a", "com.a.a", ["int"]),
                make_method("b", "com.a.a", ["int"]),
                make_method("c", "com.a.a", ["int"]),
                make_method("build", "com.a.Thing"),
            ],
        )
        assert provider.name(cls) == "C0000Buildera"

    def test_callback_interface(self, provider):
        cls = make_class("com.a.a$b", "interface", methods=[make_method("onDone")])
        assert provider.name(cls) == "IC0000Cbb"

    def test_null_member_names_tolerated(self, provider):
        callback = make_class("com.a.a$b", "interface", methods=[make_method(None)])
        single = make_class(
            "com.a.c",
            methods=[
                make_method("<init>", "void", (), "private"),
                make_method(None, "int", (), "static"),
            ],
        )
        assert provider.name(callback) == "IC0000b"
        assert provider.name(single) == "C0001c"

    def test_interface_tag_beats_singleton(self, provider):
        cls = make_class(
            "com.a.a",
            interfaces=["java.io.Serializable"],
            fields=[make_field("b", "com.a.a", "static")],
            methods=[make_method("<init>", "void", (), "private")],
        )
        assert provider.name(cls) == "C0000Sera"

    def test_semantic_naming_off(self):
        provider = SemanticAliasProvider(use_semantic_naming=False)
        cls = make_class("com.a.a", interfaces=["java.io.Serializable"])
        assert provider.name(cls) == "C0000a"

    def test_structural_prefix_off(self):
        provider = SemanticAliasProvider(use_structural_prefix=False)
        cls = make_class("com.a.a", "interface", super_type="android.app.Activity")
        assert provider.name(cls) == "C0000a"

    def test_hint_off(self):
        provider = SemanticAliasProvider(preserve_original_hint=False)
        cls = make_class("com.a.a", super_type="android.app.Activity")
        assert provider.name(cls) == "ActivityC0000"


class TestFrameworkBase:
    """Walking declared superclasses for a framework prefix."""

    def test_inherited_through_declared_superclass(self):
        parent = make_class("com.a.b", super_type="android.widget.FrameLayout")
        child = make_class("com.a.c", super_type="com.a.b")
        provider = SemanticAliasProvider()
        provider.init(SymbolSet([parent, child]))
        assert provider.name(child) == "FrameLayoutC0000c"

    def test_interface_of_ancestor(self):
        parent = make_class("com.a.b", interfaces=["java.lang.Runnable"])
        child = make_class("com.a.c", super_type="com.a.b")
        provider = SemanticAliasProvider()
        provider.init(SymbolSet([parent, child]))
        assert provider.base_name(child) == "Runnable"

    def test_unresolved_superclass(self):
        provider = SemanticAliasProvider()
        provider.init(SymbolSet([]))
        assert provider.base_name(make_class("com.a.a", super_type="com.lib.Base")) == ""

    def test_cycle_terminates(self):
        a = make_class("com.a.a", super_type="com.a.b")
        b = make_class("com.a.b", super_type="com.a.a")
        provider = SemanticAliasProvider()
        provider.init(SymbolSet([a, b]))
        assert provider.base_name(a) == ""

    @pytest.mark.parametrize(
        "super_type,prefix",
        [
            ("java.lang.Thread", "Thread"),
            ("java.io.IOException", "Exception"),
            ("android.view.View$BaseSavedState", "ViewBaseSavedState"),
            ("androidx.fragment.app.Fragment", "Fragment"),
            ("java.util.ArrayList", ""),
        ],
    )
    def test_superclass_rules(self, super_type, prefix):
        assert SemanticAliasProvider().base_name(make_class("com.a.a", super_type=super_type)) == prefix

    def test_superclass_checked_before_interfaces(self):
        cls = make_class(
            "com.a.a", super_type="android.app.Service", interfaces=["java.lang.Runnable"]
        )
        assert SemanticAliasProvider().base_name(cls) == "Service"


class TestSemanticMembers:
    """Field type codes and method roles."""

    @pytest.mark.parametrize(
        "type_name,code",
        [
            ("int", "i"),
            ("boolean", "is"),
            ("long", "l"),
            ("char", "c"),
            ("java.lang.String", "str"),
            ("java.util.ArrayList", "list"),
            ("java.util.HashMap", "map"),
            ("android.content.Context", "ctx"),
            ("int[]", "arr"),
            ("com.a.Foo", "obj"),
            (None, "field"),
        ],
    )
    def test_field_type_code(self, type_name, code):
        assert field_type_code(ArgType.parse(type_name)) == code

    def test_field_alias(self):
        provider = SemanticAliasProvider()
        assert provider.name(make_field("a", "int")) == "i000a"
        assert provider.name(make_field("b", "java.lang.String")) == "str001b"
        assert provider.name(make_field("c", None)) == "field002c"

    @pytest.mark.parametrize(
        "method,role",
        [
            (make_method("a", "void", is_override=True), "mo"),
            (make_method("a", "boolean", ["int"]), "check"),
            (make_method("a", "int"), "get"),
            (make_method("a", "void", ["int"]), "set"),
            (make_method("a", "void", ["int", "int"]), "do"),
            (make_method("a", "void"), "do"),
            (make_method("a", "int", ["int"]), "m"),
            (make_method("a", None), "m"),
        ],
    )
    def test_method_role(self, method, role):
        assert method_role(method) == role

    def test_method_alias_with_return_hint(self):
        provider = SemanticAliasProvider()
        assert provider.name(make_method("a", "boolean")) == "check000Boola"
        assert provider.name(make_method("b", "java.lang.String")) == "get001Strb"
        assert provider.name(make_method("c", "java.util.List", ["int", "int"])) == "m002Listc"
        assert provider.name(make_method("d", None)) == "m003d"

    def test_structural_prefix_off_members(self):
        provider = SemanticAliasProvider(use_structural_prefix=False)
        assert provider.name(make_field("a", "int")) == "f000a"
        assert provider.name(make_method("a", "boolean")) == "m000a"
        assert provider.name(make_method("b", "java.lang.String")) == "m001b"

    def test_hint_off_members(self):
        provider = SemanticAliasProvider(preserve_original_hint=False)
        assert provider.name(make_field("a", "int")) == "i000"


class TestSemanticPackages:
    """Package aliases keep the meaningful part of the segment."""

    @pytest.mark.parametrize(
        "name,part",
        [("network2", "network"), ("__core$", "core"), ("b3", ""), ("ab", ""), (None, "")],
    )
    def test_extract_meaningful_part(self, name, part):
        assert extract_meaningful_part(name) == part

    def test_package_alias(self):
        provider = SemanticAliasProvider()
        assert provider.name(PackageSymbol(full_name="com.example.network2")) == "pkg000network"
        assert provider.name(PackageSymbol(full_name="com.a.b3")) == "pkg001"

    def test_package_alias_ignores_hint_switch(self):
        provider = SemanticAliasProvider(preserve_original_hint=False)
        assert provider.name(PackageSymbol(full_name="com.example.network")) == "pkg000network"

    def test_package_hint_off(self):
        provider = SemanticAliasProvider(use_package_hint=False)
        assert provider.name(PackageSymbol(full_name="com.example.network")) == "pkg000"
