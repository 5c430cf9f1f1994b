"""Read-only symbol model consumed by the rename heuristics.

The decompiler owns the real symbol graph; these dataclasses carry only the
facts the conditions, classifiers and alias providers read:

- name / qualified name
- kind (package, class, field, method)
- declared, return and argument types
- access flags
- superclass, interfaces and enclosing class

Nothing in this package mutates a symbol. Renames are applied downstream.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Iterable, Optional, Union


class SymbolKind(Enum):
    """The four kinds of named program entities."""

    PACKAGE = "package"
    CLASS = "class"
    FIELD = "field"
    METHOD = "method"


PRIMITIVE_TYPES = frozenset(
    {"boolean", "byte", "char", "short", "int", "long", "float", "double", "void"}
)


@dataclass(frozen=True)
class ArgType:
    """A type reference: primitive keyword, qualified object name, or array.

    Attributes:
        name: Primitive keyword ("int") or qualified class name
            ("java.lang.String"). Empty for arrays.
        element: Element type when this is an array type.
    """

    name: str = ""
    element: Optional[ArgType] = None

    @classmethod
    def of_object(cls, qualified_name: str) -> ArgType:
        return cls(name=qualified_name)

    @classmethod
    def array_of(cls, element: ArgType) -> ArgType:
        return cls(element=element)

    @classmethod
    def parse(cls, text: Optional[str]) -> Optional[ArgType]:
        """Parse a Java-style type name ("int", "java.util.List", "byte[][]")."""
        if not text:
            return None
        text = text.strip()
        if text.endswith("[]"):
            inner = cls.parse(text[:-2])
            return cls.array_of(inner) if inner is not None else None
        return cls(name=text)

    @property
    def is_array(self) -> bool:
        return self.element is not None

    @property
    def is_primitive(self) -> bool:
        return self.element is None and self.name in PRIMITIVE_TYPES

    @property
    def is_object(self) -> bool:
        return self.element is None and bool(self.name) and self.name not in PRIMITIVE_TYPES

    @property
    def simple_name(self) -> str:
        """Class name without package and outer-class prefix."""
        if self.is_array:
            return self.element.simple_name if self.element else ""
        tail = self.name.rsplit(".", 1)[-1]
        return tail.rsplit("$", 1)[-1]

    def __str__(self) -> str:
        if self.element is not None:
            return f"{self.element}[]"
        return self.name


BOOLEAN = ArgType("boolean")
BYTE = ArgType("byte")
CHAR = ArgType("char")
SHORT = ArgType("short")
INT = ArgType("int")
LONG = ArgType("long")
FLOAT = ArgType("float")
DOUBLE = ArgType("double")
VOID = ArgType("void")
STRING = ArgType("java.lang.String")
OBJECT = ArgType("java.lang.Object")


@dataclass(frozen=True)
class AccessFlags:
    """Access and modifier flags of a symbol."""

    public: bool = False
    private: bool = False
    protected: bool = False
    static: bool = False
    final: bool = False
    abstract: bool = False
    interface: bool = False
    synthetic: bool = False
    enum: bool = False

    @classmethod
    def from_names(cls, names: Iterable[str]) -> AccessFlags:
        """Build flags from names such as ``["private", "static"]``.

        Unknown names are ignored.
        """
        known = cls.__dataclass_fields__
        return cls(**{n.lower(): True for n in names if n.lower() in known})


@dataclass(eq=False)
class PackageSymbol:
    """One package segment, e.g. ``b`` in ``com.a.b``."""

    kind: ClassVar[SymbolKind] = SymbolKind.PACKAGE

    full_name: str
    keep: bool = False
    alias: Optional[str] = None

    @property
    def name(self) -> str:
        return self.full_name.rsplit(".", 1)[-1]

    @property
    def qualified_name(self) -> str:
        return self.full_name

    @property
    def parent_name(self) -> str:
        return self.full_name.rsplit(".", 1)[0] if "." in self.full_name else ""

    @property
    def is_top_level(self) -> bool:
        return "." not in self.full_name


@dataclass(eq=False)
class FieldSymbol:
    kind: ClassVar[SymbolKind] = SymbolKind.FIELD

    name: Optional[str]
    type: Optional[ArgType] = None
    access: AccessFlags = field(default_factory=AccessFlags)
    keep: bool = False
    alias: Optional[str] = None
    enclosing: Optional[ClassSymbol] = field(default=None, repr=False)

    @property
    def qualified_name(self) -> str:
        owner = self.enclosing.full_name if self.enclosing else ""
        return f"{owner}.{self.name or ''}" if owner else (self.name or "")


@dataclass(eq=False)
class MethodSymbol:
    kind: ClassVar[SymbolKind] = SymbolKind.METHOD

    name: Optional[str]
    return_type: Optional[ArgType] = None
    arg_types: list[Optional[ArgType]] = field(default_factory=list)
    arg_names: list[Optional[str]] = field(default_factory=list)
    access: AccessFlags = field(default_factory=AccessFlags)
    is_override: bool = False
    keep: bool = False
    alias: Optional[str] = None
    enclosing: Optional[ClassSymbol] = field(default=None, repr=False)

    @property
    def qualified_name(self) -> str:
        owner = self.enclosing.full_name if self.enclosing else ""
        return f"{owner}.{self.name or ''}" if owner else (self.name or "")

    @property
    def is_constructor(self) -> bool:
        return self.name == "<init>"

    @property
    def is_static_initializer(self) -> bool:
        return self.name == "<clinit>"

    @property
    def arg_count(self) -> int:
        return len(self.arg_types)


@dataclass(eq=False)
class ClassSymbol:
    """A class, interface or enum.

    Attributes:
        full_name: Qualified name, inner classes joined with ``$``
            (``com.a.b$c``).
        super_type: Qualified name of the superclass, if any.
        interfaces: Qualified names of directly implemented interfaces.
    """

    kind: ClassVar[SymbolKind] = SymbolKind.CLASS

    full_name: str
    access: AccessFlags = field(default_factory=AccessFlags)
    super_type: Optional[str] = None
    interfaces: list[str] = field(default_factory=list)
    fields: list[FieldSymbol] = field(default_factory=list)
    methods: list[MethodSymbol] = field(default_factory=list)
    keep: bool = False
    alias: Optional[str] = None

    def __post_init__(self) -> None:
        for member in [*self.fields, *self.methods]:
            member.enclosing = self

    @property
    def tail(self) -> str:
        """Name after the package, outer classes included (``b$c``)."""
        return self.full_name.rsplit(".", 1)[-1]

    @property
    def name(self) -> str:
        """Short name. Synthetic ``$$`` names are kept whole."""
        tail = self.tail
        if "$$" in tail or tail.endswith("$"):
            return tail
        return tail.rsplit("$", 1)[-1]

    @property
    def qualified_name(self) -> str:
        return self.full_name

    @property
    def package(self) -> str:
        return self.full_name.rsplit(".", 1)[0] if "." in self.full_name else ""

    @property
    def outer_name(self) -> Optional[str]:
        """Qualified name of the enclosing class for inner classes."""
        tail = self.tail
        if "$" not in tail or "$$" in tail:
            return None
        return self.full_name[: self.full_name.rindex("$")]

    @property
    def type(self) -> ArgType:
        return ArgType.of_object(self.full_name)


Symbol = Union[PackageSymbol, ClassSymbol, FieldSymbol, MethodSymbol]
