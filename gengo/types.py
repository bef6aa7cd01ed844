"""Type model used by the code generators: names, kinds, packages and types."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class Name:
    """A type name, optionally qualified by a package."""

    package: str = ""
    name: str = ""
    path: str = ""

    def __str__(self) -> str:
        if not self.package:
            return self.name
        return f"{self.package}.{self.name}"


def parse_fully_qualified_name(fqn: str) -> Name:
    """Parse a name like ``example.com/pkg/api.Pod`` into a Name."""
    head, sep, tail = fqn.rpartition(".")
    if not sep:
        return Name(name=fqn)
    return Name(package=head, name=tail)


class Kind(str, Enum):
    """The possible classes of types."""

    BUILTIN = "Builtin"
    STRUCT = "Struct"
    MAP = "Map"
    SLICE = "Slice"
    POINTER = "Pointer"
    ALIAS = "Alias"
    INTERFACE = "Interface"
    ARRAY = "Array"
    CHAN = "Chan"
    FUNC = "Func"
    DECLARATION_OF = "DeclarationOf"
    UNKNOWN = ""
    UNSUPPORTED = "Unsupported"
    PROTOBUF = "Protobuf"

    def __str__(self) -> str:
        return self.value


@dataclass(eq=False, repr=False)
class Type:
    """A subset of possible Go types; compared and hashed by identity."""

    name: Name = field(default_factory=Name)
    kind: Kind = Kind.UNKNOWN
    comment_lines: list[str] = field(default_factory=list)
    second_closest_comment_lines: list[str] = field(default_factory=list)
    members: list[Member] = field(default_factory=list)
    elem: Type | None = None
    key: Type | None = None
    underlying: Type | None = None
    methods: dict[str, Type] = field(default_factory=dict)
    signature: Signature | None = None
    const_value: str | None = None
    length: int = 0

    def __str__(self) -> str:
        return str(self.name)

    def __repr__(self) -> str:
        return f"Type({str(self.name)!r}, {self.kind.value!r})"

    def is_primitive(self) -> bool:
        """True for builtins and aliases of builtins."""
        if self.kind is Kind.BUILTIN:
            return True
        return (
            self.kind is Kind.ALIAS
            and self.underlying is not None
            and self.underlying.kind is Kind.BUILTIN
        )

    def is_assignable(self) -> bool:
        """True if a plain assignment makes a deep copy of a value of this type."""
        if self.is_primitive():
            return True
        if self.kind is Kind.STRUCT:
            return all(m.type.is_assignable() for m in self.members)
        return False

    def is_anonymous_struct(self) -> bool:
        """True for an anonymous struct or an alias of one."""
        if self.kind is Kind.STRUCT and self.name.name == "struct{}":
            return True
        return (
            self.kind is Kind.ALIAS
            and self.underlying is not None
            and self.underlying.is_anonymous_struct()
        )


@dataclass
class Member:
    """A single struct member."""

    name: str = ""
    embedded: bool = False
    comment_lines: list[str] = field(default_factory=list)
    tags: str = ""
    type: Type | None = None

    def __str__(self) -> str:
        return f"{self.name} {self.type}"


@dataclass
class Signature:
    """A function's signature."""

    receiver: Type | None = None
    parameters: list[Type] = field(default_factory=list)
    parameter_names: list[str] = field(default_factory=list)
    results: list[Type] = field(default_factory=list)
    result_names: list[str] = field(default_factory=list)
    variadic: bool = False
    comment_lines: list[str] = field(default_factory=list)


def _builtin(name: str) -> Type:
    return Type(name=Name(name=name), kind=Kind.BUILTIN)


STRING = _builtin("string")
INT64 = _builtin("int64")
INT32 = _builtin("int32")
INT16 = _builtin("int16")
INT = _builtin("int")
UINT64 = _builtin("uint64")
UINT32 = _builtin("uint32")
UINT16 = _builtin("uint16")
UINT = _builtin("uint")
UINTPTR = _builtin("uintptr")
FLOAT64 = _builtin("float64")
FLOAT32 = _builtin("float32")
FLOAT = _builtin("float")
BOOL = _builtin("bool")
BYTE = _builtin("byte")

_BUILTINS: dict[str, Type] = {
    "bool": BOOL,
    "string": STRING,
    "int": INT,
    "int64": INT64,
    "int32": INT32,
    "int16": INT16,
    "int8": BYTE,
    "uint": UINT,
    "uint64": UINT64,
    "uint32": UINT32,
    "uint16": UINT16,
    "uint8": BYTE,
    "uintptr": UINTPTR,
    "byte": BYTE,
    "float": FLOAT,
    "float64": FLOAT64,
    "float32": FLOAT32,
}

_INTEGERS = (INT, INT64, INT32, INT16, UINT, UINT64, UINT32, UINT16, BYTE)


def is_integer(t: Type) -> bool:
    """True if t is one of the canonical builtin integer types."""
    return any(t is candidate for candidate in _INTEGERS)


def ref(package_name: str, type_name: str) -> Type:
    """Make a bare reference to a type, suitable for passing to namers."""
    return Type(name=Name(package=package_name, name=type_name))


@dataclass(eq=False)
class Package:
    """Package-level information: its types, functions, variables, constants and imports."""

    path: str = ""
    source_path: str = ""
    name: str = ""
    doc_comments: list[str] = field(default_factory=list)
    comments: list[str] = field(default_factory=list)
    types: dict[str, Type] = field(default_factory=dict)
    functions: dict[str, Type] = field(default_factory=dict)
    variables: dict[str, Type] = field(default_factory=dict)
    constants: dict[str, Type] = field(default_factory=dict)
    imports: dict[str, Package] = field(default_factory=dict)

    def __repr__(self) -> str:
        return f"Package({self.path!r})"

    def has(self, name: str) -> bool:
        """True if the name refers to a type known to this package."""
        return name in self.types

    def type(self, type_name: str) -> Type:
        """Return the named type, creating a marker for it if needed."""
        found = self.types.get(type_name)
        if found is not None:
            return found
        if not self.path and type_name in _BUILTINS:
            builtin = _BUILTINS[type_name]
            self.types[type_name] = builtin
            return builtin
        t = Type(name=Name(package=self.path, name=type_name))
        self.types[type_name] = t
        return t

    def _declaration(self, table: dict[str, Type], decl_name: str) -> Type:
        found = table.get(decl_name)
        if found is not None:
            return found
        t = Type(name=Name(package=self.path, name=decl_name), kind=Kind.DECLARATION_OF)
        table[decl_name] = t
        return t

    def function(self, func_name: str) -> Type:
        """Return the named function declaration, creating it if needed."""
        return self._declaration(self.functions, func_name)

    def variable(self, var_name: str) -> Type:
        """Return the named variable declaration, creating it if needed."""
        return self._declaration(self.variables, var_name)

    def constant(self, const_name: str) -> Type:
        """Return the named constant declaration, creating it if needed."""
        return self._declaration(self.constants, const_name)

    def has_import(self, package_name: str) -> bool:
        """True if this package imports the given package path."""
        return package_name in self.imports


class Universe(dict):
    """All known packages, keyed by package path."""

    def package(self, package_path: str) -> Package:
        """Return the package for the path, creating a marker for it if needed."""
        found = self.get(package_path)
        if found is not None:
            return found
        pkg = Package(path=package_path)
        self[package_path] = pkg
        return pkg

    def type(self, name: Name) -> Type:
        """Return the canonical type for a fully qualified name."""
        return self.package(name.package).type(name.name)

    def function(self, name: Name) -> Type:
        """Return the canonical function for a fully qualified name."""
        return self.package(name.package).function(name.name)

    def variable(self, name: Name) -> Type:
        """Return the canonical variable for a fully qualified name."""
        return self.package(name.package).variable(name.name)

    def constant(self, name: Name) -> Type:
        """Return the canonical constant for a fully qualified name."""
        return self.package(name.package).constant(name.name)

    def add_imports(self, package_path: str, *args: str) -> None:
        """Record that the package imports each of the given paths."""
        pkg = self.package(package_path)
        for import_path in args:
            pkg.imports[import_path] = self.package(import_path)


def flatten_members(members: list[Member]) -> list[Member]:
    """Lift members of embedded structs to the top level, honouring hiding.

    Raises ValueError when two embedded structs provide conflicting members.
    """
    embedded: list[Member] = []
    normal: list[Member] = []
    names: dict[str, tuple[bool, int]] = {}
    for m in members:
        if m.embedded and m.type is not None and m.type.kind is Kind.STRUCT:
            embedded.append(m)
        else:
            normal.append(m)
            names[m.name] = (True, len(normal) - 1)
    for emb in embedded:
        for e in flatten_members(emb.type.members):
            info = names.get(e.name)
            if info is not None:
                top, index = info
                if top:
                    continue
                existing = normal[index]
                if existing.name == e.name and existing.type is e.type:
                    continue
                raise ValueError("conflicting members")
            normal.append(e)
            names[e.name] = (False, len(normal) - 1)
    return normal