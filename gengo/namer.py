"""Naming systems: turn types into public, private or literal names."""

from __future__ import annotations

import posixpath
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from gengo.types import Kind, Name, Type

GO_SEPARATOR = "/"
"""Separator used to split Go import paths."""

JoinFunc = Callable[[str, list[str], str], str]


class Namer(ABC):
    """Assigns a name to a type."""

    @abstractmethod
    def name(self, t: Type) -> str:
        """Return the name of t in this naming system."""


NameSystems = dict[str, Namer]


class ImportTracker(ABC):
    """Keeps track of the packages a raw namer needs imported."""

    @abstractmethod
    def add_type(self, t: Type) -> None:
        """Record the package of t as needed."""

    @abstractmethod
    def add_symbol(self, symbol: Name) -> None:
        """Record the package of a named symbol as needed."""

    @abstractmethod
    def local_name_of(self, package_path: str) -> str:
        """Return the name used to refer to the package within a file."""

    @abstractmethod
    def path_of(self, local_name: str) -> tuple[str, bool]:
        """Return the path a local name refers to, and whether it is known."""

    @abstractmethod
    def import_lines(self) -> list[str]:
        """Return the import lines needed, sorted by path."""


def is_private_go_name(name: str) -> bool:
    """True if the name is empty or starts with a lowercase character."""
    return not name or name[:1].lower() == name[:1]


def ic(text: str) -> str:
    """Make the first character uppercase."""
    return text[:1].upper() + text[1:]


def il(text: str) -> str:
    """Make the first character lowercase."""
    return text[:1].lower() + text[1:]


def joiner(first: Callable[[str], str], others: Callable[[str], str]) -> JoinFunc:
    """Build a join function that runs `others` on each part and `first` on the result."""

    def join(pre: str, parts: list[str], post: str) -> str:
        pieces = [others(pre), *(others(p) for p in parts), others(post)]
        return first("".join(pieces))

    return join


@dataclass(eq=False)
class NameStrategy(Namer):
    """A general namer producing names from a prefix, the type and a suffix.

    Named types become <prefix><package dirs><name><suffix>; anonymous types
    become <prefix><type description><suffix>. Every part goes through `join`.
    """

    prefix: str = ""
    suffix: str = ""
    join: JoinFunc = field(default_factory=lambda: joiner(ic, ic))
    ignore_words: set[str] = field(default_factory=set)
    prepend_package_names: int = 0
    names: dict[Type, str] = field(default_factory=dict)

    def _remove_prefix_and_suffix(self, s: str) -> str:
        lower = s.lower()
        begin, end = 0, len(s)
        if lower.startswith(self.prefix.lower()):
            begin = len(self.prefix)
        if lower.endswith(self.suffix.lower()):
            end -= len(self.suffix)
        return s[begin:end]

    def _filter_dirs(self, path: str) -> list[str]:
        return [
            part.replace("-", "_").replace(".", "")
            for part in path.split(GO_SEPARATOR)
            if part not in self.ignore_words
        ]

    def _inner(self, t: Type | None) -> str:
        return self._remove_prefix_and_suffix(self.name(t))

    def name(self, t: Type) -> str:
        cached = self.names.get(t)
        if cached is not None:
            return cached

        if t.name.package:
            dirs = [*self._filter_dirs(t.name.package), t.name.name]
            count = min(self.prepend_package_names + 1, len(dirs))
            result = self.join(self.prefix, dirs[len(dirs) - count:], self.suffix)
            self.names[t] = result
            return result

        kind = t.kind
        if kind is Kind.BUILTIN:
            parts = [t.name.name]
        elif kind is Kind.MAP:
            parts = ["Map", self._inner(t.key), "To", self._inner(t.elem)]
        elif kind is Kind.SLICE:
            parts = ["Slice", self._inner(t.elem)]
        elif kind is Kind.ARRAY:
            parts = [
                "Array",
                self._remove_prefix_and_suffix(str(t.length)),
                self._inner(t.elem),
            ]
        elif kind is Kind.POINTER:
            parts = ["Pointer", self._inner(t.elem)]
        elif kind is Kind.STRUCT:
            parts = ["Struct", *(self._inner(m.type) for m in t.members)]
        elif kind is Kind.CHAN:
            parts = ["Chan", self._inner(t.elem)]
        elif kind is Kind.INTERFACE:
            parts = ["Interface", *(m.name.name for m in t.methods.values())]
        elif kind is Kind.FUNC:
            sig = t.signature
            params = sig.parameters if sig else []
            results = sig.results if sig else []
            parts = [
                "Func",
                *(self._inner(p) for p in params),
                "Returns",
                *(self._inner(r) for r in results),
            ]
        else:
            parts = None

        if parts is None:
            result = "unnameable_" + str(kind)
        else:
            result = self.join(self.prefix, parts, self.suffix)
        self.names[t] = result
        return result


def new_public_namer(prepend_package_names: int, *args: str) -> NameStrategy:
    """Return a namer making CamelCase names; args are directory names to ignore."""
    return NameStrategy(
        join=joiner(ic, ic),
        ignore_words=set(args),
        prepend_package_names=prepend_package_names,
    )


def new_private_namer(prepend_package_names: int, *args: str) -> NameStrategy:
    """Return a namer making camelCase names; args are directory names to ignore."""
    return NameStrategy(
        join=joiner(il, ic),
        ignore_words=set(args),
        prepend_package_names=prepend_package_names,
    )


def _base(path: str) -> str:
    stripped = path.rstrip("/")
    if not stripped:
        return "/"
    return posixpath.basename(stripped)


@dataclass(eq=False)
class RawNamer(Namer):
    """Names types the way code literally refers to them, e.g. ``map[string]int``."""

    pkg: str = ""
    tracker: ImportTracker | None = None
    names: dict[Type, str] = field(default_factory=dict)

    def _join(self, types: Iterable[Type], sep: str) -> str:
        return sep.join(self.name(x) for x in types)

    def name(self, t: Type) -> str:
        cached = self.names.get(t)
        if cached is not None:
            return cached

        if t.name.package:
            if self.tracker is not None:
                self.tracker.add_type(t)
            if t.name.package == self.pkg:
                result = t.name.name
            elif self.tracker is not None:
                result = self.tracker.local_name_of(t.name.package) + "." + t.name.name
            else:
                result = _base(t.name.package) + "." + t.name.name
            self.names[t] = result
            return result

        kind = t.kind
        if kind is Kind.BUILTIN:
            result = t.name.name
        elif kind is Kind.MAP:
            result = f"map[{self.name(t.key)}]{self.name(t.elem)}"
        elif kind is Kind.SLICE:
            result = "[]" + self.name(t.elem)
        elif kind is Kind.ARRAY:
            result = f"[{t.length}]{self.name(t.elem)}"
        elif kind is Kind.POINTER:
            result = "*" + self.name(t.elem)
        elif kind is Kind.STRUCT:
            elems = "; ".join(f"{m.name} {self.name(m.type)}" for m in t.members)
            result = "struct{" + elems + "}"
        elif kind is Kind.CHAN:
            result = "chan " + self.name(t.elem)
        elif kind is Kind.INTERFACE:
            result = "interface{" + "; ".join(m.name.name for m in t.methods.values()) + "}"
        elif kind is Kind.FUNC:
            sig = t.signature
            params = sig.parameters if sig else []
            results = [self.name(r) for r in (sig.results if sig else [])]
            result = "func(" + self._join(params, ",") + ")"
            if len(results) == 1:
                result += " " + results[0]
            elif len(results) > 1:
                result += " (" + ",".join(results) + ")"
        else:
            result = "unnameable_" + str(kind)
        self.names[t] = result
        return result


def new_raw_namer(pkg: str, tracker: ImportTracker | None) -> RawNamer:
    """Return a namer giving literal references, relative to package `pkg`."""
    return RawNamer(pkg=pkg, tracker=tracker)