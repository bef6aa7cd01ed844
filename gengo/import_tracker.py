"""A default import tracker that records packages and their local names."""

from __future__ import annotations

from collections.abc import Callable

from gengo.namer import ImportTracker
from gengo.types import Kind, Name, Type


class DefaultImportTracker(ImportTracker):
    """Tracks the imports needed by the names a raw namer hands out.

    `local_name` chooses the local name for a package and `print_import` renders
    an import line from a (path, name) pair; both must be set before use.
    `is_invalid_type` marks types whose package name must not be used.
    """

    def __init__(self, local: Name) -> None:
        self.local = local
        self._path_to_name: dict[str, str] = {}
        # Forbidden names are recorded here too, mapped to an empty path.
        self._name_to_path: dict[str, str] = {}
        self.is_invalid_type: Callable[[Type], bool] = lambda t: False
        self.local_name: Callable[[Name], str] | None = None
        self.print_import: Callable[[str, str], str] | None = None

    def add_types(self, *args: Type) -> None:
        """Record the packages of all the given types."""
        for t in args:
            self.add_type(t)

    def add_symbol(self, symbol: Name) -> None:
        """Record the package of a named symbol, unless it is local or builtin."""
        if self.local.package == symbol.package or not symbol.package:
            return
        path = symbol.path or symbol.package
        if path in self._path_to_name:
            return
        if self.local_name is None:
            raise RuntimeError("local_name is not set on the import tracker")
        name = self.local_name(symbol)
        self._name_to_path[name] = path
        self._path_to_name[path] = name

    def add_type(self, t: Type) -> None:
        """Record the package of t; invalid types reserve their package name."""
        if self.local.package == t.name.package:
            return
        if self.is_invalid_type(t):
            if t.kind is Kind.BUILTIN:
                return
            self._name_to_path.setdefault(t.name.package, "")
            return
        self.add_symbol(t.name)

    def import_lines(self) -> list[str]:
        """Return the import lines, sorted by package path."""
        if self.print_import is None:
            raise RuntimeError("print_import is not set on the import tracker")
        return [
            self.print_import(path, self._path_to_name[path])
            for path in sorted(self._path_to_name)
        ]

    def local_name_of(self, path: str) -> str:
        """Return the name used for the package at `path`, or "" if unknown."""
        return self._path_to_name.get(path, "")

    def path_of(self, local_name: str) -> tuple[str, bool]:
        """Return the path a local name refers to, and whether it is known."""
        if local_name in self._name_to_path:
            return self._name_to_path[local_name], True
        return "", False