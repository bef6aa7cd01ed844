"""Canonical orderings of types, sorted by the names a namer gives them."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from gengo.namer import Namer
from gengo.types import Type, Universe


@dataclass
class Orderer:
    """Orders types by the names its namer assigns."""

    namer: Namer

    def name(self, t: Type) -> str:
        """Return the name the underlying namer gives t."""
        return self.namer.name(t)

    def order_types(self, type_list: Iterable[Type]) -> list[Type]:
        """Return the types sorted by their names."""
        return sorted(type_list, key=self.namer.name)

    def order_universe(self, universe: Universe) -> list[Type]:
        """Return every type, function, variable and constant, sorted by name."""
        collected: list[Type] = []
        for pkg in universe.values():
            collected.extend(pkg.types.values())
            collected.extend(pkg.functions.values())
            collected.extend(pkg.variables.values())
            collected.extend(pkg.constants.values())
        return self.order_types(collected)