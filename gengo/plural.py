"""A namer that gives the plural form of a type's name."""

from __future__ import annotations

from collections.abc import Callable, Mapping

from gengo.namer import Namer, ic, il
from gengo.types import Type

_CONSONANTS = frozenset("bcdfghjklmnpqrstvwxyz")


class PluralNamer(Namer):
    """Names a type by the plural of its name, then applies `finalize`.

    `exceptions` maps a case-sensitive type name to its plural form.
    """

    def __init__(self, exceptions: Mapping[str, str] | None, finalize: Callable[[str], str]) -> None:
        self.exceptions = dict(exceptions or {})
        self.finalize = finalize

    def name(self, t: Type) -> str:
        singular = t.name.name
        if singular in self.exceptions:
            return self.finalize(self.exceptions[singular])
        if len(singular) < 2:
            return self.finalize(singular)
        return self.finalize(_pluralize(singular))


def _pluralize(singular: str) -> str:
    last, before = singular[-1], singular[-2]
    if last in "sxz":
        return singular + "es"
    if last == "y":
        return singular[:-1] + "ies" if before in _CONSONANTS else singular + "s"
    if last == "h":
        return singular + "es" if before in "cs" else singular + "s"
    if last == "e":
        return singular[:-2] + "ves" if before == "f" else singular + "s"
    if last == "f":
        return singular[:-1] + "ves"
    return singular + "s"


def new_public_plural_namer(exceptions: Mapping[str, str] | None) -> PluralNamer:
    """Plural names starting with an uppercase letter."""
    return PluralNamer(exceptions, ic)


def new_private_plural_namer(exceptions: Mapping[str, str] | None) -> PluralNamer:
    """Plural names starting with a lowercase letter."""
    return PluralNamer(exceptions, il)


def new_all_lowercase_plural_namer(exceptions: Mapping[str, str] | None) -> PluralNamer:
    """Plural names in all lowercase."""
    return PluralNamer(exceptions, str.lower)