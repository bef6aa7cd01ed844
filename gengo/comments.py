"""Parsing of marker tags such as ``+key=value`` out of comment lines."""

from __future__ import annotations

from collections.abc import Iterable


class TagValueError(ValueError):
    """A comment tag holds a value of the wrong form."""

    def __init__(self, key: str, value: str) -> None:
        super().__init__(f'tag value for "{key}" is not boolean: "{value}"')
        self.key = key
        self.value = value


def extract_comment_tags(marker: str, lines: Iterable[str]) -> dict[str, list[str]]:
    """Collect every ``marker + key[=value]`` line into a map of key to values.

    Values are optional and default to ``""``. A key given several times keeps
    all of its values in order; every key present has at least one value.
    """
    out: dict[str, list[str]] = {}
    for raw in lines:
        line = raw.strip(" ")
        if not line or not line.startswith(marker):
            continue
        key, sep, value = line[len(marker):].partition("=")
        out.setdefault(key, []).append(value if sep else "")
    return out


def extract_single_bool_comment_tag(
    marker: str, key: str, default: bool, lines: Iterable[str]
) -> bool:
    """Return the boolean value of a tag, or `default` if the tag is absent.

    Only the first value of the key is considered; it must be ``true`` or
    ``false``, otherwise TagValueError is raised.
    """
    values = extract_comment_tags(marker, lines).get(key)
    if values is None:
        return default
    first = values[0]
    if first == "true":
        return True
    if first == "false":
        return False
    raise TagValueError(key, first)