import pytest

from gengo.comments import (
    TagValueError,
    extract_comment_tags,
    extract_single_bool_comment_tag,
)

PROSE = "Human comment that is ignored."


def _tag_lines(marker, pairs):
    """Build comment lines from (key, value) pairs; a value of None means a bare key."""
    lines = [PROSE]
    for key, value in pairs:
        lines.append(marker + key if value is None else f"{marker}{key}={value}")
    return lines


TAG_LINES = _tag_lines(
    "+",
    [
        ("foo", "value1"),
        ("bar", None),
        ("foo", "value2"),
        ("baz", "qux,zrb=true"),
    ],
)

BOOL_LINES = _tag_lines(
    "+",
    [
        ("TRUE", "true"),
        ("FALSE", "false"),
        ("MULTI", "true"),
        ("MULTI", "false"),
        ("MULTI", "multi"),
        ("NOTBOOL", "blue"),
        ("EMPTY", None),
    ],
)


def test_extract_comment_tags():
    assert extract_comment_tags("+", TAG_LINES) == {
        "foo": ["value1", "value2"],
        "bar": [""],
        "baz": ["qux,zrb=true"],
    }


def test_extract_comment_tags_trims_spaces_and_skips_blank():
    result = extract_comment_tags("+", ["   ", "  +foo=bar  ", "x+foo=no"])
    assert result == {"foo": ["bar"]}


@pytest.mark.parametrize(
    "key, default, expected",
    [
        ("TRUE", False, True),
        ("FALSE", True, False),
        ("MULTI", False, True),
        ("ABSENT", True, True),
        ("ABSENT", False, False),
    ],
)
def test_extract_single_bool_comment_tag(key, default, expected):
    assert extract_single_bool_comment_tag("+", key, default, BOOL_LINES) is expected


@pytest.mark.parametrize("key", ["NOTBOOL", "EMPTY"])
def test_extract_single_bool_comment_tag_rejects_non_boolean(key):
    with pytest.raises(TagValueError, match="is not boolean") as info:
        extract_single_bool_comment_tag("+", key, False, BOOL_LINES)
    assert info.value.key == key