import pytest

from gengo.import_tracker import DefaultImportTracker
from gengo.types import Kind, Name, Type


def make_tracker(local_package=""):
    tracker = DefaultImportTracker(Name(package=local_package))
    tracker.local_name = lambda n: n.package.rsplit("/", 1)[-1]
    tracker.print_import = lambda path, name: f'{name} "{path}"'
    return tracker


def test_import_lines_sorted_by_path():
    tracker = make_tracker()
    tracker.add_types(
        Type(name=Name(package="z/beta", name="B")),
        Type(name=Name(package="a/alpha", name="A")),
    )
    assert tracker.import_lines() == ['alpha "a/alpha"', 'beta "z/beta"']


def test_local_and_builtin_symbols_are_ignored():
    tracker = make_tracker("my/pkg")
    tracker.add_symbol(Name(package="my/pkg", name="T"))
    tracker.add_symbol(Name(package="", name="string"))
    assert tracker.import_lines() == []


def test_explicit_path_is_preferred():
    tracker = make_tracker()
    tracker.add_symbol(Name(package="pkg/one", name="T", path="vendor/pkg/one"))
    assert tracker.local_name_of("vendor/pkg/one") == "one"
    assert tracker.local_name_of("pkg/one") == ""


def test_symbol_added_once():
    tracker = make_tracker()
    calls = []

    def local_name(n):
        calls.append(n)
        return n.name

    tracker.local_name = local_name
    tracker.add_symbol(Name(package="x/y", name="First"))
    tracker.add_symbol(Name(package="x/y", name="Second"))
    assert len(calls) == 1
    assert tracker.path_of("First") == ("x/y", True)


def test_path_of_unknown():
    tracker = make_tracker()
    assert tracker.path_of("nothing") == ("", False)


def test_invalid_type_reserves_package_name():
    tracker = make_tracker()
    tracker.is_invalid_type = lambda t: True
    tracker.add_type(Type(name=Name(package="go", name="X"), kind=Kind.STRUCT))
    assert tracker.path_of("go") == ("", True)
    assert tracker.import_lines() == []


def test_invalid_builtin_is_ignored():
    tracker = make_tracker()
    tracker.is_invalid_type = lambda t: True
    tracker.add_type(Type(name=Name(package="int", name="int"), kind=Kind.BUILTIN))
    assert tracker.path_of("int") == ("", False)


def test_missing_local_name_raises():
    tracker = DefaultImportTracker(Name())
    with pytest.raises(RuntimeError):
        tracker.add_symbol(Name(package="a/b", name="C"))