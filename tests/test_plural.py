import pytest

from gengo.plural import (
    new_all_lowercase_plural_namer,
    new_private_plural_namer,
    new_public_plural_namer,
)
from gengo.types import Name, Type

EXCEPTIONS = {"Endpoints": "endpoints"}


@pytest.mark.parametrize(
    "type_name, expected_private, expected_public",
    [
        ("I", "i", "I"),
        ("Pod", "pods", "Pods"),
        ("Entry", "entries", "Entries"),
        ("Endpoints", "endpoints", "Endpoints"),
        ("Bus", "buses", "Buses"),
        ("Fizz", "fizzes", "Fizzes"),
        ("Search", "searches", "Searches"),
        ("Autograph", "autographs", "Autographs"),
        ("Dispatch", "dispatches", "Dispatches"),
        ("Earth", "earths", "Earths"),
        ("City", "cities", "Cities"),
        ("Ray", "rays", "Rays"),
        ("Fountain", "fountains", "Fountains"),
        ("Life", "lives", "Lives"),
        ("Leaf", "leaves", "Leaves"),
    ],
)
def test_plural_namer(type_name, expected_private, expected_public):
    t = Type(name=Name(name=type_name))
    assert new_private_plural_namer(EXCEPTIONS).name(t) == expected_private
    assert new_public_plural_namer(EXCEPTIONS).name(t) == expected_public


def test_all_lowercase_plural_namer():
    t = Type(name=Name(name="City"))
    assert new_all_lowercase_plural_namer(EXCEPTIONS).name(t) == "cities"