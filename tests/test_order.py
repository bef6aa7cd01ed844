from gengo.namer import new_public_namer, new_raw_namer
from gengo.order import Orderer
from gengo.types import Kind, Name, Universe, ref


def _sample_universe():
    u = Universe()
    u.type(Name(package="p", name="Zeta")).kind = Kind.STRUCT
    u.type(Name(package="p", name="Alpha")).kind = Kind.STRUCT
    u.function(Name(package="p", name="Middle"))
    u.variable(Name(package="q", name="Beta"))
    u.constant(Name(package="q", name="Omega"))
    u.type(Name(package="", name="string"))
    return u


def test_order_types_sorts_by_name():
    zeta = ref("p", "Zeta")
    alpha = ref("p", "Alpha")
    o = Orderer(new_raw_namer("p", None))
    assert o.order_types([zeta, alpha]) == [alpha, zeta]


def test_name_delegates_to_namer():
    namer = new_public_namer(0)
    o = Orderer(namer)
    t = ref("p", "thing")
    assert o.name(t) == namer.name(t)


def test_order_universe_includes_all_declarations():
    u = _sample_universe()
    o = Orderer(new_raw_namer("", None))
    ordered = o.order_universe(u)
    everything = [
        t
        for pkg in u.values()
        for table in (pkg.types, pkg.functions, pkg.variables, pkg.constants)
        for t in table.values()
    ]
    assert len(ordered) == len(everything)
    assert set(map(id, ordered)) == set(map(id, everything))


def test_order_universe_is_sorted():
    o = Orderer(new_public_namer(0))
    names = [o.name(t) for t in o.order_universe(_sample_universe())]
    assert names == sorted(names)


def test_order_universe_empty():
    assert Orderer(new_public_namer(0)).order_universe(Universe()) == []


def test_order_types_does_not_mutate_input():
    items = [ref("p", "Zeta"), ref("p", "Alpha")]
    before = list(items)
    Orderer(new_raw_namer("p", None)).order_types(items)
    assert items == before