import pytest

from hexplane.hexgrid import UNIT_OFFSETS, Direction, Hex


def test_s_is_derived():
    h = Hex(3, -5)
    assert h.s == 2
    assert sum(h.cube()) == 0


def test_add_is_componentwise():
    assert Hex(1, 2).add(Hex(-3, 4)) == Hex(-2, 6)
    assert Hex(1, 2) + Hex(0, -2) == Hex(1, 0)


def test_hex_is_immutable():
    h = Hex(0, 0)
    with pytest.raises(AttributeError):
        h.q = 1  # type: ignore[misc]


def test_units_clockwise_from_east():
    assert UNIT_OFFSETS == (
        Hex(1, 0),
        Hex(0, 1),
        Hex(-1, 1),
        Hex(-1, 0),
        Hex(0, -1),
        Hex(1, -1),
    )
    assert [d.unit for d in Direction] == list(UNIT_OFFSETS)


def test_neighbors_six_in_order():
    h = Hex(2, -1)
    assert h.neighbors() == tuple(h + unit for unit in UNIT_OFFSETS)
    assert h.neighbor(Direction.SW) == Hex(1, 0)
    assert h.neighbor(5) == Hex(3, -2)
    assert h.neighbor("nw") == Hex(2, -2)


@pytest.mark.parametrize("q", range(-3, 4))
@pytest.mark.parametrize("r", range(-3, 4))
def test_neighbor_symmetry(q, r):
    h = Hex(q, r)
    for i in range(6):
        assert h.neighbor(i).neighbor((i + 3) % 6) == h


@pytest.mark.parametrize("index", [-1, 6, 12])
def test_neighbor_index_out_of_range_is_rejected(index):
    with pytest.raises(ValueError):
        Hex(0, 0).neighbor(index)


def test_direction_parse_and_opposite():
    assert Direction.parse("E") is Direction.E
    assert Direction.parse(3) is Direction.W
    assert Direction.NE.opposite is Direction.SW
    with pytest.raises(ValueError):
        Direction.parse("north")
    with pytest.raises(ValueError):
        Direction.parse(1.5)  # type: ignore[arg-type]


def test_string_form_is_canonical_and_parseable():
    assert str(Hex(0, 0)) == "(0, 0)"
    assert str(Hex(-12, 7)) == "(-12, 7)"
    assert Hex.parse("(-12, 7)") == Hex(-12, 7)
    assert Hex.parse("3,4") == Hex(3, 4)
    assert Hex.parse("3 -4") == Hex(3, -4)
    with pytest.raises(ValueError):
        Hex.parse("three, four")


def test_string_form_is_injective():
    seen = {}
    for q in range(-20, 21):
        for r in range(-20, 21):
            key = str(Hex(q, r))
            assert key not in seen
            seen[key] = (q, r)


def test_hex_works_as_dict_key():
    store = {Hex(1, 2): "a"}
    assert store[Hex(1, 2)] == "a"
    assert Hex(2, 1) not in store
