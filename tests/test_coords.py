import pytest

from hexlattice import Cube, EdgeDirection, Hex, VertexDirection
from hexlattice.coords import by_length, by_qr, by_rq, check_radius, range_count, ring_count, wedge_count
from hexlattice.heuristics import distance, length

SAMPLES = [
    Hex(0, 0),
    Hex(1, 0),
    Hex(3, -2),
    Hex(-4, 7),
    Hex(12, 5),
    Hex(-9, -9),
]


def test_cube_invariant():
    c = Cube(1, -2, 1)
    assert c.x + c.y + c.z == 0
    with pytest.raises(ValueError):
        Cube(1, 1, 1)
    assert Cube.from_hex(Hex(3, -1)) == Cube(3, -2, -1)
    assert Cube(3, -2, -1).to_hex() == Hex(3, -1)


def test_from_cubic_rejects_non_zero_sum():
    assert Hex.from_cubic(2, -3, 1) == Hex(2, -3)
    with pytest.raises(ValueError):
        Hex.from_cubic(1, 1, 1)


def test_derived_and_tuple_views():
    h = Hex(3, -5)
    assert h.s == 2
    assert h.to_tuple() == (3, -5)
    assert h.to_cubic() == (3, -5, 2)
    q, r = h
    assert (q, r) == (3, -5)
    assert Hex.from_tuple((3, -5)) == h
    assert repr(h) == "Hex(3, -5)"


def test_arithmetic():
    a = Hex(1, 2)
    b = Hex(3, -1)
    assert a + b == Hex(4, 1)
    assert a - b == Hex(-2, 3)
    assert -a == Hex(-1, -2)
    assert a * 3 == Hex(3, 6)
    assert 3 * a == Hex(3, 6)
    assert Hex(7, -7) // 2 == Hex(3, -4)
    assert Hex(7, -7) % 3 == Hex(1, 2)
    assert Hex(7, 9) % Hex(4, 5) == Hex(3, 4)
    assert abs(Hex(-2, 3)) == Hex(2, 3)
    assert a.min(b) == Hex(1, -1)
    assert a.max(b) == Hex(3, 2)
    assert Hex(-5, 0).signum() == Hex(-1, 0)
    assert a.dot(b) == 1


def test_multiplying_by_non_int_is_a_type_error():
    with pytest.raises(TypeError):
        Hex(1, 2) * "a"  # type: ignore[operator]


def test_constants():
    assert Hex.ZERO == Hex.ORIGIN == Hex(0, 0)
    assert Hex.Q == Hex(1, 0)
    assert Hex.R == Hex(0, 1)
    assert Hex.NEG_Q == -Hex.Q
    assert Hex.NEG_R == -Hex.R


def test_hex_is_hashable_and_frozen():
    assert len({Hex(1, 2), Hex(1, 2), Hex(2, 1)}) == 2
    with pytest.raises(AttributeError):
        Hex(0, 0).q = 3  # type: ignore[misc]


@pytest.mark.parametrize("a", SAMPLES)
@pytest.mark.parametrize("b", SAMPLES)
def test_distance_symmetry(a: Hex, b: Hex):
    assert a.distance_to(b) == b.distance_to(a)
    assert distance(a, b) == a.distance_to(b)
    assert a.distance_to(a) == 0


def test_distance_values():
    assert Hex(0, 0).distance_to(Hex(3, -3)) == 3
    assert Hex(0, 0).distance_to(Hex(2, 1)) == 3
    assert length(Hex(-4, 7)) == 7
    assert Hex(-4, 7).length() == 7
    assert Cube(0, 0, 0).distance_to(Cube(2, -1, -1)) == 2


def test_distance_handles_large_components():
    far = Hex(2**31 - 1, -(2**31))
    assert far.length() == 2**31
    assert distance(far, Hex(-(2**31), 2**31 - 1)) == 2**32 - 1


@pytest.mark.parametrize("a", SAMPLES)
@pytest.mark.parametrize("direction", list(EdgeDirection))
def test_neighbor_distance_is_one(a: Hex, direction: EdgeDirection):
    assert a.distance_to(a.neighbor(direction)) == 1
    assert a.neighbor_direction(a.neighbor(direction)) is direction


@pytest.mark.parametrize("direction", list(VertexDirection))
def test_diagonal_neighbor_distance_is_two(direction: VertexDirection):
    assert Hex(4, -1).distance_to(Hex(4, -1).diagonal_neighbor(direction)) == 2


def test_all_neighbors_follow_edge_order():
    h = Hex(2, 2)
    assert h.all_neighbors() == [h.neighbor(d) for d in EdgeDirection]
    assert h.all_diagonals() == [h.diagonal_neighbor(d) for d in VertexDirection]
    assert h.neighbor_direction(Hex(5, 5)) is None


def test_euclidean_helpers():
    assert Hex(1, 0).squared_euclidean_length() == 1
    assert Hex(1, 1).squared_euclidean_length() == 3
    assert Hex(0, 0).euclidean_distance_to(Hex(0, 2)) == pytest.approx(2.0)


@pytest.mark.parametrize("a", SAMPLES)
@pytest.mark.parametrize("steps", range(-7, 8))
def test_rotation_inverse(a: Hex, steps: int):
    assert a.rotate_ccw(steps).rotate_cw(steps) == a
    assert a.rotate_cw(steps).length() == a.length()


@pytest.mark.parametrize("a", SAMPLES)
def test_full_turn_is_identity(a: Hex):
    assert a.rotate_cw(6) == a
    assert a.rotate_ccw(6) == a
    assert a.rotate_cw(3) == -a


def test_single_step_rotation_follows_direction_order():
    for direction in EdgeDirection:
        assert direction.delta.clockwise() == direction.clockwise().delta
        assert direction.delta.counter_clockwise() == direction.counter_clockwise().delta


def test_rotation_around_center():
    assert Hex(2, 0).rotate_cw_around(Hex(1, 0)) == Hex(1, 1)
    assert Hex(1, 1).rotate_ccw_around(Hex(1, 0)) == Hex(2, 0)


def test_reflections_preserve_length():
    h = Hex(1, 2)
    assert h.reflect_q() == Hex(1, -3)
    assert h.reflect_r() == Hex(-3, 2)
    assert h.reflect_s() == Hex(2, 1)
    for reflected in (h.reflect_q(), h.reflect_r(), h.reflect_s()):
        assert reflected.length() == h.length()


@pytest.mark.parametrize(
    ("fq", "fr", "expected"),
    [
        (2.0, -1.0, Hex(2, -1)),
        (0.4, 0.3, Hex(1, 0)),
        (0.5, -0.5, Hex(1, -1)),
        (-0.2, 0.1, Hex(0, 0)),
        (1.1, 1.2, Hex(1, 1)),
    ],
)
def test_round(fq: float, fr: float, expected: Hex):
    assert Hex.round(fq, fr) == expected


def test_lerp():
    assert Hex(0, 0).lerp(Hex(4, 0), 0.5) == Hex(2, 0)
    assert Hex(0, 0).lerp(Hex(4, -2), 0.0) == Hex(0, 0)
    assert Hex(0, 0).lerp(Hex(4, -2), 1.0) == Hex(4, -2)


def test_way_to_single_direction():
    way = Hex(0, 0).way_to(Hex(3, 0))
    assert not way.is_tie
    assert way == EdgeDirection.POINTY_RIGHT
    assert way != EdgeDirection.POINTY_BOTTOM_RIGHT
    assert Hex(0, 0).way_to(Hex(0, 2)).unwrap() is EdgeDirection.POINTY_BOTTOM_RIGHT
    assert Hex(0, 0).way_to(Hex(-2, 0)).unwrap() is EdgeDirection.POINTY_LEFT
    assert Hex(0, 0).way_to(Hex(-2, 2)).unwrap() is EdgeDirection.POINTY_BOTTOM_LEFT


def test_way_to_tie_between_adjacent_directions():
    way = Hex(0, 0).way_to(Hex(2, -1))
    assert way.is_tie
    assert set(way) == {EdgeDirection.POINTY_TOP_RIGHT, EdgeDirection.POINTY_RIGHT}
    assert way == EdgeDirection.POINTY_TOP_RIGHT
    assert way == EdgeDirection.POINTY_RIGHT
    assert way != EdgeDirection.POINTY_LEFT
    assert Hex(0, 0).main_direction_to(Hex(2, -1)) is EdgeDirection.POINTY_TOP_RIGHT


def test_way_to_tie_on_every_vertex_direction():
    for vertex in VertexDirection:
        way = Hex(0, 0).way_to(vertex.delta * 2)
        assert way.is_tie
        assert set(way) == set(vertex.edge_directions())


def test_diagonal_way_to():
    assert Hex(0, 0).diagonal_way_to(Hex(2, -1)) == VertexDirection.FLAT_RIGHT
    assert Hex(0, 0).main_diagonal_to(Hex(1, 1)) is VertexDirection.FLAT_BOTTOM_RIGHT
    assert Hex(0, 0).main_diagonal_to(Hex(-1, 2)) is VertexDirection.FLAT_BOTTOM_LEFT
    for edge in EdgeDirection:
        way = Hex(0, 0).diagonal_way_to(edge.delta * 3)
        assert way.is_tie
        assert set(way) == set(edge.vertex_directions())


@pytest.mark.parametrize(
    ("radius", "ranged", "ringed", "wedged"),
    [(0, 1, 1, 1), (1, 7, 6, 3), (2, 19, 12, 6), (3, 37, 18, 10)],
)
def test_counts(radius: int, ranged: int, ringed: int, wedged: int):
    assert range_count(radius) == ranged
    assert ring_count(radius) == ringed
    assert wedge_count(radius) == wedged


def test_check_radius():
    assert check_radius(3) == 3
    with pytest.raises(ValueError):
        check_radius(-1)
    with pytest.raises(ValueError):
        check_radius(0, minimum=1)
    with pytest.raises(TypeError):
        check_radius(1.5)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        check_radius(True)


def test_way_to_self_is_a_fixed_tie():
    way = Hex(2, 3).way_to(Hex(2, 3))
    assert way.is_tie
    assert tuple(way) == (EdgeDirection.POINTY_BOTTOM_LEFT, EdgeDirection.POINTY_BOTTOM_RIGHT)
    diagonal = Hex(2, 3).diagonal_way_to(Hex(2, 3))
    assert tuple(diagonal) == (VertexDirection.FLAT_RIGHT, VertexDirection.FLAT_TOP_RIGHT)


def test_sort_keys():
    coords = [Hex(2, -1), Hex(0, 1), Hex(-1, 0), Hex(0, 0), Hex(1, -1)]
    assert sorted(coords, key=by_length)[0] == Hex(0, 0)
    assert [by_length(h) for h in sorted(coords, key=by_length)] == [0, 1, 1, 1, 2]
    assert sorted(coords, key=by_qr) == [Hex(-1, 0), Hex(0, 0), Hex(0, 1), Hex(1, -1), Hex(2, -1)]
    assert sorted(coords, key=by_rq) == [Hex(1, -1), Hex(2, -1), Hex(-1, 0), Hex(0, 0), Hex(0, 1)]
