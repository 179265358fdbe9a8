import pytest

from hexlattice import Hex
from hexlattice.coords import range_count
from hexlattice.resolution import (
    from_hexmod,
    to_hexmod,
    to_higher_res,
    to_local,
    to_lower_res,
    wrap_in_range,
)
from hexlattice.shapes import hex_range


@pytest.mark.parametrize("radius", range(1, 6))
def test_lower_of_higher_is_identity(radius: int):
    for coord in hex_range(Hex(0, 0), 6):
        assert to_lower_res(to_higher_res(coord, radius), radius) == coord


@pytest.mark.parametrize("radius", range(1, 5))
def test_chunk_around_origin_maps_to_zero(radius: int):
    for coord in hex_range(Hex(0, 0), radius):
        assert to_lower_res(coord, radius) == Hex(0, 0)
        assert to_local(coord, radius) == coord


@pytest.mark.parametrize("radius", range(1, 5))
def test_children_stay_near_parent_center(radius: int):
    for coord in hex_range(Hex(7, -3), 12):
        parent = to_lower_res(coord, radius)
        assert coord.distance_to(to_higher_res(parent, radius)) <= radius
        assert to_local(coord, radius).length() <= radius


def test_chunks_partition_the_grid():
    radius = 2
    parents = [to_lower_res(c, radius) for c in hex_range(Hex(0, 0), 10)]
    for parent in set(parents):
        center = to_higher_res(parent, radius)
        members = set(hex_range(center, radius))
        assert all(to_lower_res(m, radius) == parent for m in members)


def test_higher_res_values():
    assert to_higher_res(Hex(1, 0), 2) == Hex(5, -2)
    assert to_higher_res(Hex(0, 0), 3) == Hex(0, 0)
    assert to_lower_res(Hex(3, 0), 2) == Hex(1, 0)
    assert to_local(Hex(3, 0), 2) == Hex(-2, 2)


@pytest.mark.parametrize("func", [to_lower_res, to_higher_res, to_local])
def test_resolution_rejects_zero_radius(func):
    with pytest.raises(ValueError):
        func(Hex(1, 1), 0)
    with pytest.raises(ValueError):
        func(Hex(1, 1), -2)


def test_wrap_in_range():
    assert wrap_in_range(Hex(3, 0), 2) == Hex(-2, 2)
    assert wrap_in_range(Hex(9, -4), 0) == Hex(0, 0)


@pytest.mark.parametrize("radius", [0, 1, 5, 20])
def test_hexmod_round_trip(radius: int):
    indices = set()
    for coord in hex_range(Hex(0, 0), radius):
        index = to_hexmod(coord, radius)
        assert 0 <= index < range_count(radius)
        assert from_hexmod(index, radius) == coord
        indices.add(index)
    assert len(indices) == range_count(radius)


def test_hexmod_rejects_out_of_range_index():
    with pytest.raises(ValueError):
        from_hexmod(7, 1)
