import pytest

from hexlattice import (
    Cube,
    Doubled,
    DoubledLayout,
    Hex,
    Offset,
    OffsetLayout,
    axial_to_cube,
    axial_to_doubled,
    axial_to_offset,
    cube_to_axial,
    doubled_to_axial,
    offset_to_axial,
)
from hexlattice.shapes import hex_range


def test_axial_cube_roundtrip():
    a = Hex(3, -2)
    c = axial_to_cube(a)
    assert c == Cube(3, -1, -2)
    assert cube_to_axial(c) == a


@pytest.mark.parametrize("layout", list(OffsetLayout))
def test_offset_roundtrip(layout: OffsetLayout):
    for coord in hex_range(Hex(0, 0), 6):
        offset = axial_to_offset(coord, layout)
        assert offset.layout is layout
        assert offset_to_axial(offset) == coord


@pytest.mark.parametrize("layout", list(DoubledLayout))
def test_doubled_roundtrip(layout: DoubledLayout):
    for coord in hex_range(Hex(0, 0), 6):
        assert doubled_to_axial(axial_to_doubled(coord, layout)) == coord


def test_doubled_values():
    assert axial_to_doubled(Hex(1, 2), DoubledLayout.DOUBLED_WIDTH) == Doubled(
        4, 2, DoubledLayout.DOUBLED_WIDTH
    )
    assert axial_to_doubled(Hex(1, 2), DoubledLayout.DOUBLED_HEIGHT) == Doubled(
        1, 5, DoubledLayout.DOUBLED_HEIGHT
    )


def test_doubled_rejects_odd_parity():
    with pytest.raises(ValueError):
        doubled_to_axial(Doubled(1, 2, DoubledLayout.DOUBLED_WIDTH))


def test_offset_values():
    assert axial_to_offset(Hex(-1, 3), OffsetLayout.ODD_R).col == 0
    assert axial_to_offset(Hex(-1, 3), OffsetLayout.EVEN_R).col == 1


def test_column_offset_values():
    assert axial_to_offset(Hex(3, -1), OffsetLayout.ODD_Q) == Offset(3, 0, OffsetLayout.ODD_Q)
    assert axial_to_offset(Hex(3, -1), OffsetLayout.EVEN_Q) == Offset(3, 1, OffsetLayout.EVEN_Q)
    assert OffsetLayout.ODD_R.shifts_rows
    assert not OffsetLayout.EVEN_Q.shifts_rows


def test_offset_methods_match_functions():
    offset = Offset.from_hex(Hex(-2, 5), OffsetLayout.EVEN_R)
    assert offset == axial_to_offset(Hex(-2, 5), OffsetLayout.EVEN_R)
    assert offset.to_hex() == Hex(-2, 5)


def test_unknown_offset_layout():
    with pytest.raises(ValueError):
        axial_to_offset(Hex(0, 0), "odd_r")
    with pytest.raises(ValueError):
        offset_to_axial(Offset(0, 0, DoubledLayout.DOUBLED_WIDTH))
