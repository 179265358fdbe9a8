"""Conversions between axial, cube, offset and doubled coordinates.

Reference: https://www.redblobgames.com/grids/hexagons/#conversions
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .coords import Cube, Hex


class OffsetLayout(Enum):
    ODD_R = "odd_r"
    EVEN_R = "even_r"
    ODD_Q = "odd_q"
    EVEN_Q = "even_q"

    @property
    def shifts_rows(self) -> bool:
        """True for row layouts (pointy-top), False for column layouts."""

        return self in (OffsetLayout.ODD_R, OffsetLayout.EVEN_R)

    @property
    def parity(self) -> int:
        # +1 pushes even lines, -1 pushes odd lines.
        return 1 if self in (OffsetLayout.EVEN_R, OffsetLayout.EVEN_Q) else -1


class DoubledLayout(Enum):
    DOUBLED_WIDTH = "doubled_width"
    DOUBLED_HEIGHT = "doubled_height"


@dataclass(frozen=True, slots=True)
class Offset:
    col: int  # q-like
    row: int  # r-like
    layout: OffsetLayout

    @classmethod
    def from_hex(cls, h: Hex, layout: OffsetLayout) -> Offset:
        return axial_to_offset(h, layout)

    def to_hex(self) -> Hex:
        return offset_to_axial(self)


@dataclass(frozen=True, slots=True)
class Doubled:
    col: int
    row: int
    layout: DoubledLayout


def axial_to_cube(a: Hex) -> Cube:
    return Cube.from_hex(a)


def cube_to_axial(c: Cube) -> Hex:
    return c.to_hex()


def _check_offset_layout(layout: object) -> OffsetLayout:
    if not isinstance(layout, OffsetLayout):
        raise ValueError("Unknown layout")
    return layout


def _half_shift(line: int, parity: int) -> int:
    """Offset of a shifted row or column ``line`` from the axial grid."""

    return (line + parity * (line & 1)) // 2


def axial_to_offset(a: Hex, layout: OffsetLayout) -> Offset:
    layout = _check_offset_layout(layout)
    if layout.shifts_rows:
        return Offset(a.q + _half_shift(a.r, layout.parity), a.r, layout)
    return Offset(a.q, a.r + _half_shift(a.q, layout.parity), layout)


def offset_to_axial(o: Offset) -> Hex:
    layout = _check_offset_layout(o.layout)
    if layout.shifts_rows:
        return Hex(o.col - _half_shift(o.row, layout.parity), o.row)
    return Hex(o.col, o.row - _half_shift(o.col, layout.parity))


def axial_to_doubled(a: Hex, layout: DoubledLayout) -> Doubled:
    if layout == DoubledLayout.DOUBLED_WIDTH:
        return Doubled(2 * a.q + a.r, a.r, layout)
    if layout == DoubledLayout.DOUBLED_HEIGHT:
        return Doubled(a.q, 2 * a.r + a.q, layout)
    raise ValueError("Unknown layout")


def doubled_to_axial(d: Doubled) -> Hex:
    """Axial coordinate of a doubled coordinate.

    ``col + row`` (width) or ``row + col`` (height) must be even.
    """
    if (d.col + d.row) & 1:
        raise ValueError("doubled coordinates need an even col + row")
    if d.layout == DoubledLayout.DOUBLED_WIDTH:
        return Hex((d.col - d.row) // 2, d.row)
    if d.layout == DoubledLayout.DOUBLED_HEIGHT:
        return Hex(d.col, (d.row - d.col) // 2)
    raise ValueError("Unknown layout")


__all__ = [
    "Doubled",
    "DoubledLayout",
    "Offset",
    "OffsetLayout",
    "axial_to_cube",
    "axial_to_doubled",
    "axial_to_offset",
    "cube_to_axial",
    "doubled_to_axial",
    "offset_to_axial",
]
