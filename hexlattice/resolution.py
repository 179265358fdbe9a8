"""Coarse/fine resolution mapping over hexagonal chunks.

A lower resolution grid of ``radius`` groups every hexagon of that radius
into a single parent coordinate.  The mapping is closed form; see
https://observablehq.com/@sanderevers/hexagon-tiling-of-an-hexagonal-grid
and https://observablehq.com/@sanderevers/hexmod-representation
"""

from __future__ import annotations

from .coords import Hex, check_radius, range_count


def shift(radius: int) -> int:
    """Shift constant of the hexmod representation for ``radius``."""

    return 3 * radius + 2


def to_lower_res(coord: Hex, radius: int) -> Hex:
    """Parent of ``coord`` in the lower resolution grid of ``radius``."""

    check_radius(radius, minimum=1)
    x, y, z = coord.to_cubic()
    area = range_count(radius)
    k = shift(radius)
    xh = (y + k * x) // area
    yh = (z + k * y) // area
    zh = (x + k * z) // area
    return Hex((1 + xh - yh) // 3, (1 + yh - zh) // 3)


def to_higher_res(coord: Hex, radius: int) -> Hex:
    """Center, in the fine grid, of the chunk that ``coord`` stands for."""

    check_radius(radius, minimum=1)
    x, y, z = coord.to_cubic()
    return Hex(x * (radius + 1) - radius * z, y * (radius + 1) - radius * x)


def to_local(coord: Hex, radius: int) -> Hex:
    """Offset of ``coord`` from the center of its parent chunk."""

    parent = to_lower_res(coord, radius)
    return coord - to_higher_res(parent, radius)


def wrap_in_range(coord: Hex, radius: int) -> Hex:
    """Wrap ``coord`` into the hexagon of ``radius`` around the origin.

    A radius of zero wraps everything onto the origin.
    """
    check_radius(radius)
    if radius == 0:
        return Hex.ZERO
    return to_local(coord, radius)


def to_hexmod(coord: Hex, radius: int) -> int:
    """Single integer index of ``coord`` modulo the hexagon of ``radius``."""

    check_radius(radius)
    return (coord.r + shift(radius) * coord.q) % range_count(radius)


def from_hexmod(index: int, radius: int) -> Hex:
    """Inverse of :func:`to_hexmod` for ``0 <= index < range_count(radius)``."""

    check_radius(radius)
    if not 0 <= index < range_count(radius):
        raise ValueError("hexmod index out of range")
    k = shift(radius)
    ms = (index + radius) // k
    mcs = (index + 2 * radius) // (k - 1)
    return Hex(
        ms * (radius + 1) - mcs * radius,
        index + ms * (-2 * radius - 1) + mcs * (-radius - 1),
    )


__all__ = [
    "from_hexmod",
    "shift",
    "to_hexmod",
    "to_higher_res",
    "to_local",
    "to_lower_res",
    "wrap_in_range",
]
