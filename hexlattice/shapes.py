"""Filled regions: hexagonal ranges, wedges and map shapes.

Every function returns a :class:`~hexlattice.iteration.HexSequence` whose
length is known before iteration.
"""

from __future__ import annotations

from .coords import Hex, check_radius, range_count
from .directions import EdgeDirection, VertexDirection
from .iteration import HexSequence
from .rings import Radii, normalize_radii, ring_edge


def hex_range(center: Hex, radius: int) -> HexSequence:
    """All hexes within ``radius`` of ``center``, ordered by q then r."""

    check_radius(radius)

    def _walk():
        for dq in range(-radius, radius + 1):
            r_min = max(-radius, -dq - radius)
            r_max = min(radius, radius - dq)
            for dr in range(r_min, r_max + 1):
                yield Hex(center.q + dq, center.r + dr)

    return HexSequence(_walk, range_count(radius))


def xrange(center: Hex, radius: int) -> HexSequence:
    """Like :func:`hex_range` but without ``center`` itself."""

    full = hex_range(center, radius)
    return HexSequence(lambda: (h for h in full if h != center), len(full) - 1)


def wedge(center: Hex, radii: Radii, direction: VertexDirection) -> HexSequence:
    """Triangular sector between the two edge directions flanking ``direction``.

    Built from one clockwise ring edge per radius of ``radii``.
    """
    values = normalize_radii(radii)

    def _walk():
        for radius in values:
            yield from ring_edge(center, radius, direction)

    return HexSequence(_walk, sum(radius + 1 for radius in values))


def full_wedge(center: Hex, radius: int, direction: VertexDirection) -> HexSequence:
    check_radius(radius)
    return wedge(center, range(radius + 1), direction)


def wedge_to(start: Hex, end: Hex) -> HexSequence:
    """Full wedge from ``start`` reaching ``end``, oriented on the main diagonal."""

    return full_wedge(start, start.distance_to(end), start.main_diagonal_to(end))


def custom_wedge_to(start: Hex, end: Hex, radii: Radii) -> HexSequence:
    return wedge(start, radii, start.main_diagonal_to(end))


def corner_wedge(center: Hex, radii: Radii, direction: EdgeDirection) -> HexSequence:
    """120 degree cone centred on the edge direction ``direction``.

    Each radius contributes the two ring edges adjacent to ``direction``,
    sharing the corner hex once.
    """
    values = normalize_radii(radii)
    left, right = direction.vertex_directions()

    def _walk():
        for radius in values:
            yield from ring_edge(center, radius, left)
            yield from ring_edge(center, radius, right)[1:]

    return HexSequence(_walk, sum(2 * radius + 1 for radius in values))


def corner_wedge_to(start: Hex, end: Hex) -> HexSequence:
    return corner_wedge(start, start.distance_to(end), start.main_direction_to(end))


def parallelogram(low: Hex, high: Hex) -> HexSequence:
    def _walk():
        for q in range(low.q, high.q + 1):
            for r in range(low.r, high.r + 1):
                yield Hex(q, r)

    count = max(0, high.q - low.q + 1) * max(0, high.r - low.r + 1)
    return HexSequence(_walk, count)


def triangle(size: int, origin: Hex = Hex.ZERO) -> HexSequence:
    check_radius(size)

    def _walk():
        for q in range(size + 1):
            for r in range(size - q + 1):
                yield Hex(origin.q + q, origin.r + r)

    return HexSequence(_walk, (size + 1) * (size + 2) // 2)


def rhombus(origin: Hex, rows: int, columns: int) -> HexSequence:
    if rows < 0 or columns < 0:
        raise ValueError("rows and columns must be non-negative")

    def _walk():
        for r in range(rows):
            for q in range(columns):
                yield Hex(origin.q + q, origin.r + r)

    return HexSequence(_walk, rows * columns)


def pointy_rectangle(left: int, right: int, top: int, bottom: int) -> HexSequence:
    """Rectangle of rows for pointy-top maps, using odd-r row offsets."""

    def _walk():
        for r in range(top, bottom + 1):
            offset = r >> 1
            for q in range(left - offset, right - offset + 1):
                yield Hex(q, r)

    count = max(0, right - left + 1) * max(0, bottom - top + 1)
    return HexSequence(_walk, count)


def flat_rectangle(left: int, right: int, top: int, bottom: int) -> HexSequence:
    """Rectangle of columns for flat-top maps, using odd-q column offsets."""

    def _walk():
        for q in range(left, right + 1):
            offset = q >> 1
            for r in range(top - offset, bottom - offset + 1):
                yield Hex(q, r)

    count = max(0, right - left + 1) * max(0, bottom - top + 1)
    return HexSequence(_walk, count)


__all__ = [
    "corner_wedge",
    "corner_wedge_to",
    "custom_wedge_to",
    "flat_rectangle",
    "full_wedge",
    "hex_range",
    "parallelogram",
    "pointy_rectangle",
    "rhombus",
    "triangle",
    "wedge",
    "wedge_to",
]
