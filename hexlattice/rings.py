"""Rings, ring edges and spirals around a center hex.

Every ring is walked clockwise.  A full ring starts at ``center +
EdgeDirection(0) * radius`` unless a custom start direction is given.
"""

from __future__ import annotations

import logging
from typing import Iterable

from .coords import Hex, check_radius, ring_count
from .directions import EdgeDirection, VertexDirection
from .iteration import HexSequence

log = logging.getLogger(__name__)

Radii = int | Iterable[int]


def normalize_radii(radii: Radii) -> tuple[int, ...]:
    """Expand ``radii`` into a tuple; a bare int ``n`` means ``0..=n``."""

    if isinstance(radii, int):
        check_radius(radii)
        return tuple(range(radii + 1))
    values = tuple(radii)
    for radius in values:
        check_radius(radius)
    return values


def custom_ring(
    center: Hex,
    radius: int,
    start: EdgeDirection = EdgeDirection.POINTY_RIGHT,
    clockwise: bool = True,
) -> list[Hex]:
    """Ring of ``radius`` starting at the corner in direction ``start``."""

    check_radius(radius)
    if radius == 0:
        return [center]
    turn = 2 if clockwise else 4
    step = -1 if not clockwise else 1
    hex_ = center + start.delta * radius
    result: list[Hex] = []
    for side in range(6):
        delta = start.rotate_cw(turn + step * side).delta
        for _ in range(radius):
            result.append(hex_)
            hex_ = hex_ + delta
    return result


def ring(center: Hex, radius: int) -> list[Hex]:
    """Return all hexes at exactly ``radius`` distance from ``center``, clockwise."""

    return custom_ring(center, radius)


def rings(center: Hex, radii: Radii) -> list[list[Hex]]:
    return [ring(center, radius) for radius in normalize_radii(radii)]


def spiral_range(center: Hex, radii: Radii, clockwise: bool = True) -> HexSequence:
    """Concatenated rings for each radius of ``radii``, in the given order.

    Skip the inner rings by passing a radius range with a lower bound,
    e.g. ``range(2, 6)``.
    """
    values = normalize_radii(radii)

    def _walk():
        for radius in values:
            yield from custom_ring(center, radius, clockwise=clockwise)

    return HexSequence(_walk, sum(ring_count(radius) for radius in values))


def ring_edge(
    center: Hex,
    radius: int,
    direction: VertexDirection,
    clockwise: bool = True,
) -> list[Hex]:
    """Arc of the ring between the two edge directions flanking ``direction``.

    The arc holds ``radius + 1`` hexes, both corners included.
    """
    check_radius(radius)
    if radius == 0:
        return [center]
    left, right = direction.edge_directions()
    if clockwise:
        hex_ = center + left.delta * radius
        step = left.rotate_cw(2).delta
    else:
        hex_ = center + right.delta * radius
        step = right.rotate_ccw(2).delta
    return [hex_ + step * i for i in range(radius + 1)]


def ring_edges(center: Hex, radius: int, clockwise: bool = True) -> list[list[Hex]]:
    """The six arcs of one ring, one per vertex direction in clockwise order.

    Neighboring arcs share their corner hex.
    """
    return [ring_edge(center, radius, direction, clockwise) for direction in VertexDirection]


class RingCache:
    """Relative ring and ring-edge offsets keyed by radius.

    Offsets are computed around the origin once, then translated to any
    center.  Radii above ``max_radius`` are computed on demand without being
    stored.
    """

    def __init__(self, max_radius: int | None = None) -> None:
        if max_radius is not None:
            check_radius(max_radius)
        self.max_radius = max_radius
        self._rings: dict[int, tuple[Hex, ...]] = {}
        self._edges: dict[int, tuple[tuple[Hex, ...], ...]] = {}

    def __len__(self) -> int:
        return len(self._rings.keys() | self._edges.keys())

    def _cacheable(self, radius: int) -> bool:
        return self.max_radius is None or radius <= self.max_radius

    def ring_offsets(self, radius: int) -> tuple[Hex, ...]:
        offsets = self._rings.get(radius)
        if offsets is None:
            offsets = tuple(ring(Hex.ZERO, radius))
            if self._cacheable(radius):
                log.debug("Caching ring offsets for radius %d", radius)
                self._rings[radius] = offsets
        return offsets

    def edge_offsets(self, radius: int) -> tuple[tuple[Hex, ...], ...]:
        offsets = self._edges.get(radius)
        if offsets is None:
            offsets = tuple(tuple(edge) for edge in ring_edges(Hex.ZERO, radius))
            if self._cacheable(radius):
                log.debug("Caching ring edge offsets for radius %d", radius)
                self._edges[radius] = offsets
        return offsets

    def ring(self, center: Hex, radius: int) -> list[Hex]:
        return [center + offset for offset in self.ring_offsets(radius)]

    def ring_edge(self, center: Hex, radius: int, direction: VertexDirection) -> list[Hex]:
        return [center + offset for offset in self.edge_offsets(radius)[direction.value]]

    def ring_edges(self, center: Hex, radius: int) -> list[list[Hex]]:
        return [[center + offset for offset in edge] for edge in self.edge_offsets(radius)]

    def warm(self, radii: Radii) -> None:
        """Populate the cache for every radius of ``radii``."""

        for radius in normalize_radii(radii):
            self.ring_offsets(radius)
            self.edge_offsets(radius)

    def clear(self) -> None:
        self._rings.clear()
        self._edges.clear()


__all__ = [
    "RingCache",
    "custom_ring",
    "normalize_radii",
    "ring",
    "ring_edge",
    "ring_edges",
    "rings",
    "spiral_range",
]
