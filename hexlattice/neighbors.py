from __future__ import annotations

from typing import Iterable

from .bounds import HexBounds
from .conversions import Offset
from .coords import DIAGONAL_DELTAS, NEIGHBOR_DELTAS, Hex


def neighbors(a: Hex) -> Iterable[Hex]:
    """Edge neighbors of ``a`` in clockwise order from edge direction 0."""

    for dq, dr in NEIGHBOR_DELTAS:
        yield Hex(a.q + dq, a.r + dr)


def diagonals(a: Hex) -> Iterable[Hex]:
    for dq, dr in DIAGONAL_DELTAS:
        yield Hex(a.q + dq, a.r + dr)


def neighbors_offset(o: Offset) -> Iterable[Offset]:
    for n in neighbors(o.to_hex()):
        yield Offset.from_hex(n, o.layout)


def neighbors_bounded(a: Hex, bounds: HexBounds) -> Iterable[Hex]:
    for n in neighbors(a):
        if bounds.is_in_bounds(n):
            yield n


def neighbors_wrapped(a: Hex, bounds: HexBounds) -> Iterable[Hex]:
    """Neighbors of ``a`` on a wraparound map; out of bounds ones are wrapped."""

    for n in neighbors(a):
        yield bounds.wrap(n)


def neighbors_offset_bounded(o: Offset, width: int, height: int) -> Iterable[Offset]:
    for n in neighbors_offset(o):
        if 0 <= n.col < width and 0 <= n.row < height:
            yield n


__all__ = [
    "diagonals",
    "neighbors",
    "neighbors_bounded",
    "neighbors_offset",
    "neighbors_offset_bounded",
    "neighbors_wrapped",
]
