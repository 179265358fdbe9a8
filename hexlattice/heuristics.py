from __future__ import annotations

from .coords import Hex


def distance(a: Hex, b: Hex) -> int:
    """Hex steps between ``a`` and ``b``.

    Equal to half the sum of the absolute cubic differences.  Python integers
    do not overflow, so coordinates of any magnitude are safe here.
    """
    dq = a.q - b.q
    dr = a.r - b.r
    return (abs(dq) + abs(dr) + abs(dq + dr)) // 2


def length(a: Hex) -> int:
    return distance(a, Hex.ZERO)


def euclidean_distance(a: Hex, b: Hex) -> float:
    return a.euclidean_distance_to(b)


__all__ = ["distance", "euclidean_distance", "length"]
