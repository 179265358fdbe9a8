"""Line of sight based field of view."""

from __future__ import annotations

from typing import Callable, Iterable

from ..coords import Hex, check_radius
from ..directions import EdgeDirection
from ..lines import line_to
from ..shapes import corner_wedge, hex_range

Blocking = Callable[[Hex], bool]


def has_line_of_sight(origin: Hex, target: Hex, blocking: Blocking) -> bool:
    """True when no hex strictly between ``origin`` and ``target`` blocks.

    The endpoints themselves are never tested, so a blocking target (a wall)
    is still seen.
    """
    line = list(line_to(origin, target))
    return not any(blocking(h) for h in line[1:-1])


def _visible(origin: Hex, targets: Iterable[Hex], blocking: Blocking) -> set[Hex]:
    seen = {origin}
    for target in targets:
        if target not in seen and has_line_of_sight(origin, target, blocking):
            seen.add(target)
    return seen


def field_of_view(origin: Hex, radius: int, blocking: Blocking) -> set[Hex]:
    """Hexes within ``radius`` of ``origin`` visible from it."""

    check_radius(radius)
    return _visible(origin, hex_range(origin, radius), blocking)


def directional_field_of_view(
    origin: Hex,
    radius: int,
    direction: EdgeDirection,
    blocking: Blocking,
) -> set[Hex]:
    """Like :func:`field_of_view`, limited to the 120 degree cone around ``direction``."""

    check_radius(radius)
    return _visible(origin, corner_wedge(origin, radius, direction), blocking)


__all__ = ["Blocking", "directional_field_of_view", "field_of_view", "has_line_of_sight"]
