"""Line drawing between two hex coordinates."""

from __future__ import annotations

from .coords import Hex
from .iteration import HexSequence

# Nudge applied before rounding so samples never sit exactly on a hex edge.
_NUDGE_Q = 1e-6
_NUDGE_R = 2e-6


def line_to(start: Hex, end: Hex) -> HexSequence:
    """Draw a line between two hex coordinates using linear interpolation.

    Yields ``distance + 1`` hexes from ``start`` to ``end`` (inclusive), each
    one a cubic interpolation sample rounded to the containing hex.  A line
    from a hex to itself is that single hex.
    """
    n = start.distance_to(end)
    dq = end.q - start.q
    dr = end.r - start.r

    def _walk():
        if n == 0:
            yield start
            return
        yield start
        for i in range(1, n):
            t = i / n
            yield Hex.round(
                start.q + _NUDGE_Q + dq * t,
                start.r + _NUDGE_R + dr * t,
            )
        yield end

    return HexSequence(_walk, n + 1)


def rectiline_to(start: Hex, end: Hex, clockwise: bool = True) -> HexSequence:
    """Line from ``start`` to ``end`` using only two edge directions.

    The directions are the pair flanking the main diagonal towards ``end``;
    the line first walks the counter clockwise one when ``clockwise`` is set,
    the clockwise one otherwise.
    """
    delta = end - start
    count = delta.length()
    first, second = start.main_diagonal_to(end).edge_directions()
    if not clockwise:
        first, second = second, first
    step_a = first.delta
    step_b = second.delta
    # Steps along ``step_a``: distance between delta and the full projection on ``step_b``.
    steps_a = (step_b * count).distance_to(delta)

    def _walk():
        current = start
        yield current
        for i in range(count):
            current = current + (step_a if i < steps_a else step_b)
            yield current

    return HexSequence(_walk, count + 1)


__all__ = ["line_to", "rectiline_to"]
