"""Size-known coordinate sequences and helpers over any iterable of hexes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Iterable, Iterator

from .coords import Hex

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .bounds import HexBounds


class HexSequence:
    """A finite, restartable sequence of hexes whose length is known up front.

    The items are produced lazily by ``factory`` on every iteration, so the
    same sequence can be walked several times and ``len()`` never consumes it.
    """

    __slots__ = ("_factory", "_count")

    def __init__(self, factory: Callable[[], Iterable[Hex]], count: int) -> None:
        if count < 0:
            raise ValueError("count must be non-negative")
        self._factory = factory
        self._count = count

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Hex]:
        return iter(self._factory())

    def __contains__(self, item: object) -> bool:
        return any(h == item for h in self)

    def __repr__(self) -> str:
        return f"HexSequence(count={self._count})"

    def to_list(self) -> list[Hex]:
        return list(self)


def average(coords: Iterable[Hex]) -> Hex:
    """Component-wise mean of ``coords``, floored; ``Hex.ZERO`` when empty."""

    total_q = 0
    total_r = 0
    count = 0
    for h in coords:
        total_q += h.q
        total_r += h.r
        count += 1
    count = max(count, 1)
    return Hex(total_q // count, total_r // count)


def bounds_of(coords: Iterable[Hex]) -> HexBounds:
    """Bounding hexagon containing every coordinate of ``coords``.

    The center sits halfway between the component-wise extremes; the radius
    is the largest distance from that center.
    """

    from .bounds import HexBounds

    items = list(coords)
    if not items:
        return HexBounds(Hex.ZERO, 0)
    low = items[0]
    high = items[0]
    for h in items[1:]:
        low = low.min(h)
        high = high.max(h)
    middle = (low + high) // 2
    return HexBounds(middle, max(middle.distance_to(h) for h in items))


def center(coords: Iterable[Hex]) -> Hex:
    return bounds_of(coords).center


__all__ = ["HexSequence", "average", "bounds_of", "center"]
