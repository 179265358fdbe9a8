from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from .coords import Hex, range_count
from .iteration import HexSequence
from .resolution import wrap_in_range
from .shapes import hex_range


@dataclass(frozen=True, slots=True)
class HexBounds:
    """Hexagonal area of ``radius`` around ``center``.

    Used to test membership and to wrap coordinates for seamless
    wraparound maps.
    """

    center: Hex
    radius: int

    def __post_init__(self) -> None:
        if isinstance(self.radius, bool) or not isinstance(self.radius, int):
            raise TypeError("radius must be an int")
        if self.radius < 0:
            raise ValueError("radius must be non-negative")

    @classmethod
    def from_radius(cls, radius: int) -> HexBounds:
        return cls(Hex.ZERO, radius)

    @classmethod
    def from_min_max(cls, low: Hex, high: Hex) -> HexBounds:
        """Smallest bounds centred between ``low`` and ``high`` containing both."""

        middle = (low + high) // 2
        return cls(middle, max(middle.distance_to(low), middle.distance_to(high)))

    def is_in_bounds(self, coord: Hex) -> bool:
        return self.center.distance_to(coord) <= self.radius

    def __contains__(self, coord: object) -> bool:
        return isinstance(coord, Hex) and self.is_in_bounds(coord)

    def hex_count(self) -> int:
        return range_count(self.radius)

    def __len__(self) -> int:
        return self.hex_count()

    def all_coords(self) -> HexSequence:
        return hex_range(self.center, self.radius)

    def __iter__(self) -> Iterator[Hex]:
        return iter(self.all_coords())

    def intersecting_with(self, other: HexBounds) -> list[Hex]:
        """Coordinates inside both bounds, walked over the smaller one."""

        small, large = (other, self) if self.radius > other.radius else (self, other)
        return [h for h in small.all_coords() if large.is_in_bounds(h)]

    def wrap_local(self, coord: Hex) -> Hex:
        """Wrapped position of ``coord`` relative to ``center``."""

        return wrap_in_range(coord - self.center, self.radius)

    def wrap(self, coord: Hex) -> Hex:
        """Wrap ``coord`` into the bounds.

        Coordinates already in bounds are returned unchanged.
        """
        return self.wrap_local(coord) + self.center

    def wrap_all(self, coords: Iterable[Hex]) -> list[Hex]:
        return [self.wrap(c) for c in coords]


__all__ = ["HexBounds"]
