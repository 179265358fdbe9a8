"""Axial hex coordinates and their vector algebra.

Coordinates use the axial ``(q, r)`` form with the implicit cubic third
component ``s = -q - r``.
Reference: https://www.redblobgames.com/grids/hexagons/
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Iterator

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .directions import DirectionWay, EdgeDirection, VertexDirection
    from .grid import GridEdge, GridVertex


def _round_half_away(value: float) -> int:
    if value >= 0:
        return math.floor(value + 0.5)
    return -math.floor(-value + 0.5)


def _signum(value: int) -> int:
    return (value > 0) - (value < 0)


@dataclass(frozen=True, slots=True)
class Hex:
    """Axial hex-grid coordinate."""

    q: int
    r: int

    ZERO: ClassVar[Hex]
    ORIGIN: ClassVar[Hex]
    ONE: ClassVar[Hex]
    NEG_ONE: ClassVar[Hex]
    Q: ClassVar[Hex]
    NEG_Q: ClassVar[Hex]
    R: ClassVar[Hex]
    NEG_R: ClassVar[Hex]

    @property
    def s(self) -> int:
        return -self.q - self.r

    @classmethod
    def from_cubic(cls, q: int, r: int, s: int) -> Hex:
        if q + r + s != 0:
            raise ValueError("For cube coords, q + r + s must be 0")
        return cls(q, r)

    @classmethod
    def from_tuple(cls, value: tuple[int, int]) -> Hex:
        q, r = value
        return cls(int(q), int(r))

    def to_tuple(self) -> tuple[int, int]:
        return (self.q, self.r)

    def to_cubic(self) -> tuple[int, int, int]:
        return (self.q, self.r, self.s)

    def __iter__(self) -> Iterator[int]:
        yield self.q
        yield self.r

    def __repr__(self) -> str:
        return f"Hex({self.q}, {self.r})"

    # --- Arithmetic -------------------------------------------------------

    def __add__(self, other: object) -> Hex:
        if not isinstance(other, Hex):
            return NotImplemented
        return Hex(self.q + other.q, self.r + other.r)

    def __sub__(self, other: object) -> Hex:
        if not isinstance(other, Hex):
            return NotImplemented
        return Hex(self.q - other.q, self.r - other.r)

    def __neg__(self) -> Hex:
        return Hex(-self.q, -self.r)

    def __mul__(self, factor: object) -> Hex:
        if not isinstance(factor, int):
            return NotImplemented
        return Hex(self.q * factor, self.r * factor)

    __rmul__ = __mul__

    def __floordiv__(self, divisor: object) -> Hex:
        if not isinstance(divisor, int):
            return NotImplemented
        return Hex(self.q // divisor, self.r // divisor)

    def __mod__(self, divisor: object) -> Hex:
        if isinstance(divisor, Hex):
            return Hex(self.q % divisor.q, self.r % divisor.r)
        if isinstance(divisor, int):
            return Hex(self.q % divisor, self.r % divisor)
        return NotImplemented

    def __abs__(self) -> Hex:
        return Hex(abs(self.q), abs(self.r))

    def scale(self, factor: int) -> Hex:
        return self * factor

    def min(self, other: Hex) -> Hex:
        """Component-wise minimum."""

        return Hex(min(self.q, other.q), min(self.r, other.r))

    def max(self, other: Hex) -> Hex:
        """Component-wise maximum."""

        return Hex(max(self.q, other.q), max(self.r, other.r))

    def signum(self) -> Hex:
        return Hex(_signum(self.q), _signum(self.r))

    def dot(self, other: Hex) -> int:
        return self.q * other.q + self.r * other.r

    # --- Metrics ----------------------------------------------------------

    def length(self) -> int:
        """Number of steps from the origin to ``self``."""

        return max(abs(self.q), abs(self.r), abs(self.s))

    def distance_to(self, other: Hex) -> int:
        return (self - other).length()

    def squared_euclidean_length(self) -> int:
        return self.q * self.q + self.r * self.r + self.q * self.r

    def euclidean_length(self) -> float:
        return math.sqrt(self.squared_euclidean_length())

    def euclidean_distance_to(self, other: Hex) -> float:
        return (other - self).euclidean_length()

    # --- Neighbors --------------------------------------------------------

    def neighbor(self, direction: EdgeDirection) -> Hex:
        return self + direction.delta

    def diagonal_neighbor(self, direction: VertexDirection) -> Hex:
        return self + direction.delta

    def all_neighbors(self) -> list[Hex]:
        return [Hex(self.q + dq, self.r + dr) for dq, dr in NEIGHBOR_DELTAS]

    def all_diagonals(self) -> list[Hex]:
        return [Hex(self.q + dq, self.r + dr) for dq, dr in DIAGONAL_DELTAS]

    def all_edges(self) -> list[GridEdge]:
        from .directions import EdgeDirection
        from .grid import GridEdge

        return [GridEdge(self, direction) for direction in EdgeDirection]

    def all_vertices(self) -> list[GridVertex]:
        from .directions import VertexDirection
        from .grid import GridVertex

        return [GridVertex(self, direction) for direction in VertexDirection]

    def neighbor_direction(self, other: Hex) -> EdgeDirection | None:
        """Return the edge direction leading to ``other`` if it is adjacent."""

        from .directions import EdgeDirection

        for direction in EdgeDirection:
            if self.neighbor(direction) == other:
                return direction
        return None

    def way_to(self, other: Hex) -> DirectionWay[EdgeDirection]:
        """Edge direction(s) best matching the vector from ``self`` to ``other``.

        When the target sits exactly on the boundary between two edge
        sectors, the result is a tie holding both directions.  The zero
        vector (``other == self``) has no direction and yields the fixed tie
        ``(POINTY_BOTTOM_LEFT, POINTY_BOTTOM_RIGHT)``; check for it before
        relying on :meth:`main_direction_to`.
        """

        from .directions import DirectionWay, EdgeDirection

        q, r, s = (other - self).to_cubic()
        # Projections onto the three edge axes.
        x, y, z = r - q, s - r, q - s
        xa, ya, za = abs(x), abs(y), abs(z)
        top = max(xa, ya, za)
        if top == xa:
            return DirectionWay.resolve(
                x < 0, xa == ya, xa == za, EdgeDirection.FLAT_BOTTOM_LEFT
            )
        if top == ya:
            return DirectionWay.resolve(y < 0, ya == za, ya == xa, EdgeDirection.FLAT_TOP)
        return DirectionWay.resolve(
            z < 0, za == xa, za == ya, EdgeDirection.FLAT_BOTTOM_RIGHT
        )

    def diagonal_way_to(self, other: Hex) -> DirectionWay[VertexDirection]:
        """Vertex direction(s) best matching the vector from ``self`` to ``other``.

        Like :meth:`way_to`, ``other == self`` yields a fixed tie,
        ``(FLAT_RIGHT, FLAT_TOP_RIGHT)``.
        """

        from .directions import DirectionWay, VertexDirection

        x, y, z = (other - self).to_cubic()
        xa, ya, za = abs(x), abs(y), abs(z)
        top = max(xa, ya, za)
        if top == xa:
            return DirectionWay.resolve(x < 0, xa == ya, xa == za, VertexDirection.FLAT_RIGHT)
        if top == ya:
            return DirectionWay.resolve(
                y < 0, ya == za, ya == xa, VertexDirection.FLAT_BOTTOM_LEFT
            )
        return DirectionWay.resolve(z < 0, za == xa, za == ya, VertexDirection.FLAT_TOP_LEFT)

    def main_direction_to(self, other: Hex) -> EdgeDirection:
        return self.way_to(other).unwrap()

    def main_diagonal_to(self, other: Hex) -> VertexDirection:
        return self.diagonal_way_to(other).unwrap()

    # --- Rotation and reflection -------------------------------------------

    def clockwise(self) -> Hex:
        return Hex(-self.r, -self.s)

    def counter_clockwise(self) -> Hex:
        return Hex(-self.s, -self.q)

    def rotate_cw(self, steps: int = 1) -> Hex:
        """Rotate around the origin by ``steps`` * 60 degrees clockwise."""

        steps %= 6
        if steps == 3:
            return -self
        if steps > 3:
            return self.rotate_ccw(6 - steps)
        result = self
        for _ in range(steps):
            result = result.clockwise()
        return result

    def rotate_ccw(self, steps: int = 1) -> Hex:
        """Rotate around the origin by ``steps`` * 60 degrees counter clockwise."""

        steps %= 6
        if steps == 3:
            return -self
        if steps > 3:
            return self.rotate_cw(6 - steps)
        result = self
        for _ in range(steps):
            result = result.counter_clockwise()
        return result

    def rotate_cw_around(self, center: Hex, steps: int = 1) -> Hex:
        return (self - center).rotate_cw(steps) + center

    def rotate_ccw_around(self, center: Hex, steps: int = 1) -> Hex:
        return (self - center).rotate_ccw(steps) + center

    def reflect_q(self) -> Hex:
        return Hex(self.q, self.s)

    def reflect_r(self) -> Hex:
        return Hex(self.s, self.r)

    def reflect_s(self) -> Hex:
        return Hex(self.r, self.q)

    # --- Fractional space ---------------------------------------------------

    @classmethod
    def round(cls, fq: float, fr: float) -> Hex:
        """Round a fractional axial position to the containing hex.

        All three cubic components are rounded, then the one with the
        largest rounding error is recomputed from the other two so that
        ``q + r + s == 0`` holds.
        """

        fs = -fq - fr
        q, r, s = _round_half_away(fq), _round_half_away(fr), _round_half_away(fs)
        dq, dr, ds = abs(q - fq), abs(r - fr), abs(s - fs)
        if dq > dr and dq > ds:
            q = -r - s
        elif dr > ds:
            r = -q - s
        return cls(q, r)

    def lerp(self, other: Hex, t: float) -> Hex:
        return Hex.round(
            self.q + (other.q - self.q) * t,
            self.r + (other.r - self.r) * t,
        )


Hex.ZERO = Hex(0, 0)
Hex.ORIGIN = Hex.ZERO
Hex.ONE = Hex(1, 1)
Hex.NEG_ONE = Hex(-1, -1)
Hex.Q = Hex(1, 0)
Hex.NEG_Q = Hex(-1, 0)
Hex.R = Hex(0, 1)
Hex.NEG_R = Hex(0, -1)

# Clockwise from edge direction 0.
NEIGHBOR_DELTAS: tuple[tuple[int, int], ...] = (
    (+1, 0),
    (0, +1),
    (-1, +1),
    (-1, 0),
    (0, -1),
    (+1, -1),
)

DIAGONAL_DELTAS: tuple[tuple[int, int], ...] = (
    (+2, -1),
    (+1, +1),
    (-1, +2),
    (-2, +1),
    (-1, -1),
    (+1, -2),
)


@dataclass(frozen=True, slots=True)
class Cube:
    x: int
    y: int
    z: int

    """Cube coordinate with ``x = q``, ``z = r`` and ``y = s``."""

    def __post_init__(self) -> None:
        if self.x + self.y + self.z != 0:
            raise ValueError("For cube coords, x + y + z must be 0")

    @classmethod
    def from_hex(cls, h: Hex) -> Cube:
        return cls(h.q, h.s, h.r)

    def to_hex(self) -> Hex:
        return Hex(self.x, self.z)

    def distance_to(self, other: Cube) -> int:
        return max(abs(self.x - other.x), abs(self.y - other.y), abs(self.z - other.z))


def by_length(h: Hex) -> int:
    """Sort key ordering coordinates by distance from the origin."""

    return h.length()


def by_qr(h: Hex) -> tuple[int, int]:
    """Sort key ordering by ``q`` then ``r``; the order of :func:`hex_range`."""

    return (h.q, h.r)


def by_rq(h: Hex) -> tuple[int, int]:
    """Sort key ordering by ``r`` then ``q``, i.e. row by row."""

    return (h.r, h.q)


def range_count(radius: int) -> int:
    """Number of coordinates within ``radius`` of a center."""

    return 3 * radius * (radius + 1) + 1


def ring_count(radius: int) -> int:
    return 1 if radius == 0 else 6 * radius


def wedge_count(radius: int) -> int:
    return radius * (radius + 3) // 2 + 1


def check_radius(radius: int, *, minimum: int = 0) -> int:
    if isinstance(radius, bool) or not isinstance(radius, int):
        raise TypeError("radius must be an int")
    if radius < minimum:
        raise ValueError(f"radius must be >= {minimum}")
    return radius


__all__ = [
    "Cube",
    "DIAGONAL_DELTAS",
    "Hex",
    "NEIGHBOR_DELTAS",
    "by_length",
    "by_qr",
    "by_rq",
    "check_radius",
    "range_count",
    "ring_count",
    "wedge_count",
]
