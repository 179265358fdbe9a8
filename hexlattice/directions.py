"""Edge and vertex directions of a hexagon.

Both families hold six members indexed ``0..5`` in clockwise order.  Edge
direction ``k`` points to the neighbor sharing an edge; vertex direction
``k`` points to the diagonal neighbor across the vertex between edge
directions ``k - 1`` and ``k``.

Angles are measured counter clockwise from the +x axis with y pointing up.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Generic, Iterator, TypeVar

from .coords import DIAGONAL_DELTAS, NEIGHBOR_DELTAS, Hex
from .orientation import Orientation

DIRECTION_ANGLE_DEGREES = 60.0
DIRECTION_ANGLE_RAD = math.pi / 3
DIRECTION_ANGLE_OFFSET_DEGREES = 30.0
DIRECTION_ANGLE_OFFSET_RAD = math.pi / 6


def _sector(angle_degrees: float) -> int:
    """Counter clockwise sector index of ``angle_degrees`` centred on 0."""

    angle = (angle_degrees + DIRECTION_ANGLE_OFFSET_DEGREES) % 360.0
    return int(angle // DIRECTION_ANGLE_DEGREES) % 6


class _Direction(Enum):
    @property
    def index(self) -> int:
        return self.value

    def rotate_cw(self, steps: int = 1):
        return type(self)((self.value + steps) % 6)

    def rotate_ccw(self, steps: int = 1):
        return type(self)((self.value - steps) % 6)

    def clockwise(self):
        return self.rotate_cw(1)

    def counter_clockwise(self):
        return self.rotate_ccw(1)

    def right(self):
        return self.rotate_cw(1)

    def left(self):
        return self.rotate_ccw(1)

    def opposite(self):
        return self.rotate_cw(3)

    def __neg__(self):
        return self.opposite()

    def steps_between(self, other: _Direction) -> int:
        """Clockwise steps needed to go from ``other`` to ``self``."""

        return (self.value - other.value) % 6

    def angle_degrees_to(self, other: _Direction) -> float:
        return self.steps_between(other) * DIRECTION_ANGLE_DEGREES

    def angle_to(self, other: _Direction) -> float:
        return math.radians(self.angle_degrees_to(other))

    def angle_degrees(self, orientation: Orientation) -> float:
        raise NotImplementedError

    def angle(self, orientation: Orientation) -> float:
        return math.radians(self.angle_degrees(orientation))

    def angle_flat(self) -> float:
        return self.angle(Orientation.FLAT)

    def angle_pointy(self) -> float:
        return self.angle(Orientation.POINTY)

    def angle_flat_degrees(self) -> float:
        return self.angle_degrees(Orientation.FLAT)

    def angle_pointy_degrees(self) -> float:
        return self.angle_degrees(Orientation.POINTY)

    def unit_vector(self, orientation: Orientation) -> tuple[float, float]:
        angle = self.angle(orientation)
        return (math.cos(angle), math.sin(angle))

    @classmethod
    def from_angle(cls, angle: float, orientation: Orientation):
        return cls.from_angle_degrees(math.degrees(angle), orientation)

    @classmethod
    def from_angle_degrees(cls, angle: float, orientation: Orientation):
        raise NotImplementedError

    @classmethod
    def from_flat_angle(cls, angle: float):
        return cls.from_angle(angle, Orientation.FLAT)

    @classmethod
    def from_pointy_angle(cls, angle: float):
        return cls.from_angle(angle, Orientation.POINTY)

    @classmethod
    def from_flat_angle_degrees(cls, angle: float):
        return cls.from_angle_degrees(angle, Orientation.FLAT)

    @classmethod
    def from_pointy_angle_degrees(cls, angle: float):
        return cls.from_angle_degrees(angle, Orientation.POINTY)


class EdgeDirection(_Direction):
    """Direction towards one of the six edge neighbors."""

    POINTY_RIGHT = 0
    POINTY_BOTTOM_RIGHT = 1
    POINTY_BOTTOM_LEFT = 2
    POINTY_LEFT = 3
    POINTY_TOP_LEFT = 4
    POINTY_TOP_RIGHT = 5

    FLAT_BOTTOM_RIGHT = 0
    FLAT_BOTTOM = 1
    FLAT_BOTTOM_LEFT = 2
    FLAT_TOP_LEFT = 3
    FLAT_TOP = 4
    FLAT_TOP_RIGHT = 5

    @property
    def delta(self) -> Hex:
        return Hex(*NEIGHBOR_DELTAS[self.value])

    def angle_degrees(self, orientation: Orientation) -> float:
        base = ((6 - self.value) % 6) * DIRECTION_ANGLE_DEGREES
        return (base + orientation.phase_degrees) % 360.0

    @classmethod
    def from_angle_degrees(cls, angle: float, orientation: Orientation) -> EdgeDirection:
        return cls((6 - _sector(angle - orientation.phase_degrees)) % 6)

    def diagonal_left(self) -> VertexDirection:
        """Vertex direction adjacent to ``self`` on the counter clockwise side."""

        return VertexDirection(self.value)

    def diagonal_right(self) -> VertexDirection:
        """Vertex direction adjacent to ``self`` on the clockwise side."""

        return VertexDirection((self.value + 1) % 6)

    def vertex_directions(self) -> tuple[VertexDirection, VertexDirection]:
        return (self.diagonal_left(), self.diagonal_right())


class VertexDirection(_Direction):
    """Direction towards one of the six diagonal neighbors."""

    FLAT_RIGHT = 0
    FLAT_BOTTOM_RIGHT = 1
    FLAT_BOTTOM_LEFT = 2
    FLAT_LEFT = 3
    FLAT_TOP_LEFT = 4
    FLAT_TOP_RIGHT = 5

    POINTY_TOP_RIGHT = 0
    POINTY_BOTTOM_RIGHT = 1
    POINTY_BOTTOM = 2
    POINTY_BOTTOM_LEFT = 3
    POINTY_TOP_LEFT = 4
    POINTY_TOP = 5

    @property
    def delta(self) -> Hex:
        return Hex(*DIAGONAL_DELTAS[self.value])

    def angle_degrees(self, orientation: Orientation) -> float:
        # Vertices sit half a sector counter clockwise of the edge with the same index.
        base = ((6 - self.value) % 6) * DIRECTION_ANGLE_DEGREES + DIRECTION_ANGLE_OFFSET_DEGREES
        return (base + orientation.phase_degrees) % 360.0

    @classmethod
    def from_angle_degrees(cls, angle: float, orientation: Orientation) -> VertexDirection:
        angle -= DIRECTION_ANGLE_OFFSET_DEGREES + orientation.phase_degrees
        return cls((6 - _sector(angle)) % 6)

    def direction_left(self) -> EdgeDirection:
        """Edge direction adjacent to ``self`` on the counter clockwise side."""

        return EdgeDirection((self.value - 1) % 6)

    def direction_right(self) -> EdgeDirection:
        """Edge direction adjacent to ``self`` on the clockwise side."""

        return EdgeDirection(self.value)

    def edge_directions(self) -> tuple[EdgeDirection, EdgeDirection]:
        return (self.direction_left(), self.direction_right())


D = TypeVar("D", EdgeDirection, VertexDirection)


@dataclass(frozen=True)
class DirectionWay(Generic[D]):
    """A single direction, or a tie between two adjacent directions.

    Comparing a way with a bare direction is true when the way contains it,
    so ``hex.way_to(other) == EdgeDirection.POINTY_RIGHT`` reads naturally
    while ``is_tie`` and ``directions`` keep the full answer available.
    """

    directions: tuple[D, ...]

    def __post_init__(self) -> None:
        if len(self.directions) not in (1, 2):
            raise ValueError("a direction way holds one or two directions")
        if len(self.directions) == 2:
            a, b = self.directions
            if type(a) is not type(b) or (a.value - b.value) % 6 not in (1, 5):
                raise ValueError("a tie must hold two adjacent directions of one family")

    @classmethod
    def single(cls, direction: D) -> DirectionWay[D]:
        return cls((direction,))

    @classmethod
    def tie(cls, first: D, second: D) -> DirectionWay[D]:
        return cls((first, second))

    @classmethod
    def resolve(cls, is_neg: bool, eq_left: bool, eq_right: bool, direction: D) -> DirectionWay[D]:
        main = direction.opposite() if is_neg else direction
        if eq_left:
            return cls.tie(main, main.counter_clockwise())
        if eq_right:
            return cls.tie(main, main.clockwise())
        return cls.single(main)

    @property
    def is_tie(self) -> bool:
        return len(self.directions) == 2

    def unwrap(self) -> D:
        return self.directions[0]

    def contains(self, direction: object) -> bool:
        return direction in self.directions

    def __iter__(self) -> Iterator[D]:
        return iter(self.directions)

    def __len__(self) -> int:
        return len(self.directions)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DirectionWay):
            return self.directions == other.directions
        if isinstance(other, _Direction):
            return self.contains(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.directions)


__all__ = [
    "DIRECTION_ANGLE_DEGREES",
    "DIRECTION_ANGLE_OFFSET_DEGREES",
    "DIRECTION_ANGLE_OFFSET_RAD",
    "DIRECTION_ANGLE_RAD",
    "DirectionWay",
    "EdgeDirection",
    "VertexDirection",
]
