"""Edges and vertices of the hex grid.

A grid edge is a hex plus the edge direction it faces; a grid vertex is a
hex plus the vertex direction of one of its corners.  The same edge is shared
by two hexes and the same vertex by three, so each has several equivalent
representations; :meth:`GridEdge.equivalent` and :meth:`GridVertex.equivalent`
compare them regardless of which hex they are anchored on.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from .coords import Hex
from .directions import EdgeDirection, VertexDirection


@dataclass(frozen=True, slots=True)
class GridEdge:
    origin: Hex
    direction: EdgeDirection

    @classmethod
    def from_direction(cls, direction: EdgeDirection) -> GridEdge:
        return cls(Hex.ZERO, direction)

    def destination(self) -> Hex:
        """The hex on the other side of the edge."""

        return self.origin.neighbor(self.direction)

    def equivalent(self, other: GridEdge) -> bool:
        """True when both describe the same edge, from either side."""

        return self == other or self.flipped() == other

    def vertices(self) -> tuple[GridVertex, GridVertex]:
        """The two ends of the edge in clockwise order."""

        left, right = self.direction.vertex_directions()
        return (GridVertex(self.origin, left), GridVertex(self.origin, right))

    def flipped(self) -> GridEdge:
        """The same edge seen from its destination."""

        return GridEdge(self.destination(), self.direction.opposite())

    def __neg__(self) -> GridEdge:
        return replace(self, direction=self.direction.opposite())

    def clockwise(self) -> GridEdge:
        return self.rotate_cw(1)

    def counter_clockwise(self) -> GridEdge:
        return self.rotate_ccw(1)

    def rotate_cw(self, steps: int = 1) -> GridEdge:
        return replace(self, direction=self.direction.rotate_cw(steps))

    def rotate_ccw(self, steps: int = 1) -> GridEdge:
        return replace(self, direction=self.direction.rotate_ccw(steps))


@dataclass(frozen=True, slots=True)
class GridVertex:
    origin: Hex
    direction: VertexDirection

    @classmethod
    def from_direction(cls, direction: VertexDirection) -> GridVertex:
        return cls(Hex.ZERO, direction)

    def destinations(self) -> tuple[Hex, Hex]:
        """The two other hexes sharing this vertex, in clockwise order."""

        left, right = self.direction.edge_directions()
        return (self.origin.neighbor(left), self.origin.neighbor(right))

    def coordinates(self) -> tuple[Hex, Hex, Hex]:
        """All three hexes sharing this vertex, ``origin`` first."""

        return (self.origin, *self.destinations())

    def side_edges(self) -> tuple[GridEdge, GridEdge]:
        """The two edges of ``origin`` meeting at this vertex, in clockwise order."""

        left, right = self.direction.edge_directions()
        return (GridEdge(self.origin, left), GridEdge(self.origin, right))

    def representations(self) -> tuple[GridVertex, GridVertex, GridVertex]:
        """This vertex anchored on each of the three hexes sharing it."""

        left, right = self.direction.edge_directions()
        return (
            self,
            GridVertex(self.origin.neighbor(left), self.direction.rotate_cw(2)),
            GridVertex(self.origin.neighbor(right), self.direction.rotate_ccw(2)),
        )

    def equivalent(self, other: GridVertex) -> bool:
        return other in self.representations()

    def __neg__(self) -> GridVertex:
        return replace(self, direction=self.direction.opposite())

    def clockwise(self) -> GridVertex:
        return self.rotate_cw(1)

    def counter_clockwise(self) -> GridVertex:
        return self.rotate_ccw(1)

    def rotate_cw(self, steps: int = 1) -> GridVertex:
        return replace(self, direction=self.direction.rotate_cw(steps))

    def rotate_ccw(self, steps: int = 1) -> GridVertex:
        return replace(self, direction=self.direction.rotate_ccw(steps))


__all__ = ["GridEdge", "GridVertex"]
