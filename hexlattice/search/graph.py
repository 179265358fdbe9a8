"""networkx interop for hex movement graphs."""

from __future__ import annotations

from typing import (
    TYPE_CHECKING,
    Callable,
    Iterable,
    Mapping,
    MutableMapping,
    Sequence,
    TypeAlias,
)

import networkx as nx

from ..coords import Hex
from ..heuristics import distance
from ..neighbors import neighbors

CostFunction = Callable[[Hex], float | None]

if TYPE_CHECKING:  # pragma: no cover - typing only
    MovementGraph: TypeAlias = nx.DiGraph[Hex]
else:  # pragma: no cover - runtime alias without subscripting
    MovementGraph: TypeAlias = nx.DiGraph


def movement_graph(
    coords: Iterable[Hex],
    cost: Mapping[Hex, float | None] | CostFunction | None = None,
    *,
    default_cost: float = 1.0,
) -> MovementGraph:
    """Return a directed graph linking every pair of adjacent ``coords``.

    The weight of the edge ``a -> b`` is the cost of entering ``b``.  Hexes
    whose cost is ``None`` keep their node but get no incoming edges.
    """
    graph: MovementGraph = nx.DiGraph()
    members = set(coords)
    for coord in members:
        graph.add_node(coord, coord=coord)

    cost_fn = _resolve_cost_function(cost, default_cost)
    for coord in members:
        for nxt in neighbors(coord):
            if nxt not in members:
                continue
            weight = cost_fn(nxt)
            if weight is None:
                continue
            graph.add_edge(coord, nxt, weight=float(weight))
    return graph


def graph_path(
    graph: MovementGraph, start: Hex, goal: Hex, *, min_step_cost: float = 0.0
) -> list[Hex] | None:
    """Return the lowest-cost path between ``start`` and ``goal`` using A* search.

    The heuristic is the hex distance times ``min_step_cost``, which must
    not exceed the lightest edge weight.  ``None`` when no path exists.
    """
    if start not in graph or goal not in graph:
        return None
    if start == goal:
        return [start]

    def heuristic(a: Hex, b: Hex) -> float:
        return distance(a, b) * min_step_cost

    try:
        return list(nx.astar_path(graph, start, goal, heuristic=heuristic, weight="weight"))
    except nx.NetworkXNoPath:
        return None


def path_travel_cost(graph: MovementGraph, path: Sequence[Hex]) -> float:
    """Return the total travel cost for ``path`` within ``graph``."""

    if len(path) < 2:
        return 0.0
    total = 0.0
    for origin, destination in zip(path, path[1:]):
        data = graph.get_edge_data(origin, destination) or {}
        total += float(data.get("weight", 0.0))
    return total


def _resolve_cost_function(
    cost: Mapping[Hex, float | None] | CostFunction | None, default_cost: float
) -> CostFunction:
    if callable(cost):
        return cost

    lookup: MutableMapping[Hex, float | None] = {}
    if isinstance(cost, Mapping):
        for key, value in cost.items():
            lookup[key] = None if value is None else float(value)

    def cost_fn(coord: Hex) -> float | None:
        return lookup.get(coord, default_cost)

    return cost_fn


__all__ = [
    "CostFunction",
    "MovementGraph",
    "graph_path",
    "movement_graph",
    "path_travel_cost",
]
