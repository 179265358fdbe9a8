from __future__ import annotations

import heapq
import logging
from typing import Callable

from ..coords import Hex
from ..heuristics import distance
from ..neighbors import neighbors

log = logging.getLogger(__name__)

EdgeCost = Callable[[Hex, Hex], float | None]


def a_star(
    start: Hex,
    goal: Hex,
    cost: EdgeCost = lambda a, b: 1.0,
    *,
    passable: Callable[[Hex], bool] = lambda h: True,
    max_expansions: int | None = None,
    heuristic_scale: float = 1.0,
) -> tuple[list[Hex] | None, float]:
    """A* over the hex grid. Returns (path_list, total_cost) or (None, inf) if no path.

    ``cost(a, b)`` is the cost of stepping from ``a`` to its neighbor ``b``,
    or ``None`` when that step is impossible.  The heuristic is the hex
    distance times ``heuristic_scale``, which must not exceed the cheapest
    step cost.  Nodes with equal ``f`` are expanded in insertion order.
    When more than ``max_expansions`` nodes would be expanded the search
    gives up and reports no path.
    """
    if not passable(start) or not passable(goal):
        return None, float("inf")

    g = {start: 0.0}
    open_heap: list[tuple[float, int, Hex]] = []
    push_id = 0
    heapq.heappush(open_heap, (distance(start, goal) * heuristic_scale, push_id, start))
    closed: set[Hex] = set()
    came_from: dict[Hex, Hex] = {}
    expansions = 0

    while open_heap:
        _, _, current = heapq.heappop(open_heap)
        if current in closed:
            continue
        if current == goal:
            rev = [current]
            while current in came_from:
                current = came_from[current]
                rev.append(current)
            rev.reverse()
            return rev, g[goal]

        expansions += 1
        if max_expansions is not None and expansions > max_expansions:
            log.debug(
                "A* from %s to %s gave up after %d expansions", start, goal, max_expansions
            )
            return None, float("inf")
        closed.add(current)

        for nxt in neighbors(current):
            if nxt in closed or not passable(nxt):
                continue
            step = cost(current, nxt)
            if step is None:
                continue
            tentative = g[current] + float(step)
            if tentative < g.get(nxt, float("inf")):
                came_from[nxt] = current
                g[nxt] = tentative
                push_id += 1
                heapq.heappush(
                    open_heap,
                    (tentative + distance(nxt, goal) * heuristic_scale, push_id, nxt),
                )

    return None, float("inf")


__all__ = ["EdgeCost", "a_star"]
