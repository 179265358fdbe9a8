from __future__ import annotations

import heapq
import logging
from typing import Callable

from ..coords import Hex
from ..neighbors import neighbors

log = logging.getLogger(__name__)

EnterCost = Callable[[Hex], float | None]


def movement_costs(origin: Hex, budget: float, cost: EnterCost) -> dict[Hex, float]:
    """Cheapest total cost to reach each hex within ``budget``.

    ``cost(h)`` is the price of entering ``h``, or ``None`` when ``h`` can
    not be entered.  The origin costs nothing.  Every hex is settled once,
    in order of increasing total cost.
    """
    if budget < 0:
        raise ValueError("budget must be non-negative")
    best: dict[Hex, float] = {origin: 0.0}
    settled: dict[Hex, float] = {}
    heap: list[tuple[float, int, Hex]] = [(0.0, 0, origin)]
    push_id = 0

    while heap:
        spent, _, current = heapq.heappop(heap)
        if current in settled:
            continue
        settled[current] = spent
        for nxt in neighbors(current):
            if nxt in settled:
                continue
            step = cost(nxt)
            if step is None:
                continue
            total = spent + float(step)
            if total > budget or total >= best.get(nxt, float("inf")):
                continue
            best[nxt] = total
            push_id += 1
            heapq.heappush(heap, (total, push_id, nxt))

    log.debug("Field of movement from %s settled %d hexes", origin, len(settled))
    return settled


def field_of_movement(origin: Hex, budget: float, cost: EnterCost) -> set[Hex]:
    """Hexes reachable from ``origin`` spending at most ``budget``, origin included."""

    return set(movement_costs(origin, budget, cost))


__all__ = ["EnterCost", "field_of_movement", "movement_costs"]
