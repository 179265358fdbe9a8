"""
Cached pathfinding facade over :func:`~hexlattice.search.astar.a_star`.

Primary goals:
- Centralize per-hex cost layers (base, penalty, bonus) and a global multiplier.
- Offer a cache invalidation mechanism via a version key when costs change.

Usage:
    state = PathState()
    # Optionally populate cost layers / blocked, then:
    pf = Pathfinder(state)
    path = pf.path(Hex(0, 0), Hex(8, -3))
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..config import SearchSettings
from ..coords import Hex
from .astar import a_star

log = logging.getLogger(__name__)

# Floor applied to every step so costs stay strictly positive.
MIN_EDGE_COST = 0.01


@dataclass
class PathState:
    """
    Holds all data needed to compute movement cost and constraints.

    Cost layers are additive; ``bonus`` is usually <= 0 to bias paths
    towards roads or similar.  ``multiplier`` scales the final step cost.
    """

    blocked: set[Hex] = field(default_factory=set)
    base_cost: dict[Hex, float] = field(default_factory=dict)
    penalty: dict[Hex, float] = field(default_factory=dict)
    bonus: dict[Hex, float] = field(default_factory=dict)
    default_cost: float = 1.0
    multiplier: float = 1.0

    # Keep this <= the true minimum step cost to stay admissible.
    min_step_cost: float = 1.0

    # Increment whenever any layer changes to invalidate cached paths.
    version: int = 0

    @classmethod
    def from_settings(cls, settings: SearchSettings) -> PathState:
        return cls(default_cost=settings.default_cost, min_step_cost=settings.min_step_cost)

    def touch(self) -> int:
        self.version += 1
        return self.version

    def block(self, *coords: Hex) -> None:
        self.blocked.update(coords)
        self.touch()

    def unblock(self, *coords: Hex) -> None:
        self.blocked.difference_update(coords)
        self.touch()


def move_cost(a: Hex, b: Hex, *, state: PathState) -> float:
    """Final cost of stepping from ``a`` into ``b``."""

    c = state.base_cost.get(b, state.default_cost)
    c += state.penalty.get(b, 0.0)
    c += state.bonus.get(b, 0.0)
    c *= state.multiplier
    return max(c, MIN_EDGE_COST)


class Pathfinder:
    """
    Hex pathfinding facade.

    - Runs :func:`a_star` with the state's cost layers and blocked set.
    - Caches results per ``(start, goal)`` in buckets keyed on the state
      version; the bucket of a superseded version is dropped on first use of
      the new one.
    """

    def __init__(self, state: PathState, settings: SearchSettings | None = None) -> None:
        self.state = state
        self.settings = settings or SearchSettings()
        self._cache: dict[int, dict[tuple[Hex, Hex], list[Hex] | None]] = {}
        self._seen_version = state.version

    def path(self, start: Hex, goal: Hex, *, budget_key: int | None = None) -> list[Hex] | None:
        """
        Compute a path from start to goal. Returns list of hexes or None.
        Cached by (start, goal, budget_key), ``budget_key`` defaulting to the
        state version.
        """
        if self.state.version != self._seen_version:
            stale = self._cache.pop(self._seen_version, {})
            if stale:
                log.debug(
                    "Dropping %d paths cached for version %d", len(stale), self._seen_version
                )
            self._seen_version = self.state.version

        bucket = self._cache.setdefault(
            self.state.version if budget_key is None else budget_key, {}
        )
        if (start, goal) in bucket:
            log.debug("Path cache hit for %s -> %s", start, goal)
            return bucket[(start, goal)]

        path, _ = a_star(
            start,
            goal,
            self.edge_cost,
            passable=self.is_passable,
            max_expansions=self.settings.max_expansions,
            heuristic_scale=self.state.min_step_cost,
        )
        bucket[(start, goal)] = path
        return path

    def path_cost(self, path: list[Hex]) -> float:
        return sum(self.edge_cost(a, b) for a, b in zip(path, path[1:]))

    def invalidate(self) -> None:
        """
        Clear the internal path cache. Call after large updates.
        Prefer bumping ``state.version`` for fine-grained control.
        """
        log.debug("Clearing %d cached paths", len(self))
        self._cache.clear()

    def is_blocked(self, h: Hex) -> bool:
        return h in self.state.blocked

    def is_passable(self, h: Hex) -> bool:
        return not self.is_blocked(h)

    def edge_cost(self, a: Hex, b: Hex) -> float:
        return move_cost(a, b, state=self.state)

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._cache.values())


__all__ = ["MIN_EDGE_COST", "PathState", "Pathfinder", "move_cost"]
