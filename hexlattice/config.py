"""Validated configuration models for lattice search and caching."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .orientation import Orientation

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .rings import RingCache


class SearchSettings(BaseModel):
    """Limits and defaults shared by the search algorithms."""

    model_config = ConfigDict(extra="forbid")

    max_expansions: int | None = Field(default=100_000, ge=1)
    default_cost: float = Field(default=1.0, gt=0.0)
    min_step_cost: float = Field(default=1.0, gt=0.0)

    @field_validator("default_cost", "min_step_cost")
    @classmethod
    def _coerce_float(cls, value: float) -> float:
        return float(value)


class CacheSettings(BaseModel):
    """Ring offset cache sizing."""

    model_config = ConfigDict(extra="forbid")

    max_radius: int | None = Field(default=64, ge=0)
    warm_radius: int = Field(default=0, ge=0)

    def factory(self) -> RingCache:
        """Instantiate a :class:`~hexlattice.rings.RingCache`, pre-warmed."""

        from .rings import RingCache

        cache = RingCache(max_radius=self.max_radius)
        if self.warm_radius:
            cache.warm(self.warm_radius)
        return cache


class LatticeConfig(BaseModel):
    """Top-level configuration payload."""

    model_config = ConfigDict(extra="forbid")

    orientation: Orientation = Field(default=Orientation.POINTY)
    search: SearchSettings = Field(default_factory=SearchSettings)
    cache: CacheSettings = Field(default_factory=CacheSettings)

    @field_validator("orientation", mode="before")
    @classmethod
    def _parse_orientation(cls, value: object) -> object:
        if isinstance(value, str):
            return value.lower()
        return value

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> LatticeConfig:
        """Build a config from a plain mapping, e.g. parsed TOML or JSON."""

        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise TypeError("configuration must be a mapping")
        return cls.model_validate(dict(data))


__all__ = ["CacheSettings", "LatticeConfig", "SearchSettings"]
