"""Routing domain models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, List, Tuple, TypeVar

P = TypeVar("P")


@dataclass(frozen=True, slots=True)
class RouteStats:
    total_distance_km: float
    estimated_minutes: int
    total_stops: int
    delivered_count: int

    @classmethod
    def empty(cls) -> "RouteStats":
        return cls(total_distance_km=0.0, estimated_minutes=0, total_stops=0, delivered_count=0)


@dataclass(frozen=True, slots=True)
class OptimizedRoute(Generic[P]):
    locations: List[P]
    stats: RouteStats
    polyline: List[Tuple[float, float]]
