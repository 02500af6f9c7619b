"""Route statistics and polyline derivation."""

from __future__ import annotations

import math
from typing import Sequence

from ...config import settings
from ...models.domain import GeoPoint
from ..geospatial import distance
from .models import RouteStats


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with halves going up (62.5 -> 63), unlike the built-in banker's rounding."""

    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def path_length_km(tour: Sequence[GeoPoint]) -> float:
    """Sum of consecutive legs. The path is one-way; there is no leg back to the start."""

    return sum(distance(tour[k], tour[k + 1]) for k in range(len(tour) - 1))


def estimate_minutes(
    total_distance_km: float,
    stop_count: int,
    *,
    speed_kmh: float | None = None,
    dwell_minutes: float | None = None,
) -> float:
    speed = speed_kmh if speed_kmh is not None else settings.travel_speed_kmh
    dwell = dwell_minutes if dwell_minutes is not None else settings.stop_dwell_minutes
    return (total_distance_km / speed) * 60 + stop_count * dwell


def summarize_route(
    tour: Sequence[GeoPoint],
    *,
    speed_kmh: float | None = None,
    dwell_minutes: float | None = None,
) -> tuple[RouteStats, list[tuple[float, float]]]:
    """Compute the stats and polyline for a finished tour.

    Distance and time are kept unrounded until the stats are built, then rounded
    once: distance to 0.1 km, time to the whole minute.
    """
    total_distance = path_length_km(tour)
    minutes = estimate_minutes(
        total_distance,
        len(tour),
        speed_kmh=speed_kmh,
        dwell_minutes=dwell_minutes,
    )
    stats = RouteStats(
        total_distance_km=round_half_up(total_distance, 1),
        estimated_minutes=int(round_half_up(minutes)),
        total_stops=len(tour),
        delivered_count=sum(1 for point in tour if getattr(point, "delivered", False)),
    )
    polyline = [(point.latitude, point.longitude) for point in tour]
    return stats, polyline
