"""Route optimization entry point: construct, improve, summarize."""

from __future__ import annotations

import logging
from typing import Sequence, TypeVar

from ...models.domain import GeoPoint
from .constructor import nearest_neighbor_tour
from .improver import two_opt_improve
from .models import OptimizedRoute, RouteStats
from .summary import summarize_route

P = TypeVar("P", bound=GeoPoint)

logger = logging.getLogger(__name__)


def optimize_route(points: Sequence[P]) -> OptimizedRoute[P]:
    """Order the points to roughly minimize travel distance.

    The first point is the fixed start. The returned locations are the same
    objects that were passed in, only reordered.
    """
    if not points:
        return OptimizedRoute(locations=[], stats=RouteStats.empty(), polyline=[])

    tour = two_opt_improve(nearest_neighbor_tour(points))
    stats, polyline = summarize_route(tour)
    logger.info(
        "Optimized route with %d stops: %.1f km, ~%d min",
        stats.total_stops,
        stats.total_distance_km,
        stats.estimated_minutes,
    )
    return OptimizedRoute(locations=tour, stats=stats, polyline=polyline)
