"""Nearest-neighbor tour construction."""

from __future__ import annotations

import math
from typing import Sequence, TypeVar

from ...models.domain import GeoPoint
from ..geospatial import distance

P = TypeVar("P", bound=GeoPoint)


def nearest_neighbor_tour(points: Sequence[P]) -> list[P]:
    """Greedy visiting order starting from the first point as given.

    At each step the closest unvisited point is taken next. Ties go to the point
    that appears earliest in the input.
    """
    if len(points) <= 1:
        return list(points)

    remaining = list(points)
    current = remaining.pop(0)
    tour = [current]

    while remaining:
        nearest_index = 0
        nearest_distance = math.inf
        for index, candidate in enumerate(remaining):
            candidate_distance = distance(current, candidate)
            if candidate_distance < nearest_distance:
                nearest_distance = candidate_distance
                nearest_index = index
        # pop keeps the survivors in input order so the tie-break stays stable
        current = remaining.pop(nearest_index)
        tour.append(current)

    return tour
