"""2-opt local search over an open path."""

from __future__ import annotations

import logging
from typing import Sequence, TypeVar

from ...models.domain import GeoPoint
from ..geospatial import distance

P = TypeVar("P", bound=GeoPoint)

# An exchange has to win by more than this to count; float noise never does.
IMPROVEMENT_EPSILON_KM = 1e-9

logger = logging.getLogger(__name__)


def _edge(tour: Sequence[P], a: int, b: int) -> float:
    if b >= len(tour):
        return 0.0
    return distance(tour[a], tour[b])


def two_opt_improve(tour: Sequence[P]) -> list[P]:
    """Reverse segments until no single reversal shortens the path.

    The first stop is fixed. The path is not closed, so reversing a segment that
    runs to the last stop only replaces the edge in front of it, which means the
    last stop can move too (variants that also pin the end stop skip that case).
    Returns a new list; the input is left untouched.
    """
    best = list(tour)
    count = len(best)
    if count < 4:
        return best

    passes = 0
    exchanges = 0
    improved = True
    while improved:
        improved = False
        passes += 1
        for i in range(1, count - 1):
            for j in range(i + 1, count):
                current = _edge(best, i - 1, i) + _edge(best, j, j + 1)
                candidate = distance(best[i - 1], best[j]) + _edge(best, i, j + 1)
                if candidate < current - IMPROVEMENT_EPSILON_KM:
                    best[i : j + 1] = best[i : j + 1][::-1]
                    exchanges += 1
                    improved = True

    logger.debug("2-opt finished after %d passes with %d exchanges", passes, exchanges)
    return best
