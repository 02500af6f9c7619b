"""Geospatial helper functions."""

from __future__ import annotations

import math
from typing import Sequence

from shapely.geometry import LineString

from ..models.domain import GeoPoint

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Compute distance between two coordinates using the Haversine formula."""

    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    # near antipodes (or with out-of-range input) rounding can push a outside [0, 1]
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def distance(a: GeoPoint, b: GeoPoint) -> float:
    """Great-circle distance in kilometers between two points.

    Coordinates are not range checked; out-of-range values still produce a number.
    """

    return haversine_km(a.latitude, a.longitude, b.latitude, b.longitude)


def route_line(polyline: Sequence[tuple[float, float]]) -> LineString:
    """Build a planar LineString from (lat, lon) pairs, in shapely's (x=lon, y=lat) order."""

    if len(polyline) < 2:
        raise ValueError("LineString must have at least 2 coordinates")
    return LineString([(lng, lat) for lat, lng in polyline])


def is_self_intersecting(polyline: Sequence[tuple[float, float]]) -> bool:
    """Return True if the path drawn through the polyline crosses itself."""

    if len(polyline) < 4:
        return False
    return not route_line(polyline).is_simple
