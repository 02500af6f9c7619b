"""GeoJSON export for optimized routes."""

from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict, List

from shapely.geometry import Point, mapping

from ...models.domain import Location
from ..geospatial import route_line
from ..routing.models import OptimizedRoute


def optimized_route_to_geojson(route: OptimizedRoute[Location]) -> Dict[str, Any]:
    """Convert an optimized route to a GeoJSON FeatureCollection.

    The path is a single LineString feature carrying the route stats (left out
    when there are fewer than two stops), followed by one Point feature per stop.
    GeoJSON coordinates are (lon, lat).
    """
    features: List[Dict[str, Any]] = []

    if len(route.polyline) >= 2:
        features.append(
            {
                "type": "Feature",
                "geometry": mapping(route_line(route.polyline)),
                "properties": {"kind": "route", **asdict(route.stats)},
            }
        )

    for sequence, location in enumerate(route.locations, start=1):
        features.append(
            {
                "type": "Feature",
                "geometry": mapping(Point(location.longitude, location.latitude)),
                "properties": {
                    "kind": "stop",
                    "sequence": sequence,
                    "location_id": location.location_id,
                    "address": location.address,
                    "child_name": location.child_name,
                    "priority": location.priority,
                    "delivered": location.delivered,
                },
            }
        )

    return {"type": "FeatureCollection", "features": features}
