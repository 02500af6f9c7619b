"""Serializers for optimized routes."""

from __future__ import annotations

import csv
import io
from dataclasses import asdict

from ...models.domain import Location
from ..geospatial import distance
from ..routing.models import OptimizedRoute


def optimized_route_to_json(route: OptimizedRoute[Location]) -> dict:
    return {
        "locations": [asdict(location) for location in route.locations],
        "stats": asdict(route.stats),
        "polyline": [[lat, lng] for lat, lng in route.polyline],
    }


def optimized_route_to_csv(route: OptimizedRoute[Location]) -> str:
    buffer = io.StringIO()
    fieldnames = [
        "sequence",
        "location_id",
        "address",
        "child_name",
        "priority",
        "delivered",
        "latitude",
        "longitude",
        "distance_from_prev_km",
    ]
    writer = csv.DictWriter(buffer, fieldnames=fieldnames)
    writer.writeheader()
    previous: Location | None = None
    for sequence, location in enumerate(route.locations, start=1):
        step = distance(previous, location) if previous is not None else 0.0
        writer.writerow(
            {
                "sequence": sequence,
                "location_id": location.location_id,
                "address": location.address,
                "child_name": location.child_name or "",
                "priority": location.priority or "",
                "delivered": location.delivered,
                "latitude": location.latitude,
                "longitude": location.longitude,
                "distance_from_prev_km": round(step, 3),
            }
        )
        previous = location
    return buffer.getvalue()
