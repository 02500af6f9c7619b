"""Routing endpoints."""

from __future__ import annotations

import logging
from typing import Literal

from fastapi import APIRouter, HTTPException, Query, status
from fastapi.responses import PlainTextResponse

from ...models.domain import Location
from ...schemas.routing import LocationModel, OptimizedRouteResponse, OptimizeRequest, RouteStatsModel
from ...services.export.geojson import optimized_route_to_geojson
from ...services.outputs.routing_formatter import optimized_route_to_csv
from ...services.routing.models import OptimizedRoute
from ...services.routing.optimizer import optimize_route

router = APIRouter(prefix="/routes", tags=["routes"])


def _to_response(route: OptimizedRoute[Location]) -> OptimizedRouteResponse:
    return OptimizedRouteResponse(
        locations=[LocationModel.from_domain(location) for location in route.locations],
        stats=RouteStatsModel(
            total_distance_km=route.stats.total_distance_km,
            estimated_minutes=route.stats.estimated_minutes,
            total_stops=route.stats.total_stops,
            delivered_count=route.stats.delivered_count,
        ),
        polyline=route.polyline,
    )


def _optimize(payload: OptimizeRequest) -> OptimizedRoute[Location]:
    return optimize_route([location.to_domain() for location in payload.locations])


@router.post("/optimize", response_model=OptimizedRouteResponse, status_code=status.HTTP_200_OK)
def optimize(payload: OptimizeRequest) -> OptimizedRouteResponse:
    try:
        return _to_response(_optimize(payload))
    except Exception as exc:
        logging.exception(f"Error optimizing route: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to optimize route: {str(exc)}"
        ) from exc


@router.post("/export", status_code=status.HTTP_200_OK)
def export(
    payload: OptimizeRequest,
    format: Literal["csv", "geojson"] = Query(default="geojson", description="Output format"),
):
    """Optimize the stops and return the route as CSV rows or a GeoJSON FeatureCollection."""
    try:
        route = _optimize(payload)
        if format == "csv":
            return PlainTextResponse(optimized_route_to_csv(route), media_type="text/csv")
        return optimized_route_to_geojson(route)
    except Exception as exc:
        logging.exception(f"Error exporting route: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to export route: {str(exc)}"
        ) from exc
