"""Export services."""

from .geojson import optimized_route_to_geojson

__all__ = ["optimized_route_to_geojson"]
