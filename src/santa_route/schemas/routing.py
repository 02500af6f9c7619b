"""Routing request/response schemas."""

from __future__ import annotations

from typing import List, Literal, Optional, Tuple

from pydantic import BaseModel, Field

from ..models.domain import Location, new_location_id


class LocationModel(BaseModel):
    location_id: str = Field(default_factory=new_location_id)
    address: str
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    child_name: Optional[str] = None
    priority: Optional[Literal["nice", "naughty", "extra-nice"]] = None
    delivered: bool = False

    def to_domain(self) -> Location:
        return Location(
            address=self.address,
            latitude=self.latitude,
            longitude=self.longitude,
            child_name=self.child_name,
            priority=self.priority,
            delivered=self.delivered,
            location_id=self.location_id,
        )

    @classmethod
    def from_domain(cls, location: Location) -> "LocationModel":
        return cls(
            location_id=location.location_id,
            address=location.address,
            latitude=location.latitude,
            longitude=location.longitude,
            child_name=location.child_name,
            priority=location.priority,
            delivered=location.delivered,
        )


class OptimizeRequest(BaseModel):
    locations: List[LocationModel] = Field(
        default_factory=list,
        description="Stops to visit. The first one is the fixed starting point.",
    )


class RouteStatsModel(BaseModel):
    total_distance_km: float
    estimated_minutes: int
    total_stops: int
    delivered_count: int


class OptimizedRouteResponse(BaseModel):
    locations: List[LocationModel]
    stats: RouteStatsModel
    polyline: List[Tuple[float, float]]
