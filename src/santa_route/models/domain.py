"""Domain models for delivery locations."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Literal, Optional, Protocol

Priority = Literal["nice", "naughty", "extra-nice"]


class GeoPoint(Protocol):
    """Anything with a latitude/longitude pair in decimal degrees."""

    @property
    def latitude(self) -> float: ...

    @property
    def longitude(self) -> float: ...


def new_location_id() -> str:
    return uuid.uuid4().hex


@dataclass(slots=True)
class Location:
    """A delivery stop. Only the coordinates matter for ordering; the rest rides along."""

    address: str
    latitude: float
    longitude: float
    child_name: Optional[str] = None
    priority: Optional[Priority] = None
    delivered: bool = False
    location_id: str = field(default_factory=new_location_id)
