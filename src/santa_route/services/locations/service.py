"""Create delivery locations from free-text addresses."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Protocol

from ...config import settings
from ...models.domain import Location, Priority
from ..geocoding.nominatim import GeocodingError
from ..imports.csv_parser import parse_locations_csv

logger = logging.getLogger(__name__)


class AddressResolver(Protocol):
    def geocode(self, address: str) -> tuple[float, float] | None: ...


@dataclass(slots=True)
class ImportResult:
    locations: List[Location] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)


def create_location(
    address: str,
    *,
    geocoder: AddressResolver,
    child_name: Optional[str] = None,
    priority: Optional[Priority] = None,
) -> Location | None:
    """Resolve an address into a new Location, or None when it cannot be found."""
    coords = geocoder.geocode(address)
    if coords is None:
        return None
    latitude, longitude = coords
    return Location(
        address=address.strip(),
        latitude=latitude,
        longitude=longitude,
        child_name=child_name or None,
        priority=priority,
    )


def import_locations(csv_text: str, *, geocoder: AddressResolver) -> ImportResult:
    """Geocode every row of an uploaded CSV, keeping input order.

    Rows that cannot be resolved are reported in ``failed`` and skipped.
    """
    rows = parse_locations_csv(csv_text)
    if len(rows) > settings.max_import_rows:
        raise ValueError(
            f"Import has {len(rows)} rows; at most {settings.max_import_rows} are allowed per upload."
        )

    result = ImportResult()
    for row in rows:
        try:
            location = create_location(row.address, geocoder=geocoder, child_name=row.child_name)
        except GeocodingError as exc:
            logger.warning(f"Geocoding failed for '{row.address}': {exc}")
            location = None
        if location is None:
            logger.warning(f"Skipping unresolved address '{row.address}'")
            result.failed.append(row.address)
            continue
        result.locations.append(location)

    logger.info(f"Imported {len(result.locations)} locations ({len(result.failed)} unresolved)")
    return result
