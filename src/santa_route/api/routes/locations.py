"""Location lookup and bulk import endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status

from ...schemas.locations import GeocodeRequest, ImportRequest, ImportResponse
from ...schemas.routing import LocationModel
from ...services.geocoding.nominatim import GeocodingError, NominatimClient
from ...services.locations.service import create_location, import_locations

router = APIRouter(prefix="/locations", tags=["locations"])


@router.post("/geocode", response_model=LocationModel, status_code=status.HTTP_200_OK)
def geocode(payload: GeocodeRequest) -> LocationModel:
    try:
        location = create_location(
            payload.address,
            geocoder=NominatimClient(),
            child_name=payload.child_name,
            priority=payload.priority,
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except GeocodingError as exc:
        logging.warning(f"Geocoder unavailable for '{payload.address}': {exc}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Geocoding service failed: {str(exc)}"
        ) from exc

    if location is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Could not find address '{payload.address}'. Try a more specific address."
        )
    return LocationModel.from_domain(location)


@router.post("/import", response_model=ImportResponse, status_code=status.HTTP_200_OK)
def import_csv(payload: ImportRequest) -> ImportResponse:
    """Geocode every row of an uploaded CSV; unresolved addresses are listed in ``failed``."""
    try:
        result = import_locations(payload.csv_text, geocoder=NominatimClient())
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logging.exception(f"Error importing locations: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to import locations: {str(exc)}"
        ) from exc
    return ImportResponse(
        locations=[LocationModel.from_domain(location) for location in result.locations],
        failed=result.failed,
    )
