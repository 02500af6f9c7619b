"""Location lookup and import schemas."""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from .routing import LocationModel


class GeocodeRequest(BaseModel):
    address: str = Field(..., min_length=1)
    child_name: Optional[str] = None
    priority: Optional[Literal["nice", "naughty", "extra-nice"]] = None


class ImportRequest(BaseModel):
    csv_text: str = Field(..., description="CSV rows of address, optional child name.")


class ImportResponse(BaseModel):
    locations: List[LocationModel]
    failed: List[str] = Field(default_factory=list, description="Addresses that could not be resolved.")
