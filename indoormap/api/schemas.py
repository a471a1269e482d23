"""API request/response schemas."""

from __future__ import annotations
from pydantic import BaseModel

from indoormap.models import Map


class MapDocument(BaseModel):
    """Map document as sent by the client."""
    xml: str


class ParseResponse(BaseModel):
    """Response from the /maps/parse endpoint."""
    map: Map
    floor_count: int
    wall_count: int


class ExporterInfo(BaseModel):
    id: str
    name: str
