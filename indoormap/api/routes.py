"""FastAPI route definitions."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response

from indoormap.core.errors import MalformedContentError
from indoormap.services.map_service import MapService, UnknownExporterError
from indoormap.api.schemas import ExporterInfo, MapDocument, ParseResponse

router = APIRouter()

# Shared service instance
_service = MapService()


@router.post("/maps/parse", response_model=ParseResponse)
async def parse_map(document: MapDocument) -> ParseResponse:
    """Parse a map document into the model."""
    try:
        indoor_map = _service.parse_map(document.xml)
    except MalformedContentError as e:
        raise HTTPException(status_code=422, detail=e.message) from e

    return ParseResponse(
        map=indoor_map,
        floor_count=len(indoor_map.floors),
        wall_count=sum(len(f.walls) for f in indoor_map.floors),
    )


@router.post("/maps/export/{exporter_id}")
async def export_map(exporter_id: str, document: MapDocument) -> Response:
    """Run an exporter over a map document and return its artifact."""
    try:
        content, media_type = _service.export(document.xml, exporter_id)
    except UnknownExporterError as e:
        raise HTTPException(status_code=404, detail=f"Unknown exporter '{exporter_id}'") from e
    except MalformedContentError as e:
        raise HTTPException(status_code=422, detail=e.message) from e

    return Response(content=content, media_type=media_type)


@router.get("/exporters", response_model=list[ExporterInfo])
async def list_exporters() -> list[ExporterInfo]:
    """List all available exporters."""
    return [ExporterInfo(**e) for e in _service.list_exporters()]


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
