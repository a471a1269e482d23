"""JSON exporter of the parsed model."""

from __future__ import annotations

from indoormap.observers.base import MapExporter, ModelCollector


class ModelExporter(ModelCollector, MapExporter):
    """Serializes the collected Map as JSON."""

    media_type = "application/json"

    def get_id(self) -> str:
        return "model"

    def get_name(self) -> str:
        return "Map model (JSON)"

    def result(self) -> str:
        if self.map is None:
            raise RuntimeError("No map collected yet")
        return self.map.model_dump_json()
