"""High-level map service: facade for the API layer."""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Union

from indoormap.models import Map, ParserConfig
from indoormap.core.parser import MapParser
from indoormap.core.registry import ExporterRegistry, create_default_registry
from indoormap.observers.base import MapExporter

logger = logging.getLogger(__name__)


class UnknownExporterError(KeyError):
    """No exporter is registered under the requested id."""


class MapService:
    """Loads documents, delegates to the parser, runs exporters."""

    def __init__(
        self,
        registry: ExporterRegistry | None = None,
        config: ParserConfig | None = None,
    ) -> None:
        self.registry = registry or create_default_registry()
        self.config = config or ParserConfig()

    def _parser(self) -> MapParser:
        # Parsers are not re-entrant; one per call
        return MapParser(self.config)

    def _exporter(self, exporter_id: str) -> MapExporter:
        exporter = self.registry.create(exporter_id)
        if exporter is None:
            raise UnknownExporterError(exporter_id)
        return exporter

    def load_map(self, path: Union[str, Path]) -> Map:
        return self._parser().read_map_from_file(path)

    def parse_map(self, text: Union[str, bytes]) -> Map:
        return self._parser().read_map_from_string(text)

    def export(self, text: Union[str, bytes], exporter_id: str) -> tuple[str, str]:
        """Run exporter `exporter_id` over a document; returns (artifact, media type)."""
        exporter = self._exporter(exporter_id)
        self._parser().read_from_string(text, exporter)
        logger.debug("Exported map with '%s'", exporter_id)
        return exporter.result(), exporter.media_type

    def export_file(self, path: Union[str, Path], exporter_id: str) -> tuple[str, str]:
        exporter = self._exporter(exporter_id)
        self._parser().read_from_file(path, exporter)
        logger.debug("Exported '%s' with '%s'", path, exporter_id)
        return exporter.result(), exporter.media_type

    def list_exporters(self) -> list[dict[str, str]]:
        return self.registry.list_exporters()
