"""Exporter registry: stores and resolves exporters by id."""

from __future__ import annotations
from typing import Callable

from indoormap.observers.base import MapExporter

ExporterFactory = Callable[[], MapExporter]


class ExporterRegistry:
    """
    Central registry for all map exporters.

    Exporters are stateful observers, so the registry keeps factories and
    hands out a fresh instance for every document.
    """

    def __init__(self) -> None:
        self._factories: dict[str, ExporterFactory] = {}
        self._names: dict[str, str] = {}

    def register(self, factory: ExporterFactory) -> None:
        """Register an exporter factory (usually the exporter class)."""
        probe = factory()
        self._factories[probe.get_id()] = factory
        self._names[probe.get_id()] = probe.get_name()

    def unregister(self, exporter_id: str) -> None:
        """Remove an exporter from the registry."""
        self._factories.pop(exporter_id, None)
        self._names.pop(exporter_id, None)

    def create(self, exporter_id: str) -> MapExporter | None:
        factory = self._factories.get(exporter_id)
        return factory() if factory is not None else None

    def list_exporters(self) -> list[dict[str, str]]:
        """Return id and name of all registered exporters."""
        return [{"id": eid, "name": name} for eid, name in self._names.items()]


def create_default_registry() -> ExporterRegistry:
    """Create a registry with all standard exporters."""
    from indoormap.observers.model import ModelExporter
    from indoormap.observers.svg import SvgExporter

    registry = ExporterRegistry()
    registry.register(ModelExporter)
    registry.register(SvgExporter)
    return registry
