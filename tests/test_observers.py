from __future__ import annotations

import json

import pytest

from indoormap.core.parser import MapParser
from indoormap.core.registry import ExporterRegistry, create_default_registry
from indoormap.models import SvgStyle, WallMaterial
from indoormap.observers.base import CompositeObserver, MapObserver, ModelCollector
from indoormap.observers.model import ModelExporter
from indoormap.observers.svg import SvgExporter


def render_svg(xml: str, style: SvgStyle | None = None) -> tuple[SvgExporter, str]:
    exporter = SvgExporter(style)
    MapParser().read_from_string(xml, exporter)
    return exporter, exporter.result()


def test_model_collector_keeps_root_map(sample_xml):
    collector = ModelCollector()
    assert collector.map is None
    MapParser().read_from_string(sample_xml, collector)
    assert collector.map.width == 20.0


def test_composite_notifies_every_observer(sample_xml):
    first, second = ModelCollector(), ModelCollector()
    composite = CompositeObserver(first)
    composite.add(second)
    MapParser().read_from_string(sample_xml, composite)
    assert first.map is second.map
    assert len(first.map.floors) == 2


def test_model_exporter_writes_json(sample_xml):
    exporter = ModelExporter()
    MapParser().read_from_string(sample_xml, exporter)
    data = json.loads(exporter.result())
    assert [f["name"] for f in data["floors"]] == ["ground", "first"]
    assert data["floors"][0]["walls"][0]["segments"][1]["type"] == "door"
    assert data["floors"][0]["walls"][0]["material"] == "concrete"


def test_model_exporter_before_parse():
    with pytest.raises(RuntimeError):
        ModelExporter().result()


class TestSvgExporter:
    def test_document_structure(self, sample_xml):
        exporter, svg = render_svg(sample_xml)
        assert svg.startswith("<svg")
        assert 'id="floor_ground"' in svg
        assert 'id="floor_first"' in svg
        assert 'viewBox="0 0 20 15"' in svg
        assert "translate(0, 15)" in svg
        assert exporter.max_x == 20.0
        assert exporter.max_y == 15.0

    def test_outline_colors(self, sample_xml):
        _, svg = render_svg(sample_xml)
        assert "#C8C8C8" in svg   # indoor area
        assert "#FFFFFF" in svg   # removed area
        assert "#4E9A06" in svg   # yard

    def test_walls_doors_and_windows(self, sample_xml):
        _, svg = render_svg(sample_xml)
        assert 'stroke="#323232"' in svg   # concrete wall
        assert 'stroke="#646464"' in svg   # drywall wall
        assert 'stroke="#0000FF"' in svg   # window
        assert "stroke-dasharray" in svg
        assert " A 0.9 0.9 0 0 0 " in svg  # door swing arc

    def test_points_and_labels(self, sample_xml):
        _, svg = render_svg(sample_xml)
        assert ">7</text>" in svg
        assert ">ap1 (00:11:22:33:44:55)</text>" in svg
        assert ">Lobby</text>" in svg
        assert 'fill="#FF0000"' in svg

    def test_y_axis_is_flipped(self, sample_xml):
        _, svg = render_svg(sample_xml)
        assert "M0 -8 L10 -8" in svg   # top wall at y=8

    def test_custom_style(self, sample_xml):
        style = SvgStyle(material_colors={WallMaterial.CONCRETE: (300, -5, 0)})
        _, svg = render_svg(sample_xml, style)
        assert 'stroke="#FF0000"' in svg
        assert 'stroke="#323232"' not in svg

    def test_result_before_map_is_finished(self):
        with pytest.raises(RuntimeError):
            SvgExporter().result()

    def test_save(self, sample_xml, tmp_path):
        exporter, svg = render_svg(sample_xml)
        out = tmp_path / "map.svg"
        exporter.save(str(out))
        assert out.read_text(encoding="utf-8") == svg

    def test_floor_vetoed_later_in_composite_leaves_no_group(self, sample_xml):
        class SkipFirst(MapObserver):
            def enter_floor(self, floor):
                return floor.name != "first"

        exporter = SvgExporter()
        MapParser().read_from_string(sample_xml, CompositeObserver(exporter, SkipFirst()))
        svg = exporter.result()
        assert 'id="floor_ground"' in svg
        assert 'id="floor_first"' not in svg
        assert svg.count("<g") == 2


def test_material_colors():
    style = SvgStyle()
    assert style.material_color(WallMaterial.WOOD) == "#CE5C00"
    assert style.material_color(WallMaterial.METALIZED_GLASS) == "#00DCFF"


class TestRegistry:
    def test_default_exporters(self):
        registry = create_default_registry()
        assert {e["id"] for e in registry.list_exporters()} == {"model", "svg"}

    def test_create_returns_fresh_instances(self):
        registry = create_default_registry()
        a = registry.create("svg")
        b = registry.create("svg")
        assert isinstance(a, SvgExporter)
        assert a is not b

    def test_unknown_and_unregister(self):
        registry = ExporterRegistry()
        registry.register(ModelExporter)
        assert registry.create("nope") is None
        registry.unregister("model")
        assert registry.create("model") is None
        assert registry.list_exporters() == []
