"""Tests for the exporter framework and the JSON, SVG and DXF exporters."""

from __future__ import annotations

import json
from pathlib import Path

import ezdxf
import pytest

from furniture_cut.domain import CuttingSheet, PlacedElement
from furniture_cut.infrastructure.exporters import (
    DxfExporter,
    Exporter,
    ExporterRegistry,
    ExportManager,
    JsonSheetExporter,
    SvgExporter,
)
from furniture_cut.infrastructure.exporters.dxf import LAYERS


@pytest.fixture
def sheet() -> CuttingSheet:
    sheet = CuttingSheet(width=100, height=50, id=4)
    sheet.add_placed_element(PlacedElement(1, 0, 0, 60, 50, id=10))
    sheet.add_placed_element(PlacedElement(2, 60, 0, 40, 20, id=11))
    return sheet


class TestExporterRegistry:
    """Tests for exporter registration."""

    def test_builtin_formats_registered(self) -> None:
        assert ExporterRegistry.available_formats() == ["dxf", "json", "svg"]

    def test_get_returns_class(self) -> None:
        assert ExporterRegistry.get("dxf") is DxfExporter
        assert ExporterRegistry.get("svg") is SvgExporter

    def test_unknown_format(self) -> None:
        with pytest.raises(KeyError, match="Available formats: dxf, json, svg"):
            ExporterRegistry.get("stl")

    def test_registering_same_class_again_is_allowed(self) -> None:
        assert ExporterRegistry.register("json")(JsonSheetExporter) is JsonSheetExporter
        assert ExporterRegistry.get("json") is JsonSheetExporter

    def test_format_name_cannot_be_taken_over(self) -> None:
        class OtherJsonExporter(JsonSheetExporter):
            pass

        with pytest.raises(ValueError, match="already handled by JsonSheetExporter"):
            ExporterRegistry.register("json")(OtherJsonExporter)

        assert ExporterRegistry.get("json") is JsonSheetExporter

    @pytest.mark.parametrize("exporter_class", [DxfExporter, JsonSheetExporter, SvgExporter])
    def test_exporters_satisfy_protocol(self, exporter_class: type) -> None:
        assert isinstance(exporter_class(), Exporter)


class TestJsonSheetExporter:
    def test_document_shape(self, sheet: CuttingSheet) -> None:
        data = json.loads(JsonSheetExporter().export_string(sheet))

        assert data["id"] == 4
        assert (data["width"], data["height"]) == (100, 50)
        assert data["placedElements"][1] == {
            "id": 11,
            "elementId": 2,
            "x": 60,
            "y": 0,
            "width": 40,
            "height": 20,
        }
        assert data["summary"] == {"usedArea": 3800, "wasteArea": 1200, "wastePercentage": 24.0}

    def test_export_writes_file(self, sheet: CuttingSheet, tmp_path: Path) -> None:
        path = tmp_path / "sheet.json"

        JsonSheetExporter().export(sheet, path)

        assert json.loads(path.read_text())["id"] == 4


class TestSvgExporter:
    def test_export_string_is_svg(self, sheet: CuttingSheet) -> None:
        svg = SvgExporter().export_string(sheet)

        assert svg.startswith("<svg")
        assert svg.rstrip().endswith("</svg>")

    def test_scale_is_passed_to_renderer(self, sheet: CuttingSheet) -> None:
        svg = SvgExporter(scale=1.0).export_string(sheet)

        assert 'width="100.0"' in svg


class TestDxfExporter:
    """Tests for DXF output."""

    def test_layers_created(self, sheet: CuttingSheet, tmp_path: Path) -> None:
        path = tmp_path / "sheet.dxf"
        DxfExporter().export(sheet, path)

        doc = ezdxf.readfile(path)
        for name, color in LAYERS.items():
            assert doc.layers.get(name).color == color

    def test_one_outline_per_element_plus_sheet(
        self, sheet: CuttingSheet, tmp_path: Path
    ) -> None:
        path = tmp_path / "sheet.dxf"
        DxfExporter().export(sheet, path)

        msp = ezdxf.readfile(path).modelspace()
        outlines = msp.query('LWPOLYLINE[layer=="OUTLINE"]')
        boundaries = msp.query('LWPOLYLINE[layer=="SHEET"]')
        assert len(outlines) == 2
        assert len(boundaries) == 1
        assert all(polyline.closed for polyline in outlines)

    def test_y_axis_is_flipped(self, sheet: CuttingSheet, tmp_path: Path) -> None:
        """An element at the top of the sheet sits at the top in DXF too."""
        path = tmp_path / "sheet.dxf"
        DxfExporter().export(sheet, path)

        msp = ezdxf.readfile(path).modelspace()
        second = list(msp.query('LWPOLYLINE[layer=="OUTLINE"]'))[1]
        points = [tuple(p) for p in second.get_points("xy")]
        assert points == [(60, 30), (100, 30), (100, 50), (60, 50)]

    def test_labels(self, sheet: CuttingSheet, tmp_path: Path) -> None:
        path = tmp_path / "sheet.dxf"
        DxfExporter().export(sheet, path)

        labels = ezdxf.readfile(path).modelspace().query("MTEXT")
        assert len(labels) == 2
        assert all(label.dxf.layer == "LABELS" for label in labels)

    def test_labels_can_be_disabled(self, sheet: CuttingSheet, tmp_path: Path) -> None:
        path = tmp_path / "sheet.dxf"
        DxfExporter(show_labels=False).export(sheet, path)

        assert len(ezdxf.readfile(path).modelspace().query("MTEXT")) == 0

    def test_export_string(self, sheet: CuttingSheet) -> None:
        content = DxfExporter().export_string(sheet)

        assert "LWPOLYLINE" in content
        assert "OUTLINE" in content


class TestExportManager:
    def test_exports_every_format(self, sheet: CuttingSheet, tmp_path: Path) -> None:
        out_dir = tmp_path / "out"

        files = ExportManager(out_dir).export_all(["json", "svg", "dxf"], sheet, "wardrobe")

        assert files == {
            "json": out_dir / "wardrobe_json.json",
            "svg": out_dir / "wardrobe_svg.svg",
            "dxf": out_dir / "wardrobe_dxf.dxf",
        }
        assert all(path.exists() for path in files.values())

    def test_unknown_format_writes_nothing(self, sheet: CuttingSheet, tmp_path: Path) -> None:
        out_dir = tmp_path / "out"

        with pytest.raises(KeyError, match="pdf"):
            ExportManager(out_dir).export_all(["json", "pdf"], sheet)

        assert not out_dir.exists()
