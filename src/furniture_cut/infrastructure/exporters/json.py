"""JSON exporter for cutting sheets."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from furniture_cut.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from furniture_cut.domain import CuttingSheet


def sheet_to_dict(sheet: CuttingSheet) -> dict[str, Any]:
    """Convert a cutting sheet to a JSON-compatible dictionary.

    Keys are camelCase, matching the REST API.
    """
    return {
        "id": sheet.id,
        "width": sheet.width,
        "height": sheet.height,
        "placedElements": [
            {
                "id": element.id,
                "elementId": element.furniture_body_id,
                "x": element.x,
                "y": element.y,
                "width": element.width,
                "height": element.height,
            }
            for element in sheet.placed_elements
        ],
        "summary": {
            "usedArea": sheet.used_area,
            "wasteArea": sheet.waste_area,
            "wastePercentage": round(sheet.waste_percentage, 2),
        },
    }


@ExporterRegistry.register("json")
class JsonSheetExporter:
    """Exports a cutting sheet as a JSON document."""

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def export(self, sheet: CuttingSheet, path: Path) -> None:
        path.write_text(self.export_string(sheet), encoding="utf-8")

    def export_string(self, sheet: CuttingSheet) -> str:
        return json.dumps(sheet_to_dict(sheet), indent=self.indent)
