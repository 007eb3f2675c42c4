"""DXF format exporter for cutting sheets.

Generates 2D DXF files (R2010 format) that a CNC saw or nesting program can
import. The sheet outline, element outlines and labels go on separate layers.
"""

from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

import ezdxf

from furniture_cut.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from ezdxf.document import Drawing
    from ezdxf.layouts import Modelspace

    from furniture_cut.domain import CuttingSheet, PlacedElement


logger = logging.getLogger(__name__)


LAYERS: dict[str, int] = {
    "SHEET": 8,  # Gray - stock sheet boundary
    "OUTLINE": 7,  # White - element outlines
    "LABELS": 5,  # Blue - text labels
}

# Label height relative to the smaller element side
LABEL_HEIGHT_RATIO = 0.1


@ExporterRegistry.register("dxf")
class DxfExporter:
    """Exports a cutting sheet to DXF.

    Sheet coordinates have their origin at the top-left corner with y
    growing downward. DXF has y growing upward, so each element is
    flipped as ``sheet.height - y - height``.

    Attributes:
        format_name: "dxf"
        file_extension: "dxf"
    """

    format_name: ClassVar[str] = "dxf"
    file_extension: ClassVar[str] = "dxf"

    def __init__(self, show_labels: bool = True) -> None:
        self.show_labels = show_labels

    def export(self, sheet: CuttingSheet, path: Path) -> None:
        doc = self._build_document(sheet)
        doc.saveas(path)
        logger.info("Exported DXF to %s", path)

    def export_string(self, sheet: CuttingSheet) -> str:
        doc = self._build_document(sheet)
        stream = StringIO()
        doc.write(stream)
        return stream.getvalue()

    def _build_document(self, sheet: CuttingSheet) -> Drawing:
        doc = ezdxf.new("R2010")
        for name, color in LAYERS.items():
            doc.layers.add(name, color=color)

        msp = doc.modelspace()
        self._draw_rectangle(msp, 0, 0, sheet.width, sheet.height, "SHEET")
        for element in sheet.placed_elements:
            self._draw_element(msp, sheet, element)
        return doc

    def _draw_element(
        self, msp: Modelspace, sheet: CuttingSheet, element: PlacedElement
    ) -> None:
        dxf_y = sheet.height - element.y - element.height
        self._draw_rectangle(
            msp, element.x, dxf_y, element.width, element.height, "OUTLINE"
        )
        if not self.show_labels:
            return

        char_height = max(min(element.width, element.height) * LABEL_HEIGHT_RATIO, 1.0)
        msp.add_mtext(
            f"#{element.furniture_body_id}\\P{element.width}x{element.height}",
            dxfattribs={
                "layer": "LABELS",
                "char_height": char_height,
                "insert": (element.x + element.width / 2, dxf_y + element.height / 2),
                "attachment_point": 5,  # Middle center
            },
        )

    def _draw_rectangle(
        self,
        msp: Modelspace,
        x: float,
        y: float,
        width: float,
        height: float,
        layer: str,
    ) -> None:
        points = [
            (x, y),
            (x + width, y),
            (x + width, y + height),
            (x, y + height),
        ]
        msp.add_lwpolyline(points, close=True, dxfattribs={"layer": layer})
