"""SVG exporter for cut diagrams.

Wraps CutDiagramRenderer to write cut diagrams as SVG files.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from furniture_cut.infrastructure.cut_diagram_renderer import CutDiagramRenderer
from furniture_cut.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from furniture_cut.domain import CuttingSheet


@ExporterRegistry.register("svg")
class SvgExporter:
    """SVG exporter for cut diagrams.

    Attributes:
        format_name: Identifier for this export format.
        file_extension: File extension for SVG files.
    """

    format_name: ClassVar[str] = "svg"
    file_extension: ClassVar[str] = "svg"

    def __init__(
        self,
        scale: float = 0.25,
        show_dimensions: bool = True,
        show_labels: bool = True,
    ) -> None:
        self.renderer = CutDiagramRenderer(
            scale=scale,
            show_dimensions=show_dimensions,
            show_labels=show_labels,
        )

    def export(self, sheet: CuttingSheet, path: Path) -> None:
        path.write_text(self.export_string(sheet), encoding="utf-8")

    def export_string(self, sheet: CuttingSheet) -> str:
        return self.renderer.render_svg(sheet)
