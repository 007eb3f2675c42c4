"""Export formats for cutting sheets.

Importing this package registers every built-in exporter with
ExporterRegistry.
"""

from furniture_cut.infrastructure.exporters.base import (
    ExporterRegistry,
    ExportManager,
    Exporter,
)
from furniture_cut.infrastructure.exporters.dxf import DxfExporter
from furniture_cut.infrastructure.exporters.json import JsonSheetExporter, sheet_to_dict
from furniture_cut.infrastructure.exporters.svg import SvgExporter

__all__ = [
    "DxfExporter",
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "JsonSheetExporter",
    "SvgExporter",
    "sheet_to_dict",
]
