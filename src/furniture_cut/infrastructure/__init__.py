"""Infrastructure layer - storage, logging, rendering and exporters."""

from .cut_diagram_renderer import CutDiagramRenderer
from .exporters import (
    DxfExporter,
    Exporter,
    ExporterRegistry,
    ExportManager,
    JsonSheetExporter,
    SvgExporter,
)
from .formatters import PackingFailureFormatter, PlacementListFormatter
from .logging_context import (
    RequestContextFilter,
    configure_logging,
    get_request_id,
    request_context,
)
from .repository import CuttingSheetNotFoundError, InMemoryCuttingSheetRepository

__all__ = [
    # Storage
    "CuttingSheetNotFoundError",
    "InMemoryCuttingSheetRepository",
    # Logging
    "RequestContextFilter",
    "configure_logging",
    "get_request_id",
    "request_context",
    # Rendering
    "CutDiagramRenderer",
    "PackingFailureFormatter",
    "PlacementListFormatter",
    # Exporters
    "DxfExporter",
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "JsonSheetExporter",
    "SvgExporter",
]
