"""Exporter protocol, format registry and multi-format export."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Callable, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from furniture_cut.domain import CuttingSheet


logger = logging.getLogger(__name__)


@runtime_checkable
class Exporter(Protocol):
    """Writes a cutting sheet in one file format.

    Every built-in format is text based, so exporters render to a string
    and ``export`` writes that string to disk.
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]

    def export(self, sheet: CuttingSheet, path: Path) -> None: ...

    def export_string(self, sheet: CuttingSheet) -> str: ...


class ExporterRegistry:
    """Maps format names to exporter classes.

    Exporter modules register their class with ``@ExporterRegistry.register``
    when the ``exporters`` package is imported.
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str) -> Callable[[type[Exporter]], type[Exporter]]:
        """Class decorator registering an exporter under ``format_name``.

        Raises:
            ValueError: If another class already owns the format name.
        """

        def decorator(exporter_class: type[Exporter]) -> type[Exporter]:
            existing = cls._exporters.get(format_name)
            if existing is not None and existing is not exporter_class:
                raise ValueError(
                    f"Format '{format_name}' is already handled by {existing.__name__}"
                )
            cls._exporters[format_name] = exporter_class
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[Exporter]:
        """Return the exporter class for a format.

        Raises:
            KeyError: If no exporter handles the format.
        """
        try:
            return cls._exporters[format_name]
        except KeyError:
            available = ", ".join(cls.available_formats()) or "none"
            raise KeyError(
                f"No exporter registered for format '{format_name}'. "
                f"Available formats: {available}"
            ) from None

    @classmethod
    def available_formats(cls) -> list[str]:
        return sorted(cls._exporters)


class ExportManager:
    """Writes one cutting sheet in several formats into a directory."""

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = Path(output_dir)

    def export_all(
        self,
        formats: list[str],
        sheet: CuttingSheet,
        project_name: str = "cutting_sheet",
    ) -> dict[str, Path]:
        """Export ``sheet`` as ``{project_name}_{format}.{ext}`` per format.

        Every format is resolved before any file is written, so an unknown
        format leaves the directory untouched.

        Returns:
            Mapping of format name to the written file.

        Raises:
            KeyError: If any format is not registered.
            OSError: If a file cannot be written.
        """
        exporters = {name: ExporterRegistry.get(name)() for name in formats}
        self.output_dir.mkdir(parents=True, exist_ok=True)

        written: dict[str, Path] = {}
        for name, exporter in exporters.items():
            path = self.output_dir / f"{project_name}_{name}.{exporter.file_extension}"
            exporter.export(sheet, path)
            written[name] = path

        logger.info(
            "Exported sheet %s as %s to %s",
            sheet.id,
            ", ".join(written),
            self.output_dir,
        )
        return written
