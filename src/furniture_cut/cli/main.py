"""Typer CLI for laying out furniture elements on stock sheets."""

import re
from pathlib import Path
from typing import Annotated

import typer

from furniture_cut.application import CutRequestInput, FurnitureBodyInput, get_factory
from furniture_cut.application.config import (
    ConfigError,
    CutterConfiguration,
    load_config,
    load_cut_request,
)
from furniture_cut.cli.commands import display_load_error, validate_command
from furniture_cut.domain import CuttingSheet
from furniture_cut.infrastructure import (
    CutDiagramRenderer,
    JsonSheetExporter,
    PackingFailureFormatter,
    PlacementListFormatter,
    configure_logging,
)
from furniture_cut.infrastructure.exporters import ExporterRegistry, ExportManager

OUTPUT_FORMATS = ("table", "json", "ascii", "svg")

# ID:WIDTHxHEIGHT with an optional xDEPTH suffix, e.g. "7:600x400x18"
ELEMENT_PATTERN = re.compile(r"^(-?\d+):(-?\d+)x(-?\d+)(?:x(-?\d+))?$")

app = typer.Typer(
    name="furniture-cut",
    help="Lay out furniture elements on a stock sheet for cutting.",
)

# Register validate command
app.command(name="validate")(validate_command)


def parse_element(spec: str) -> FurnitureBodyInput:
    """Parse an ``ID:WxH[xD]`` command-line element.

    Raises:
        typer.BadParameter: If the text does not follow the pattern.
    """
    match = ELEMENT_PATTERN.match(spec.strip())
    if match is None:
        raise typer.BadParameter(
            f"Invalid element '{spec}'. Expected ID:WIDTHxHEIGHT[xDEPTH], e.g. 1:600x400"
        )
    element_id, width, height, depth = match.groups()
    return FurnitureBodyInput(
        id=int(element_id),
        width=int(width),
        height=int(height),
        depth=int(depth) if depth is not None else 0,
    )


def _load_configuration(config_file: Path | None) -> CutterConfiguration:
    if config_file is None:
        return CutterConfiguration()
    try:
        return load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)


def _log_level(
    verbose: bool, config_file: Path | None, config: CutterConfiguration
) -> str:
    """Pick the CLI log level.

    Without --verbose or a configuration file only warnings reach stderr.
    """
    if verbose:
        return "DEBUG"
    if config_file is not None:
        return config.logging.level
    return "WARNING"


def _build_request(
    request_file: Path | None,
    sheet_width: int | None,
    sheet_height: int | None,
    elements: list[str] | None,
    config: CutterConfiguration,
) -> CutRequestInput:
    """Combine the request file, command-line options and config defaults.

    Command-line sheet sizes override the file; command-line elements are
    appended to the file's elements. A sheet size given nowhere falls back
    to the configured default.
    """
    if request_file is not None:
        try:
            request = load_cut_request(request_file)
        except ConfigError as e:
            display_load_error(e)
            raise typer.Exit(code=1)
    else:
        request = CutRequestInput()

    if sheet_width is not None:
        request.sheet_width = sheet_width
    if sheet_height is not None:
        request.sheet_height = sheet_height
    if request.sheet_width is None:
        request.sheet_width = config.defaults.sheet_width
    if request.sheet_height is None:
        request.sheet_height = config.defaults.sheet_height

    if elements:
        parsed = [parse_element(spec) for spec in elements]
        request.elements = (request.elements or []) + parsed

    return request


def _render(
    sheet: CuttingSheet, output_format: str, config: CutterConfiguration
) -> str:
    renderer = CutDiagramRenderer(
        scale=config.rendering.scale,
        show_dimensions=config.rendering.show_dimensions,
        show_labels=config.rendering.show_labels,
    )
    if output_format == "json":
        return JsonSheetExporter().export_string(sheet)
    if output_format == "ascii":
        return renderer.render_ascii(sheet) + "\n\n" + renderer.render_waste_summary(sheet)
    if output_format == "svg":
        return renderer.render_svg(sheet)
    return PlacementListFormatter().format(sheet)


def _handle_multi_format_export(
    output_formats_str: str,
    output_dir: Path | None,
    project_name: str,
    sheet: CuttingSheet,
) -> None:
    """Handle multi-format export via --output-formats option.

    Args:
        output_formats_str: Comma-separated format list or "all".
        output_dir: Output directory for exported files.
        project_name: Project name for file naming.
        sheet: The packed sheet to export.
    """
    available = ExporterRegistry.available_formats()
    if output_formats_str.lower() == "all":
        formats = available
    else:
        formats = [f.strip().lower() for f in output_formats_str.split(",") if f.strip()]

    invalid = [f for f in formats if f not in available]
    if invalid:
        typer.echo(f"Unknown formats: {', '.join(invalid)}", err=True)
        typer.echo(f"Available formats: {', '.join(available)}", err=True)
        raise typer.Exit(code=1)

    if not formats:
        typer.echo("No valid formats to export.", err=True)
        raise typer.Exit(code=1)

    manager = ExportManager(output_dir or Path("."))
    try:
        files = manager.export_all(formats, sheet, project_name)
    except OSError as e:
        typer.echo(f"Export error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo("\nExported files:")
    for fmt, path in files.items():
        typer.echo(f"  {fmt.upper()}: {path}")


@app.command()
def cut(
    request_file: Annotated[
        Path | None,
        typer.Argument(help="Path to a JSON cut request"),
    ] = None,
    sheet_width: Annotated[
        int | None,
        typer.Option("--sheet-width", "-W", help="Sheet width (overrides the request)"),
    ] = None,
    sheet_height: Annotated[
        int | None,
        typer.Option("--sheet-height", "-H", help="Sheet height (overrides the request)"),
    ] = None,
    elements: Annotated[
        list[str] | None,
        typer.Option(
            "--element",
            "-e",
            help="Element as ID:WIDTHxHEIGHT[xDEPTH]; repeat for more elements",
        ),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON configuration file"),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: table, json, ascii, svg"),
    ] = "table",
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the output to a file"),
    ] = None,
    output_formats: Annotated[
        str | None,
        typer.Option(
            "--output-formats",
            help="Comma-separated export formats: json,svg,dxf (or 'all')",
        ),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", help="Output directory for multi-format export"),
    ] = None,
    project_name: Annotated[
        str,
        typer.Option("--project-name", help="Project name for output file naming"),
    ] = "cutting_sheet",
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log packing details to stderr"),
    ] = False,
) -> None:
    """Lay out furniture elements on one stock sheet.

    Exit codes:
        0 - Every element was placed
        1 - Invalid request or configuration
        2 - Some elements do not fit on the sheet

    Examples:
        furniture-cut cut wardrobe.json --format ascii
        furniture-cut cut -W 2800 -H 2070 -e 1:600x400 -e 2:600x400x18
    """
    config = _load_configuration(config_file)
    configure_logging(_log_level(verbose, config_file, config))

    output_format = output_format.lower()
    if output_format not in OUTPUT_FORMATS:
        typer.echo(
            f"Unknown format '{output_format}'. Choose from: {', '.join(OUTPUT_FORMATS)}",
            err=True,
        )
        raise typer.Exit(code=1)

    request = _build_request(request_file, sheet_width, sheet_height, elements, config)

    command = get_factory(config).create_cut_command()
    result = command.execute(request)

    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    if result.failure is not None:
        typer.echo(PackingFailureFormatter().format(result.failure), err=True)
        raise typer.Exit(code=2)

    sheet = result.cutting_sheet
    assert sheet is not None

    rendered = _render(sheet, output_format, config)
    if output_file is not None:
        output_file.write_text(rendered, encoding="utf-8")
        typer.echo(f"Wrote {output_format} output to {output_file}")
    else:
        typer.echo(rendered)

    if output_formats:
        _handle_multi_format_export(output_formats, output_dir, project_name, sheet)


@app.command()
def formats() -> None:
    """List available export formats."""
    typer.echo("Available export formats:")
    for format_name in ExporterRegistry.available_formats():
        exporter_class = ExporterRegistry.get(format_name)
        typer.echo(f"  {format_name:<6} .{exporter_class.file_extension}")


if __name__ == "__main__":
    app()
