"""Cut diagram rendering for cutting sheet visualization.

This module provides SVG and ASCII rendering of a cutting sheet showing
element placements, dimensions and the waste left on the sheet.
"""

from __future__ import annotations

from furniture_cut.domain import CuttingSheet, PlacedElement

# Fill colors, assigned by element id
ELEMENT_COLORS: tuple[str, ...] = (
    "#87CEEB",  # Sky blue
    "#90EE90",  # Light green
    "#DDA0DD",  # Plum
    "#F0E68C",  # Khaki
    "#FFB6C1",  # Light pink
    "#FFA07A",  # Light salmon
    "#FFD700",  # Gold
    "#DEB887",  # Burlywood
    "#E6E6FA",  # Lavender
    "#BC8F8F",  # Rosy brown
)


def element_color(element: PlacedElement) -> str:
    """Return the fill color for an element.

    Elements sharing an id share a color.
    """
    return ELEMENT_COLORS[element.furniture_body_id % len(ELEMENT_COLORS)]


class CutDiagramRenderer:
    """Renders cut diagrams in SVG and ASCII format.

    Attributes:
        scale: Pixels per sheet unit for SVG rendering.
        piece_stroke: Stroke color for element outlines.
        waste_fill: Fill color for uncovered sheet area.
        text_color: Color for labels and dimensions.
        show_dimensions: Whether to show element dimensions.
        show_labels: Whether to show element ids.
    """

    def __init__(
        self,
        scale: float = 0.25,
        piece_stroke: str = "#000000",
        waste_fill: str = "#D3D3D3",
        text_color: str = "#000000",
        show_dimensions: bool = True,
        show_labels: bool = True,
    ) -> None:
        self.scale = scale
        self.piece_stroke = piece_stroke
        self.waste_fill = waste_fill
        self.text_color = text_color
        self.show_dimensions = show_dimensions
        self.show_labels = show_labels

    def render_svg(self, sheet: CuttingSheet) -> str:
        """Generate an SVG cut diagram for a sheet.

        Everything not covered by an element is drawn in the waste color,
        so the diagram shows waste exactly.

        Args:
            sheet: Cutting sheet with placed elements.

        Returns:
            SVG document as a string.
        """
        header_height = 30
        svg_width = sheet.width * self.scale
        sheet_height = sheet.height * self.scale
        svg_height = sheet_height + header_height

        parts: list[str] = [
            f'<svg width="{svg_width}" height="{svg_height}" '
            f'xmlns="http://www.w3.org/2000/svg">',
            "",
            "  <!-- Background -->",
            f'  <rect x="0" y="0" width="{svg_width}" height="{svg_height}" '
            f'fill="white"/>',
            "",
            self._render_header(sheet, svg_width, header_height),
            "",
            "  <!-- Sheet (uncovered area is waste) -->",
            f'  <rect x="0" y="{header_height}" '
            f'width="{svg_width}" height="{sheet_height}" '
            f'fill="{self.waste_fill}" stroke="{self.piece_stroke}" stroke-width="2"/>',
            "",
            "  <!-- Placed elements -->",
        ]

        for element in sheet.placed_elements:
            parts.append(self._render_element(element, header_height))

        parts.append("")
        parts.append("</svg>")
        return "\n".join(parts)

    def _render_header(
        self, sheet: CuttingSheet, svg_width: float, header_height: float
    ) -> str:
        title = (
            f"Sheet {sheet.width}x{sheet.height} - "
            f"{sheet.element_count} element{'s' if sheet.element_count != 1 else ''} - "
            f"{sheet.waste_percentage:.1f}% waste"
        )
        return (
            "  <!-- Header -->\n"
            f'  <text x="{svg_width / 2}" y="{header_height * 0.7}" '
            f'text-anchor="middle" font-family="Arial, sans-serif" '
            f'font-size="14" font-weight="bold" fill="{self.text_color}">'
            f"{title}</text>"
        )

    def _render_element(self, element: PlacedElement, header_height: float) -> str:
        """Render one element rectangle with its label and dimensions."""
        x = element.x * self.scale
        y = header_height + element.y * self.scale
        w = element.width * self.scale
        h = element.height * self.scale

        parts = [
            f'  <rect x="{x}" y="{y}" width="{w}" height="{h}" '
            f'fill="{element_color(element)}" stroke="{self.piece_stroke}" '
            f'stroke-width="1"/>'
        ]

        cx = x + w / 2
        cy = y + h / 2
        # Keep text readable on small pieces
        font_size = max(6.0, min(12.0, w / 6, h / 3))

        text_lines: list[str] = []
        if self.show_labels:
            text_lines.append(f"#{element.furniture_body_id}")
        if self.show_dimensions:
            text_lines.append(f"{element.width}x{element.height}")

        offset = -(len(text_lines) - 1) * font_size / 2
        for i, text in enumerate(text_lines):
            ty = cy + offset + i * font_size + font_size / 3
            parts.append(
                f'  <text x="{cx}" y="{ty}" text-anchor="middle" '
                f'font-family="Arial, sans-serif" font-size="{font_size:.1f}" '
                f'fill="{self.text_color}">{text}</text>'
            )

        return "\n".join(parts)

    def render_ascii(self, sheet: CuttingSheet, width: int = 80) -> str:
        """Generate an ASCII cut diagram for a sheet.

        Args:
            sheet: Cutting sheet with placed elements.
            width: Terminal width in characters (default 80).

        Returns:
            ASCII string representation of the sheet.
        """
        usable_width = max(width - 2, 10)
        scale_x = usable_width / sheet.width

        # 0.5 for character aspect ratio
        grid_height = max(int(usable_width * sheet.height / sheet.width * 0.5), 10)
        scale_y = grid_height / sheet.height

        grid = [[" " for _ in range(usable_width)] for _ in range(grid_height)]
        for element in sheet.placed_elements:
            self._draw_element_ascii(grid, element, scale_x, scale_y)

        lines: list[str] = [
            f"Sheet {sheet.width}x{sheet.height} - {sheet.waste_percentage:.1f}% waste",
            "+" + "-" * usable_width + "+",
        ]
        lines.extend("|" + "".join(row) + "|" for row in grid)
        lines.append("+" + "-" * usable_width + "+")
        return "\n".join(lines)

    def _draw_element_ascii(
        self,
        grid: list[list[str]],
        element: PlacedElement,
        scale_x: float,
        scale_y: float,
    ) -> None:
        """Draw a single element box onto the ASCII grid."""
        grid_height = len(grid)
        grid_width = len(grid[0])

        x1 = max(0, min(int(element.x * scale_x), grid_width - 1))
        y1 = max(0, min(int(element.y * scale_y), grid_height - 1))
        x2 = max(0, min(int((element.x + element.width) * scale_x), grid_width - 1))
        y2 = max(0, min(int((element.y + element.height) * scale_y), grid_height - 1))

        for x in range(x1, x2 + 1):
            grid[y1][x] = "-"
            grid[y2][x] = "-"
        for y in range(y1, y2 + 1):
            grid[y][x1] = "|"
            grid[y][x2] = "|"
        for y, x in ((y1, x1), (y1, x2), (y2, x1), (y2, x2)):
            grid[y][x] = "+"

        label_row = y1 + 1
        if label_row < y2:
            label = f"#{element.furniture_body_id}"[: max(x2 - x1 - 1, 0)]
            for i, char in enumerate(label):
                grid[label_row][x1 + 1 + i] = char

        dims_row = y1 + 2
        if self.show_dimensions and dims_row < y2:
            dims = f"{element.width}x{element.height}"[: max(x2 - x1 - 1, 0)]
            for i, char in enumerate(dims):
                grid[dims_row][x1 + 1 + i] = char

    def render_waste_summary(self, sheet: CuttingSheet) -> str:
        """Generate a text summary of sheet usage."""
        return "\n".join(
            [
                "CUT SUMMARY",
                "=" * 40,
                f"Sheet: {sheet.width} x {sheet.height}",
                f"Elements placed: {sheet.element_count}",
                f"Used area: {sheet.used_area} of {sheet.area}",
                f"Waste: {sheet.waste_area} ({sheet.waste_percentage:.1f}%)",
            ]
        )
