"""Text formatters for cutting results."""

from __future__ import annotations

from furniture_cut.application.dtos import PackingFailureReport
from furniture_cut.domain import CuttingSheet


class PlacementListFormatter:
    """Formats the placements of a cutting sheet as a table."""

    def format(self, sheet: CuttingSheet) -> str:
        """Format placements in packing order, followed by totals."""
        if not sheet.placed_elements:
            return "No elements placed."

        header = f"CUTTING SHEET {sheet.width} x {sheet.height}"
        if sheet.id is not None:
            header += f" (#{sheet.id})"

        lines = [
            header,
            "=" * 60,
            f"{'Element':<10} {'X':>8} {'Y':>8} {'Width':>10} {'Height':>10} {'Area':>10}",
            "-" * 60,
        ]
        for element in sheet.placed_elements:
            lines.append(
                f"{element.furniture_body_id:<10} {element.x:>8} {element.y:>8} "
                f"{element.width:>10} {element.height:>10} {element.area:>10}"
            )
        lines.append("-" * 60)
        lines.append(
            f"{sheet.element_count} elements, {sheet.used_area} of {sheet.area} used, "
            f"{sheet.waste_percentage:.1f}% waste"
        )
        return "\n".join(lines)


class PackingFailureFormatter:
    """Formats a packing failure so a user can resize the sheet or drop elements."""

    def format(self, report: PackingFailureReport) -> str:
        lines = [
            "PACKING FAILED",
            "=" * 60,
            report.message,
            "",
            "Unplaced elements:",
        ]
        lines.extend(f"  - {element_id}" for element_id in report.unplaced_element_ids)
        return "\n".join(lines)
