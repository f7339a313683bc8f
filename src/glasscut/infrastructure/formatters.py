"""Output formatters for glass packing results."""

from __future__ import annotations

import json
from typing import Any, Sequence

from glasscut.domain.value_objects import Panel
from glasscut.infrastructure.bin_packing import PlacedPanel, SheetLayout
from glasscut.infrastructure.glass_summary import GlassLineItem, GlassSummary


class PanelCutFormatter:
    """Formats the panel cut list for display."""

    def format(self, panels: Sequence[Panel]) -> str:
        if not panels:
            return "No panels in cut list."

        lines = [
            "GLASS PANEL CUTS",
            "=" * 70,
            f"{'Window':<24} {'Width':<10} {'Height':<10} {'Area (sq in)'}",
            "-" * 70,
        ]
        total_area = 0.0
        for panel in panels:
            lines.append(
                f"{panel.display_name:<24} {panel.width:<10.3f} {panel.height:<10.3f} "
                f"{panel.area:.1f}"
            )
            total_area += panel.area
        lines.append("-" * 70)
        lines.append(f"{'TOTAL':<24} {len(panels):<10} {'':<10} {total_area:.1f}")
        lines.append(f"{'':>46} ({total_area / 144:.2f} sq ft)")
        return "\n".join(lines)


class GlassSummaryFormatter:
    """Formats a glass summary as a text table."""

    def format(self, summary: GlassSummary) -> str:
        """Format line items, totals and error notes."""
        if not summary.line_items:
            return "No glass required."

        lines = [
            "GLASS STOCK",
            "=" * 80,
            f"{'Item':<36} {'Size':<18} {'Qty':<5} {'Unit':>9} {'Total':>10}",
            "-" * 80,
        ]
        for item in summary.line_items:
            lines.append(
                f"{item.name:<36} {item.size:<18} {item.quantity:<5} "
                f"{item.unit_price:>9.2f} {item.total_cost:>10.2f}"
            )
        lines.append("-" * 80)
        lines.append(
            f"{'TOTAL':<36} {'':<18} {summary.total_sheets:<5} {'':>9} "
            f"{summary.total_cost:>10.2f}"
        )
        lines.append(f"Net glass area: {summary.total_square_footage:.2f} sq ft")

        notes = [item for item in summary.line_items if item.notes]
        if notes:
            lines.append("")
            lines.append("Notes:")
            for item in notes:
                lines.append(f"  {item.size}: {item.notes}")

        return "\n".join(lines)


class JsonExporter:
    """Exports a glass summary as JSON, including sheet layouts."""

    def to_dict(self, summary: GlassSummary) -> dict[str, Any]:
        return {
            "price_per_sqft": summary.price_per_sqft,
            "total_cost": summary.total_cost,
            "total_sheets": summary.total_sheets,
            "total_square_footage": summary.total_square_footage,
            "has_errors": summary.has_errors,
            "line_items": [self._format_line_item(item) for item in summary.line_items],
        }

    def export(self, summary: GlassSummary) -> str:
        return json.dumps(self.to_dict(summary), indent=2)

    def _format_line_item(self, item: GlassLineItem) -> dict[str, Any]:
        return {
            "name": item.name,
            "size": item.size,
            "quantity": item.quantity,
            "physical_sheets": item.physical_sheets,
            "unit_price": item.unit_price,
            "total_cost": item.total_cost,
            "notes": item.notes,
            "is_error": item.is_error,
            "panel_count": item.panel_count,
            "layouts": [self._format_layout(layout) for layout in item.layouts],
        }

    def _format_layout(self, layout: SheetLayout) -> dict[str, Any]:
        return {
            "sheet_index": layout.sheet_index,
            "stock_width": layout.stock_width,
            "stock_height": layout.stock_height,
            "waste_percentage": round(layout.waste_percentage, 2),
            "placed_panels": [self._format_placed(p) for p in layout.placed_panels],
        }

    @staticmethod
    def _format_placed(placed: PlacedPanel) -> dict[str, Any]:
        return {
            "x": placed.x,
            "y": placed.y,
            "width": placed.width,
            "height": placed.height,
            "source_width": placed.source_width,
            "source_height": placed.source_height,
            "source_index": placed.source_index,
            "source_label": placed.source_label,
            "rotated": placed.rotated,
        }
