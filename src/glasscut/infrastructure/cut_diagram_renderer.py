"""Cut diagram rendering for glass packing visualization.

This module provides SVG and ASCII rendering of sheet layouts showing
panel placements, dimensions, rotation indicators and waste.
"""

from __future__ import annotations

from typing import Sequence
from xml.sax.saxutils import escape

from glasscut.infrastructure.bin_packing import PlacedPanel, SheetLayout

# Fill colors cycled by window index so panels of one window share a color
WINDOW_COLORS: tuple[str, ...] = (
    "#87CEEB",  # Sky blue
    "#90EE90",  # Light green
    "#DDA0DD",  # Plum
    "#F0E68C",  # Khaki
    "#FFB6C1",  # Light pink
    "#FFA07A",  # Light salmon
    "#E6E6FA",  # Lavender
    "#DEB887",  # Burlywood
)


def _header_text(layout: SheetLayout, total_sheets: int, sheet_number: int | None) -> str:
    number = sheet_number if sheet_number is not None else layout.sheet_index + 1
    return (
        f'Sheet {number} of {total_sheets} - '
        f'{layout.stock_width:g}" x {layout.stock_height:g}" - '
        f"{layout.waste_percentage:.1f}% waste"
    )


class CutDiagramRenderer:
    """Renders glass cut diagrams in SVG and ASCII.

    Attributes:
        scale: Pixels per inch for SVG rendering.
        panel_fill: Fill color when window colors are disabled.
        panel_stroke: Stroke color for panel outlines.
        waste_fill: Fill color for the uncut part of the sheet.
        text_color: Color for labels and dimensions.
        show_dimensions: Whether to show panel dimensions.
        show_labels: Whether to show window labels.
        use_window_colors: Whether to color panels by window.
    """

    def __init__(
        self,
        scale: float = 5.0,
        panel_fill: str = "#ADD8E6",  # Light blue
        panel_stroke: str = "#000000",
        waste_fill: str = "#D3D3D3",  # Light gray
        text_color: str = "#000000",
        show_dimensions: bool = True,
        show_labels: bool = True,
        use_window_colors: bool = True,
    ) -> None:
        if scale <= 0:
            raise ValueError("Scale must be positive")
        self.scale = scale
        self.panel_fill = panel_fill
        self.panel_stroke = panel_stroke
        self.waste_fill = waste_fill
        self.text_color = text_color
        self.show_dimensions = show_dimensions
        self.show_labels = show_labels
        self.use_window_colors = use_window_colors

    def render_svg(
        self,
        layout: SheetLayout,
        total_sheets: int = 1,
        sheet_number: int | None = None,
    ) -> str:
        """Generate an SVG cut diagram for a single sheet.

        Args:
            layout: Sheet layout with placed panels.
            total_sheets: Total number of sheets (for the header).
            sheet_number: 1-based number for the header; defaults to the
                layout's own sheet index.

        Returns:
            SVG document as a string.
        """
        header_height = 30
        svg_width = layout.stock_width * self.scale
        sheet_height = layout.stock_height * self.scale
        svg_height = sheet_height + header_height

        parts: list[str] = [
            f'<svg width="{svg_width}" height="{svg_height}" '
            f'xmlns="http://www.w3.org/2000/svg">',
            f'  <rect x="0" y="0" width="{svg_width}" height="{svg_height}" fill="white"/>',
            self._render_header(
                layout, total_sheets, sheet_number, svg_width, header_height
            ),
            "  <!-- Sheet (uncut area shows as waste) -->",
            f'  <rect x="0" y="{header_height}" width="{svg_width}" '
            f'height="{sheet_height}" fill="{self.waste_fill}" '
            f'stroke="{self.panel_stroke}" stroke-width="2"/>',
            "  <!-- Placed panels -->",
        ]
        for placed in layout.placed_panels:
            parts.append(self._render_panel(placed, header_height))
        parts.append("</svg>")
        return "\n".join(parts)

    def render_all_svg(self, layouts: Sequence[SheetLayout]) -> list[str]:
        """Generate one SVG per sheet."""
        return [
            self.render_svg(layout, len(layouts), number)
            for number, layout in enumerate(layouts, start=1)
        ]

    def render_combined_svg(self, layouts: Sequence[SheetLayout]) -> str:
        """Generate a single SVG with all sheets stacked vertically."""
        if not layouts:
            return (
                '<svg width="100" height="50" xmlns="http://www.w3.org/2000/svg">'
                '<text x="10" y="30">No sheets to display</text></svg>'
            )

        header_height = 30
        sheet_spacing = 20
        svg_width = max(layout.stock_width for layout in layouts) * self.scale
        svg_height = sum(
            layout.stock_height * self.scale + header_height + sheet_spacing
            for layout in layouts
        )

        parts: list[str] = [
            f'<svg width="{svg_width}" height="{svg_height}" '
            f'xmlns="http://www.w3.org/2000/svg">',
        ]
        y_offset = 0.0
        for number, layout in enumerate(layouts, start=1):
            sheet_svg = self.render_svg(layout, len(layouts), number)
            inner = sheet_svg[sheet_svg.find(">") + 1 : sheet_svg.rfind("</svg>")]
            parts.append(f'  <g transform="translate(0, {y_offset})">')
            parts.append(f"    <!-- Sheet {number} -->")
            parts.extend(f"  {line}" for line in inner.strip().split("\n") if line.strip())
            parts.append("  </g>")
            y_offset += layout.stock_height * self.scale + header_height + sheet_spacing
        parts.append("</svg>")
        return "\n".join(parts)

    def _render_header(
        self,
        layout: SheetLayout,
        total_sheets: int,
        sheet_number: int | None,
        svg_width: float,
        header_height: float,
    ) -> str:
        header_text = _header_text(layout, total_sheets, sheet_number)
        return (
            f'  <rect x="0" y="0" width="{svg_width}" height="{header_height}" fill="#E0E0E0"/>\n'
            f'  <text x="10" y="{header_height - 8}" font-family="Arial, sans-serif" '
            f'font-size="14" fill="{self.text_color}">{escape(header_text)}</text>'
        )

    def _fill_for(self, placed: PlacedPanel) -> str:
        if not self.use_window_colors:
            return self.panel_fill
        return WINDOW_COLORS[placed.source_index % len(WINDOW_COLORS)]

    def _render_panel(self, placed: PlacedPanel, header_height: float) -> str:
        """Render one placed panel as a rect with centered text."""
        x = placed.x * self.scale
        y = header_height + placed.y * self.scale
        w = placed.width * self.scale
        h = placed.height * self.scale
        fill = self._fill_for(placed)

        rect = (
            f'    <rect x="{x}" y="{y}" width="{w}" height="{h}" '
            f'fill="{fill}" stroke="{self.panel_stroke}"/>'
        )
        font_size = min(12, min(w, h) / 6)
        if font_size < 6:
            return f"  <g>\n{rect}\n  </g>"

        dims = f'{placed.source_width:g}" x {placed.source_height:g}"'
        if placed.rotated:
            dims += " (R)"
        label = placed.source_label or f"Window {placed.source_index}"

        text_x = x + w / 2
        text_y = y + h / 2
        svg_parts = ["  <g>", rect]
        if self.show_labels:
            svg_parts.append(
                f'    <text x="{text_x}" y="{text_y - font_size / 2}" text-anchor="middle" '
                f'font-family="Arial, sans-serif" font-size="{font_size}" '
                f'fill="{self.text_color}">{escape(label)}</text>'
            )
        if self.show_dimensions:
            dims_y = text_y + font_size / 2 + 2 if self.show_labels else text_y
            svg_parts.append(
                f'    <text x="{text_x}" y="{dims_y}" text-anchor="middle" '
                f'font-family="Arial, sans-serif" font-size="{font_size * 0.8}" '
                f'fill="{self.text_color}">{escape(dims)}</text>'
            )
        svg_parts.append("  </g>")
        return "\n".join(svg_parts)

    def render_ascii(
        self,
        layout: SheetLayout,
        width: int = 80,
        total_sheets: int = 1,
        sheet_number: int | None = None,
    ) -> str:
        """Generate a text diagram of a sheet for terminal display.

        Args:
            layout: Sheet layout with placed panels.
            width: Terminal width in characters.
            total_sheets: Total number of sheets (for the header).
            sheet_number: 1-based number for the header.

        Returns:
            ASCII diagram as a string.
        """
        usable_width = width - 2
        scale_x = usable_width / layout.stock_width
        # Terminal cells are roughly twice as tall as wide
        grid_height = max(int(usable_width * layout.stock_height / layout.stock_width * 0.5), 10)
        scale_y = grid_height / layout.stock_height

        grid = [[" " for _ in range(usable_width)] for _ in range(grid_height)]
        for number, placed in enumerate(layout.placed_panels, start=1):
            self._draw_panel_ascii(grid, placed, scale_x, scale_y, str(number))

        lines = [
            _header_text(layout, total_sheets, sheet_number),
            "+" + "-" * usable_width + "+",
        ]
        lines.extend("|" + "".join(row) + "|" for row in grid)
        lines.append("+" + "-" * usable_width + "+")
        for number, placed in enumerate(layout.placed_panels, start=1):
            rotated = " (R)" if placed.rotated else ""
            label = placed.source_label or f"Window {placed.source_index}"
            lines.append(
                f'  {number}. {label}: {placed.source_width:g}" x '
                f'{placed.source_height:g}" at ({placed.x:g}, {placed.y:g}){rotated}'
            )
        return "\n".join(lines)

    def render_all_ascii(self, layouts: Sequence[SheetLayout], width: int = 80) -> str:
        """Render every sheet, separated by blank lines."""
        return "\n\n".join(
            self.render_ascii(layout, width, len(layouts), number)
            for number, layout in enumerate(layouts, start=1)
        )

    @staticmethod
    def _draw_panel_ascii(
        grid: list[list[str]],
        placed: PlacedPanel,
        scale_x: float,
        scale_y: float,
        tag: str,
    ) -> None:
        grid_height = len(grid)
        grid_width = len(grid[0]) if grid else 0
        x1 = max(0, min(int(placed.x * scale_x), grid_width - 1))
        x2 = max(0, min(int(placed.right_edge * scale_x), grid_width - 1))
        y1 = max(0, min(int(placed.y * scale_y), grid_height - 1))
        y2 = max(0, min(int(placed.top_edge * scale_y), grid_height - 1))

        for x in range(x1, x2 + 1):
            grid[y1][x] = "-"
            grid[y2][x] = "-"
        for y in range(y1, y2 + 1):
            grid[y][x1] = "|"
            grid[y][x2] = "|"
        for x, y in ((x1, y1), (x2, y1), (x1, y2), (x2, y2)):
            grid[y][x] = "+"

        # Number in the middle when there is room
        mid_y = (y1 + y2) // 2
        start_x = (x1 + x2 - len(tag)) // 2 + 1
        if y2 - y1 >= 2 and x2 - x1 > len(tag) + 1:
            for offset, char in enumerate(tag):
                grid[mid_y][start_x + offset] = char
