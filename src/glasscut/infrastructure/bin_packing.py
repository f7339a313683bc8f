"""Bin packing data models and algorithms for glass sheet optimization.

This module provides the Maximal Rectangles packer used to place glass
panels on a single stock sheet, and the sheet-filling driver that opens
new sheets until every panel is placed.

All result dataclasses are frozen (immutable); the only mutable state is
the free-rectangle list owned by one ``MaxRectsPacker`` instance.
"""

from __future__ import annotations

import functools
import logging
import math
from dataclasses import dataclass
from typing import Sequence

from glasscut.domain.value_objects import Panel, StockSize

logger = logging.getLogger(__name__)

DEFAULT_CUTTING_ALLOWANCE = 0.125

# Panels whose areas differ by no more than this (sq in) sort as equal area.
AREA_TIE_TOLERANCE = 0.1


@dataclass(frozen=True)
class PackingConfig:
    """Configuration for glass sheet packing.

    Attributes:
        cutting_allowance: Kerf added to each panel's width and height in
            inches (default 1/8").
    """

    cutting_allowance: float = DEFAULT_CUTTING_ALLOWANCE

    def __post_init__(self) -> None:
        if not 0 <= self.cutting_allowance <= 0.5:
            raise ValueError("Cutting allowance must be between 0 and 0.5 inches")


@dataclass(frozen=True)
class FreeRectangle:
    """An empty region of a sheet available for placement.

    Free rectangles of one sheet may overlap each other.
    """

    x: float
    y: float
    width: float
    height: float

    @property
    def right_edge(self) -> float:
        return self.x + self.width

    @property
    def top_edge(self) -> float:
        return self.y + self.height

    def intersects(self, other: FreeRectangle) -> bool:
        """Check for a positive-area overlap with another rectangle."""
        return (
            self.x < other.right_edge
            and self.right_edge > other.x
            and self.y < other.top_edge
            and self.top_edge > other.y
        )

    def contains(self, other: FreeRectangle) -> bool:
        """Check if ``other`` lies entirely within this rectangle."""
        return (
            other.x >= self.x
            and other.y >= self.y
            and other.right_edge <= self.right_edge
            and other.top_edge <= self.top_edge
        )


@dataclass(frozen=True)
class Placement:
    """Position and orientation chosen by ``MaxRectsPacker.fit``.

    Attributes:
        x: Left edge on the sheet in inches.
        y: Top edge on the sheet in inches.
        width: Placed width (after rotation) in inches.
        height: Placed height (after rotation) in inches.
        rotated: True if the rectangle was turned 90 degrees.
    """

    x: float
    y: float
    width: float
    height: float
    rotated: bool = False


@dataclass(frozen=True)
class PlacedPanel:
    """A panel at its final position on a sheet.

    ``width`` and ``height`` are the footprint as placed, including the
    cutting allowance. ``source_width`` and ``source_height`` are the
    panel's own dimensions, unrotated and without allowance.
    """

    x: float
    y: float
    width: float
    height: float
    source_width: float
    source_height: float
    source_index: int
    source_label: str | None = None
    rotated: bool = False

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError("Position coordinates must be non-negative")

    @property
    def right_edge(self) -> float:
        return self.x + self.width

    @property
    def top_edge(self) -> float:
        return self.y + self.height

    @property
    def area(self) -> float:
        """Footprint area including allowance, in square inches."""
        return self.width * self.height


@dataclass(frozen=True)
class SheetLayout:
    """Packing of one physical stock sheet.

    Attributes:
        stock_width: Sheet width in inches.
        stock_height: Sheet height in inches.
        placed_panels: Panels on this sheet in placement order.
        sheet_index: Zero-based index within its packing run.
    """

    stock_width: float
    stock_height: float
    placed_panels: tuple[PlacedPanel, ...]
    sheet_index: int = 0

    def __post_init__(self) -> None:
        if self.sheet_index < 0:
            raise ValueError("Sheet index must be non-negative")

    @property
    def stock_area(self) -> float:
        return self.stock_width * self.stock_height

    @property
    def used_area(self) -> float:
        """Area covered by placed footprints in square inches."""
        return sum(p.area for p in self.placed_panels)

    @property
    def waste_area(self) -> float:
        return self.stock_area - self.used_area

    @property
    def waste_percentage(self) -> float:
        """Percentage of the sheet not covered by panels."""
        if self.stock_area == 0:
            return 0.0
        return (1 - self.used_area / self.stock_area) * 100

    @property
    def panel_count(self) -> int:
        return len(self.placed_panels)


@dataclass(frozen=True)
class PackingResult:
    """Outcome of packing one panel set onto one stock size.

    ``sheet_count`` is ``math.inf`` (with no layouts) when the panel set
    cannot be packed; see ``infeasible``.
    """

    sheet_count: float
    layouts: tuple[SheetLayout, ...] = ()

    @classmethod
    def infeasible(cls) -> PackingResult:
        return cls(sheet_count=math.inf, layouts=())

    @property
    def is_feasible(self) -> bool:
        return not math.isinf(self.sheet_count)

    @property
    def total_waste_percentage(self) -> float:
        """Waste across all sheets (0-100)."""
        total_area = sum(layout.stock_area for layout in self.layouts)
        if total_area == 0:
            return 0.0
        total_used = sum(layout.used_area for layout in self.layouts)
        return (1 - total_used / total_area) * 100


class MaxRectsPacker:
    """Maximal Rectangles packer for a single sheet.

    Free space is kept as a list of maximal empty rectangles that may
    overlap. Each ``fit`` picks the free rectangle and orientation with the
    Best Short Side Fit, breaking ties by Best Long Side Fit and then by
    the order in which candidates were examined.

    Attributes:
        width: Sheet width.
        height: Sheet height.
    """

    def __init__(self, width: float, height: float) -> None:
        self.width = width
        self.height = height
        self._free_rects: list[FreeRectangle] = [FreeRectangle(0.0, 0.0, width, height)]

    @property
    def free_rectangles(self) -> tuple[FreeRectangle, ...]:
        return tuple(self._free_rects)

    def fit(self, width: float, height: float) -> Placement | None:
        """Place a rectangle on the sheet if there is room.

        Args:
            width: Rectangle width, already including any cutting allowance.
            height: Rectangle height, already including any cutting allowance.

        Returns:
            The placement, or None when no free rectangle can hold the
            rectangle in either orientation.
        """
        best_score: tuple[float, float] | None = None
        best_rect: FreeRectangle | None = None
        best_rotated = False

        for rect in self._free_rects:
            for rotated, placed_w, placed_h in ((False, width, height), (True, height, width)):
                if rect.width < placed_w or rect.height < placed_h:
                    continue
                leftover_x = rect.width - placed_w
                leftover_y = rect.height - placed_h
                score = (min(leftover_x, leftover_y), max(leftover_x, leftover_y))
                if best_score is None or score < best_score:
                    best_score = score
                    best_rect = rect
                    best_rotated = rotated

        if best_rect is None:
            return None

        placement = Placement(
            x=best_rect.x,
            y=best_rect.y,
            width=height if best_rotated else width,
            height=width if best_rotated else height,
            rotated=best_rotated,
        )
        self._place(FreeRectangle(placement.x, placement.y, placement.width, placement.height))
        return placement

    def _place(self, used: FreeRectangle) -> None:
        """Split every free rectangle the placement touches, then prune."""
        new_free: list[FreeRectangle] = []
        for free in self._free_rects:
            if used.intersects(free):
                new_free.extend(self._split(free, used))
            else:
                new_free.append(free)
        self._free_rects = self._prune(new_free)

    @staticmethod
    def _split(free: FreeRectangle, used: FreeRectangle) -> list[FreeRectangle]:
        """Return the maximal slivers of ``free`` left uncovered by ``used``."""
        slivers: list[FreeRectangle] = []

        # Above
        if free.y < used.y < free.top_edge:
            slivers.append(FreeRectangle(free.x, free.y, free.width, used.y - free.y))
        # Below
        if used.top_edge < free.top_edge:
            slivers.append(
                FreeRectangle(free.x, used.top_edge, free.width, free.top_edge - used.top_edge)
            )
        # Left
        if free.x < used.x < free.right_edge:
            slivers.append(FreeRectangle(free.x, free.y, used.x - free.x, free.height))
        # Right
        if used.right_edge < free.right_edge:
            slivers.append(
                FreeRectangle(used.right_edge, free.y, free.right_edge - used.right_edge, free.height)
            )

        return slivers

    @staticmethod
    def _prune(rects: list[FreeRectangle]) -> list[FreeRectangle]:
        """Drop rectangles enclosed by another one.

        Of several identical rectangles only the last is kept.
        """
        kept: list[FreeRectangle] = []
        for i, rect in enumerate(rects):
            enclosed = any(
                other.contains(rect) and (other != rect or j > i)
                for j, other in enumerate(rects)
                if j != i
            )
            if not enclosed:
                kept.append(rect)
        return kept


def _compare_for_packing(a: Panel, b: Panel) -> float:
    area_diff = b.area - a.area
    if abs(area_diff) > AREA_TIE_TOLERANCE:
        return area_diff
    return b.longest_side - a.longest_side


class SheetFillingDriver:
    """Fills stock sheets one at a time until every panel is placed.

    Panels are sorted largest first and offered to a fresh
    ``MaxRectsPacker`` per sheet; panels that do not fit are carried over
    to the next sheet.

    Attributes:
        config: Packing configuration (cutting allowance).
    """

    def __init__(self, config: PackingConfig | None = None) -> None:
        self.config = config or PackingConfig()

    def fits_stock(self, panel: Panel, stock: StockSize) -> bool:
        """Check whether a panel plus allowance fits the stock in some orientation."""
        allowance = self.config.cutting_allowance
        return stock.fits(panel.width + allowance, panel.height + allowance)

    def sort_panels(self, panels: Sequence[Panel]) -> list[Panel]:
        """Sort by area descending, then by longest side descending."""
        return sorted(panels, key=functools.cmp_to_key(_compare_for_packing))

    def pack(self, panels: Sequence[Panel], stock: StockSize) -> PackingResult:
        """Pack panels onto as many sheets of ``stock`` as needed.

        Args:
            panels: Panels to place, dimensions without allowance.
            stock: Sheet size to cut from.

        Returns:
            PackingResult with one layout per sheet, or the infeasible
            result if any panel cannot fit the stock at all.
        """
        for panel in panels:
            if not self.fits_stock(panel, stock):
                logger.debug(
                    "Panel %s (%sx%s) does not fit %s",
                    panel.display_name,
                    panel.width,
                    panel.height,
                    stock.label,
                )
                return PackingResult.infeasible()

        allowance = self.config.cutting_allowance
        remaining = self.sort_panels(panels)
        layouts: list[SheetLayout] = []

        while remaining:
            packer = MaxRectsPacker(stock.width, stock.height)
            placed: list[PlacedPanel] = []
            carried: list[Panel] = []

            for panel in remaining:
                placement = packer.fit(panel.width + allowance, panel.height + allowance)
                if placement is None:
                    carried.append(panel)
                    continue
                placed.append(
                    PlacedPanel(
                        x=placement.x,
                        y=placement.y,
                        width=placement.width,
                        height=placement.height,
                        source_width=panel.width,
                        source_height=panel.height,
                        source_index=panel.source_index,
                        source_label=panel.source_label,
                        rotated=placement.rotated,
                    )
                )

            if not placed:
                # Unreachable after the pre-check; stop instead of looping.
                logger.error(
                    "No panel placed on a fresh %s sheet with %d remaining",
                    stock.label,
                    len(carried),
                )
                return PackingResult.infeasible()

            layout = SheetLayout(
                stock_width=stock.width,
                stock_height=stock.height,
                placed_panels=tuple(placed),
                sheet_index=len(layouts),
            )
            layouts.append(layout)
            logger.debug(
                "Sheet %d (%s): %d panels, %.1f%% waste",
                layout.sheet_index,
                stock.label,
                layout.panel_count,
                layout.waste_percentage,
            )
            remaining = carried

        return PackingResult(sheet_count=len(layouts), layouts=tuple(layouts))
