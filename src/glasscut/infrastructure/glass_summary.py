"""Billable quantities and cost for a glass stock allocation."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from glasscut.domain.value_objects import (
    SQUARE_INCHES_PER_SQUARE_FOOT,
    GlassType,
    Panel,
)
from glasscut.infrastructure.bin_packing import SheetLayout
from glasscut.infrastructure.stock_selection import StockAllocation

logger = logging.getLogger(__name__)

UNFITTABLE_ITEM_NAME = "Unfittable Glass Panel"


@dataclass(frozen=True)
class GlassLineItem:
    """One stock size (or failure) line of a glass order.

    Attributes:
        name: Line item name shown on the inventory.
        size: Stock label or failure label.
        quantity: Billable sheets.
        physical_sheets: Sheets actually cut.
        unit_price: Price per sheet.
        total_cost: quantity x unit_price.
        notes: Packing notes joined for display.
        layouts: Sheet layouts for cutting diagrams.
        is_error: True for failure lines, which always carry zero cost.
        panel_count: Panels covered by this line.
    """

    name: str
    size: str
    quantity: int
    physical_sheets: int
    unit_price: float
    total_cost: float
    notes: str
    layouts: tuple[SheetLayout, ...] = ()
    is_error: bool = False
    panel_count: int = 0


@dataclass(frozen=True)
class GlassSummary:
    """Glass portion of an inventory.

    Attributes:
        line_items: Line items in allocation order.
        price_per_sqft: Price used for costing.
        total_square_footage: Net glass area of all input panels.
    """

    line_items: tuple[GlassLineItem, ...]
    price_per_sqft: float = 0.0
    total_square_footage: float = 0.0

    @property
    def total_cost(self) -> float:
        return sum(item.total_cost for item in self.line_items)

    @property
    def total_sheets(self) -> int:
        return sum(item.physical_sheets for item in self.line_items)

    @property
    def errors(self) -> list[GlassLineItem]:
        return [item for item in self.line_items if item.is_error]

    @property
    def has_errors(self) -> bool:
        return any(item.is_error for item in self.line_items)

    @property
    def layouts(self) -> tuple[SheetLayout, ...]:
        return tuple(layout for item in self.line_items for layout in item.layouts)


class GlassSummarizer:
    """Turns a stock allocation into priced line items.

    Attributes:
        glass_type: Glass type used in line item names.
        price_per_sqft: Price of stock glass per square foot.
    """

    def __init__(
        self,
        glass_type: str | GlassType | None = None,
        price_per_sqft: float = 0.0,
    ) -> None:
        if price_per_sqft < 0:
            raise ValueError("Price per square foot must be non-negative")
        if isinstance(glass_type, str):
            glass_type = GlassType.parse(glass_type)
        self.glass_type = glass_type
        self.price_per_sqft = price_per_sqft

    @property
    def sheet_name(self) -> str:
        if self.glass_type is None:
            return "Stock Glass Sheet"
        return f"Stock Glass Sheet ({self.glass_type.display_name})"

    def summarize(
        self,
        allocation: StockAllocation,
        panels: Sequence[Panel] = (),
    ) -> GlassSummary:
        """Price each bucket of an allocation.

        Args:
            allocation: Result of a stock selection run.
            panels: Input panels, used for total square footage.

        Returns:
            GlassSummary with failure buckets kept as zero-cost lines.
        """
        items: list[GlassLineItem] = []
        prefix = "Optimized. " if allocation.optimized else ""

        for bucket in allocation:
            notes = "; ".join(bucket.notes)
            if bucket.is_error or bucket.stock is None:
                items.append(
                    GlassLineItem(
                        name=UNFITTABLE_ITEM_NAME,
                        size=bucket.label,
                        quantity=0,
                        physical_sheets=0,
                        unit_price=0.0,
                        total_cost=0.0,
                        notes=notes,
                        is_error=True,
                        panel_count=bucket.panel_count,
                    )
                )
                continue

            unit_price = bucket.stock.area_sqft * self.price_per_sqft
            items.append(
                GlassLineItem(
                    name=self.sheet_name,
                    size=bucket.label,
                    quantity=bucket.sheet_count,
                    physical_sheets=bucket.sheet_count,
                    unit_price=unit_price,
                    total_cost=bucket.sheet_count * unit_price,
                    notes=f"{prefix}Details: {notes}",
                    layouts=tuple(bucket.layouts),
                    panel_count=bucket.panel_count,
                )
            )

        square_footage = sum(p.area for p in panels) / SQUARE_INCHES_PER_SQUARE_FOOT
        summary = GlassSummary(
            line_items=tuple(items),
            price_per_sqft=self.price_per_sqft,
            total_square_footage=square_footage,
        )
        logger.info(
            "Glass summary: %d sheets, %.2f total cost, %d error line(s)",
            summary.total_sheets,
            summary.total_cost,
            len(summary.errors),
        )
        return summary
