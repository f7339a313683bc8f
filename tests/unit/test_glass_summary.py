"""Tests for GlassSummarizer pricing."""

from __future__ import annotations

import pytest

from glasscut.domain.value_objects import Panel, StockSize
from glasscut.infrastructure.glass_summary import UNFITTABLE_ITEM_NAME, GlassSummarizer
from glasscut.infrastructure.stock_selection import (
    UNFITTABLE_LABEL,
    StockAllocation,
    StockSelector,
)


class TestGlassSummarizer:
    """Tests for line items and costs."""

    def test_prices_by_sheet_area(self, three_panels: list[Panel]) -> None:
        """Unit price is sheet area in square feet times price."""
        allocation = StockSelector().select(three_panels, "48x72")
        summary = GlassSummarizer("Clear-1/4", price_per_sqft=10.0).summarize(
            allocation, three_panels
        )

        item = summary.line_items[0]
        assert item.name == "Stock Glass Sheet (Clear 1/4)"
        assert item.size == '48" x 72"'
        assert item.quantity == 1
        assert item.unit_price == pytest.approx(240.0)
        assert item.total_cost == pytest.approx(240.0)
        assert item.notes == "Details: Packed 3 panels onto 1 sheets."
        assert len(item.layouts) == 1
        assert summary.total_square_footage == pytest.approx(1800 / 144)

    def test_optimized_notes_prefix(self, three_panels: list[Panel]) -> None:
        """Optimize-mode notes begin with 'Optimized.'."""
        allocation = StockSelector().select(three_panels, "optimize", "Clear-1/4")
        summary = GlassSummarizer("Clear-1/4").summarize(allocation, three_panels)
        assert summary.line_items[0].notes.startswith("Optimized. Details: ")

    def test_error_lines_carry_zero_cost(self) -> None:
        """Failure buckets become zero-cost error lines."""
        allocation = StockAllocation(optimized=True)
        allocation.add_packing(StockSize(48, 72), [Panel(10, 10, 1)], 1, [])
        allocation.add_failure(UNFITTABLE_LABEL, "1 panel(s) are too large for any available stock.")

        summary = GlassSummarizer(price_per_sqft=5.0).summarize(allocation)

        assert summary.has_errors
        error = summary.errors[0]
        assert error.name == UNFITTABLE_ITEM_NAME
        assert error.size == UNFITTABLE_LABEL
        assert error.total_cost == 0.0
        assert error.quantity == 0
        assert summary.total_cost == pytest.approx(120.0)
        assert summary.total_sheets == 1

    def test_generic_name_without_glass_type(self) -> None:
        """Without a glass type the sheet name is generic."""
        assert GlassSummarizer().sheet_name == "Stock Glass Sheet"

    def test_negative_price_raises(self) -> None:
        """Negative prices are rejected."""
        with pytest.raises(ValueError, match="non-negative"):
            GlassSummarizer(price_per_sqft=-1)

    def test_empty_allocation(self) -> None:
        """An empty allocation gives an empty summary."""
        summary = GlassSummarizer().summarize(StockAllocation())
        assert summary.line_items == ()
        assert summary.total_cost == 0
        assert not summary.has_errors
