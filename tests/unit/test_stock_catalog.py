"""Tests for the per-glass-type stock catalog."""

from __future__ import annotations

import pytest

from glasscut.domain.stock_catalog import (
    GENERAL_STOCK,
    MIRROR_STOCK,
    get_available_stock,
)
from glasscut.domain.value_objects import GlassType, StockSize


class TestGetAvailableStock:
    """Tests for stock lookup rules."""

    def test_general_stock_for_clear_quarter(self) -> None:
        """Clear 1/4 uses the general list."""
        assert get_available_stock("Clear-1/4") == GENERAL_STOCK

    @pytest.mark.parametrize("glass_type", ["Clear-3/16", "Mirror-3/16", "Smoked-3/16"])
    def test_three_sixteenths_only_one_size(self, glass_type: str) -> None:
        """3/16 glass comes only in 48\"x72\", even for mirror."""
        assert get_available_stock(glass_type) == (StockSize(48, 72),)

    def test_mirror_stock(self) -> None:
        """Mirror glass has two sizes."""
        assert get_available_stock("Mirror-1/4") == MIRROR_STOCK
        assert [s.label for s in MIRROR_STOCK] == ['48" x 72"', '48" x 84"']

    def test_eighth_stock(self) -> None:
        """1/8 glass comes only in 48\"x72\"."""
        assert get_available_stock("Dark Grey-1/8") == (StockSize(48, 72),)

    def test_unknown_finish_uses_general_stock(self) -> None:
        """Unrecognized finishes fall back to the general list."""
        assert get_available_stock(GlassType("Frosted", "1/4")) == GENERAL_STOCK

    def test_lists_sorted_by_area(self) -> None:
        """Catalog lists are ordered smallest area first."""
        areas = [s.area for s in GENERAL_STOCK]
        assert areas == sorted(areas)

    def test_invalid_glass_type_raises(self) -> None:
        """A glass type string without a dash raises ValueError."""
        with pytest.raises(ValueError):
            get_available_stock("Clear")
