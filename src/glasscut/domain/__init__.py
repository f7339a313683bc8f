"""Domain layer: glass panels, stock sizes and the stock catalog."""

from glasscut.domain.stock_catalog import GENERAL_STOCK, get_available_stock
from glasscut.domain.value_objects import (
    GlassFinish,
    GlassThickness,
    GlassType,
    Panel,
    StockSize,
)

__all__ = [
    "GENERAL_STOCK",
    "GlassFinish",
    "GlassThickness",
    "GlassType",
    "Panel",
    "StockSize",
    "get_available_stock",
]
