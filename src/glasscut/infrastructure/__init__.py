"""Infrastructure layer: packing engine, costing and output rendering."""

from glasscut.infrastructure.bin_packing import (
    DEFAULT_CUTTING_ALLOWANCE,
    FreeRectangle,
    MaxRectsPacker,
    PackingConfig,
    PackingResult,
    PlacedPanel,
    Placement,
    SheetFillingDriver,
    SheetLayout,
)
from glasscut.infrastructure.cut_diagram_renderer import CutDiagramRenderer
from glasscut.infrastructure.formatters import (
    GlassSummaryFormatter,
    JsonExporter,
    PanelCutFormatter,
)
from glasscut.infrastructure.glass_summary import (
    GlassLineItem,
    GlassSummarizer,
    GlassSummary,
)
from glasscut.infrastructure.stock_selection import (
    OPTIMIZE,
    StockAllocation,
    StockBucket,
    StockSelector,
)

__all__ = [
    "CutDiagramRenderer",
    "DEFAULT_CUTTING_ALLOWANCE",
    "FreeRectangle",
    "GlassLineItem",
    "GlassSummarizer",
    "GlassSummary",
    "GlassSummaryFormatter",
    "JsonExporter",
    "MaxRectsPacker",
    "OPTIMIZE",
    "PackingConfig",
    "PackingResult",
    "PanelCutFormatter",
    "PlacedPanel",
    "Placement",
    "SheetFillingDriver",
    "SheetLayout",
    "StockAllocation",
    "StockBucket",
    "StockSelector",
]
