"""Application commands (use cases) for glass optimization."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from glasscut.application.config import (
    GlassJobConfiguration,
    config_to_packing,
    config_to_panels,
)
from glasscut.domain.value_objects import Panel
from glasscut.infrastructure.bin_packing import PackingConfig
from glasscut.infrastructure.glass_summary import GlassSummarizer, GlassSummary
from glasscut.infrastructure.stock_selection import (
    OPTIMIZE,
    StockAllocation,
    StockSelector,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OptimizeOutput:
    """Result of one optimization run.

    Attributes:
        panels: Panels that were packed.
        allocation: Per-stock-size packing, including failure buckets.
        summary: Priced glass line items.
    """

    panels: tuple[Panel, ...]
    allocation: StockAllocation
    summary: GlassSummary

    @property
    def is_valid(self) -> bool:
        """False when any panel ended up in a failure bucket."""
        return not self.summary.has_errors


class OptimizeGlassCommand:
    """Packs a panel list and prices the resulting stock sheets."""

    def execute(
        self,
        panels: Sequence[Panel],
        stock: str = OPTIMIZE,
        glass_type: str = "Clear-1/4",
        price_per_sqft: float = 0.0,
        packing_config: PackingConfig | None = None,
    ) -> OptimizeOutput:
        """Run stock selection, packing and costing.

        Args:
            panels: Panels to cut.
            stock: ``"optimize"`` or a ``"WxH"`` stock size.
            glass_type: Glass type for the stock catalog and line item names.
            price_per_sqft: Stock glass price per square foot.
            packing_config: Packing options; defaults to 1/8" allowance.

        Returns:
            OptimizeOutput; packing failures are reported in the summary.
        """
        selector = StockSelector(packing_config)
        allocation = selector.select(panels, stock, glass_type)
        summary = GlassSummarizer(glass_type, price_per_sqft).summarize(allocation, panels)

        logger.info(
            "Optimized %d panels of %s (%s): %d sheets",
            len(panels),
            glass_type,
            stock,
            summary.total_sheets,
        )
        return OptimizeOutput(panels=tuple(panels), allocation=allocation, summary=summary)

    def execute_config(self, config: GlassJobConfiguration) -> OptimizeOutput:
        """Run a job described by a configuration file."""
        return self.execute(
            panels=config_to_panels(config),
            stock=config.stock,
            glass_type=config.glass_type,
            price_per_sqft=config.price_per_sqft,
            packing_config=config_to_packing(config.packing),
        )
