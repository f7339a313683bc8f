"""Stock selection for glass packing runs.

Routes panels to stock sizes, either a single size chosen by the user or
the catalog for the glass type tried smallest first, and records the
packing of each stock size in a ``StockAllocation``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, Sequence

from glasscut.domain.stock_catalog import get_available_stock
from glasscut.domain.value_objects import GlassType, Panel, StockSize
from glasscut.infrastructure.bin_packing import (
    PackingConfig,
    SheetFillingDriver,
    SheetLayout,
)

logger = logging.getLogger(__name__)

OPTIMIZE = "optimize"

INVALID_STOCK_LABEL = "Invalid Stock"
PACKING_FAILED_LABEL = "Packing Failed"
OPTIMIZATION_FAILED_LABEL = "Optimization Failed"
UNFITTABLE_LABEL = "Unfittable Panels"


@dataclass
class StockBucket:
    """Accumulated packing for one stock size, or a failure entry.

    Attributes:
        label: Stock label (``48" x 72"``) or failure label.
        stock: The stock size; None for failure buckets.
        sheet_count: Physical sheets needed.
        layouts: Sheet layouts in the order they were packed.
        notes: Human-readable notes, one per packing pass or failure.
        panel_count: Panels routed to this bucket.
        is_error: True for failure buckets.
        panels: Panels routed here (for failure buckets, the affected ones).
    """

    label: str
    stock: StockSize | None = None
    sheet_count: int = 0
    layouts: list[SheetLayout] = field(default_factory=list)
    notes: list[str] = field(default_factory=list)
    panel_count: int = 0
    is_error: bool = False
    panels: list[Panel] = field(default_factory=list)


class StockAllocation:
    """Ordered mapping of bucket label to ``StockBucket`` for one run."""

    def __init__(self, optimized: bool = False) -> None:
        self.optimized = optimized
        self._buckets: dict[str, StockBucket] = {}

    def __iter__(self) -> Iterator[StockBucket]:
        return iter(self._buckets.values())

    def __len__(self) -> int:
        return len(self._buckets)

    def __contains__(self, label: object) -> bool:
        return label in self._buckets

    def __getitem__(self, label: str) -> StockBucket:
        return self._buckets[label]

    @property
    def labels(self) -> list[str]:
        return list(self._buckets)

    @property
    def has_errors(self) -> bool:
        return any(bucket.is_error for bucket in self)

    def add_packing(
        self,
        stock: StockSize,
        panels: Sequence[Panel],
        sheet_count: int,
        layouts: Sequence[SheetLayout],
    ) -> StockBucket:
        """Accumulate a successful packing under the stock's label."""
        bucket = self._buckets.get(stock.label)
        if bucket is None:
            bucket = StockBucket(label=stock.label, stock=stock)
            self._buckets[stock.label] = bucket
        bucket.notes.append(f"Packed {len(panels)} panels onto {sheet_count} sheets.")
        bucket.sheet_count += sheet_count
        bucket.layouts.extend(layouts)
        bucket.panel_count += len(panels)
        bucket.panels.extend(panels)
        return bucket

    def add_failure(
        self,
        label: str,
        message: str,
        panels: Sequence[Panel] = (),
    ) -> StockBucket:
        """Record a zero-quantity failure bucket."""
        bucket = StockBucket(
            label=label,
            notes=[f"Error: {message}"],
            panel_count=len(panels),
            is_error=True,
            panels=list(panels),
        )
        self._buckets[label] = bucket
        logger.warning("%s: %s", label, message)
        return bucket


def _describe_panels(panels: Sequence[Panel]) -> str:
    return ", ".join(
        f'{p.display_name} ({p.width:g}" x {p.height:g}")' for p in panels
    )


class StockSelector:
    """Chooses stock sizes for a panel set and runs the sheet-filling driver.

    Attributes:
        config: Packing configuration.
        driver: Driver used for each stock size.
    """

    def __init__(self, config: PackingConfig | None = None) -> None:
        self.config = config or PackingConfig()
        self.driver = SheetFillingDriver(self.config)

    def select(
        self,
        panels: Sequence[Panel],
        selection: str,
        glass_type: str | GlassType | None = None,
    ) -> StockAllocation:
        """Dispatch on a selection string.

        Args:
            panels: Panels to pack.
            selection: ``"optimize"`` or a ``"WxH"`` stock size.
            glass_type: Glass type whose catalog is used when optimizing.

        Returns:
            Allocation for this run. A malformed selection yields a single
            ``Invalid Stock`` failure bucket.
        """
        if selection.strip().lower() == OPTIMIZE:
            candidates: Sequence[StockSize] = ()
            if glass_type is not None:
                candidates = get_available_stock(glass_type)
            return self.select_optimized(panels, candidates)

        try:
            stock = StockSize.parse(selection)
        except ValueError:
            allocation = StockAllocation()
            if panels:
                allocation.add_failure(INVALID_STOCK_LABEL, "Invalid stock size selected.")
            return allocation
        return self.select_fixed(panels, stock)

    def select_fixed(self, panels: Sequence[Panel], stock: StockSize) -> StockAllocation:
        """Pack every panel on one stock size."""
        allocation = StockAllocation()
        if not panels:
            return allocation

        result = self.driver.pack(panels, stock)
        if not result.is_feasible:
            too_large = [p for p in panels if not self.driver.fits_stock(p, stock)]
            message = f'Some panels are too large for the selected {stock.width:g}"x{stock.height:g}" stock.'
            if too_large:
                message += f" Affected: {_describe_panels(too_large)}."
            allocation.add_failure(PACKING_FAILED_LABEL, message, too_large or panels)
            return allocation

        allocation.add_packing(stock, panels, int(result.sheet_count), result.layouts)
        logger.info(
            "Packed %d panels onto %d %s sheets",
            len(panels),
            result.sheet_count,
            stock.label,
        )
        return allocation

    def select_optimized(
        self,
        panels: Sequence[Panel],
        candidates: Sequence[StockSize],
    ) -> StockAllocation:
        """Route each panel to the first candidate stock size it fits.

        Candidates are used in the order given, which the catalog keeps
        ascending by area. Each stock size is packed independently.
        """
        allocation = StockAllocation(optimized=True)
        if not panels:
            return allocation
        if not candidates:
            allocation.add_failure(
                OPTIMIZATION_FAILED_LABEL, "No available stock for this glass type."
            )
            return allocation

        pool = list(panels)
        for stock in candidates:
            if not pool:
                break
            fitting = [p for p in pool if self.driver.fits_stock(p, stock)]
            pool = [p for p in pool if not self.driver.fits_stock(p, stock)]
            if not fitting:
                continue

            result = self.driver.pack(fitting, stock)
            if result.is_feasible and result.sheet_count > 0:
                allocation.add_packing(stock, fitting, int(result.sheet_count), result.layouts)
                logger.debug(
                    "Stock %s: %d panels -> %d sheets",
                    stock.label,
                    len(fitting),
                    result.sheet_count,
                )
            else:
                pool.extend(fitting)

        if pool:
            allocation.add_failure(
                UNFITTABLE_LABEL,
                f"{len(pool)} panel(s) are too large for any available stock.",
                pool,
            )

        logger.info(
            "Optimized %d panels across %d stock sizes",
            len(panels),
            sum(1 for bucket in allocation if not bucket.is_error),
        )
        return allocation
