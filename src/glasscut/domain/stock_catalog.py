"""Stock sheet catalog per glass type.

Each list is ordered by area ascending so that automatic stock selection
tries smaller (cheaper) sheets first.
"""

from __future__ import annotations

import logging

from glasscut.domain.value_objects import (
    GlassFinish,
    GlassThickness,
    GlassType,
    StockSize,
)

logger = logging.getLogger(__name__)

GENERAL_STOCK: tuple[StockSize, ...] = (
    StockSize(48, 72),  # 3456 sq in
    StockSize(48, 84),  # 4032 sq in
    StockSize(48, 96),  # 4608 sq in
    StockSize(60, 84),  # 5040 sq in
    StockSize(65, 84),  # 5460 sq in
    StockSize(72, 96),  # 6912 sq in
)

THREE_SIXTEENTHS_STOCK: tuple[StockSize, ...] = (StockSize(48, 72),)
MIRROR_STOCK: tuple[StockSize, ...] = (StockSize(48, 72), StockSize(48, 84))
EIGHTH_STOCK: tuple[StockSize, ...] = (StockSize(48, 72),)


def get_available_stock(glass_type: str | GlassType) -> tuple[StockSize, ...]:
    """Return the stock sizes offered for a glass type.

    Thickness rules take precedence over finish: 3/16" glass only comes in
    one size regardless of finish.

    Args:
        glass_type: A ``GlassType`` or a ``"<finish>-<thickness>"`` string.

    Returns:
        Stock sizes sorted by area ascending.
    """
    if isinstance(glass_type, str):
        glass_type = GlassType.parse(glass_type)

    if glass_type.thickness == GlassThickness.THREE_SIXTEENTHS.value:
        stock = THREE_SIXTEENTHS_STOCK
    elif glass_type.finish == GlassFinish.MIRROR.value:
        stock = MIRROR_STOCK
    elif glass_type.thickness == GlassThickness.EIGHTH.value:
        stock = EIGHTH_STOCK
    else:
        stock = GENERAL_STOCK

    logger.debug("Glass type %s: %d stock sizes", glass_type, len(stock))
    return stock
