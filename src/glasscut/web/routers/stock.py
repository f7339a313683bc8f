"""Stock catalog endpoint."""

from fastapi import APIRouter, HTTPException, Query

from glasscut.domain.stock_catalog import get_available_stock
from glasscut.web.schemas.responses import StockListSchema, StockSizeSchema

router = APIRouter(prefix="/stock", tags=["stock"])


@router.get("", response_model=StockListSchema)
async def list_stock(
    glass_type: str = Query(..., description="Glass type, e.g. Clear-1/4"),
) -> StockListSchema:
    """List stock sheet sizes for a glass type, smallest first."""
    try:
        sizes = get_available_stock(glass_type)
    except ValueError as e:
        raise HTTPException(
            status_code=422,
            detail={"error": str(e), "error_type": "glass_type"},
        ) from e

    return StockListSchema(
        glass_type=glass_type,
        sizes=[
            StockSizeSchema(
                label=size.label,
                width=size.width,
                height=size.height,
                area_sqft=size.area_sqft,
            )
            for size in sizes
        ],
    )
