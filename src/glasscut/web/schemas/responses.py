"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class PlacedPanelSchema(BaseModel):
    """Panel position on a sheet."""

    x: float = Field(..., description="Left edge in inches")
    y: float = Field(..., description="Top edge in inches")
    width: float = Field(..., description="Placed width including allowance")
    height: float = Field(..., description="Placed height including allowance")
    source_width: float = Field(..., description="Panel width as ordered")
    source_height: float = Field(..., description="Panel height as ordered")
    source_index: int = Field(..., description="Window index")
    source_label: str | None = Field(default=None, description="Window label")
    rotated: bool = Field(default=False, description="Turned 90 degrees")


class SheetLayoutSchema(BaseModel):
    """Packing of one stock sheet."""

    sheet_index: int
    stock_width: float
    stock_height: float
    waste_percentage: float
    placed_panels: list[PlacedPanelSchema] = Field(default_factory=list)


class GlassLineItemSchema(BaseModel):
    """One stock size or failure line."""

    name: str
    size: str
    quantity: int
    physical_sheets: int
    unit_price: float
    total_cost: float
    notes: str
    is_error: bool = False
    panel_count: int = 0
    layouts: list[SheetLayoutSchema] = Field(default_factory=list)


class OptimizeResponseSchema(BaseModel):
    """Response for glass optimization."""

    is_valid: bool = Field(..., description="False if any panel could not be packed")
    price_per_sqft: float
    total_cost: float
    total_sheets: int
    total_square_footage: float
    line_items: list[GlassLineItemSchema] = Field(default_factory=list)


class StockSizeSchema(BaseModel):
    """A stock sheet size."""

    label: str
    width: float
    height: float
    area_sqft: float


class StockListSchema(BaseModel):
    """Stock sizes for a glass type, smallest first."""

    glass_type: str
    sizes: list[StockSizeSchema] = Field(default_factory=list)


class ValidationResultSchema(BaseModel):
    """Response for job validation."""

    is_valid: bool = Field(..., description="Whether the job is valid")
    panel_count: int = Field(default=0, description="Panels after quantity expansion")
    errors: list[dict[str, Any]] = Field(default_factory=list)


class ErrorResponseSchema(BaseModel):
    """Error response body."""

    error: str
    error_type: str
    details: Any = None
