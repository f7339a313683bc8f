"""Pydantic schemas for the REST API."""

from glasscut.web.schemas.requests import ConfigValidateRequest, OptimizeRequest
from glasscut.web.schemas.responses import (
    ErrorResponseSchema,
    GlassLineItemSchema,
    OptimizeResponseSchema,
    PlacedPanelSchema,
    SheetLayoutSchema,
    StockListSchema,
    StockSizeSchema,
    ValidationResultSchema,
)

__all__ = [
    # Requests
    "ConfigValidateRequest",
    "OptimizeRequest",
    # Responses
    "ErrorResponseSchema",
    "GlassLineItemSchema",
    "OptimizeResponseSchema",
    "PlacedPanelSchema",
    "SheetLayoutSchema",
    "StockListSchema",
    "StockSizeSchema",
    "ValidationResultSchema",
]
