"""API routers for the REST API."""

from glasscut.web.routers.optimize import router as optimize_router
from glasscut.web.routers.stock import router as stock_router
from glasscut.web.routers.validate import router as validate_router

__all__ = [
    "optimize_router",
    "stock_router",
    "validate_router",
]
