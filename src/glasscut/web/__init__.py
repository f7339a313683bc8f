"""FastAPI REST API for glass cut optimization.

Usage:
    uvicorn glasscut.web:app --reload
"""

from glasscut.web.app import app, create_app

__all__ = ["app", "create_app"]
