"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class OptimizeRequest(BaseModel):
    """Request for optimizing a glass job."""

    config: dict[str, Any] = Field(..., description="Glass job configuration JSON")


class ConfigValidateRequest(BaseModel):
    """Request for validating a glass job."""

    config: dict[str, Any] = Field(..., description="Glass job configuration JSON")
