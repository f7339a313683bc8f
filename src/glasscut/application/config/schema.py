"""Pydantic models for glass job configuration files.

A job file describes the glass type, the stock selection, pricing and the
panel cut list for one packing run.
"""

from typing import Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
)

from glasscut.domain.value_objects import GlassType
from glasscut.infrastructure.bin_packing import DEFAULT_CUTTING_ALLOWANCE

# Version 1.0: Initial schema with panels, stock selection and pricing
# Version 1.1: Added output configuration
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0", "1.1"})


class PanelConfig(BaseModel):
    """One entry of the panel cut list.

    Attributes:
        width: Finished panel width in inches.
        height: Finished panel height in inches.
        quantity: Number of identical panels.
        label: Window label shown on diagrams.
        window: Window index; defaults to the entry's 1-based position.
    """

    model_config = ConfigDict(extra="forbid")

    width: float = Field(..., gt=0, le=480)
    height: float = Field(..., gt=0, le=480)
    quantity: int = Field(default=1, ge=1, le=500)
    label: str | None = Field(default=None, max_length=100)
    window: int | None = Field(default=None, ge=0)


class PackingConfigSchema(BaseModel):
    """Packing options."""

    model_config = ConfigDict(extra="forbid")

    cutting_allowance: float = Field(
        default=DEFAULT_CUTTING_ALLOWANCE,
        ge=0,
        le=0.5,
        description="Kerf added to panel width and height in inches",
    )


class OutputConfigSchema(BaseModel):
    """Output options for the CLI.

    Attributes:
        format: Report format.
        svg_scale: Pixels per inch for SVG cut diagrams.
    """

    model_config = ConfigDict(extra="forbid")

    format: Literal["text", "json", "svg", "ascii"] = "text"
    svg_scale: float = Field(default=5.0, gt=0, le=50)


class GlassJobConfiguration(BaseModel):
    """Root model of a glass job file.

    ``stock`` is kept as free text: an unrecognized size is reported as an
    ``Invalid Stock`` line rather than rejected at load time.

    Example:
        >>> config = GlassJobConfiguration(
        ...     schema_version="1.0",
        ...     glass_type="Clear-1/4",
        ...     panels=[PanelConfig(width=20, height=30)],
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    glass_type: str = Field(default="Clear-1/4")
    stock: str = Field(default="optimize", description="'optimize' or 'WxH'")
    price_per_sqft: float = Field(default=0.0, ge=0)
    packing: PackingConfigSchema = Field(default_factory=PackingConfigSchema)
    panels: list[PanelConfig] = Field(default_factory=list)
    output: OutputConfigSchema = Field(default_factory=OutputConfigSchema)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Accept supported versions and newer minors of a supported major."""
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )

    @field_validator("glass_type")
    @classmethod
    def validate_glass_type(cls, v: str) -> str:
        GlassType.parse(v)
        return v
