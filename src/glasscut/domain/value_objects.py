"""Immutable value objects for glass panels and stock sheets."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

SQUARE_INCHES_PER_SQUARE_FOOT = 144.0

_STOCK_PATTERN = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*[xX]\s*(\d+(?:\.\d+)?)\s*$")


class GlassFinish(str, Enum):
    """Glass finishes carried by suppliers."""

    CLEAR = "Clear"
    ORDINARY_BRONZE = "Ordinary Bronze"
    REFLECTIVE_DARK_BRONZE = "Reflective Dark Bronze"
    REFLECTIVE_LIGHT_BRONZE = "Reflective Light Bronze"
    REFLECTIVE_BLUE = "Reflective Blue"
    REFLECTIVE_GREEN = "Reflective Green"
    REFLECTIVE_BLACK = "Reflective Black"
    DARK_GREY = "Dark Grey"
    DARK_BLACK = "Dark Black"
    SMOKED = "Smoked"
    MIRROR = "Mirror"


class GlassThickness(str, Enum):
    """Nominal glass thicknesses in inches."""

    EIGHTH = "1/8"
    THREE_SIXTEENTHS = "3/16"
    QUARTER = "1/4"


def _format_inches(value: float) -> str:
    """Render a dimension without a trailing .0 for whole inches."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"


@dataclass(frozen=True)
class GlassType:
    """A glass finish and thickness combination, e.g. ``Clear-1/4``.

    Attributes:
        finish: Raw finish name. Unknown finishes are allowed so that
            catalogs from new suppliers still resolve to the general stock.
        thickness: Raw thickness string.
    """

    finish: str
    thickness: str

    @classmethod
    def parse(cls, value: str) -> GlassType:
        """Parse a ``<finish>-<thickness>`` string.

        Raises:
            ValueError: If the string has no ``-`` separator.
        """
        finish, sep, thickness = value.partition("-")
        if not sep or not finish.strip() or not thickness.strip():
            raise ValueError(
                f"Glass type must look like '<finish>-<thickness>', got {value!r}"
            )
        return cls(finish=finish.strip(), thickness=thickness.strip())

    @property
    def display_name(self) -> str:
        return f"{self.finish} {self.thickness}"

    def __str__(self) -> str:
        return f"{self.finish}-{self.thickness}"


@dataclass(frozen=True)
class Panel:
    """A rectangular glass panel to be cut from stock.

    Dimensions are the finished cut size in inches, before any cutting
    allowance is added.

    Attributes:
        width: Panel width in inches.
        height: Panel height in inches.
        source_index: Index of the window the panel belongs to.
        source_label: Optional human-readable label for that window.
    """

    width: float
    height: float
    source_index: int = 0
    source_label: str | None = None

    def __post_init__(self) -> None:
        if not self.width > 0:
            raise ValueError("Panel width must be positive")
        if not self.height > 0:
            raise ValueError("Panel height must be positive")

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def longest_side(self) -> float:
        return max(self.width, self.height)

    @property
    def display_name(self) -> str:
        """Label used in diagnostics, falling back to the window index."""
        return self.source_label or f"#{self.source_index}"


@dataclass(frozen=True)
class StockSize:
    """A stock sheet size offered for a glass type.

    Attributes:
        width: Sheet width in inches.
        height: Sheet height in inches.
    """

    width: float
    height: float

    def __post_init__(self) -> None:
        if not self.width > 0:
            raise ValueError("Stock width must be positive")
        if not self.height > 0:
            raise ValueError("Stock height must be positive")

    @classmethod
    def parse(cls, value: str) -> StockSize:
        """Parse a selection string such as ``"48x72"``.

        Raises:
            ValueError: If the string is not two positive numbers joined by x.
        """
        match = _STOCK_PATTERN.match(value)
        if match is None:
            raise ValueError(f"Invalid stock size: {value!r}")
        return cls(width=float(match.group(1)), height=float(match.group(2)))

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def area_sqft(self) -> float:
        return self.area / SQUARE_INCHES_PER_SQUARE_FOOT

    @property
    def label(self) -> str:
        """Bucket label, e.g. ``48" x 72"``."""
        return f'{_format_inches(self.width)}" x {_format_inches(self.height)}"'

    def fits(self, width: float, height: float) -> bool:
        """Check whether a rectangle fits in either orientation."""
        return (width <= self.width and height <= self.height) or (
            height <= self.width and width <= self.height
        )
