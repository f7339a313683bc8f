"""Conversion of job configuration models into domain objects."""

from __future__ import annotations

from glasscut.application.config.schema import (
    GlassJobConfiguration,
    PackingConfigSchema,
    PanelConfig,
)
from glasscut.domain.value_objects import Panel
from glasscut.infrastructure.bin_packing import PackingConfig


def expand_panel(entry: PanelConfig, window: int) -> list[Panel]:
    """Expand one cut-list entry into individual panels.

    With quantity > 1 each panel's label gets a ``#n`` suffix so it can be
    told apart on cutting diagrams.
    """
    base_label = entry.label or f"Window {window}"
    if entry.quantity == 1:
        return [Panel(entry.width, entry.height, window, entry.label)]
    return [
        Panel(entry.width, entry.height, window, f"{base_label} #{i + 1}")
        for i in range(entry.quantity)
    ]


def config_to_panels(config: GlassJobConfiguration) -> list[Panel]:
    """Build the panel list, numbering windows from 1 when not given."""
    panels: list[Panel] = []
    for position, entry in enumerate(config.panels, start=1):
        window = entry.window if entry.window is not None else position
        panels.extend(expand_panel(entry, window))
    return panels


def config_to_packing(schema: PackingConfigSchema) -> PackingConfig:
    return PackingConfig(cutting_allowance=schema.cutting_allowance)
