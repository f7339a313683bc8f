"""Application layer: use cases and job configuration."""

from glasscut.application.commands import OptimizeGlassCommand, OptimizeOutput

__all__ = ["OptimizeGlassCommand", "OptimizeOutput"]
