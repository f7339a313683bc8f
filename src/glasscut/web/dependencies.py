"""FastAPI dependency injection for glass services."""

from typing import Annotated

from fastapi import Depends

from glasscut.application.commands import OptimizeGlassCommand


def get_optimize_command() -> OptimizeGlassCommand:
    """Dependency for OptimizeGlassCommand."""
    return OptimizeGlassCommand()


OptimizeCommandDep = Annotated[OptimizeGlassCommand, Depends(get_optimize_command)]
