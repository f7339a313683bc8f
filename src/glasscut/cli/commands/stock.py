"""Stock command listing the sheet sizes offered for a glass type."""

from typing import Annotated

import typer

from glasscut.domain.stock_catalog import get_available_stock


def stock_command(
    glass_type: Annotated[
        str,
        typer.Argument(help="Glass type as <finish>-<thickness>, e.g. Clear-1/4"),
    ],
) -> None:
    """List available stock sheet sizes, smallest first."""
    try:
        sizes = get_available_stock(glass_type)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Stock sizes for {glass_type}:")
    for size in sizes:
        typer.echo(f"  {size.label:<14} {size.area:>7.0f} sq in  {size.area_sqft:>6.2f} sq ft")
