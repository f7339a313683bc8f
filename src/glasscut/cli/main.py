"""Typer CLI for glass cut optimization."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from glasscut.application import OptimizeGlassCommand, OptimizeOutput
from glasscut.application.config import (
    ConfigError,
    config_to_packing,
    config_to_panels,
    load_config,
)
from glasscut.cli.commands import stock_command, validate_command
from glasscut.domain.value_objects import Panel, StockSize
from glasscut.infrastructure import (
    CutDiagramRenderer,
    GlassSummaryFormatter,
    JsonExporter,
    PackingConfig,
    PanelCutFormatter,
)

OUTPUT_FORMATS = ("text", "json", "svg", "ascii")

app = typer.Typer(
    name="glasscut",
    help="Pack glass panel cut lists onto stock sheets and price the order.",
)

app.command(name="validate")(validate_command)
app.command(name="stock")(stock_command)


def _parse_panel_option(value: str, window: int) -> Panel:
    """Parse ``WxH`` or ``WxH:label`` from the command line."""
    size, _, label = value.partition(":")
    try:
        dims = StockSize.parse(size)
    except ValueError as e:
        raise ValueError(f"Invalid panel {value!r}: expected WxH or WxH:label") from e
    return Panel(dims.width, dims.height, window, label.strip() or None)


def _render(
    output: OptimizeOutput,
    output_format: str,
    svg_scale: float,
) -> str:
    if output_format == "json":
        return JsonExporter().export(output.summary)
    if output_format == "svg":
        return CutDiagramRenderer(scale=svg_scale).render_combined_svg(output.summary.layouts)
    if output_format == "ascii":
        layouts = output.summary.layouts
        report = GlassSummaryFormatter().format(output.summary)
        if not layouts:
            return report
        return f"{CutDiagramRenderer().render_all_ascii(layouts)}\n\n{report}"
    return "\n\n".join(
        [
            PanelCutFormatter().format(list(output.panels)),
            GlassSummaryFormatter().format(output.summary),
        ]
    )


@app.command()
def optimize(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON job file"),
    ] = None,
    panels: Annotated[
        list[str] | None,
        typer.Option("--panel", "-p", help="Panel as WxH or WxH:label (repeatable)"),
    ] = None,
    stock: Annotated[
        str | None,
        typer.Option("--stock", "-s", help="Stock size as WxH, or 'optimize'"),
    ] = None,
    glass_type: Annotated[
        str | None,
        typer.Option("--glass-type", "-g", help="Glass type, e.g. Clear-1/4"),
    ] = None,
    price: Annotated[
        float | None,
        typer.Option("--price", help="Stock glass price per square foot"),
    ] = None,
    allowance: Annotated[
        float | None,
        typer.Option("--allowance", help="Cutting allowance in inches"),
    ] = None,
    output_format: Annotated[
        str | None,
        typer.Option("--format", "-f", help="Output format: text, json, svg, ascii"),
    ] = None,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the report to a file"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Optimize glass stock for a panel cut list.

    Exit codes:
        0 - All panels packed
        1 - Invalid input
        2 - Some panels could not be packed (see the error lines)
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    panel_list: list[Panel] = []
    packing_config = PackingConfig()
    svg_scale = 5.0
    selected_stock = "optimize"
    selected_glass = "Clear-1/4"
    price_per_sqft = 0.0

    if config_file is not None:
        try:
            config = load_config(config_file)
        except ConfigError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)
        panel_list = config_to_panels(config)
        packing_config = config_to_packing(config.packing)
        svg_scale = config.output.svg_scale
        selected_stock = config.stock
        selected_glass = config.glass_type
        price_per_sqft = config.price_per_sqft
        if output_format is None:
            output_format = config.output.format

    try:
        offset = max((p.source_index for p in panel_list), default=0)
        for position, value in enumerate(panels or [], start=offset + 1):
            panel_list.append(_parse_panel_option(value, position))
        if allowance is not None:
            packing_config = PackingConfig(cutting_allowance=allowance)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if not panel_list:
        typer.echo("Error: provide panels with --panel or a job file with --config", err=True)
        raise typer.Exit(code=1)

    output_format = output_format or "text"
    if output_format not in OUTPUT_FORMATS:
        typer.echo(
            f"Error: unknown format '{output_format}'. Use one of: {', '.join(OUTPUT_FORMATS)}",
            err=True,
        )
        raise typer.Exit(code=1)
    if price is not None and price < 0:
        typer.echo("Error: --price must be non-negative", err=True)
        raise typer.Exit(code=1)

    try:
        result = OptimizeGlassCommand().execute(
            panel_list,
            stock=stock or selected_stock,
            glass_type=glass_type or selected_glass,
            price_per_sqft=price if price is not None else price_per_sqft,
            packing_config=packing_config,
        )
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    report = _render(result, output_format, svg_scale)
    if output_file is not None:
        output_file.write_text(report, encoding="utf-8")
        typer.echo(f"Wrote {output_format} report to {output_file}")
    else:
        typer.echo(report)

    for item in result.summary.errors:
        typer.echo(f"{item.size}: {item.notes}", err=True)
    if not result.is_valid:
        raise typer.Exit(code=2)


if __name__ == "__main__":
    app()
