"""Chart library CLI commands - create, scaffold-from."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from helmmaker.chart import ChartMetadata
from helmmaker.cli_support import handle_cli_error
from helmmaker.core.config import get_config
from helmmaker.core.errors import HelmMakerError
from helmmaker.scaffold.starter import create_from, gen_local_chart

console = Console()


def create(
    name: str = typer.Argument(..., help="Chart name."),
    output: Path = typer.Option(Path("."), "--output", "-o", help="Directory to create the chart in."),
    starter: Optional[str] = typer.Option(None, "--starter", "-p", help="Starter chart name or path."),
    version: str = typer.Option("0.2.0", "--version", help="Version written to the saved chart."),
):
    """Create a standalone chart (like 'helm create')."""
    try:
        chart = gen_local_chart(name, output, starter=starter, version=version)
    except HelmMakerError as e:
        handle_cli_error(e, console)
        return
    console.print(f"[green]✓[/green] Created chart '{chart.name}' ({chart.metadata.version}) in {output / name}")


def scaffold_from(
    src: Path = typer.Argument(..., help="Existing chart directory to use as a starter."),
    name: str = typer.Argument(..., help="Name of the new chart."),
    output: Path = typer.Option(Path("."), "--output", "-o", help="Directory to create the chart in."),
    version: Optional[str] = typer.Option(None, "--version", help="Chart version (default: configured chart version)."),
    description: Optional[str] = typer.Option(None, "--description", help="Chart description."),
):
    """Create a chart from an existing one, renaming <CHARTNAME> markers."""
    config = get_config()
    try:
        metadata = ChartMetadata(
            name=name,
            version=version or config.default_chart_version,
            description=description or config.description,
            app_version=config.app_version,
        )
        chart_dir = create_from(metadata, output, src)
    except HelmMakerError as e:
        handle_cli_error(e, console)
        return
    console.print(f"[green]✓[/green] Created chart '{name}' from {src} in {chart_dir}")


def register_chart_commands(app: typer.Typer, shared_console: Console):
    """Register chart library commands with the main Typer app."""
    global console
    console = shared_console

    app.command()(create)
    app.command("scaffold-from")(scaffold_from)
