#!/usr/bin/env python3
"""helmmaker CLI - scaffold Helm charts for sets of applications."""

import typer
from rich.console import Console
from rich.table import Table

from helmmaker import __version__
from helmmaker.cli_chart_commands import register_chart_commands
from helmmaker.cli_scaffold_commands import register_scaffold_commands
from helmmaker.scaffold.registry import DEFAULT_REGISTRY

app = typer.Typer(
    name="helmmaker",
    help="""helmmaker - Helm charts for whole application sets

One YAML file. Every app gets its deployment and service templates.

Quick start:
  helmmaker init                  # Write apps.yml from the demo set
  helmmaker generate apps.yml     # Scaffold the chart
  helmmaker templates             # Show available resource types
""",
    add_completion=False,
)

console = Console()


@app.command()
def templates():
    """List resource types that can be generated per application."""
    table = Table(title="Resource types")
    table.add_column("Type", style="cyan")
    table.add_column("File")
    for resource_type in DEFAULT_REGISTRY.resource_types():
        descriptor = DEFAULT_REGISTRY.lookup(resource_type)
        table.add_row(resource_type, f"templates/{descriptor.filename_for('<app>')}")
    console.print(table)

    reserved = DEFAULT_REGISTRY.reserved_types()
    if reserved:
        console.print(f"[dim]Reserved (skipped): {', '.join(reserved)}[/dim]")


@app.command()
def version():
    """Show helmmaker version."""
    console.print(f"helmmaker v{__version__}")


# Attach modular subcommands
register_scaffold_commands(app, console)
register_chart_commands(app, console)

if __name__ == "__main__":
    app()
