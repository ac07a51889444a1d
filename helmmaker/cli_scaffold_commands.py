"""Chart scaffolding CLI commands - generate, demo, init."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from helmmaker.cli_support import confirm_action, find_apps_file, handle_cli_error, setup_file_logging
from helmmaker.config.loader import default_application_set, dump_application_set, load_application_set
from helmmaker.core.errors import HelmMakerError
from helmmaker.models.app import ApplicationSet
from helmmaker.scaffold.engine import ChartScaffolder

console = Console()


def _scaffold(app_set: ApplicationSet, verbose: bool) -> None:
    try:
        chart_dir = ChartScaffolder().generate_chart_tree(app_set)
    except HelmMakerError as e:
        handle_cli_error(e, console, verbose=verbose)
        return

    console.print(f"[green]✓[/green] Chart '{app_set.name}' written to {chart_dir}")
    for app in app_set.applications:
        types = ", ".join(app.resource_types) or "-"
        console.print(f"  • {app.name} [dim]({types})[/dim]")


def generate(
    apps_file: Optional[str] = typer.Argument(None, help="Application set YAML (default: ./apps.yml or $HELMMAKER_APPS)."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Directory to create the chart in (overrides the file's path)."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging and tracebacks."),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Also log to this file."),
):
    """Generate a chart from an application set file."""
    if log_file or verbose:
        setup_file_logging(log_file=log_file, verbose=verbose)

    spec_path = find_apps_file(apps_file)
    try:
        app_set = load_application_set(spec_path, output_path=output)
    except HelmMakerError as e:
        handle_cli_error(e, console, verbose=verbose)
        return

    _scaffold(app_set, verbose)


def demo(
    output: Path = typer.Option(Path("."), "--output", "-o", help="Directory to create the demo chart in."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show tracebacks on error."),
):
    """Generate the built-in demo chart (apps app1..app3)."""
    _scaffold(default_application_set(output), verbose)


def init(
    apps_file: str = typer.Argument("apps.yml", help="Where to write the application set."),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file without asking."),
):
    """Write a starter application set file based on the demo chart."""
    target = Path(apps_file)
    if target.exists() and not confirm_action(f"{target} exists. Overwrite?", yes_flag=force):
        console.print("[yellow]Cancelled[/yellow]")
        return

    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(dump_application_set(default_application_set()))
    console.print(f"[green]✓[/green] Created {target}")
    console.print("\n[cyan]Next steps:[/cyan]")
    console.print(f"  1. Edit {target}")
    console.print(f"  2. Run 'helmmaker generate {target}'")


def register_scaffold_commands(app: typer.Typer, shared_console: Console):
    """Register scaffolding commands with the main Typer app.

    Args:
        app: Main Typer application
        shared_console: Shared Rich console instance
    """
    global console
    console = shared_console

    app.command()(generate)
    app.command()(demo)
    app.command()(init)
