"""Shared utilities for helmmaker CLI modules."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

# Default application set search paths (ordered by proximity to current run)
APPS_PATHS = [
    "./apps.yml",
    "./apps.yaml",
    "./helmmaker.yml",
]


def find_apps_file(apps_path: Optional[str] = None) -> str:
    """Locate the application set file to scaffold."""
    if apps_path:
        return apps_path

    if env_apps := os.environ.get("HELMMAKER_APPS"):
        return env_apps

    for path in APPS_PATHS:
        if Path(path).exists():
            return path

    return "apps.yml"


def setup_file_logging(log_file: Optional[str] = None, verbose: bool = False) -> None:
    """Set up file logging for CLI commands.

    Args:
        log_file: Path to log file (optional)
        verbose: Enable verbose logging
    """
    from helmmaker.core.logger import setup_file_logging as _setup_file_logging
    _setup_file_logging(log_file=log_file, verbose=verbose)


def confirm_action(message: str, yes_flag: bool = False) -> bool:
    """Prompt user for confirmation unless --yes/--force was given."""
    if yes_flag:
        return True
    return typer.confirm(message)


def handle_cli_error(
    e: Exception,
    console: Console,
    verbose: bool = False,
    exit_code: int = 1
) -> None:
    """Handle CLI errors with consistent formatting.

    Args:
        e: Exception to handle
        console: Rich console for output
        verbose: Show exception traceback if True
        exit_code: Exit code to use
    """
    console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
    if verbose:
        console.print_exception()
    raise typer.Exit(exit_code)
