"""Unified logging for helmmaker with console and file output."""
import logging
import tempfile
from pathlib import Path
from typing import IO, Optional, Union

from rich.console import Console
from rich.logging import RichHandler

console = Console(stderr=True)

# Log file configuration
LOG_DIR = Path.home() / ".helmmaker"
LOG_FILE = LOG_DIR / "helmmaker.log"

# Track if file logging has been set up
_file_logging_configured = False


def setup_file_logging(log_file: str = None, verbose: bool = False):
    """Set up file logging for helmmaker operations.

    Args:
        log_file: Path to log file (defaults to ~/.helmmaker/helmmaker.log)
        verbose: Enable debug-level logging

    Note:
        Falls back to the system temp directory if the log directory
        cannot be created.
    """
    global _file_logging_configured

    if _file_logging_configured:
        return

    target_log_file = Path(log_file) if log_file else LOG_FILE

    try:
        target_log_file.parent.mkdir(parents=True, exist_ok=True)
    except PermissionError:
        target_log_file = Path(tempfile.gettempdir()) / "helmmaker.log"

    root_logger = logging.getLogger("helmmaker")
    file_handler = logging.FileHandler(target_log_file)
    file_handler.setLevel(logging.DEBUG if verbose else logging.INFO)

    file_formatter = logging.Formatter(
        "%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    file_handler.setFormatter(file_formatter)
    root_logger.addHandler(file_handler)
    root_logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    _file_logging_configured = True

    root_logger.info(f"helmmaker logging initialized: {target_log_file}")


def get_logger(name: str) -> logging.Logger:
    """Get a configured logger instance with console output.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger with Rich console handler

    Note:
        File logging must be enabled separately via setup_file_logging()
    """
    logger = logging.getLogger(name)

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(console=console, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)

    return logger


def diagnostics_console(sink: Optional[Union[Console, IO[str]]] = None) -> Console:
    """Return the console used for non-fatal diagnostics.

    Args:
        sink: Console to use as is, or a text stream to wrap
            (defaults to stderr)
    """
    if sink is None:
        return Console(stderr=True)
    if isinstance(sink, Console):
        return sink
    return Console(file=sink)


def warn_overwrite(diagnostics: Console, path: Path) -> None:
    """Report that ``path`` exists and is about to be replaced."""
    diagnostics.print(
        f'WARNING: File "{path}" already exists. Overwriting.',
        markup=False,
        highlight=False,
        soft_wrap=True,
    )
