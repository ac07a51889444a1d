"""Exception hierarchy for helmmaker."""
from pathlib import Path
from typing import Optional, Union

PathLike = Union[str, Path]


class HelmMakerError(Exception):
    """Base class for every error raised by helmmaker."""


class InvalidName(HelmMakerError, ValueError):
    """Raised when a chart or application name fails validation."""

    def __init__(self, name: str, message: str):
        super().__init__(message)
        self.name = name


class InvalidOutputPath(HelmMakerError):
    """Raised when the base output directory is missing or not a directory."""

    def __init__(self, path: PathLike, message: Optional[str] = None):
        super().__init__(message or f"no such directory {path}")
        self.path = Path(path)


class PathConflict(HelmMakerError):
    """Raised when a directory we need already exists as a regular file."""

    def __init__(self, path: PathLike, message: Optional[str] = None):
        super().__init__(
            message or f"file {path} already exists and is not a chart directory"
        )
        self.path = Path(path)


class ScaffoldIOError(HelmMakerError):
    """Raised when a filesystem operation fails while scaffolding.

    Attributes:
        path: File or directory the operation targeted
        operation: One of ``write``, ``append``, ``mkdir`` or ``read``
    """

    def __init__(self, path: PathLike, operation: str, cause: Optional[OSError] = None):
        detail = f": {cause.strerror or cause}" if cause is not None else ""
        super().__init__(f"failed to {operation} {path}{detail}")
        self.path = Path(path)
        self.operation = operation
        self.cause = cause


class ChartLoadError(HelmMakerError):
    """Raised when a chart directory cannot be loaded or transformed."""


class ApplicationSetError(HelmMakerError):
    """Raised when an application set file cannot be loaded."""
