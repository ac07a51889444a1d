"""File emitter used for every artifact helmmaker writes."""
from pathlib import Path
from typing import Union

from helmmaker.core.errors import ScaffoldIOError

Content = Union[str, bytes]


def _as_bytes(content: Content) -> bytes:
    if isinstance(content, str):
        return content.encode("utf-8")
    return content


def _ensure_parent(path: Path) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ScaffoldIOError(path.parent, "mkdir", exc) from exc


def write_file(path: Union[str, Path], content: Content) -> Path:
    """Write ``content`` to ``path``, truncating it and creating parent dirs.

    Raises:
        ScaffoldIOError: If the directory or the file cannot be written
    """
    target = Path(path)
    _ensure_parent(target)
    try:
        target.write_bytes(_as_bytes(content))
    except OSError as exc:
        raise ScaffoldIOError(target, "write", exc) from exc
    return target


def append_file(path: Union[str, Path], content: Content) -> Path:
    """Append ``content`` to ``path``, creating the file and parent dirs."""
    target = Path(path)
    _ensure_parent(target)
    try:
        with open(target, "ab") as handle:
            handle.write(_as_bytes(content))
    except OSError as exc:
        raise ScaffoldIOError(target, "append", exc) from exc
    return target


def read_file(path: Union[str, Path]) -> bytes:
    """Read ``path`` as bytes, wrapping failures in ScaffoldIOError."""
    target = Path(path)
    try:
        return target.read_bytes()
    except OSError as exc:
        raise ScaffoldIOError(target, "read", exc) from exc
