"""File I/O operations for rendering."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from ..core.errors import ConfigurationError, WriteError


def ensure_parent(path: Path) -> None:
    """Ensure parent directories exist for the given path.

    Args:
        path: Path whose parent directories should be created

    Raises:
        ConfigurationError: If the parent directory cannot be created
    """
    parent = path.parent
    try:
        parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ConfigurationError(
            f"Unable to create parent directory {parent.absolute()} "
            f"for header file {path.absolute()}: {e}",
            path,
        ) from e


def write_lines(path: Path, lines: Iterable[str], encoding: str = "utf-8") -> None:
    """Overwrite a file with newline-terminated lines.

    The file is written in place, so a failure part way through can leave a
    truncated file behind.

    Args:
        path: Destination file path
        lines: Lines to write, without terminators
        encoding: Text encoding of the output

    Raises:
        WriteError: If the file cannot be opened, written or closed
    """
    try:
        with path.open("w", encoding=encoding) as handle:
            for line in lines:
                handle.write(line)
                handle.write("\n")
    except (OSError, UnicodeError) as e:
        raise WriteError(
            f"Unable to generate project script {path.absolute()}: {e}", path
        ) from e
