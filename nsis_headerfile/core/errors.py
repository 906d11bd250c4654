"""Errors raised while loading metadata or writing the header file."""

from __future__ import annotations

from pathlib import Path


class MetadataError(Exception):
    """Raised when a project description cannot be read or validated."""


class RenderError(Exception):
    """Raised when the header file cannot be produced.

    ``stage`` names the step that failed and ``path`` the affected file or
    directory. The originating ``OSError`` is chained as ``__cause__``.
    """

    stage = "render"

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message)
        self.path = path


class ConfigurationError(RenderError):
    """Raised when the destination's parent directory cannot be created."""

    stage = "directory"


class WriteError(RenderError):
    """Raised when the header file cannot be opened or written."""

    stage = "write"
