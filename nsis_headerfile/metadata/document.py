"""YAML/JSON project descriptions."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from ..core.errors import MetadataError
from ..core.models import ProjectMetadata

logger = logging.getLogger(__name__)


def load_document(path: Path) -> ProjectMetadata:
    """Load project metadata from a YAML or JSON mapping.

    Keys may be written in snake_case (``base_dir``) or camelCase
    (``baseDir``).

    Args:
        path: Description file

    Returns:
        Validated project metadata

    Raises:
        MetadataError: If the file is unreadable, malformed or incomplete
    """
    logger.debug(f"Loading project description: {path}")

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise MetadataError(f"Unable to read project description {path}: {e}") from e
    except yaml.YAMLError as e:
        raise MetadataError(f"Invalid project description {path}: {e}") from e

    if not isinstance(data, dict):
        raise MetadataError(f"Project description {path} must be a mapping")

    try:
        return ProjectMetadata.model_validate(data)
    except ValidationError as e:
        raise MetadataError(f"Invalid project description {path}: {e}") from e
