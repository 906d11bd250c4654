"""Header rendering engine.

Turns a :class:`RenderRequest` into the ordered ``!define`` lines of an NSIS
``project.nsh`` header and writes them to the destination.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..core.models import Organization, ProjectMetadata, RenderRequest
from .io import ensure_parent, write_lines

logger = logging.getLogger(__name__)

DEFAULT_DATE_FORMAT = "%x"
DEFAULT_TIME_FORMAT = "%X"

MISSING_ORGANIZATION = "; The project organization section is missing from your pom.xml"

# NSIS constant, expanded by makensis at install time
SMPROGRAMS = "$SMPROGRAMS"


def define_line(name: str, value: object) -> str:
    """Format a single define line.

    Values are inserted verbatim, an embedded ``"`` is not escaped.
    """
    return f'!define {name} "{value}"'


def _preamble(request: RenderRequest, date_format: str, time_format: str) -> list[str]:
    stamp = request.timestamp
    return [
        "; Template for project details",
        f"; Generated by {request.actor_name} from pom.xml version "
        f"{request.metadata.version}",
        f"; on date {stamp.strftime(date_format)}, time {stamp.strftime(time_format)}",
        "",
    ]


def _project_defines(metadata: ProjectMetadata) -> list[str]:
    lines = [
        define_line("PROJECT_BASEDIR", metadata.base_dir),
        define_line("PROJECT_BUILD_DIR", metadata.build_dir),
        define_line("PROJECT_FINAL_NAME", metadata.final_name),
        define_line("PROJECT_GROUP_ID", metadata.group_id),
        define_line("PROJECT_ARTIFACT_ID", metadata.artifact_id),
        define_line("PROJECT_NAME", metadata.name),
        define_line("PROJECT_VERSION", metadata.version),
    ]
    if metadata.has_url:
        lines.append(define_line("PROJECT_URL", metadata.url))
    return lines


def _organization_defines(metadata: ProjectMetadata, org: Organization) -> list[str]:
    name, version = metadata.name, metadata.version
    return [
        define_line("PROJECT_ORGANIZATION_NAME", org.name),
        define_line("PROJECT_ORGANIZATION_URL", org.url),
        define_line("PROJECT_REG_KEY", f"SOFTWARE\\{org.name}\\{name}\\{version}"),
        define_line(
            "PROJECT_REG_UNINSTALL_KEY",
            f"Software\\Microsoft\\Windows\\CurrentVersion\\Uninstall\\{name} {version}",
        ),
        define_line(
            "PROJECT_STARTMENU_FOLDER",
            f"{SMPROGRAMS}\\{org.name}\\{name} {version}",
        ),
    ]


def build_lines(
    request: RenderRequest,
    *,
    date_format: str = DEFAULT_DATE_FORMAT,
    time_format: str = DEFAULT_TIME_FORMAT,
) -> list[str]:
    """Build the header lines for a request, in output order.

    Args:
        request: Render request
        date_format: strftime pattern for the preamble date
        time_format: strftime pattern for the preamble time

    Returns:
        Lines without terminators
    """
    metadata = request.metadata
    lines = _preamble(request, date_format, time_format)
    lines.extend(_project_defines(metadata))

    if metadata.organization is not None:
        lines.extend(_organization_defines(metadata, metadata.organization))
    else:
        lines.append(MISSING_ORGANIZATION)

    return lines


def render(
    request: RenderRequest,
    *,
    encoding: str = "utf-8",
    date_format: str = DEFAULT_DATE_FORMAT,
    time_format: str = DEFAULT_TIME_FORMAT,
) -> Path:
    """Render the header file for a request.

    Args:
        request: Render request
        encoding: Text encoding of the header file
        date_format: strftime pattern for the preamble date
        time_format: strftime pattern for the preamble time

    Returns:
        Output file path

    Raises:
        ConfigurationError: If the destination directory cannot be created
        WriteError: If the header file cannot be written
    """
    output_path = request.destination_path
    logger.debug(f"Rendering project header for {request.metadata.artifact_id}")

    lines = build_lines(request, date_format=date_format, time_format=time_format)

    ensure_parent(output_path)
    write_lines(output_path, lines, encoding=encoding)
    logger.info(f"Rendered project header → {output_path}")

    return output_path
