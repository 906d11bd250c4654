"""CLI argument parsers and validators."""

from __future__ import annotations

from pathlib import Path

import typer

DEFAULT_POM = Path("pom.xml")


def parse_source(pom: str, metadata: str) -> tuple[str, Path]:
    """Pick the project description source from --pom/--metadata."""
    if pom and metadata:
        raise typer.BadParameter("Use either --pom or --metadata, not both")
    if metadata:
        return "document", Path(metadata)
    return "pom", Path(pom) if pom else DEFAULT_POM
