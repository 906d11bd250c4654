"""Main CLI application."""

from __future__ import annotations

import locale
import logging
from pathlib import Path

import typer
from typing_extensions import Annotated

from ..core.errors import MetadataError, RenderError
from ..core.models import RenderRequest
from ..metadata import load_document, load_pom
from ..rendering import engine
from ..settings import Settings
from .parsers import parse_source

logger = logging.getLogger(__name__)


def use_user_locale() -> None:
    """Format preamble dates and times with the user's locale."""
    try:
        locale.setlocale(locale.LC_TIME, "")
    except locale.Error as e:
        logger.warning(f"Unable to use the user's locale for dates: {e}")


app = typer.Typer(
    name="nsis-headerfile",
    help="Generate an NSIS project.nsh header from project metadata.",
)


@app.callback()
def callback() -> None:
    """Generate an NSIS project.nsh header from project metadata."""


@app.command()
def generate(
    pom: Annotated[
        str,
        typer.Option(
            "--pom",
            help="Maven POM to read (default: ./pom.xml).",
            metavar="FILE",
        ),
    ] = "",
    metadata: Annotated[
        str,
        typer.Option(
            "--metadata",
            help="YAML or JSON project description to read instead of a POM.",
            metavar="FILE",
        ),
    ] = "",
    output: Annotated[
        str,
        typer.Option(
            "--output",
            "-o",
            help="Header file to write (default: NSIS_HEADERFILE or <build dir>/project.nsh).",
            metavar="FILE",
        ),
    ] = "",
    actor: Annotated[
        str,
        typer.Option(
            "--actor",
            help="Name recorded in the header preamble (default: current user).",
            metavar="NAME",
        ),
    ] = "",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose logging.",
        ),
    ] = False,
) -> None:
    """Write project.nsh with !define lines for the project metadata."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )

    use_user_locale()
    settings = Settings()
    kind, source = parse_source(pom, metadata)
    logger.debug(f"Reading {kind} description: {source}")

    try:
        project = load_document(source) if kind == "document" else load_pom(source)
    except MetadataError as e:
        logger.error(str(e))
        raise typer.Exit(code=1) from e

    request = RenderRequest.create(
        project,
        destination_path=Path(output) if output else settings.headerfile,
        actor_name=actor or settings.actor,
    )

    try:
        engine.render(
            request,
            encoding=settings.encoding,
            date_format=settings.date_format,
            time_format=settings.time_format,
        )
    except RenderError as e:
        logger.error(f"Header generation failed at {e.stage} stage: {e}")
        raise typer.Exit(code=1) from e


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
