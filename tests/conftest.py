"""Shared pytest fixtures for the nsis-headerfile test suite.

Provides reusable fixtures for:
- Project metadata with and without an organization
- Render requests with a fixed timestamp
- POM and YAML project descriptions on disk
"""

from __future__ import annotations

import textwrap
from datetime import datetime
from pathlib import Path

import pytest

from nsis_headerfile.core.models import Organization, ProjectMetadata, RenderRequest

FIXED_TIME = datetime(2024, 3, 5, 14, 30, 15)


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------


@pytest.fixture
def bare_metadata() -> ProjectMetadata:
    """Metadata with an empty url and no organization."""
    return ProjectMetadata(
        group_id="org.example",
        artifact_id="app",
        name="App",
        version="1.0",
        base_dir=Path("/proj"),
        build_dir=Path("/proj/target"),
        final_name="app-1.0",
        url="",
        organization=None,
    )


@pytest.fixture
def org_metadata(bare_metadata: ProjectMetadata) -> ProjectMetadata:
    """Metadata with an organization and version 2.0."""
    return bare_metadata.model_copy(
        update={
            "version": "2.0",
            "organization": Organization(name="Example Org", url="http://example.org"),
        }
    )


@pytest.fixture
def make_request(tmp_path: Path):
    """Factory for requests writing below ``tmp_path`` at a fixed time."""

    def _make(metadata: ProjectMetadata, **overrides) -> RenderRequest:
        values = {
            "metadata": metadata,
            "destination_path": tmp_path / "target" / "project.nsh",
            "actor_name": "builder",
            "timestamp": FIXED_TIME,
        }
        values.update(overrides)
        return RenderRequest(**values)

    return _make


# ---------------------------------------------------------------------------
# Project descriptions on disk
# ---------------------------------------------------------------------------


@pytest.fixture
def pom_file(tmp_path: Path) -> Path:
    """A namespaced POM with a parent, properties and an organization."""
    project_dir = tmp_path / "project"
    project_dir.mkdir()
    pom = project_dir / "pom.xml"
    pom.write_text(
        textwrap.dedent(
            """\
            <?xml version="1.0" encoding="UTF-8"?>
            <project xmlns="http://maven.apache.org/POM/4.0.0">
              <modelVersion>4.0.0</modelVersion>
              <parent>
                <groupId>org.example</groupId>
                <artifactId>parent</artifactId>
                <version>3.1</version>
              </parent>
              <artifactId>widget</artifactId>
              <name>Widget Tool</name>
              <url>http://example.org/widget</url>
              <properties>
                <vendor>Example Org</vendor>
              </properties>
              <organization>
                <name>${vendor}</name>
                <url>http://example.org</url>
              </organization>
            </project>
            """
        ),
        encoding="utf-8",
    )
    return pom


@pytest.fixture
def metadata_file(tmp_path: Path) -> Path:
    """A camelCase YAML project description."""
    path = tmp_path / "project.yaml"
    path.write_text(
        textwrap.dedent(
            """\
            baseDir: /proj
            buildDir: /proj/target
            finalName: app-1.0
            groupId: org.example
            artifactId: app
            name: App
            version: "1.0"
            organization:
              name: Example Org
              url: http://example.org
            """
        ),
        encoding="utf-8",
    )
    return path
