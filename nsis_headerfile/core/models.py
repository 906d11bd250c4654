"""Domain models for project metadata and render requests."""

from __future__ import annotations

import getpass
from datetime import datetime
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DEFAULT_HEADER_NAME = "project.nsh"


class _Snapshot(BaseModel):
    """Read-only record accepting both snake_case and camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )


class Organization(_Snapshot):
    """Organization owning the project."""

    name: str = Field(default="", description="Organization name")
    url: str = Field(default="", description="Organization home page")


class ProjectMetadata(_Snapshot):
    """Project identity, paths and organization supplied by the build host."""

    base_dir: Path = Field(..., description="Project root directory")
    build_dir: Path = Field(..., description="Build output directory")
    final_name: str = Field(..., description="Build artifact name")
    group_id: str = Field(..., min_length=1)
    artifact_id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    version: str = Field(..., min_length=1)
    url: str | None = Field(default=None, description="Project home page")
    organization: Organization | None = None

    @property
    def has_url(self) -> bool:
        return bool(self.url)


class RenderRequest(BaseModel):
    """A single header rendering invocation."""

    metadata: ProjectMetadata
    destination_path: Path = Field(..., description="Header file to write")
    actor_name: str = Field(..., description="User named in the preamble")
    timestamp: datetime = Field(..., description="Time named in the preamble")

    @classmethod
    def create(
        cls,
        metadata: ProjectMetadata,
        destination_path: Path | None = None,
        actor_name: str | None = None,
        timestamp: datetime | None = None,
    ) -> RenderRequest:
        """Build a request, filling unset values from the environment.

        The destination defaults to ``<build_dir>/project.nsh``, the actor to
        the login name of the current user and the timestamp to now.
        """
        return cls(
            metadata=metadata,
            destination_path=destination_path
            or metadata.build_dir / DEFAULT_HEADER_NAME,
            actor_name=actor_name or getpass.getuser(),
            timestamp=timestamp or datetime.now(),
        )
