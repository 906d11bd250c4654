"""Loaders producing ProjectMetadata from project descriptions."""

from .document import load_document
from .pom import load_pom

__all__ = ["load_document", "load_pom"]
