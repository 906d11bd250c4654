"""Maven POM project descriptions.

Reads the subset of a ``pom.xml`` that the header uses and applies Maven's
defaults: coordinates inherited from ``<parent>``, ``name`` falling back to
the artifact id, and the standard ``target`` build directory and
``artifactId-version`` final name.
"""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET
from pathlib import Path

from pydantic import ValidationError

from ..core.errors import MetadataError
from ..core.models import Organization, ProjectMetadata

logger = logging.getLogger(__name__)

_EXPRESSION = re.compile(r"\$\{([^}]+)\}")
_MAX_PASSES = 10
_MAX_PARENTS = 10

DEFAULT_BUILD_DIRECTORY = "${project.basedir}/target"
DEFAULT_FINAL_NAME = "${project.artifactId}-${project.version}"


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _child(element: ET.Element | None, *names: str) -> ET.Element | None:
    for name in names:
        if element is None:
            return None
        element = next(
            (c for c in element if isinstance(c.tag, str) and _local_name(c.tag) == name),
            None,
        )
    return element


def _text(element: ET.Element | None, *names: str) -> str | None:
    node = _child(element, *names)
    if node is None or node.text is None:
        return None
    return node.text.strip() or None


def _properties(root: ET.Element) -> dict[str, str]:
    props = _child(root, "properties")
    if props is None:
        return {}
    return {
        _local_name(p.tag): (p.text or "").strip()
        for p in props
        if isinstance(p.tag, str)
    }


def interpolate(value: str, values: dict[str, str]) -> str:
    """Expand ``${key}`` references, leaving unknown keys untouched.

    Args:
        value: Raw text
        values: Known expression values

    Returns:
        Expanded text
    """
    for _ in range(_MAX_PASSES):
        expanded = _EXPRESSION.sub(lambda m: values.get(m.group(1), m.group(0)), value)
        if expanded == value:
            break
        value = expanded
    return value


def _parse(path: Path) -> ET.Element:
    try:
        root = ET.parse(path).getroot()
    except OSError as e:
        raise MetadataError(f"Unable to read POM {path}: {e}") from e
    except ET.ParseError as e:
        raise MetadataError(f"Invalid POM {path}: {e}") from e

    if _local_name(root.tag) != "project":
        raise MetadataError(f"{path} is not a Maven POM (root element {root.tag!r})")
    return root


def _parent_poms(root: ET.Element, path: Path) -> list[ET.Element]:
    """Ancestor POMs found through ``<parent><relativePath>``, nearest first.

    Lookup stops at an empty ``<relativePath/>``, a missing file or a POM
    whose artifactId does not match the declared parent.
    """
    ancestors: list[ET.Element] = []
    current, current_path = root, path.resolve()

    for _ in range(_MAX_PARENTS):
        parent = _child(current, "parent")
        if parent is None:
            break
        relative_node = _child(parent, "relativePath")
        if relative_node is not None and not (relative_node.text or "").strip():
            break

        candidate = current_path.parent / (_text(parent, "relativePath") or "../pom.xml")
        if candidate.is_dir():
            candidate = candidate / "pom.xml"
        if not candidate.is_file():
            logger.debug(f"Parent POM not found locally: {candidate}")
            break

        parent_root = _parse(candidate)
        if _text(parent_root, "artifactId") != _text(parent, "artifactId"):
            logger.debug(f"{candidate} is not the declared parent of {current_path}")
            break

        ancestors.append(parent_root)
        current, current_path = parent_root, candidate.resolve()

    return ancestors


def _coordinates(
    root: ET.Element, ancestors: list[ET.Element], base_dir: Path
) -> dict[str, str]:
    raw = {
        "groupId": _text(root, "groupId") or _text(root, "parent", "groupId"),
        "artifactId": _text(root, "artifactId"),
        "version": _text(root, "version") or _text(root, "parent", "version"),
    }
    raw["name"] = _text(root, "name") or raw["artifactId"]

    values: dict[str, str] = {}
    for pom in [*reversed(ancestors), root]:
        values.update(_properties(pom))
    values["basedir"] = str(base_dir)
    values["project.basedir"] = str(base_dir)
    for key in ("groupId", "version"):
        parent_value = _text(root, "parent", key)
        if parent_value:
            values[f"project.parent.{key}"] = parent_value
    for key, value in raw.items():
        if value is not None:
            values[f"project.{key}"] = value
            values[f"pom.{key}"] = value
    return values


def _inherited_url(lineage: list[ET.Element]) -> str | None:
    # An inherited url gets the artifactId of each descendant appended.
    for depth, pom in enumerate(lineage):
        url = _text(pom, "url")
        if url:
            suffix = [_text(lineage[i], "artifactId") or "" for i in reversed(range(depth))]
            return "/".join([url.rstrip("/"), *suffix]) if suffix else url
    return None


def load_pom(path: Path) -> ProjectMetadata:
    """Load project metadata from a Maven ``pom.xml``.

    ``<organization>``, ``<url>`` and ``<properties>`` are inherited from
    parent POMs that can be found on disk through ``<relativePath>``
    (default ``../pom.xml``). Parents only available from a repository are
    not resolved.

    Args:
        path: POM file

    Returns:
        Validated project metadata

    Raises:
        MetadataError: If the POM is unreadable, malformed or incomplete
    """
    logger.debug(f"Loading POM: {path}")

    root = _parse(path)
    ancestors = _parent_poms(root, path)
    lineage = [root, *ancestors]

    base_dir = path.resolve().parent
    values = _coordinates(root, ancestors, base_dir)

    def resolve(key: str) -> str | None:
        value = values.get(f"project.{key}")
        return interpolate(value, values) if value is not None else None

    build_dir = Path(
        interpolate(_text(root, "build", "directory") or DEFAULT_BUILD_DIRECTORY, values)
    )
    if not build_dir.is_absolute():
        build_dir = base_dir / build_dir
    values["project.build.directory"] = str(build_dir)

    final_name = interpolate(
        _text(root, "build", "finalName") or DEFAULT_FINAL_NAME, values
    )

    organization = None
    org_node = next(
        (n for n in (_child(pom, "organization") for pom in lineage) if n is not None),
        None,
    )
    if org_node is not None:
        organization = Organization(
            name=interpolate(_text(org_node, "name") or "", values),
            url=interpolate(_text(org_node, "url") or "", values),
        )

    url = _inherited_url(lineage)

    try:
        return ProjectMetadata(
            base_dir=base_dir,
            build_dir=build_dir,
            final_name=final_name,
            group_id=resolve("groupId"),
            artifact_id=resolve("artifactId"),
            name=resolve("name"),
            version=resolve("version"),
            url=interpolate(url, values) if url else None,
            organization=organization,
        )
    except ValidationError as e:
        raise MetadataError(f"Incomplete POM {path}: {e}") from e
