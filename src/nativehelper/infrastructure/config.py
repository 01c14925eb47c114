"""Loading project dependency descriptors from JSON."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from nativehelper.domain.exceptions import ConfigurationError
from nativehelper.domain.models import Artifact, Project


def _require_field(data: dict[str, Any], field: str, where: str) -> str:
    """Extract a required string field from an artifact entry.

    Raises:
        ConfigurationError: If field is missing or empty
    """
    value = data.get(field)
    if not value or not isinstance(value, str):
        raise ConfigurationError(f"{where}: missing required field '{field}'")
    return value


def _optional_field(data: dict[str, Any], field: str, where: str) -> str | None:
    """Extract an optional string field; empty values read as None.

    Raises:
        ConfigurationError: If field is present but not a string
    """
    value = data.get(field)
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{where}: '{field}' must be a string")
    return value


def _parse_artifact(data: Any, where: str) -> Artifact:
    if not isinstance(data, dict):
        raise ConfigurationError(f"{where}: expected dict, got {type(data).__name__}")

    file = _optional_field(data, "file", where)
    return Artifact(
        group_id=_require_field(data, "groupId", where),
        artifact_id=_require_field(data, "artifactId", where),
        version=_optional_field(data, "version", where) or "",
        scope=_optional_field(data, "scope", where),
        type=_require_field(data, "type", where),
        classifier=_optional_field(data, "classifier", where),
        file=Path(file) if file else None,
    )


def _parse_artifacts(data: dict[str, Any], key: str, path: Path) -> tuple[Artifact, ...]:
    entries = data.get(key, [])
    if not isinstance(entries, list):
        raise ConfigurationError(f"'{key}' must be a list in {path}")
    return tuple(
        _parse_artifact(entry, f"{path.name}: {key}[{index}]")
        for index, entry in enumerate(entries)
    )


def load_project(path: Path) -> Project:
    """
    Load a project's resolved dependencies from a JSON descriptor.

    Args:
        path: Path to the descriptor, with "dependencies" and "attached" lists

    Returns:
        The project

    Raises:
        ConfigurationError: If the file is missing or invalid
    """
    path = Path(path)
    if not path.exists():
        raise ConfigurationError(f"Project file not found: {path}")

    try:
        with open(path) as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Expected dict in {path}, got {type(data).__name__}")

    return Project(
        dependency_artifacts=_parse_artifacts(data, "dependencies", path),
        attached_artifacts=_parse_artifacts(data, "attached", path),
    )
