"""Shared pytest fixtures for nativehelper tests."""

import pytest

from nativehelper.domain.models import Artifact, ArtifactType, Project
from nativehelper.infrastructure.filesystem import FilesystemPackageInspector


@pytest.fixture
def apklib() -> Artifact:
    """An attached apklib, as left behind by an earlier build step."""
    return Artifact(
        group_id="group",
        artifact_id="some-apklib",
        version="1.0",
        scope=None,
        type=ArtifactType.APKLIB,
    )


@pytest.fixture
def apklib_project(apklib: Artifact) -> Project:
    """A project with no declared dependencies and one attached apklib."""
    return Project(dependency_artifacts=(), attached_artifacts=(apklib,))


@pytest.fixture
def inspector() -> FilesystemPackageInspector:
    return FilesystemPackageInspector()


@pytest.fixture
def make_artifact():
    """Factory for acme:acme:1.0 artifacts."""
    return _make_artifact


def _make_artifact(
    type: str = ArtifactType.SO,
    classifier: str | None = None,
    scope: str | None = "runtime",
    artifact_id: str = "acme",
) -> Artifact:
    """Create an acme:acme:1.0 artifact with the given packaging and classifier."""
    return Artifact(
        group_id="acme",
        artifact_id=artifact_id,
        version="1.0",
        scope=scope,
        type=type,
        classifier=classifier,
    )
