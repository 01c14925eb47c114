"""
NativeDependencyScanner: selects the native libraries a build must package.

Combines artifact metadata (packaging type, scope, classifier) with what the
unpacked library packages actually contain on disk.
"""

import logging
from pathlib import Path

from nativehelper.domain.architecture import is_hardware_architecture_artifact
from nativehelper.domain.interfaces import PackageInspectorInterface
from nativehelper.domain.models import (
    PAYLOAD_DIRECTORIES,
    Architecture,
    Artifact,
    PackagingKind,
    Project,
)

logger = logging.getLogger(__name__)

# Scopes whose native artifacts end up in the application package.
# None marks an artifact attached by an earlier step of the same build.
PACKAGED_SCOPES = frozenset({None, "compile", "runtime"})


class NativeDependencyScanner:
    """
    Collects native dependencies of a project.

    Stateless apart from its collaborators, so a single instance can be
    shared between build threads.
    """

    def __init__(self, project: Project, inspector: PackageInspectorInterface):
        """
        Args:
            project: Resolved dependencies and attached artifacts
            inspector: Reads the contents of unpacked library packages
        """
        self._project = project
        self._inspector = inspector

    @property
    def project(self) -> Project:
        return self._project

    def collect_native_dependencies(
        self,
        unpack_dir: Path,
        recurse: bool = True,
        shared_libraries: bool = True,
        architecture: Architecture | None = None,
        default_architecture: Architecture = Architecture.ARMEABI,
    ) -> set[Artifact]:
        """
        Select artifacts that provide native libraries.

        Args:
            unpack_dir: Root under which library packages were unpacked,
                one subdirectory per artifact id
            recurse: Search ABI subdirectories of package payloads
            shared_libraries: Select shared objects (.so) rather than
                static archives (.a)
            architecture: Restrict shared libraries to this ABI
            default_architecture: ABI assumed for unclassified artifacts

        Returns:
            Native dependency artifacts (empty if there are none)
        """
        native_kind = (
            PackagingKind.SHARED_LIBRARY
            if shared_libraries
            else PackagingKind.STATIC_LIBRARY
        )
        extension = ".so" if shared_libraries else ".a"

        selected: set[Artifact] = set()
        for artifact in self._project.all_artifacts():
            kind = artifact.kind
            if kind is native_kind:
                if self._is_packaged_library(
                    artifact, architecture, default_architecture
                ):
                    logger.debug("Including native artifact: %s", artifact.id)
                    selected.add(artifact)
            elif kind is PackagingKind.LIBRARY_PACKAGE:
                if self._package_has_native_libraries(
                    artifact, Path(unpack_dir), extension, recurse
                ):
                    logger.debug(
                        "Including library package with native payload: %s",
                        artifact.id,
                    )
                    selected.add(artifact)

        logger.info("Found %d native dependencies", len(selected))
        return selected

    def _is_packaged_library(
        self,
        artifact: Artifact,
        architecture: Architecture | None,
        default_architecture: Architecture,
    ) -> bool:
        if artifact.scope not in PACKAGED_SCOPES:
            return False
        if architecture is None or artifact.kind is not PackagingKind.SHARED_LIBRARY:
            return True
        return is_hardware_architecture_artifact(
            artifact, architecture, default_architecture
        )

    def _package_has_native_libraries(
        self, artifact: Artifact, unpack_dir: Path, extension: str, recurse: bool
    ) -> bool:
        payload = unpack_dir / artifact.artifact_id / PAYLOAD_DIRECTORIES[artifact.type]
        binaries = self._inspector.native_binaries(payload, extension, recurse)
        if not binaries:
            logger.debug("No native binaries under %s", payload)
        return bool(binaries)
