"""
Domain models for native dependency classification.

Pure data structures; all immutable (frozen dataclasses) so that artifacts
can be collected into sets and shared between build threads.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from nativehelper.domain.exceptions import UnknownArchitecture

# =============================================================================
# PACKAGING TYPES
# =============================================================================


class ArtifactType:
    """Packaging type strings as reported by the dependency resolver."""

    SO = "so"  # Native shared object
    A = "a"  # Native static archive
    JAR = "jar"  # Managed-code archive
    APKLIB = "apklib"  # Library package, native payload under libs/
    AAR = "aar"  # Library package, native payload under jni/


class PackagingKind(Enum):
    """Discriminant used to dispatch on an artifact's packaging type."""

    SHARED_LIBRARY = "shared_library"
    STATIC_LIBRARY = "static_library"
    LIBRARY_PACKAGE = "library_package"
    MANAGED_ARCHIVE = "managed_archive"
    OTHER = "other"


_KINDS = {
    ArtifactType.SO: PackagingKind.SHARED_LIBRARY,
    ArtifactType.A: PackagingKind.STATIC_LIBRARY,
    ArtifactType.APKLIB: PackagingKind.LIBRARY_PACKAGE,
    ArtifactType.AAR: PackagingKind.LIBRARY_PACKAGE,
    ArtifactType.JAR: PackagingKind.MANAGED_ARCHIVE,
}

# Subdirectory of an unpacked library package that holds bundled binaries
PAYLOAD_DIRECTORIES = {
    ArtifactType.APKLIB: "libs",
    ArtifactType.AAR: "jni",
}


def packaging_kind(artifact_type: str) -> PackagingKind:
    """Classify a packaging type string."""
    return _KINDS.get(artifact_type, PackagingKind.OTHER)


# =============================================================================
# ARCHITECTURES
# =============================================================================


class Architecture(Enum):
    """Closed set of NDK ABIs."""

    ARMEABI = "armeabi"
    ARMEABI_V7A = "armeabi-v7a"
    ARM64_V8A = "arm64-v8a"
    MIPS = "mips"
    MIPS64 = "mips64"
    X86 = "x86"
    X86_64 = "x86_64"

    @classmethod
    def from_name(cls, name: str) -> "Architecture":
        """
        Look up an architecture by its ABI name.

        Raises:
            UnknownArchitecture: If the name is not a supported ABI
        """
        try:
            return cls(name)
        except ValueError:
            raise UnknownArchitecture(name) from None

    def __str__(self) -> str:
        return self.value


NDK_ARCHITECTURES: tuple[str, ...] = tuple(a.value for a in Architecture)


# =============================================================================
# ARTIFACTS
# =============================================================================


@dataclass(frozen=True)
class Artifact:
    """A resolved dependency unit."""

    group_id: str
    artifact_id: str
    version: str
    scope: str | None  # None: attached by an earlier build step
    type: str
    classifier: str | None = None
    file: Path | None = None

    @property
    def id(self) -> str:
        parts = [self.group_id, self.artifact_id, self.type]
        if self.classifier:
            parts.append(self.classifier)
        if self.version:
            parts.append(self.version)
        return ":".join(parts)

    @property
    def kind(self) -> PackagingKind:
        return packaging_kind(self.type)


@dataclass(frozen=True)
class Project:
    """Dependency view of the project being built."""

    dependency_artifacts: tuple[Artifact, ...] = ()
    attached_artifacts: tuple[Artifact, ...] = ()

    def all_artifacts(self) -> Iterator[Artifact]:
        """Declared dependencies followed by attached artifacts, without duplicates."""
        seen: set[Artifact] = set()
        for artifact in (*self.dependency_artifacts, *self.attached_artifacts):
            if artifact not in seen:
                seen.add(artifact)
                yield artifact


# =============================================================================
# NDK REVISION
# =============================================================================


@dataclass(frozen=True, order=True)
class VersionSpec:
    """
    NDK release identifier, e.g. r7 or r8b.

    Ordered by major number, then suffix. An empty suffix sorts below
    any letter, so r7 < r7a < r7b < r8.
    """

    major: int
    suffix: str = ""

    def __str__(self) -> str:
        return f"r{self.major}{self.suffix}"
