"""
Domain layer for native dependency handling.

Contains the classification and version rules with no I/O dependencies.
"""

from nativehelper.domain.architecture import (
    extract_architecture,
    extract_architecture_from_artifact,
    is_hardware_architecture_artifact,
)
from nativehelper.domain.exceptions import (
    ConfigurationError,
    InvalidVersion,
    NativeHelperError,
    UnknownArchitecture,
)
from nativehelper.domain.interfaces import PackageInspectorInterface
from nativehelper.domain.models import (
    NDK_ARCHITECTURES,
    PAYLOAD_DIRECTORIES,
    Architecture,
    Artifact,
    ArtifactType,
    PackagingKind,
    Project,
    VersionSpec,
    packaging_kind,
)
from nativehelper.domain.version import parse_ndk_version, validate_ndk_version

__all__ = [
    # Models
    "Architecture",
    "Artifact",
    "ArtifactType",
    "NDK_ARCHITECTURES",
    "PAYLOAD_DIRECTORIES",
    "PackagingKind",
    "Project",
    "VersionSpec",
    "packaging_kind",
    # Rules
    "extract_architecture",
    "extract_architecture_from_artifact",
    "is_hardware_architecture_artifact",
    "parse_ndk_version",
    "validate_ndk_version",
    # Interfaces
    "PackageInspectorInterface",
    # Exceptions
    "NativeHelperError",
    "InvalidVersion",
    "UnknownArchitecture",
    "ConfigurationError",
]
