"""
native-helper: native library selection for Android builds.

Classifies dependency artifacts by ABI, finds native libraries bundled in
unpacked library packages, and validates the NDK revision.

Example:
    from nativehelper import NativeDependencyScanner, Project, validate_ndk_version
    from nativehelper.infrastructure import FilesystemPackageInspector

    validate_ndk_version(7, "r8b")
    scanner = NativeDependencyScanner(project, FilesystemPackageInspector())
    natives = scanner.collect_native_dependencies(Path("target/unpacked-libs"))
"""

# Application layer
from nativehelper.application.scanner import NativeDependencyScanner

# Domain rules
from nativehelper.domain.architecture import (
    extract_architecture,
    extract_architecture_from_artifact,
    is_hardware_architecture_artifact,
)

# Domain exceptions
from nativehelper.domain.exceptions import (
    ConfigurationError,
    InvalidVersion,
    NativeHelperError,
    UnknownArchitecture,
)
from nativehelper.domain.models import (
    NDK_ARCHITECTURES,
    Architecture,
    Artifact,
    ArtifactType,
    PackagingKind,
    Project,
    VersionSpec,
)
from nativehelper.domain.version import parse_ndk_version, validate_ndk_version

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Models
    "Architecture",
    "Artifact",
    "ArtifactType",
    "NDK_ARCHITECTURES",
    "PackagingKind",
    "Project",
    "VersionSpec",
    # Rules
    "extract_architecture",
    "extract_architecture_from_artifact",
    "is_hardware_architecture_artifact",
    "parse_ndk_version",
    "validate_ndk_version",
    # Application
    "NativeDependencyScanner",
    # Exceptions
    "NativeHelperError",
    "InvalidVersion",
    "UnknownArchitecture",
    "ConfigurationError",
]
