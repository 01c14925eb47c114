"""
Architecture classification of native artifacts.

Artifacts encode their ABI in the classifier, either verbatim
(``armeabi-v7a``) or followed by a variant suffix (``armeabi-v7a-debug``).
Classifiers that match neither are treated as legacy artifacts built for
the default architecture.
"""

from nativehelper.domain.models import Architecture, Artifact, PackagingKind

# Longest names first so armeabi-v7a-x is not read as armeabi
_BY_LENGTH = sorted(Architecture, key=lambda a: len(a.value), reverse=True)


def extract_architecture(
    classifier: str | None, default_architecture: Architecture
) -> Architecture:
    """
    Resolve the architecture a classifier refers to.

    Args:
        classifier: Artifact classifier, if any
        default_architecture: Returned for missing or legacy classifiers

    Returns:
        The matching architecture, or default_architecture
    """
    if not classifier:
        return default_architecture

    for architecture in _BY_LENGTH:
        if classifier == architecture.value:
            return architecture

    for architecture in _BY_LENGTH:
        if classifier.startswith(architecture.value + "-"):
            return architecture

    return default_architecture


def extract_architecture_from_artifact(
    artifact: Artifact, default_architecture: Architecture
) -> Architecture:
    return extract_architecture(artifact.classifier, default_architecture)


def is_hardware_architecture_artifact(
    artifact: Artifact,
    architecture: Architecture,
    default_architecture: Architecture,
) -> bool:
    """
    True if the artifact is a shared native library built for `architecture`.

    Packaging is checked first: a managed archive never qualifies, whatever
    its classifier says.
    """
    if artifact.kind is not PackagingKind.SHARED_LIBRARY:
        return False
    return (
        extract_architecture_from_artifact(artifact, default_architecture)
        is architecture
    )
