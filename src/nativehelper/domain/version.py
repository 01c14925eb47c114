"""
NDK revision parsing and validation.

Revisions look like ``r7``, ``r8b`` or ``r100b``: a literal ``r``, the major
number, and an optional single lowercase letter for a point release.
"""

import re

from nativehelper.domain.exceptions import InvalidVersion
from nativehelper.domain.models import VersionSpec

_VERSION_PATTERN = re.compile(r"r(?P<major>[0-9]+)(?P<suffix>[a-z]?)")


def parse_ndk_version(version: str) -> VersionSpec:
    """
    Parse an NDK revision string.

    Raises:
        InvalidVersion: If the string is not of the form r<digits>[<letter>]
    """
    match = _VERSION_PATTERN.fullmatch(version)
    if match is None:
        raise InvalidVersion(version, "Malformed NDK version")
    return VersionSpec(major=int(match["major"]), suffix=match["suffix"])


def validate_ndk_version(
    minimum_major: int, version: str, minimum_suffix: str = ""
) -> VersionSpec:
    """
    Check that an NDK revision is at least the required one.

    Args:
        minimum_major: Lowest acceptable major revision
        version: Revision string reported by the NDK, e.g. "r8b"
        minimum_suffix: Optional point release of the minimum major

    Returns:
        The parsed revision

    Raises:
        InvalidVersion: If the string is malformed or below the minimum
    """
    parsed = parse_ndk_version(version)
    minimum = VersionSpec(major=minimum_major, suffix=minimum_suffix)
    if parsed < minimum:
        raise InvalidVersion(version, f"NDK version must be at least {minimum}")
    return parsed
