"""
Reading the NDK revision from an installed NDK.

Older NDKs ship a RELEASE.TXT whose first token is the revision, e.g.
``r10e (64-bit)``.
"""

import logging
from pathlib import Path

from nativehelper.domain.exceptions import ConfigurationError
from nativehelper.domain.models import VersionSpec
from nativehelper.domain.version import validate_ndk_version

logger = logging.getLogger(__name__)

RELEASE_FILE = "RELEASE.TXT"


def read_ndk_release(ndk_dir: Path) -> str:
    """
    Read the revision string of the NDK installed at `ndk_dir`.

    Raises:
        ConfigurationError: If the release file is missing or empty
    """
    release_file = Path(ndk_dir) / RELEASE_FILE
    if not release_file.is_file():
        raise ConfigurationError(f"NDK release file not found: {release_file}")

    tokens = release_file.read_text(encoding="utf-8").split()
    if not tokens:
        raise ConfigurationError(f"NDK release file is empty: {release_file}")

    logger.debug("NDK at %s reports %s", ndk_dir, tokens[0])
    return tokens[0]


def check_ndk(ndk_dir: Path, minimum_major: int) -> VersionSpec:
    """
    Validate the NDK installed at `ndk_dir` against a minimum revision.

    Raises:
        ConfigurationError: If the revision cannot be read
        InvalidVersion: If the revision is malformed or too old
    """
    return validate_ndk_version(minimum_major, read_ndk_release(ndk_dir))
