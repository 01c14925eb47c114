"""
Infrastructure layer for native dependency handling.

Contains adapters for external concerns (filesystem, NDK installs, config files).
"""

from nativehelper.infrastructure.config import load_project
from nativehelper.infrastructure.filesystem import FilesystemPackageInspector
from nativehelper.infrastructure.ndk import check_ndk, read_ndk_release

__all__ = [
    "FilesystemPackageInspector",
    "check_ndk",
    "load_project",
    "read_ndk_release",
]
