"""
Domain interfaces (Ports) for native dependency scanning.

Implementations live in the infrastructure layer and are injected into
the application layer.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class PackageInspectorInterface(ABC):
    """
    Port for looking inside an unpacked library package.

    Implementations must be read-only and must treat a missing directory
    as empty rather than as an error.
    """

    @abstractmethod
    def native_binaries(
        self, directory: Path, extension: str, recurse: bool = True
    ) -> tuple[Path, ...]:
        """
        List native binaries below a payload directory.

        Args:
            directory: Payload directory of an unpacked package
            extension: File suffix identifying the binaries, e.g. ".so"
            recurse: Also search ABI subdirectories

        Returns:
            Matching files, empty if none or if the directory is missing
        """
