"""
Filesystem implementation of the package inspector.

Read-only: never creates, modifies or removes anything on disk.
"""

from pathlib import Path

from nativehelper.domain.interfaces import PackageInspectorInterface


class FilesystemPackageInspector(PackageInspectorInterface):
    """Finds native binaries in unpacked library packages on local disk."""

    def native_binaries(
        self, directory: Path, extension: str, recurse: bool = True
    ) -> tuple[Path, ...]:
        directory = Path(directory)
        if not directory.is_dir():
            return ()

        candidates = directory.rglob("*") if recurse else directory.iterdir()
        suffix = extension.lower()
        return tuple(
            sorted(
                path
                for path in candidates
                if path.is_file() and path.suffix.lower() == suffix
            )
        )
