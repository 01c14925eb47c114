"""
Domain exceptions for native dependency handling.

Only genuinely fatal conditions are exceptions here. Missing directories,
missing classifiers and unrecognised architecture text resolve to fallback
values instead.
"""


class NativeHelperError(Exception):
    """Base class for all native-helper errors."""


class InvalidVersion(NativeHelperError):
    """
    Raised when an NDK revision string is malformed or too old.

    This is fatal for the build step that requested validation.
    """

    def __init__(self, version: str, reason: str = "invalid NDK version"):
        """
        Args:
            version: The offending version string, verbatim
            reason: Human-readable explanation
        """
        super().__init__(f"{reason}: {version!r}")
        self.version = version
        self.reason = reason


class UnknownArchitecture(NativeHelperError):
    """Raised when a user-supplied ABI name is not a supported architecture."""

    def __init__(self, name: str):
        super().__init__(f"Unknown NDK architecture: {name!r}")
        self.name = name


class ConfigurationError(NativeHelperError):
    """Raised when configuration files are invalid or missing."""

    pass
