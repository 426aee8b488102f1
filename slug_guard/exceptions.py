"""Exception hierarchy for slug-guard.

The repair handlers never raise these: failures from the platform propagate
as-is. They cover configuration and the local record store.
"""


class SlugGuardError(Exception):
    """Base exception for slug-guard errors."""


class ConfigurationError(SlugGuardError):
    """Configuration is missing or invalid."""


class StorageError(SlugGuardError):
    """Record file could not be read or parsed."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)
