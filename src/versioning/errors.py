"""Domain errors raised by the version discovery engine."""

from typing import Optional


class ResourceError(Exception):
    """A repository location could not be listed.

    ``message`` is stable text other components may match on, ``location`` is
    the listing directory that was requested and ``cause`` the underlying
    transport failure (also chained as ``__cause__``).
    """

    def __init__(self, message: str, location: Optional[str] = None, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.location = location
        self.cause = cause


class ConfigError(ValueError):
    """Invalid or unreadable configuration file."""
