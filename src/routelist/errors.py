"""routelist exception hierarchy.

Raised by the scanner and configuration layer; the CLI is the only
place that turns them into messages and exit codes.
"""

from pathlib import Path


class RouteListError(Exception):
    """Base for all routelist-specific errors."""


class ConfigurationError(RouteListError):
    """Raised when a :class:`~routelist.config.ScanConfig` is invalid."""


class RootNotFound(RouteListError):  # noqa: N818
    """The routes root does not exist."""

    def __init__(self, path: str | Path) -> None:
        self.path = path
        super().__init__(f"Directory not found: {path}")


class RootNotADirectory(RouteListError):  # noqa: N818
    """The routes root exists but is not a directory."""

    def __init__(self, path: str | Path) -> None:
        self.path = path
        super().__init__(f"{path} is not a directory")
