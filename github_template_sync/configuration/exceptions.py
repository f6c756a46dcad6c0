"""Contains exceptions raised when loading application configuration."""

from pathlib import Path
from typing import Any


class ConfigError(Exception):
    """Raised when the sync configuration is unreadable or malformed."""

    def __init__(self, message: str, path: Path | str | None = None, errors: list[Any] | None = None) -> None:
        """Initializes the exception with the offending file and any validation errors."""
        if path is not None:
            message = f"{message} (in file {str(path)!r})"
        super().__init__(message)
        self.path = path
        self.errors = errors or []
