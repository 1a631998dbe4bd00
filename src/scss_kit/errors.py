"""Error hierarchy for scss-kit."""
from __future__ import annotations

from pathlib import Path


class ScssKitError(Exception):
    """Base error for all scss-kit errors."""


class ConfigurationError(ScssKitError):
    """The project configuration is missing or malformed."""


class SourceNotFoundError(ScssKitError):
    """An explicitly named source file does not exist."""

    def __init__(self, path: Path, message: str | None = None) -> None:
        self.path = path
        super().__init__(message or f"file not found: {path}")


class PathEscapeError(ScssKitError):
    """A computed output path resolves outside its designated root."""

    def __init__(self, path: Path, root: Path) -> None:
        self.path = path
        self.root = root
        super().__init__(f"{path} is outside {root}")
