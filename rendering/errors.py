"""Exception types raised while converting Markdown files."""

from __future__ import annotations

from pathlib import Path


class ConversionError(Exception):
    """Base class for failures that abort a conversion run."""


class ArgumentError(ConversionError):
    """Raised when the requested input/output paths cannot be paired."""


class InputReadError(ConversionError):
    """Raised when an input Markdown file cannot be read as text."""

    def __init__(self, path: str | Path, reason: str) -> None:
        super().__init__(f"Unable to read {path}: {reason}")
        self.path = str(path)


class OutputWriteError(ConversionError):
    """Raised when a destination HTML file cannot be created or written."""

    def __init__(self, path: str | Path, reason: str) -> None:
        super().__init__(f"Unable to write {path}: {reason}")
        self.path = str(path)
