"""Custom exceptions for docnav."""

from __future__ import annotations

from pathlib import Path


class DocnavError(Exception):
    """Base exception for docnav operations."""


class ConfigFileError(DocnavError):
    """Configuration source file could not be read or written."""


class PatchError(DocnavError):
    """Error while splicing navigation into a configuration source."""


class PatchTargetNotFoundError(PatchError):
    """No navigation assignment could be located in the configuration source."""

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        if path is not None:
            message = f"{message} ({path})"
        super().__init__(message)
        self.path = path
