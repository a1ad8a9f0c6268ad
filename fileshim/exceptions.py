"""Shared exception types for fileshim."""

from __future__ import annotations


class FileUtilsError(RuntimeError):
    """Base exception for filesystem utility errors."""

    def __init__(self, message: str, *, operation: str = "", path: str = "") -> None:
        super().__init__(message)
        self.operation = operation
        self.path = path


class StatFailure(FileUtilsError):
    """Metadata query could not retrieve attributes for a path."""


class NotADirectory(FileUtilsError):
    """Enumeration requested on a path that is not a directory (or is missing)."""


class EnumerationFailure(FileUtilsError):
    """Directory exists but its entries could not be enumerated."""


class TempDirUnavailable(FileUtilsError):
    """No temp directory could be resolved for a scoped temp helper."""
