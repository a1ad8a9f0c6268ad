"""
Filesystem metadata and listing for fileshim.

Provides one synchronous capability object for querying local paths:
- size / last write time of an existing file
- existence and is-directory checks
- non-recursive directory listing

Usage:
    from fileshim.services.fs import FileSystemService

    fs = FileSystemService()
    nbytes = fs.size("/var/log/app.log")
    names = fs.list_files("/var/log")

Every failure is logged (operation + path) before it is raised. Only
``exists`` treats a missing path as a normal result.
"""

import os
import stat
from typing import Any

from loguru import logger

from fileshim.exceptions import EnumerationFailure, NotADirectory, StatFailure


class FileSystemService:
    """
    Stateless wrapper over the OS file metadata and enumeration calls.
    """

    def __init__(self, log: Any = None):
        """
        Initialize FileSystemService.

        Args:
            log: Logger used to report failures. Anything with an ``error``
                method works; defaults to the loguru logger bound to the
                ``FileUtils`` component.
        """
        self.log = log if log is not None else logger.bind(component="FileUtils")

    def _stat(self, operation: str, path: str) -> os.stat_result:
        try:
            return os.stat(path)
        except (OSError, ValueError) as e:  # ValueError: embedded null byte
            error = f'{operation}: stat failed for file "{path}"'
            self.log.error(error)
            raise StatFailure(error, operation=operation, path=path) from e

    def size(self, path: str | os.PathLike) -> int:
        """
        Return the size of a file in bytes.

        Raises:
            StatFailure: If the path cannot be stat'ed (missing, no permission)
        """
        return self._stat("size", os.fspath(path)).st_size

    def last_write_time(self, path: str | os.PathLike) -> int:
        """
        Return the modification time in POSIX-epoch seconds.

        Raises:
            StatFailure: If the path cannot be stat'ed
        """
        return int(self._stat("lastWriteTime", os.fspath(path)).st_mtime)

    def exists(self, path: str | os.PathLike) -> bool:
        """Check whether the path resolves to any filesystem entry."""
        return os.path.exists(path)

    def is_directory(self, path: str | os.PathLike) -> bool:
        """
        Check whether the path is a directory.

        Returns False for an existing non-directory.

        Raises:
            StatFailure: If the path cannot be stat'ed, including when missing
        """
        return stat.S_ISDIR(self._stat("isDirectory", os.fspath(path)).st_mode)

    def list_files(self, directory: str | os.PathLike) -> list[str]:
        """
        List entry names directly inside a directory.

        Names keep the casing the OS returns and come back in enumeration
        order (unsorted).

        Raises:
            NotADirectory: If the path is missing or not a directory
            EnumerationFailure: If the directory cannot be opened for listing
        """
        directory = os.fspath(directory)

        if not os.path.isdir(directory):
            error = f'listFiles: "{directory}" is not a directory'
            self.log.error(error)
            raise NotADirectory(error, operation="listFiles", path=directory)

        try:
            with os.scandir(directory) as entries:
                files = [entry.name for entry in entries]
        except OSError as e:
            error = f'listFiles: opendir failed for file "{directory}"'
            self.log.error(error)
            raise EnumerationFailure(error, operation="listFiles", path=directory) from e

        return files


# Singleton instance
_fs_service: FileSystemService | None = None


def get_fs_service() -> FileSystemService:
    """Get or create FileSystemService singleton."""
    global _fs_service
    if _fs_service is None:
        _fs_service = FileSystemService()
    return _fs_service


def size(path: str | os.PathLike) -> int:
    return get_fs_service().size(path)


def last_write_time(path: str | os.PathLike) -> int:
    return get_fs_service().last_write_time(path)


def exists(path: str | os.PathLike) -> bool:
    return get_fs_service().exists(path)


def is_directory(path: str | os.PathLike) -> bool:
    return get_fs_service().is_directory(path)


def list_files(directory: str | os.PathLike) -> list[str]:
    return get_fs_service().list_files(directory)
