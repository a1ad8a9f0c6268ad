"""fileshim services."""

from fileshim.services.fs import FileSystemService, get_fs_service

__all__ = [
    "FileSystemService",
    "get_fs_service",
]
