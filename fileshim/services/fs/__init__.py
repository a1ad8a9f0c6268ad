"""Filesystem utilities for fileshim."""

from fileshim.services.fs.service import (
    FileSystemService,
    get_fs_service,
    size,
    last_write_time,
    exists,
    is_directory,
    list_files,
)
from fileshim.services.fs.files import (
    get_temp_dir,
    create_temp_file_name,
    temp_file_from_bytes,
    temp_file_empty,
    temp_directory,
    safe_delete,
)

__all__ = [
    "FileSystemService",
    "get_fs_service",
    "size",
    "last_write_time",
    "exists",
    "is_directory",
    "list_files",
    "get_temp_dir",
    "create_temp_file_name",
    "temp_file_from_bytes",
    "temp_file_empty",
    "temp_directory",
    "safe_delete",
]
