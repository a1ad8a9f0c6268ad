"""fileshim - Small cross-platform filesystem utility library."""

__version__ = "0.1.0"

from fileshim.exceptions import (
    FileUtilsError,
    StatFailure,
    NotADirectory,
    EnumerationFailure,
    TempDirUnavailable,
)
from fileshim.services.fs import (
    FileSystemService,
    get_fs_service,
    size,
    last_write_time,
    exists,
    is_directory,
    list_files,
    get_temp_dir,
    create_temp_file_name,
    temp_file_from_bytes,
    temp_file_empty,
    temp_directory,
    safe_delete,
)

__all__ = [
    "FileUtilsError",
    "StatFailure",
    "NotADirectory",
    "EnumerationFailure",
    "TempDirUnavailable",
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
