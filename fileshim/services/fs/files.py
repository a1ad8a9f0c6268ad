"""
Temp directory and temp file utilities.

``get_temp_dir`` and ``create_temp_file_name`` never raise: an empty string
means no temp directory or temp file could be produced, and callers must
check for it. The context managers below build on them and guarantee
cleanup of what they create.
"""

import os
import shutil
import sys
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Generator

from loguru import logger

from fileshim.exceptions import TempDirUnavailable
from fileshim.settings import settings

log = logger.bind(component="FileUtils")


def get_temp_dir() -> str:
    """
    Resolve the temp directory.

    Resolution order:
        1. The override environment variable (``settings.temp.env_var``),
           returned verbatim without checking that it exists
        2. On Windows, the platform temp path ("" if it cannot be found)
        3. Elsewhere, ``settings.temp.posix_default`` (``/tmp``)

    Returns:
        Temp directory path, or "" if none could be resolved
    """
    override = os.environ.get(settings.temp.env_var)
    if override is not None:
        return override

    if sys.platform == "win32":
        try:
            return tempfile.gettempdir()
        except FileNotFoundError as e:
            log.error(f"getTempDir: no usable temp directory: {e}")
            return ""

    return settings.temp.posix_default


def create_temp_file_name() -> str:
    """
    Atomically create a new, empty, uniquely named file in the temp directory.

    The name is picked and the file created in one exclusive-create step,
    so concurrent callers (threads or processes) never get the same path.
    The file stays on disk and belongs to the caller.

    Returns:
        Path of the created file, or "" on failure
    """
    temp_dir = get_temp_dir()
    if temp_dir == "":
        log.error("createTempFileName: no temp directory available")
        return ""

    try:
        fd, path = tempfile.mkstemp(prefix=settings.temp.prefix, dir=temp_dir)
    except OSError as e:
        log.error(f'createTempFileName: mkstemp failed in "{temp_dir}": {e}')
        return ""

    os.close(fd)
    return path


def _resolve_dir(dir: str | None) -> str:
    if dir is not None:
        return dir
    temp_dir = get_temp_dir()
    if temp_dir == "":
        raise TempDirUnavailable(
            "No temp directory available", operation="getTempDir"
        )
    return temp_dir


@contextmanager
def temp_file_from_bytes(
    content: bytes,
    suffix: str = "",
    prefix: str | None = None,
    dir: str | None = None,
) -> Generator[Path, None, None]:
    """
    Create a temporary file from bytes, yield path, cleanup automatically.

    Args:
        content: Bytes to write to the temporary file
        suffix: File extension (e.g., ".json", ".bin")
        prefix: Prefix for the temp file name (default: settings.temp.prefix)
        dir: Directory for temp file (uses get_temp_dir() if None)

    Yields:
        Path to the temporary file

    Raises:
        TempDirUnavailable: If dir is None and no temp directory resolves

    Example:
        >>> with temp_file_from_bytes(b'{"k": 1}', suffix=".json") as tmp_path:
        ...     nbytes = size(tmp_path)
        # File is automatically cleaned up after the block
    """
    tmp_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            suffix=suffix,
            prefix=prefix if prefix is not None else settings.temp.prefix,
            dir=_resolve_dir(dir),
            delete=False,
        ) as tmp:
            tmp_path = Path(tmp.name)
            tmp.write(content)

        yield tmp_path

    finally:
        if tmp_path is not None:
            safe_delete(tmp_path)


@contextmanager
def temp_file_empty(
    suffix: str = "",
    prefix: str | None = None,
    dir: str | None = None,
) -> Generator[Path, None, None]:
    """
    Create an empty temporary file, yield path, cleanup automatically.

    Useful when an external process will write to the file.
    """
    with temp_file_from_bytes(b"", suffix=suffix, prefix=prefix, dir=dir) as tmp_path:
        yield tmp_path


@contextmanager
def temp_directory(
    prefix: str | None = None,
    dir: str | None = None,
) -> Generator[Path, None, None]:
    """
    Create a temporary directory, yield path, cleanup automatically.

    Args:
        prefix: Prefix for the temp directory name
        dir: Parent directory for temp directory (uses get_temp_dir() if None)

    Yields:
        Path to the temporary directory
    """
    tmp_dir: Path | None = None
    try:
        tmp_dir = Path(
            tempfile.mkdtemp(
                prefix=prefix if prefix is not None else settings.temp.prefix,
                dir=_resolve_dir(dir),
            )
        )
        yield tmp_dir

    finally:
        if tmp_dir is not None:
            try:
                shutil.rmtree(tmp_dir)
            except OSError as e:
                log.warning(f"Failed to cleanup temp directory {tmp_dir}: {e}")


def safe_delete(path: Path) -> bool:
    """
    Safely delete a file, returning success status.

    Args:
        path: Path to delete

    Returns:
        True if deleted or didn't exist, False on error
    """
    try:
        path.unlink(missing_ok=True)
        return True
    except OSError as e:
        log.warning(f"Failed to delete {path}: {e}")
        return False
