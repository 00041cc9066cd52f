"""Exception types raised by the cabinet helpers.

Every error derives from :class:`OSError` so callers can handle filesystem
failures uniformly; the offending path is always available as ``filename``.
Plain I/O failures (disk full, permission denied, ...) are not wrapped and
propagate as the original ``OSError``.
"""

from __future__ import annotations

import errno
import os
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]

ERROR_FILE_EXCEEDS_MAXIMUM_SIZE = "The file's size exceeds the specified size"


class CabinetError(OSError):
    """Base class for errors raised by cabinet itself."""


class MissingPathError(CabinetError, FileNotFoundError):
    """Raised when a required source path does not exist."""

    def __init__(self, path: PathLike) -> None:
        super().__init__(errno.ENOENT, f"'{os.fspath(path)}' does not exist", os.fspath(path))


class NotADirectoryPathError(CabinetError, NotADirectoryError):
    """Raised when a path expected to be a directory is not one."""

    def __init__(self, path: PathLike) -> None:
        super().__init__(
            errno.ENOTDIR,
            f"Failed to copy directory, '{os.fspath(path)}' is not a directory",
            os.fspath(path),
        )


class AlreadyExistsError(CabinetError, FileExistsError):
    """Raised when a destination file exists and overwriting is disallowed."""

    def __init__(self, file_name: str, destination_dir: PathLike) -> None:
        destination = os.fspath(destination_dir)
        super().__init__(
            errno.EEXIST,
            f"File '{file_name}' already exists in destination directory '{destination}'",
            os.path.join(destination, file_name),
        )
        self.file_name = file_name
        self.destination_dir = destination


class FileTooLargeError(CabinetError):
    """Raised when a file is larger than the caller allows reading into memory."""

    def __init__(self, path: PathLike, size: int, max_size: int) -> None:
        super().__init__(errno.EFBIG, ERROR_FILE_EXCEEDS_MAXIMUM_SIZE, os.fspath(path))
        self.size = size
        self.max_size = max_size


class DownloadTimeoutError(CabinetError, TimeoutError):
    """Raised when a download does not finish within its overall time limit."""

    def __init__(self, url: str, timeout: float) -> None:
        super().__init__(errno.ETIMEDOUT, f"Download from {url} exceeded {timeout}s", url)
        self.url = url
        self.timeout = timeout


class NotAFilePathError(CabinetError, IsADirectoryError):
    """Raised when a path expected to be a regular file is a directory."""

    def __init__(self, path: PathLike) -> None:
        super().__init__(
            errno.EISDIR,
            f"Failed to copy file, '{os.fspath(path)}' is a directory",
            os.fspath(path),
        )
