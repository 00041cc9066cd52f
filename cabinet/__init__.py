"""Filesystem and network convenience helpers."""

__version__ = "0.1.0"

from .errors import (  # noqa: E402
    AlreadyExistsError,
    CabinetError,
    DownloadTimeoutError,
    FileTooLargeError,
    MissingPathError,
    NotADirectoryPathError,
    NotAFilePathError,
)
from .models import EntryDescriptor, EntryKind  # noqa: E402
from .utils import (  # noqa: E402
    HttpClient,
    copy_directory,
    copy_file,
    copy_files_with_suffix,
    describe,
    directory_exists,
    download_file,
    exists,
    file_exists,
    file_hash,
    probe,
    replace_line_in_file,
)

__all__ = [
    "AlreadyExistsError",
    "CabinetError",
    "DownloadTimeoutError",
    "EntryDescriptor",
    "EntryKind",
    "FileTooLargeError",
    "HttpClient",
    "MissingPathError",
    "NotADirectoryPathError",
    "NotAFilePathError",
    "copy_directory",
    "copy_file",
    "copy_files_with_suffix",
    "describe",
    "directory_exists",
    "download_file",
    "exists",
    "file_exists",
    "file_hash",
    "probe",
    "replace_line_in_file",
]
