"""Utility helpers for filesystem and HTTP operations."""

from .copy_ops import copy_directory, copy_file, copy_files_with_suffix
from .file_utils import atomic_write, ensure_directory, sanitize_filename
from .hashing import file_hash
from .http_client import HttpClient, download_file
from .line_replace import replace_line_in_file
from .probe import describe, directory_exists, exists, file_exists, probe

__all__ = [
    "HttpClient",
    "atomic_write",
    "copy_directory",
    "copy_file",
    "copy_files_with_suffix",
    "describe",
    "directory_exists",
    "download_file",
    "ensure_directory",
    "exists",
    "file_exists",
    "file_hash",
    "probe",
    "replace_line_in_file",
    "sanitize_filename",
]
