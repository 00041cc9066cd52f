"""Recursive, overwrite-aware and suffix-filtered file copying."""

from __future__ import annotations

import logging
import os
import shutil
from typing import Iterator, List, Tuple

from ..errors import AlreadyExistsError, NotADirectoryPathError, NotAFilePathError, PathLike
from ..models import EntryDescriptor
from .file_utils import atomic_write, ensure_directory
from .probe import describe, exists

COPY_BUFFER_SIZE = 1 << 16


def copy_file(source_file_path: PathLike, destination_dir_path: PathLike, overwrite: bool = False) -> str:
    """Copies a file into a directory, keeping its name and permission bits.

    Given a source of ``/home/user/junk.txt`` and a destination of
    ``/tmp/test`` the result is ``/tmp/test/junk.txt``. Missing destination
    directories are created with the mode of the source file's parent.
    Returns the path of the written file.
    """

    source = describe(source_file_path)
    if source.is_dir:
        raise NotAFilePathError(source_file_path)

    file_name = os.path.basename(source.path)
    destination_dir = os.fspath(destination_dir_path)
    destination = os.path.join(destination_dir, file_name)
    if not overwrite and exists(destination):
        raise AlreadyExistsError(file_name, destination_dir)

    parent = describe(os.path.dirname(os.path.abspath(source.path)))
    ensure_directory(destination_dir, parent.mode)

    with open(source.path, "rb") as src_handle, atomic_write(destination, source.mode) as dest_handle:
        shutil.copyfileobj(src_handle, dest_handle, COPY_BUFFER_SIZE)

    logging.debug("Copied %s to %s", source.path, destination)
    return destination


def copy_directory(source_dir_path: PathLike, destination_dir_path: PathLike, overwrite: bool = False) -> List[str]:
    """Recursively copies a directory's contents into the destination.

    Given ``/home/user1`` and ``/tmp/junk``, the files of ``/home/user1``
    end up directly below ``/tmp/junk``. Every source directory is
    recreated, empty ones included. The first failure aborts the copy.
    """

    root = _require_directory(source_dir_path)
    ensure_directory(destination_dir_path, root.mode)

    copied: List[str] = []
    for entry, target in _walk(source_dir_path, destination_dir_path):
        if entry.is_dir(follow_symlinks=False):
            ensure_directory(target, describe(entry.path).mode)
            continue
        copied.append(copy_file(entry.path, target, overwrite))
    return copied


def copy_files_with_suffix(
    source_dir_path: PathLike,
    destination_dir_path: PathLike,
    suffix: str,
    overwrite: bool = False,
) -> List[str]:
    """Recursively copies files whose name ends with ``suffix``.

    The match is case-sensitive. Destination directories are only created
    when a matching file is copied into them.
    """

    _require_directory(source_dir_path)

    copied: List[str] = []
    for entry, target in _walk(source_dir_path, destination_dir_path):
        if entry.is_dir(follow_symlinks=False) or not entry.name.endswith(suffix):
            continue
        copied.append(copy_file(entry.path, target, overwrite))
    return copied


def _require_directory(path: PathLike) -> EntryDescriptor:
    info = describe(path)
    if not info.is_dir:
        raise NotADirectoryPathError(path)
    return info


def _sorted_entries(path: str) -> Iterator[os.DirEntry]:
    with os.scandir(path) as listing:
        return iter(sorted(listing, key=lambda entry: entry.name))


def _walk(source_dir_path: PathLike, destination_dir_path: PathLike) -> Iterator[Tuple[os.DirEntry, str]]:
    """Yields ``(entry, destination)`` pairs depth-first in name order.

    For a directory entry the destination is the directory to create for
    it; for a file it is the directory the file belongs in. A directory is
    listed only after it has been yielded.
    """

    stack = [(_sorted_entries(os.fspath(source_dir_path)), os.fspath(destination_dir_path))]
    while stack:
        entries, target = stack[-1]
        entry = next(entries, None)
        if entry is None:
            stack.pop()
            continue
        if entry.is_dir(follow_symlinks=False):
            child_target = os.path.join(target, entry.name)
            yield entry, child_target
            stack.append((_sorted_entries(entry.path), child_target))
        else:
            yield entry, target
