"""Read-only existence and kind checks for filesystem paths."""

from __future__ import annotations

import logging
import os
import stat

from ..errors import MissingPathError, PathLike
from ..models import EntryDescriptor, EntryKind


def probe(path: PathLike) -> EntryKind:
    """Reports whether ``path`` is absent, a file or a directory.

    Stat failures other than "not found" (permission denied, I/O errors)
    yield ``EntryKind.INDETERMINATE`` instead of raising.
    """

    try:
        st = os.stat(path)
    except FileNotFoundError:
        return EntryKind.ABSENT
    except NotADirectoryError:
        # a path component is a regular file, so nothing can live below it
        return EntryKind.ABSENT
    except OSError as exc:
        logging.debug("Unable to stat %s: %s", path, exc)
        return EntryKind.INDETERMINATE
    if stat.S_ISDIR(st.st_mode):
        return EntryKind.DIRECTORY
    return EntryKind.FILE


def exists(path: PathLike) -> bool:
    """Checks if a file or directory exists.

    A path that cannot be inspected is reported as existing.
    """

    return probe(path) is not EntryKind.ABSENT


def file_exists(path: PathLike) -> bool:
    """Checks that ``path`` is confirmed to be a regular file.

    Unlike :func:`exists` this is strict: a path that cannot be inspected
    is not reported as a file, since its kind is unknown.
    """

    return probe(path) is EntryKind.FILE


def directory_exists(path: PathLike) -> bool:
    """Checks that ``path`` is confirmed to be a directory; unreadable paths are not."""

    return probe(path) is EntryKind.DIRECTORY


def describe(path: PathLike) -> EntryDescriptor:
    """Stats ``path`` and returns its metadata, raising if it cannot be read."""

    try:
        st = os.stat(path)
    except FileNotFoundError as exc:
        raise MissingPathError(path) from exc
    kind = EntryKind.DIRECTORY if stat.S_ISDIR(st.st_mode) else EntryKind.FILE
    return EntryDescriptor(
        path=os.fspath(path),
        kind=kind,
        mode=stat.S_IMODE(st.st_mode),
        size=st.st_size,
    )
