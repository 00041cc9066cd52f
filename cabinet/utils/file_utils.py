"""Filesystem helpers for preparing output folders and writing files safely."""

from __future__ import annotations

import contextlib
import os
import re
import tempfile
from pathlib import Path
from typing import BinaryIO, Iterator, Optional
from urllib.parse import unquote, urlsplit

from ..errors import PathLike

INVALID_FILENAME_CHARS = re.compile(r"[\\/:*?\"<>|]")


def sanitize_filename(value: str, default: str = "file") -> str:
    """Removes characters that are invalid on most filesystems."""

    sanitized = INVALID_FILENAME_CHARS.sub("", value or "").strip()
    return sanitized or default


def filename_from_url(url: str, default: str = "download") -> str:
    """Derives a local file name from the last path segment of ``url``."""

    segment = unquote(urlsplit(url).path.rstrip("/").rsplit("/", 1)[-1])
    return sanitize_filename(segment, default=default)


def ensure_directory(path: PathLike, mode: int = 0o777) -> str:
    """Creates a directory (and its parents) if needed.

    Every directory created along the way gets ``mode`` (minus the umask).
    """

    target = Path(path)
    missing = []
    while not target.is_dir():
        missing.append(target)
        if target.parent == target:
            break
        target = target.parent
    for directory in reversed(missing):
        directory.mkdir(mode=mode, exist_ok=True)
    return os.fspath(path)


def default_file_mode() -> int:
    """Permission bits a newly created file gets under the current umask."""

    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


@contextlib.contextmanager
def atomic_write(dest_path: PathLike, mode: Optional[int] = None) -> Iterator[BinaryIO]:
    """Yields a binary handle whose contents replace ``dest_path`` on success.

    Data goes to a temporary file next to ``dest_path``; it is fsynced,
    given ``mode`` (or the umask default) and renamed over the destination
    only when the block exits cleanly. On error the temporary file is
    removed and the destination is left as it was.
    """

    dest = os.fspath(dest_path)
    directory = os.path.dirname(os.path.abspath(dest))
    fd, tmp_path = tempfile.mkstemp(prefix=f".{os.path.basename(dest)}.", suffix=".tmp", dir=directory)
    try:
        with os.fdopen(fd, "wb") as handle:
            yield handle
            handle.flush()
            os.fsync(handle.fileno())
        os.chmod(tmp_path, default_file_mode() if mode is None else mode)
        os.replace(tmp_path, dest)
    except BaseException:
        with contextlib.suppress(FileNotFoundError):
            os.unlink(tmp_path)
        raise
