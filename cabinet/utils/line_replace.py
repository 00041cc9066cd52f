"""In-place replacement of a single line in a text file."""

from __future__ import annotations

import logging
from typing import Optional

from ..errors import FileTooLargeError, PathLike
from .file_utils import atomic_write
from .probe import describe


def replace_line_in_file(
    path: PathLike,
    match: str,
    replacement: str,
    line_ending: str = "\n",
    max_size: Optional[int] = None,
    encoding: str = "utf-8",
) -> bool:
    """Replaces the first line containing ``match`` with ``replacement``.

    Nothing is written if some line already equals ``replacement``
    (compared lowercased, so no multi-character folds such as "ß" to "ss")
    or no line contains ``match``. Bytes that are invalid in ``encoding``
    are carried through unchanged. ``max_size`` guards against reading very
    large files into memory. Returns whether the file was rewritten.
    """

    if not line_ending:
        raise ValueError("line_ending must not be empty")

    info = describe(path)
    if max_size is not None and info.size > max_size:
        raise FileTooLargeError(path, info.size, max_size)

    with open(info.path, "r", encoding=encoding, errors="surrogateescape", newline="") as handle:
        lines = handle.read().split(line_ending)

    lowered = replacement.lower()
    if any(line.lower() == lowered for line in lines):
        logging.debug("%s already contains %r", info.path, replacement)
        return False

    for index, line in enumerate(lines):
        if match in line:
            lines[index] = replacement
            break
    else:
        return False

    with atomic_write(info.path, info.mode) as handle:
        handle.write(line_ending.join(lines).encode(encoding, errors="surrogateescape"))
    logging.debug("Replaced line %s of %s", index + 1, info.path)
    return True
