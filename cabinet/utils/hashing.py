"""Streaming file content hashing."""

from __future__ import annotations

import hashlib
from typing import Any, Callable, Union

from ..errors import PathLike

HASH_CHUNK_SIZE = 8192

HashAlgorithm = Union[str, Callable[[], Any], Any]


def file_hash(path: PathLike, algorithm: HashAlgorithm = "sha256", chunk_size: int = HASH_CHUNK_SIZE) -> str:
    """Returns the hex digest of a file's contents.

    ``algorithm`` may be a :mod:`hashlib` name (``"md5"``), a constructor
    (``hashlib.sha1``) or a fresh hash object exposing ``update`` and
    ``hexdigest``.
    """

    hasher = _make_hasher(algorithm)
    with open(path, "rb") as file_handle:
        for chunk in iter(lambda: file_handle.read(chunk_size), b""):
            hasher.update(chunk)
    return hasher.hexdigest()


def _make_hasher(algorithm: HashAlgorithm) -> Any:
    if isinstance(algorithm, str):
        return hashlib.new(algorithm)
    if hasattr(algorithm, "update") and hasattr(algorithm, "hexdigest"):
        return algorithm
    if callable(algorithm):
        return algorithm()
    raise TypeError(f"Unsupported hash algorithm: {algorithm!r}")
