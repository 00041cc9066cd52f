from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Optional

import pytest


def _write_file(path: Path, content: bytes = b"data", mode: Optional[int] = None) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content)
    if mode is not None:
        os.chmod(path, mode)
    return path


@pytest.fixture
def make_file() -> Callable[..., Path]:
    """Write a file, creating parent directories as needed."""
    return _write_file


@pytest.fixture
def source_tree(tmp_path) -> Path:
    """Create src/x/y/file1, src/z/file2 and src/top.txt."""
    src = tmp_path / "src"
    _write_file(src / "x" / "y" / "file1", b"first file\n")
    _write_file(src / "z" / "file2", b"second file\n")
    _write_file(src / "top.txt", b"top level\n")
    return src
