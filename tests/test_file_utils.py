"""Tests for directory creation, safe writes and file naming."""

import os
import stat

import pytest

from cabinet.utils.file_utils import atomic_write, ensure_directory, filename_from_url, sanitize_filename


class TestEnsureDirectory:
    def test_creates_missing_parents(self, tmp_path):
        target = tmp_path / "a" / "b" / "c"
        assert ensure_directory(target) == str(target)
        assert target.is_dir()

    def test_existing_directory_is_fine(self, tmp_path):
        ensure_directory(tmp_path)
        assert tmp_path.is_dir()

    def test_applies_mode_to_every_created_level(self, tmp_path):
        previous = os.umask(0o022)
        try:
            ensure_directory(tmp_path / "a" / "b", 0o711)
        finally:
            os.umask(previous)
        assert stat.S_IMODE(os.stat(tmp_path / "a").st_mode) == 0o711
        assert stat.S_IMODE(os.stat(tmp_path / "a" / "b").st_mode) == 0o711

    def test_file_in_the_way(self, tmp_path, make_file):
        make_file(tmp_path / "a")
        with pytest.raises(FileExistsError):
            ensure_directory(tmp_path / "a" / "b")


class TestAtomicWrite:
    def test_writes_with_mode(self, tmp_path):
        target = tmp_path / "out.bin"
        with atomic_write(target, 0o640) as handle:
            handle.write(b"payload")
        assert target.read_bytes() == b"payload"
        assert stat.S_IMODE(os.stat(target).st_mode) == 0o640

    def test_error_discards_temporary_file(self, tmp_path, make_file):
        target = make_file(tmp_path / "out.bin", b"before")
        with pytest.raises(RuntimeError):
            with atomic_write(target) as handle:
                handle.write(b"partial")
                raise RuntimeError("boom")
        assert target.read_bytes() == b"before"
        assert os.listdir(tmp_path) == ["out.bin"]


class TestNames:
    def test_sanitize_filename(self):
        assert sanitize_filename('a/b:c*?"<>|d') == "abcd"
        assert sanitize_filename("  ", default="x") == "x"

    def test_filename_from_url(self):
        assert filename_from_url("https://host/dir/file%20name.zip?x=1") == "file name.zip"
        assert filename_from_url("https://host/") == "download"
