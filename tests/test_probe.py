"""Tests for existence and kind probing."""

import os
import stat

import pytest

from cabinet.errors import MissingPathError
from cabinet.models import EntryKind
from cabinet.utils.probe import describe, directory_exists, exists, file_exists, probe


@pytest.fixture
def unreadable(tmp_path, monkeypatch):
    """A path whose stat fails with a permission error."""
    target = str(tmp_path / "locked")
    real_stat = os.stat

    def fake_stat(path, *args, **kwargs):
        if os.fspath(path) == target:
            raise PermissionError(13, "Permission denied", target)
        return real_stat(path, *args, **kwargs)

    monkeypatch.setattr(os, "stat", fake_stat)
    return target


class TestProbe:
    def test_absent(self, tmp_path):
        assert probe(tmp_path / "missing") is EntryKind.ABSENT

    def test_file(self, tmp_path, make_file):
        path = make_file(tmp_path / "a.txt")
        assert probe(path) is EntryKind.FILE

    def test_directory(self, tmp_path):
        assert probe(tmp_path) is EntryKind.DIRECTORY

    def test_below_regular_file_is_absent(self, tmp_path, make_file):
        path = make_file(tmp_path / "a.txt")
        assert probe(os.path.join(path, "child")) is EntryKind.ABSENT

    def test_stat_error_is_indeterminate(self, unreadable):
        assert probe(unreadable) is EntryKind.INDETERMINATE


class TestExists:
    def test_exists_for_file_and_directory(self, tmp_path, make_file):
        path = make_file(tmp_path / "a.txt")
        assert exists(path)
        assert exists(tmp_path)

    def test_missing(self, tmp_path):
        assert not exists(tmp_path / "missing")

    def test_unreadable_path_counts_as_existing(self, unreadable):
        assert exists(unreadable)

    def test_file_exists_only_for_files(self, tmp_path, make_file):
        path = make_file(tmp_path / "a.txt")
        assert file_exists(path)
        assert not file_exists(tmp_path)
        assert not file_exists(tmp_path / "missing")

    def test_kind_checks_require_a_readable_path(self, unreadable):
        assert not file_exists(unreadable)
        assert not directory_exists(unreadable)

    def test_directory_exists_only_for_directories(self, tmp_path, make_file):
        path = make_file(tmp_path / "a.txt")
        assert directory_exists(tmp_path)
        assert not directory_exists(path)
        assert not directory_exists(tmp_path / "missing")


class TestDescribe:
    def test_file_metadata(self, tmp_path, make_file):
        path = make_file(tmp_path / "a.bin", b"12345", mode=0o640)
        info = describe(path)
        assert info.kind is EntryKind.FILE
        assert info.size == 5
        assert info.mode == 0o640
        assert info.path == str(path)

    def test_directory_metadata(self, tmp_path):
        info = describe(tmp_path)
        assert info.is_dir
        assert info.mode == stat.S_IMODE(os.stat(tmp_path).st_mode)

    def test_missing_raises(self, tmp_path):
        with pytest.raises(MissingPathError) as excinfo:
            describe(tmp_path / "missing")
        assert excinfo.value.filename == str(tmp_path / "missing")
        assert isinstance(excinfo.value, FileNotFoundError)

    def test_other_stat_errors_propagate(self, unreadable):
        with pytest.raises(PermissionError):
            describe(unreadable)

    def test_reads_fresh_metadata(self, tmp_path, make_file):
        path = make_file(tmp_path / "a.bin", b"1")
        assert describe(path).size == 1
        path.write_bytes(b"123")
        assert describe(path).size == 3
