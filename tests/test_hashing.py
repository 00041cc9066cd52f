"""Tests for file hashing."""

import hashlib

import pytest

from cabinet.utils.hashing import file_hash


class TestFileHash:
    def test_default_is_sha256(self, tmp_path, make_file):
        path = make_file(tmp_path / "f", b"hello world")
        assert file_hash(path) == hashlib.sha256(b"hello world").hexdigest()

    def test_algorithm_by_name(self, tmp_path, make_file):
        path = make_file(tmp_path / "f", b"hello world")
        assert file_hash(path, "md5") == hashlib.md5(b"hello world").hexdigest()

    def test_algorithm_constructor(self, tmp_path, make_file):
        path = make_file(tmp_path / "f", b"hello world")
        assert file_hash(path, hashlib.sha1) == hashlib.sha1(b"hello world").hexdigest()

    def test_hash_object(self, tmp_path, make_file):
        path = make_file(tmp_path / "f", b"hello world")
        assert file_hash(path, hashlib.blake2b()) == hashlib.blake2b(b"hello world").hexdigest()

    def test_streams_across_chunks(self, tmp_path, make_file):
        content = b"x" * 100_000
        path = make_file(tmp_path / "f", content)
        assert file_hash(path, chunk_size=1000) == hashlib.sha256(content).hexdigest()

    def test_unknown_algorithm(self, tmp_path, make_file):
        path = make_file(tmp_path / "f")
        with pytest.raises(ValueError):
            file_hash(path, "not-a-hash")

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            file_hash(tmp_path / "missing")
