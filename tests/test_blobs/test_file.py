"""Tests for FileBlob."""

from pathlib import Path

import pytest

from dataman.blobs import Blob, BlobLike, FileBlob


def _write(tmp_path: Path, name: str, data: bytes) -> Path:
    path = tmp_path / name
    path.write_bytes(data)
    return path


def test_file_blob_reads_whole_file(tmp_path: Path) -> None:
    path = _write(tmp_path, "data.bin", b"persistent data")
    blob = FileBlob(path, media_type="application/octet-stream")
    assert blob.read() == b"persistent data"
    assert blob.size == len(b"persistent data")
    assert blob.media_type == "application/octet-stream"


def test_file_blob_exposes_path_and_name(tmp_path: Path) -> None:
    path = _write(tmp_path, "photo.png", b"\x89PNG")
    blob = FileBlob(str(path))
    assert blob.path == path
    assert blob.name == "photo.png"
    assert blob.media_type is None


def test_file_blob_slice_reads_only_range(tmp_path: Path) -> None:
    path = _write(tmp_path, "digits.txt", b"0123456789")
    part = FileBlob(path).slice(2, 5, "text/plain")
    assert isinstance(part, Blob)
    assert part.read() == b"234"
    assert part.media_type == "text/plain"


def test_file_blob_slice_clamps_to_file_size(tmp_path: Path) -> None:
    path = _write(tmp_path, "digits.txt", b"0123456789")
    assert FileBlob(path).slice(8, 50).read() == b"89"


def test_file_blob_missing_path_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="not a file"):
        FileBlob(tmp_path / "missing.bin")


def test_file_blob_rejects_directory(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        FileBlob(tmp_path)


def test_file_blob_satisfies_protocol(tmp_path: Path) -> None:
    path = _write(tmp_path, "a.bin", b"a")
    assert isinstance(FileBlob(path), BlobLike)


def test_file_blob_repr_mentions_path(tmp_path: Path) -> None:
    path = _write(tmp_path, "a.bin", b"a")
    assert "a.bin" in repr(FileBlob(path))
