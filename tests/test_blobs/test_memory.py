"""Tests for the in-memory Blob."""

import pytest

from dataman.blobs import Blob, BlobLike, clamp_range


def test_blob_exposes_size_and_media_type() -> None:
    blob = Blob(b"hello world", media_type="text/plain")
    assert blob.size == 11
    assert blob.media_type == "text/plain"
    assert blob.read() == b"hello world"


def test_blob_normalizes_bytearray_to_bytes() -> None:
    blob = Blob(bytearray(b"abc"))
    assert isinstance(blob.data, bytes)
    assert blob.read() == b"abc"


def test_blob_is_immutable() -> None:
    blob = Blob(b"abc")
    with pytest.raises(AttributeError):
        blob.data = b"xyz"  # type: ignore[misc]


def test_slice_returns_half_open_range() -> None:
    blob = Blob(bytes(range(10)), media_type="application/octet-stream")
    part = blob.slice(3, 8, "application/x-part")
    assert part.read() == bytes([3, 4, 5, 6, 7])
    assert part.media_type == "application/x-part"


def test_slice_clamps_end_past_size() -> None:
    blob = Blob(b"abcdef")
    assert blob.slice(4, 100).read() == b"ef"


def test_slice_with_inverted_range_is_empty() -> None:
    blob = Blob(b"abcdef")
    assert blob.slice(5, 2).size == 0


def test_slice_negative_offsets_count_from_end() -> None:
    blob = Blob(b"abcdef")
    assert blob.slice(-2).read() == b"ef"


def test_satisfies_protocol() -> None:
    assert isinstance(Blob(b""), BlobLike)


def test_clamp_range() -> None:
    assert clamp_range(10, 3, 8) == (3, 8)
    assert clamp_range(10, None, None) == (0, 10)
    assert clamp_range(10, 12, 20) == (10, 10)
    assert clamp_range(10, 6, 2) == (6, 6)
