"""Tests for DataManBuffer."""

import pytest

from dataman.buffer import DataManBuffer
from dataman.errors import MissingContentTypeError, UnsupportedInputError
from dataman.source import BufferSource, SourceKind


class _Recorder:
    def __init__(self) -> None:
        self.calls: list[tuple[BaseException | None, object]] = []

    def __call__(self, error: BaseException | None, result: object) -> None:
        self.calls.append((error, result))


def test_buffer_source_kind() -> None:
    dm = DataManBuffer(b"Hello", "text/plain")
    assert dm.source_kind is SourceKind.BUFFER
    assert isinstance(dm.source, BufferSource)


def test_buffer_accepts_bytes_like() -> None:
    assert DataManBuffer(bytearray(b"Hello")).get_buffer() == b"Hello"
    assert DataManBuffer(memoryview(b"Hello")).get_buffer() == b"Hello"


def test_buffer_rejects_other_values() -> None:
    with pytest.raises(UnsupportedInputError):
        DataManBuffer("Hello")  # type: ignore[arg-type]


def test_get_buffer_returns_and_passes_buffer() -> None:
    recorder = _Recorder()
    assert DataManBuffer(b"Hello").get_buffer(recorder) == b"Hello"
    assert recorder.calls == [(None, b"Hello")]


def test_get_data_uri_encodes_buffer() -> None:
    recorder = _Recorder()
    dm = DataManBuffer(bytes([72, 101, 108, 108, 111]), "text/plain")
    assert dm.get_data_uri(recorder) == "data:text/plain;base64,SGVsbG8="
    assert recorder.calls == [(None, "data:text/plain;base64,SGVsbG8=")]


def test_get_data_uri_is_cached() -> None:
    dm = DataManBuffer(b"Hello", "text/plain")
    first = dm.get_data_uri()
    assert dm.get_data_uri() is first


def test_get_data_uri_without_type_goes_to_callback() -> None:
    recorder = _Recorder()
    assert DataManBuffer(b"Hello").get_data_uri(recorder) is None
    assert len(recorder.calls) == 1
    error, result = recorder.calls[0]
    assert isinstance(error, MissingContentTypeError)
    assert result is None


def test_get_data_uri_without_type_raises_without_callback() -> None:
    with pytest.raises(MissingContentTypeError):
        DataManBuffer(b"Hello").get_data_uri()


def test_size_returns_value_and_calls_back() -> None:
    recorder = _Recorder()
    dm = DataManBuffer(bytes(10))
    assert dm.size(recorder) == 10
    assert dm.size() == 10
    assert recorder.calls == [(None, 10)]


def test_type_returns_media_type() -> None:
    assert DataManBuffer(b"", "image/png").type() == "image/png"
    assert DataManBuffer(b"").type() is None


def test_create_read_stream_yields_independent_streams() -> None:
    dm = DataManBuffer(b"Hello")
    first = dm.create_read_stream()
    assert first.read(2) == b"He"
    assert dm.create_read_stream().read() == b"Hello"
    assert first.read() == b"llo"


def test_repr_mentions_size_and_type() -> None:
    assert repr(DataManBuffer(b"Hello", "text/plain")) == "DataManBuffer(size=5, media_type='text/plain')"
