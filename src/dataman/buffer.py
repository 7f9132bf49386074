"""DataManBuffer: accessor over a raw in-memory byte buffer."""

from __future__ import annotations

import io
from typing import TYPE_CHECKING

from dataman.errors import MissingContentTypeError, UnsupportedInputError
from dataman.source import BufferSource, SourceKind, encode_data_uri

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any

    Callback = Callable[[BaseException | None, Any], object]


class DataManBuffer:
    """Accessor for data already held in memory as bytes.

    Every operation completes synchronously. Results are returned directly and,
    when a ``callback`` is given, also passed to ``callback(None, result)``.
    Without a callback errors are raised; with one they go to
    ``callback(error, None)`` and the method returns ``None``.
    """

    def __init__(self, buffer: bytes | bytearray | memoryview, media_type: str | None = None) -> None:
        """Initialize with the buffer and its media type, if known."""
        if not isinstance(buffer, (bytes, bytearray, memoryview)):
            raise UnsupportedInputError(type(buffer).__name__)
        self._source = BufferSource(buffer=bytes(buffer), media_type=media_type)
        self._size: int | None = None
        self._data_uri: str | None = None

    def __repr__(self) -> str:
        return f"DataManBuffer(size={len(self._source.buffer)}, media_type={self._source.media_type!r})"

    @property
    def source(self) -> BufferSource:
        """Return the buffer source variant."""
        return self._source

    @property
    def source_kind(self) -> SourceKind:
        """Return ``SourceKind.BUFFER``."""
        return self._source.kind

    def get_buffer(self, callback: Callback | None = None) -> bytes:
        """Return the buffer."""
        buffer = self._source.buffer
        if callback is not None:
            callback(None, buffer)
        return buffer

    def get_data_uri(self, callback: Callback | None = None) -> str | None:
        """Return the buffer as a base64 data URI.

        Fails with MissingContentTypeError when no media type is known.
        """
        if self._data_uri is None:
            media_type = self._source.media_type
            if not media_type:
                error = MissingContentTypeError()
                if callback is None:
                    raise error
                callback(error, None)
                return None
            self._data_uri = encode_data_uri(self._source.buffer, media_type)
        if callback is not None:
            callback(None, self._data_uri)
        return self._data_uri

    def size(self, callback: Callback | None = None) -> int:
        """Return the buffer length in bytes."""
        if self._size is None:
            self._size = len(self._source.buffer)
        if callback is not None:
            callback(None, self._size)
        return self._size

    def type(self) -> str | None:
        """Return the media type of the data."""
        return self._source.media_type

    def create_read_stream(self) -> io.BytesIO:
        """Return a new binary stream positioned at the start of the buffer."""
        return io.BytesIO(self._source.buffer)
