"""Source classification: the tagged union of DataMan inputs."""

from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING
from urllib.parse import unquote_to_bytes

from dataman.blobs import BlobLike, FileBlob
from dataman.errors import (
    MalformedDataUriError,
    UnrecognizedInputError,
    UnsupportedInputError,
)

if TYPE_CHECKING:
    from dataman.environment import Environment

_DATA_SCHEME = "data:"
_URL_SCHEMES = ("http:", "https:")
_BYTES_TYPES = (bytes, bytearray, memoryview)
_ASCII_WHITESPACE = b" \t\n\f\r"


class SourceKind(str, Enum):
    """Which representation a DataMan was constructed from."""

    BLOB = "blob"
    DATA_URI = "data_uri"
    URL = "url"
    BUFFER = "buffer"


@dataclass(frozen=True, slots=True)
class BlobSource:
    """Data held by a blob handle."""

    blob: BlobLike
    media_type: str | None

    @property
    def kind(self) -> SourceKind:
        """Return the source kind tag."""
        return SourceKind.BLOB


@dataclass(frozen=True, slots=True)
class DataUriSource:
    """Data held inline by a data URI string."""

    uri: str
    media_type: str | None

    @property
    def kind(self) -> SourceKind:
        """Return the source kind tag."""
        return SourceKind.DATA_URI


@dataclass(frozen=True, slots=True)
class UrlSource:
    """Data located at a remote http(s) URL."""

    url: str
    media_type: str | None

    @property
    def kind(self) -> SourceKind:
        """Return the source kind tag."""
        return SourceKind.URL


@dataclass(frozen=True, slots=True)
class BufferSource:
    """Data held by a raw byte buffer."""

    buffer: bytes
    media_type: str | None

    @property
    def kind(self) -> SourceKind:
        """Return the source kind tag."""
        return SourceKind.BUFFER


DataSource = BlobSource | DataUriSource | UrlSource | BufferSource


def _split_data_uri(uri: str) -> tuple[str, str]:
    """Split a data URI into its header (without ``data:``) and payload."""
    header, sep, payload = uri[len(_DATA_SCHEME) :].partition(",")
    if not sep:
        raise UnrecognizedInputError(uri[:32])
    return header, payload


def data_uri_media_type(uri: str) -> str | None:
    """Return the media type declared in a data URI header, if any."""
    header, _ = _split_data_uri(uri)
    media_type = header.split(";", 1)[0].strip()
    return media_type or None


def decode_data_uri(uri: str) -> bytes:
    """Decode a data URI payload into bytes.

    Base64 payloads are marked with a ``;base64`` parameter; anything else is
    taken as percent-encoded text. Base64 payloads may contain ASCII whitespace
    and may omit their trailing padding.
    """
    header, payload = _split_data_uri(uri)
    params = [param.strip().lower() for param in header.split(";")[1:]]
    if "base64" not in params:
        return unquote_to_bytes(payload)
    compact = unquote_to_bytes(payload).translate(None, _ASCII_WHITESPACE)
    if len(compact) % 4 == 1:
        msg = f"payload length {len(compact)} is not a valid base64 length"
        raise MalformedDataUriError(msg)
    compact += b"=" * (-len(compact) % 4)
    try:
        return base64.b64decode(compact, validate=True)
    except (binascii.Error, ValueError) as exc:
        msg = f"payload is not valid base64 ({exc})"
        raise MalformedDataUriError(msg) from exc


def encode_data_uri(data: bytes, media_type: str) -> str:
    """Encode bytes as a base64 data URI."""
    b64 = base64.b64encode(data).decode("ascii")
    return f"data:{media_type};base64,{b64}"


def classify(data: object, media_type: str | None, environment: Environment) -> DataSource:
    """Classify constructor input into exactly one source variant.

    Blob handles win over byte buffers, and the ``data:`` prefix is checked
    before the URL schemes. Byte buffers are turned into a blob right away,
    which requires the environment's ``make_blob`` capability.
    """
    if isinstance(data, FileBlob):
        return BlobSource(blob=data, media_type=data.media_type)
    if isinstance(data, BlobLike):
        return BlobSource(blob=data, media_type=data.media_type)
    if isinstance(data, _BYTES_TYPES):
        make_blob = environment.require("make_blob")
        return BlobSource(blob=make_blob(bytes(data), media_type), media_type=media_type)
    if isinstance(data, str):
        if data.startswith(_DATA_SCHEME):
            return DataUriSource(uri=data, media_type=data_uri_media_type(data))
        if data.startswith(_URL_SCHEMES):
            return UrlSource(url=data, media_type=media_type)
        raise UnrecognizedInputError(data[:32])
    raise UnsupportedInputError(type(data).__name__)
