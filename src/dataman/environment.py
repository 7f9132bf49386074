"""Environment: the host capabilities a DataMan delegates byte work to."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable
from concurrent.futures import Executor
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

import requests

from dataman.blobs import Blob, BlobLike
from dataman.errors import TransportError, UnsupportedEnvironmentError
from dataman.source import encode_data_uri

if TYPE_CHECKING:
    from typing import Any

logger = logging.getLogger(__name__)

BlobFactory = Callable[[bytes, str | None], BlobLike]
BlobSlicer = Callable[[BlobLike, int, int, str | None], BlobLike]
BlobReader = Callable[[BlobLike], bytes]
DataUriReader = Callable[[BlobLike, str | None], str]
Fetcher = Callable[[str], BlobLike]
Saver = Callable[[BlobLike, str], Path]

_CAPABILITIES = ("make_blob", "slice_blob", "read_blob", "read_data_uri", "fetch", "save")
_DEFAULT_DATA_URI_TYPE = "application/octet-stream"


def make_blob(data: bytes, media_type: str | None) -> Blob:
    """Build an in-memory Blob from raw bytes."""
    return Blob(data, media_type=media_type)


def slice_blob(blob: BlobLike, start: int, end: int, media_type: str | None) -> BlobLike:
    """Cut bytes ``[start, end)`` out of a blob."""
    return blob.slice(start, end, media_type)


def read_blob(blob: BlobLike) -> bytes:
    """Read a blob's bytes."""
    return blob.read()


def read_data_uri(blob: BlobLike, media_type: str | None) -> str:
    """Encode a blob as a base64 data URI.

    The media type falls back to the blob's own, then to ``application/octet-stream``.
    """
    resolved = media_type or blob.media_type or _DEFAULT_DATA_URI_TYPE
    return encode_data_uri(blob.read(), resolved)


def save_blob(blob: BlobLike, filename: str) -> Path:
    """Write a blob's bytes to ``filename`` and return the written path."""
    path = Path(filename)
    path.write_bytes(blob.read())
    logger.debug("Saved %d bytes to %s", blob.size, path)
    return path


class HttpFetcher:
    """Fetch a URL with an HTTP GET and return the body as a Blob.

    The blob's media type comes from the response ``Content-Type`` header.
    Any ``requests`` failure, including a non-2xx status, becomes a TransportError.
    """

    def __init__(self, *, timeout: float | None = None, session: requests.Session | None = None) -> None:
        """Initialize with an optional request timeout and session."""
        self._timeout = timeout
        self._session = session

    @property
    def timeout(self) -> float | None:
        """Return the request timeout in seconds."""
        return self._timeout

    def __call__(self, url: str) -> Blob:
        """Fetch ``url`` and return its body."""
        client: Any = self._session if self._session is not None else requests
        logger.debug("Fetching %s", url)
        try:
            response = client.get(url, timeout=self._timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise TransportError(url, str(exc)) from exc
        content_type = response.headers.get("Content-Type")
        media_type = content_type.split(";", 1)[0].strip() if content_type else None
        logger.debug("Fetched %d bytes from %s", len(response.content), url)
        return Blob(response.content, media_type=media_type or None)


@dataclass(frozen=True, slots=True)
class Environment:
    """Capability provider injected into DataMan instances.

    Each capability may be ``None`` to model a host that lacks it; operations
    needing a missing capability raise UnsupportedEnvironmentError. Blocking
    work (fetching, reading, saving) runs on ``executor`` when one is given,
    and inline otherwise.
    """

    make_blob: BlobFactory | None = make_blob
    slice_blob: BlobSlicer | None = slice_blob
    read_blob: BlobReader | None = read_blob
    read_data_uri: DataUriReader | None = read_data_uri
    fetch: Fetcher | None = field(default_factory=HttpFetcher)
    save: Saver | None = save_blob
    executor: Executor | None = None

    def has(self, capability: str) -> bool:
        """Return whether a capability is available."""
        if capability not in _CAPABILITIES:
            msg = f"Unknown capability: {capability!r}"
            raise ValueError(msg)
        return getattr(self, capability) is not None

    def require(self, capability: str) -> Callable[..., Any]:
        """Return a capability, raising UnsupportedEnvironmentError when absent."""
        if not self.has(capability):
            raise UnsupportedEnvironmentError(capability)
        return getattr(self, capability)

    def without(self, *capabilities: str) -> Environment:
        """Return a copy of this environment lacking the given capabilities."""
        for capability in capabilities:
            if capability not in _CAPABILITIES:
                msg = f"Unknown capability: {capability!r}"
                raise ValueError(msg)
        return dataclasses.replace(self, **dict.fromkeys(capabilities))


def default_environment() -> Environment:
    """Return an environment providing every capability, running work inline."""
    return Environment()
