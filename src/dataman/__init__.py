"""dataman: one piece of binary data, any representation."""

import importlib.metadata as importlib_metadata

from dataman.accessor import DataMan, log_error
from dataman.blobs import Blob, BlobLike, FileBlob, guess_media_type, open_file
from dataman.buffer import DataManBuffer
from dataman.environment import Environment, HttpFetcher, default_environment
from dataman.errors import (
    DataManError,
    MalformedDataUriError,
    MissingContentTypeError,
    RangeOutOfBoundsError,
    TransportError,
    UnrecognizedInputError,
    UnsupportedEnvironmentError,
    UnsupportedInputError,
)
from dataman.source import (
    BlobSource,
    BufferSource,
    DataSource,
    DataUriSource,
    SourceKind,
    UrlSource,
    classify,
)


def _detect_version() -> str:
    """Return installed package version or a local fallback when metadata is unavailable."""
    try:
        return importlib_metadata.version("dataman")
    except importlib_metadata.PackageNotFoundError:
        return "0.0.0+unknown"


__version__ = _detect_version()

__all__ = [
    "Blob",
    "BlobLike",
    "BlobSource",
    "BufferSource",
    "DataMan",
    "DataManBuffer",
    "DataManError",
    "DataSource",
    "DataUriSource",
    "Environment",
    "FileBlob",
    "HttpFetcher",
    "MalformedDataUriError",
    "MissingContentTypeError",
    "RangeOutOfBoundsError",
    "SourceKind",
    "TransportError",
    "UnrecognizedInputError",
    "UnsupportedEnvironmentError",
    "UnsupportedInputError",
    "UrlSource",
    "classify",
    "default_environment",
    "guess_media_type",
    "log_error",
    "open_file",
]
