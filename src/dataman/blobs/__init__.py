"""Blob handles: in-memory and file-backed binary data for dataman."""

from dataman.blobs._base import BlobLike, clamp_range
from dataman.blobs._file import FileBlob
from dataman.blobs._helpers import guess_media_type, open_file
from dataman.blobs._memory import Blob

__all__ = [
    "Blob",
    "BlobLike",
    "FileBlob",
    "clamp_range",
    "guess_media_type",
    "open_file",
]
