"""Helper functions for blob handles."""

import mimetypes
from pathlib import Path

from dataman.blobs._file import FileBlob


def guess_media_type(path: str | Path) -> str | None:
    """Guess a media type from a file name's extension."""
    media_type, _ = mimetypes.guess_type(str(path))
    return media_type


def open_file(path: str | Path, *, media_type: str | None = None) -> FileBlob:
    """Open a file as a FileBlob, guessing media_type from the extension.

    An explicit ``media_type`` takes precedence over the guess.
    """
    if media_type is None:
        media_type = guess_media_type(path)
    return FileBlob(path, media_type=media_type)
