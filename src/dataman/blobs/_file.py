"""FileBlob: blob backed by a file on disk."""

from pathlib import Path

from dataman.blobs._base import clamp_range
from dataman.blobs._memory import Blob


class FileBlob:
    """Blob whose bytes live in a file and are read only on demand.

    The size is taken from the file system, so constructing a FileBlob or asking
    for its size never loads the payload. Slices read just the requested range.
    """

    def __init__(self, path: str | Path, *, media_type: str | None = None) -> None:
        """Initialize with a path to an existing regular file."""
        self._path = Path(path)
        if not self._path.is_file():
            msg = f"FileBlob path is not a file: {self._path}"
            raise FileNotFoundError(msg)
        self._media_type = media_type

    def __repr__(self) -> str:
        return f"FileBlob(path={str(self._path)!r}, media_type={self._media_type!r})"

    @property
    def path(self) -> Path:
        """Return the backing file path."""
        return self._path

    @property
    def name(self) -> str:
        """Return the file name."""
        return self._path.name

    @property
    def media_type(self) -> str | None:
        """Return the file's media type, if known."""
        return self._media_type

    @property
    def size(self) -> int:
        """Return the current file size in bytes."""
        return self._path.stat().st_size

    def slice(
        self,
        start: int | None = None,
        end: int | None = None,
        media_type: str | None = None,
    ) -> Blob:
        """Read bytes ``[start, end)`` into a new in-memory Blob."""
        lower, upper = clamp_range(self.size, start, end)
        with self._path.open("rb") as handle:
            handle.seek(lower)
            data = handle.read(upper - lower)
        return Blob(data, media_type=media_type)

    def read(self) -> bytes:
        """Read the whole file."""
        return self._path.read_bytes()
