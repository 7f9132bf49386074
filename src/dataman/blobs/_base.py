"""BlobLike: protocol for binary large object handles."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


def clamp_range(size: int, start: int | None, end: int | None) -> tuple[int, int]:
    """Resolve a slice range against ``size``.

    Negative offsets count back from the end and out-of-range offsets are
    clamped, so the result always satisfies ``0 <= start <= end <= size``.
    """
    lower, upper, _ = slice(start, end).indices(size)
    return lower, max(lower, upper)


@runtime_checkable
class BlobLike(Protocol):
    """Handle to a chunk of binary data.

    Implementations expose the byte length and media type without loading the
    data, can cut a sub-range into a new handle, and can read their bytes.
    """

    @property
    def size(self) -> int:
        """Return the length of the data in bytes."""
        ...

    @property
    def media_type(self) -> str | None:
        """Return the declared media type, if any."""
        ...

    def slice(
        self,
        start: int | None = None,
        end: int | None = None,
        media_type: str | None = None,
    ) -> BlobLike:
        """Return a new handle over bytes ``[start, end)``."""
        ...

    def read(self) -> bytes:
        """Read the whole handle into memory."""
        ...
