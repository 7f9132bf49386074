"""Blob: immutable in-memory binary data."""

from __future__ import annotations

from dataclasses import dataclass

from dataman.blobs._base import clamp_range


@dataclass(frozen=True, slots=True)
class Blob:
    """In-memory blob holding its bytes and media type."""

    data: bytes
    media_type: str | None = None

    def __post_init__(self) -> None:
        """Normalize bytes-like payloads to immutable bytes."""
        if not isinstance(self.data, bytes):
            object.__setattr__(self, "data", bytes(self.data))

    @property
    def size(self) -> int:
        """Return the length of the data in bytes."""
        return len(self.data)

    def slice(
        self,
        start: int | None = None,
        end: int | None = None,
        media_type: str | None = None,
    ) -> Blob:
        """Return a new Blob over bytes ``[start, end)``."""
        lower, upper = clamp_range(self.size, start, end)
        return Blob(self.data[lower:upper], media_type=media_type)

    def read(self) -> bytes:
        """Return the blob's bytes."""
        return self.data
