"""Typed errors for dataman."""


class DataManError(Exception):
    """Base exception for all dataman errors."""


class UnsupportedInputError(DataManError):
    """Raised when a DataMan is constructed from a value of unknown shape."""

    def __init__(self, value_type: str) -> None:
        """Initialize with the rejected value's type name."""
        self.value_type = value_type
        super().__init__(f"DataMan received data that it doesn't support: {value_type}")


class UnrecognizedInputError(DataManError):
    """Raised when a DataMan is constructed from a string in no known scheme."""

    def __init__(self, prefix: str) -> None:
        """Initialize with the leading characters of the rejected string."""
        self.prefix = prefix
        super().__init__(f"DataMan received an unrecognized data string: {prefix!r}")


class UnsupportedEnvironmentError(DataManError):
    """Raised when a host capability required by an operation is absent."""

    def __init__(self, capability: str) -> None:
        """Initialize with the missing capability's name."""
        self.capability = capability
        super().__init__(f"Environment does not provide the {capability!r} capability")


class RangeOutOfBoundsError(DataManError):
    """Raised when a byte range starts at or beyond the end of the data."""

    def __init__(self, start: int, size: int) -> None:
        """Initialize with the requested start and the total size."""
        self.start = start
        self.size = size
        super().__init__(f"Start position {start} is beyond end of data ({size})")


class MissingContentTypeError(DataManError):
    """Raised when a data URI is requested but no media type is known."""

    def __init__(self) -> None:
        """Initialize with a fixed message."""
        super().__init__("Cannot build a data URI without a content type")


class TransportError(DataManError):
    """Raised when fetching a remote URL fails."""

    def __init__(self, url: str, reason: str) -> None:
        """Initialize with the URL and a description of the failure."""
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to fetch {url}: {reason}")


class MalformedDataUriError(DataManError):
    """Raised when a data URI payload cannot be decoded."""

    def __init__(self, reason: str) -> None:
        """Initialize with a description of the decoding failure."""
        self.reason = reason
        super().__init__(f"Malformed data URI: {reason}")
