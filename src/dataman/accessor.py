"""DataMan: lazy multi-representation accessor for one piece of binary data.

A DataMan is built from a blob handle, raw bytes, a data URI, or an http(s)
URL, and hands the data back in whichever form a caller asks for:

- ``get_blob``: a blob handle (decoding a data URI or fetching a URL first)
- ``get_binary``: the bytes, whole or a single contiguous range
- ``get_data_uri``: a self-contained ``data:<type>;base64,...`` string
- ``size``: the byte length
- ``save_as``: the bytes written to a file

Each asynchronous accessor returns a ``concurrent.futures.Future`` and also
accepts a ``callback(error, result)`` that is called exactly once on
completion. Work that blocks runs on the environment's executor, or inline
when there is none, in which case the returned future is already resolved.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import CancelledError, Future
from typing import TYPE_CHECKING

from dataman.environment import Environment, default_environment
from dataman.errors import RangeOutOfBoundsError
from dataman.source import BlobSource, DataUriSource, UrlSource, classify, decode_data_uri

if TYPE_CHECKING:
    from collections.abc import Callable
    from concurrent.futures import Executor
    from pathlib import Path
    from typing import Any

    from dataman.blobs import BlobLike
    from dataman.source import DataSource, SourceKind

    Callback = Callable[[BaseException | None, Any], object]

logger = logging.getLogger(__name__)


def log_error(error: BaseException | None, result: object = None) -> None:
    """Callback that logs a delivered error and discards successful results."""
    if error is not None:
        logger.error("DataMan operation failed: %s", error, exc_info=error)


def _resolved(value: object) -> Future[Any]:
    future: Future[Any] = Future()
    future.set_result(value)
    return future


def _run(executor: Executor | None, fn: Callable[..., Any], *args: object) -> Future[Any]:
    """Run ``fn`` on ``executor``, or inline when there is none."""
    if executor is not None:
        return executor.submit(fn, *args)
    future: Future[Any] = Future()
    try:
        result = fn(*args)
    except Exception as exc:  # noqa: BLE001
        future.set_exception(exc)
    else:
        future.set_result(result)
    return future


def _failure(done: Future[Any]) -> BaseException | None:
    """Return the error a finished future ended with, counting cancellation as one."""
    if done.cancelled():
        return CancelledError()
    return done.exception()


def _settle(target: Future[Any], done: Future[Any]) -> None:
    """Resolve a running ``target`` with the outcome of ``done``."""
    error = _failure(done)
    if error is not None:
        target.set_exception(error)
    else:
        target.set_result(done.result())


def _forward(source: Future[Any], target: Future[Any]) -> None:
    """Resolve ``target`` with the outcome of ``source`` unless it was cancelled."""

    def _copy(done: Future[Any]) -> None:
        if target.set_running_or_notify_cancel():
            _settle(target, done)

    source.add_done_callback(_copy)


def _then(future: Future[Any], step: Callable[[Any], object]) -> Future[Any]:
    """Return a future for ``step(result)`` once ``future`` succeeds.

    ``step`` may return a plain value or another future to wait on. Failures of
    ``future`` or exceptions raised by ``step`` resolve the returned future.
    Cancelling the returned future skips ``step`` but leaves ``future`` alone.
    """
    chained: Future[Any] = Future()

    def _on_done(done: Future[Any]) -> None:
        if not chained.set_running_or_notify_cancel():
            return
        error = _failure(done)
        if error is not None:
            chained.set_exception(error)
            return
        try:
            outcome = step(done.result())
        except Exception as exc:  # noqa: BLE001
            chained.set_exception(exc)
            return
        if isinstance(outcome, Future):
            outcome.add_done_callback(lambda inner: _settle(chained, inner))
        else:
            chained.set_result(outcome)

    future.add_done_callback(_on_done)
    return chained


def _notify(future: Future[Any], callback: Callback | None) -> Future[Any]:
    """Attach ``callback(error, result)`` to ``future`` and return it."""
    if callback is None:
        return future

    def _deliver(done: Future[Any]) -> None:
        error = _failure(done)
        if error is not None:
            callback(error, None)
        else:
            callback(None, done.result())

    future.add_done_callback(_deliver)
    return future


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class DataMan:
    """Uniform accessor over a blob, data URI, or remote URL.

    The source is classified once at construction. Derived representations
    (the blob behind a data URI or URL, the size, the data URI) are computed on
    first use and cached for the lifetime of the instance.
    """

    def __init__(
        self,
        data: object,
        media_type: str | None = None,
        *,
        environment: Environment | None = None,
    ) -> None:
        """Classify ``data`` and keep the payload needed to derive every other form.

        ``media_type`` is used for raw bytes and URLs; blob handles and data URIs
        carry their own.
        """
        self._environment = environment if environment is not None else default_environment()
        self._source = classify(data, media_type, self._environment)
        self._lock = threading.Lock()
        self._blob_future: Future[BlobLike] | None = None
        self._size: int | None = None
        self._data_uri: str | None = None
        if isinstance(self._source, BlobSource):
            self._blob_future = _resolved(self._source.blob)

    def __repr__(self) -> str:
        return f"DataMan(source_kind={self.source_kind.value!r}, media_type={self.media_type!r})"

    @property
    def source(self) -> DataSource:
        """Return the source variant this instance was built from."""
        return self._source

    @property
    def source_kind(self) -> SourceKind:
        """Return which kind of input this instance was built from."""
        return self._source.kind

    @property
    def media_type(self) -> str | None:
        """Return the declared or inferred media type."""
        return self._source.media_type

    @property
    def environment(self) -> Environment:
        """Return the capability provider used by this instance."""
        return self._environment

    def _blob(self) -> Future[BlobLike]:
        """Return the cached or in-flight blob future, starting one if needed.

        Concurrent callers share one in-flight materialization. A failed or
        cancelled one is dropped so that a later call starts over.
        """
        with self._lock:
            current = self._blob_future
            if current is not None and not (current.done() and _failure(current) is not None):
                return current
            self._blob_future = self._materialize()
            return self._blob_future

    def _materialize(self) -> Future[BlobLike]:
        source = self._source
        if isinstance(source, DataUriSource):
            make_blob = self._environment.require("make_blob")
            logger.debug("Decoding data URI into a blob (media_type=%s)", source.media_type)
            return _run(None, lambda: make_blob(decode_data_uri(source.uri), source.media_type))
        if isinstance(source, UrlSource):
            fetch = self._environment.require("fetch")
            logger.debug("Fetching blob from %s", source.url)
            return _run(self._environment.executor, fetch, source.url)
        if isinstance(source, BlobSource):
            return _resolved(source.blob)
        msg = f"DataMan cannot materialize a blob from a {source.kind.value} source."
        raise TypeError(msg)

    def get_blob(self, callback: Callback | None = None) -> Future[BlobLike]:
        """Return a future for the data as a blob handle.

        Each call gets its own future, so cancelling it affects no other caller.
        """
        blob: Future[BlobLike] = Future()
        _forward(self._blob(), blob)
        return _notify(blob, callback)

    def get_binary(
        self,
        start: int | Callback | None = None,
        end: int | None = None,
        callback: Callback | None = None,
    ) -> Future[bytes]:
        """Return a future for the data's bytes.

        ``get_binary(callback)`` and ``get_binary()`` read everything. With
        ``start`` and ``end`` only ``[start, min(end, size))`` is read, and a
        ``start`` at or past the end fails with RangeOutOfBoundsError.
        """
        if callable(start):
            callback, start, end = start, None, None
        ranged = start is not None or end is not None
        lower = upper = 0
        if ranged:
            if not (_is_int(start) and _is_int(end)):
                msg = "get_binary range requires integer start and end."
                raise TypeError(msg)
            lower, upper = int(start), int(end)  # type: ignore[arg-type]
            if lower < 0:
                msg = f"get_binary start must be >= 0; got {lower}."
                raise ValueError(msg)

        read = self._environment.require("read_blob")
        slicer = self._environment.require("slice_blob") if ranged else None
        executor = self._environment.executor

        def _read_range(blob: BlobLike) -> bytes:
            size = blob.size
            if lower >= size:
                raise RangeOutOfBoundsError(lower, size)
            return read(slicer(blob, lower, min(upper, size), self.media_type))

        def _read(blob: BlobLike) -> Future[bytes]:
            if slicer is None:
                return _run(executor, read, blob)
            return _run(executor, _read_range, blob)

        return _notify(_then(self._blob(), _read), callback)

    def get_data_uri(self, callback: Callback) -> Future[str]:
        """Return a future for the data as a base64 data URI."""
        if not callable(callback):
            msg = "get_data_uri requires a callback function."
            raise TypeError(msg)
        if self._data_uri is not None:
            return _notify(_resolved(self._data_uri), callback)

        to_data_uri = self._environment.require("read_data_uri")
        executor = self._environment.executor

        def _convert(blob: BlobLike) -> Future[str]:
            return _run(executor, to_data_uri, blob, self.media_type)

        future = _then(self._blob(), _convert)
        future.add_done_callback(self._remember_data_uri)
        return _notify(future, callback)

    def _remember_data_uri(self, done: Future[str]) -> None:
        if done.exception() is None and self._data_uri is None:
            self._data_uri = done.result()

    def size(self, callback: Callback) -> Future[int]:
        """Return a future for the data's length in bytes."""
        if not callable(callback):
            msg = "size requires a callback function."
            raise TypeError(msg)
        if self._size is not None:
            return _notify(_resolved(self._size), callback)

        def _measure(blob: BlobLike) -> int:
            if self._size is None:
                self._size = blob.size
            return self._size

        return _notify(_then(self._blob(), _measure), callback)

    def save_as(self, filename: str | Path, callback: Callback | None = None) -> Future[Path]:
        """Write the data to ``filename``; the future resolves to the written path."""
        save = self._environment.require("save")
        executor = self._environment.executor

        def _save(blob: BlobLike) -> Future[Path]:
            logger.debug("Saving %s to %s", self, filename)
            return _run(executor, save, blob, str(filename))

        return _notify(_then(self._blob(), _save), callback)
