"""DataMan sources and accessors."""

import logging
import tempfile
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from dataman import DataMan, DataManBuffer, Environment, HttpFetcher, log_error, open_file

logging.basicConfig(level=logging.INFO)


def show(error: BaseException | None, result: object) -> None:
    print(f"  error={error!r}, result={result!r}")


# ---- Raw bytes ----
# Bytes become an in-memory blob tagged with the given media type.

dm = DataMan(bytes([72, 101, 108, 108, 111]), "text/plain")
print(f"[bytes] {dm}")
dm.get_data_uri(show)
dm.get_binary(1, 4, show)

# ---- Data URI ----
# The media type comes from the URI; the blob is decoded on first use.

dm = DataMan("data:text/plain;base64,SGVsbG8=")
print(f"\n[data uri] {dm}")
dm.size(show)
dm.get_binary(12, 20, show)

# ---- Files ----
# open_file guesses the media type; ranges read only the requested bytes.

with tempfile.TemporaryDirectory() as tmpdir:
    sample = Path(tmpdir) / "digits.txt"
    sample.write_bytes(b"0123456789")

    dm = DataMan(open_file(sample))
    print(f"\n[file] {dm}")
    dm.get_binary(3, 8, show)
    dm.save_as(Path(tmpdir) / "copy.txt", show)

# ---- Remote URL on a worker pool ----
# Fetches run on the executor; errors arrive through the future or callback.

with ThreadPoolExecutor(max_workers=2) as executor:
    env = Environment(fetch=HttpFetcher(timeout=10.0), executor=executor)
    dm = DataMan("https://www.example.com/", "text/html", environment=env)
    print(f"\n[url] {dm}")
    future = dm.size(log_error)
    print(f"  size={future.result() if future.exception() is None else None}")

# ---- Server-side buffer ----

buffer = DataManBuffer(b"Hello", "text/plain")
print(f"\n[buffer] {buffer}, type={buffer.type()}, size={buffer.size()}")
print(f"  data uri={buffer.get_data_uri()}")
