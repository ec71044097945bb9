"""Caller-owned byte stream over a datastream's content."""

from __future__ import annotations

from types import TracebackType
from typing import Callable, Iterable, Iterator

_CHUNK_SIZE = 64 * 1024


class ContentStream:
    """Iterator of ``bytes`` chunks backed by a releasable resource.

    Whoever receives a stream from ``Fedora.get_content`` owns it and must
    :meth:`close` it when done, however much of it was read.  Closing more
    than once is a no-op.
    """

    def __init__(
        self,
        chunks: Iterable[bytes],
        on_close: Callable[[], None] | None = None,
    ) -> None:
        self._chunks = iter(chunks)
        self._on_close = on_close
        self._closed = False

    @classmethod
    def from_bytes(cls, data: bytes, chunk_size: int = _CHUNK_SIZE) -> ContentStream:
        """Stream over an in-memory buffer."""
        return cls(data[i : i + chunk_size] for i in range(0, len(data), chunk_size))

    @property
    def closed(self) -> bool:
        return self._closed

    def __iter__(self) -> Iterator[bytes]:
        return self

    def __next__(self) -> bytes:
        if self._closed:
            raise ValueError("I/O operation on closed stream.")
        return next(self._chunks)

    def read(self) -> bytes:
        """Return everything not yet consumed."""
        return b"".join(self)

    def close(self) -> None:
        """Release the underlying resource."""
        if self._closed:
            return
        self._closed = True
        if self._on_close is not None:
            self._on_close()

    def __enter__(self) -> ContentStream:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
