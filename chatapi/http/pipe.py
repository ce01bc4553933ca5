"""
In-process byte pipe between an upload encoder and the HTTP request body.

The writer side is used by the multipart encoder task; the reader side is
handed to httpx as an async iterable request body. The buffer is bounded:
once `max_chunks` chunks are pending, `write()` suspends until the reader
consumes one, so the encoder can never run far ahead of the network.
"""

import asyncio
import logging
from collections import deque
from typing import AsyncIterator

from chatapi.errors import PipeClosedError

logger = logging.getLogger(__name__)


class BodyPipe:
    """
    Bounded single-producer / single-consumer async byte pipe.

    - write() blocks while the buffer is full.
    - read() blocks until a chunk is available or the writer closed;
      returns b"" at end of stream.
    - close_reader() makes pending and future writes fail with
      PipeClosedError, which unblocks a producer whose consumer went away.
    """

    DEFAULT_MAX_CHUNKS = 4

    def __init__(self, max_chunks: int = DEFAULT_MAX_CHUNKS):
        if max_chunks < 1:
            raise ValueError("max_chunks must be >= 1")
        self.max_chunks = max_chunks
        self._chunks: deque[bytes] = deque()
        self._cond = asyncio.Condition()
        self._writer_closed = False
        self._reader_closed = False

    @property
    def buffered_chunks(self) -> int:
        return len(self._chunks)

    @property
    def reader_closed(self) -> bool:
        return self._reader_closed

    @property
    def writer_closed(self) -> bool:
        return self._writer_closed

    async def write(self, data: bytes) -> int:
        """
        Queue `data` for the reader, waiting for room in the buffer.

        Returns:
            Number of bytes written

        Raises:
            PipeClosedError: if either side is closed
        """
        if not data:
            return 0
        async with self._cond:
            await self._cond.wait_for(
                lambda: len(self._chunks) < self.max_chunks
                or self._reader_closed
                or self._writer_closed
            )
            if self._reader_closed:
                raise PipeClosedError("write on pipe with closed reader")
            if self._writer_closed:
                raise PipeClosedError("write on closed pipe")
            self._chunks.append(bytes(data))
            self._cond.notify_all()
        return len(data)

    async def read(self) -> bytes:
        """Next chunk, or b"" once the writer closed and the buffer drained."""
        async with self._cond:
            await self._cond.wait_for(
                lambda: self._chunks or self._writer_closed or self._reader_closed
            )
            if self._reader_closed or not self._chunks:
                return b""
            chunk = self._chunks.popleft()
            self._cond.notify_all()
            return chunk

    async def close_writer(self) -> None:
        """Signal end of stream. Idempotent."""
        async with self._cond:
            self._writer_closed = True
            self._cond.notify_all()

    async def close_reader(self) -> None:
        """Stop consuming; pending chunks are dropped. Idempotent."""
        async with self._cond:
            if not self._reader_closed and self._chunks:
                logger.debug(f"Dropping {len(self._chunks)} unread chunks from upload pipe")
            self._reader_closed = True
            self._chunks.clear()
            self._cond.notify_all()

    async def __aiter__(self) -> AsyncIterator[bytes]:
        while True:
            chunk = await self.read()
            if not chunk:
                return
            yield chunk
