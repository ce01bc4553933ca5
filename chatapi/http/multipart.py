"""
Streaming multipart/form-data encoder.

Writes parts incrementally into an async sink (anything with
`async write(bytes)`), so a file part can be copied chunk by chunk
instead of being built in memory.

Layout of the produced body:

    --BOUNDARY\r\n
    Content-Disposition: form-data; name="file"; filename="a.txt"\r\n
    Content-Type: application/octet-stream\r\n
    \r\n
    <content>\r\n
    --BOUNDARY\r\n
    Content-Disposition: form-data; name="title"\r\n
    \r\n
    <value>\r\n
    --BOUNDARY--\r\n
"""

import uuid
from typing import Optional, Protocol

CRLF = "\r\n"


class AsyncSink(Protocol):
    async def write(self, data: bytes) -> int: ...


def _escape_quotes(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')


class MultipartWriter:
    """Incremental multipart/form-data writer over an async sink."""

    def __init__(self, sink: AsyncSink, boundary: Optional[str] = None):
        self._sink = sink
        self.boundary = boundary or uuid.uuid4().hex
        self._parts = 0
        self._closed = False

    @property
    def content_type(self) -> str:
        """Value for the request Content-Type header."""
        return f"multipart/form-data; boundary={self.boundary}"

    async def _start_part(self, headers: list[str]) -> None:
        if self._closed:
            raise ValueError("multipart writer is closed")
        # Every part after the first also terminates the previous part body
        delimiter = f"--{self.boundary}{CRLF}" if self._parts == 0 else f"{CRLF}--{self.boundary}{CRLF}"
        head = delimiter + "".join(h + CRLF for h in headers) + CRLF
        await self._sink.write(head.encode("utf-8"))
        self._parts += 1

    async def create_form_file(
        self,
        field_name: str,
        filename: str,
        content_type: str = "application/octet-stream"
    ) -> None:
        """Open a file part; its content follows through write()."""
        await self._start_part([
            f'Content-Disposition: form-data; name="{_escape_quotes(field_name)}"; '
            f'filename="{_escape_quotes(filename)}"',
            f"Content-Type: {content_type}",
        ])

    async def write(self, data: bytes) -> int:
        """Append raw bytes to the current part."""
        if self._parts == 0:
            raise ValueError("no part has been created")
        return await self._sink.write(data)

    async def write_field(self, name: str, value: str) -> None:
        """Write a complete scalar form field."""
        await self._start_part([
            f'Content-Disposition: form-data; name="{_escape_quotes(name)}"',
        ])
        await self._sink.write(value.encode("utf-8"))

    async def close(self) -> None:
        """Write the terminating boundary."""
        if self._closed:
            return
        self._closed = True
        trailer = f"--{self.boundary}--{CRLF}"
        if self._parts:
            trailer = CRLF + trailer
        await self._sink.write(trailer.encode("utf-8"))
