"""
Streaming upload pipeline.

The multipart body of an upload is produced by a background task while
httpx transmits it, through a bounded BodyPipe:

    stream --read--> encoder task --write--> BodyPipe --iterate--> httpx

The encoder never raises: its task result is either None or the single
EncodingError it hit, collected by the caller once the HTTP exchange is
over. An encoding failure outranks whatever the transport returned, since
the service may have answered to a truncated body. A transport that stops
reading before the body is complete makes the encoder fail the same way.
"""

import asyncio
import inspect
import logging
from typing import AsyncIterable, AsyncIterator, BinaryIO, Mapping, Optional, Union

import httpx

from chatapi.errors import EncodingError, TransportError
from chatapi.http.multipart import MultipartWriter
from chatapi.http.pipe import BodyPipe
from config.constants import UPLOAD_FILE_FIELD

logger = logging.getLogger(__name__)

UploadStream = Union[BinaryIO, AsyncIterable[bytes]]


class UploadPipeline:
    """
    Sends one multipart upload per call through an httpx.AsyncClient.

    Args:
        http: Client used to send the request
        chunk_size: Bytes read from the input stream at a time
        max_chunks: Chunks the pipe buffers before the encoder blocks
    """

    def __init__(self, http: httpx.AsyncClient, chunk_size: int = 32 * 1024, max_chunks: int = 4):
        self.http = http
        self.chunk_size = chunk_size
        self.max_chunks = max_chunks

    async def send(
        self,
        url: str,
        filename: str,
        fields: Mapping[str, str],
        data: UploadStream
    ) -> httpx.Response:
        """
        POST `data` as part "file" plus one part per field.

        Returns:
            The (fully read) HTTP response, not yet checked for status

        Raises:
            EncodingError: the encoder failed, even if the server answered
            TransportError: the HTTP exchange failed at the network level

        Other exceptions from httpx.AsyncClient.send (cancellation, bugs in
        a custom transport) propagate unwrapped once the encoder has ended.
        """
        pipe = BodyPipe(max_chunks=self.max_chunks)
        writer = MultipartWriter(pipe)

        request = self.http.build_request(
            "POST",
            url,
            content=pipe,
            headers={"Content-Type": writer.content_type}
        )

        producer = asyncio.create_task(
            self._produce(writer, pipe, filename, dict(fields), data),
            name=f"multipart-encoder:{filename}"
        )

        response: Optional[httpx.Response] = None
        transport_error: Optional[httpx.HTTPError] = None
        encoding_error: Optional[EncodingError] = None
        try:
            response = await self.http.send(request)
        except httpx.HTTPError as e:
            transport_error = e
        finally:
            # Unblocks an encoder still waiting on a full pipe, so the
            # encoder is always collected, also when send() raised
            # something else (cancellation included), which propagates as is
            await pipe.close_reader()
            encoding_error = await producer

        if encoding_error is not None:
            if response is not None:
                logger.warning(
                    f"Upload of {filename} got HTTP {response.status_code} "
                    f"but its body was not fully encoded"
                )
            raise encoding_error

        if transport_error is not None:
            raise TransportError(f"POST {url} failed: {transport_error}") from transport_error

        return response

    async def _produce(
        self,
        writer: MultipartWriter,
        pipe: BodyPipe,
        filename: str,
        fields: dict[str, str],
        data: UploadStream
    ) -> Optional[EncodingError]:
        """Encode the whole body into the pipe; always closes the write end."""
        try:
            await writer.create_form_file(UPLOAD_FILE_FIELD, filename)
            copied = 0
            async for chunk in self._iter_stream(data):
                await writer.write(chunk)
                copied += len(chunk)
            for name, value in fields.items():
                await writer.write_field(name, value)
            await writer.close()
            logger.debug(f"Encoded {copied} bytes of {filename} and {len(fields)} fields")
            return None
        except Exception as e:
            # PipeClosedError here means the transport stopped reading early
            logger.error(f"Error encoding upload of {filename}: {e}")
            error = EncodingError(f"Could not encode upload of {filename}: {e}")
            error.__cause__ = e
            return error
        finally:
            await pipe.close_writer()

    async def _iter_stream(self, data: UploadStream) -> AsyncIterator[bytes]:
        """Chunks of the input stream; blocking reads run in a worker thread."""
        read = getattr(data, "read", None)
        if read is None:
            async for chunk in data:
                if chunk:
                    yield bytes(chunk)
            return

        if inspect.iscoroutinefunction(read):
            while True:
                chunk = await read(self.chunk_size)
                if not chunk:
                    return
                yield bytes(chunk)

        while True:
            chunk = await asyncio.to_thread(read, self.chunk_size)
            if not chunk:
                return
            yield bytes(chunk)
