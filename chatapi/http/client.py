"""
Base HTTP client for the chat API.

Owns the httpx.AsyncClient, the base URL and the token, and implements the
two ways of calling the API:
- do(): form-encoded POST for regular methods
- do_upload(): streaming multipart POST (see chatapi.http.upload)

Both share the same response contract: non-2xx -> ServiceError, body not
decodable -> DecodeError, envelope ok=false -> ServiceError with the
provider's message.
"""

import logging
import time
from typing import Mapping, Optional, Type, TypeVar

import httpx
from pydantic import ValidationError as PydanticValidationError

from chatapi.errors import DecodeError, ServiceError, TransportError
from chatapi.http.upload import UploadPipeline, UploadStream
from chatapi.models import APIResponse
from config.settings import ChatAPISettings, get_settings

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=APIResponse)


def append_not_empty(key: str, value: str, params: dict[str, str]) -> None:
    """Set params[key] only when value is non-empty."""
    if value:
        params[key] = value


class BaseClient:
    """
    Async client for the chat API.

    Usage:
        async with ChatClient(token="xoxb-...") as client:
            await client.channel_list()

    Args:
        token: Service token. Defaults to CHAT_API_TOKEN.
        settings: API settings. Defaults to the cached application settings.
        transport: Optional httpx transport (tests use httpx.MockTransport)
        http_client: Pre-built httpx.AsyncClient; the caller keeps ownership
    """

    def __init__(
        self,
        token: Optional[str] = None,
        settings: Optional[ChatAPISettings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        http_client: Optional[httpx.AsyncClient] = None
    ):
        self.settings = settings or get_settings().chat_api
        self.base_url = self.settings.CHAT_API_BASE_URL
        self.token = self.settings.CHAT_API_TOKEN if token is None else token
        self.trace = self.settings.CHAT_API_TRACE

        self._owns_http = http_client is None
        self._http = http_client or httpx.AsyncClient(
            timeout=self.settings.CHAT_API_TIMEOUT,
            transport=transport
        )
        self._uploads = UploadPipeline(
            self._http,
            chunk_size=self.settings.CHAT_API_UPLOAD_CHUNK_SIZE,
            max_chunks=self.settings.CHAT_API_PIPE_MAX_CHUNKS
        )

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this client created it."""
        if self._owns_http:
            await self._http.aclose()

    def _url(self, method: str) -> str:
        return f"{self.base_url}{method}"

    def _with_token(self, params: Optional[Mapping[str, str]]) -> dict[str, str]:
        form = dict(params or {})
        append_not_empty("token", self.token, form)
        return form

    async def do(self, method: str, params: Optional[Mapping[str, str]], response_model: Type[R]) -> R:
        """
        Call an API method with form-encoded parameters.

        Args:
            method: API method name, e.g. "channels.info"
            params: Form parameters (token is added automatically)
            response_model: Envelope subclass to decode the answer into

        Returns:
            Decoded response with ok=true

        Raises:
            TransportError, ServiceError, DecodeError
        """
        url = self._url(method)
        form = self._with_token(params)
        started = self._trace_start(method)
        self._dump_request("POST", url, form)

        try:
            response = await self._http.post(url, data=form)
        except httpx.HTTPError as e:
            logger.error(f"Request {method} failed: {e}")
            raise TransportError(f"POST {url} failed: {e}") from e
        finally:
            self._trace_end(method, started)

        return self._handle_response(method, response, response_model)

    async def do_upload(
        self,
        method: str,
        filename: str,
        params: Optional[Mapping[str, str]],
        data: UploadStream,
        response_model: Type[R]
    ) -> R:
        """
        Call an upload method, streaming `data` as a multipart body.

        Raises:
            EncodingError, TransportError, ServiceError, DecodeError
        """
        url = self._url(method)
        fields = self._with_token(params)
        started = self._trace_start(method)
        self._dump_request("POST", url, fields, multipart=True)

        try:
            response = await self._uploads.send(url, filename, fields, data)
        finally:
            self._trace_end(method, started)

        return self._handle_response(method, response, response_model)

    def _handle_response(self, method: str, response: httpx.Response, response_model: Type[R]) -> R:
        self._dump_response(response)

        if not 200 <= response.status_code < 300:
            logger.error(f"{method} returned HTTP {response.status_code}")
            raise ServiceError(
                f"{method}: HTTP {response.status_code} {response.reason_phrase}".rstrip(),
                status_code=response.status_code
            )

        try:
            result = response_model.model_validate_json(response.content)
        except PydanticValidationError as e:
            raise DecodeError(f"{method}: invalid response body: {e.errors()[0]['msg']}") from e

        if not result.is_ok():
            message = result.error_message()
            logger.error(f"{method}: {message}")
            raise ServiceError(message, status_code=response.status_code, error_code=message)

        return result

    # Trace hooks

    def _trace_start(self, method: str) -> float:
        started = time.monotonic()
        if self.trace:
            logger.debug(f"Start request {method}")
        return started

    def _trace_end(self, method: str, started: float) -> None:
        if self.trace:
            logger.debug(f"End request {method} - took {time.monotonic() - started:.3f}s")

    def _dump_request(self, verb: str, url: str, form: Mapping[str, str], multipart: bool = False) -> None:
        if not self.trace:
            return
        # Never log the token
        shown = {k: ("***" if k == "token" else v) for k, v in form.items()}
        kind = "multipart" if multipart else "form"
        logger.debug(f"{verb} {url} ({kind}) {shown}")

    def _dump_response(self, response: httpx.Response) -> None:
        if not self.trace:
            return
        logger.debug(
            f"HTTP {response.status_code} {response.headers.get('content-type', '')} "
            f"{len(response.content)} bytes: {response.text[:500]}"
        )
