"""
Error hierarchy for the chat API client.

Every failure reaches the caller as one of these exceptions; none are
retried or swallowed by the client.
"""

from typing import Optional


class ChatAPIError(Exception):
    """Base exception for all client errors."""

    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__


class ValidationError(ChatAPIError):
    """
    Invalid arguments detected locally; nothing was sent.

    Examples:
    - Empty upload filename
    - Empty channel id for mark
    """
    pass


class EncodingError(ChatAPIError):
    """
    The multipart encoder failed while producing an upload body.

    Examples:
    - The input stream raised while being read
    - A part could not be written to the body pipe
    """
    pass


class TransportError(ChatAPIError):
    """Network level failure: connection, timeout, protocol."""
    pass


class ServiceError(ChatAPIError):
    """
    The service answered with an error.

    Either a non-2xx status, or an envelope with ok=false whose message
    (e.g. "not_authed") is carried in `message`.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        error_code: Optional[str] = None
    ):
        super().__init__(message, error_code=error_code)
        self.status_code = status_code


class DecodeError(ChatAPIError):
    """The response body is not the expected JSON document."""
    pass


class PipeClosedError(ChatAPIError):
    """Write on a body pipe whose reader or writer side is closed."""
    pass
