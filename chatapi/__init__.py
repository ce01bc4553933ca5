"""
chatapi - async typed client for a chat platform REST API.

Usage:
    from chatapi import ChatClient

    async with ChatClient(token="xoxb-...") as client:
        with open("report.txt", "rb") as f:
            result = await client.upload("report.txt", f, channels=["C123"])
        print(result.file.id)
"""

from chatapi.client import ChatClient
from chatapi.errors import (
    ChatAPIError,
    DecodeError,
    EncodingError,
    PipeClosedError,
    ServiceError,
    TransportError,
    ValidationError,
)

__all__ = [
    "ChatClient",
    "ChatAPIError",
    "DecodeError",
    "EncodingError",
    "PipeClosedError",
    "ServiceError",
    "TransportError",
    "ValidationError",
]
