"""
Response envelope shared by every API call.

Every answer of the service is a JSON object with an `ok` flag and, when
`ok` is false, an `error` string.
"""

from typing import List

from pydantic import BaseModel, Field


class APIResponse(BaseModel):
    """Generic envelope; typed responses extend it with their payload."""
    ok: bool = False
    error: str = ""

    model_config = {
        "json_schema_extra": {
            "example": {"ok": False, "error": "not_authed"}
        }
    }

    def is_ok(self) -> bool:
        return self.ok

    def error_message(self) -> str:
        return self.error or "unknown_error"


class Paging(BaseModel):
    """Pagination block of list responses."""
    count: int = 0
    total: int = 0
    page: int = 0
    pages: int = 0


class Reaction(BaseModel):
    """Emoji reaction attached to a message, file or comment."""
    name: str
    count: int = 0
    users: List[str] = Field(default_factory=list)
