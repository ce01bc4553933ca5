"""Typed request and response models of the chat API."""

from chatapi.models.responses import (
    APIResponse,
    Paging,
    Reaction,
)
from chatapi.models.channel import (
    IM,
    BaseChannel,
    Channel,
    ChannelListResponse,
    ChannelResponse,
    ChannelTopicPurpose,
    Group,
    GroupListResponse,
    GroupResponse,
    Message,
)
from chatapi.models.file import (
    Comment,
    CommentResponse,
    File,
    FileListResponse,
    FileResponse,
    FileUploadResponse,
    UploadRequest,
)

__all__ = [
    "APIResponse",
    "Paging",
    "Reaction",
    "IM",
    "BaseChannel",
    "Channel",
    "ChannelListResponse",
    "ChannelResponse",
    "ChannelTopicPurpose",
    "Group",
    "GroupListResponse",
    "GroupResponse",
    "Message",
    "Comment",
    "CommentResponse",
    "File",
    "FileListResponse",
    "FileResponse",
    "FileUploadResponse",
    "UploadRequest",
]
