"""
Models for channels, private groups and direct messages (IMs).

The three conversation kinds share `BaseChannel` and add their own flags.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from chatapi.models.responses import APIResponse


class Message(BaseModel):
    """Message as embedded in a conversation (`latest`)."""
    type: str = ""
    user: str = ""
    text: str = ""
    ts: str = ""

    model_config = {"extra": "allow"}


class ChannelTopicPurpose(BaseModel):
    """Topic or purpose of a conversation."""
    value: str = ""
    creator: str = ""
    last_set: int = 0


class BaseChannel(BaseModel):
    """Fields common to channels, groups and IMs."""
    id: str
    name: str = ""
    created: int = 0
    creator: str = ""
    is_archived: bool = False
    is_open: bool = False
    members: List[str] = Field(default_factory=list)
    topic: ChannelTopicPurpose = Field(default_factory=ChannelTopicPurpose)
    purpose: ChannelTopicPurpose = Field(default_factory=ChannelTopicPurpose)
    last_read: str = ""
    latest: Optional[Message] = None
    unread_count: int = 0
    unread_count_display: int = 0
    num_members: int = 0


class Channel(BaseChannel):
    is_general: bool = False
    is_channel: bool = False
    is_member: bool = False


class Group(BaseChannel):
    is_group: bool = False


class IM(BaseChannel):
    is_im: bool = False
    user: str = ""
    is_user_deleted: bool = False


class ChannelResponse(APIResponse):
    channel: Optional[Channel] = None


class GroupResponse(APIResponse):
    group: Optional[Group] = None


class ChannelListResponse(APIResponse):
    channels: List[Channel] = Field(default_factory=list)


class GroupListResponse(APIResponse):
    groups: List[Group] = Field(default_factory=list)
