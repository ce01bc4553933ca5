"""
Channel, group and IM calls.
"""

from chatapi.errors import ValidationError
from chatapi.http.client import BaseClient
from chatapi.models import (
    APIResponse,
    ChannelListResponse,
    ChannelResponse,
    GroupListResponse,
    GroupResponse,
)
from config.constants import APIMethod, ChannelPrefix


def _list_params(exclude_archived: bool) -> dict[str, str]:
    params = {}
    if exclude_archived:
        params["exclude_archived"] = "1"
    return params


class ChannelsAPI(BaseClient):
    """channels.*, groups.* and the *.mark methods."""

    async def channel_archive(self, channel: str) -> APIResponse:
        """Archive a channel."""
        return await self.do(APIMethod.CHANNELS_ARCHIVE.value, {"channel": channel}, APIResponse)

    async def channel_create(self, name: str) -> ChannelResponse:
        """Create a channel."""
        return await self.do(APIMethod.CHANNELS_CREATE.value, {"name": name}, ChannelResponse)

    async def channel_info(self, channel: str) -> ChannelResponse:
        return await self.do(APIMethod.CHANNELS_INFO.value, {"channel": channel}, ChannelResponse)

    async def channel_list(self, exclude_archived: bool = False) -> ChannelListResponse:
        return await self.do(
            APIMethod.CHANNELS_LIST.value,
            _list_params(exclude_archived),
            ChannelListResponse
        )

    async def mark(self, channel: str, ts: str) -> APIResponse:
        """
        Mark a conversation as read up to `ts`.

        The method is picked from the id prefix: G -> groups.mark,
        D -> im.mark, anything else -> channels.mark.
        """
        if not channel:
            raise ValidationError("You must specify the channel to mark")
        method = APIMethod.CHANNELS_MARK
        if channel.startswith(ChannelPrefix.GROUP.value):
            method = APIMethod.GROUPS_MARK
        elif channel.startswith(ChannelPrefix.IM.value):
            method = APIMethod.IM_MARK
        return await self.do(method.value, {"channel": channel, "ts": ts}, APIResponse)

    async def group_create(self, name: str) -> GroupResponse:
        """Create a private group."""
        return await self.do(APIMethod.GROUPS_CREATE.value, {"name": name}, GroupResponse)

    async def group_invite(self, channel: str, user: str) -> GroupResponse:
        """Invite a user to a private group."""
        return await self.do(
            APIMethod.GROUPS_INVITE.value,
            {"channel": channel, "user": user},
            GroupResponse
        )

    async def group_list(self, exclude_archived: bool = False) -> GroupListResponse:
        return await self.do(
            APIMethod.GROUPS_LIST.value,
            _list_params(exclude_archived),
            GroupListResponse
        )
