from enum import Enum


class APIMethod(str, Enum):
    """API methods called by the client"""

    CHANNELS_ARCHIVE = "channels.archive"
    CHANNELS_CREATE = "channels.create"
    CHANNELS_INFO = "channels.info"
    CHANNELS_LIST = "channels.list"
    CHANNELS_MARK = "channels.mark"
    GROUPS_CREATE = "groups.create"
    GROUPS_INVITE = "groups.invite"
    GROUPS_LIST = "groups.list"
    GROUPS_MARK = "groups.mark"
    IM_MARK = "im.mark"
    FILES_UPLOAD = "files.upload"
    FILES_LIST = "files.list"
    FILES_INFO = "files.info"
    FILES_COMMENTS_ADD = "files.comments.add"

    @classmethod
    def list(cls):
        """Return the list of method names"""
        return [m.value for m in cls]


class ChannelPrefix(str, Enum):
    """First letter of a conversation id, by conversation kind"""

    CHANNEL = "C"
    GROUP = "G"
    IM = "D"


# Multipart part name carrying the uploaded content
UPLOAD_FILE_FIELD = "file"
