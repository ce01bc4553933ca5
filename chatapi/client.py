"""
Public client: every API call group on top of BaseClient.
"""

from chatapi.channels import ChannelsAPI
from chatapi.files import FilesAPI


class ChatClient(ChannelsAPI, FilesAPI):
    """Async client for the chat platform REST API."""
    pass
