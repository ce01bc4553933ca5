"""
File calls: streaming upload, listing, info and comments.
"""

import logging
from typing import List, Optional

from pydantic import ValidationError as PydanticValidationError

from chatapi.errors import ValidationError
from chatapi.http.client import BaseClient, append_not_empty
from chatapi.http.upload import UploadStream
from chatapi.models import (
    CommentResponse,
    FileListResponse,
    FileResponse,
    FileUploadResponse,
    UploadRequest,
)
from config.constants import APIMethod

logger = logging.getLogger(__name__)


def _paging_params(params: dict[str, str], count: int, page: int) -> None:
    if page > 1:
        params["page"] = str(page)
    if count > 0:
        params["count"] = str(count)


class FilesAPI(BaseClient):
    """files.* methods."""

    async def upload(
        self,
        filename: str,
        data: UploadStream,
        title: str = "",
        filetype: str = "",
        initial_comment: str = "",
        channels: Optional[List[str]] = None
    ) -> FileUploadResponse:
        """
        Upload a file, optionally sharing it on the given channels.

        The content is streamed: `data` is read chunk by chunk while the
        request is being sent, never loaded whole in memory.

        Args:
            filename: Name of the file (required)
            data: Binary file-like object or async iterable of bytes, read once
            title: Title shown for the file
            filetype: Service file type, e.g. "text" or "pdf"
            initial_comment: Comment posted with the file
            channels: Conversation ids to share the file on

        Returns:
            FileUploadResponse with the new file's metadata

        Raises:
            ValidationError: empty filename, nothing is sent
            EncodingError: the body could not be produced from `data`
            TransportError, ServiceError, DecodeError

        An EncodingError is also raised when the server answered before
        reading the whole body. Exceptions other than httpx errors coming
        from the transport (e.g. asyncio.CancelledError) are not wrapped.
        """
        try:
            request = UploadRequest(
                filename=filename,
                title=title,
                filetype=filetype,
                initial_comment=initial_comment,
                channels=channels or []
            )
        except PydanticValidationError as e:
            raise ValidationError("You must specify the filename for the upload") from e

        logger.info(f"Uploading {filename} to {len(request.channels)} channel(s)")
        result = await self.do_upload(
            APIMethod.FILES_UPLOAD.value,
            request.filename,
            request.form_fields(),
            data,
            FileUploadResponse
        )
        logger.info(f"Uploaded {filename} as {result.file.id if result.file else '?'}")
        return result

    async def file_list(
        self,
        user: str = "",
        ts_from: str = "",
        ts_to: str = "",
        types: Optional[List[str]] = None,
        count: int = 0,
        page: int = 0
    ) -> FileListResponse:
        """
        List the team's files.

        `page` is only sent above 1 and `count` only above 0.
        """
        params: dict[str, str] = {}
        append_not_empty("user", user, params)
        append_not_empty("ts_from", ts_from, params)
        append_not_empty("ts_to", ts_to, params)
        append_not_empty("types", ",".join(types or []), params)
        _paging_params(params, count, page)
        return await self.do(APIMethod.FILES_LIST.value, params, FileListResponse)

    async def file_info(self, file: str, count: int = 0, page: int = 0) -> FileResponse:
        """File metadata with a page of its comments."""
        params = {"file": file}
        _paging_params(params, count, page)
        return await self.do(APIMethod.FILES_INFO.value, params, FileResponse)

    async def file_add_comment(self, file: str, comment: str, set_active: bool = False) -> CommentResponse:
        params = {
            "file": file,
            "comment": comment,
            "set_active": "true" if set_active else "false",
        }
        return await self.do(APIMethod.FILES_COMMENTS_ADD.value, params, CommentResponse)
