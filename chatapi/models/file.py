"""
Models for files, file comments and the upload request.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from chatapi.models.responses import APIResponse, Paging, Reaction


class Comment(BaseModel):
    """Comment attached to a file."""
    id: str = ""
    timestamp: int = 0
    user: str = ""
    comment: str = ""
    created: int = 0
    reactions: List[Reaction] = Field(default_factory=list)


class File(BaseModel):
    """File metadata as returned by files.upload, files.info and files.list."""
    id: str
    created: int = 0

    name: str = ""
    title: str = ""
    mimetype: str = ""
    filetype: str = ""
    pretty_type: str = ""
    user: str = ""

    mode: str = ""
    editable: bool = False
    is_external: bool = False
    external_type: str = ""

    size: int = 0

    url: str = ""
    url_download: str = ""
    url_private: str = ""
    url_private_download: str = ""

    thumb_64: str = ""
    thumb_80: str = ""
    thumb_360: str = ""
    thumb_360_gif: str = ""
    thumb_360_w: int = 0
    thumb_360_h: int = 0

    permalink: str = ""
    edit_link: str = ""
    preview: str = ""
    preview_highlight: str = ""
    lines: int = 0
    lines_more: int = 0

    is_public: bool = False
    public_url_shared: bool = False
    channels: List[str] = Field(default_factory=list)
    groups: List[str] = Field(default_factory=list)
    initial_comment: Optional[Comment] = None
    num_stars: int = 0
    is_starred: bool = False

    reactions: List[Reaction] = Field(default_factory=list)


class UploadRequest(BaseModel):
    """
    Form fields of a files.upload call.

    The content itself travels separately as a read-once stream.
    """
    filename: str = Field(..., description="Name of the uploaded file")
    title: str = ""
    filetype: str = ""
    initial_comment: str = ""
    channels: List[str] = Field(default_factory=list)

    @field_validator("filename")
    @classmethod
    def filename_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("You must specify the filename for the upload")
        return v

    def form_fields(self) -> dict[str, str]:
        """Non-empty fields in wire order, channels joined with commas."""
        fields = {}
        for key in ("title", "filetype", "filename", "initial_comment"):
            value = getattr(self, key)
            if value:
                fields[key] = value
        if self.channels:
            fields["channels"] = ",".join(self.channels)
        return fields


class FileUploadResponse(APIResponse):
    file: Optional[File] = None


class FileListResponse(APIResponse):
    files: List[File] = Field(default_factory=list)
    paging: Paging = Field(default_factory=Paging)


class FileResponse(APIResponse):
    file: Optional[File] = None
    comments: List[Comment] = Field(default_factory=list)
    paging: Paging = Field(default_factory=Paging)


class CommentResponse(APIResponse):
    comment: Optional[Comment] = None
