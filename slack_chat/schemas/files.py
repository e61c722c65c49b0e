from dataclasses import dataclass, field
from typing import BinaryIO

from pydantic import BaseModel

from slack_chat.schemas.response import SlackResponse


class File(BaseModel):
    model_config = {"extra": "ignore"}

    id: str
    created: int | None = None
    name: str = ""
    title: str = ""
    mimetype: str = ""
    filetype: str = ""
    pretty_type: str = ""
    user: str = ""
    size: int = 0
    url_private: str = ""
    url_private_download: str = ""
    permalink: str = ""
    channels: list[str] = []


class FileResponseFull(SlackResponse):
    file: File | None = None


@dataclass
class FileUploadParameters:
    """files.upload arguments. Exactly one of content, file or reader is used,
    checked in that order."""

    file: str = ""  # local path
    content: str = ""
    reader: BinaryIO | None = None
    filetype: str = ""
    filename: str = ""
    title: str = ""
    initial_comment: str = ""
    channels: list[str] = field(default_factory=list)
