from slack_chat.schemas.chat import (
    Attachment,
    AttachmentField,
    ChatResponseFull,
    PostMessageParameters,
    ResponseURLMessage,
)
from slack_chat.schemas.files import File, FileResponseFull, FileUploadParameters
from slack_chat.schemas.response import SlackResponse

__all__ = [
    "Attachment",
    "AttachmentField",
    "ChatResponseFull",
    "File",
    "FileResponseFull",
    "FileUploadParameters",
    "PostMessageParameters",
    "ResponseURLMessage",
    "SlackResponse",
]
