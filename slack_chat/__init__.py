from slack_chat.chat.options import (
    MsgOption,
    SendConfig,
    SendMode,
    apply_msg_options,
    escape_message,
    msg_option_as_user,
    msg_option_attachments,
    msg_option_delete,
    msg_option_disable_link_unfurl,
    msg_option_disable_markdown,
    msg_option_disable_media_unfurl,
    msg_option_enable_link_unfurl,
    msg_option_post,
    msg_option_post_ephemeral,
    msg_option_post_message_parameters,
    msg_option_response_url,
    msg_option_text,
    msg_option_update,
    msg_option_user,
)
from slack_chat.client import SlackClient, slack_client
from slack_chat.errors import SlackApiError, SlackError, SlackResponseError, SlackServerError
from slack_chat.schemas import (
    Attachment,
    AttachmentField,
    ChatResponseFull,
    File,
    FileUploadParameters,
    PostMessageParameters,
)

__all__ = [
    "Attachment",
    "AttachmentField",
    "ChatResponseFull",
    "File",
    "FileUploadParameters",
    "MsgOption",
    "PostMessageParameters",
    "SendConfig",
    "SendMode",
    "SlackApiError",
    "SlackClient",
    "SlackError",
    "SlackResponseError",
    "SlackServerError",
    "apply_msg_options",
    "escape_message",
    "msg_option_as_user",
    "msg_option_attachments",
    "msg_option_delete",
    "msg_option_disable_link_unfurl",
    "msg_option_disable_markdown",
    "msg_option_disable_media_unfurl",
    "msg_option_enable_link_unfurl",
    "msg_option_post",
    "msg_option_post_ephemeral",
    "msg_option_post_message_parameters",
    "msg_option_response_url",
    "msg_option_text",
    "msg_option_update",
    "msg_option_user",
    "slack_client",
]
