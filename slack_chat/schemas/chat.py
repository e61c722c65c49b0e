from pydantic import BaseModel

from slack_chat.schemas.response import SlackResponse

DEFAULT_MESSAGE_USERNAME = ""
DEFAULT_MESSAGE_THREAD_TIMESTAMP = ""
DEFAULT_MESSAGE_REPLY_BROADCAST = False
DEFAULT_MESSAGE_ASUSER = False
DEFAULT_MESSAGE_PARSE = ""
DEFAULT_MESSAGE_LINK_NAMES = 0
DEFAULT_MESSAGE_UNFURL_LINKS = False
DEFAULT_MESSAGE_UNFURL_MEDIA = True
DEFAULT_MESSAGE_ICON_URL = ""
DEFAULT_MESSAGE_ICON_EMOJI = ""
DEFAULT_MESSAGE_MARKDOWN = True
DEFAULT_MESSAGE_ESCAPE_TEXT = True


class AttachmentField(BaseModel):
    title: str
    value: str
    short: bool = False


class Attachment(BaseModel):
    """Legacy secondary message attachment."""

    fallback: str | None = None
    color: str | None = None
    pretext: str | None = None
    author_name: str | None = None
    author_link: str | None = None
    author_icon: str | None = None
    title: str | None = None
    title_link: str | None = None
    text: str | None = None
    fields: list[AttachmentField] | None = None
    image_url: str | None = None
    thumb_url: str | None = None
    footer: str | None = None
    footer_icon: str | None = None
    ts: int | float | str | None = None
    mrkdwn_in: list[str] | None = None
    callback_id: str | None = None


class PostMessageParameters(BaseModel):
    """Optional chat.postMessage arguments. Defaults are what Slack assumes."""

    username: str = DEFAULT_MESSAGE_USERNAME
    as_user: bool = DEFAULT_MESSAGE_ASUSER
    parse: str = DEFAULT_MESSAGE_PARSE
    thread_ts: str = DEFAULT_MESSAGE_THREAD_TIMESTAMP
    reply_broadcast: bool = DEFAULT_MESSAGE_REPLY_BROADCAST
    link_names: int = DEFAULT_MESSAGE_LINK_NAMES
    attachments: list[Attachment] | None = None
    unfurl_links: bool = DEFAULT_MESSAGE_UNFURL_LINKS
    unfurl_media: bool = DEFAULT_MESSAGE_UNFURL_MEDIA
    icon_url: str = DEFAULT_MESSAGE_ICON_URL
    icon_emoji: str = DEFAULT_MESSAGE_ICON_EMOJI
    markdown: bool = DEFAULT_MESSAGE_MARKDOWN
    escape_text: bool = DEFAULT_MESSAGE_ESCAPE_TEXT

    # chat.postEphemeral
    channel: str = ""
    user: str = DEFAULT_MESSAGE_USERNAME


class ChatResponseFull(SlackResponse):
    channel: str = ""
    ts: str = ""
    text: str = ""


class ResponseURLMessage(BaseModel):
    """Body posted to a response_url; empty fields are left out."""

    text: str | None = None
    ts: str | None = None
    attachments: list[Attachment] | None = None
    response_type: str | None = None
