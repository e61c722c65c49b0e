"""
Message options — compose a chat.* request from an ordered list of options.

Each option takes a SendConfig and returns a new one; apply_msg_options folds
them over the initial (post mode) config. Later options win over earlier ones
for the same key, and a later mode-setting option replaces an earlier mode.
"""

import json
from collections.abc import Callable, Mapping
from dataclasses import dataclass, replace
from enum import Enum
from functools import reduce
from types import MappingProxyType

from slack_chat.config import settings
from slack_chat.schemas.chat import (
    DEFAULT_MESSAGE_ASUSER,
    DEFAULT_MESSAGE_ICON_EMOJI,
    DEFAULT_MESSAGE_ICON_URL,
    DEFAULT_MESSAGE_LINK_NAMES,
    DEFAULT_MESSAGE_MARKDOWN,
    DEFAULT_MESSAGE_PARSE,
    DEFAULT_MESSAGE_REPLY_BROADCAST,
    DEFAULT_MESSAGE_THREAD_TIMESTAMP,
    DEFAULT_MESSAGE_UNFURL_LINKS,
    DEFAULT_MESSAGE_UNFURL_MEDIA,
    DEFAULT_MESSAGE_USERNAME,
    Attachment,
    PostMessageParameters,
)


class SendMode(str, Enum):
    POST_MESSAGE = "chat.postMessage"
    UPDATE = "chat.update"
    DELETE = "chat.delete"
    POST_EPHEMERAL = "chat.postEphemeral"
    RESPONSE_URL = "chat.responseURL"


@dataclass(frozen=True)
class SendConfig:
    mode: SendMode
    endpoint: str
    values: Mapping[str, str]
    api_url: str
    attachments: tuple[Attachment, ...] | None = None
    response_type: str = ""  # response_url mode only

    def with_values(self, set_: Mapping[str, str] | None = None, drop: tuple[str, ...] = ()) -> "SendConfig":
        values = {k: v for k, v in self.values.items() if k not in drop}
        values.update(set_ or {})
        return replace(self, values=MappingProxyType(values))

    def with_mode(self, mode: SendMode, endpoint: str | None = None) -> "SendConfig":
        return replace(self, mode=mode, endpoint=endpoint if endpoint is not None else self.api_url + mode.value)


MsgOption = Callable[[SendConfig], SendConfig]


def escape_message(message: str) -> str:
    """Escape the three characters Slack reserves for control sequences."""
    return message.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def apply_msg_options(
    token: str,
    channel: str,
    *options: MsgOption,
    api_url: str | None = None,
) -> SendConfig:
    api_url = api_url or settings.SLACK_API_URL
    initial = SendConfig(
        mode=SendMode.POST_MESSAGE,
        endpoint=api_url + SendMode.POST_MESSAGE.value,
        values=MappingProxyType({"token": token, "channel": channel}),
        api_url=api_url,
    )
    return reduce(lambda config, option: option(config), options, initial)


# ---------------------------------------------------------------------------
# Mode options
# ---------------------------------------------------------------------------
def msg_option_post() -> MsgOption:
    """Post a message. This is the default mode."""

    def option(config: SendConfig) -> SendConfig:
        return config.with_mode(SendMode.POST_MESSAGE).with_values(drop=("ts",))

    return option


def msg_option_post_ephemeral() -> MsgOption:
    """Post a message visible only to the user set with msg_option_user."""

    def option(config: SendConfig) -> SendConfig:
        return config.with_mode(SendMode.POST_EPHEMERAL).with_values(drop=("ts",))

    return option


def msg_option_update(timestamp: str) -> MsgOption:
    """Update the message identified by timestamp."""

    def option(config: SendConfig) -> SendConfig:
        return config.with_mode(SendMode.UPDATE).with_values({"ts": timestamp})

    return option


def msg_option_delete(timestamp: str) -> MsgOption:
    """Delete the message identified by timestamp."""

    def option(config: SendConfig) -> SendConfig:
        return config.with_mode(SendMode.DELETE).with_values({"ts": timestamp})

    return option


def msg_option_response_url(url: str, response_type: str) -> MsgOption:
    """Deliver through a response_url instead of the Web API."""
    if not url:
        raise ValueError("response_url must not be empty")

    def option(config: SendConfig) -> SendConfig:
        config = config.with_mode(SendMode.RESPONSE_URL, endpoint=url)
        return replace(config, response_type=response_type).with_values(drop=("ts",))

    return option


# ---------------------------------------------------------------------------
# Content options
# ---------------------------------------------------------------------------
def msg_option_user(user_id: str) -> MsgOption:
    def option(config: SendConfig) -> SendConfig:
        return config.with_values({"user": user_id})

    return option


def msg_option_as_user(as_user: bool) -> MsgOption:
    """Send the message as the authed user instead of the bot."""

    def option(config: SendConfig) -> SendConfig:
        if as_user != DEFAULT_MESSAGE_ASUSER:
            return config.with_values({"as_user": "true"})
        return config

    return option


def msg_option_text(text: str, escape: bool) -> MsgOption:
    def option(config: SendConfig) -> SendConfig:
        return config.with_values({"text": escape_message(text) if escape else text})

    return option


def msg_option_attachments(*attachments: Attachment) -> MsgOption:
    """Attach legacy attachments.

    They are kept twice: JSON-encoded in the form values for the Web API and
    as models for the response_url body.
    """

    def option(config: SendConfig) -> SendConfig:
        if not attachments:
            return config
        encoded = json.dumps([a.model_dump(mode="json", exclude_none=True) for a in attachments])
        config = replace(config, attachments=tuple(attachments))
        return config.with_values({"attachments": encoded})

    return option


def msg_option_enable_link_unfurl() -> MsgOption:
    def option(config: SendConfig) -> SendConfig:
        return config.with_values({"unfurl_links": "true"})

    return option


def msg_option_disable_link_unfurl() -> MsgOption:
    def option(config: SendConfig) -> SendConfig:
        return config.with_values({"unfurl_links": "false"})

    return option


def msg_option_disable_media_unfurl() -> MsgOption:
    def option(config: SendConfig) -> SendConfig:
        return config.with_values({"unfurl_media": "false"})

    return option


def msg_option_disable_markdown() -> MsgOption:
    def option(config: SendConfig) -> SendConfig:
        return config.with_values({"mrkdwn": "false"})

    return option


def msg_option_post_message_parameters(params: PostMessageParameters) -> MsgOption:
    """Apply every non-default field of params."""

    def option(config: SendConfig) -> SendConfig:
        values: dict[str, str] = {}
        if params.username != DEFAULT_MESSAGE_USERNAME:
            values["username"] = params.username
        # chat.postEphemeral
        if params.user != DEFAULT_MESSAGE_USERNAME:
            values["user"] = params.user
        if params.as_user != DEFAULT_MESSAGE_ASUSER:
            values["as_user"] = "true"
        if params.parse != DEFAULT_MESSAGE_PARSE:
            values["parse"] = params.parse
        if params.link_names != DEFAULT_MESSAGE_LINK_NAMES:
            values["link_names"] = "1"
        if params.unfurl_links != DEFAULT_MESSAGE_UNFURL_LINKS:
            values["unfurl_links"] = "true"
        # Slack turns unfurl_links on by itself when as_user is true, so an
        # unchanged unfurl_links has to be sent explicitly in that case.
        if params.as_user != DEFAULT_MESSAGE_ASUSER and params.unfurl_links == DEFAULT_MESSAGE_UNFURL_LINKS:
            values["unfurl_links"] = "false"
        if params.unfurl_media != DEFAULT_MESSAGE_UNFURL_MEDIA:
            values["unfurl_media"] = "false"
        if params.icon_url != DEFAULT_MESSAGE_ICON_URL:
            values["icon_url"] = params.icon_url
        if params.icon_emoji != DEFAULT_MESSAGE_ICON_EMOJI:
            values["icon_emoji"] = params.icon_emoji
        if params.markdown != DEFAULT_MESSAGE_MARKDOWN:
            values["mrkdwn"] = "false"
        if params.thread_ts != DEFAULT_MESSAGE_THREAD_TIMESTAMP:
            values["thread_ts"] = params.thread_ts
        if params.reply_broadcast != DEFAULT_MESSAGE_REPLY_BROADCAST:
            values["reply_broadcast"] = "true"
        return config.with_values(values)

    return option
