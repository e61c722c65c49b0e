"""
Senders — turn a resolved SendConfig into an HTTP request and its parser.

- FormSender: every Web API mode; form body, JSON envelope response
- ResponseURLSender: response_url mode; JSON body, plain-text "ok" response
"""

from collections.abc import Mapping
from dataclasses import dataclass

import httpx

from slack_chat.chat.options import MsgOption, SendConfig, SendMode, apply_msg_options
from slack_chat.http.parsers import ResponseParser, json_response_parser, text_response_parser
from slack_chat.http.requests import form_request, json_request
from slack_chat.schemas.chat import Attachment, ChatResponseFull, ResponseURLMessage


@dataclass(frozen=True)
class FormSender:
    endpoint: str
    values: Mapping[str, str]

    def build_request(self) -> tuple[httpx.Request, ResponseParser[ChatResponseFull]]:
        return form_request(self.endpoint, self.values), json_response_parser(ChatResponseFull)


@dataclass(frozen=True)
class ResponseURLSender:
    endpoint: str
    values: Mapping[str, str]
    attachments: tuple[Attachment, ...] | None
    response_type: str

    def build_request(self) -> tuple[httpx.Request, ResponseParser[ChatResponseFull]]:
        body = ResponseURLMessage(
            text=self.values.get("text") or None,
            ts=self.values.get("ts") or None,
            attachments=list(self.attachments) if self.attachments else None,
            response_type=self.response_type or None,
        )
        # response_url answers carry no envelope; a bare "ok" means delivered
        return json_request(self.endpoint, body), text_response_parser(ChatResponseFull(ok=True))


def build_sender(config: SendConfig) -> FormSender | ResponseURLSender:
    if config.mode is SendMode.RESPONSE_URL:
        return ResponseURLSender(
            endpoint=config.endpoint,
            values=config.values,
            attachments=config.attachments,
            response_type=config.response_type,
        )
    return FormSender(endpoint=config.endpoint, values=config.values)


def build_request(
    token: str,
    channel: str,
    *options: MsgOption,
    api_url: str | None = None,
) -> tuple[httpx.Request, ResponseParser[ChatResponseFull]]:
    config = apply_msg_options(token, channel, *options, api_url=api_url)
    return build_sender(config).build_request()
