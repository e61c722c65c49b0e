"""
Slack API client — singleton, same pattern as the rest of the app's clients.

Handles:
- httpx client lifecycle (owned, or supplied by the caller)
- Chat: send_message, post_message, post_ephemeral, update_message, delete_message
- Files: upload_file (inline content, local path, or reader)
- Admin: disable_user (team admin endpoint)
"""

import httpx
import structlog

from slack_chat.chat.options import (
    MsgOption,
    apply_msg_options,
    msg_option_attachments,
    msg_option_delete,
    msg_option_post_ephemeral,
    msg_option_post_message_parameters,
    msg_option_text,
    msg_option_update,
    msg_option_user,
)
from slack_chat.chat.senders import build_request
from slack_chat.config import settings
from slack_chat.http.transport import (
    HTTPRequester,
    parse_admin_response,
    post,
    post_form,
    post_local_with_multipart_response,
    post_with_multipart_response,
)
from slack_chat.schemas.chat import PostMessageParameters
from slack_chat.schemas.files import File, FileResponseFull, FileUploadParameters
from slack_chat.schemas.response import SlackResponse


class SlackClient:
    def __init__(
        self,
        token: str | None = None,
        *,
        api_url: str | None = None,
        debug: bool | None = None,
        http: HTTPRequester | None = None,
        logger=None,
    ):
        self._token = settings.SLACK_TOKEN if token is None else token
        self._api_url = api_url or settings.SLACK_API_URL
        self._debug = settings.SLACK_DEBUG if debug is None else debug
        self._http = http
        self._owns_http = False
        self._log = logger or structlog.get_logger()

    async def initialize(self):
        """Create the httpx client unless one was supplied."""
        if self._http is None:
            self._http = httpx.AsyncClient(timeout=settings.SLACK_HTTP_TIMEOUT)
            self._owns_http = True
        self._log.info("slack.initialized", api_url=self._api_url)

    async def shutdown(self):
        """Close the httpx client if this instance created it."""
        if self._http is not None and self._owns_http:
            await self._http.aclose()
            self._http = None
            self._owns_http = False
        self._log.info("slack.shutdown")

    def _requester(self) -> HTTPRequester:
        if self._http is None:
            raise RuntimeError("SlackClient is not initialized; call initialize() first")
        return self._http

    # ------------------------------------------------------------------
    # Chat
    # ------------------------------------------------------------------

    async def send_message(self, channel: str, *options: MsgOption) -> tuple[str, str, str]:
        """Send a message configured by options.

        Returns:
            (channel, ts, text) as reported by Slack. All three are empty for
            response_url deliveries.

        Raises:
            SlackApiError: Slack answered ok=false.
            SlackServerError: non-200 status.
            SlackResponseError: a response_url did not answer "ok".
        """
        request, parser = build_request(self._token, channel, *options, api_url=self._api_url)
        response = await post(self._requester(), request, parser, debug=self._debug, log=self._log)
        if not response.ok:
            self._log.error("slack.send_message_failed", channel=channel, error=response.error)
        response.raise_for_error()

        self._log.debug("slack.message_sent", channel=response.channel, ts=response.ts)
        return response.channel, response.ts, response.text

    async def post_message(
        self,
        channel: str,
        text: str,
        params: PostMessageParameters | None = None,
    ) -> tuple[str, str]:
        """Post a message to a channel. Text is escaped unless params.escape_text is False."""
        params = params or PostMessageParameters()
        channel, ts, _ = await self.send_message(
            channel,
            msg_option_text(text, params.escape_text),
            msg_option_attachments(*(params.attachments or ())),
            msg_option_post_message_parameters(params),
        )
        return channel, ts

    async def post_ephemeral(self, channel: str, user_id: str, *options: MsgOption) -> str:
        """Post a message only user_id can see. Returns the message timestamp."""
        _, ts, _ = await self.send_message(
            channel,
            *options,
            msg_option_post_ephemeral(),
            msg_option_user(user_id),
        )
        return ts

    async def update_message(self, channel: str, timestamp: str, text: str) -> tuple[str, str, str]:
        return await self.send_message(
            channel,
            msg_option_update(timestamp),
            msg_option_text(text, True),
        )

    async def delete_message(self, channel: str, timestamp: str) -> tuple[str, str]:
        channel, ts, _ = await self.send_message(channel, msg_option_delete(timestamp))
        return channel, ts

    def apply_msg_options(self, channel: str, *options: MsgOption) -> tuple[str, dict[str, str]]:
        """Resolve options without sending. Returns (endpoint, form values)."""
        config = apply_msg_options(self._token, channel, *options, api_url=self._api_url)
        return config.endpoint, dict(config.values)

    # ------------------------------------------------------------------
    # Files
    # ------------------------------------------------------------------

    async def upload_file(self, params: FileUploadParameters) -> File | None:
        values = {"token": self._token}
        if params.filetype:
            values["filetype"] = params.filetype
        if params.filename:
            values["filename"] = params.filename
        if params.title:
            values["title"] = params.title
        if params.initial_comment:
            values["initial_comment"] = params.initial_comment
        if params.channels:
            values["channels"] = ",".join(params.channels)

        http = self._requester()
        endpoint = self._api_url + "files.upload"
        if params.content:
            values["content"] = params.content
            response = await post_form(
                http, endpoint, values, FileResponseFull, debug=self._debug, log=self._log
            )
        elif params.file:
            response = await post_local_with_multipart_response(
                http,
                self._api_url,
                "files.upload",
                params.file,
                "file",
                values,
                FileResponseFull,
                debug=self._debug,
                log=self._log,
            )
        elif params.reader is not None:
            response = await post_with_multipart_response(
                http,
                endpoint,
                params.filename,
                "file",
                values,
                params.reader,
                FileResponseFull,
                debug=self._debug,
                log=self._log,
            )
        else:
            raise ValueError("upload_file needs one of content, file or reader")

        if not response.ok:
            self._log.error("slack.upload_file_failed", error=response.error)
        response.raise_for_error()
        return response.file

    # ------------------------------------------------------------------
    # Admin
    # ------------------------------------------------------------------

    async def disable_user(self, team_name: str, user_id: str) -> None:
        """Deactivate a user through the team admin endpoint."""
        values = {
            "user": user_id,
            "token": self._token,
            "set_active": "true",
            "_attempts": "1",
        }
        response = await parse_admin_response(
            self._requester(),
            "setInactive",
            team_name,
            values,
            SlackResponse,
            debug=self._debug,
            log=self._log,
        )
        if not response.ok:
            self._log.error("slack.disable_user_failed", user=user_id, error=response.error)
        response.raise_for_error()


# Singleton instance
slack_client = SlackClient()
