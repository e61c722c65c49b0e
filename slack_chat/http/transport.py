"""
Transport — send a built request and hand a 200 body to a parser.

Anything with an async ``send(request)`` works as the requester; in practice
an httpx.AsyncClient owned by SlackClient or supplied by the caller.
Cancellation is the awaiting task's: a cancelled task cancels the request.
"""

import time
from collections.abc import Mapping
from pathlib import Path
from typing import BinaryIO, Protocol, TypeVar

import httpx
import structlog
from pydantic import BaseModel

from slack_chat.errors import SlackServerError
from slack_chat.http.parsers import ResponseParser, json_response_parser
from slack_chat.http.requests import file_upload_request, form_request

logger = structlog.get_logger()

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)

SLACK_WEB_API_FORMAT = "https://{team}.slack.com/api/users.admin.{method}?t={ts}"


class HTTPRequester(Protocol):
    async def send(self, request: httpx.Request) -> httpx.Response: ...


async def post(
    http: HTTPRequester,
    request: httpx.Request,
    parser: ResponseParser[T],
    *,
    debug: bool = False,
    log=None,
) -> T:
    """Send request and parse the response body.

    Raises:
        SlackServerError: status other than 200.
    """
    log = log or logger
    response = await http.send(request)

    # Slack sends an HTML body along with 5xx codes. Don't parse it.
    if response.status_code != 200:
        log.warning(
            "slack.server_error",
            path=request.url.path,
            status=response.status_code,
        )
        log_response(response, debug, log)
        raise SlackServerError(response.status_code, response.reason_phrase)

    return parser(response)


def log_response(response: httpx.Response, debug: bool, log) -> None:
    """Dump status line, headers and body when debug is on."""
    if not debug:
        return
    log.info(
        "slack.response_dump",
        status=f"{response.http_version} {response.status_code} {response.reason_phrase}",
        headers=dict(response.headers),
        body=response.text,
    )


async def post_form(
    http: HTTPRequester,
    endpoint: str,
    values: Mapping[str, str],
    model: type[M],
    *,
    debug: bool = False,
    log=None,
) -> M:
    request = form_request(endpoint, values)
    return await post(http, request, json_response_parser(model), debug=debug, log=log)


async def post_with_multipart_response(
    http: HTTPRequester,
    endpoint: str,
    name: str,
    fieldname: str,
    values: Mapping[str, str],
    reader: BinaryIO,
    model: type[M],
    *,
    debug: bool = False,
    log=None,
) -> M:
    request = file_upload_request(endpoint, fieldname, name, reader, values)
    return await post(http, request, json_response_parser(model), debug=debug, log=log)


async def post_local_with_multipart_response(
    http: HTTPRequester,
    api_url: str,
    path: str,
    fpath: str,
    fieldname: str,
    values: Mapping[str, str],
    model: type[M],
    *,
    debug: bool = False,
    log=None,
) -> M:
    """Upload the file at fpath to the API method path. The file is closed on return."""
    full_path = Path(fpath).resolve()
    with full_path.open("rb") as fh:
        return await post_with_multipart_response(
            http,
            api_url + path,
            Path(fpath).name,
            fieldname,
            values,
            fh,
            model,
            debug=debug,
            log=log,
        )


async def parse_admin_response(
    http: HTTPRequester,
    method: str,
    team_name: str,
    values: Mapping[str, str],
    model: type[M],
    *,
    debug: bool = False,
    log=None,
) -> M:
    """Call one of the undocumented users.admin.* team endpoints."""
    endpoint = SLACK_WEB_API_FORMAT.format(team=team_name, method=method, ts=int(time.time()))
    return await post_form(http, endpoint, values, model, debug=debug, log=log)
