from collections.abc import Callable
from typing import TypeVar

import httpx
from pydantic import BaseModel

from slack_chat.errors import SlackResponseError

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)

ResponseParser = Callable[[httpx.Response], T]

# Plain-text body returned by response_url endpoints on success
OK_TOKEN = b"ok"


def json_response_parser(model: type[M]) -> ResponseParser[M]:
    """Decode the body into model. Validation errors propagate as-is."""

    def parse(response: httpx.Response) -> M:
        return model.model_validate_json(response.content)

    return parse


def text_response_parser(result: T) -> ResponseParser[T]:
    """Accept only the literal ok body, returning result unchanged."""

    def parse(response: httpx.Response) -> T:
        body = response.content
        if body != OK_TOKEN:
            raise SlackResponseError(body.decode("utf-8", errors="replace"))
        return result

    return parse
