"""Shared fixtures for the Slack binding tests."""

from urllib.parse import parse_qs

import httpx
import pytest

from slack_chat.client import SlackClient

API_URL = "https://slack.test/api/"


@pytest.fixture
def api_url() -> str:
    return API_URL


@pytest.fixture
def make_client():
    """Build a SlackClient whose HTTP traffic goes to handler."""

    def factory(handler, **kwargs) -> SlackClient:
        http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        kwargs.setdefault("debug", False)
        return SlackClient("xoxb-test", api_url=API_URL, http=http, **kwargs)

    return factory


@pytest.fixture
def form_values():
    """Decode a form-encoded request body into a flat dict."""

    def decode(request: httpx.Request) -> dict[str, str]:
        return {k: v[0] for k, v in parse_qs(request.content.decode()).items()}

    return decode
