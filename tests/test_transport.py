"""Tests for the HTTP transport."""

import asyncio
from pathlib import Path

import httpx
import pytest
import structlog
from structlog.testing import capture_logs

from slack_chat.errors import SlackServerError
from slack_chat.http.parsers import json_response_parser
from slack_chat.http.requests import form_request
from slack_chat.http.transport import (
    parse_admin_response,
    post,
    post_local_with_multipart_response,
)
from slack_chat.schemas.chat import ChatResponseFull
from slack_chat.schemas.files import FileResponseFull
from slack_chat.schemas.response import SlackResponse


def _http(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def _never_called(response):
    raise AssertionError("parser must not run")


class TestPost:
    @pytest.mark.asyncio
    async def test_200_goes_to_parser(self) -> None:
        def handler(request):
            return httpx.Response(200, json={"ok": True, "channel": "C1", "ts": "123.45", "text": "hi"})

        request = form_request("https://slack.test/api/chat.postMessage", {"channel": "C1"})
        async with _http(handler) as http:
            result = await post(http, request, json_response_parser(ChatResponseFull))

        assert (result.channel, result.ts, result.text) == ("C1", "123.45", "hi")

    @pytest.mark.asyncio
    async def test_non_200_skips_parser(self) -> None:
        def handler(request):
            return httpx.Response(503, text="<html>maintenance</html>")

        request = form_request("https://slack.test/api/chat.postMessage", {})
        async with _http(handler) as http:
            with pytest.raises(SlackServerError) as exc_info:
                await post(http, request, _never_called)

        assert exc_info.value.status_code == 503
        assert "503 Service Unavailable" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_debug_dumps_failed_response(self) -> None:
        def handler(request):
            return httpx.Response(500, text="<html>boom</html>", headers={"X-Slack-Req-Id": "abc"})

        request = form_request("https://slack.test/api/chat.postMessage", {})
        async with _http(handler) as http:
            with capture_logs() as logs, pytest.raises(SlackServerError):
                await post(http, request, _never_called, debug=True, log=structlog.get_logger())

        dumps = [entry for entry in logs if entry["event"] == "slack.response_dump"]
        assert len(dumps) == 1
        assert dumps[0]["status"] == "HTTP/1.1 500 Internal Server Error"
        assert dumps[0]["body"] == "<html>boom</html>"
        assert dumps[0]["headers"]["x-slack-req-id"] == "abc"

    @pytest.mark.asyncio
    async def test_no_dump_without_debug(self) -> None:
        def handler(request):
            return httpx.Response(500, text="boom")

        request = form_request("https://slack.test/api/chat.postMessage", {})
        async with _http(handler) as http:
            with capture_logs() as logs, pytest.raises(SlackServerError):
                await post(http, request, _never_called, log=structlog.get_logger())

        events = [entry["event"] for entry in logs]
        assert "slack.response_dump" not in events
        assert "slack.server_error" in events

    @pytest.mark.asyncio
    async def test_transport_error_propagates(self) -> None:
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        request = form_request("https://slack.test/api/chat.postMessage", {})
        async with _http(handler) as http:
            with pytest.raises(httpx.ConnectError):
                await post(http, request, _never_called)

    @pytest.mark.asyncio
    async def test_cancel_aborts_request(self) -> None:
        started = asyncio.Event()

        async def handler(request):
            started.set()
            await asyncio.sleep(10)
            return httpx.Response(200, json={"ok": True})

        request = form_request("https://slack.test/api/chat.postMessage", {})
        async with _http(handler) as http:
            task = asyncio.create_task(post(http, request, _never_called))
            await started.wait()
            task.cancel()
            with pytest.raises(asyncio.CancelledError):
                await task


class TestUploads:
    @pytest.mark.asyncio
    async def test_local_file_upload(self, tmp_path) -> None:
        path = tmp_path / "notes.txt"
        path.write_bytes(b"release notes")
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={"ok": True, "file": {"id": "F1", "name": "notes.txt"}})

        async with _http(handler) as http:
            result = await post_local_with_multipart_response(
                http,
                "https://slack.test/api/",
                "files.upload",
                str(path),
                "file",
                {"token": "xoxb-test"},
                FileResponseFull,
            )

        assert result.file.id == "F1"
        assert seen[0].url.path == "/api/files.upload"
        assert b'filename="notes.txt"' in seen[0].content
        assert b"release notes" in seen[0].content

    @pytest.mark.asyncio
    async def test_file_closed_after_server_error(self, tmp_path, monkeypatch) -> None:
        path = tmp_path / "notes.txt"
        path.write_bytes(b"release notes")

        opened = []
        real_open = Path.open

        def tracking_open(self, *args, **kwargs):
            fh = real_open(self, *args, **kwargs)
            opened.append(fh)
            return fh

        monkeypatch.setattr(Path, "open", tracking_open)

        async with _http(lambda request: httpx.Response(503, text="<html></html>")) as http:
            with pytest.raises(SlackServerError):
                await post_local_with_multipart_response(
                    http,
                    "https://slack.test/api/",
                    "files.upload",
                    str(path),
                    "file",
                    {},
                    FileResponseFull,
                )

        assert len(opened) == 1
        assert opened[0].closed

    @pytest.mark.asyncio
    async def test_missing_file_sends_nothing(self, tmp_path) -> None:
        def handler(request):
            raise AssertionError("no request expected")

        async with _http(handler) as http:
            with pytest.raises(FileNotFoundError):
                await post_local_with_multipart_response(
                    http,
                    "https://slack.test/api/",
                    "files.upload",
                    str(tmp_path / "missing.txt"),
                    "file",
                    {},
                    FileResponseFull,
                )


class TestAdmin:
    @pytest.mark.asyncio
    async def test_admin_endpoint(self) -> None:
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={"ok": True})

        async with _http(handler) as http:
            result = await parse_admin_response(
                http, "setInactive", "acme", {"user": "U1"}, SlackResponse
            )

        assert result.ok is True
        assert seen[0].url.host == "acme.slack.com"
        assert seen[0].url.path == "/api/users.admin.setInactive"
        assert seen[0].url.params["t"].isdigit()
