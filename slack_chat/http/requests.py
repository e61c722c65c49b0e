"""
Request builders for the Slack Web API.

Three body shapes are used:
- form-encoded values (most Web API methods)
- JSON (response_url callbacks)
- multipart with a single file field (uploads); extra values go in the query string
"""

import json
from collections.abc import Mapping
from typing import Any, BinaryIO

import httpx
from pydantic import BaseModel

JSON_CONTENT_TYPE = "application/json; charset=utf-8"


def form_request(endpoint: str, values: Mapping[str, str]) -> httpx.Request:
    """Build a POST whose body is the url-encoded values."""
    return httpx.Request(
        "POST",
        endpoint,
        data=dict(values),
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    )


def json_request(endpoint: str, body: Any) -> httpx.Request:
    """Build a POST carrying body as JSON.

    Pydantic models are dumped without their unset (None) fields. Anything
    else goes through json.dumps, so encoding errors surface here, before a
    request exists.
    """
    if isinstance(body, BaseModel):
        payload = body.model_dump_json(exclude_none=True)
    else:
        payload = json.dumps(body)
    return httpx.Request(
        "POST",
        endpoint,
        content=payload.encode("utf-8"),
        headers={"Content-Type": JSON_CONTENT_TYPE},
    )


def file_upload_request(
    endpoint: str,
    fieldname: str,
    filename: str,
    reader: BinaryIO,
    values: Mapping[str, str],
) -> httpx.Request:
    """Build a multipart POST with reader's bytes under fieldname.

    The reader is drained here so the caller may close it as soon as the
    request is sent.
    """
    if not fieldname:
        raise ValueError("fieldname must not be empty")
    content = reader.read()
    return httpx.Request(
        "POST",
        endpoint,
        params=dict(values),
        files={fieldname: (filename, content)},
    )
