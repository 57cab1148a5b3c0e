"""Request body parsing and logging shared by every route."""

import json
import logging
from typing import Any

from fastapi import Request

logger = logging.getLogger("stub_server.request")


def is_json_content_type(content_type: str | None) -> bool:
    """Return True for application/json and any +json media type."""
    if not content_type:
        return False
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


def parse_json_body(raw: bytes) -> dict | list:
    """Decode a raw request body as JSON.

    Only objects and arrays are kept. An empty body, undecodable bytes,
    malformed JSON or a bare scalar all give an empty dict.
    """
    if not raw or not raw.strip():
        return {}
    try:
        parsed = json.loads(raw)
    except (UnicodeDecodeError, ValueError):
        return {}
    if isinstance(parsed, (dict, list)):
        return parsed
    return {}


async def read_request_body(request: Request) -> dict | list:
    """Read the body of ``request`` and parse it if it is declared as JSON."""
    if not is_json_content_type(request.headers.get("content-type")):
        return {}
    return parse_json_body(await request.body())


async def log_request_body(request: Request) -> Any:
    """Dependency: parse the request body and log it before the handler runs."""
    body = await read_request_body(request)
    logger.info(
        json.dumps(body),
        extra={
            "method": request.method,
            "path": request.url.path,
            "body": body,
        },
    )
    return body
