"""Routes mounted on ``/``. Every method answers with the same greeting."""

from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from app.utils.request_body import log_request_body

HELLO_WORLD = "Hello World!"

router = APIRouter()


# HEAD is served by the GET handler, body dropped by the server.
@router.api_route("/", methods=["GET", "HEAD"], response_class=PlainTextResponse)
async def read_root(body: Any = Depends(log_request_body)):
    return HELLO_WORLD


@router.post("/", response_class=PlainTextResponse)
async def create_root(body: Any = Depends(log_request_body)):
    return HELLO_WORLD


@router.put("/", response_class=PlainTextResponse)
async def replace_root(body: Any = Depends(log_request_body)):
    return HELLO_WORLD


@router.delete("/", response_class=PlainTextResponse)
async def delete_root(body: Any = Depends(log_request_body)):
    return HELLO_WORLD
