"""Authentication routes."""

from typing import Any

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse

from app.utils.request_body import log_request_body

REFRESH_TOKEN_EXPIRED = "Refresh Token has been expired"

router = APIRouter(prefix="/auth")


@router.post("/refresh-token", response_class=PlainTextResponse)
async def refresh_token(body: Any = Depends(log_request_body)):
    """Reject every refresh attempt as expired, whatever the payload."""
    return PlainTextResponse(
        REFRESH_TOKEN_EXPIRED, status_code=status.HTTP_401_UNAUTHORIZED
    )
