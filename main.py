"""Stub HTTP Service - FastAPI Application Entry Point

Serves a fixed greeting on ``/`` and rejects every token refresh, logging
each request body to standard output.
"""

import logging
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app import __version__
from app.routers import auth, root
from config import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%S",
    stream=sys.stdout,
)
logger = logging.getLogger("stub_server")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for shutdown events.

    The startup message is logged by ``run`` once the listener is bound.
    """
    yield

    # Shutdown
    logger.info("Shutting down server")


app = FastAPI(
    title="Stub HTTP Service",
    version=__version__,
    lifespan=lifespan,
    # Only the stub routes are reachable; everything else is a 404.
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)

app.include_router(auth.router)
app.include_router(root.router)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render routing failures as a plain-text 404.

    A known path hit with an unlisted method is reported as not found
    rather than 405.
    """
    if exc.status_code in (
        status.HTTP_404_NOT_FOUND,
        status.HTTP_405_METHOD_NOT_ALLOWED,
    ):
        return PlainTextResponse(
            f"Cannot {request.method} {request.url.path}",
            status_code=status.HTTP_404_NOT_FOUND,
        )
    return PlainTextResponse(
        str(exc.detail),
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler for unhandled errors.

    Never exposes internal error details to clients.
    """
    logger.error(
        f"Unhandled exception: {type(exc).__name__}",
        extra={
            "path": request.url.path,
            "method": request.method,
        },
        exc_info=True,
    )
    return PlainTextResponse(
        "Internal Server Error",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def run():
    """Bind the listener, log the startup message and serve until stopped.

    A failed bind (port already in use) exits the process with status 1
    before anything is logged as started.
    """
    config = uvicorn.Config(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
    server = uvicorn.Server(config)
    sock = config.bind_socket()
    port = sock.getsockname()[1]
    logger.info(
        f"Server started on port {port}",
        extra={"environment": settings.environment, "port": port},
    )
    logger.info(f"Environment: {settings.environment}")
    server.run(sockets=[sock])


if __name__ == "__main__":
    run()
