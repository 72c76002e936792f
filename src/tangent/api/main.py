"""FastAPI application exposing the File Bridge to the UI shell."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import APIRouter, Body, FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from tangent import __version__
from tangent.bridge import BridgeError, UnknownCommandError, invoke
from tangent.utils.config import get_settings
from tangent.utils.log import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    settings = get_settings()
    configure_logging(settings.debug)
    logger.info("Tangent bridge initialized")

    yield

    logger.info("Tangent bridge shutting down")


health_router = APIRouter(tags=["Health"])
bridge_router = APIRouter(prefix="/v1", tags=["Bridge"])


class InvokeResponse(BaseModel):
    """Successful command result."""

    ok: bool = True
    result: Any = Field(default=None, description="Command return value")


class ErrorResponse(BaseModel):
    """Failed command, with the message to show the user."""

    ok: bool = False
    error: str


@health_router.get("/v1/health")
async def health_check() -> dict[str, Any]:
    """Health check endpoint."""
    return {
        "status": "healthy",
        "version": __version__,
        "service": "tangent-bridge",
    }


@bridge_router.post(
    "/invoke/{command}",
    response_model=InvokeResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def invoke_command(
    command: str,
    args: dict[str, Any] | None = Body(default=None),
) -> InvokeResponse:
    """
    Run a bridge command.

    The request body is a JSON object of keyword arguments, e.g.
    ``{"path": "/a/x.js"}`` for ``read_notebook_file``. Runs in the
    threadpool since every command blocks on file I/O.
    """
    return InvokeResponse(result=invoke(command, args))


async def bridge_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Report a BridgeError as its message."""
    status_code = 404 if isinstance(exc, UnknownCommandError) else 400
    logger.info(f"{request.url.path} failed: {exc}")
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=str(exc)).model_dump(),
    )


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log a failure that escaped the bridge and report it without details."""
    logger.exception(f"{request.url.path} failed unexpectedly: {exc}")
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(error="Internal bridge error").model_dump(),
    )


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    application = FastAPI(
        title="Tangent Bridge",
        description="Filesystem command bridge for the Tangent notebook app",
        version=__version__,
        lifespan=lifespan,
    )

    application.include_router(health_router)
    application.include_router(bridge_router)
    application.add_exception_handler(BridgeError, bridge_error_handler)
    application.add_exception_handler(Exception, unexpected_error_handler)

    return application


# Create default app instance
app = create_app()
