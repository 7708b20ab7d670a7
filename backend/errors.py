"""Custom exceptions and centralized FastAPI error handlers."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ProxyError(Exception):
    """Base exception with HTTP status code."""

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.status_code = status_code


class InvalidParameterError(ProxyError):
    def __init__(self, message: str = "Invalid type parameter"):
        super().__init__(message, status_code=400)


class UpstreamError(ProxyError):
    """Network, HTTP status or timeout failure talking to the upstream provider."""


class ComputeError(ProxyError):
    """Upstream data could not be turned into a view."""


class DecodeError(ComputeError):
    """Upstream payload did not match the expected shape."""


class ViewUnavailableError(ProxyError):
    """Fixed, non-diagnostic failure returned to callers of a view endpoint."""


def register_error_handlers(app: FastAPI) -> None:
    """Register centralized exception handlers on the FastAPI app."""

    @app.exception_handler(ProxyError)
    async def handle_proxy_error(_request: Request, exc: ProxyError):
        return JSONResponse({"error": str(exc)}, status_code=exc.status_code)

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception):
        logger.exception("Unhandled error: %s", exc)
        return JSONResponse(
            {"error": "Internal server error"},
            status_code=500,
        )
