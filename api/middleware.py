"""
Global middleware and exception handlers.
"""

from __future__ import annotations

import logging
import time

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

from api.responses import envelope, server_bad_request, server_error
from auth.errors import AuthFacadeError

logger = logging.getLogger(__name__)


def _operation(request: Request) -> str:
    route = request.scope.get("route")
    name = getattr(route, "name", None)
    return name or f"{request.method} {request.url.path}"


def register_middleware(app: FastAPI) -> None:
    """Attach any app-level middleware."""

    @app.middleware("http")
    async def request_timer(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed = time.perf_counter() - start
        response.headers["X-Process-Time"] = f"{elapsed:.4f}"
        logger.debug("%s %s — %.3fs", request.method, request.url.path, elapsed)
        return response


def register_exception_handlers(app: FastAPI) -> None:
    """Render façade errors, bad bodies and unexpected failures as envelopes."""

    @app.exception_handler(AuthFacadeError)
    async def handle_auth_error(request: Request, exc: AuthFacadeError):
        return envelope(False, exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_bad_body(request: Request, exc: RequestValidationError):
        logger.debug("Rejected body for %s: %s", _operation(request), exc.errors())
        return server_bad_request("Malformed request body")

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception):
        logger.exception("Unhandled error during %s", _operation(request))
        return server_error()
