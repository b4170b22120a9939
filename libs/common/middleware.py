"""Request logging for the FitCoach gateway.

Every request gets a request id (taken from ``X-Request-ID`` when the caller
sends one), a start/finish log line and an ``X-Response-Time`` header.
"""
import time
from typing import Callable

from fastapi import FastAPI, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from libs.common.logging import (
    clear_request_context,
    configure_logging,
    get_logger,
    set_request_context,
)

logger = get_logger(__name__)

QUIET_PATHS = frozenset({"/health", "/api/v1/health"})


def _client_ip(request: Request) -> str | None:
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else None


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = set_request_context(
            request_id=request.headers.get("X-Request-ID"),
            path=request.url.path,
            method=request.method,
        )
        try:
            return await self._handle(request, call_next, request_id)
        finally:
            clear_request_context()

    async def _handle(
        self, request: Request, call_next: Callable, request_id: str
    ) -> Response:
        quiet = request.url.path in QUIET_PATHS
        started = time.perf_counter()

        if not quiet:
            logger.info(
                "-> %s %s",
                request.method,
                request.url.path,
                extra={"extra_fields": {"client_ip": _client_ip(request)}},
            )

        try:
            response = await call_next(request)
        except Exception:
            elapsed_ms = round((time.perf_counter() - started) * 1000, 2)
            logger.exception(
                "Unhandled error after %sms",
                elapsed_ms,
                extra={"extra_fields": {"duration_ms": elapsed_ms}},
            )
            raise

        elapsed_ms = round((time.perf_counter() - started) * 1000, 2)
        if not quiet:
            # 4xx are expected on public forms; only 5xx are errors
            level = logger.error if response.status_code >= 500 else logger.info
            level(
                "<- %s %s %d",
                request.method,
                request.url.path,
                response.status_code,
                extra={
                    "extra_fields": {
                        "status_code": response.status_code,
                        "duration_ms": elapsed_ms,
                    }
                },
            )

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Response-Time"] = f"{elapsed_ms}ms"
        return response


def add_observability_middleware(app: FastAPI) -> None:
    configure_logging()
    app.add_middleware(RequestLoggingMiddleware)
