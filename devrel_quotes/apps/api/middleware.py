"""ASGI middleware tagging each webhook call with a correlation id."""

from __future__ import annotations

import time
import uuid

from devrel_quotes.core.logging import client_ip_context, correlation_id_context, get_logger

logger = get_logger(__name__)


class CorrelationIdMiddleware:  # pylint: disable=too-few-public-methods
    """Bind a correlation id for each HTTP request and echo it in responses.

    The id is taken from ``X-Request-ID`` or ``X-Correlation-ID`` when the
    caller sends one, otherwise a random hex id is generated.
    """

    header_names = ("X-Request-ID", "X-Correlation-ID")

    def __init__(self, app) -> None:  # type: ignore[no-untyped-def]
        self.app = app

    async def __call__(self, scope, receive, send):  # type: ignore[no-untyped-def]
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        correlation_id = self._resolve_correlation_id(scope.get("headers", []))
        echoed = [(name.encode(), correlation_id.encode()) for name in self.header_names]
        client = scope.get("client")
        status_code = 500

        async def send_wrapper(message):  # type: ignore[no-untyped-def]
            nonlocal status_code
            if message.get("type") == "http.response.start":
                status_code = message.get("status", status_code)
                message["headers"] = list(message.get("headers", [])) + echoed
            await send(message)

        started = time.perf_counter()
        with correlation_id_context(correlation_id), client_ip_context(
            client[0] if client else None
        ):
            try:
                await self.app(scope, receive, send_wrapper)
            finally:
                logger.info(
                    "%s %s -> %s",
                    scope.get("method", ""),
                    scope.get("path", ""),
                    status_code,
                    extra={
                        "event": "http_request",
                        "status_code": status_code,
                        "duration_ms": round((time.perf_counter() - started) * 1000.0, 2),
                    },
                )

    def _resolve_correlation_id(self, raw_headers) -> str:  # type: ignore[no-untyped-def]
        headers = {key.decode().lower(): value.decode() for key, value in raw_headers}
        for name in self.header_names:
            value = headers.get(name.lower())
            if value:
                return value
        return uuid.uuid4().hex


__all__ = ["CorrelationIdMiddleware"]
