"""
FastAPI middleware for observability.

Correlation ID propagation and per-request access logging.

Dependencies: fastapi, starlette, envreg.observability
System role: Request/response observability injection
"""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from envreg.observability.correlation import clear_correlation_id, set_correlation_id
from envreg.observability.log_utils import log_exception_with_context, log_with_context

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"

# Probes are logged at DEBUG so load balancer checks do not flood INFO logs.
QUIET_PATH_SUFFIXES = ("/health", "/health/db", "/health/llm")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log one line per request with status and latency."""

    async def dispatch(self, request: Request, call_next):
        """
        Time the request and log its outcome.

        Unhandled exceptions are logged with traceback and re-raised.
        """
        started = time.perf_counter()
        path = request.url.path
        level = logging.DEBUG if path.endswith(QUIET_PATH_SUFFIXES) else logging.INFO

        try:
            response: Response = await call_next(request)
        except Exception as e:
            log_exception_with_context(
                logger,
                f"{request.method} {path} failed",
                e,
                method=request.method,
                path=path,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )
            raise

        log_with_context(
            logger,
            level,
            f"{request.method} {path} {response.status_code}",
            method=request.method,
            path=path,
            query=request.url.query or None,
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - started) * 1000, 2),
        )
        return response


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Propagate or generate the X-Correlation-ID header for each request."""

    async def dispatch(self, request: Request, call_next):
        """
        Bind the correlation ID to the request context and echo it back.

        Args:
            request: FastAPI request
            call_next: Next middleware in chain

        Returns:
            Response: Response with correlation ID header
        """
        correlation_id = set_correlation_id(request.headers.get(CORRELATION_HEADER))
        try:
            response: Response = await call_next(request)
        finally:
            clear_correlation_id()
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
