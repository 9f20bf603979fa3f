"""Access log with latency for every request, tagged with its request id."""
from __future__ import annotations

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from crm_service.api.middleware.correlation_id import correlation_id_ctx

logger = logging.getLogger(__name__)


class RequestTimingMiddleware(BaseHTTPMiddleware):
    """Must sit inside ``CorrelationIdMiddleware`` so the request id is set."""

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        started = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - started) * 1000
        # Continuation pages are logged apart from first pages
        page = "next" if "cursor" in request.query_params else "first"
        logger.info(
            "request_id=%s %s %s status=%d page=%s duration=%.1fms",
            correlation_id_ctx.get() or "-",
            request.method,
            request.url.path,
            response.status_code,
            page,
            duration_ms,
        )
        return response
