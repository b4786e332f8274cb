"""Request id tagging and latency recording for dashboard and form routes"""

import uuid
import time
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from hitsort_dashboard.infrastructure.observability.metrics import request_duration_histogram


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Give every call an id that ties its dashboard, form and Record Store log
    lines together. A presentation layer that already sends X-Request-ID keeps
    its own id; the id is echoed back on the response either way.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id

        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response


class MetricsMiddleware(BaseHTTPMiddleware):
    """Observe request latency per route template, so each seller's history page shares one series"""

    async def dispatch(self, request: Request, call_next):
        start_time = time.perf_counter()

        response = await call_next(request)

        duration = time.perf_counter() - start_time
        # unmatched paths have no route and fall back to the raw path
        route = request.scope.get("route")
        request_duration_histogram.labels(
            method=request.method,
            endpoint=getattr(route, "path", request.url.path),
            status=response.status_code,
        ).observe(duration)

        return response
