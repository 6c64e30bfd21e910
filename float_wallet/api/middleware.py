"""Request context middleware: request id propagation and latency metrics"""

import uuid
import time
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from float_wallet.infrastructure.observability.logging import request_id_var
from float_wallet.infrastructure.observability.metrics import request_duration_histogram

REQUEST_ID_HEADER = "X-Request-ID"


def route_template(request: Request) -> str:
    """Matched route path such as /v1/cards/{card_id}; raw path when nothing matched"""
    route = request.scope.get("route")
    return getattr(route, "path", request.url.path)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Per-request bookkeeping.

    - Reuses the caller's X-Request-ID or mints one, stores it on
      request.state and in the logging context, and echoes it back
    - Observes latency labelled by route template so card ids stay out of
      the metric's label set
    """

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id
        token = request_id_var.set(request_id)
        started = time.perf_counter()

        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)

        request_duration_histogram.labels(
            method=request.method,
            endpoint=route_template(request),
            status=response.status_code,
        ).observe(time.perf_counter() - started)

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
