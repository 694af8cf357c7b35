import time

from starlette.middleware.base import BaseHTTPMiddleware

from enotaris.core.logging import latency_bucket_ms
from enotaris.core.metrics import http_request_latency_total, http_requests_total, normalize_path


class MetricsMiddleware(BaseHTTPMiddleware):
    """Count BFF requests by route and status, and by latency bucket."""

    async def dispatch(self, request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        path = normalize_path(request.url.path)
        http_requests_total.inc(labels={
            "method": request.method.upper(),
            "path": path,
            "status": str(response.status_code),
        })
        http_request_latency_total.inc(labels={"path": path, "bucket": latency_bucket_ms(elapsed_ms)})
        return response
