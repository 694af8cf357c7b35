import logging
import time
from uuid import uuid4

from starlette.middleware.base import BaseHTTPMiddleware

from enotaris.core.logging import latency_bucket_ms, request_id_ctx_var

logger = logging.getLogger("enotaris")

# Probes hit these constantly; their completion is logged at DEBUG
QUIET_PATHS = frozenset({"/healthz"})


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Bind a request_id for the duration of a BFF request.

    An incoming ``x-request-id`` is reused so a browser-side id follows the
    request through the BFF into the backend calls it makes.
    """

    def __init__(self, app, header_name: str = "x-request-id"):
        super().__init__(app)
        self.header_name = header_name

    async def dispatch(self, request, call_next):
        rid = request.headers.get(self.header_name) or uuid4().hex
        request.state.request_id = rid
        bound = request_id_ctx_var.set(rid)

        started = time.perf_counter()
        try:
            response = await call_next(request)
        finally:
            request_id_ctx_var.reset(bound)
        elapsed_ms = (time.perf_counter() - started) * 1000

        response.headers[self.header_name] = rid

        status = getattr(response, "status_code", None)
        if request.url.path in QUIET_PATHS:
            level = logging.DEBUG
        elif status is not None and status >= 500:
            level = logging.WARNING
        else:
            level = logging.INFO
        logger.log(
            level,
            "request.complete",
            extra={
                "request_id": rid,
                "path": request.url.path,
                "method": request.method,
                "status": status,
                "latency_bucket": latency_bucket_ms(elapsed_ms),
            },
        )
        return response
