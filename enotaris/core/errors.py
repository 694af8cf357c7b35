"""Error types and the BFF error contract.

Every failure carries a human-readable ``message``. The BFF renders errors
flat, ``{"error": message, "code": code, "request_id": rid}``, the same shape
the enotaris-services backend uses, so browser code reads both alike.
"""

import logging
from typing import Optional
from uuid import uuid4

from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException
from starlette.requests import Request

from enotaris.core.logging import get_request_id

logger = logging.getLogger("enotaris")


class AppError(Exception):
    code = "app_error"
    status_code = 500

    def __init__(self, message: str, *, code: Optional[str] = None, status_code: Optional[int] = None, request_id: Optional[str] = None):
        super().__init__(message)
        self.message = message
        if code:
            self.code = code
        if status_code:
            self.status_code = status_code
        self.request_id = request_id


class ApiError(AppError):
    """A backend call failed.

    ``status_code`` is the backend's HTTP status (500 when it was never
    reached); ``message`` is the backend's ``error`` string or the endpoint's
    fallback text.
    """
    code = "api_error"
    status_code = 500


class UnauthorizedError(AppError):
    code = "unauthorized"
    status_code = 401


class SessionExpiredError(UnauthorizedError):
    """No cached session, or the cached token is past ``expiresAt``."""
    code = "session_expired"


class NotFoundError(AppError, ValueError):
    code = "not_found"
    status_code = 404


def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", None) or get_request_id() or str(uuid4())


def error_response(status_code: int, code: str, message: str, request_id: str) -> JSONResponse:
    response = JSONResponse(
        status_code=status_code,
        content={"error": message, "code": code, "request_id": request_id},
    )
    response.headers["x-request-id"] = request_id
    return response


async def app_error_handler(request: Request, exc: AppError):
    rid = exc.request_id or _request_id(request)
    logger.log(
        logging.ERROR if exc.status_code >= 500 else logging.WARNING,
        "app.error",
        extra={"request_id": rid, "error_code": exc.code, "status": exc.status_code, "path": request.url.path},
    )
    return error_response(exc.status_code, exc.code, exc.message, rid)


async def http_error_handler(request: Request, exc: HTTPException):
    rid = _request_id(request)
    code = "not_found" if exc.status_code == 404 else "http_error"
    message = exc.detail if isinstance(exc.detail, str) and exc.detail else "HTTP error"
    logger.warning("http.error", extra={"request_id": rid, "error_code": code, "status": exc.status_code})
    return error_response(exc.status_code, code, message, rid)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Bad query/path parameters: 400 with the first problem as the message."""
    rid = _request_id(request)
    errors = exc.errors()
    if errors:
        first = errors[0]
        where = ".".join(str(p) for p in first.get("loc", ()) if p not in ("query", "path", "header"))
        message = f"{where}: {first.get('msg')}" if where else str(first.get("msg"))
    else:
        message = "Invalid request"
    logger.warning("validation.error", extra={"request_id": rid, "error_code": "validation_error", "status": 400})
    return error_response(400, "validation_error", message, rid)


async def unhandled_exception_handler(request: Request, exc: Exception):
    rid = _request_id(request)
    logger.error("unhandled.exception", exc_info=True, extra={"request_id": rid, "error_code": "internal_error"})
    return error_response(500, "internal_error", "Unexpected error", rid)
