"""
Request dependencies for the BFF.

Routes forward the caller's bearer token to the backend unchanged; the BFF
does not verify it.
"""

from typing import Optional

from fastapi import Header, Request

from enotaris.client.http import ApiClient
from enotaris.core.errors import AppError, UnauthorizedError
from enotaris.core.logging import get_request_id


async def get_bearer_token(
    request: Request,
    authorization: Optional[str] = Header(None, description="Bearer <token> issued by /api/v1/auth/login"),
) -> str:
    """Token from ``Authorization: Bearer <token>``; 401 ``Unauthorized`` otherwise."""
    if not authorization or not authorization.startswith("Bearer "):
        rid = getattr(request.state, "request_id", None) or get_request_id()
        raise UnauthorizedError("Unauthorized", request_id=rid)
    return authorization[len("Bearer "):]


def get_api(request: Request) -> ApiClient:
    """Backend client owned by the app lifespan.

    Outside the lifespan there is no client to hand out; one created here
    would never be closed.
    """
    api = getattr(request.app.state, "api", None)
    if api is None:
        raise AppError("Backend client not started", code="backend_unavailable", status_code=503)
    return api
