"""HTTP plumbing for the enotaris-services REST client.

Every endpoint function goes through ``request_json``: the JSON body is parsed
regardless of status, and a non-2xx response raises ``ApiError`` carrying the
server's ``error`` string or the endpoint's fallback message. No retries, no
caching.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from enotaris.core.config import settings
from enotaris.core.errors import ApiError
from enotaris.core.logging import get_request_id
from enotaris.core.metrics import backend_requests_in_flight, backend_requests_total, normalize_path
from enotaris.core.tracing import start_span

logger = logging.getLogger("enotaris")

M = TypeVar("M", bound=BaseModel)


class ApiClient:
    """Connection to the backend: base URL plus an httpx client. Holds no session."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        http: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = (base_url if base_url is not None else settings.api_base_url).rstrip("/")
        if http is None:
            http = httpx.AsyncClient(
                timeout=timeout if timeout is not None else settings.HTTP_TIMEOUT_S,
                transport=transport,
            )
        self.http = http

    def url_for(self, path: str) -> str:
        if path.startswith("http"):
            return path
        return f"{self.base_url}{path if path.startswith('/') else '/' + path}"

    async def aclose(self) -> None:
        await self.http.aclose()

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()


def build_headers(token: Optional[str], *, json_body: bool = True, headers: Optional[dict] = None) -> dict:
    out = dict(headers or {})
    if token:
        out["Authorization"] = f"Bearer {token}"
    if json_body and not any(k.lower() == "content-type" for k in out):
        out["Content-Type"] = "application/json"
    rid = get_request_id()
    if rid:
        out["X-Request-Id"] = rid
    return out


async def api_fetch(
    api: ApiClient,
    method: str,
    path: str,
    *,
    token: Optional[str] = None,
    json: Any = None,
    params: Optional[dict] = None,
    files: Optional[dict] = None,
    data: Optional[dict] = None,
) -> httpx.Response:
    """Send one request with bearer + JSON headers. Multipart uploads let httpx set the boundary."""
    headers = build_headers(token, json_body=files is None)
    return await api.http.request(
        method,
        api.url_for(path),
        headers=headers,
        json=json,
        params=_clean_params(params),
        files=files,
        data=data,
    )


def _clean_params(params: Optional[dict]) -> Optional[dict]:
    if not params:
        return None
    cleaned = {}
    for key, value in params.items():
        if value is None or value == "":
            continue
        cleaned[key] = str(value).lower() if isinstance(value, bool) else str(value)
    return cleaned or None


def parse_body(response: httpx.Response, default: Any) -> Any:
    try:
        return response.json()
    except ValueError:
        return default


def error_message(body: Any, fallback: str) -> str:
    if isinstance(body, dict) and isinstance(body.get("error"), str) and body["error"]:
        return body["error"]
    return fallback


async def request_json(
    api: ApiClient,
    method: str,
    path: str,
    *,
    fallback: str,
    token: Optional[str] = None,
    json: Any = None,
    params: Optional[dict] = None,
    files: Optional[dict] = None,
    data: Optional[dict] = None,
    default: Any = None,
) -> Any:
    """Issue a request and return the parsed JSON body, raising ``ApiError`` on failure."""
    if default is None:
        default = {}
    labels = {"method": method.upper(), "path": normalize_path(path)}
    backend_requests_in_flight.inc()
    try:
        with start_span("backend.request", {"http.method": labels["method"], "http.target": labels["path"]}):
            response = await api_fetch(
                api, method, path, token=token, json=json, params=params, files=files, data=data
            )
    except httpx.HTTPError as exc:
        backend_requests_total.inc(labels={**labels, "status": "network_error"})
        logger.warning(
            "api.network_error",
            extra={"path": path, "error_code": "network_error", "error_message": str(exc)},
        )
        raise ApiError(fallback, code="network_error") from exc
    finally:
        backend_requests_in_flight.dec()

    backend_requests_total.inc(labels={**labels, "status": str(response.status_code)})
    body = parse_body(response, default)
    if not response.is_success:
        logger.warning(
            "api.error",
            extra={"path": path, "status": response.status_code, "error_code": "api_error"},
        )
        raise ApiError(error_message(body, fallback), status_code=response.status_code)
    return body


def parse_model(model: Type[M], body: Any, fallback: str) -> M:
    try:
        return model.model_validate(body)
    except PydanticValidationError as exc:
        raise ApiError(fallback, code="invalid_response") from exc


def parse_list(model: Type[M], body: Any, fallback: str) -> list[M]:
    if not isinstance(body, list):
        return []
    try:
        return TypeAdapter(list[model]).validate_python(body)
    except PydanticValidationError as exc:
        raise ApiError(fallback, code="invalid_response") from exc


async def request_list(
    api: ApiClient,
    model: Type[M],
    path: str,
    *,
    fallback: str,
    token: Optional[str] = None,
    params: Optional[dict] = None,
) -> list[M]:
    """GET an endpoint that answers with a JSON array; a non-array body reads as empty."""
    body = await request_json(api, "GET", path, fallback=fallback, token=token, params=params, default=[])
    return parse_list(model, body, fallback)


def paged(data: Any) -> dict:
    """Normalize a ``{data, total}`` envelope: missing data reads as [], missing total as 0."""
    if not isinstance(data, dict):
        return {"data": [], "total": 0}
    return {"data": data.get("data") or [], "total": data.get("total") or 0}
