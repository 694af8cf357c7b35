# enotaris/conftest.py
import sys
from pathlib import Path
from typing import Any, Callable, Optional, Union

import httpx
import pytest

# Add project root to PYTHONPATH
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from enotaris.client.http import ApiClient  # noqa: E402

BACKEND_URL = "http://backend.test"

Route = Union[tuple[int, Any], Callable[[httpx.Request], httpx.Response]]


class FakeBackend:
    """In-memory enotaris-services stand-in served through httpx.MockTransport.

    Routes are keyed by (method, path). A route is either ``(status, body)`` or
    a callable taking the request. Unknown routes answer 404.
    """

    def __init__(self):
        self.routes: dict[tuple[str, str], Route] = {}
        self.requests: list[httpx.Request] = []

    def add(self, method: str, path: str, status: int = 200, body: Any = None, handler: Optional[Callable] = None):
        self.routes[(method.upper(), path)] = handler or (status, body)

    def fail_network(self, method: str, path: str):
        def raise_connect(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        self.add(method, path, handler=raise_connect)

    def requests_to(self, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path == path]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"error": f"no route {request.method} {request.url.path}"})
        if callable(route):
            return route(request)
        status, body = route
        if isinstance(body, (bytes, str)):
            return httpx.Response(status, content=body)
        return httpx.Response(status, json=body)


@pytest.fixture
def fake_backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def api(fake_backend) -> ApiClient:
    return ApiClient(BACKEND_URL, transport=httpx.MockTransport(fake_backend.handler))


@pytest.fixture
def bff_client(api):
    """TestClient for the BFF app with the backend replaced by ``fake_backend``."""
    from fastapi.testclient import TestClient

    from enotaris.core.auth import get_api
    from enotaris.main import app

    app.dependency_overrides[get_api] = lambda: api
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def case_json(case_id: str = "c1", **overrides) -> dict:
    body = {
        "id": case_id,
        "office_id": "o1",
        "category": "notaris",
        "nomor_draft": "D-001",
        "jenis_akta": "Akta Jual Beli",
        "nama_para_pihak": "Budi & Sari",
        "staf_penanggung_jawab_id": "u1",
        "status": "drafting",
        "target_selesai": None,
        "created_at": "2025-01-01T08:00:00Z",
        "updated_at": "2025-01-01T08:00:00Z",
    }
    body.update(overrides)
    return body


def task_json(task_id: str = "t1", case_id: str = "c1", **overrides) -> dict:
    body = {
        "id": task_id,
        "case_id": case_id,
        "nama_task": "Draft akta",
        "status": "todo",
        "priority": 0,
        "sort_order": 0,
        "created_at": "2025-01-02T08:00:00Z",
        "updated_at": "2025-01-02T08:00:00Z",
    }
    body.update(overrides)
    return body


def history_json(history_id: str, task_id: str, field: str, changed_by: str, created_at: str) -> dict:
    return {
        "id": history_id,
        "task_id": task_id,
        "field": field,
        "old_value": None,
        "new_value": None,
        "changed_by": changed_by,
        "created_at": created_at,
    }


def user_json(user_id: str, name: str = "", email: str = "", role_name: str = "staff") -> dict:
    return {
        "id": user_id,
        "office_id": "o1",
        "email": email or f"{user_id}@kantor.test",
        "name": name,
        "role_name": role_name,
        "active": True,
    }
