import logging

from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from enotaris.core.errors import AppError, NotFoundError, app_error_handler
from enotaris.core.middleware.request_id import RequestIdMiddleware


def _make_app():
    app = FastAPI()
    app.add_middleware(RequestIdMiddleware)
    app.add_exception_handler(AppError, app_error_handler)

    @app.get("/")
    async def root(request: Request):
        return {"request_id": getattr(request.state, "request_id", None)}

    @app.get("/missing")
    async def missing():
        raise NotFoundError("Berkas tidak ditemukan")

    return app


def test_generates_request_id_when_missing():
    client = TestClient(_make_app())

    resp = client.get("/")
    assert resp.status_code == 200
    rid_header = resp.headers.get("x-request-id")
    body_rid = resp.json().get("request_id")

    assert rid_header
    assert body_rid
    assert rid_header == body_rid


def test_echoes_provided_request_id():
    client = TestClient(_make_app())

    provided = "test-rid-123"
    resp = client.get("/", headers={"X-Request-Id": provided})

    assert resp.status_code == 200
    assert resp.headers.get("x-request-id") == provided
    assert resp.json().get("request_id") == provided


def test_error_body_carries_request_id():
    client = TestClient(_make_app())

    resp = client.get("/missing", headers={"X-Request-Id": "rid-404"})

    assert resp.status_code == 404
    assert resp.json() == {"error": "Berkas tidak ditemukan", "code": "not_found", "request_id": "rid-404"}


def test_completion_is_logged_with_request_id(caplog):
    client = TestClient(_make_app())
    with caplog.at_level(logging.INFO, logger="enotaris"):
        resp = client.get("/", headers={"X-Request-Id": "rid-log"})

    assert resp.status_code == 200
    records = [r for r in caplog.records if r.getMessage() == "request.complete"]
    assert records
    assert records[-1].request_id == "rid-log"
    assert records[-1].path == "/"
