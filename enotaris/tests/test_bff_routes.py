"""Tests for the BFF list proxies, case views and error contract."""

from datetime import date, timedelta

from enotaris.conftest import case_json, task_json, user_json


class TestAuth:
    def test_missing_bearer_is_401(self, bff_client):
        resp = bff_client.get("/api/cases")
        assert resp.status_code == 401
        body = resp.json()
        assert body["error"] == "Unauthorized"
        assert body["request_id"] == resp.headers["x-request-id"]

    def test_non_bearer_scheme_is_401(self, bff_client):
        resp = bff_client.get("/api/tasks", headers={"Authorization": "Basic abc"})
        assert resp.status_code == 401

    def test_healthz_needs_no_token(self, bff_client):
        resp = bff_client.get("/healthz")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}


AUTH = {"Authorization": "Bearer tok"}


class TestCasesProxy:
    def test_pic_names_and_paging(self, bff_client, fake_backend):
        fake_backend.add(
            "GET",
            "/api/v1/cases",
            body={
                "data": [
                    case_json("c1", staf_penanggung_jawab_id="u1"),
                    case_json("c2", staf_penanggung_jawab_id="u2"),
                    case_json("c3", staf_penanggung_jawab_id="ghost"),
                    case_json("c4", staf_penanggung_jawab_id=None),
                ],
                "total": 41,
            },
        )
        fake_backend.add("GET", "/api/v1/users", body=[user_json("u1", name=" Rina "), user_json("u2", email="d@k.test")])

        resp = bff_client.get("/api/cases", params={"page": 3, "size": 10, "sortField": "created_at"}, headers=AUTH)

        assert resp.status_code == 200
        body = resp.json()
        assert body["totalCount"] == 41
        assert [r["pic_name"] for r in body["data"]] == ["Rina", "d@k.test", "ghost", ""]
        params = fake_backend.requests_to("/api/v1/cases")[0].url.params
        assert params["limit"] == "10"
        assert params["offset"] == "20"
        assert params["sort_field"] == "created_at"
        assert fake_backend.requests_to("/api/v1/cases")[0].headers["authorization"] == "Bearer tok"

    def test_size_and_page_are_clamped(self, bff_client, fake_backend):
        fake_backend.add("GET", "/api/v1/cases", body={"data": [], "total": 0})
        fake_backend.add("GET", "/api/v1/users", body=[])

        bff_client.get("/api/cases", params={"page": 0, "size": 500}, headers=AUTH)
        bff_client.get("/api/cases", params={"page": "x", "size": "0"}, headers=AUTH)

        first, second = [r.url.params for r in fake_backend.requests_to("/api/v1/cases")]
        assert (first["limit"], first["offset"]) == ("100", "0")
        assert (second["limit"], second["offset"]) == ("1", "0")

    def test_users_failure_degrades(self, bff_client, fake_backend):
        fake_backend.add("GET", "/api/v1/cases", body={"data": [case_json("c1", staf_penanggung_jawab_id="u1")], "total": 1})
        fake_backend.add("GET", "/api/v1/users", status=403, body={"error": "Forbidden"})

        resp = bff_client.get("/api/cases", headers=AUTH)

        assert resp.status_code == 200
        assert resp.json()["data"][0]["pic_name"] == "u1"

    def test_backend_error_passes_through(self, bff_client, fake_backend):
        fake_backend.add("GET", "/api/v1/cases", status=403, body={"error": "Akses ditolak"})
        fake_backend.add("GET", "/api/v1/users", body=[])

        resp = bff_client.get("/api/cases", headers=AUTH)

        assert resp.status_code == 403
        assert resp.json()["error"] == "Akses ditolak"

    def test_backend_error_without_message(self, bff_client, fake_backend):
        fake_backend.add("GET", "/api/v1/cases", status=500, body={})
        fake_backend.add("GET", "/api/v1/users", body=[])

        resp = bff_client.get("/api/cases", headers=AUTH)

        assert resp.status_code == 500
        assert resp.json()["error"] == "Gagal memuat berkas"

    def test_unreachable_backend_is_500(self, bff_client, fake_backend):
        fake_backend.fail_network("GET", "/api/v1/cases")
        fake_backend.add("GET", "/api/v1/users", body=[])

        resp = bff_client.get("/api/cases", headers=AUTH)

        assert resp.status_code == 500
        assert resp.json()["code"] == "network_error"


class TestClientsProxy:
    def test_enrichment(self, bff_client, fake_backend):
        fake_backend.add(
            "GET",
            "/api/v1/clients",
            body={
                "data": [
                    {"id": "k1", "type": "entity", "full_name": "PT Maju", "npwp": "01.234", "email": "pt@maju.test", "updated_at": "2025-01-01T00:00:00Z"},
                    {"id": "k2", "type": "individual", "full_name": "Sari", "nik": "3171", "npwp": "02.1", "phone": "0812"},
                    {"id": "k3", "type": "individual", "full_name": "Tono"},
                ],
                "total": 3,
            },
        )

        resp = bff_client.get("/api/clients", params={"type": "entity", "search": "maju"}, headers=AUTH)

        rows = resp.json()["data"]
        assert [r["type_label"] for r in rows] == ["Badan Hukum", "Perorangan", "Perorangan"]
        assert [r["nik_npwp"] for r in rows] == ["01.234", "3171 / 02.1", "-"]
        assert [r["kontak"] for r in rows] == ["pt@maju.test", "0812", "-"]
        assert [r["last_activity"] for r in rows] == ["2025-01-01T00:00:00Z", None, None]
        assert rows[0]["full_name"] == "PT Maju"
        params = fake_backend.requests[0].url.params
        assert params["type"] == "entity"
        assert params["search"] == "maju"

    def test_phone_and_email_joined(self, bff_client, fake_backend):
        fake_backend.add("GET", "/api/v1/clients", body={"data": [{"id": "k1", "phone": "0812", "email": "a@b.test"}], "total": 1})

        rows = bff_client.get("/api/clients", headers=AUTH).json()["data"]

        assert rows[0]["kontak"] == "0812 · a@b.test"

    def test_error_fallback(self, bff_client, fake_backend):
        fake_backend.add("GET", "/api/v1/clients", status=502, body="bad gateway")

        resp = bff_client.get("/api/clients", headers=AUTH)

        assert resp.status_code == 502
        assert resp.json()["error"] == "Gagal memuat klien"


class TestTasksProxy:
    def test_overdue_flag(self, bff_client, fake_backend):
        yesterday = (date.today() - timedelta(days=1)).isoformat()
        fake_backend.add(
            "GET",
            "/api/v1/tasks",
            body={
                "data": [
                    {"id": "t1", "due_date": yesterday, "status": "todo"},
                    {"id": "t2", "due_date": yesterday, "status": "done"},
                    {"id": "t3", "due_date": None, "status": "todo"},
                ],
                "total": 3,
            },
        )

        resp = bff_client.get("/api/tasks", params={"status": "todo", "sortOrder": "asc"}, headers=AUTH)

        assert resp.status_code == 200
        assert [r["is_overdue"] for r in resp.json()["data"]] == [True, False, False]
        assert resp.json()["totalCount"] == 3
        assert fake_backend.requests[0].url.params["sort_order"] == "asc"


class TestCaseViews:
    def _seed(self, fake_backend):
        fake_backend.add("GET", "/api/v1/cases/c1", body=case_json(created_at="2025-01-01T00:00:00Z"))
        fake_backend.add(
            "GET",
            "/api/v1/cases/c1/tasks",
            body=[task_json("t1", created_at="2025-01-02T00:00:00Z", updated_at="2025-01-03T00:00:00Z")],
        )
        fake_backend.add("GET", "/api/v1/tasks/t1/history", body=[])
        fake_backend.add("GET", "/api/v1/users", body=[user_json("u1", name="Rina")])
        fake_backend.add("GET", "/api/v1/jenis-pekerjaan", body=[])

    def test_timeline(self, bff_client, fake_backend):
        self._seed(fake_backend)

        resp = bff_client.get("/api/cases/c1/timeline", headers=AUTH)

        assert resp.status_code == 200
        body = resp.json()
        assert body["case_id"] == "c1"
        assert [e["type"] for e in body["events"]] == ["case_created", "task_created", "task_updated"]

    def test_detail(self, bff_client, fake_backend):
        self._seed(fake_backend)

        resp = bff_client.get("/api/cases/c1/detail", headers=AUTH)

        assert resp.status_code == 200
        body = resp.json()
        assert body["case"]["id"] == "c1"
        assert body["pic_name"] == "Rina"
        assert body["progress_percent"] == 0
        assert len(body["timeline"]) == 3

    def test_missing_case(self, bff_client, fake_backend):
        self._seed(fake_backend)
        fake_backend.add("GET", "/api/v1/cases/c1", status=404, body={"error": "case not found"})

        resp = bff_client.get("/api/cases/c1/detail", headers=AUTH)

        assert resp.status_code == 404
        assert resp.json()["error"] == "case not found"


class TestReviewFeed:
    def test_non_notaris_gets_nothing(self, bff_client, fake_backend):
        resp = bff_client.get("/api/review/pending", headers={**AUTH, "X-User-Role": "staff"})

        assert resp.status_code == 200
        assert resp.json() == []
        assert fake_backend.requests == []

    def test_notaris_feed(self, bff_client, fake_backend):
        fake_backend.add("GET", "/api/v1/cases", body={"data": [case_json("c1")], "total": 1})
        fake_backend.add(
            "GET",
            "/api/v1/cases/c1/document-entries",
            body=[{"id": "e1", "item_key": "ktp", "file_key": "k", "verification_status": "pending"}],
        )

        resp = bff_client.get("/api/review/pending", params={"case_limit": 5}, headers={**AUTH, "X-User-Role": "Notaris"})

        body = resp.json()
        assert [item["entry"]["id"] for item in body] == ["e1"]
        assert body[0]["case"]["id"] == "c1"
        assert fake_backend.requests_to("/api/v1/cases")[0].url.params["limit"] == "5"


class TestErrorContract:
    def test_bad_query_param_is_flat_400(self, bff_client):
        resp = bff_client.get("/api/review/pending", params={"case_limit": 0}, headers=AUTH)

        assert resp.status_code == 400
        body = resp.json()
        assert body["code"] == "validation_error"
        assert body["error"].startswith("case_limit")
        assert body["request_id"] == resp.headers["x-request-id"]

    def test_unknown_route_is_flat_404(self, bff_client):
        resp = bff_client.get("/api/nope", headers=AUTH)

        assert resp.status_code == 404
        assert resp.json()["code"] == "not_found"

    def test_request_id_reaches_backend(self, bff_client, fake_backend):
        fake_backend.add("GET", "/api/v1/tasks", body={"data": [], "total": 0})

        bff_client.get("/api/tasks", headers={**AUTH, "X-Request-Id": "rid-bff"})

        assert fake_backend.requests[0].headers["x-request-id"] == "rid-bff"


class TestBackendClientLifecycle:
    """The backend client lives exactly as long as the app lifespan."""

    def test_lifespan_opens_and_closes_the_client(self):
        from fastapi.testclient import TestClient

        from enotaris.client.http import ApiClient
        from enotaris.main import app

        with TestClient(app):
            api = app.state.api
            assert isinstance(api, ApiClient)
        assert app.state.api is None
        assert api.http.is_closed

    def test_no_client_outside_lifespan_is_503(self):
        from fastapi.testclient import TestClient

        from enotaris.main import app

        app.state.api = None
        resp = TestClient(app).get("/api/cases", headers={"Authorization": "Bearer tok"})

        assert resp.status_code == 503
        assert resp.json()["code"] == "backend_unavailable"
        assert app.state.api is None
