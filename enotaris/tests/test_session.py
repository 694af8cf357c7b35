"""Tests for the on-disk session cache and login/logout flow."""

import json
import os
import stat
from datetime import datetime, timezone

import pytest

from enotaris.conftest import user_json
from enotaris.core.errors import ApiError, SessionExpiredError
from enotaris.features.session.service import AuthSession, is_notaris
from enotaris.features.session.store import SessionStore
from enotaris.models.auth import LoginResult, UserResponse
from enotaris.models.office import OfficeProfile, office_display_name

FUTURE = "2999-01-01T00:00:00Z"
PAST = "2000-01-01T00:00:00Z"


def _login_result(expires_at: str = FUTURE, role_name: str = "notaris") -> LoginResult:
    return LoginResult.model_validate(
        {"token": "tok-1", "expires_at": expires_at, "user": user_json("u1", name="Rina", role_name=role_name)}
    )


@pytest.fixture
def store(tmp_path):
    return SessionStore(tmp_path / "nested" / "session.json")


class TestSessionStore:
    def test_save_then_load(self, store):
        store.save(_login_result())

        loaded = store.load()

        assert loaded.token == "tok-1"
        assert loaded.user.name == "Rina"
        assert store.token() == "tok-1"

    def test_file_uses_expires_at_camel_case(self, store):
        store.save(_login_result())
        raw = json.loads(store.path.read_text())
        assert set(raw) == {"token", "expiresAt", "user"}
        assert raw["expiresAt"] == FUTURE

    @pytest.mark.skipif(os.name == "nt", reason="POSIX permissions")
    def test_file_is_owner_only_under_open_umask(self, store):
        old = os.umask(0o000)
        try:
            store.save(_login_result())
        finally:
            os.umask(old)

        assert stat.S_IMODE(store.path.stat().st_mode) == 0o600
        assert [p.name for p in store.path.parent.iterdir()] == ["session.json"]

    @pytest.mark.skipif(os.name == "nt", reason="POSIX permissions")
    def test_overwrite_tightens_existing_file(self, store):
        store.path.parent.mkdir(parents=True)
        store.path.write_text("{}")
        os.chmod(store.path, 0o644)

        store.save(_login_result())

        assert stat.S_IMODE(store.path.stat().st_mode) == 0o600

    def test_missing_file(self, store):
        assert store.load() is None
        assert store.token() is None

    def test_expired_session_is_cleared(self, store):
        store.save(_login_result(expires_at=PAST))

        assert store.load() is None
        assert not store.path.exists()

    def test_expiry_checked_against_now(self, store):
        store.save(_login_result(expires_at="2025-01-01T00:00:00Z"))

        assert store.token(now=datetime(2024, 12, 31, tzinfo=timezone.utc)) == "tok-1"
        assert store.token(now=datetime(2025, 1, 1, tzinfo=timezone.utc)) is None

    def test_unparsable_expiry_counts_as_expired(self, store):
        store.save(_login_result(expires_at="soon"))
        assert store.load() is None

    def test_corrupt_file_is_cleared(self, store):
        store.path.parent.mkdir(parents=True, exist_ok=True)
        store.path.write_text("{not json")

        assert store.load() is None
        assert not store.path.exists()

    def test_missing_user_is_cleared(self, store):
        store.path.parent.mkdir(parents=True, exist_ok=True)
        store.path.write_text(json.dumps({"token": "t", "expiresAt": FUTURE}))

        assert store.load() is None
        assert not store.path.exists()

    def test_clear_is_idempotent(self, store):
        store.clear()
        store.save(_login_result())
        store.clear()
        store.clear()
        assert store.load() is None


class TestAuthSession:
    @pytest.mark.asyncio
    async def test_login_saves_session(self, api, fake_backend, store):
        fake_backend.add("POST", "/api/v1/auth/login", body=_login_result().model_dump(mode="json"))
        session = AuthSession(api, store)

        stored = await session.login("o1", "rina@kantor.test", "secret")

        assert stored.token == "tok-1"
        assert session.require_token() == "tok-1"
        assert session.is_notaris is True
        sent = json.loads(fake_backend.requests[0].content)
        assert sent == {"office_id": "o1", "email": "rina@kantor.test", "password": "secret"}
        assert "authorization" not in fake_backend.requests[0].headers

    @pytest.mark.asyncio
    async def test_login_failure_keeps_no_session(self, api, fake_backend, store):
        fake_backend.add("POST", "/api/v1/auth/login", status=401, body={"error": "Email atau password salah"})
        session = AuthSession(api, store)

        with pytest.raises(ApiError) as exc_info:
            await session.login("o1", "rina@kantor.test", "wrong")

        assert exc_info.value.message == "Email atau password salah"
        assert store.load() is None

    @pytest.mark.asyncio
    async def test_logout_clears_even_when_backend_fails(self, api, fake_backend, store):
        store.save(_login_result())
        fake_backend.add("POST", "/api/v1/auth/logout", status=500, body={})
        session = AuthSession(api, store)

        await session.logout()

        assert store.load() is None
        assert fake_backend.requests[0].headers["authorization"] == "Bearer tok-1"

    @pytest.mark.asyncio
    async def test_logout_without_session_skips_backend(self, api, fake_backend, store):
        await AuthSession(api, store).logout()
        assert fake_backend.requests == []

    def test_require_token_raises_when_expired(self, api, store):
        store.save(_login_result(expires_at=PAST))

        with pytest.raises(SessionExpiredError) as exc_info:
            AuthSession(api, store).require_token()

        assert exc_info.value.status_code == 401
        assert exc_info.value.code == "session_expired"


class TestRoleAndOffice:
    def test_is_notaris_case_insensitive(self):
        assert is_notaris(UserResponse.model_validate(user_json("u1", role_name="Notaris")))
        assert not is_notaris(UserResponse.model_validate(user_json("u1", role_name="staff")))
        assert not is_notaris(None)

    def test_display_name_falls_back_to_email(self):
        user = UserResponse.model_validate(user_json("u1", name="  ", email="x@kantor.test"))
        assert user.display_name == "x@kantor.test"

    def test_office_display_name(self):
        assert office_display_name(OfficeProfile(id="o1", name="  Kantor Notaris Sari ")) == "Kantor Notaris Sari"
        assert office_display_name(OfficeProfile(id="o1", name="")) == "Kantor"
        assert office_display_name(None) == ""
