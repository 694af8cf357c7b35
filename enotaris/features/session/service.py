"""Login, logout and current-user checks over a ``SessionStore``."""

import logging
from typing import Optional

from enotaris.client import auth as auth_api
from enotaris.client.http import ApiClient
from enotaris.core.errors import ApiError, SessionExpiredError
from enotaris.features.session.store import SessionStore, StoredAuth
from enotaris.models.auth import LoginRequest, UserResponse

logger = logging.getLogger(__name__)


class AuthSession:
    """Holds the backend connection and the token cache for one process."""

    def __init__(self, api: ApiClient, store: Optional[SessionStore] = None):
        self.api = api
        self.store = store or SessionStore()

    async def login(self, office_id: str, email: str, password: str) -> StoredAuth:
        result = await auth_api.login(self.api, LoginRequest(office_id=office_id, email=email, password=password))
        return self.store.save(result)

    async def logout(self) -> None:
        """Revoke the token server-side when possible, then always drop the local session."""
        stored = self.store.load()
        if stored is not None:
            try:
                await auth_api.logout(self.api, stored.token)
            except ApiError as exc:
                logger.warning("logout call failed, clearing local session anyway: %s", exc.message)
        self.store.clear()

    def current(self) -> Optional[StoredAuth]:
        return self.store.load()

    def require_token(self) -> str:
        stored = self.store.load()
        if stored is None:
            raise SessionExpiredError("Sesi berakhir, silakan login kembali")
        return stored.token

    @property
    def user(self) -> Optional[UserResponse]:
        stored = self.store.load()
        return stored.user if stored else None

    @property
    def is_notaris(self) -> bool:
        return is_notaris(self.user)


def is_notaris(user: Optional[UserResponse]) -> bool:
    return bool(user and (user.role_name or "").lower() == "notaris")
