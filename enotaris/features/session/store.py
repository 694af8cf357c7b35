"""On-disk session cache: ``{token, expiresAt, user}`` as JSON.

Expiry is checked on every read. A corrupt, incomplete or expired file is
removed and reads as no session.
"""

import json
import logging
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from enotaris.core.config import settings
from enotaris.features.views.helpers import parse_timestamp
from enotaris.models.auth import LoginResult, UserResponse

logger = logging.getLogger(__name__)


class StoredAuth(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    token: str
    expires_at: str = Field(..., alias="expiresAt")
    user: UserResponse

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        try:
            expires = parse_timestamp(self.expires_at)
        except ValueError:
            return True
        return expires <= (now or datetime.now(timezone.utc))


class SessionStore:
    def __init__(self, path: Union[str, Path, None] = None):
        self.path = Path(os.path.expanduser(str(path or settings.SESSION_FILE)))

    def save(self, result: LoginResult) -> StoredAuth:
        stored = StoredAuth(token=result.token, expires_at=result.expires_at, user=result.user)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        # Owner-only from creation; the token is never readable by others
        tmp = self.path.with_name(self.path.name + ".tmp")
        fd = os.open(tmp, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        os.fchmod(fd, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            json.dump(stored.model_dump(mode="json", by_alias=True), fh)
        os.replace(tmp, self.path)
        return stored

    def load(self, now: Optional[datetime] = None) -> Optional[StoredAuth]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        try:
            stored = StoredAuth.model_validate(json.loads(raw))
        except (ValueError, PydanticValidationError):
            logger.warning("session file unreadable, clearing: %s", self.path)
            self.clear()
            return None
        if not stored.token or stored.is_expired(now):
            self.clear()
            return None
        return stored

    def clear(self) -> None:
        try:
            self.path.unlink()
        except FileNotFoundError:
            pass

    def token(self, now: Optional[datetime] = None) -> Optional[str]:
        stored = self.load(now)
        return stored.token if stored else None
