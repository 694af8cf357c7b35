"""Types matching the enotaris-services auth API."""

from typing import Optional

from enotaris.models.base import Body, Record


class LoginRequest(Body):
    office_id: str
    email: str
    password: str


class UserResponse(Record):
    id: str
    office_id: str
    email: str
    name: str = ""
    role_id: Optional[str] = None
    role_name: Optional[str] = None
    active: Optional[bool] = None

    @property
    def display_name(self) -> str:
        return self.name.strip() if self.name and self.name.strip() else self.email


class LoginResult(Record):
    token: str
    expires_at: str
    user: UserResponse
