from typing import Optional

from enotaris.models.base import Body, Record


class RoleItem(Record):
    id: str
    name: str
    description: Optional[str] = None


class CreateUserBody(Body):
    office_id: str
    email: str
    password: str
    name: Optional[str] = None
    role_id: Optional[str] = None


class UpdateUserBody(Body):
    name: Optional[str] = None
    role_id: Optional[str] = None
    active: Optional[bool] = None
