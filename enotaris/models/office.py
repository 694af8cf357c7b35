from typing import Optional

from enotaris.models.base import Body, Record


class OfficeItem(Record):
    id: str
    name: str


class OfficeProfile(Record):
    """Profile kantor notaris (GET/PUT /api/v1/offices/current)."""

    id: str
    name: str = ""
    address: str = ""
    active: bool = True
    nama_notaris: str = ""
    sk_notaris: str = ""
    npwp: str = ""
    phone: str = ""
    email: str = ""


class UpdateOfficeBody(Body):
    name: str
    address: Optional[str] = None
    nama_notaris: Optional[str] = None
    sk_notaris: Optional[str] = None
    npwp: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None


def office_display_name(profile: Optional[OfficeProfile]) -> str:
    if profile is None:
        return ""
    name = (profile.name or "").strip()
    return name or "Kantor"
