"""Digital protocol (physical deed storage register) and the klapper index."""

from typing import Literal, Optional

from enotaris.models.base import Body, Record

ProtocolStatus = Literal["active", "closed"]


class ProtocolEntry(Record):
    id: str
    office_id: Optional[str] = None
    case_id: Optional[str] = None
    year: int
    repertorium_number: str
    jenis: str = ""
    physical_location: str = ""
    status: ProtocolStatus = "active"
    notes: Optional[str] = None
    digital_object_key: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class ListProtocolEntriesResult(Record):
    data: list[ProtocolEntry] = []
    total: int = 0


class CreateProtocolEntryBody(Body):
    case_id: Optional[str] = None
    year: int
    repertorium_number: str
    jenis: str
    physical_location: str
    status: ProtocolStatus = "active"
    notes: Optional[str] = None


class KlapperEntry(Record):
    """A party named in a registered deed, indexed by the first letter of its name."""

    id: str
    name_display: str
    role: str = ""
    repertorium_number: str = ""
    year: Optional[int] = None
    jenis: str = ""
    case_id: Optional[str] = None


class ListKlapperResult(Record):
    data: list[KlapperEntry] = []
    total: int = 0
