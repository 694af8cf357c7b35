"""Klien notaris/PPAT: natural persons or legal entities."""

from typing import Literal, Optional

from enotaris.models.base import Body, Record

ClientType = Literal["individual", "entity"]


class ClientResponse(Record):
    id: str
    office_id: str
    type: ClientType
    full_name: str
    nik: Optional[str] = None
    npwp: Optional[str] = None
    place_of_birth: Optional[str] = None
    date_of_birth: Optional[str] = None
    gender: Optional[str] = None
    religion: Optional[str] = None
    marital_status: Optional[str] = None
    occupation: Optional[str] = None
    nationality: Optional[str] = None
    establishment_deed_number: Optional[str] = None
    establishment_date: Optional[str] = None
    nib: Optional[str] = None
    contact_person_name: Optional[str] = None
    address_line: Optional[str] = None
    kelurahan: Optional[str] = None
    kecamatan: Optional[str] = None
    city: Optional[str] = None
    province: Optional[str] = None
    postal_code: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    created_at: str
    updated_at: str


class ListClientsResult(Record):
    data: list[ClientResponse] = []
    total: int = 0


class UpdateClientBody(Body):
    full_name: Optional[str] = None
    nik: Optional[str] = None
    npwp: Optional[str] = None
    place_of_birth: Optional[str] = None
    date_of_birth: Optional[str] = None
    gender: Optional[str] = None
    religion: Optional[str] = None
    marital_status: Optional[str] = None
    occupation: Optional[str] = None
    nationality: Optional[str] = None
    establishment_deed_number: Optional[str] = None
    establishment_date: Optional[str] = None
    nib: Optional[str] = None
    contact_person_name: Optional[str] = None
    address_line: Optional[str] = None
    kelurahan: Optional[str] = None
    kecamatan: Optional[str] = None
    city: Optional[str] = None
    province: Optional[str] = None
    postal_code: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None


class CreateClientBody(UpdateClientBody):
    type: ClientType
    full_name: str
