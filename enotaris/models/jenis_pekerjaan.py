"""Jenis pekerjaan: the kinds of work an office takes on, per category."""

from typing import Literal, Optional

from enotaris.models.base import Body, Record

JenisPekerjaanCategory = Literal["notaris", "ppat", "pengurusan"]


class JenisPekerjaanResponse(Record):
    id: str
    office_id: str
    name: str
    singkatan: Optional[str] = None
    category: JenisPekerjaanCategory
    biaya: Optional[float] = None
    active: bool = True
    created_at: str
    updated_at: str


class CreateJenisPekerjaanBody(Body):
    name: str
    singkatan: Optional[str] = None
    category: JenisPekerjaanCategory
    biaya: Optional[float] = None
    active: Optional[bool] = None


class UpdateJenisPekerjaanBody(Body):
    name: Optional[str] = None
    singkatan: Optional[str] = None
    category: Optional[JenisPekerjaanCategory] = None
    biaya: Optional[float] = None
    active: Optional[bool] = None
