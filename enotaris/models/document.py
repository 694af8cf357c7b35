"""Stored documents, requirement checklists and per-case document entries."""

from typing import Literal, Optional

from enotaris.models.base import Body, Record

VerificationStatus = Literal["pending", "verified", "rejected"]


class DocumentItem(Record):
    key: str
    file_name: str = ""
    size: int = 0
    url: Optional[str] = None
    folder: Optional[str] = None
    uploaded_at: Optional[str] = None


class DocumentStats(Record):
    total_count: int = 0
    total_size_bytes: int = 0
    storage_total_bytes: Optional[int] = None


class DocumentRequirementTemplateItemResponse(Record):
    id: Optional[str] = None
    item_key: str
    document_name: str
    document_category: str = ""
    required: bool = True
    sort_order: int = 0


class DocumentRequirementTemplateResponse(Record):
    id: str
    office_id: Optional[str] = None
    name: str
    category: str
    jenis_pekerjaan: Optional[str] = None
    description: Optional[str] = None
    items: list[DocumentRequirementTemplateItemResponse] = []
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class CreateDocumentRequirementItemBody(Body):
    item_key: Optional[str] = None
    document_name: str
    document_category: Optional[str] = None
    required: Optional[bool] = None
    sort_order: Optional[int] = None


class CreateDocumentRequirementTemplateBody(Body):
    name: str
    category: Optional[str] = None
    jenis_pekerjaan: Optional[str] = None
    description: Optional[str] = None
    items: list[CreateDocumentRequirementItemBody]


class CaseDocumentEntryItem(Record):
    id: str
    case_id: Optional[str] = None
    item_key: str
    item_label: Optional[str] = None
    file_key: Optional[str] = None
    presign_url: Optional[str] = None
    physical_received: bool = False
    verification_status: VerificationStatus = "pending"
    rejection_note: Optional[str] = None
    uploaded_by: Optional[str] = None
    uploaded_by_name: Optional[str] = None
    uploaded_at: Optional[str] = None


class CreateCaseDocumentEntryResult(Record):
    data: Optional[CaseDocumentEntryItem] = None


class CreateCaseDocumentEntryBody(Body):
    item_key: str
    file_key: Optional[str] = None
    physical_received: Optional[bool] = None
    notes: Optional[str] = None


class PatchCaseDocumentEntryBody(Body):
    physical_received: Optional[bool] = None
    verification_status: Optional[VerificationStatus] = None
    rejection_note: Optional[str] = None
    file_key: Optional[str] = None
