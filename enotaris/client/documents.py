"""Document storage, requirement checklists and per-case document entries."""

from typing import BinaryIO, Optional, Union

from enotaris.client.http import ApiClient, parse_model, request_json, request_list
from enotaris.models.document import (
    CaseDocumentEntryItem,
    CreateCaseDocumentEntryBody,
    CreateCaseDocumentEntryResult,
    CreateDocumentRequirementTemplateBody,
    DocumentItem,
    DocumentRequirementTemplateItemResponse,
    DocumentRequirementTemplateResponse,
    DocumentStats,
    PatchCaseDocumentEntryBody,
)

# Sub-folders of cases/{case_id}/repositori/
REPOSITORI_TYPE_IDS = ("draft_akta", "minuta", "salinan", "lainnya")


async def get_documents(
    api: ApiClient, token: Optional[str], *, folder: Optional[str] = None
) -> list[DocumentItem]:
    return await request_list(
        api, DocumentItem, "/api/v1/documents", token=token, params={"folder": folder}, fallback="Gagal memuat dokumen"
    )


async def upload_document(
    api: ApiClient,
    token: Optional[str],
    file_name: str,
    content: Union[bytes, BinaryIO],
    *,
    folder: Optional[str] = None,
    content_type: str = "application/octet-stream",
) -> DocumentItem:
    """POST /api/v1/documents/upload as multipart form data."""
    fallback = "Gagal mengunggah dokumen"
    data = await request_json(
        api,
        "POST",
        "/api/v1/documents/upload",
        token=token,
        files={"file": (file_name, content, content_type)},
        data={"folder": folder} if folder else None,
        fallback=fallback,
    )
    return parse_model(DocumentItem, data, fallback)


async def get_documents_stats(api: ApiClient, token: Optional[str]) -> DocumentStats:
    fallback = "Gagal memuat statistik dokumen"
    data = await request_json(api, "GET", "/api/v1/documents/stats", token=token, fallback=fallback)
    return parse_model(DocumentStats, data, fallback)


async def get_document_requirement_templates(
    api: ApiClient, token: Optional[str], *, category: Optional[str] = None
) -> list[DocumentRequirementTemplateResponse]:
    return await request_list(
        api,
        DocumentRequirementTemplateResponse,
        "/api/v1/document-requirement-templates",
        token=token,
        params={"category": category},
        fallback="Gagal memuat template dokumen",
    )


async def create_document_requirement_template(
    api: ApiClient, token: Optional[str], body: CreateDocumentRequirementTemplateBody
) -> DocumentRequirementTemplateResponse:
    fallback = "Gagal membuat template dokumen"
    data = await request_json(
        api, "POST", "/api/v1/document-requirement-templates", token=token, json=body.to_json(), fallback=fallback
    )
    return parse_model(DocumentRequirementTemplateResponse, data, fallback)


async def get_document_requirements_for_case(
    api: ApiClient, token: Optional[str], case_id: str
) -> list[DocumentRequirementTemplateItemResponse]:
    """Checklist items that apply to the case (from the template chosen at creation)."""
    return await request_list(
        api,
        DocumentRequirementTemplateItemResponse,
        f"/api/v1/cases/{case_id}/document-requirements",
        token=token,
        fallback="Gagal memuat persyaratan dokumen",
    )


async def get_case_document_entries(
    api: ApiClient, token: Optional[str], case_id: str
) -> list[CaseDocumentEntryItem]:
    return await request_list(
        api,
        CaseDocumentEntryItem,
        f"/api/v1/cases/{case_id}/document-entries",
        token=token,
        fallback="Gagal memuat dokumen berkas",
    )


async def create_case_document_entry(
    api: ApiClient, token: Optional[str], case_id: str, body: CreateCaseDocumentEntryBody
) -> CreateCaseDocumentEntryResult:
    """Link an uploaded file to a checklist item. The backend wraps the entry in ``data``."""
    fallback = "Gagal menyimpan dokumen berkas"
    data = await request_json(
        api, "POST", f"/api/v1/cases/{case_id}/document-entries", token=token, json=body.to_json(), fallback=fallback
    )
    return parse_model(CreateCaseDocumentEntryResult, data, fallback)


async def patch_case_document_entry(
    api: ApiClient, token: Optional[str], case_id: str, entry_id: str, body: PatchCaseDocumentEntryBody
) -> None:
    """Toggle physical receipt, or verify / reject an uploaded document."""
    await request_json(
        api,
        "PATCH",
        f"/api/v1/cases/{case_id}/document-entries/{entry_id}",
        token=token,
        json=body.to_json(),
        fallback="Gagal memperbarui dokumen berkas",
    )


def repositori_type_from_key(key: str) -> str:
    """Repository document type from its object key.

    Keys look like ``.../repositori/draft_akta/file.pdf`` or ``.../repositori/file.pdf``.
    """
    idx = key.find("repositori/")
    if idx == -1:
        return "lainnya"
    segment = key[idx + len("repositori/"):].split("/")[0]
    if segment in REPOSITORI_TYPE_IDS:
        return segment
    return segment if segment and "." not in segment else "lainnya"
