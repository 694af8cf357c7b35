from typing import Optional

from enotaris.client.http import ApiClient, paged, parse_model, request_json
from enotaris.models.case import (
    ApplyWorkflowTemplateBody,
    CaseCategory,
    CaseResponse,
    CreateCaseBody,
    DashboardStats,
    ListCasesResult,
    UpdateCaseBody,
)


async def get_dashboard_stats(api: ApiClient, token: Optional[str]) -> DashboardStats:
    """GET /api/v1/dashboard/stats: per-office aggregates for the main dashboard."""
    fallback = "Gagal memuat statistik dashboard"
    data = await request_json(api, "GET", "/api/v1/dashboard/stats", token=token, fallback=fallback)
    return parse_model(DashboardStats, data, fallback)


async def get_cases(
    api: ApiClient,
    token: Optional[str],
    *,
    limit: Optional[int] = None,
    offset: Optional[int] = None,
    status: Optional[str] = None,
    category: Optional[CaseCategory] = None,
    hide_closed_older_than_months: Optional[int] = None,
) -> ListCasesResult:
    fallback = "Gagal memuat perkara"
    params = {
        "limit": limit,
        "offset": offset,
        "status": status,
        "category": category,
        "hide_closed_older_than_months": hide_closed_older_than_months,
    }
    data = await request_json(api, "GET", "/api/v1/cases", token=token, params=params, fallback=fallback)
    return parse_model(ListCasesResult, paged(data), fallback)


async def get_case(api: ApiClient, token: Optional[str], case_id: str) -> CaseResponse:
    fallback = "Perkara tidak ditemukan"
    data = await request_json(api, "GET", f"/api/v1/cases/{case_id}", token=token, fallback=fallback)
    return parse_model(CaseResponse, data, fallback)


async def create_case(api: ApiClient, token: Optional[str], body: CreateCaseBody) -> CaseResponse:
    fallback = "Gagal membuat perkara"
    data = await request_json(api, "POST", "/api/v1/cases", token=token, json=body.to_json(), fallback=fallback)
    return parse_model(CaseResponse, data, fallback)


async def update_case(api: ApiClient, token: Optional[str], case_id: str, body: UpdateCaseBody) -> CaseResponse:
    fallback = "Gagal memperbarui perkara"
    data = await request_json(
        api, "PUT", f"/api/v1/cases/{case_id}", token=token, json=body.to_json(), fallback=fallback
    )
    return parse_model(CaseResponse, data, fallback)


async def apply_workflow_template(
    api: ApiClient, token: Optional[str], case_id: str, body: ApplyWorkflowTemplateBody
) -> None:
    """Append the template's steps to the case as new tasks (done by the backend)."""
    await request_json(
        api,
        "POST",
        f"/api/v1/cases/{case_id}/apply-workflow-template",
        token=token,
        json=body.to_json(),
        fallback="Gagal menerapkan template",
    )
