"""Case list proxy, case timeline and case-detail view."""

from typing import Optional

from fastapi import APIRouter, Depends, Path, Query

from enotaris.client.http import ApiClient
from enotaris.core.auth import get_api, get_bearer_token
from enotaris.features.listing.service import list_cases
from enotaris.features.timeline.service import timeline_service

router = APIRouter(prefix="/api/cases", tags=["cases"])


@router.get("")
async def list_cases_endpoint(
    category: Optional[str] = Query(None),
    status: Optional[str] = Query(None),
    search: Optional[str] = Query(None),
    sortField: Optional[str] = Query(None),
    sort_field: Optional[str] = Query(None),
    sortOrder: Optional[str] = Query(None),
    sort_order: Optional[str] = Query(None),
    date_from: Optional[str] = Query(None),
    date_to: Optional[str] = Query(None),
    page: Optional[str] = Query(None),
    size: Optional[str] = Query(None),
    token: str = Depends(get_bearer_token),
    api: ApiClient = Depends(get_api),
):
    """Paged case list with ``pic_name`` resolved from the office's users."""
    filters = {
        "category": category,
        "status": status,
        "search": search,
        "sort_field": sortField or sort_field,
        "sort_order": sortOrder or sort_order,
        "date_from": date_from,
        "date_to": date_to,
    }
    return await list_cases(api, token, page=page, size=size, filters=filters)


@router.get("/{case_id}/timeline")
async def case_timeline_endpoint(
    case_id: str = Path(..., description="Case ID"),
    token: str = Depends(get_bearer_token),
    api: ApiClient = Depends(get_api),
):
    result = await timeline_service.load_case_timeline(api, token, case_id)
    return result.model_dump(mode="json")


@router.get("/{case_id}/detail")
async def case_detail_endpoint(
    case_id: str = Path(..., description="Case ID"),
    token: str = Depends(get_bearer_token),
    api: ApiClient = Depends(get_api),
):
    """Case, tasks, user names, timeline, progress and protocol status in one load."""
    detail = await timeline_service.load_case_detail(api, token, case_id)
    return detail.model_dump(mode="json")
