"""Pending document review feed (notaris only)."""

from typing import Optional

from fastapi import APIRouter, Depends, Header, Query

from enotaris.client.http import ApiClient
from enotaris.core.auth import get_api, get_bearer_token
from enotaris.features.review.service import get_pending_review_items

router = APIRouter(prefix="/api/review", tags=["review"])


@router.get("/pending")
async def pending_review_endpoint(
    case_limit: Optional[int] = Query(None, ge=1, le=100),
    x_user_role: Optional[str] = Header(None, description="role_name of the signed-in user"),
    token: str = Depends(get_bearer_token),
    api: ApiClient = Depends(get_api),
):
    """Documents awaiting verification, newest upload first. Empty unless the caller is a notaris.

    The backend exposes no current-user endpoint, so the browser forwards the
    role it received at login.
    """
    if (x_user_role or "").lower() != "notaris":
        return []
    items = await get_pending_review_items(api, token, case_limit)
    return [{"entry": i.entry.model_dump(mode="json"), "case": i.case.model_dump(mode="json")} for i in items]
