"""Pending document review feed for the notaris."""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Optional

from enotaris.client.cases import get_cases
from enotaris.client.documents import get_case_document_entries
from enotaris.client.http import ApiClient
from enotaris.core.config import settings
from enotaris.core.errors import ApiError
from enotaris.core.metrics import degraded_loads_total
from enotaris.core.tracing import start_span
from enotaris.features.review.models import PendingReviewItem
from enotaris.features.views.helpers import parse_timestamp
from enotaris.models.case import CaseResponse
from enotaris.models.document import CaseDocumentEntryItem

logger = logging.getLogger(__name__)

_NEVER = datetime.min.replace(tzinfo=timezone.utc)


def _uploaded_key(item: PendingReviewItem) -> datetime:
    # Entries without uploaded_at sort last
    if not item.entry.uploaded_at:
        return _NEVER
    return parse_timestamp(item.entry.uploaded_at)


async def _entries_for(api: ApiClient, token: Optional[str], case: CaseResponse) -> list[CaseDocumentEntryItem]:
    try:
        return await get_case_document_entries(api, token, case.id)
    except ApiError as exc:
        degraded_loads_total.inc(labels={"part": "document_entries"})
        logger.warning(
            "review.entries_degraded",
            extra={"case_id": case.id, "error_code": exc.code, "status": exc.status_code},
        )
        return []


async def get_pending_review_items(
    api: ApiClient, token: Optional[str], case_limit: Optional[int] = None
) -> list[PendingReviewItem]:
    """Uploaded entries still ``pending`` across the newest ``case_limit`` cases, newest upload first.

    The case list request is required; each case's entries request degrades to
    no entries on failure. Entries without a ``file_key`` (nothing uploaded yet)
    are skipped.
    """
    limit = case_limit if case_limit is not None else settings.PENDING_REVIEW_CASE_LIMIT
    with start_span("review.pending", {"case_limit": limit}):
        cases = (await get_cases(api, token, limit=limit)).data
        per_case = await asyncio.gather(*(_entries_for(api, token, c) for c in cases))

    items = [
        PendingReviewItem(entry=entry, case=case)
        for case, entries in zip(cases, per_case)
        for entry in entries
        if entry.verification_status == "pending" and entry.file_key
    ]
    items.sort(key=_uploaded_key, reverse=True)
    return items
