"""Timeline service: load a case and derive its timeline and detail view.

Aggregate loads tolerate partial failure: a task whose history cannot be
fetched contributes no actors, and a failed protocol lookup reads as "no entry".
The case, tasks, users and jenis-pekerjaan requests are required.
"""

import asyncio
import logging
from typing import Optional, Sequence

from enotaris.client.cases import get_case
from enotaris.client.http import ApiClient
from enotaris.client.jenis_pekerjaan import get_jenis_pekerjaan
from enotaris.client.protocol import get_protocol_entries
from enotaris.client.tasks import get_task_history, get_tasks_by_case
from enotaris.client.users import get_users, user_name_map
from enotaris.core.errors import ApiError
from enotaris.core.logging import log_event
from enotaris.core.metrics import degraded_loads_total
from enotaris.core.tracing import start_span
from enotaris.features.timeline.mapping import build_timeline
from enotaris.features.timeline.models import CaseDetailView, TimelineResponse
from enotaris.features.views.helpers import days_until_target, progress_percent
from enotaris.features.views.labels import PROTOCOL_STATUSES
from enotaris.models.case import CaseResponse
from enotaris.models.task import TaskHistoryItem, TaskResponse

logger = logging.getLogger(__name__)


async def fetch_task_histories(
    api: ApiClient, token: Optional[str], tasks: Sequence[TaskResponse]
) -> dict[str, list[TaskHistoryItem]]:
    """Fetch every task's history concurrently; a failed fetch yields []."""

    async def one(task: TaskResponse) -> list[TaskHistoryItem]:
        try:
            return await get_task_history(api, token, task.id)
        except ApiError as exc:
            degraded_loads_total.inc(labels={"part": "task_history"})
            log_event(
                "warning",
                "timeline.history_degraded",
                case_id=task.case_id,
                task_id=task.id,
                error_code=exc.code,
                extra={"error_message": exc.message},
            )
            return []

    histories = await asyncio.gather(*(one(t) for t in tasks))
    return {task.id: history for task, history in zip(tasks, histories)}


async def has_protocol_entry(api: ApiClient, token: Optional[str], case: CaseResponse) -> bool:
    """Whether a registered/closed case already sits in the repertorium."""
    if case.status not in PROTOCOL_STATUSES:
        return False
    try:
        result = await get_protocol_entries(api, token, case_id=case.id, limit=1)
    except ApiError as exc:
        degraded_loads_total.inc(labels={"part": "protocol_lookup"})
        log_event("warning", "timeline.protocol_lookup_degraded", case_id=case.id, error_code=exc.code)
        return False
    return len(result.data) > 0


class TimelineService:
    """Case timeline and case-detail loads against the backend."""

    async def load_case_timeline(self, api: ApiClient, token: Optional[str], case_id: str) -> TimelineResponse:
        with start_span("timeline.load", {"case_id": case_id}) as span:
            case, tasks = await asyncio.gather(
                get_case(api, token, case_id),
                get_tasks_by_case(api, token, case_id),
            )
            histories = await fetch_task_histories(api, token, tasks)
            events = build_timeline(case, tasks, histories)
            if span is not None:
                span.set_attribute("timeline.events", len(events))
            return TimelineResponse(case_id=case.id, events=events)

    async def load_case_detail(self, api: ApiClient, token: Optional[str], case_id: str) -> CaseDetailView:
        """Load the case-detail view model.

        Case, tasks, users and jenis-pekerjaan are fetched concurrently and any
        of them failing fails the load. The protocol lookup and the history
        fan-out run after and degrade on failure.
        """
        with start_span("timeline.case_detail", {"case_id": case_id}):
            case, tasks, users, jenis_list = await asyncio.gather(
                get_case(api, token, case_id),
                get_tasks_by_case(api, token, case_id),
                get_users(api, token),
                get_jenis_pekerjaan(api, token),
            )
            names = user_name_map(users)
            protocol_found = await has_protocol_entry(api, token, case)
            histories = await fetch_task_histories(api, token, tasks)

        pic_id = case.staf_penanggung_jawab_id
        logger.debug("case detail loaded: %s tasks for case %s", len(tasks), case.id)
        return CaseDetailView(
            case=case,
            tasks=tasks,
            task_history=histories,
            user_names=names,
            jenis_pekerjaan=jenis_list,
            timeline=build_timeline(case, tasks, histories),
            progress_percent=progress_percent(tasks),
            days_until_target=days_until_target(case.target_selesai),
            has_protocol_entry=protocol_found,
            pic_name=names.get(pic_id, pic_id) if pic_id else "",
        )


# Singleton service instance
timeline_service = TimelineService()
