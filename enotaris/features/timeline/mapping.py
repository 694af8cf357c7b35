"""Build the case timeline from a case, its tasks and their history."""

from typing import Mapping, Optional, Sequence

from enotaris.features.timeline.models import TimelineEvent
from enotaris.features.views.helpers import parse_timestamp
from enotaris.models.case import CaseResponse
from enotaris.models.task import TaskHistoryItem, TaskResponse


def _created_actor(history: Sequence[TaskHistoryItem]) -> Optional[str]:
    for item in history:
        if item.field == "created":
            return item.changed_by
    return None


def build_timeline(
    case: CaseResponse,
    tasks: Sequence[TaskResponse],
    history_by_task_id: Mapping[str, Sequence[TaskHistoryItem]],
) -> list[TimelineEvent]:
    """Assemble the activity feed, oldest first.

    Args:
        case: The case; contributes "Berkas dibuat" when it has ``created_at``
        tasks: Tasks of the case; each contributes a "ditambahkan" event and,
            when ``updated_at`` differs from ``created_at``, a "diperbarui" event
        history_by_task_id: Task change history (oldest first). The created
            actor is the first ``field == "created"`` entry, the updated actor
            is the last entry. Missing tasks read as no history.

    Returns:
        Events sorted ascending by timestamp; ties keep insertion order.
    """
    events: list[TimelineEvent] = []
    if case.created_at:
        events.append(TimelineEvent(
            id=f"case-{case.id}",
            at=parse_timestamp(case.created_at),
            label="Berkas dibuat",
            type="case_created",
        ))

    for task in tasks:
        history = history_by_task_id.get(task.id) or []
        events.append(TimelineEvent(
            id=f"task-created-{task.id}",
            at=parse_timestamp(task.created_at),
            label=f'Tahapan "{task.nama_task}" ditambahkan',
            type="task_created",
            actor=_created_actor(history),
        ))
        if task.updated_at and task.updated_at != task.created_at:
            events.append(TimelineEvent(
                id=f"task-updated-{task.id}",
                at=parse_timestamp(task.updated_at),
                label=f'Tahapan "{task.nama_task}" diperbarui',
                type="task_updated",
                actor=history[-1].changed_by if history else None,
            ))

    events.sort(key=lambda e: e.at)
    return events
