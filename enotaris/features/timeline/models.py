"""Case activity timeline models.

Events are derived from the case, its tasks and their change history on every
load. They are never stored.
"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from enotaris.models.case import CaseResponse
from enotaris.models.jenis_pekerjaan import JenisPekerjaanResponse
from enotaris.models.task import TaskHistoryItem, TaskResponse

TimelineEventType = Literal["case_created", "task_created", "task_updated"]


class TimelineEvent(BaseModel):
    """One entry of a case's activity feed."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="case-{id}, task-created-{id} or task-updated-{id}")
    at: datetime
    label: str = Field(..., description="Human-readable Indonesian summary")
    type: TimelineEventType
    actor: Optional[str] = Field(None, description="User id from the task history, when known")


class TimelineResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    case_id: str
    events: list[TimelineEvent]


class CaseDetailView(BaseModel):
    """Everything the case-detail screen renders, derived in one load."""

    case: CaseResponse
    tasks: list[TaskResponse]
    task_history: dict[str, list[TaskHistoryItem]] = {}
    user_names: dict[str, str] = {}
    jenis_pekerjaan: list[JenisPekerjaanResponse] = []
    timeline: list[TimelineEvent] = []
    progress_percent: int = 0
    days_until_target: Optional[int] = None
    has_protocol_entry: bool = False
    pic_name: str = ""
