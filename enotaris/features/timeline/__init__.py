from enotaris.features.timeline.mapping import build_timeline
from enotaris.features.timeline.models import CaseDetailView, TimelineEvent, TimelineResponse
from enotaris.features.timeline.service import TimelineService, fetch_task_histories, timeline_service

__all__ = [
    "build_timeline",
    "CaseDetailView",
    "TimelineEvent",
    "TimelineResponse",
    "TimelineService",
    "fetch_task_histories",
    "timeline_service",
]
