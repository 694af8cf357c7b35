from enotaris.features.views.helpers import (
    days_until_target,
    format_relative_time,
    is_task_overdue,
    month_window,
    parse_timestamp,
    progress_percent,
    ratio_percent,
    to_local_date_only,
    to_local_iso_with_offset,
    to_local_time,
)
from enotaris.features.views.labels import (
    CASE_STATUS_LABELS,
    CLIENT_TYPE_LABELS,
    EVENT_TYPE_LABELS,
    TASK_STATUS_LABELS,
    label_for,
)

__all__ = [
    "days_until_target",
    "format_relative_time",
    "is_task_overdue",
    "month_window",
    "parse_timestamp",
    "progress_percent",
    "ratio_percent",
    "to_local_date_only",
    "to_local_iso_with_offset",
    "to_local_time",
    "CASE_STATUS_LABELS",
    "CLIENT_TYPE_LABELS",
    "EVENT_TYPE_LABELS",
    "TASK_STATUS_LABELS",
    "label_for",
]
