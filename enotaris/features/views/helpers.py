"""
Pure view-model derivations for case and task screens.

Every helper takes an optional ``today``/``now`` so results are deterministic
under test. Defaults read the local clock.
"""

import math
import re
from calendar import monthrange
from datetime import date, datetime, timedelta, timezone
from typing import Any, Iterable, Optional, Union

DateLike = Union[str, date, datetime, None]

_FRACTION_RE = re.compile(r"\.(\d+)")
_MONTHS_ID = ("Jan", "Feb", "Mar", "Apr", "Mei", "Jun", "Jul", "Agu", "Sep", "Okt", "Nov", "Des")


def _microseconds(match: "re.Match[str]") -> str:
    return "." + (match.group(1) + "000000")[:6]


def parse_timestamp(value: Union[str, datetime]) -> datetime:
    """Parse a backend RFC3339 timestamp into an aware datetime.

    Accepts a trailing ``Z`` and fractions of any length (Go trims trailing
    zeros, so ``.5`` and ``.12345`` both occur). Fractions are padded or
    truncated to microseconds. Naive values are read as UTC.
    """
    if isinstance(value, datetime):
        parsed = value
    else:
        text = _FRACTION_RE.sub(_microseconds, value.strip().replace("Z", "+00:00"), count=1)
        parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _local_date(value: DateLike) -> Optional[date]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.astimezone().date() if value.tzinfo else value.date()
    if isinstance(value, date):
        return value
    text = value.strip()
    if len(text) == 10:
        return date.fromisoformat(text)
    return parse_timestamp(text).astimezone().date()


def days_until_target(target: DateLike, today: Optional[date] = None) -> Optional[int]:
    """Whole calendar days from today to ``target`` (negative once past), None without a target."""
    target_date = _local_date(target)
    if target_date is None:
        return None
    if today is None:
        today = date.today()
    return (target_date - today).days


def ratio_percent(part: int, whole: int) -> int:
    """``part / whole`` as a whole percent, halves rounded up. 0 when ``whole`` is 0."""
    if whole <= 0:
        return 0
    return int(math.floor(100 * part / whole + 0.5))


def _status_of(task: Any) -> str:
    if isinstance(task, dict):
        return str(task.get("status") or "")
    return str(getattr(task, "status", "") or "")


def progress_percent(tasks: Iterable[Any]) -> int:
    """Share of tasks with status ``done``."""
    statuses = [_status_of(t) for t in tasks]
    done = sum(1 for s in statuses if s == "done")
    return ratio_percent(done, len(statuses))


def is_task_overdue(due_date: Optional[str], status: Optional[str], today: Optional[date] = None) -> bool:
    """True when the due date has passed and the task is not done.

    The comparison is a plain string compare against ``YYYY-MM-DD``, so a
    due date carrying a time part on today's date is not overdue.
    """
    if str(status or "").lower() == "done":
        return False
    due = str(due_date or "").strip()
    if not due:
        return False
    if today is None:
        today = date.today()
    return due < today.strftime("%Y-%m-%d")


def _format_offset(offset: Optional[timedelta]) -> str:
    total_min = int((offset or timedelta(0)).total_seconds() // 60)
    sign = "+" if total_min >= 0 else "-"
    hours, minutes = divmod(abs(total_min), 60)
    return f"{sign}{hours:02d}:{minutes:02d}"


def to_local_iso_with_offset(date_str: str, time_str: str, now: Optional[datetime] = None) -> str:
    """RFC3339 ``{date}T{time}:00{offset}`` for a wall-clock date and time.

    The offset is the local zone's offset *now*, not on ``date_str``. Across a
    DST change the two differ.
    """
    if now is None or now.tzinfo is None:
        now = (now or datetime.now()).astimezone()
    return f"{date_str}T{time_str}:00{_format_offset(now.utcoffset())}"


def to_local_date_only(iso: str) -> str:
    """Local ``YYYY-MM-DD`` of a stored timestamp."""
    return parse_timestamp(iso).astimezone().strftime("%Y-%m-%d")


def to_local_time(iso: str) -> str:
    """Local ``HH:MM`` of a stored timestamp."""
    return parse_timestamp(iso).astimezone().strftime("%H:%M")


def month_window(today: Optional[date] = None) -> tuple[str, str]:
    """First day of this month through the last day of next month, as ``YYYY-MM-DD``."""
    if today is None:
        today = date.today()
    start = today.replace(day=1)
    year, month = (today.year + 1, 1) if today.month == 12 else (today.year, today.month + 1)
    end = date(year, month, monthrange(year, month)[1])
    return start.isoformat(), end.isoformat()


def format_relative_time(at: Union[str, datetime], now: Optional[datetime] = None) -> str:
    when = parse_timestamp(at)
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    diff_s = (now - when).total_seconds()
    mins = math.floor(diff_s / 60)
    hours = math.floor(diff_s / 3600)
    days = math.floor(diff_s / 86400)
    if mins < 1:
        return "Baru saja"
    if mins < 60:
        return f"{mins} menit lalu"
    if hours < 24:
        return f"{hours} jam lalu"
    if days < 7:
        return f"{days} hari lalu"
    local = when.astimezone()
    return f"{local.day} {_MONTHS_ID[local.month - 1]} {local.year}"
