"""
Structured logging for the enotaris client and BFF.

- JSON lines when ENV=production, one readable line per record otherwise.
- request_id is bound per BFF request and copied onto every record, so the
  backend calls made while serving a request can be correlated.
- Case/task identifiers and backend status ride along as record attributes.
"""

import json
import logging
import os
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Dict, Optional

LOGGER_NAME = "enotaris"

# Record attributes promoted into structured output when present
CONTEXT_FIELDS = ("path", "method", "status", "case_id", "task_id", "error_code", "latency_bucket")

request_id_ctx_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


def get_request_id(default: Optional[str] = None) -> Optional[str]:
    rid = request_id_ctx_var.get()
    return rid if rid is not None else default


def latency_bucket_ms(latency_ms: Optional[float]) -> str:
    """Coarse latency label; exact timings vary too much to compare across requests."""
    if latency_ms is None:
        return "unknown"
    for bound, label in ((10, "<10ms"), (100, "10-100ms"), (500, "100-500ms"), (1000, "500-1000ms")):
        if latency_ms < bound:
            return label
    return ">=1000ms"


def _utc_stamp(record: logging.LogRecord) -> str:
    return datetime.fromtimestamp(record.created, timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ")


def _context(record: logging.LogRecord) -> Dict[str, object]:
    out = {}
    for key in CONTEXT_FIELDS:
        value = getattr(record, key, None)
        if value is not None:
            out[key] = value
    return out


class RequestIdFilter(logging.Filter):
    """Copy the bound request_id onto records that do not carry one."""

    def filter(self, record: logging.LogRecord) -> bool:
        if getattr(record, "request_id", None) is None:
            record.request_id = get_request_id()
        return True


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": _utc_stamp(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "request_id": getattr(record, "request_id", None),
        }
        payload.update(_context(record))
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


class PrettyFormatter(logging.Formatter):
    """``<ts> LEVEL [logger] [rid=..] message key=value ...``"""

    def format(self, record: logging.LogRecord) -> str:
        rid = getattr(record, "request_id", None)
        parts = [_utc_stamp(record), record.levelname, f"[{record.name}]"]
        if rid:
            parts.append(f"[rid={rid}]")
        parts.append(record.getMessage())
        parts.extend(f"{k}={v}" for k, v in _context(record).items())
        line = " ".join(parts)
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


def configure_logging(env: str = "development", level: Optional[str] = None) -> None:
    """Install one stdout handler on the ``enotaris`` logger."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel((level or os.getenv("LOG_LEVEL") or "INFO").upper())

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter() if env.lower() == "production" else PrettyFormatter())
    handler.addFilter(RequestIdFilter())

    logger.handlers = [handler]
    logger.propagate = True

    # httpx logs every backend request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)


def _clip(value, limit: int = 500) -> str:
    try:
        text = str(value)
    except Exception:
        return "<unserializable>"
    return text if len(text) <= limit else text[:limit] + "...<truncated>"


def log_event(
    level: str,
    msg: str,
    *,
    request_id: Optional[str] = None,
    case_id: Optional[str] = None,
    task_id: Optional[str] = None,
    error_code: Optional[str] = None,
    extra: Optional[Dict[str, object]] = None,
):
    """Log ``msg`` on the enotaris logger with case/task context; ``extra`` values are clipped."""
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        configure_logging(os.getenv("ENV", "development"))

    fields: Dict[str, object] = {
        "request_id": request_id or get_request_id(),
        "case_id": case_id,
        "task_id": task_id,
    }
    if error_code:
        fields["error_code"] = error_code
    for key, value in (extra or {}).items():
        fields[key] = _clip(value)

    logger.log(logging.getLevelName(level.upper()), msg, extra=fields)
