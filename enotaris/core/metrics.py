"""In-memory BFF metrics, exported in Prometheus text format at ``/metrics``.

Counts inbound BFF requests and the backend calls made to serve them.
Values are per process and reset on restart.
"""

from __future__ import annotations

import re
import threading
from typing import Dict, Iterable, List, Optional, Tuple


def _escape(value: str) -> str:
    return value.replace("\\", "\\\\").replace("\"", "\\\"").replace("\n", "\\n")


def _format_labels(label_names: List[str], values: Tuple[str, ...]) -> str:
    if not label_names:
        return ""
    return "{" + ",".join(f'{name}="{_escape(val)}"' for name, val in zip(label_names, values)) + "}"


class _Metric:
    kind = "untyped"

    def __init__(self, name: str, label_names: Optional[Iterable[str]] = None, help_text: str = ""):
        self.name = name
        self.help_text = help_text
        self.label_names = list(label_names or [])
        self._values: Dict[Tuple[str, ...], float] = {}
        self._lock = threading.Lock()

    def _key(self, labels: Optional[Dict[str, str]]) -> Tuple[str, ...]:
        labels = labels or {}
        return tuple(str(labels.get(name, "")) for name in self.label_names)

    def _add(self, labels: Optional[Dict[str, str]], amount: float) -> None:
        key = self._key(labels)
        with self._lock:
            self._values[key] = self._values.get(key, 0.0) + float(amount)

    def value(self, labels: Optional[Dict[str, str]] = None) -> float:
        with self._lock:
            return self._values.get(self._key(labels), 0.0)

    def export(self) -> List[str]:
        lines = []
        if self.help_text:
            lines.append(f"# HELP {self.name} {self.help_text}")
        lines.append(f"# TYPE {self.name} {self.kind}")
        with self._lock:
            for label_values, value in sorted(self._values.items()):
                lines.append(f"{self.name}{_format_labels(self.label_names, label_values)} {value}")
        return lines

    def reset(self) -> None:
        with self._lock:
            self._values.clear()


class Counter(_Metric):
    kind = "counter"

    def inc(self, labels: Optional[Dict[str, str]] = None, amount: float = 1.0) -> None:
        if amount < 0:
            raise ValueError("counters only go up")
        self._add(labels, amount)


class Gauge(_Metric):
    kind = "gauge"

    def inc(self, labels: Optional[Dict[str, str]] = None, amount: float = 1.0) -> None:
        self._add(labels, amount)

    def dec(self, labels: Optional[Dict[str, str]] = None, amount: float = 1.0) -> None:
        self._add(labels, -amount)


class MetricsRegistry:
    def __init__(self):
        self._metrics: Dict[str, _Metric] = {}
        self._lock = threading.Lock()

    def _get(self, cls, name: str, label_names, help_text: str):
        with self._lock:
            metric = self._metrics.get(name)
            if metric is None:
                metric = self._metrics[name] = cls(name, label_names, help_text)
            elif not isinstance(metric, cls):
                raise ValueError(f"metric {name} already registered as {metric.kind}")
            return metric

    def counter(self, name: str, label_names: Optional[Iterable[str]] = None, help_text: str = "") -> Counter:
        return self._get(Counter, name, label_names, help_text)

    def gauge(self, name: str, label_names: Optional[Iterable[str]] = None, help_text: str = "") -> Gauge:
        return self._get(Gauge, name, label_names, help_text)

    def export_prometheus(self) -> str:
        lines: List[str] = []
        for metric in list(self._metrics.values()):
            lines.extend(metric.export())
        return "\n".join(lines) + "\n"

    def reset(self) -> None:
        for metric in list(self._metrics.values()):
            metric.reset()


METRICS = MetricsRegistry()

http_requests_total = METRICS.counter(
    "enotaris_http_requests_total", ["method", "path", "status"], "BFF requests served"
)
http_request_latency_total = METRICS.counter(
    "enotaris_http_request_latency_total", ["path", "bucket"], "BFF requests per latency bucket"
)
backend_requests_total = METRICS.counter(
    "enotaris_backend_requests_total", ["method", "path", "status"], "Calls to enotaris-services"
)
backend_requests_in_flight = METRICS.gauge("enotaris_backend_requests_in_flight", help_text="Backend calls awaiting a response")
degraded_loads_total = METRICS.counter(
    "enotaris_degraded_loads_total", ["part"], "Optional backend lookups that failed and were skipped"
)


_ID_RE = re.compile(r"^[0-9a-fA-F-]{8,}$")


def normalize_path(path: str) -> str:
    """Replace numeric and UUID-like segments with ``:id`` to bound label cardinality."""
    parts = []
    for segment in path.split("/"):
        if not segment:
            continue
        parts.append(":id" if segment.isdigit() or _ID_RE.match(segment) else segment)
    return "/" + "/".join(parts)
