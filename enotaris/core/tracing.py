"""OpenTelemetry spans around BFF requests and backend loads.

Disabled unless ``OTEL_ENABLED`` is set; ``start_span`` is then a no-op.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Dict, Optional

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import ConsoleSpanExporter, SimpleSpanProcessor, SpanExporter
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

from enotaris.core.config import settings

_tracer: Optional[trace.Tracer] = None
_exporter: Optional[SpanExporter] = None


def setup_tracing(enabled: Optional[bool] = None, exporter_name: Optional[str] = None) -> None:
    """(Re)configure tracing. ``exporter_name`` is ``console`` or ``memory``."""
    global _tracer, _exporter
    flag = settings.OTEL_ENABLED if enabled is None else bool(enabled)
    if not flag:
        _tracer = None
        _exporter = None
        return

    choice = exporter_name or settings.OTEL_EXPORTER
    _exporter = InMemorySpanExporter() if choice == "memory" else ConsoleSpanExporter()
    provider = TracerProvider(resource=Resource.create({"service.name": "enotaris-bff"}))
    provider.add_span_processor(SimpleSpanProcessor(_exporter))
    # Provider kept local so reconfiguring never fights the global one
    _tracer = provider.get_tracer("enotaris")


def tracing_enabled() -> bool:
    return _tracer is not None


@contextmanager
def start_span(name: str, attributes: Optional[Dict[str, object]] = None):
    if _tracer is None:
        yield None
        return
    attrs = {k: v for k, v in (attributes or {}).items() if v is not None}
    with _tracer.start_as_current_span(name, attributes=attrs) as span:
        yield span


def get_exported_spans():
    if isinstance(_exporter, InMemorySpanExporter):
        return _exporter.get_finished_spans()
    return ()


def reset_exported_spans() -> None:
    if isinstance(_exporter, InMemorySpanExporter):
        _exporter.clear()
