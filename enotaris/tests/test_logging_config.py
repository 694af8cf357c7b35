"""Tests for structured logging helpers and settings validation."""

import json
import logging

import pytest

from enotaris.core.config import Settings, validate_config
from enotaris.core.logging import (
    JsonFormatter,
    PrettyFormatter,
    RequestIdFilter,
    latency_bucket_ms,
    log_event,
    request_id_ctx_var,
)


def _record(msg="hello", **extra) -> logging.LogRecord:
    record = logging.LogRecord("enotaris", logging.INFO, __file__, 1, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestFormatters:
    def test_json_formatter_includes_context(self):
        record = _record(request_id="rid-1", case_id="c1", status=404, path="/api/cases")
        payload = json.loads(JsonFormatter().format(record))
        assert payload["message"] == "hello"
        assert payload["request_id"] == "rid-1"
        assert payload["case_id"] == "c1"
        assert payload["status"] == 404
        assert "task_id" not in payload

    def test_pretty_formatter(self):
        line = PrettyFormatter().format(_record(request_id="rid-2"))
        assert "[rid=rid-2]" in line
        assert line.endswith("hello")

    def test_filter_injects_context_request_id(self):
        token = request_id_ctx_var.set("ctx-rid")
        try:
            record = _record()
            RequestIdFilter().filter(record)
        finally:
            request_id_ctx_var.reset(token)
        assert record.request_id == "ctx-rid"

    def test_latency_buckets(self):
        assert latency_bucket_ms(None) == "unknown"
        assert latency_bucket_ms(5) == "<10ms"
        assert latency_bucket_ms(250) == "100-500ms"
        assert latency_bucket_ms(5000) == ">=1000ms"


def test_log_event_truncates_extra(caplog):
    with caplog.at_level(logging.WARNING, logger="enotaris"):
        log_event("warning", "timeline.history_degraded", case_id="c1", task_id="t1", extra={"body": "x" * 600})

    record = [r for r in caplog.records if r.getMessage() == "timeline.history_degraded"][-1]
    assert record.case_id == "c1"
    assert record.task_id == "t1"
    assert record.body.endswith("...<truncated>")


class TestConfig:
    def test_defaults(self):
        cfg = Settings(_env_file=None)
        assert cfg.api_base_url == "http://localhost:8080"
        assert cfg.HTTP_TIMEOUT_S is None
        assert cfg.LIST_PAGE_SIZE_MAX == 100

    def test_trailing_slash_stripped(self):
        assert Settings(_env_file=None, API_URL="https://api.kantor.test/").api_base_url == "https://api.kantor.test"

    def test_cors_origins_split(self):
        cfg = Settings(_env_file=None, CORS_ALLOWED_ORIGINS="http://a.test, http://b.test,")
        assert cfg.cors_origins == ["http://a.test", "http://b.test"]

    def test_missing_api_url_warns(self, caplog):
        cfg = Settings(_env_file=None, API_URL="")
        with caplog.at_level(logging.WARNING, logger="enotaris"):
            assert validate_config(strict=False, settings_obj=cfg) is True
        assert any("API_URL" in r.getMessage() for r in caplog.records)

    def test_missing_api_url_strict_raises(self):
        with pytest.raises(RuntimeError):
            validate_config(strict=True, settings_obj=Settings(_env_file=None, API_URL=""))

    def test_page_size_default_above_max_strict_raises(self):
        cfg = Settings(_env_file=None, LIST_PAGE_SIZE_DEFAULT=200, LIST_PAGE_SIZE_MAX=100)
        with pytest.raises(RuntimeError):
            validate_config(strict=True, settings_obj=cfg)
