"""Unit tests for the JSON line formatter"""
import json
import logging

from core.logging import JsonFormatter


def make_record(**extra):
    record = logging.LogRecord(
        name="service.video_service", level=logging.INFO, pathname=__file__,
        lineno=1, msg="Video published", args=(), exc_info=None
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJsonFormatter:
    """Structured fields travel with each log line"""

    def test_base_fields(self):
        line = json.loads(JsonFormatter().format(make_record()))

        assert line["level"] == "INFO"
        assert line["logger"] == "service.video_service"
        assert line["msg"] == "Video published"
        assert "ts" in line

    def test_structured_extras(self):
        record = make_record(trace_id="api_1", video_id=7, engagement_type="VIEW",
                             status_code=200, latency_ms=3, unrelated="ignored")

        line = json.loads(JsonFormatter().format(record))

        assert line["trace_id"] == "api_1"
        assert line["video_id"] == 7
        assert line["engagement_type"] == "VIEW"
        assert line["status_code"] == 200
        assert line["latency_ms"] == 3
        assert "unrelated" not in line

    def test_exception_included(self):
        try:
            raise ValueError("boom")
        except ValueError:
            import sys
            record = make_record()
            record.exc_info = sys.exc_info()

        line = json.loads(JsonFormatter().format(record))

        assert "ValueError: boom" in line["exception"]
