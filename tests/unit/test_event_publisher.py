"""Unit tests for engagement event publishers"""
import json
import httpx
import pytest

from core.models import EngagementType
from engagement.clients.event_publisher import (
    EventPublishError, HttpEventPublisher, LoggingEventPublisher,
)
from engagement.schemas import EngagementEvent

PIPELINE_URL = "http://pipeline.test/events"


def make_publisher(handler):
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return HttpEventPublisher(PIPELINE_URL, client=client)


@pytest.fixture
def event():
    return EngagementEvent(video_id=42, type=EngagementType.VIEW)


class TestHttpEventPublisher:
    """Forwarding events over HTTP"""

    def test_publish_posts_event_payload(self, event):
        """Test event is posted as JSON with the trace id header"""
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(202)

        with make_publisher(handler) as publisher:
            publisher.publish(event, "trace_1")

        assert len(requests) == 1
        request = requests[0]
        assert str(request.url) == PIPELINE_URL
        assert request.method == "POST"
        assert request.headers["X-Trace-Id"] == "trace_1"
        body = json.loads(request.content)
        assert body["video_id"] == 42
        assert body["type"] == "VIEW"
        assert "occurred_at" in body

    def test_server_error_is_retried(self, event):
        """Test 5xx followed by success delivers the event"""
        statuses = iter([503, 200])
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(next(statuses))

        publisher = make_publisher(handler)
        publisher.publish(event, "trace_2")

        assert len(calls) == 2

    def test_persistent_server_error_raises(self, event):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(500)

        publisher = make_publisher(handler)
        with pytest.raises(EventPublishError):
            publisher.publish(event, "trace_3")

        assert len(calls) == 3

    def test_client_error_is_not_retried(self, event):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(400)

        publisher = make_publisher(handler)
        with pytest.raises(EventPublishError):
            publisher.publish(event, "trace_4")

        assert len(calls) == 1


def test_logging_publisher_accepts_event(event):
    """Test stub publisher never fails"""
    LoggingEventPublisher().publish(event, "trace_5")
