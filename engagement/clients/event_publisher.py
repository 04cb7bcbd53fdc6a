"""Event publisher interface for forwarding engagement events"""
import logging
from abc import ABC, abstractmethod
from typing import Optional

import httpx
from tenacity import (
    retry, retry_if_exception_type, stop_after_attempt, wait_exponential_jitter,
)

from engagement.schemas import EngagementEvent

logger = logging.getLogger(__name__)


class EventPublishError(Exception):
    """Raised when an event could not be delivered downstream"""


class RetryableStatusError(Exception):
    """Pipeline answered 429 or 5xx"""
    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"Pipeline responded with HTTP {status_code}")


class EventPublisher(ABC):
    """Abstract base class for engagement event publishers"""

    @abstractmethod
    def publish(self, event: EngagementEvent, trace_id: str) -> None:
        """Deliver one event, raising EventPublishError on failure"""
        pass


class LoggingEventPublisher(EventPublisher):
    """Stub publisher that only records the event in the log"""

    def publish(self, event: EngagementEvent, trace_id: str) -> None:
        logger.info("Engagement event forwarded", extra={
            "trace_id": trace_id,
            "video_id": event.video_id,
            "engagement_type": event.type.value
        })


class HttpEventPublisher(EventPublisher):
    """Publisher posting events as JSON to an ingestion endpoint"""

    def __init__(self, url: str, timeout: float = 5.0, client: Optional[httpx.Client] = None):
        self.url = url
        self.client = client or httpx.Client(
            timeout=timeout,
            limits=httpx.Limits(max_connections=5, max_keepalive_connections=2)
        )

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.client.close()

    def publish(self, event: EngagementEvent, trace_id: str) -> None:
        try:
            self._post(event.to_payload(), trace_id)
        except (RetryableStatusError, httpx.HTTPError) as e:
            logger.error("Failed to publish engagement event", extra={
                "trace_id": trace_id,
                "video_id": event.video_id,
                "error_type": type(e).__name__
            })
            raise EventPublishError(str(e)) from e

        logger.info("Engagement event published", extra={
            "trace_id": trace_id,
            "video_id": event.video_id,
            "engagement_type": event.type.value
        })

    @retry(
        retry=retry_if_exception_type((RetryableStatusError, httpx.TransportError)),
        stop=stop_after_attempt(3),
        wait=wait_exponential_jitter(initial=0.2, max=2, jitter=0.1),
        reraise=True
    )
    def _post(self, payload: dict, trace_id: str) -> None:
        """POST with retry on 429/5xx and transport errors"""
        response = self.client.post(self.url, json=payload, headers={"X-Trace-Id": trace_id})

        if response.status_code == 429 or response.status_code >= 500:
            logger.warning(f"HTTP {response.status_code}: retrying publish",
                           extra={"trace_id": trace_id})
            raise RetryableStatusError(response.status_code)

        response.raise_for_status()
