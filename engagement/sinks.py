"""Engagement sinks: forward events to a pipeline or persist them locally"""
import logging
from abc import ABC, abstractmethod
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from core.repositories.video_engagements import VideoEngagementRepository
from engagement.clients.event_publisher import EventPublisher, EventPublishError
from engagement.schemas import EngagementEvent
from service.dto import EngagementResponseDTO
from service.errors import InternalServerError
from service.results import ServiceResult

logger = logging.getLogger(__name__)


class EngagementSettings(BaseSettings):
    """Engagement pipeline configuration from environment"""
    engagement_use_external_pipeline: bool = False
    engagement_pipeline_url: Optional[str] = None
    engagement_pipeline_timeout: float = 5.0

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


class EngagementSink(ABC):
    """Receives engagement events for a video that is known to exist"""

    @abstractmethod
    def record(self, event: EngagementEvent, trace_id: str) -> ServiceResult[EngagementResponseDTO]:
        """Handle one event and describe the outcome"""
        pass


class ForwardingEngagementSink(EngagementSink):
    """Hands events to an external pipeline; never touches the engagement store"""

    def __init__(self, publisher: EventPublisher):
        self.publisher = publisher

    def record(self, event: EngagementEvent, trace_id: str) -> ServiceResult[EngagementResponseDTO]:
        try:
            self.publisher.publish(event, trace_id)
        except EventPublishError:
            return ServiceResult.failure(InternalServerError(
                f"Failed to forward engagement event for Video ID: {event.video_id}"
            ))

        return ServiceResult.success(
            EngagementResponseDTO(
                success=True,
                message="Engagement event forwarded to pipeline",
                video_id=event.video_id,
                type=event.type
            ),
            status_code=202
        )


class LocalEngagementSink(EngagementSink):
    """Persists events as counter increments on the video's engagement record"""

    def __init__(self, session: Session, engagement_repo: Optional[VideoEngagementRepository] = None):
        self.session = session
        self.engagement_repo = engagement_repo or VideoEngagementRepository(session)

    def record(self, event: EngagementEvent, trace_id: str) -> ServiceResult[EngagementResponseDTO]:
        if not self.engagement_repo.increment(event.video_id, event.type):
            try:
                self.engagement_repo.create(event.video_id, event.type)
                logger.info("New engagement created", extra={
                    "trace_id": trace_id,
                    "video_id": event.video_id
                })
            except IntegrityError:
                # A concurrent request inserted the record first
                self.session.rollback()
                if not self.engagement_repo.increment(event.video_id, event.type):
                    raise

        logger.info("Engagement recorded in DB", extra={
            "trace_id": trace_id,
            "video_id": event.video_id,
            "engagement_type": event.type.value
        })

        return ServiceResult.success(
            EngagementResponseDTO(
                success=True,
                message="Engagement recorded successfully",
                video_id=event.video_id
            ),
            status_code=200
        )
