"""Engagement service for impression/view tracking and statistics"""
import logging
import time
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.models import EngagementType
from core.repositories.video_engagements import VideoEngagementRepository
from core.repositories.videos import VideoRepository
from engagement.schemas import EngagementEvent
from engagement.sinks import EngagementSink
from service.dto import EngagementResponseDTO
from service.errors import InternalServerError, ResourceNotFoundError
from service.results import ServiceResult

logger = logging.getLogger(__name__)


class EngagementService:
    """Engagement operations; each call is one unit of work on the session"""

    def __init__(
        self,
        session: Session,
        sink: EngagementSink,
        *,
        video_repo: Optional[VideoRepository] = None,
        engagement_repo: Optional[VideoEngagementRepository] = None,
        trace_id: str = "-"
    ):
        self.session = session
        self.sink = sink
        self.video_repo = video_repo or VideoRepository(session)
        self.engagement_repo = engagement_repo or VideoEngagementRepository(session)
        self.trace_id = trace_id

    def track_engagement(
        self, video_id: int, engagement_type: EngagementType
    ) -> ServiceResult[EngagementResponseDTO]:
        """
        Record one impression or view for a video.

        Args:
            video_id: Target video
            engagement_type: IMPRESSION or VIEW

        Returns:
            ServiceResult: sink outcome (202 forwarded, 200 persisted), or
            ResourceNotFoundError / InternalServerError
        """
        start_time = time.time()

        logger.info("Processing engagement tracking", extra={
            "trace_id": self.trace_id,
            "video_id": video_id,
            "engagement_type": engagement_type.value
        })

        if self.video_repo.get_by_id(video_id) is None:
            return ServiceResult.failure(
                ResourceNotFoundError(f"Video not found for ID: {video_id}")
            )

        event = EngagementEvent(video_id=video_id, type=engagement_type)

        try:
            result = self.sink.record(event, self.trace_id)
            if result.ok:
                self.session.commit()
            else:
                self.session.rollback()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error("Engagement tracking failed", extra={
                "trace_id": self.trace_id,
                "video_id": video_id,
                "error_type": type(e).__name__
            })
            return ServiceResult.failure(
                InternalServerError(f"Failed to record engagement for Video ID: {video_id}")
            )

        logger.info("Engagement tracking completed", extra={
            "trace_id": self.trace_id,
            "video_id": video_id,
            "status_code": result.status_code,
            "latency_ms": int((time.time() - start_time) * 1000)
        })

        return result

    def get_engagements(self, video_id: int) -> ServiceResult[EngagementResponseDTO]:
        """Current impression and view counts for a video"""
        logger.info("Fetching engagement stats", extra={
            "trace_id": self.trace_id,
            "video_id": video_id
        })

        video = self.video_repo.get_by_id(video_id)
        if video is None:
            return ServiceResult.failure(
                ResourceNotFoundError(f"Video not found for ID: {video_id}")
            )

        engagement = self.engagement_repo.get_by_video_id(video_id)
        if engagement is None:
            return ServiceResult.failure(
                ResourceNotFoundError(f"Engagement data not found for Video ID: {video_id}")
            )

        return ServiceResult.success(
            EngagementResponseDTO(
                success=True,
                message="Engagement statistics retrieved successfully",
                video_id=video.id,
                title=video.title,
                impressions=engagement.impressions,
                views=engagement.views
            )
        )
