from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from core.models import EngagementType, VideoEngagement


class VideoEngagementRepository:
    """Engagement counter persistence bound to a single session"""

    def __init__(self, session: Session):
        self.session = session

    def get_by_video_id(self, video_id: int) -> Optional[VideoEngagement]:
        stmt = select(VideoEngagement).where(VideoEngagement.video_id == video_id)
        return self.session.execute(stmt).scalar_one_or_none()

    def increment(self, video_id: int, engagement_type: EngagementType) -> bool:
        """
        Atomically add one to a counter of the video's record.

        Issued as a single UPDATE so overlapping requests never lose increments.

        Returns:
            bool: False when the video has no engagement record yet
        """
        counter = VideoEngagement.counter_for(engagement_type)
        stmt = (
            update(VideoEngagement)
            .where(VideoEngagement.video_id == video_id)
            .values({counter: counter + 1})
            .execution_options(synchronize_session=False)
        )
        result = self.session.execute(stmt)
        return result.rowcount > 0

    def create(self, video_id: int, engagement_type: EngagementType) -> VideoEngagement:
        """Insert a zeroed record with the first event already counted"""
        engagement = VideoEngagement(video_id=video_id, impressions=0, views=0)
        if engagement_type == EngagementType.IMPRESSION:
            engagement.impressions = 1
        else:
            engagement.views = 1
        self.session.add(engagement)
        self.session.flush()
        return engagement
