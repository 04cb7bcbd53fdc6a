import enum

from sqlalchemy import BIGINT, CheckConstraint, Column, ForeignKey, Integer
from sqlalchemy.orm import relationship
from core.db import Base
from core.models.videos import BigIntId


class EngagementType(str, enum.Enum):
    """Kinds of engagement events tracked per video"""
    IMPRESSION = "IMPRESSION"
    VIEW = "VIEW"


class VideoEngagement(Base):
    """Impression and view counters for a single video"""
    __tablename__ = "video_engagements"

    id = Column(BigIntId, primary_key=True, autoincrement=True)
    video_id = Column(BIGINT, ForeignKey("videos.id"), nullable=False, unique=True,
                      comment="Reference to video (at most one record per video)")
    impressions = Column(Integer, nullable=False, default=0)
    views = Column(Integer, nullable=False, default=0)

    video = relationship("Video", back_populates="engagement")

    __table_args__ = (
        CheckConstraint("impressions >= 0", name="ck_video_engagements_impressions"),
        CheckConstraint("views >= 0", name="ck_video_engagements_views"),
    )

    @classmethod
    def counter_for(cls, engagement_type: EngagementType):
        """Column incremented by an event of the given type"""
        if engagement_type == EngagementType.IMPRESSION:
            return cls.impressions
        return cls.views
