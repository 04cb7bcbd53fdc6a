from sqlalchemy import (
    BIGINT, JSON, TIMESTAMP, Boolean, Column, ForeignKey, Index, Integer, Text, func,
)
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship
from core.db import Base

# SQLite only autoincrements INTEGER primary keys
BigIntId = BIGINT().with_variant(Integer, "sqlite")


class Video(Base):
    """Published video catalog entry"""
    __tablename__ = "videos"

    id = Column(BigIntId, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False, comment="Unique title (case-insensitive)")
    director = Column(Text, comment="Director name")
    cast = Column(JSON().with_variant(JSONB, "postgresql"), default=list,
                  comment="Ordered list of cast member names")
    file_url = Column(Text, comment="Location of the playable file")
    file_size = Column(BIGINT, comment="File size in bytes")
    format = Column(Text, comment="Container format (e.g., mp4)")
    resolution = Column(Integer, comment="Vertical resolution in pixels")
    duration = Column(Integer, comment="Duration in seconds")
    is_active = Column(Boolean, nullable=False, default=True,
                       comment="False once the video is soft-deleted")
    created_at = Column(TIMESTAMP(timezone=True), nullable=False,
                        server_default=func.now(), comment="Publication time (UTC)")

    video_metadata = relationship(
        "VideoMetadata",
        back_populates="video",
        uselist=False,
        cascade="all, delete-orphan",
        lazy="joined",
    )
    engagement = relationship("VideoEngagement", back_populates="video", uselist=False)


Index("uq_videos_title_lower", func.lower(Video.title), unique=True)


class VideoMetadata(Base):
    """Descriptive metadata owned by exactly one video"""
    __tablename__ = "video_metadata"

    id = Column(BigIntId, primary_key=True, autoincrement=True)
    video_id = Column(BIGINT, ForeignKey("videos.id"), nullable=False, unique=True,
                      comment="Owning video")
    genre = Column(Text)
    synopsis = Column(Text)
    release_year = Column(Integer)
    running_time = Column(Integer, comment="Running time in minutes")

    video = relationship("Video", back_populates="video_metadata")
