"""Core database models"""
from .videos import Video, VideoMetadata
from .video_engagement import EngagementType, VideoEngagement

__all__ = ["Video", "VideoMetadata", "VideoEngagement", "EngagementType"]
