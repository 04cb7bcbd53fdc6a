"""Pydantic schemas for engagement events"""
from datetime import datetime, timezone
from pydantic import BaseModel, Field

from core.models import EngagementType


class EngagementEvent(BaseModel):
    """Ephemeral (video_id, type) pair handed to an engagement sink"""
    video_id: int
    type: EngagementType
    occurred_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def to_payload(self) -> dict:
        """JSON-ready representation for downstream pipelines"""
        return self.model_dump(mode="json")
