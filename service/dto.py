"""Data Transfer Objects for service layer"""
from typing import Optional, List
from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.models import EngagementType


class MetadataRequestDTO(BaseModel):
    """Descriptive metadata submitted with a new video"""
    genre: Optional[str] = None
    synopsis: Optional[str] = None
    release_year: Optional[int] = Field(default=None, ge=1800, le=3000)
    running_time: Optional[int] = Field(default=None, ge=0)


class VideoRequestDTO(BaseModel):
    """Service layer DTO for publish requests"""
    title: str = Field(min_length=1, max_length=255)
    director: Optional[str] = None
    cast: List[str] = Field(default_factory=list)
    file_url: str = Field(min_length=1)
    file_size: Optional[int] = Field(default=None, ge=0)
    format: Optional[str] = None
    resolution: Optional[int] = Field(default=None, ge=0)
    duration: Optional[int] = Field(default=None, ge=0)
    metadata: MetadataRequestDTO = Field(default_factory=MetadataRequestDTO)

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title must not be blank")
        return v


class PublishVideoResponseDTO(BaseModel):
    success: bool
    message: str
    title: str
    video_id: Optional[int] = None


class SoftDeleteResponseDTO(BaseModel):
    success: bool
    message: str
    video_id: Optional[int] = None


class LoadVideoResponseDTO(BaseModel):
    """Full metadata view of a single video"""
    video_id: int
    title: str
    director: Optional[str] = None
    cast: List[str] = Field(default_factory=list)
    file_url: Optional[str] = None
    file_size: Optional[int] = None
    format: Optional[str] = None
    resolution: Optional[int] = None
    duration: Optional[int] = None
    is_active: bool
    genre: Optional[str] = None
    synopsis: Optional[str] = None
    release_year: Optional[int] = None
    running_time: Optional[int] = None


class PlayVideoResponseDTO(BaseModel):
    video_id: int
    title: str
    file_url: str
    format: Optional[str] = None


class SearchVideoResponseDTO(BaseModel):
    """Lightweight search hit"""
    video_id: int
    title: str
    director: Optional[str] = None
    genre: Optional[str] = None


class VideoMetadataResponseDTO(BaseModel):
    """Metadata summary used by the catalog listing"""
    title: str
    director: Optional[str] = None
    genre: Optional[str] = None
    release_year: Optional[int] = None
    running_time: Optional[int] = None


class EngagementEventDTO(BaseModel):
    """Inbound engagement event"""
    video_id: int
    type: EngagementType


class EngagementResponseDTO(BaseModel):
    """Service layer DTO for engagement tracking and statistics"""
    model_config = ConfigDict(use_enum_values=True)

    success: bool
    message: str
    video_id: Optional[int] = None
    title: Optional[str] = None
    impressions: Optional[int] = None
    views: Optional[int] = None
    type: Optional[EngagementType] = None


class ErrorResponseDTO(BaseModel):
    """Body of every translated failure"""
    code: int
    message: str


class HealthResponseDTO(BaseModel):
    """Service layer DTO for health check responses"""
    ok: bool = True
    database: str = "connected"
    timestamp: Optional[str] = None
    version: Optional[str] = None
