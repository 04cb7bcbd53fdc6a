"""Common dependencies for FastAPI dependency injection"""
import uuid
from datetime import datetime, timezone
from functools import lru_cache
from typing import Generator, Optional

from fastapi import Depends, Header
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.orm import Session

from core.db import SessionLocal
from engagement.clients.event_publisher import (
    EventPublisher, HttpEventPublisher, LoggingEventPublisher,
)
from engagement.sinks import (
    EngagementSettings, EngagementSink, ForwardingEngagementSink, LocalEngagementSink,
)
from service.engagement_service import EngagementService
from service.errors import AuthenticationFailedError, ForbiddenError
from service.video_service import VideoService


class ApiSettings(BaseSettings):
    """HTTP surface configuration from environment"""
    api_key: Optional[str] = None

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


def get_db_session() -> Generator[Session, None, None]:
    """
    Database session dependency.

    Yields:
        Session: SQLAlchemy database session
    """
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


def get_trace_id() -> str:
    """
    Generate unique trace ID for request tracking.

    Returns:
        str: Unique trace ID
    """
    return f"api_{datetime.now(timezone.utc).strftime('%Y%m%d_%H%M%S')}_{uuid.uuid4().hex[:8]}"


@lru_cache
def get_api_settings() -> ApiSettings:
    return ApiSettings()


@lru_cache
def get_engagement_settings() -> EngagementSettings:
    return EngagementSettings()


@lru_cache
def _http_publisher(url: str, timeout: float) -> HttpEventPublisher:
    return HttpEventPublisher(url, timeout=timeout)


def get_event_publisher(
    settings: EngagementSettings = Depends(get_engagement_settings)
) -> EventPublisher:
    """
    Event publisher dependency.

    Returns the HTTP publisher when a pipeline URL is configured, otherwise
    the logging stub.
    """
    if settings.engagement_pipeline_url:
        return _http_publisher(settings.engagement_pipeline_url, settings.engagement_pipeline_timeout)
    return LoggingEventPublisher()


def get_engagement_sink(
    session: Session = Depends(get_db_session),
    settings: EngagementSettings = Depends(get_engagement_settings),
    publisher: EventPublisher = Depends(get_event_publisher)
) -> EngagementSink:
    """Pick forwarding or local persistence from configuration"""
    if settings.engagement_use_external_pipeline:
        return ForwardingEngagementSink(publisher)
    return LocalEngagementSink(session)


def get_video_service(
    session: Session = Depends(get_db_session),
    trace_id: str = Depends(get_trace_id)
) -> VideoService:
    return VideoService(session, trace_id=trace_id)


def get_engagement_service(
    session: Session = Depends(get_db_session),
    sink: EngagementSink = Depends(get_engagement_sink),
    trace_id: str = Depends(get_trace_id)
) -> EngagementService:
    return EngagementService(session, sink, trace_id=trace_id)


def require_api_key(
    x_api_key: Optional[str] = Header(default=None),
    settings: ApiSettings = Depends(get_api_settings)
) -> None:
    """
    Guard for mutating endpoints.

    Disabled when no API key is configured.

    Raises:
        AuthenticationFailedError: Header missing
        ForbiddenError: Header does not match the configured key
    """
    if not settings.api_key:
        return
    if not x_api_key:
        raise AuthenticationFailedError("API key is required")
    if x_api_key != settings.api_key:
        raise ForbiddenError("API key is not allowed to perform this operation")
