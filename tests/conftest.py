"""Common test fixtures for all test modules"""
import os

# core.db builds its engine at import time
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.deps.common import (
    ApiSettings, get_api_settings, get_db_session, get_engagement_settings,
)
from app.main import app
from core.db import Base
from core.models import Video, VideoMetadata, VideoEngagement
from engagement.sinks import EngagementSettings


@pytest.fixture
def engine():
    """In-memory SQLite engine shared across threads"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def make_video(session):
    """Factory persisting a video with metadata"""
    def _make(title="Test Video", file_url="http://example.com/video.mp4",
              genre="Action", is_active=True, **overrides):
        video = Video(
            title=title,
            director=overrides.pop("director", "John Doe"),
            cast=overrides.pop("cast", ["Jane Doe", "Bob Smith"]),
            file_url=file_url,
            file_size=overrides.pop("file_size", 5000000),
            format=overrides.pop("format", "mp4"),
            resolution=overrides.pop("resolution", 1080),
            duration=overrides.pop("duration", 3600),
            is_active=is_active,
            video_metadata=VideoMetadata(
                genre=genre,
                synopsis=overrides.pop("synopsis", "Great movie"),
                release_year=overrides.pop("release_year", 2024),
                running_time=overrides.pop("running_time", 120)
            )
        )
        session.add(video)
        session.commit()
        return video
    return _make


@pytest.fixture
def make_engagement(session):
    def _make(video_id, impressions=0, views=0):
        engagement = VideoEngagement(video_id=video_id, impressions=impressions, views=views)
        session.add(engagement)
        session.commit()
        return engagement
    return _make


@pytest.fixture
def engagement_settings():
    return EngagementSettings(engagement_use_external_pipeline=False, engagement_pipeline_url=None)


@pytest.fixture
def api_settings():
    return ApiSettings(api_key=None)


@pytest.fixture
def client(session_factory, engagement_settings, api_settings):
    """API client bound to the test database"""
    def override_session():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db_session] = override_session
    app.dependency_overrides[get_engagement_settings] = lambda: engagement_settings
    app.dependency_overrides[get_api_settings] = lambda: api_settings

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def publish_payload():
    """Valid publish request body"""
    return {
        "title": "Test Video",
        "director": "John Doe",
        "cast": ["Jane Doe", "Bob Smith"],
        "file_url": "http://example.com/video.mp4",
        "format": "mp4",
        "file_size": 5000000,
        "resolution": 1080,
        "duration": 3600,
        "metadata": {
            "genre": "Action",
            "synopsis": "Great movie",
            "release_year": 2024,
            "running_time": 120
        }
    }
