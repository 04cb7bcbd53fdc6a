"""Publishing against a real session when another writer takes the title first"""
from core.models import Video
from core.repositories.videos import VideoRepository
from service.dto import MetadataRequestDTO, VideoRequestDTO
from service.video_service import VideoService


class RacingVideoRepository(VideoRepository):
    """Commits a case-variant title from another session after the duplicate check"""

    def __init__(self, session, other_session, competing_title):
        super().__init__(session)
        self.other_session = other_session
        self.competing_title = competing_title

    def exists_by_title(self, title):
        taken = super().exists_by_title(title)
        self.other_session.add(Video(title=self.competing_title, is_active=True))
        self.other_session.commit()
        return taken


class TestConcurrentPublish:
    """Unique index violations on publish"""

    def test_lost_race_returns_conflict(self, session, session_factory):
        other_session = session_factory()
        try:
            repo = RacingVideoRepository(session, other_session, "race video")
            service = VideoService(session, video_repo=repo, trace_id="test_trace")

            result = service.publish_video(VideoRequestDTO(
                title="Race Video",
                file_url="http://example.com/race.mp4",
                metadata=MetadataRequestDTO(genre="Action")
            ))
        finally:
            other_session.close()

        assert result.ok
        assert result.status_code == 409
        assert result.body.success is False
        assert result.body.message == "Video with this title already exists"
        assert [v.title for v in session.query(Video).all()] == ["race video"]
