"""Video store queries"""
from typing import List, Optional

from sqlalchemy import func, or_, select
from sqlalchemy.orm import Session

from core.models import Video, VideoMetadata


def _like_pattern(query: str) -> str:
    escaped = query.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class VideoRepository:
    """Video persistence bound to a single session"""

    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, video_id: int) -> Optional[Video]:
        return self.session.get(Video, video_id)

    def exists_by_title(self, title: str) -> bool:
        """Case-insensitive title lookup over active and inactive videos"""
        # Same folding as the uq_videos_title_lower index
        stmt = select(Video.id).where(func.lower(Video.title) == func.lower(title.strip())).limit(1)
        return self.session.execute(stmt).first() is not None

    def save(self, video: Video) -> Video:
        """Stage the video and flush so generated ids are available"""
        self.session.add(video)
        self.session.flush()
        return video

    def search(self, query: str, page: int, size: int) -> List[Video]:
        """
        Substring search over title, genre, director and synopsis.

        Args:
            query: Free text, matched case-insensitively
            page: Zero-based page index
            size: Page size

        Returns:
            List[Video]: Active videos on the requested page, ordered by id
        """
        pattern = _like_pattern(query.strip())
        stmt = (
            select(Video)
            .outerjoin(VideoMetadata, VideoMetadata.video_id == Video.id)
            .where(
                Video.is_active.is_(True),
                or_(
                    Video.title.ilike(pattern, escape="\\"),
                    Video.director.ilike(pattern, escape="\\"),
                    VideoMetadata.genre.ilike(pattern, escape="\\"),
                    VideoMetadata.synopsis.ilike(pattern, escape="\\"),
                ),
            )
            .order_by(Video.id)
            .offset(page * size)
            .limit(size)
        )
        return list(self.session.execute(stmt).scalars().all())

    def find_all(self, page: int, size: int) -> List[Video]:
        """Active videos on the requested zero-based page, ordered by id"""
        stmt = (
            select(Video)
            .where(Video.is_active.is_(True))
            .order_by(Video.id)
            .offset(page * size)
            .limit(size)
        )
        return list(self.session.execute(stmt).scalars().all())
