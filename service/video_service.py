"""Video lifecycle service: publish, soft-delete, fetch, search, play"""
import logging
import time
from typing import List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from core.models import Video, VideoMetadata
from core.repositories.videos import VideoRepository
from service.dto import (
    LoadVideoResponseDTO,
    PlayVideoResponseDTO,
    PublishVideoResponseDTO,
    SearchVideoResponseDTO,
    SoftDeleteResponseDTO,
    VideoMetadataResponseDTO,
    VideoRequestDTO,
)
from service.errors import InternalServerError, ResourceNotFoundError
from service.results import ServiceResult

logger = logging.getLogger(__name__)


class VideoService:
    """
    Video operations over a single request-scoped session.

    Expected conditions (missing video, missing file URL, failed commit) are
    returned as ServiceResult errors rather than raised.
    """

    def __init__(
        self,
        session: Session,
        *,
        video_repo: Optional[VideoRepository] = None,
        trace_id: str = "-"
    ):
        self.session = session
        self.video_repo = video_repo or VideoRepository(session)
        self.trace_id = trace_id

    def publish_video(self, dto: VideoRequestDTO) -> ServiceResult[PublishVideoResponseDTO]:
        """
        Persist a new video with its metadata.

        Args:
            dto: Validated publish request

        Returns:
            ServiceResult: 201 on success, 409 when the title is taken,
            InternalServerError when the commit fails
        """
        start_time = time.time()

        logger.info("Publishing video", extra={"trace_id": self.trace_id})

        if self.video_repo.exists_by_title(dto.title):
            logger.warning("Video title already exists", extra={"trace_id": self.trace_id})
            return _title_conflict(dto)

        try:
            video = Video(
                title=dto.title,
                director=dto.director,
                cast=list(dto.cast),
                file_url=dto.file_url,
                file_size=dto.file_size,
                format=dto.format,
                resolution=dto.resolution,
                duration=dto.duration,
                is_active=True,
                video_metadata=VideoMetadata(**dto.metadata.model_dump())
            )
            saved = self.video_repo.save(video)
            video_id = saved.id
            self.session.commit()

        except IntegrityError:
            # Concurrent publish won the lower(title) unique index
            self.session.rollback()
            logger.warning("Video title already exists", extra={
                "trace_id": self.trace_id,
                "error_type": "IntegrityError"
            })
            return _title_conflict(dto)

        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error("Video publish failed", extra={
                "trace_id": self.trace_id,
                "error_type": type(e).__name__
            })
            return ServiceResult.failure(
                InternalServerError(f"Failed to publish video: {dto.title}")
            )

        logger.info("Video published", extra={
            "trace_id": self.trace_id,
            "video_id": video_id,
            "latency_ms": int((time.time() - start_time) * 1000)
        })

        return ServiceResult.success(
            PublishVideoResponseDTO(
                success=True,
                message="Video successfully published",
                title=dto.title,
                video_id=video_id
            ),
            status_code=201
        )

    def soft_delete_video(self, video_id: int) -> ServiceResult[SoftDeleteResponseDTO]:
        """Mark a video inactive; a missing id is a 404 body, not an error"""
        video = self.video_repo.get_by_id(video_id)
        if video is None:
            logger.warning("Soft delete requested for unknown video", extra={
                "trace_id": self.trace_id,
                "video_id": video_id
            })
            return ServiceResult.success(
                SoftDeleteResponseDTO(success=False, message="Video not found"),
                status_code=404
            )

        try:
            video.is_active = False
            self.video_repo.save(video)
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error("Video soft delete failed", extra={
                "trace_id": self.trace_id,
                "video_id": video_id,
                "error_type": type(e).__name__
            })
            return ServiceResult.failure(
                InternalServerError(f"Failed to delete video: {video_id}")
            )

        logger.info("Video soft deleted", extra={"trace_id": self.trace_id, "video_id": video_id})

        return ServiceResult.success(
            SoftDeleteResponseDTO(
                success=True,
                message="Video successfully deleted",
                video_id=video_id
            )
        )

    def load_video_content(self, video_id: int) -> ServiceResult[LoadVideoResponseDTO]:
        video = self.video_repo.get_by_id(video_id)
        if video is None:
            return ServiceResult.failure(ResourceNotFoundError("Video not found"))

        meta = video.video_metadata
        return ServiceResult.success(
            LoadVideoResponseDTO(
                video_id=video.id,
                title=video.title,
                director=video.director,
                cast=list(video.cast or []),
                file_url=video.file_url,
                file_size=video.file_size,
                format=video.format,
                resolution=video.resolution,
                duration=video.duration,
                is_active=video.is_active,
                genre=meta.genre if meta else None,
                synopsis=meta.synopsis if meta else None,
                release_year=meta.release_year if meta else None,
                running_time=meta.running_time if meta else None
            )
        )

    def play_video_content(self, video_id: int) -> ServiceResult[PlayVideoResponseDTO]:
        """Resolve the playable URL; a missing URL is a data-integrity fault"""
        video = self.video_repo.get_by_id(video_id)
        if video is None:
            return ServiceResult.failure(ResourceNotFoundError("Video not found"))

        if not video.file_url:
            logger.error("Video file URL is missing", extra={
                "trace_id": self.trace_id,
                "video_id": video_id
            })
            return ServiceResult.failure(InternalServerError("Video file URL is missing"))

        return ServiceResult.success(
            PlayVideoResponseDTO(
                video_id=video.id,
                title=video.title,
                file_url=video.file_url,
                format=video.format
            )
        )

    def search_videos(self, query: str, page: int, size: int) -> ServiceResult[List[SearchVideoResponseDTO]]:
        """
        Text search with pagination.

        An empty page is answered with 404 and an empty list body. Pagination
        metadata is not part of the response.
        """
        videos = self.video_repo.search(query, page, size)

        logger.info("Video search completed", extra={
            "trace_id": self.trace_id,
            "status_code": 200 if videos else 404
        })

        if not videos:
            return ServiceResult.success([], status_code=404)

        return ServiceResult.success([
            SearchVideoResponseDTO(
                video_id=video.id,
                title=video.title,
                director=video.director,
                genre=video.video_metadata.genre if video.video_metadata else None
            )
            for video in videos
        ])

    def get_all_videos(self, page: int, size: int) -> ServiceResult[List[VideoMetadataResponseDTO]]:
        """Paginated catalog listing; an empty page is a not-found error"""
        videos = self.video_repo.find_all(page, size)
        if not videos:
            return ServiceResult.failure(ResourceNotFoundError("No videos found"))

        return ServiceResult.success([_to_metadata_summary(video) for video in videos])


def _to_metadata_summary(video: Video) -> VideoMetadataResponseDTO:
    meta = video.video_metadata
    return VideoMetadataResponseDTO(
        title=video.title,
        director=video.director,
        genre=meta.genre if meta else None,
        release_year=meta.release_year if meta else None,
        running_time=meta.running_time if meta else None
    )


def _title_conflict(dto: VideoRequestDTO) -> ServiceResult[PublishVideoResponseDTO]:
    return ServiceResult.success(
        PublishVideoResponseDTO(
            success=False,
            message="Video with this title already exists",
            title=dto.title
        ),
        status_code=409
    )
