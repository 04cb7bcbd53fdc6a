"""Video catalog API endpoints"""
from typing import List

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from app.api.errors import to_response
from app.deps.common import get_video_service, require_api_key
from service.dto import (
    ErrorResponseDTO,
    LoadVideoResponseDTO,
    PlayVideoResponseDTO,
    PublishVideoResponseDTO,
    SearchVideoResponseDTO,
    SoftDeleteResponseDTO,
    VideoMetadataResponseDTO,
    VideoRequestDTO,
)
from service.video_service import VideoService

router = APIRouter(tags=["videos"], responses={500: {"model": ErrorResponseDTO}})


@router.post(
    "/videos",
    status_code=201,
    response_model=PublishVideoResponseDTO,
    responses={409: {"model": PublishVideoResponseDTO}},
    dependencies=[Depends(require_api_key)]
)
def publish_video(
    request: VideoRequestDTO,
    service: VideoService = Depends(get_video_service)
) -> JSONResponse:
    """Publish a new video with its metadata"""
    return to_response(service.publish_video(request))


@router.get(
    "/videos/search",
    response_model=List[SearchVideoResponseDTO]
)
def search_videos(
    query: str = Query(..., min_length=1, pattern=r"\S"),
    page: int = Query(0, ge=0),
    size: int = Query(10, ge=1, le=100),
    service: VideoService = Depends(get_video_service)
) -> JSONResponse:
    """Search active videos; an empty page answers 404 with an empty list"""
    return to_response(service.search_videos(query, page, size))


@router.get(
    "/videos",
    response_model=List[VideoMetadataResponseDTO],
    responses={404: {"model": ErrorResponseDTO}}
)
def get_all_videos(
    page: int = Query(0, ge=0),
    size: int = Query(10, ge=1, le=100),
    service: VideoService = Depends(get_video_service)
) -> JSONResponse:
    return to_response(service.get_all_videos(page, size))


@router.get(
    "/videos/{video_id}",
    response_model=LoadVideoResponseDTO,
    responses={404: {"model": ErrorResponseDTO}}
)
def load_video_content(
    video_id: int,
    service: VideoService = Depends(get_video_service)
) -> JSONResponse:
    return to_response(service.load_video_content(video_id))


@router.get(
    "/videos/{video_id}/play",
    response_model=PlayVideoResponseDTO,
    responses={404: {"model": ErrorResponseDTO}}
)
def play_video_content(
    video_id: int,
    service: VideoService = Depends(get_video_service)
) -> JSONResponse:
    """Resolve the playable file URL of a video"""
    return to_response(service.play_video_content(video_id))


@router.delete(
    "/videos/{video_id}",
    response_model=SoftDeleteResponseDTO,
    responses={404: {"model": SoftDeleteResponseDTO}},
    dependencies=[Depends(require_api_key)]
)
def soft_delete_video(
    video_id: int,
    service: VideoService = Depends(get_video_service)
) -> JSONResponse:
    """Mark a video inactive without removing it"""
    return to_response(service.soft_delete_video(video_id))
