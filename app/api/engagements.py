"""Engagement tracking API endpoints"""
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.api.errors import to_response
from app.deps.common import get_engagement_service
from service.dto import EngagementEventDTO, EngagementResponseDTO, ErrorResponseDTO
from service.engagement_service import EngagementService

router = APIRouter(
    tags=["engagements"],
    responses={404: {"model": ErrorResponseDTO}, 500: {"model": ErrorResponseDTO}}
)


@router.post(
    "/engagements",
    response_model=EngagementResponseDTO,
    responses={202: {"model": EngagementResponseDTO}}
)
def track_engagement(
    event: EngagementEventDTO,
    service: EngagementService = Depends(get_engagement_service)
) -> JSONResponse:
    """Record an impression or view for a video"""
    return to_response(service.track_engagement(event.video_id, event.type))


@router.get("/engagements/{video_id}", response_model=EngagementResponseDTO)
def get_engagements(
    video_id: int,
    service: EngagementService = Depends(get_engagement_service)
) -> JSONResponse:
    """Current impression and view counts for a video"""
    return to_response(service.get_engagements(video_id))
