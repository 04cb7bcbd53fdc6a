"""Tests for Pydantic compatibility and no deprecation warnings"""
import warnings
import pytest
from pydantic import ValidationError

from core.models import EngagementType
from engagement.schemas import EngagementEvent
from service.dto import EngagementResponseDTO, MetadataRequestDTO, VideoRequestDTO


def collect_deprecations(fn):
    with warnings.catch_warnings(record=True) as warning_list:
        warnings.simplefilter("always")
        result = fn()
    deprecation_warnings = [w for w in warning_list
                            if issubclass(w.category, DeprecationWarning)]
    return result, deprecation_warnings


class TestPydanticCompatibility:
    """Test DTOs use current API without deprecation warnings"""

    def test_video_request_model_dump(self):
        """Test VideoRequestDTO uses model_dump() without warnings"""
        request = VideoRequestDTO(
            title="  Padded Title ",
            file_url="http://example.com/video.mp4",
            cast=["Jane Doe"],
            metadata=MetadataRequestDTO(genre="Drama", release_year=2020)
        )

        data, deprecations = collect_deprecations(request.model_dump)

        assert deprecations == [], f"Deprecation warnings found: {deprecations}"
        assert data["title"] == "Padded Title"
        assert data["metadata"]["genre"] == "Drama"
        assert data["cast"] == ["Jane Doe"]

    def test_engagement_response_enum_values(self):
        """Test engagement type serializes as its plain value"""
        response = EngagementResponseDTO(
            success=True,
            message="Engagement event forwarded to pipeline",
            video_id=1,
            type=EngagementType.IMPRESSION
        )

        data, deprecations = collect_deprecations(lambda: response.model_dump(exclude_none=True))

        assert deprecations == []
        assert data == {
            "success": True,
            "message": "Engagement event forwarded to pipeline",
            "video_id": 1,
            "type": "IMPRESSION"
        }

    def test_engagement_event_payload(self):
        event = EngagementEvent(video_id=3, type="VIEW")

        payload, deprecations = collect_deprecations(event.to_payload)

        assert deprecations == []
        assert payload["type"] == "VIEW"
        assert isinstance(payload["occurred_at"], str)

    def test_release_year_bounds(self):
        with pytest.raises(ValidationError):
            MetadataRequestDTO(release_year=99)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
