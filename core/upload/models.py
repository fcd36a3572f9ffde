"""
Typed shape of the analysis service's success response.

Sub-collections may be absent, null or empty. Absent and null both load as
None; an empty list loads as an empty tuple, which keeps "present but empty"
distinguishable from "absent" for youtube_results.
"""

import logging
from typing import Annotated, Any, Optional, Tuple

from pydantic import BaseModel, BeforeValidator, ConfigDict, ValidationError

from .errors import MalformedResponseError

logger = logging.getLogger(__name__)


def _none_to_empty(value: Any) -> Any:
    return '' if value is None else value


# Text fields render as empty when the service sends null
Text = Annotated[str, BeforeValidator(_none_to_empty)]


class _ResultModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra='ignore')


class Topic(_ResultModel):
    main_topic: Text = ''
    subtopics: Optional[Tuple[Text, ...]] = None


class Video(_ResultModel):
    url: Text = ''
    thumbnail: Text = ''
    title: Text = ''
    channel: Text = ''


class VideoGroup(_ResultModel):
    main_topic: Text = ''
    videos: Optional[Tuple[Video, ...]] = None


class AnalysisResult(_ResultModel):
    """Subject, topic outline and per-topic video recommendations."""

    subject: Text = ''
    filename: Text = ''
    topics: Optional[Tuple[Topic, ...]] = None
    youtube_results: Optional[Tuple[VideoGroup, ...]] = None

    @property
    def missing_video_api_key(self) -> bool:
        """True when youtube_results is present but empty."""
        return self.youtube_results is not None and len(self.youtube_results) == 0


def parse_analysis_result(payload: Any) -> AnalysisResult:
    """
    Validate a decoded JSON payload into an AnalysisResult.

    Raises:
        MalformedResponseError: If the payload is not an object or has the wrong shape
    """
    if not isinstance(payload, dict):
        raise MalformedResponseError(
            f"Expected a JSON object, got {type(payload).__name__}"
        )

    try:
        return AnalysisResult.model_validate(payload)
    except ValidationError as e:
        logger.warning(f"Analysis result failed validation: {e.error_count()} error(s)")
        raise MalformedResponseError(f"Analysis result has an unexpected shape: {e}") from e
