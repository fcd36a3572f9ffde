"""
UI view model functions using functional programming approach.
All functions are pure - they project the submission state into display data.
"""

from typing import Dict, List, Any, Optional
import logging

from core.upload.models import AnalysisResult, VideoGroup
from core.upload.state import Error, Loading, SubmissionState, Success

logger = logging.getLogger(__name__)

SUBMIT_LABEL = "Analyze PDF"
BUSY_LABEL = "Analyzing…"
MISSING_API_KEY_ADVISORY = (
    "No YouTube API key detected. Set YOUTUBE_API_KEY in the backend "
    "environment to fetch video suggestions."
)
NO_VIDEOS_PLACEHOLDER = "No videos found for this topic."


def build_view_model(state: SubmissionState, backend_url: str) -> Dict[str, Any]:
    """
    Prepare everything the page displays for one state snapshot.
    Pure function - returns display data without side effects.

    Args:
        state: Current submission state
        backend_url: Backend base URL shown in the footer

    Returns:
        Dictionary containing the form, alert, advisory and result panels
    """
    is_loading = isinstance(state, Loading)
    view = {
        'submit_label': BUSY_LABEL if is_loading else SUBMIT_LABEL,
        'submit_disabled': is_loading,
        'picker_disabled': False,
        'alert': None,
        'advisory': None,
        'summary': None,
        'topics': None,
        'videos': None,
        'backend_url': backend_url
    }

    if isinstance(state, Error):
        view['alert'] = handle_submission_error(state.message)
    elif isinstance(state, Success):
        view.update(handle_submission_success(state.result))

    return view


def handle_submission_error(message: str) -> Dict[str, Any]:
    """
    Prepare alert data for a failed attempt.

    Args:
        message: User-visible failure description

    Returns:
        Dictionary containing error alert data
    """
    return {
        'type': 'error',
        'message': message
    }


def handle_submission_success(result: AnalysisResult) -> Dict[str, Any]:
    """
    Prepare result panels for a successful attempt.
    Subject and filename are always present; the advisory and the video
    panel depend on whether youtube_results is empty or absent.

    Args:
        result: Analysis result returned by the service

    Returns:
        Dictionary with advisory, summary, topics and videos entries
    """
    advisory = None
    if result.missing_video_api_key:
        advisory = {
            'type': 'warning',
            'message': MISSING_API_KEY_ADVISORY
        }

    return {
        'advisory': advisory,
        'summary': {
            'subject': result.subject,
            'filename': result.filename
        },
        'topics': prepare_topic_outline(result),
        'videos': prepare_video_groups(result)
    }


def prepare_topic_outline(result: AnalysisResult) -> List[Dict[str, Any]]:
    """One entry per topic; subtopics is None when there is nothing to list."""
    outline = []
    for topic in result.topics or ():
        outline.append({
            'main_topic': topic.main_topic,
            'subtopics': list(topic.subtopics) if topic.subtopics else None
        })
    return outline


def prepare_video_groups(result: AnalysisResult) -> Optional[List[Dict[str, Any]]]:
    """
    Prepare the video recommendations panel.

    Returns:
        None when youtube_results is absent or empty, else one entry per group
    """
    if not result.youtube_results:
        return None
    return [_prepare_video_group(group) for group in result.youtube_results]


def _prepare_video_group(group: VideoGroup) -> Dict[str, Any]:
    """
    Private helper for a single topic's videos.
    Groups without videos carry a placeholder instead of an empty list.
    """
    videos = [
        {
            'url': video.url,
            'thumbnail': video.thumbnail,
            'title': video.title,
            'channel': video.channel
        }
        for video in group.videos or ()
    ]
    return {
        'main_topic': group.main_topic,
        'videos': videos,
        'placeholder': None if videos else NO_VIDEOS_PLACEHOLDER
    }
