"""
UI service layer using functional programming approach.
Projects the submission state into view data for the Streamlit components.
"""

from .rendering import (
    build_view_model,
    handle_submission_error,
    handle_submission_success,
    prepare_topic_outline,
    prepare_video_groups,
    SUBMIT_LABEL,
    BUSY_LABEL,
    MISSING_API_KEY_ADVISORY,
    NO_VIDEOS_PLACEHOLDER
)

__all__ = [
    'build_view_model',
    'handle_submission_error',
    'handle_submission_success',
    'prepare_topic_outline',
    'prepare_video_groups',
    'SUBMIT_LABEL',
    'BUSY_LABEL',
    'MISSING_API_KEY_ADVISORY',
    'NO_VIDEOS_PLACEHOLDER'
]
