"""UI components module."""

# Import key functions from upload_form module
from .upload_form import (
    current_selection,
    render_upload_form,
    render_notices
)

# Import key functions from result_panels module
from .result_panels import (
    display_summary_and_topics,
    display_video_recommendations,
    display_footer,
    display_results,
    video_link_html,
    escape_markdown,
    safe_http_url
)

__all__ = [
    'current_selection',
    'render_upload_form',
    'render_notices',
    'display_summary_and_topics',
    'display_video_recommendations',
    'display_footer',
    'display_results',
    'video_link_html',
    'escape_markdown',
    'safe_http_url'
]
