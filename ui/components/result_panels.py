"""Analysis result display components."""
import html
import re
import streamlit as st
from typing import Dict, Any
from urllib.parse import urlparse

VIDEO_GRID_COLUMNS = 3

# ASCII punctuation Streamlit's Markdown gives a meaning to, including $ (LaTeX) and : (emoji)
_MARKDOWN_SPECIAL = re.compile(r'([\\`*_{}\[\]()#+\-.!|<>~$&:])')

_VIDEO_STYLE = "display:flex;gap:0.75rem;text-decoration:none;color:inherit;"
_THUMBNAIL_STYLE = "width:7rem;height:4rem;object-fit:cover;border-radius:0.25rem;"


def escape_markdown(text: str) -> str:
    """Make backend text display literally inside st.markdown."""
    return _MARKDOWN_SPECIAL.sub(r'\\\1', text.replace('\r', ' ').replace('\n', ' '))


def safe_http_url(url: str) -> str:
    """Return the URL if it is an absolute http(s) URL, else an empty string."""
    candidate = (url or '').strip()
    parsed = urlparse(candidate)
    if parsed.scheme.lower() in ('http', 'https') and parsed.netloc:
        return candidate
    return ''


def display_summary_and_topics(view: Dict[str, Any]):
    """Display the subject panel next to the extracted topics."""
    summary = view.get('summary')
    if summary is None:
        return

    subject_col, topics_col = st.columns([1, 2])

    with subject_col:
        with st.container(border=True):
            st.subheader("Subject")
            # Rendered even when empty
            st.text(summary['subject'])
            st.caption("Source file")
            st.markdown(f"**{escape_markdown(summary['filename'])}**")

    with topics_col:
        with st.container(border=True):
            st.subheader("Extracted Topics")
            for topic in view.get('topics') or []:
                _display_topic(topic)


def _display_topic(topic: Dict[str, Any]):
    with st.container(border=True):
        st.markdown(f"**{escape_markdown(topic['main_topic'])}**")
        if topic['subtopics']:
            st.markdown("\n".join(f"- {escape_markdown(s)}" for s in topic['subtopics']))


def display_video_recommendations(view: Dict[str, Any]):
    """Display video groups in a grid; nothing when the panel is absent."""
    groups = view.get('videos')
    if not groups:
        return

    with st.container(border=True):
        st.subheader("Recommended YouTube Videos")
        st.caption("Top picks per main topic")

        columns = st.columns(VIDEO_GRID_COLUMNS)
        for idx, group in enumerate(groups):
            with columns[idx % VIDEO_GRID_COLUMNS]:
                _display_video_group(group)


def _display_video_group(group: Dict[str, Any]):
    with st.container(border=True):
        st.markdown(f"**{escape_markdown(group['main_topic'])}**")
        if group['placeholder']:
            st.caption(group['placeholder'])
            return
        for video in group['videos']:
            st.markdown(video_link_html(video), unsafe_allow_html=True)


def video_link_html(video: Dict[str, str]) -> str:
    """
    Thumbnail, title and channel wrapped in a single link to the video.
    Without an http(s) URL the unit is drawn unlinked; without an http(s)
    thumbnail the image is left out.
    """
    url = safe_http_url(video['url'])
    thumbnail = safe_http_url(video['thumbnail'])
    title = html.escape(video['title'])
    channel = html.escape(video['channel'])

    image = ''
    if thumbnail:
        image = f'<img src="{html.escape(thumbnail, quote=True)}" alt="{title}" style="{_THUMBNAIL_STYLE}"/>'
    body = (
        f'{image}'
        f'<div><div style="font-weight:600;">{title}</div>'
        f'<div style="font-size:0.8rem;opacity:0.7;">{channel}</div></div>'
    )

    if not url:
        return f'<div style="{_VIDEO_STYLE}">{body}</div>'
    return (
        f'<a href="{html.escape(url, quote=True)}" target="_blank" rel="noreferrer" '
        f'style="{_VIDEO_STYLE}">{body}</a>'
    )


def display_footer(view: Dict[str, Any]):
    st.divider()
    st.caption(f"Backend: `{view['backend_url']}`")


def display_results(view: Dict[str, Any]):
    """Display every result panel for the current view model."""
    display_summary_and_topics(view)
    display_video_recommendations(view)
    display_footer(view)
