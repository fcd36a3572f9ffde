"""Syllabus AI Analyzer - upload a PDF syllabus and review its analysis"""
import streamlit as st
import logging

from config import ConfigurationError, get_backend_config, get_backend_url, get_ui_config
from core.ui import build_view_model
from core.upload import SubmissionController, SyllabusUploader
from ui.components import render_upload_form, render_notices, display_results

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

st.set_page_config(
    page_title=get_ui_config().get('page_title', "Syllabus AI Analyzer"),
    page_icon="📚",
    layout="wide"
)

CONTROLLER_KEY = 'submission_controller'
PENDING_KEY = 'pending_upload'


def get_controller() -> SubmissionController:
    """Get this browser session's controller, creating it on first use."""
    if CONTROLLER_KEY not in st.session_state:
        backend = get_backend_config()
        uploader = SyllabusUploader(
            get_backend_url(),
            upload_path=backend['upload_path'],
            timeout=backend['timeout_seconds']
        )
        st.session_state[CONTROLLER_KEY] = SubmissionController(uploader)
        logger.info(f"Session connected to analysis service at {uploader.backend_url}")
    return st.session_state[CONTROLLER_KEY]


def main():
    """Page entry point."""
    st.title("Syllabus AI Analyzer")
    st.markdown(
        "Upload your academic syllabus (PDF). We extract the subject, main topics, "
        "and subtopics, then find relevant YouTube videos."
    )

    try:
        controller = get_controller()
    except ConfigurationError as e:
        st.error(f"❌ Configuration Error: {str(e)}")
        logger.error(f"Configuration error: {e}")
        st.stop()

    view = build_view_model(controller.state, controller.uploader.backend_url)

    with st.container(border=True):
        selection, clicked = render_upload_form(view, controller.select)
        render_notices(view)

    if clicked:
        # Paint the Loading view before the request goes out
        st.session_state[PENDING_KEY] = controller.begin(selection)
        st.rerun()

    display_results(view)
    # A file swap queued during dispatch must not clear an outcome nobody has seen
    controller.mark_displayed()

    if controller.is_loading:
        with st.spinner("Analyzing syllabus..."):
            # No Streamlit calls between pop and dispatch, so a rerun cannot drop the upload
            pending = st.session_state.pop(PENDING_KEY, None)
            if pending is not None:
                controller.dispatch(pending)
        if pending is None:
            logger.warning("Submission was interrupted before it was sent, resetting")
            controller.reset()
        st.rerun()


if __name__ == "__main__":
    main()
