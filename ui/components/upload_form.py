"""Upload form UI components."""
import streamlit as st
from typing import Any, Dict, Optional, Tuple
import logging

from core.upload import SelectedFile, selection_label

logger = logging.getLogger(__name__)

UPLOADER_KEY = "syllabus_file"
PICKER_LABEL = "Choose PDF file `.pdf`"


def current_selection() -> Optional[SelectedFile]:
    """Read the file currently held by the picker widget."""
    return SelectedFile.from_upload(st.session_state.get(UPLOADER_KEY))


def render_upload_form(view: Dict[str, Any], on_select) -> Tuple[Optional[SelectedFile], bool]:
    """
    Render the file picker and the submit button.

    Args:
        view: View model from core.ui.build_view_model
        on_select: Callback invoked with the new selection when the picker changes

    Returns:
        Tuple of (current selection, whether submit was clicked)
    """
    def _on_picker_change():
        on_select(current_selection())

    picker_col, button_col = st.columns([4, 1])

    with picker_col:
        st.file_uploader(
            PICKER_LABEL,
            key=UPLOADER_KEY,
            on_change=_on_picker_change,
            disabled=view['picker_disabled'],
            help="Only .pdf files are accepted"
        )
        selection = current_selection()
        st.caption(selection_label(selection))

    with button_col:
        # Align the button with the picker's drop zone
        st.write("")
        clicked = st.button(
            view['submit_label'],
            disabled=view['submit_disabled'],
            type="primary",
            use_container_width=True
        )

    return selection, clicked


def render_notices(view: Dict[str, Any]):
    """Render the error alert and the missing API key advisory."""
    alert = view.get('alert')
    if alert:
        st.error(alert['message'])

    advisory = view.get('advisory')
    if advisory:
        st.warning(advisory['message'])
