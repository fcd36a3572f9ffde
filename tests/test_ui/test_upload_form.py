"""
Upload form tests.
Tests the widgets the form asks Streamlit to draw.
"""

import pytest
from unittest.mock import MagicMock, patch

from core.ui import build_view_model
from core.upload import Idle, Loading
from ui.components.upload_form import PICKER_LABEL, UPLOADER_KEY, render_upload_form


@pytest.fixture
def mock_st():
    """Streamlit module double with an empty session state."""
    with patch('ui.components.upload_form.st') as st_double:
        st_double.session_state = {}
        st_double.columns.return_value = (MagicMock(), MagicMock())
        st_double.button.return_value = False
        yield st_double


@pytest.fixture
def on_select():
    return MagicMock(name="on_select")


class TestRenderUploadForm:
    """Test the picker and the submit button."""

    def test_picker_carries_pdf_hint(self, mock_st, on_select):
        render_upload_form(build_view_model(Idle(), "http://localhost:8000"), on_select)

        label = mock_st.file_uploader.call_args.args[0]
        assert label == PICKER_LABEL
        assert ".pdf" in label
        assert mock_st.file_uploader.call_args.kwargs['key'] == UPLOADER_KEY

    def test_no_selection_label(self, mock_st, on_select):
        selection, clicked = render_upload_form(
            build_view_model(Idle(), "http://localhost:8000"), on_select
        )

        assert selection is None
        assert clicked is False
        mock_st.caption.assert_called_once_with("No file selected")

    def test_loading_disables_button_not_picker(self, mock_st, on_select):
        render_upload_form(build_view_model(Loading(ticket=1), "http://localhost:8000"), on_select)

        assert mock_st.file_uploader.call_args.kwargs['disabled'] is False
        mock_st.button.assert_called_once()
        assert mock_st.button.call_args.args[0] == "Analyzing…"
        assert mock_st.button.call_args.kwargs['disabled'] is True
