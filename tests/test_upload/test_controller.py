"""
Submission controller tests.
Tests state transitions, error recovery and ordering of overlapping submissions.
"""

import json

import pytest
from unittest.mock import Mock

from core.upload import (
    SelectedFile,
    SubmissionController,
    SyllabusUploader,
    RawResponse,
    TransportError,
    Idle,
    Loading,
    Error,
    Success,
    MALFORMED_RESPONSE_MESSAGE
)


BIOLOGY_PAYLOAD = {
    "subject": "Biology",
    "filename": "a.pdf",
    "topics": [{"main_topic": "Cells", "subtopics": []}],
    "youtube_results": []
}


def _response(status_code, payload=None):
    body = json.dumps(payload).encode('utf-8') if payload is not None else b''
    return RawResponse(status_code=status_code, body=body)


@pytest.fixture
def uploader():
    """Uploader double whose send() is configured per test."""
    return Mock(spec=SyllabusUploader)


@pytest.fixture
def states():
    """Records every state the controller transitions to."""
    return []


@pytest.fixture
def controller(uploader, states):
    return SubmissionController(uploader, on_change=states.append)


@pytest.fixture
def pdf():
    return SelectedFile(name="a.pdf", content=b"%PDF-1.4")


class TestValidationPath:
    """Test submissions that never reach the network."""

    def test_initial_state_is_idle(self, controller):
        assert controller.state == Idle()

    def test_missing_file(self, controller, uploader, states):
        state = controller.submit(None)

        assert state == Error("Please choose a PDF syllabus to upload.")
        uploader.send.assert_not_called()
        assert not any(isinstance(s, Loading) for s in states)

    def test_wrong_extension(self, controller, uploader):
        state = controller.submit(SelectedFile(name="report.docx", content=b"x"))

        assert state == Error("Only PDF files are supported for now.")
        uploader.send.assert_not_called()

    def test_begin_returns_none_when_invalid(self, controller):
        assert controller.begin(None) is None


class TestNetworkOutcomes:
    """Test classification of outcomes into states."""

    def test_success(self, controller, uploader, pdf, states):
        uploader.send.return_value = _response(200, BIOLOGY_PAYLOAD)

        state = controller.submit(pdf)

        assert isinstance(state, Success)
        assert state.result.subject == "Biology"
        assert isinstance(states[0], Loading)
        uploader.send.assert_called_once_with("a.pdf", b"%PDF-1.4", "application/pdf")

    def test_server_detail(self, controller, uploader, pdf):
        uploader.send.return_value = _response(413, {"detail": "too large"})

        assert controller.submit(pdf) == Error("too large")

    def test_server_without_body(self, controller, uploader, pdf):
        uploader.send.return_value = _response(500)

        assert controller.submit(pdf) == Error("Upload failed (500)")

    def test_transport_failure(self, controller, uploader, pdf):
        uploader.send.side_effect = TransportError("Connection refused")

        assert controller.submit(pdf) == Error("Connection refused")

    def test_malformed_success_body(self, controller, uploader, pdf):
        uploader.send.return_value = RawResponse(status_code=200, body=b"<html></html>")

        assert controller.submit(pdf) == Error(MALFORMED_RESPONSE_MESSAGE)

    def test_deeply_nested_body_settles_as_error(self, controller, uploader, pdf):
        uploader.send.return_value = RawResponse(status_code=200, body=b"[" * 200000)

        assert controller.submit(pdf) == Error(MALFORMED_RESPONSE_MESSAGE)
        assert controller.is_loading is False

    def test_unexpected_exceptions_propagate(self, controller, uploader, pdf):
        uploader.send.side_effect = RuntimeError("bug")

        with pytest.raises(RuntimeError):
            controller.submit(pdf)


class TestTransitions:
    """Test lifecycle rules between attempts."""

    def test_loading_precedes_outcome(self, controller, uploader, pdf, states):
        uploader.send.return_value = _response(500)

        controller.submit(pdf)

        assert [type(s) for s in states] == [Loading, Error]

    def test_resubmit_clears_previous_result_before_loading(self, controller, uploader, pdf, states):
        """A stale result is never shown together with the new Loading state."""
        uploader.send.return_value = _response(200, BIOLOGY_PAYLOAD)
        controller.submit(pdf)
        states.clear()

        controller.begin(pdf)

        assert states == [Idle(), Loading(controller.latest_ticket)]

    def test_resubmit_after_error(self, controller, uploader, pdf):
        controller.submit(None)
        uploader.send.return_value = _response(200, BIOLOGY_PAYLOAD)

        assert isinstance(controller.submit(pdf), Success)

    def test_select_clears_displayed_result(self, controller, uploader, pdf):
        uploader.send.return_value = _response(200, BIOLOGY_PAYLOAD)
        controller.submit(pdf)
        controller.mark_displayed()

        controller.select(SelectedFile(name="b.pdf"))

        assert controller.state == Idle()

    def test_select_keeps_loading(self, controller, pdf):
        pending = controller.begin(pdf)

        controller.select(SelectedFile(name="b.pdf"))

        assert controller.state == Loading(pending.ticket)

    def test_selection_during_loading_keeps_late_outcome(self, controller, uploader, pdf):
        """A swap made while the request runs is handled after it settles."""
        pending = controller.begin(pdf)
        controller.select(SelectedFile(name="b.pdf"))
        uploader.send.return_value = _response(200, BIOLOGY_PAYLOAD)
        controller.dispatch(pending)

        # The picker callback is only delivered once the dispatching run ends
        controller.select(SelectedFile(name="b.pdf"))

        assert isinstance(controller.state, Success)
        assert controller.state.result.subject == "Biology"

    def test_late_error_survives_selection_until_displayed(self, controller, uploader, pdf):
        pending = controller.begin(pdf)
        uploader.send.return_value = _response(500)
        controller.dispatch(pending)

        controller.select(SelectedFile(name="b.pdf"))
        assert controller.state == Error("Upload failed (500)")

        controller.mark_displayed()
        controller.select(SelectedFile(name="c.pdf"))
        assert controller.state == Idle()

    def test_reset_discards_in_flight(self, controller, uploader, pdf):
        pending = controller.begin(pdf)
        controller.reset()
        uploader.send.return_value = _response(200, BIOLOGY_PAYLOAD)

        assert controller.dispatch(pending) == Idle()

    def test_tickets_increase(self, controller, pdf):
        first = controller.begin(pdf)
        second = controller.begin(pdf)

        assert second.ticket > first.ticket


class TestOverlappingSubmissions:
    """Test that the latest submission always wins."""

    def test_late_completion_of_older_submit_is_discarded(self, controller, uploader):
        """A is issued, B is issued before A responds, A responds after B."""
        file_a = SelectedFile(name="a.pdf", content=b"A")
        file_b = SelectedFile(name="b.pdf", content=b"B")

        def send(filename, content, mime_hint):
            if filename == "a.pdf":
                # B is submitted and settles while A is still waiting
                controller.submit(file_b)
                return _response(200, {"subject": "From A", "filename": "a.pdf"})
            return _response(200, {"subject": "From B", "filename": "b.pdf"})

        uploader.send.side_effect = send

        final_state = controller.submit(file_a)

        assert isinstance(final_state, Success)
        assert final_state.result.subject == "From B"
        assert controller.state.result.filename == "b.pdf"

    def test_late_failure_does_not_overwrite_newer_success(self, controller, uploader, pdf):
        pending_a = controller.begin(pdf)
        pending_b = controller.begin(pdf)

        uploader.send.return_value = _response(200, BIOLOGY_PAYLOAD)
        controller.dispatch(pending_b)
        uploader.send.return_value = _response(500)
        controller.dispatch(pending_a)

        assert isinstance(controller.state, Success)

    def test_late_completion_does_not_overwrite_validation_error(self, controller, uploader, pdf):
        pending = controller.begin(pdf)
        controller.begin(None)
        uploader.send.return_value = _response(200, BIOLOGY_PAYLOAD)

        controller.dispatch(pending)

        assert controller.state == Error("Please choose a PDF syllabus to upload.")
