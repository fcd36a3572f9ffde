"""
Submission controller: the single writer of the upload flow's state.

A submission is split in two steps so that the page can paint the Loading
view between them:

    pending = controller.begin(selection)   # validate, move to Loading
    controller.dispatch(pending)            # network exchange, settle

Each begin() issues a new ticket. A completion settles the state only when
its ticket is still the latest one issued; older completions are dropped.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from .classification import classify_response
from .client import SyllabusUploader
from .errors import MalformedResponseError, UploadError
from .selection import SelectedFile
from .state import Error, Idle, Loading, SubmissionState, Success, describe_state
from .validation import ensure_valid_selection

logger = logging.getLogger(__name__)

MALFORMED_RESPONSE_MESSAGE = "Received an unexpected response from the server."


@dataclass(frozen=True)
class PendingUpload:
    """A validated submission waiting to be sent."""

    ticket: int
    filename: str
    content: bytes
    mime_hint: str


class SubmissionController:
    """Owns the SubmissionState and drives it through the upload lifecycle."""

    def __init__(
        self,
        uploader: SyllabusUploader,
        on_change: Optional[Callable[[SubmissionState], None]] = None
    ):
        self.uploader = uploader
        self.on_change = on_change
        self._state: SubmissionState = Idle()
        self._latest_ticket = 0
        # False while an Error or Success has not been drawn by the page yet
        self._outcome_displayed = True

    @property
    def state(self) -> SubmissionState:
        return self._state

    @property
    def latest_ticket(self) -> int:
        return self._latest_ticket

    @property
    def is_loading(self) -> bool:
        return isinstance(self._state, Loading)

    def _transition(self, new_state: SubmissionState) -> None:
        logger.debug(f"{describe_state(self._state)} -> {describe_state(new_state)}")
        self._state = new_state
        self._outcome_displayed = not isinstance(new_state, (Error, Success))
        if self.on_change is not None:
            self.on_change(new_state)

    def select(self, selection: Optional[SelectedFile]) -> None:
        """
        React to a new file selection.

        Clears a displayed error or result. An in-flight submission keeps
        running and stays visible as Loading, and an outcome that settled
        after the selection changed but before the page drew it is kept.
        """
        if isinstance(self._state, (Error, Success)):
            if self._outcome_displayed:
                self._transition(Idle())
            else:
                logger.debug(f"Keeping undisplayed {describe_state(self._state)} after selection change")
        if selection is not None:
            logger.debug(f"Selected {selection.name} ({selection.mime_hint})")

    def mark_displayed(self) -> None:
        """Record that the page has drawn the current state."""
        self._outcome_displayed = True

    def reset(self) -> None:
        """Return to Idle and invalidate any in-flight submission."""
        self._latest_ticket += 1
        self._transition(Idle())

    def begin(self, selection: Optional[SelectedFile]) -> Optional[PendingUpload]:
        """
        Start a submission attempt.

        Args:
            selection: Current file selection, or None

        Returns:
            PendingUpload to pass to dispatch(), or None if validation failed
        """
        if isinstance(self._state, (Error, Success)):
            self._transition(Idle())

        try:
            selection = ensure_valid_selection(selection)
        except UploadError as e:
            # A failed attempt also supersedes anything still in flight
            self._latest_ticket += 1
            self._transition(Error(e.message))
            return None

        self._latest_ticket += 1
        ticket = self._latest_ticket
        self._transition(Loading(ticket))
        return PendingUpload(
            ticket=ticket,
            filename=selection.name,
            content=selection.content,
            mime_hint=selection.mime_hint
        )

    def dispatch(self, pending: PendingUpload) -> SubmissionState:
        """
        Send a pending submission and settle the state with its outcome.

        Returns:
            The current state after the completion was applied or discarded
        """
        try:
            raw = self.uploader.send(pending.filename, pending.content, pending.mime_hint)
            outcome: SubmissionState = Success(classify_response(raw))
        except MalformedResponseError as e:
            logger.error(f"Malformed analysis response for {pending.filename}: {e.message}")
            outcome = Error(MALFORMED_RESPONSE_MESSAGE)
        except UploadError as e:
            outcome = Error(e.message)

        if pending.ticket != self._latest_ticket:
            logger.debug(
                f"Discarding completion of ticket {pending.ticket}; "
                f"latest is {self._latest_ticket}"
            )
            return self._state

        self._transition(outcome)
        return self._state

    def submit(self, selection: Optional[SelectedFile]) -> SubmissionState:
        """Validate, send and settle in one call."""
        pending = self.begin(selection)
        if pending is None:
            return self._state
        return self.dispatch(pending)
