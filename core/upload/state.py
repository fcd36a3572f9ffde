"""
Submission state variants.

Exactly one variant is active at any time. Instances are immutable; the
controller replaces the whole value on every transition.
"""

from dataclasses import dataclass
from typing import Union

from .models import AnalysisResult


@dataclass(frozen=True)
class Idle:
    """Nothing submitted, or the last outcome was cleared."""


@dataclass(frozen=True)
class Loading:
    """A submission is in flight."""

    ticket: int


@dataclass(frozen=True)
class Error:
    """The last attempt failed; message is shown to the user."""

    message: str


@dataclass(frozen=True)
class Success:
    """The last attempt returned an analysis result."""

    result: AnalysisResult


SubmissionState = Union[Idle, Loading, Error, Success]


def describe_state(state: SubmissionState) -> str:
    """Short label used in log messages."""
    if isinstance(state, Loading):
        return f"Loading(ticket={state.ticket})"
    if isinstance(state, Error):
        return f"Error({state.message!r})"
    if isinstance(state, Success):
        return f"Success({state.result.filename!r})"
    return "Idle"
