"""
Syllabus upload flow: selection validation, the wire exchange with the
analysis service, response classification and the submission state machine.
"""

from .errors import (
    UploadError,
    UploadValidationError,
    TransportError,
    ServerError,
    MalformedResponseError
)

from .selection import SelectedFile, selection_label

from .validation import (
    validate_selection,
    ensure_valid_selection,
    MISSING_FILE_MESSAGE,
    NOT_PDF_MESSAGE
)

from .models import (
    AnalysisResult,
    Topic,
    Video,
    VideoGroup,
    parse_analysis_result
)

from .client import RawResponse, SyllabusUploader

from .classification import classify_response, parse_error_payload

from .state import Idle, Loading, Error, Success, SubmissionState

from .controller import (
    SubmissionController,
    PendingUpload,
    MALFORMED_RESPONSE_MESSAGE
)

__all__ = [
    'UploadError',
    'UploadValidationError',
    'TransportError',
    'ServerError',
    'MalformedResponseError',
    'SelectedFile',
    'selection_label',
    'validate_selection',
    'ensure_valid_selection',
    'MISSING_FILE_MESSAGE',
    'NOT_PDF_MESSAGE',
    'AnalysisResult',
    'Topic',
    'Video',
    'VideoGroup',
    'parse_analysis_result',
    'RawResponse',
    'SyllabusUploader',
    'classify_response',
    'parse_error_payload',
    'Idle',
    'Loading',
    'Error',
    'Success',
    'SubmissionState',
    'SubmissionController',
    'PendingUpload',
    'MALFORMED_RESPONSE_MESSAGE'
]
