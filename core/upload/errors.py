"""Error taxonomy for the syllabus upload flow."""
from typing import Optional


class UploadError(Exception):
    """Base class for failures that end a submission attempt."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UploadValidationError(UploadError):
    """Raised when the selected file is missing or not a PDF."""
    pass


class TransportError(UploadError):
    """Raised when the request could not be sent or no response arrived."""
    pass


class ServerError(UploadError):
    """Raised when the analysis service answered with a non-success status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class MalformedResponseError(ServerError):
    """Raised when a success response body is not a valid analysis result."""
    pass
