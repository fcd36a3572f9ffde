"""
HTTP client for the syllabus analysis service.

Sends the selected PDF as a single multipart part named ``file`` and hands
back the raw response. Interpreting the response is left to
classification.py.
"""

import logging
from dataclasses import dataclass

import requests

from .errors import TransportError

logger = logging.getLogger(__name__)

UPLOAD_FIELD_NAME = 'file'


@dataclass(frozen=True)
class RawResponse:
    """Status code and undecoded body of a received response."""

    status_code: int
    body: bytes = b''

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class SyllabusUploader:
    """Wrapper for the analysis service's upload endpoint"""

    def __init__(self, backend_url, upload_path='/api/upload', timeout=120):
        self.backend_url = backend_url.rstrip('/')
        self.upload_path = upload_path
        self.timeout = timeout  # Seconds before the attempt is reported as failed

    @property
    def endpoint(self):
        return f"{self.backend_url}{self.upload_path}"

    def send(self, filename, content, mime_hint='application/pdf'):
        """
        Upload a file and return the raw response.

        Args:
            filename (str): Name preserved from the user's selection
            content (bytes): Raw file bytes
            mime_hint (str): Content type declared for the file part

        Returns:
            RawResponse: Status code and body of whatever the server answered

        Raises:
            TransportError: If no response was received
        """
        files = {
            UPLOAD_FIELD_NAME: (filename, content, mime_hint)
        }

        logger.info(f"Uploading {filename} ({len(content)} bytes) to {self.endpoint}")
        try:
            response = requests.post(
                self.endpoint,
                files=files,
                timeout=self.timeout
            )
        except requests.Timeout as e:
            logger.warning(f"Upload of {filename} timed out after {self.timeout}s")
            raise TransportError(f"The request timed out after {self.timeout} seconds: {e}") from e
        except requests.RequestException as e:
            logger.warning(f"Upload of {filename} failed before a response arrived: {e}")
            raise TransportError(str(e) or type(e).__name__) from e

        logger.debug(f"Upload of {filename} answered with status {response.status_code}")
        return RawResponse(status_code=response.status_code, body=response.content or b'')
