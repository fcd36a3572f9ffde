"""
Response classification functions.
All functions are pure - they turn a received response into a result or an error.
"""

import json
import logging
from typing import Any, Dict

from .client import RawResponse
from .errors import MalformedResponseError, ServerError
from .models import AnalysisResult, parse_analysis_result

logger = logging.getLogger(__name__)


def decode_json_body(body: bytes) -> Any:
    """
    Decode a response body as JSON.

    Raises:
        ValueError: If the body is empty, not valid JSON or nested too deeply
    """
    if not body:
        raise ValueError("Response body is empty")
    try:
        return json.loads(body.decode('utf-8'))
    except RecursionError as e:
        raise ValueError("Response body is nested too deeply to decode") from e


def parse_error_payload(body: bytes) -> Dict[str, Any]:
    """
    Decode an error response body, tolerating absent or unparseable content.

    Returns:
        The decoded JSON object, or an empty dict
    """
    try:
        payload = decode_json_body(body)
    except ValueError:
        return {}
    return payload if isinstance(payload, dict) else {}


def error_message_for(status_code: int, payload: Dict[str, Any]) -> str:
    """Prefer the service's detail field, else a status-coded message."""
    detail = payload.get('detail')
    if isinstance(detail, str) and detail:
        return detail
    return f"Upload failed ({status_code})"


def classify_response(raw: RawResponse) -> AnalysisResult:
    """
    Classify a received response.

    Args:
        raw: Response returned by the uploader
    
    Returns:
        Parsed analysis result for a success status

    Raises:
        ServerError: For a non-success status
        MalformedResponseError: For a success status with a body that is not an analysis result
    """
    if not raw.ok:
        message = error_message_for(raw.status_code, parse_error_payload(raw.body))
        logger.warning(f"Analysis service returned {raw.status_code}: {message}")
        raise ServerError(message, status_code=raw.status_code)

    try:
        payload = decode_json_body(raw.body)
    except ValueError as e:
        # UnicodeDecodeError and JSONDecodeError are both ValueErrors
        raise MalformedResponseError(
            f"Response body is not valid JSON: {e}", status_code=raw.status_code
        ) from e

    return parse_analysis_result(payload)
