"""
Selection validation functions.
All functions are pure - no side effects, return validation results.
"""

from typing import Dict, Any, Optional
import logging

from .errors import UploadValidationError
from .selection import SelectedFile, PDF_EXTENSION

logger = logging.getLogger(__name__)

MISSING_FILE_MESSAGE = "Please choose a PDF syllabus to upload."
NOT_PDF_MESSAGE = "Only PDF files are supported for now."


def validate_selection(selection: Optional[SelectedFile]) -> Dict[str, Any]:
    """
    Validate the selected file before any network call is made.
    Pure function - returns validation result without side effects.

    Rules are applied in order and the first failing rule wins:
    a missing selection, then a name that does not end in .pdf
    (case-insensitive).
    
    Args:
        selection: Currently selected file, or None
    
    Returns:
        Dictionary with validation results
    """
    validation_result = {
        'is_valid': True,
        'errors': []
    }

    if selection is None:
        validation_result['is_valid'] = False
        validation_result['errors'].append(MISSING_FILE_MESSAGE)
        return validation_result

    if not selection.name.lower().endswith(PDF_EXTENSION):
        validation_result['is_valid'] = False
        validation_result['errors'].append(NOT_PDF_MESSAGE)

    return validation_result


def ensure_valid_selection(selection: Optional[SelectedFile]) -> SelectedFile:
    """
    Return the selection if it passes validation.

    Raises:
        UploadValidationError: With the reason of the first failing rule
    """
    validation_result = validate_selection(selection)
    if not validation_result['is_valid']:
        reason = validation_result['errors'][0]
        logger.debug(f"Selection rejected: {reason}")
        raise UploadValidationError(reason)
    return selection
