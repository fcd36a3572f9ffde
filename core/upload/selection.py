"""
Selected file reference built from the Streamlit file picker.
"""

import mimetypes
from dataclasses import dataclass
from pathlib import PurePath
from typing import Any, Optional

PDF_EXTENSION = '.pdf'
PDF_MIME_TYPE = 'application/pdf'
FALLBACK_MIME_TYPE = 'application/octet-stream'


@dataclass(frozen=True)
class SelectedFile:
    """A user-chosen file: its name and raw bytes."""

    name: str
    content: bytes = b''

    @property
    def extension(self) -> str:
        return PurePath(self.name).suffix.lower()

    @property
    def mime_hint(self) -> str:
        """MIME type derived from the file extension."""
        if self.extension == PDF_EXTENSION:
            return PDF_MIME_TYPE
        guessed, _ = mimetypes.guess_type(self.name)
        return guessed or FALLBACK_MIME_TYPE

    @classmethod
    def from_upload(cls, uploaded_file: Any) -> Optional['SelectedFile']:
        """
        Build a selection from a Streamlit UploadedFile.

        Args:
            uploaded_file: Object returned by st.file_uploader, or None

        Returns:
            SelectedFile, or None when nothing is selected
        """
        if uploaded_file is None:
            return None
        return cls(name=uploaded_file.name, content=uploaded_file.getvalue())


def selection_label(selection: Optional[SelectedFile]) -> str:
    """Text shown next to the picker for the current selection."""
    return selection.name if selection else 'No file selected'
