"""
UI Package for the Syllabus Analyzer

This package provides the Streamlit components that draw the upload form
and the analysis result panels. Display decisions are made in core.ui;
these components only render the view model they are given.
"""

# Import all key UI components to provide a clean public API
from .components import (
    current_selection,
    render_upload_form,
    render_notices,
    display_results
)

# Import submodules for direct access
from . import components

__all__ = [
    'components',
    'current_selection',
    'render_upload_form',
    'render_notices',
    'display_results'
]
