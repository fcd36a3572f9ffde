"""
Default configuration values for the Syllabus Analyzer client.

This module provides default configuration values that serve as fallbacks
when config.yaml is missing or incomplete.
"""

DEFAULT_BACKEND_URL = "http://localhost:8000"

# Environment variable that overrides backend.base_url at start time
BACKEND_URL_ENV_VAR = "SYLLABUS_BACKEND_URL"

DEFAULT_CONFIG = {
    # Analysis service connection
    "backend": {
        "base_url": DEFAULT_BACKEND_URL,
        "upload_path": "/api/upload",
        "timeout_seconds": 120,
    },

    # Page presentation
    "ui": {
        "page_title": "Syllabus AI Analyzer",
    },
}
