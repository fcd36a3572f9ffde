"""
Syllabus Analyzer Configuration Module.

This module provides a clean API for loading and accessing configuration data.
It handles loading config.yaml from the project root, applies the
SYLLABUS_BACKEND_URL environment override and provides default values
for missing or incomplete configuration.

Usage:
    from config import get_backend_url, get_backend_config
    
    backend_url = get_backend_url()
    timeout = get_backend_config()['timeout_seconds']
"""

import logging
from typing import Dict, Any

from .loader import (
    ConfigurationError,
    load_config,
    get_config_section,
    validate_config,
    validate_backend_url,
)
from .defaults import DEFAULT_CONFIG, DEFAULT_BACKEND_URL, BACKEND_URL_ENV_VAR

logger = logging.getLogger(__name__)

# Load configuration on module import
_config = load_config()

# Validate configuration
if not validate_config(_config):
    logger.warning("Configuration validation failed, uploads may not reach the backend")

# Make configuration available as module-level variable
config = _config


def get_config() -> Dict[str, Any]:
    """
    Get the complete configuration dictionary.
    
    Returns:
        Complete configuration dictionary with defaults applied.
    """
    return config


def get_backend_config() -> Dict[str, Any]:
    """
    Get analysis service configuration section.
    
    Returns:
        Backend configuration dictionary.
    """
    return get_config_section(config, 'backend')


def get_ui_config() -> Dict[str, Any]:
    """Get page presentation configuration section."""
    return get_config_section(config, 'ui')


def get_backend_url() -> str:
    """
    Get the validated backend base URL without a trailing slash.

    Raises:
        ConfigurationError: If the configured URL is not an http(s) URL.
    """
    return validate_backend_url(get_backend_config().get('base_url', DEFAULT_BACKEND_URL))


# Expose commonly used functions and variables
__all__ = [
    'config',
    'ConfigurationError',
    'DEFAULT_CONFIG',
    'DEFAULT_BACKEND_URL',
    'BACKEND_URL_ENV_VAR',
    'get_config',
    'get_backend_config',
    'get_ui_config',
    'get_backend_url',
]
