"""
Configuration loader for the Syllabus Analyzer client.

This module handles loading and parsing the config.yaml file with proper
error handling and fallback to default values.
"""

import os
import yaml
import logging
from typing import Dict, Any, Optional
from pathlib import Path
from urllib.parse import urlparse

from .defaults import DEFAULT_CONFIG, BACKEND_URL_ENV_VAR

logger = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """Raised when configuration values cannot be used."""
    pass


def get_config_path() -> Path:
    """Get the path to the config.yaml file in the project root."""
    current_dir = Path(__file__).parent
    project_root = current_dir.parent
    return project_root / "config.yaml"


def load_yaml_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load configuration from YAML file.
    
    Args:
        config_path: Optional path to config file. If None, uses default location.
        
    Returns:
        Dictionary containing configuration data, or empty dict if file not found.
    """
    if config_path is None:
        config_path = get_config_path()
    
    if not config_path.exists():
        logger.warning(f"Config file not found at {config_path}, using defaults")
        return {}
    
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.error(f"Error parsing YAML config file {config_path}: {e}")
        return {}
    except OSError as e:
        logger.error(f"Error reading config file {config_path}: {e}")
        return {}

    if config_data is None:
        logger.warning(f"Config file {config_path} is empty, using defaults")
        return {}
    if not isinstance(config_data, dict):
        logger.error(f"Config file {config_path} must contain a mapping, using defaults")
        return {}
    return config_data


def merge_config(default_config: Dict[str, Any], user_config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Recursively merge user configuration with default configuration.
    
    Args:
        default_config: Default configuration dictionary
        user_config: User configuration dictionary
        
    Returns:
        Merged configuration dictionary
    """
    merged = default_config.copy()
    
    for key, value in user_config.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = value
    
    return merged


def apply_environment_overrides(
    config: Dict[str, Any],
    environ: Optional[Dict[str, str]] = None
) -> Dict[str, Any]:
    """
    Apply environment-level settings on top of the merged configuration.

    Only the backend base URL can be overridden, through SYLLABUS_BACKEND_URL.
    """
    if environ is None:
        environ = os.environ

    backend_url = environ.get(BACKEND_URL_ENV_VAR, '').strip()
    if not backend_url:
        return config

    logger.info(f"Using backend URL from {BACKEND_URL_ENV_VAR}: {backend_url}")
    overrides = {'backend': {'base_url': backend_url}}
    return merge_config(config, overrides)


def load_config(
    config_path: Optional[Path] = None,
    environ: Optional[Dict[str, str]] = None
) -> Dict[str, Any]:
    """
    Load and merge configuration from YAML file with defaults.
    
    Args:
        config_path: Optional path to config file. If None, uses default location.
        environ: Optional environment mapping. If None, uses os.environ.
        
    Returns:
        Complete configuration dictionary with defaults and overrides applied.
    """
    user_config = load_yaml_config(config_path)
    merged = merge_config(DEFAULT_CONFIG, user_config)
    return apply_environment_overrides(merged, environ)


def get_config_section(config: Dict[str, Any], section: str) -> Dict[str, Any]:
    """
    Get a specific configuration section.
    
    Args:
        config: Full configuration dictionary
        section: Section name to retrieve
        
    Returns:
        Configuration section dictionary, or empty dict if not found.
    """
    return config.get(section, {})


def validate_backend_url(url: Any) -> str:
    """
    Check that the backend URL is an absolute http(s) URL.

    Raises:
        ConfigurationError: If the URL cannot be used to reach the service.
    """
    if not isinstance(url, str) or not url.strip():
        raise ConfigurationError("backend.base_url must be a non-empty string")

    parsed = urlparse(url.strip())
    if parsed.scheme not in ('http', 'https') or not parsed.netloc:
        raise ConfigurationError(f"backend.base_url must be an http(s) URL, got {url!r}")

    return url.strip().rstrip('/')


def validate_config(config: Dict[str, Any]) -> bool:
    """
    Validate configuration structure and values.
    
    Args:
        config: Configuration dictionary to validate
        
    Returns:
        True if configuration is valid, False otherwise.
    """
    required_sections = ['backend', 'ui']
    
    for section in required_sections:
        if section not in config:
            logger.error(f"Missing required configuration section: {section}")
            return False
    
    backend = config.get('backend', {})
    try:
        validate_backend_url(backend.get('base_url'))
    except ConfigurationError as e:
        logger.error(str(e))
        return False

    upload_path = backend.get('upload_path')
    if not isinstance(upload_path, str) or not upload_path.startswith('/'):
        logger.error("'upload_path' in backend configuration must start with '/'")
        return False

    timeout = backend.get('timeout_seconds')
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
        logger.error("'timeout_seconds' in backend configuration must be a positive number")
        return False
    
    return True
