"""
Configuration validation utilities.

Environment lookups with placeholder detection and path/level checks.
"""
import os
import warnings
from typing import Optional
from .exceptions import ConfigurationError


VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_optional_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """
    Get optional environment variable.
    
    :param key: Environment variable name
    :param default: Default value if not set
    :return: Environment variable value or default
    """
    value = os.getenv(key, default)
    
    if value and _is_placeholder(value):
        # Warn but don't fail for optional configs
        warnings.warn(
            f"{key} appears to be a placeholder. Using default or None.",
            UserWarning
        )
        return default
    
    return value


def validate_path(path: str, path_name: str, must_exist: bool = False) -> str:
    """
    Validate file/directory path.
    
    :param path: Path to validate
    :param path_name: Name of the path (for error messages)
    :param must_exist: Whether path must exist
    :return: Validated path
    :raises: ConfigurationError if invalid
    """
    if not path:
        raise ConfigurationError(f"{path_name} is required.")
    
    if must_exist and not os.path.exists(path):
        raise ConfigurationError(
            f"{path_name} does not exist: {path}\n"
            f"Please check the path and ensure the registry snapshot exists."
        )
    
    return path


def validate_log_level(level: str, level_name: str) -> str:
    """
    Validate a logging level name.
    
    :param level: Level name, any case (e.g. "debug")
    :param level_name: Name of the setting (for error messages)
    :return: Upper-cased level name understood by ``logging``
    :raises: ConfigurationError if the level is unknown
    """
    normalized = (level or "").strip().upper()
    
    if normalized not in VALID_LOG_LEVELS:
        raise ConfigurationError(
            f"{level_name} must be one of {', '.join(VALID_LOG_LEVELS)}, "
            f"got '{level}'."
        )
    
    return normalized


def _is_placeholder(value: str) -> bool:
    """Check if value is a placeholder."""
    if not value:
        return False
    
    placeholder_patterns = [
        "your_",
        "placeholder",
        "xxx",
        "replace",
        "TODO",
    ]
    
    value_lower = value.lower()
    return any(pattern.lower() in value_lower for pattern in placeholder_patterns)
