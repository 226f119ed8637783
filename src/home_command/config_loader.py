"""
Configuration loader with validation.

Builds HomeCommandConfig from environment variables (and a local .env file).
"""
from dotenv import load_dotenv
from .config import HomeCommandConfig
from .config_validator import get_optional_env, validate_log_level, validate_path


def load_config_from_env() -> HomeCommandConfig:
    """
    Load configuration from environment variables with validation.
    
    Usage:
        config = load_config_from_env()
        app = HomeCommandApp(config)
        app.initialize()
    
    :return: Validated HomeCommandConfig instance
    :raises: ConfigurationError if a value is invalid
    """
    # Load .env file if it exists (for local development)
    load_dotenv()
    
    config = HomeCommandConfig(
        registry_path=get_optional_env("HOME_COMMAND_REGISTRY_PATH"),
        log_level=validate_log_level(
            get_optional_env("HOME_COMMAND_LOG_LEVEL", default="WARNING"),
            "HOME_COMMAND_LOG_LEVEL",
        ),
        verbose=get_optional_env("VERBOSE", "false").lower() == "true",
    )
    
    # Validate paths if they're set
    if config.registry_path:
        validate_path(
            config.registry_path,
            "HOME_COMMAND_REGISTRY_PATH",
            must_exist=True
        )
    
    return config
