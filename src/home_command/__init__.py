from .app import HomeCommandApp
from .config import HomeCommandConfig
from .config_loader import load_config_from_env
from .exceptions import (
    CommandParseError,
    ConfigurationError,
    EmptyCommandError,
    HomeCommandError,
    NoTargetsError,
    RegistryLoadError,
    RegistryNotLoadedError,
)
from .interaction import CommandParser
from .models import Area, Entity, Service
from .registry import Registry
from .resolution import Match, MatchResult, MatchType, RegistryMatcher
from .schemas import ParsedCommand, ParsedTarget, ServiceCall, ServiceTarget
from .service_call import to_service_call

__all__ = [
    "HomeCommandApp",
    "HomeCommandConfig",
    "load_config_from_env",
    "CommandParseError",
    "ConfigurationError",
    "EmptyCommandError",
    "HomeCommandError",
    "NoTargetsError",
    "RegistryLoadError",
    "RegistryNotLoadedError",
    "CommandParser",
    "Area",
    "Entity",
    "Service",
    "Registry",
    "Match",
    "MatchResult",
    "MatchType",
    "RegistryMatcher",
    "ParsedCommand",
    "ParsedTarget",
    "ServiceCall",
    "ServiceTarget",
    "to_service_call",
]
