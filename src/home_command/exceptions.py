class HomeCommandError(Exception):
    """Base exception for home command resolution."""


class CommandParseError(HomeCommandError):
    """Raised when text cannot be turned into a command."""


class EmptyCommandError(CommandParseError):
    """Raised when the input carries no meaningful command."""


class NoTargetsError(HomeCommandError):
    """Raised when a service call is built from a command without targets."""


class ConfigurationError(HomeCommandError):
    """Raised when configuration is missing or invalid."""


class RegistryLoadError(HomeCommandError):
    """Raised when a registry snapshot cannot be read."""


class RegistryNotLoadedError(HomeCommandError):
    """Raised when the app is used before its registry is loaded."""
