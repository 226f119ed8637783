"""
Public application facade for home command resolution.

This is the single stable entry point for the library: load a registry
snapshot, parse text, build the service call.
"""
import logging
from typing import Optional

from .config import HomeCommandConfig
from .data_loader import RegistryLoader
from .exceptions import RegistryNotLoadedError
from .interaction import CommandParser
from .registry import Registry
from .schemas import ParsedCommand, ServiceCall
from .service_call import to_service_call

logger = logging.getLogger(__name__)


class HomeCommandApp:
    """
    Public application facade.
    
    Usage:
        config = load_config_from_env()
        app = HomeCommandApp(config)
        app.initialize()
        call = app.resolve("dim kitchen lights to 50%")
    """
    
    def __init__(self, config: HomeCommandConfig, registry: Optional[Registry] = None):
        """
        :param config: HomeCommandConfig instance
        :param registry: Pre-built registry; when omitted it is loaded from config.registry_path
        """
        self._config = config
        self._registry = registry
        self._parser = CommandParser()
    
    def initialize(self) -> None:
        """
        Configure logging (verbose mode only) and load the registry snapshot.
        
        Call this once before parse() or resolve() unless a registry was passed in.
        """
        if self._config.verbose:
            logging.basicConfig(level=self._config.log_level)
        
        if self._registry is None and self._config.registry_path:
            self._registry = RegistryLoader(self._config.registry_path).load_registry()
        
        logger.info(f"Home command app ready: {self._registry!r}")
    
    @property
    def registry(self) -> Registry:
        if self._registry is None:
            raise RegistryNotLoadedError(
                "Registry is not loaded. Call initialize() with a registry_path set."
            )
        return self._registry
    
    def parse(self, text: str) -> ParsedCommand:
        """Parse text into a command without building a service call."""
        return self._parser.parse(text, self.registry)
    
    def resolve(self, text: str) -> ServiceCall:
        """
        Parse text and build its service call.
        
        :raises: EmptyCommandError for empty input, NoTargetsError when nothing matched
        """
        return to_service_call(self.parse(text))
    
    def dry_run(self, text: str) -> str:
        """JSON of the parsed command, for display without executing anything."""
        return self.parse(text).to_json()
