from dataclasses import dataclass
from typing import Optional


@dataclass
class HomeCommandConfig:
    # Registry snapshot
    registry_path: Optional[str] = None

    # Logging
    log_level: str = "WARNING"
    verbose: bool = False
