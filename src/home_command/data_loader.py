import json
import logging
from typing import Any, Dict, List

from .exceptions import RegistryLoadError
from .models import Area, Entity, Service
from .registry import Registry

logger = logging.getLogger(__name__)


class RegistryLoader:
    """
    Loads a registry snapshot written by the cache layer.

    The snapshot is a JSON object with optional ``states``, ``areas`` and
    ``services`` lists shaped like the Home Assistant REST/WebSocket payloads.
    """
    def __init__(self, snapshot_path: str):
        self.snapshot_path = snapshot_path

    def load_registry(self) -> Registry:
        try:
            with open(self.snapshot_path, encoding="utf-8") as f:
                snapshot = json.load(f)
        except (OSError, ValueError) as exc:
            raise RegistryLoadError(
                f"Could not read registry snapshot {self.snapshot_path}: {exc}"
            ) from exc

        return self.from_snapshot(snapshot)

    @classmethod
    def from_snapshot(cls, snapshot: Dict[str, Any]) -> Registry:
        if not isinstance(snapshot, dict):
            raise RegistryLoadError("Registry snapshot must be a JSON object")

        try:
            entities = [Entity.from_state(s) for s in cls._section(snapshot, "states")]
            areas = [Area.from_dict(a) for a in cls._section(snapshot, "areas")]
            services: List[Service] = []
            for payload in cls._section(snapshot, "services"):
                services.extend(Service.from_domain_payload(payload))
        except (KeyError, TypeError, AttributeError) as exc:
            raise RegistryLoadError(f"Malformed registry snapshot: {exc}") from exc

        registry = Registry(entities=entities, areas=areas, services=services)
        if not registry.has_entities():
            logger.warning("Registry snapshot contains no entities")
        logger.debug(f"Loaded {registry!r}")
        return registry

    @staticmethod
    def _section(snapshot: Dict[str, Any], key: str) -> List[Any]:
        value = snapshot.get(key)
        if value is None:
            return []
        if not isinstance(value, list):
            raise RegistryLoadError(f"Registry snapshot section '{key}' must be a list")
        return value
