"""
Read-only registry view over entities, areas and services.

The snapshot is supplied by the cache layer and never mutated here.
"""
from typing import Dict, Iterable, List, Optional, Tuple

from .models import Area, Entity, Service


class Registry:
    """
    Immutable snapshot of entities, areas and services.

    Iteration order is insertion order, which makes matching deterministic.
    """

    def __init__(
        self,
        entities: Iterable[Entity] = (),
        areas: Iterable[Area] = (),
        services: Iterable[Service] = (),
    ):
        self._entities: Tuple[Entity, ...] = tuple(entities)
        self._areas: Tuple[Area, ...] = tuple(areas)
        self._services: Tuple[Service, ...] = tuple(services)

        self._entity_map: Dict[str, Entity] = {e.entity_id: e for e in self._entities}
        self._area_map: Dict[str, Area] = {a.area_id: a for a in self._areas}

        self._domain_services: Dict[str, List[str]] = {}
        for service in self._services:
            self._domain_services.setdefault(service.domain, []).append(service.service)

    def entities(self) -> Tuple[Entity, ...]:
        return self._entities

    def areas(self) -> Tuple[Area, ...]:
        return self._areas

    def services(self) -> Tuple[Service, ...]:
        return self._services

    def get_entity(self, entity_id: str) -> Optional[Entity]:
        return self._entity_map.get(entity_id)

    def get_area(self, area_id: str) -> Optional[Area]:
        return self._area_map.get(area_id)

    def services_for_domain(self, domain: str) -> List[str]:
        return list(self._domain_services.get(domain, []))

    def entities_in_domain(self, domain: str) -> List[Entity]:
        return [e for e in self._entities if e.domain == domain]

    def entities_in_area(self, area_id: str) -> List[Entity]:
        return [e for e in self._entities if e.area_id == area_id]

    def domains(self) -> List[str]:
        """Sorted distinct domains of all entities."""
        return sorted({e.domain for e in self._entities})

    def has_entities(self) -> bool:
        return bool(self._entities)

    def __repr__(self) -> str:
        return (
            f"Registry(entities={len(self._entities)}, "
            f"areas={len(self._areas)}, services={len(self._services)})"
        )
