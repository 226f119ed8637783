from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class Entity:
    entity_id: str
    domain: str
    object_id: str
    state: str
    friendly_name: Optional[str] = None
    area_id: Optional[str] = None
    search_names: List[str] = field(default_factory=list)

    @classmethod
    def from_state(cls, state: Dict[str, Any]) -> "Entity":
        """Build an entity from a Home Assistant state object."""
        entity_id = state["entity_id"]
        parts = entity_id.split(".")
        if len(parts) == 2:
            domain, object_id = parts
        else:
            domain, object_id = "", entity_id

        attributes = state.get("attributes") or {}
        friendly_name = _optional_str(attributes.get("friendly_name"))
        area_id = _optional_str(attributes.get("area_id"))

        search_names = [entity_id, object_id]
        if friendly_name:
            search_names.append(friendly_name)
            search_names.append(friendly_name.lower())
            search_names.append(friendly_name.lower().replace(" ", "_"))

        return cls(
            entity_id=entity_id,
            domain=domain,
            object_id=object_id,
            state=str(state.get("state", "")),
            friendly_name=friendly_name,
            area_id=area_id,
            search_names=search_names,
        )

    @property
    def display_name(self) -> str:
        return self.friendly_name or self.entity_id


@dataclass(frozen=True)
class Area:
    area_id: str
    name: str
    aliases: List[str] = field(default_factory=list)
    search_names: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, area: Dict[str, Any]) -> "Area":
        """Build an area from an area registry entry."""
        area_id = area["area_id"]
        name = area.get("name") or area_id
        aliases = [alias for alias in area.get("aliases") or [] if alias]

        search_names = [
            area_id,
            name,
            name.lower(),
            name.lower().replace(" ", "_"),
        ]
        for alias in aliases:
            search_names.append(alias)
            search_names.append(alias.lower())

        return cls(
            area_id=area_id,
            name=name,
            aliases=aliases,
            search_names=search_names,
        )


@dataclass(frozen=True)
class Service:
    domain: str
    service: str
    full_name: str
    description: str = ""

    @classmethod
    def create(cls, domain: str, service: str, description: str = "") -> "Service":
        return cls(
            domain=domain,
            service=service,
            full_name=f"{domain}.{service}",
            description=description,
        )

    @classmethod
    def from_domain_payload(cls, payload: Dict[str, Any]) -> List["Service"]:
        """
        Expand one ``/api/services`` entry into services.

        :param payload: ``{"domain": "light", "services": {"turn_on": {...}}}``
        :return: One Service per service name, in payload order
        """
        domain = payload["domain"]
        services = payload.get("services") or {}
        return [
            cls.create(domain, name, (details or {}).get("description") or "")
            for name, details in services.items()
        ]


def _optional_str(value: Any) -> Optional[str]:
    if isinstance(value, str) and value:
        return value
    return None
