from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, model_serializer


class ParsedTarget(BaseModel):
    """A matched target entity and how it was found."""
    entity_id: str
    friendly_name: Optional[str] = None
    match_type: str = Field(description="Match kind, e.g. 'Exact', 'Typo(distance=1)', 'domain_match'")
    matched_input: str = Field(description="What the user typed that matched this target")

    @property
    def display_name(self) -> str:
        return self.friendly_name or self.entity_id


class ParsedCommand(BaseModel):
    """A natural-language command resolved against the registry."""
    original: str
    action: Optional[str] = None
    targets: List[ParsedTarget] = Field(default_factory=list)
    parameters: Dict[str, Any] = Field(default_factory=dict)
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    interpretation: str = ""
    notes: List[str] = Field(default_factory=list)
    matched_area: Optional[str] = None

    def to_service_call(self) -> "ServiceCall":
        """Build the service call for this command (see service_call.to_service_call)."""
        from .service_call import to_service_call
        return to_service_call(self)

    def to_json(self) -> str:
        return self.model_dump_json()

    @classmethod
    def from_json(cls, data: str) -> "ParsedCommand":
        return cls.model_validate_json(data)


class ServiceTarget(BaseModel):
    entity_id: List[str] = Field(default_factory=list)
    # Not filled by the builder; the transport scopes by entity ids only
    area_id: Optional[List[str]] = None

    @model_serializer(mode="wrap")
    def _skip_missing_area(self, handler):
        data = handler(self)
        if data.get("area_id") is None:
            data.pop("area_id", None)
        return data


class ServiceCall(BaseModel):
    """A single service invocation handed to the transport."""
    domain: str
    service: str
    target: ServiceTarget = Field(default_factory=ServiceTarget)
    data: Dict[str, Any] = Field(default_factory=dict)

    @property
    def full_name(self) -> str:
        return f"{self.domain}.{self.service}"

    def to_json(self) -> str:
        return self.model_dump_json()

    @classmethod
    def from_json(cls, data: str) -> "ServiceCall":
        return cls.model_validate_json(data)
