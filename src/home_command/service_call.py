"""
Service-call builder.

Turns a ParsedCommand into a domain-correct, unit-converted ServiceCall.
"""
import logging
import math
from typing import Any, Dict

from .exceptions import NoTargetsError
from .interaction.action_table import mapping_for_service
from .schemas import ParsedCommand, ServiceCall, ServiceTarget

logger = logging.getLogger(__name__)

# Domains that own their services (turn_on, turn_off, ...)
STANDARD_DOMAINS = frozenset({
    "automation",
    "button",
    "camera",
    "climate",
    "cover",
    "fan",
    "humidifier",
    "input_boolean",
    "light",
    "lock",
    "media_player",
    "remote",
    "scene",
    "script",
    "siren",
    "switch",
    "vacuum",
    "water_heater",
})

# Cross-domain services for helper/group entities without services of their own
FALLBACK_DOMAIN = "homeassistant"

DEFAULT_ACTION = "turn_on"


def to_service_call(parsed: ParsedCommand) -> ServiceCall:
    """
    Convert a parsed command into a service call.
    
    :param parsed: Command with at least one target
    :return: ServiceCall for the first target's domain
    :raises: NoTargetsError if the command has no targets
    """
    if not parsed.targets:
        raise NoTargetsError("No targets specified")
    
    action = parsed.action or DEFAULT_ACTION
    
    parsed_domain = parsed.targets[0].entity_id.split(".", 1)[0]
    if parsed_domain in STANDARD_DOMAINS:
        domain = parsed_domain
    else:
        logger.debug(f"Domain '{parsed_domain}' has no own services, using {FALLBACK_DOMAIN}")
        domain = FALLBACK_DOMAIN
    
    mapping = mapping_for_service(action)
    service = mapping.service_for_domain(domain) if mapping else action
    
    return ServiceCall(
        domain=domain,
        service=service,
        target=ServiceTarget(entity_id=[t.entity_id for t in parsed.targets]),
        data=convert_parameters(parsed.parameters, domain),
    )


def convert_parameters(parameters: Dict[str, Any], domain: str) -> Dict[str, Any]:
    """
    Convert parsed parameters to service data.
    
    - brightness_pct (0-100) -> brightness (0-255)
    - volume_pct (0-100) -> volume_level (0.0-1.0)
    - value -> brightness / temperature / volume_level depending on domain
    """
    data: Dict[str, Any] = {}
    
    for key, value in parameters.items():
        if key == "brightness_pct":
            if _is_int(value):
                data["brightness"] = _percent_to_brightness(value)
        elif key == "volume_pct":
            if _is_int(value):
                data["volume_level"] = _percent_to_volume(value)
        elif key == "value":
            if domain == "light":
                if _is_int(value):
                    # Small values read as a percentage, larger ones as raw brightness
                    data["brightness"] = _percent_to_brightness(value) if value <= 100 else value
            elif domain == "climate":
                data["temperature"] = value
            elif domain == "media_player":
                if _is_int(value):
                    data["volume_level"] = _percent_to_volume(value)
            else:
                data["value"] = value
        else:
            data[key] = value
    
    return data


def _percent_to_brightness(pct: int) -> int:
    return _round_half_away(pct * 255 / 100)


def _percent_to_volume(pct: int) -> float:
    return min(max(pct / 100.0, 0.0), 1.0)


def _round_half_away(value: float) -> int:
    # Half away from zero: 76.5 -> 77, -25.5 -> -26
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
