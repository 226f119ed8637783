"""
Action vocabulary: trigger words mapped to services.

Plain data built once at import; lookup is a linear scan where the first
entry whose triggers contain the word wins.
"""
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Optional


@dataclass(frozen=True)
class ActionMapping:
    """
    One action verb family.
    
    Attributes:
        trigger_words: Words that trigger this action
        default_service: Service to call (domain comes from the target)
        domain_overrides: Domain-specific service names
        infers_domain: False when the action implies a domain of its own (dim -> light)
    """
    trigger_words: FrozenSet[str]
    default_service: str
    domain_overrides: Dict[str, str] = field(default_factory=dict)
    infers_domain: bool = True
    
    def service_for_domain(self, domain: str) -> str:
        return self.domain_overrides.get(domain, self.default_service)


ACTION_MAPPINGS: List[ActionMapping] = [
    ActionMapping(
        trigger_words=frozenset({"on", "turn_on", "enable", "activate", "start"}),
        default_service="turn_on",
    ),
    ActionMapping(
        trigger_words=frozenset({"off", "turn_off", "disable", "deactivate", "stop", "kill"}),
        default_service="turn_off",
    ),
    ActionMapping(
        trigger_words=frozenset({"toggle", "switch", "flip"}),
        default_service="toggle",
    ),
    ActionMapping(
        trigger_words=frozenset({"open", "unlock"}),
        default_service="open_cover",
        domain_overrides={"cover": "open_cover", "lock": "unlock", "valve": "open_valve"},
    ),
    ActionMapping(
        trigger_words=frozenset({"close", "shut", "lock"}),
        default_service="close_cover",
        domain_overrides={"cover": "close_cover", "lock": "lock", "valve": "close_valve"},
    ),
    # Dim / brighten only make sense for lights
    ActionMapping(
        trigger_words=frozenset({"dim", "lower", "decrease", "reduce"}),
        default_service="turn_on",
        infers_domain=False,
    ),
    ActionMapping(
        trigger_words=frozenset({"brighten", "raise", "increase", "brighter"}),
        default_service="turn_on",
        infers_domain=False,
    ),
    ActionMapping(
        trigger_words=frozenset({"set"}),
        default_service="turn_on",
    ),
    ActionMapping(
        trigger_words=frozenset({"volume_up", "louder", "volume up"}),
        default_service="volume_up",
        domain_overrides={"media_player": "volume_up"},
        infers_domain=False,
    ),
    ActionMapping(
        trigger_words=frozenset({"volume_down", "quieter", "softer", "volume down"}),
        default_service="volume_down",
        domain_overrides={"media_player": "volume_down"},
        infers_domain=False,
    ),
    ActionMapping(
        trigger_words=frozenset({"volume_set", "volume"}),
        default_service="volume_set",
        domain_overrides={"media_player": "volume_set"},
        infers_domain=False,
    ),
    ActionMapping(
        trigger_words=frozenset({"mute", "silence"}),
        default_service="volume_mute",
        domain_overrides={"media_player": "volume_mute"},
        infers_domain=False,
    ),
    ActionMapping(
        trigger_words=frozenset({"unmute"}),
        default_service="volume_mute",
        domain_overrides={"media_player": "volume_mute"},
        infers_domain=False,
    ),
]


def find_action(word: str) -> Optional[ActionMapping]:
    """
    Find the action triggered by a word (case-insensitive).
    
    :param word: Token from the command
    :return: First matching ActionMapping, or None
    """
    word_lower = word.lower()
    for mapping in ACTION_MAPPINGS:
        if word_lower in mapping.trigger_words:
            return mapping
    return None


def mapping_for_service(service: str) -> Optional[ActionMapping]:
    """First mapping whose default service is ``service``."""
    for mapping in ACTION_MAPPINGS:
        if mapping.default_service == service:
            return mapping
    return None
