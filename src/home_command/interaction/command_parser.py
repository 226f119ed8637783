"""
Natural-language command parser.

Parses human-friendly commands into structured actions:
- "turn on kitchen light" -> turn_on for light.kitchen
- "set bedroom temperature to 72" -> turn_on with value=72 for the bedroom climate entity
- "dim living room lights to 50%" -> turn_on with brightness_pct=50
- "call light turn_on kitchen" -> explicit light.turn_on

Word order is flexible: "turn on kitchen light", "kitchen light on" and
"on kitchen light" all parse the same way.
"""
import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ..exceptions import EmptyCommandError
from ..models import Entity
from ..registry import Registry
from ..resolution import Match, MatchType, RegistryMatcher
from ..schemas import ParsedCommand, ParsedTarget
from .action_table import ACTION_MAPPINGS, ActionMapping
from .tokenizer import parse_number, parse_percentage, tokenize

logger = logging.getLogger(__name__)

SERVICE_CALL_KEYWORDS = ("call", "run")

# Domain assumed by actions that do not infer one (dim, brighten)
DEFAULT_DOMAIN = "light"

# Blast-radius limits for under-specified commands
MAX_AREA_TARGETS = 10
MAX_DOMAIN_TARGETS = 10
MAX_DOMAIN_FALLBACK_ENTITIES = 15
MAX_AMBIGUOUS_TARGETS = 5

AMBIGUOUS_MIN_CONFIDENCE = 0.5
SINGLE_TOKEN_MIN_CONFIDENCE = 0.7
TYPO_MIN_CONFIDENCE = 0.6
FUZZY_MIN_CONFIDENCE = 0.65

SERVICE_CALL_CONFIDENCE = 0.8

MULTIPLE_MATCHES_NOTE = "Multiple matches found"


class CommandParser:
    """
    Natural-language parser over a registry snapshot.
    
    Stateless: every call to ``parse`` builds a fresh ParsedCommand, so one
    parser can be shared freely.
    
    Usage:
        parser = CommandParser()
        parsed = parser.parse("dim kitchen lights to 50%", registry)
        call = parsed.to_service_call()
    """
    
    def __init__(
        self,
        matcher: Optional[RegistryMatcher] = None,
        actions: Optional[Sequence[ActionMapping]] = None,
    ):
        """
        :param matcher: Registry matcher (defaults to the full tier cascade)
        :param actions: Action vocabulary (defaults to ACTION_MAPPINGS)
        """
        self._matcher = matcher or RegistryMatcher()
        self._actions = list(actions) if actions is not None else ACTION_MAPPINGS
    
    def parse(self, text: str, registry: Registry) -> ParsedCommand:
        """
        Parse a natural-language command.
        
        :param text: Raw user input
        :param registry: Registry snapshot to resolve names against
        :return: ParsedCommand (targets may be empty; see ``notes``)
        :raises: EmptyCommandError if the input has no meaningful words
        """
        text = text.strip()
        if not text:
            raise EmptyCommandError("Empty command")
        
        tokens = tokenize(text)
        if not tokens:
            raise EmptyCommandError("No tokens in command")
        
        # Explicit form: "call <domain> <service> ..."
        if len(tokens) >= 3 and tokens[0].lower() in SERVICE_CALL_KEYWORDS:
            return self._parse_service_call(text, tokens, registry)
        
        action_mapping, action, rest = self._extract_action(tokens)
        is_volume = _is_volume_action(action)
        logger.debug(f"Action for '{text}': {action} (remaining tokens: {rest})")
        
        targets: List[ParsedTarget] = []
        parameters: Dict[str, Any] = {}
        notes: List[str] = []
        
        # Whole phrase as one entity name first ("living room light")
        name_tokens = [t for t in rest if not _is_numeric(t)]
        if name_tokens:
            match = self._matcher.find_entity(" ".join(name_tokens), registry).match
            if match is not None and _clears_floor(match):
                logger.debug(f"Combined phrase matched {match.item.entity_id} ({match.kind_label})")
                targets.append(_target_from_match(match))
                for token in rest:
                    self._add_parameter(token, parameters, is_volume)
                return self._finish(text, action, targets, parameters, notes, None, None)
        
        # Classify tokens one by one
        domain_hint: Optional[str] = None
        area_hint: Optional[str] = None
        residual: List[str] = []
        
        for token in rest:
            if self._add_parameter(token, parameters, is_volume):
                continue
            
            domain_result = self._matcher.find_domain(token, registry)
            if domain_result.is_single:
                domain_hint = domain_result.match.item
                continue
            
            area_result = self._matcher.find_area(token, registry)
            if area_result.is_single:
                area_hint = area_result.match.item.area_id
                continue
            
            residual.append(token)
        
        # Residual words plus the area ("spots" + "wohnzimmer" -> spots.wohnzimmer)
        if residual and area_hint:
            phrase = " ".join(residual)
            for combined in (f"{phrase} {area_hint}", f"{phrase}_{area_hint}", f"{phrase}.{area_hint}"):
                match = self._matcher.find_entity(combined, registry).match
                if match is not None and _clears_floor(match):
                    logger.debug(f"'{combined}' matched {match.item.entity_id}")
                    targets.append(_target_from_match(match))
                    break
        
        if not targets and residual:
            targets = self._resolve_residual(residual, domain_hint, registry, notes)
        
        if domain_hint is None and action_mapping is not None and not action_mapping.infers_domain:
            domain_hint = DEFAULT_DOMAIN
        
        if not targets and area_hint:
            targets = self._area_targets(area_hint, domain_hint, registry)
        
        if not targets and domain_hint:
            targets = self._domain_fallback_targets(domain_hint, registry, notes)
        
        return self._finish(text, action, targets, parameters, notes, domain_hint, area_hint)
    
    # ----------------------------
    # Action extraction
    # ----------------------------
    def _extract_action(
        self,
        tokens: Sequence[str],
    ) -> Tuple[Optional[ActionMapping], Optional[str], List[str]]:
        """
        Pull the first action out of the token stream.
        
        "turn" right before an action word is dropped, "volume up/down" is
        read as one action. Later action words stay as ordinary tokens.
        """
        mapping: Optional[ActionMapping] = None
        action: Optional[str] = None
        rest: List[str] = []
        
        i = 0
        while i < len(tokens):
            token = tokens[i]
            lower = token.lower()
            next_lower = tokens[i + 1].lower() if i + 1 < len(tokens) else None
            
            if lower == "turn" and next_lower is not None and self._find_action(next_lower):
                i += 1
                continue
            
            if lower == "volume" and next_lower in ("up", "down") and action is None:
                action = f"volume_{next_lower}"
                mapping = self._find_action(action)
                i += 2
                continue
            
            found = self._find_action(token)
            if found is not None and action is None:
                mapping = found
                action = found.default_service
                i += 1
                continue
            
            rest.append(token)
            i += 1
        
        return mapping, action, rest
    
    def _find_action(self, word: str) -> Optional[ActionMapping]:
        word_lower = word.lower()
        for mapping in self._actions:
            if word_lower in mapping.trigger_words:
                return mapping
        return None
    
    # ----------------------------
    # Target resolution
    # ----------------------------
    def _resolve_residual(
        self,
        residual: List[str],
        domain_hint: Optional[str],
        registry: Registry,
        notes: List[str],
    ) -> List[ParsedTarget]:
        """Resolve leftover words as one name, then word by word."""
        result = self._matcher.find_entity(" ".join(residual), registry)
        
        if result.is_single:
            if _clears_floor(result.match):
                return [_target_from_match(result.match)]
        
        elif result.is_multiple:
            matches = list(result.matches)
            if domain_hint:
                matches = [m for m in matches if m.item.domain == domain_hint]
            
            if len(matches) == 1:
                if _clears_floor(matches[0]):
                    return [_target_from_match(matches[0])]
            elif matches:
                picked = [
                    _target_from_match(m)
                    for m in matches[:MAX_AMBIGUOUS_TARGETS]
                    if m.confidence >= AMBIGUOUS_MIN_CONFIDENCE
                ]
                if picked:
                    logger.debug(f"Ambiguous '{' '.join(residual)}': keeping {len(picked)} matches")
                    notes.append(MULTIPLE_MATCHES_NOTE)
                    return picked
        
        # Nothing usable from the whole phrase; try each word alone
        targets: List[ParsedTarget] = []
        seen = set()
        for token in residual:
            match = self._matcher.find_entity(token, registry).match
            if match is None or match.confidence <= SINGLE_TOKEN_MIN_CONFIDENCE:
                continue
            if match.item.entity_id in seen:
                continue
            seen.add(match.item.entity_id)
            targets.append(_target_from_match(match))
        return targets
    
    def _area_targets(
        self,
        area_id: str,
        domain_hint: Optional[str],
        registry: Registry,
    ) -> List[ParsedTarget]:
        entities = self._matcher.find_entities_in_area(area_id, registry)
        if domain_hint:
            entities = [e for e in entities if e.domain == domain_hint]
        
        logger.debug(f"Area fallback '{area_id}': {len(entities)} entities")
        return [
            _target_from_entity(entity, "area_match", area_id)
            for entity in entities[:MAX_AREA_TARGETS]
        ]
    
    def _domain_fallback_targets(
        self,
        domain: str,
        registry: Registry,
        notes: List[str],
    ) -> List[ParsedTarget]:
        """Every entity of the domain, unless the domain is too large to guess."""
        entities = self._matcher.find_entities_in_domain(domain, registry)
        entity_count = len(entities)
        
        if entity_count > MAX_DOMAIN_FALLBACK_ENTITIES:
            logger.warning(
                f"Refusing domain fallback: '{domain}' has {entity_count} entities"
            )
            notes.append(
                f"No specific entity matched. Domain '{domain}' has {entity_count} entities "
                f"- please be more specific."
            )
            return []
        
        return [
            _target_from_entity(entity, "domain_match", domain)
            for entity in entities[:MAX_DOMAIN_TARGETS]
        ]
    
    def _domain_targets(
        self,
        domain: str,
        entities: List[Entity],
        notes: List[str],
    ) -> List[ParsedTarget]:
        """Domain targets for the explicit call path, noting any truncation."""
        if len(entities) > MAX_DOMAIN_TARGETS:
            notes.append(
                f"Domain '{domain}' has {len(entities)} entities, "
                f"targeting the first {MAX_DOMAIN_TARGETS}"
            )
        return [
            _target_from_entity(entity, "domain_match", domain)
            for entity in entities[:MAX_DOMAIN_TARGETS]
        ]
    
    # ----------------------------
    # Explicit service calls
    # ----------------------------
    def _parse_service_call(
        self,
        text: str,
        tokens: Sequence[str],
        registry: Registry,
    ) -> ParsedCommand:
        """
        Parse ``call <domain> <service> [entity words] [parameters]``.
        
        Examples:
            call light turn_on kitchen
            call switch toggle bedroom_fan
            call media_player volume_set tv 30%
        """
        domain_token, service_token = tokens[1], tokens[2]
        
        domain_result = self._matcher.find_domain(domain_token, registry)
        domain = domain_result.match.item if domain_result.is_single else domain_token
        
        action = self._resolve_service_name(domain, service_token, registry)
        is_volume = _is_volume_action(action)
        
        parameters: Dict[str, Any] = {}
        notes: List[str] = []
        entity_tokens: List[str] = []
        for token in tokens[3:]:
            if not self._add_parameter(token, parameters, is_volume):
                entity_tokens.append(token)
        
        targets: List[ParsedTarget] = []
        if entity_tokens:
            result = self._matcher.find_entity(" ".join(entity_tokens), registry)
            if result.is_single:
                targets.append(_target_from_match(result.match))
            elif result.is_multiple:
                in_domain = [m for m in result.matches if m.item.domain == domain]
                if len(in_domain) == 1:
                    targets.append(_target_from_match(in_domain[0]))
                elif in_domain:
                    targets = [_target_from_match(m) for m in in_domain[:MAX_AMBIGUOUS_TARGETS]]
                    notes.append(MULTIPLE_MATCHES_NOTE)
                else:
                    notes.append("No entities found in specified domain")
            else:
                entities = self._matcher.find_entities_in_domain(domain, registry)
                targets = self._domain_targets(domain, entities, notes)
                if not targets:
                    notes.append("No entities found")
        else:
            # Explicit syntax: no blast-radius threshold, only the cap
            entities = self._matcher.find_entities_in_domain(domain, registry)
            targets = self._domain_targets(domain, entities, notes)
        
        if targets:
            scope = f"{len(targets)} entities"
        else:
            scope = "all entities"
        
        logger.debug(f"Explicit service call {domain}.{action}: {len(targets)} targets")
        return ParsedCommand(
            original=text,
            action=action,
            targets=targets,
            parameters=parameters,
            confidence=SERVICE_CALL_CONFIDENCE,
            interpretation=f"{domain}.{action} on {scope}",
            notes=notes,
        )
    
    def _resolve_service_name(self, domain: str, service_token: str, registry: Registry) -> str:
        """Known service (fuzzy), then the domain's service list, then the action table."""
        service_result = self._matcher.find_service(f"{domain}.{service_token}", registry)
        if service_result.is_single:
            return service_result.match.item.service
        
        for name in registry.services_for_domain(domain):
            if name.lower() == service_token.lower():
                return name
        
        mapping = self._find_action(service_token)
        if mapping is not None:
            return mapping.default_service
        
        return service_token
    
    # ----------------------------
    # Parameters, scoring, display
    # ----------------------------
    @staticmethod
    def _add_parameter(token: str, parameters: Dict[str, Any], is_volume: bool) -> bool:
        """Record a numeric token as a parameter; False if it is not numeric."""
        number = parse_number(token)
        if number is not None:
            parameters["value"] = number
            return True
        
        pct = parse_percentage(token)
        if pct is not None:
            parameters["volume_pct" if is_volume else "brightness_pct"] = pct
            return True
        
        return False
    
    def _finish(
        self,
        text: str,
        action: Optional[str],
        targets: List[ParsedTarget],
        parameters: Dict[str, Any],
        notes: List[str],
        domain_hint: Optional[str],
        area_hint: Optional[str],
    ) -> ParsedCommand:
        return ParsedCommand(
            original=text,
            action=action,
            targets=targets,
            parameters=parameters,
            confidence=calculate_confidence(action, targets, parameters, notes),
            interpretation=build_interpretation(action, targets, parameters, domain_hint),
            notes=notes,
            matched_area=area_hint,
        )


def calculate_confidence(
    action: Optional[str],
    targets: List[ParsedTarget],
    parameters: Dict[str, Any],
    notes: List[str],
) -> float:
    """
    Score how complete a parse is.
    
    Action +0.3, targets +0.4 divided by their number, parameters +0.2,
    no notes +0.1.
    """
    score = 0.0
    if action is not None:
        score += 0.3
    if targets:
        score += 0.4 / max(1, len(targets))
    if parameters:
        score += 0.2
    if not notes:
        score += 0.1
    return min(score, 1.0)


def build_interpretation(
    action: Optional[str],
    targets: List[ParsedTarget],
    parameters: Dict[str, Any],
    domain_hint: Optional[str],
) -> str:
    """Human-readable summary, e.g. ``turn_on Kitchen Light brightness_pct=50``."""
    parts = []
    if action is not None:
        parts.append(action)
    
    if targets:
        parts.append(", ".join(t.display_name for t in targets))
    elif domain_hint:
        parts.append(f"all {domain_hint}s")
    
    for key, value in parameters.items():
        parts.append(f"{key}={value}")
    
    return " ".join(parts)


def _clears_floor(match: Match[Entity]) -> bool:
    """Exact and prefix always pass; typo and fuzzy need a minimum confidence."""
    if match.match_type in (MatchType.EXACT, MatchType.PREFIX):
        return True
    if match.match_type == MatchType.TYPO:
        return match.confidence >= TYPO_MIN_CONFIDENCE
    return match.confidence >= FUZZY_MIN_CONFIDENCE


def _target_from_match(match: Match[Entity]) -> ParsedTarget:
    return match.map(
        lambda entity: ParsedTarget(
            entity_id=entity.entity_id,
            friendly_name=entity.friendly_name,
            match_type=match.kind_label,
            matched_input=match.matched_input,
        )
    ).item


def _target_from_entity(entity: Entity, match_type: str, matched_input: str) -> ParsedTarget:
    return ParsedTarget(
        entity_id=entity.entity_id,
        friendly_name=entity.friendly_name,
        match_type=match_type,
        matched_input=matched_input,
    )


def _is_numeric(token: str) -> bool:
    return parse_number(token) is not None or parse_percentage(token) is not None


def _is_volume_action(action: Optional[str]) -> bool:
    return action is not None and "volume" in action
