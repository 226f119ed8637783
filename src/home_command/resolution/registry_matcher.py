"""
Typo-tolerant resolution of user input against the registry.

One resolver per registry type (entity, area, service, domain), all sharing
the exact -> prefix -> typo -> fuzzy cascade, plus two composite lookups.
"""
from typing import List, Optional

from ..models import Area, Entity, Service
from ..registry import Registry
from .match import MatchResult
from .resolution_policy import ResolutionPolicy
from .semantic_resolver import Candidate


class RegistryMatcher:
    """
    Fuzzy matcher for registry entities and metadata.
    
    Usage:
        matcher = RegistryMatcher()
        result = matcher.find_entity("kitchn light", registry)
        if result.is_single:
            entity = result.match.item
    """
    
    def __init__(self, policy: Optional[ResolutionPolicy] = None):
        """
        :param policy: Tier cascade to use (defaults to all four tiers)
        """
        self._policy = policy or ResolutionPolicy()
    
    def find_entity(self, user_input: str, registry: Registry) -> MatchResult[Entity]:
        """Resolve input to an entity by id, object id, friendly name or alias."""
        queries = _queries(user_input)
        if not queries:
            return MatchResult.none()
        
        candidates = [
            Candidate(
                item=entity,
                exact_keys=[entity.entity_id, entity.object_id, entity.friendly_name or "",
                            *entity.search_names],
                aliases=entity.search_names,
            )
            for entity in registry.entities()
        ]
        return self._policy.resolve(user_input, queries, candidates)
    
    def find_area(self, user_input: str, registry: Registry) -> MatchResult[Area]:
        """Resolve input to an area by id, name or user alias."""
        queries = _queries(user_input)
        if not queries:
            return MatchResult.none()
        
        candidates = [
            Candidate(
                item=area,
                exact_keys=[area.area_id, area.name, *area.aliases, *area.search_names],
                aliases=area.search_names,
            )
            for area in registry.areas()
        ]
        return self._policy.resolve(user_input, queries, candidates)
    
    def find_service(
        self,
        user_input: str,
        registry: Registry,
        domain: Optional[str] = None,
    ) -> MatchResult[Service]:
        """
        Resolve input to a service.
        
        ``light.turn_on`` is matched against full service names. A bare
        ``turn_on`` is matched against service names only; with a ``domain``
        filter an exact bare hit must belong to that domain, and ambiguous
        results list that domain's services first.
        
        :param user_input: ``service`` or ``domain.service``
        :param registry: Registry to search
        :param domain: Optional domain the caller already knows about
        :return: MatchResult of services
        """
        queries = _queries(user_input)
        if not queries:
            return MatchResult.none()
        
        qualified = "." in queries[0]
        if qualified:
            domain_filter = queries[0].split(".", 1)[0]
        else:
            domain_filter = domain.lower() if domain else None
        
        candidates = []
        for service in registry.services():
            in_domain = domain_filter is None or service.domain.lower() == domain_filter
            if qualified:
                exact_keys = [service.full_name]
                aliases = [service.full_name]
            else:
                exact_keys = [service.service] if in_domain else []
                aliases = [service.service]
            candidates.append(Candidate(item=service, exact_keys=exact_keys, aliases=aliases))
        
        preferred = None
        if domain_filter is not None:
            preferred = lambda service: service.domain.lower() == domain_filter
        
        return self._policy.resolve(user_input, queries, candidates, preferred=preferred)
    
    def find_domain(self, user_input: str, registry: Registry) -> MatchResult[str]:
        """Resolve input to a known domain; plural forms ("lights") are accepted."""
        queries = _queries(user_input)
        if not queries:
            return MatchResult.none()
        
        singular = to_singular(queries[0])
        if singular and singular not in queries:
            queries.append(singular)
        
        candidates = [
            Candidate(item=domain, exact_keys=[domain], aliases=[domain])
            for domain in registry.domains()
            if domain
        ]
        return self._policy.resolve(user_input, queries, candidates)
    
    def find_entities_in_domain(self, domain: str, registry: Registry) -> List[Entity]:
        """Entities of a domain, retrying with the singular form ("lights")."""
        domain_lower = domain.lower()
        singular = to_singular(domain_lower)
        
        entities = registry.entities_in_domain(domain_lower)
        if not entities and domain_lower != singular:
            entities = registry.entities_in_domain(singular)
        
        return entities
    
    def find_entities_in_area(self, area_input: str, registry: Registry) -> List[Entity]:
        """Entities of the area that best matches the input."""
        area_match = self.find_area(area_input, registry).best()
        if area_match is None:
            return []
        return registry.entities_in_area(area_match.item.area_id)


def to_singular(word: str) -> str:
    """Convert a plural word to singular (basic English rules)."""
    if word.endswith("ies") and len(word) > 3:
        return word[:-3] + "y"
    if word.endswith("es") and len(word) > 2:
        return word[:-2]
    if word.endswith("s") and len(word) > 1:
        return word[:-1]
    return word


def format_correction(original: str, corrected: str) -> str:
    """Show a correction as ``original -> corrected`` (or just the value if unchanged)."""
    if original.lower() == corrected.lower():
        return corrected
    return f"{original} -> {corrected}"


def _queries(user_input: str) -> List[str]:
    query = user_input.strip().lower()
    return [query] if query else []
