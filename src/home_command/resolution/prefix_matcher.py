"""
Prefix matching tier.
"""
from typing import List, Sequence, TypeVar

from .match import Match
from .semantic_resolver import Candidate, MatchStrategy

T = TypeVar("T")


class PrefixMatcher(MatchStrategy):
    """
    Input is the start of an alias ("kit" -> "kitchen light").
    
    Each candidate qualifies on its first matching alias; matches keep
    discovery order.
    """
    
    name = "prefix"
    
    def collect(
        self,
        user_input: str,
        queries: Sequence[str],
        candidates: Sequence[Candidate[T]],
    ) -> List[Match[T]]:
        matches = []
        
        for candidate in candidates:
            for alias in candidate.aliases:
                alias_lower = alias.lower()
                if any(alias_lower.startswith(query) for query in queries):
                    matches.append(Match.prefix(candidate.item, user_input, alias))
                    break
        
        return matches
